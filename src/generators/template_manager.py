"""Template manager for loading and rendering Jinja2 prompt templates.

Provides a centralized interface for rendering documentation prompts
from Jinja2 templates stored in the templates/ directory.
"""

import logging
from pathlib import Path
from typing import Any, Optional

from jinja2 import Environment, FileSystemLoader

from src.generators.languages import get_language

logger = logging.getLogger(__name__)

_DEFAULT_TEMPLATES_DIR = Path(__file__).parent.parent.parent / "templates"

# Documentation type -> instruction template
DOC_TYPE_TEMPLATES: dict[str, str] = {
    "api": "api.j2",
    "codeComments": "code_comments.j2",
    "readme": "readme.j2",
    "architecture": "architecture.j2",
}

DEFAULT_DOC_TYPE = "api"


class TemplateManager:
    """Loads and renders Jinja2 prompt templates for documentation generation.

    Templates are loaded from a configurable directory and rendered
    with the file being documented.
    """

    def __init__(self, templates_dir: Optional[str] = None) -> None:
        """Initialize the template manager.

        Args:
            templates_dir: Path to the templates directory. Uses the
                default templates/ directory if not specified.
        """
        self._templates_path = (
            Path(templates_dir) if templates_dir else _DEFAULT_TEMPLATES_DIR
        )

        if not self._templates_path.exists():
            logger.warning("Templates directory not found: %s", self._templates_path)

        self._env = Environment(
            loader=FileSystemLoader(str(self._templates_path)),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        logger.debug("Template manager initialized with: %s", self._templates_path)

    def render_system_prompt(self) -> str:
        """Render the system message sent with every request.

        Returns:
            The system prompt text.
        """
        return self._render("system.j2")

    def render_instructions(self, doc_type: str) -> str:
        """Render the instructions for a documentation type.

        Unknown types, including the default ``all``, use the API
        documentation instructions.

        Args:
            doc_type: One of ``api``, ``codeComments``, ``readme`` or
                ``architecture``.

        Returns:
            Instruction text for the prompt.
        """
        template_name = DOC_TYPE_TEMPLATES.get(
            doc_type, DOC_TYPE_TEMPLATES[DEFAULT_DOC_TYPE]
        )
        return self._render(template_name)

    def render_file_prompt(self, file_path: str, code: str, doc_type: str) -> str:
        """Render the user prompt for documenting one source file.

        Args:
            file_path: Path of the file as shown to the model.
            code: File contents (possibly truncated).
            doc_type: Documentation type selecting the instructions.

        Returns:
            Rendered prompt string ready for LLM submission.
        """
        return self._render(
            "file_prompt.j2",
            file_path=file_path,
            language=get_language(Path(file_path).suffix),
            instructions=self.render_instructions(doc_type),
            code=code,
        )

    def _render(self, template_name: str, **kwargs: Any) -> str:
        """Render a template with the given context variables.

        Args:
            template_name: Name of the template file to render.
            **kwargs: Template context variables.

        Returns:
            Rendered template string.

        Raises:
            TemplateNotFound: If the template file does not exist.
        """
        template = self._env.get_template(template_name)
        rendered = template.render(**kwargs)
        logger.debug("Rendered template %s (%d chars)", template_name, len(rendered))
        return rendered
