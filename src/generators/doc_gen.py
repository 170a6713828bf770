"""Per-file documentation generation for a source tree.

Discovers source files, selects those whose documentation is stale,
sends each one to the LLM and mirrors the returned Markdown into the
documentation directory, then writes a summary of the run.
"""

import logging
import time
from pathlib import Path, PurePosixPath
from typing import Callable, Optional

from src.discovery.files import find_source_files
from src.discovery.selection import (
    PendingFile,
    Reason,
    count_by_reason,
    doc_path_for,
    select_files_needing_docs,
)
from src.generators.llm_client import LLMClient
from src.generators.results import FileResult, RunReport
from src.generators.template_manager import TemplateManager
from src.output.markdown import MarkdownWriter
from src.utils.config import AppConfig, load_config
from src.utils.git_utils import get_changed_files

logger = logging.getLogger(__name__)


class DocumentationGenerator:
    """Generates one Markdown document per stale source file.

    Files are processed strictly one at a time with a fixed delay
    between consecutive API requests.
    """

    def __init__(
        self,
        llm_client: LLMClient,
        config: Optional[AppConfig] = None,
        root: str = ".",
        template_manager: Optional[TemplateManager] = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """Initialize the documentation generator.

        Args:
            llm_client: The LLM client for API calls.
            config: Application configuration.
            root: Root of the source tree; also the git repository path.
            template_manager: Template manager for prompts.
            sleep: Function used for the delay between requests.
        """
        self.llm = llm_client
        self.config = config or load_config()
        self.root = Path(root)
        self.templates = template_manager or TemplateManager()
        self.writer = MarkdownWriter(
            docs_dir=str(self.root / self.config.output.docs_dir),
            summary_file=self.config.output.summary_file,
        )
        self._sleep = sleep
        self._requests_made = 0

    def discover(self) -> list[str]:
        """Find every documentable file under the root.

        The documentation directory itself is always excluded.

        Returns:
            Sorted source paths relative to the root.
        """
        patterns = list(self.config.discovery.exclude_patterns)
        docs_dir = PurePosixPath(Path(self.config.output.docs_dir).as_posix())
        if not docs_dir.is_absolute():
            patterns.append(f"{docs_dir}/**")
        return find_source_files(
            str(self.root), self.config.discovery.extensions, patterns
        )

    def select(self, files: list[str]) -> list[PendingFile]:
        """Select the files whose documentation must be regenerated.

        Args:
            files: Discovered source paths.

        Returns:
            Pending files with their selection reason.
        """
        generation = self.config.generation
        changed: set[str] = set()
        if not generation.force_all:
            changed = get_changed_files(
                str(self.root), generation.base_ref, generation.head_ref
            )
        return select_files_needing_docs(
            files,
            changed,
            docs_dir=str(self.root / self.config.output.docs_dir),
            force_all=generation.force_all,
            extensions=self.config.discovery.extensions,
        )

    def run(self, dry_run: bool = False) -> RunReport:
        """Run the full documentation pipeline.

        Args:
            dry_run: List the files that would be documented without
                calling the API or writing anything.

        Returns:
            A RunReport with per-file results.

        Raises:
            ValueError: If the API client cannot be configured.
        """
        logger.info("Starting documentation generation")
        logger.info("Documentation type: %s", self.config.generation.doc_type)
        logger.info("Endpoint: %s", "Set" if self.config.api.endpoint else "MISSING")
        logger.info("API Key: %s", "Set" if self.config.api.api_key else "MISSING")
        logger.info("Deployment: %s", self.config.api.deployment)

        if not dry_run:
            self.writer.ensure_docs_dir()

        files = self.discover()
        report = RunReport(total_files=len(files))
        if not files:
            logger.warning("No source files found! Check your file patterns.")
            return report

        pending = self.select(files)
        report.pending_files = len(pending)
        self._log_selection(len(files), pending)

        if not pending:
            logger.info("All files already have up-to-date documentation")
            return report

        if dry_run:
            for item in pending:
                logger.info("Would process: %s (%s)", item.file, item.reason.value)
            return report

        # Fail fast on missing credentials before touching any file
        _ = self.llm.client

        for item in pending:
            report.results.append(self.process_file(item))

        report.summary_path = str(self.writer.write_summary(report.results))
        usage = self.llm.total_usage
        logger.info(
            "Documentation generation complete. Successful: %d/%d "
            "(tokens in: %d, out: %d)",
            len(report.successful),
            len(report.results),
            usage.input_tokens,
            usage.output_tokens,
        )
        return report

    def process_file(self, pending: PendingFile) -> FileResult:
        """Document a single source file.

        Per-file problems are logged and returned as a failed or skipped
        result rather than raised.

        Args:
            pending: The file to document.

        Returns:
            The FileResult for this file.
        """
        file = pending.file
        limits = self.config.limits
        logger.info("Processing: %s (%s)", file, pending.reason.value)

        try:
            content = (self.root / file).read_text(
                encoding="utf-8", errors="replace"
            )
            size = len(content)
            logger.info("  File size: %d characters", size)

            if size < limits.min_chars:
                message = f"Skipped (too small: {size} chars)"
                logger.info("  %s", message)
                return FileResult(file=file, error=message, skipped=True)

            if size > limits.max_chars:
                message = (
                    f"Skipped (too large: {size} chars, max is {limits.max_chars})"
                )
                logger.info("  %s", message)
                return FileResult(file=file, error=message, skipped=True)

            if size > limits.truncate_chars:
                logger.warning(
                    "  Large file detected. Processing first %d characters",
                    limits.truncate_chars,
                )
                content = content[: limits.truncate_chars]

            documentation = self._request_documentation(file, content)
            if not documentation:
                logger.error("  No documentation returned from API")
                return FileResult(file=file, error="No documentation generated")

            doc_path = doc_path_for(
                file, self.config.output.docs_dir, self.config.discovery.extensions
            )
            self.writer.write_document(self.root / doc_path, documentation)
            return FileResult(file=file, doc_path=doc_path.as_posix(), success=True)
        except Exception as e:
            logger.error("  Error processing %s: %s", file, e)
            return FileResult(file=file, error=str(e))

    def _request_documentation(self, file: str, content: str) -> Optional[str]:
        """Send one file to the LLM, waiting out the inter-request delay."""
        if self._requests_made:
            logger.debug(
                "Waiting %.1f seconds before next request",
                self.config.api.request_delay,
            )
            self._sleep(self.config.api.request_delay)
        self._requests_made += 1

        prompt = self.templates.render_file_prompt(
            file, content, self.config.generation.doc_type
        )
        result = self.llm.generate(
            prompt, system=self.templates.render_system_prompt()
        )
        return result.content

    def _log_selection(self, total: int, pending: list[PendingFile]) -> None:
        counts = count_by_reason(pending)
        logger.info("Processing summary:")
        logger.info("  Total source files: %d", total)
        logger.info("  Files needing documentation: %d", len(pending))
        logger.info("  Files skipped (already documented): %d", total - len(pending))
        logger.info("  - Changed files: %d", counts[Reason.CHANGED])
        logger.info("  - Missing documentation: %d", counts[Reason.MISSING_DOCS])
        if counts[Reason.FORCED]:
            logger.info("  - Forced: %d", counts[Reason.FORCED])
