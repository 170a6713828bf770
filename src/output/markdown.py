"""Markdown output for generated documentation.

Writes per-file documentation into the mirrored documentation tree and
renders the run summary page with success, failure and skip counts.
"""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from src.generators.results import FileResult

logger = logging.getLogger(__name__)


class MarkdownWriter:
    """Writes documentation files and the summary report.

    All paths are resolved inside ``docs_dir``; the summary lives at
    ``docs_dir/summary_file``.
    """

    def __init__(
        self, docs_dir: str = "Documentation", summary_file: str = "SUMMARY.md"
    ) -> None:
        """Initialize the Markdown writer.

        Args:
            docs_dir: Directory where documentation is written.
            summary_file: File name of the summary report.
        """
        self.docs_dir = Path(docs_dir)
        self.summary_file = summary_file

    def ensure_docs_dir(self) -> Path:
        """Create the documentation directory if needed.

        Returns:
            The documentation directory path.
        """
        self.docs_dir.mkdir(parents=True, exist_ok=True)
        return self.docs_dir

    def write_document(self, doc_path: Path, content: str) -> Path:
        """Write generated documentation, creating parent directories.

        Args:
            doc_path: Destination Markdown file.
            content: Markdown returned by the model.

        Returns:
            Path to the written file.
        """
        doc_path = Path(doc_path)
        doc_path.parent.mkdir(parents=True, exist_ok=True)
        doc_path.write_text(content, encoding="utf-8")
        logger.info("Generated: %s", doc_path)
        return doc_path

    def render_summary(
        self,
        results: list[FileResult],
        generated_at: Optional[datetime] = None,
    ) -> str:
        """Render the summary report as Markdown.

        Args:
            results: Per-file results in processing order.
            generated_at: Timestamp to print. Defaults to now (UTC).

        Returns:
            Markdown string for the summary page.
        """
        timestamp = (generated_at or datetime.now(timezone.utc)).isoformat()
        successful = [r for r in results if r.success]
        failed = [r for r in results if not r.success and not r.skipped]
        skipped = [r for r in results if r.skipped]

        lines = [
            "# Documentation Summary\n",
            f"Generated: {timestamp}\n",
            "## Statistics\n",
            f"- Total files processed: {len(results)}",
            f"- Successfully documented: {len(successful)}",
            f"- Failed: {len(failed)}",
            f"- Skipped: {len(skipped)}\n",
        ]

        if successful:
            lines.append("## Generated Documentation\n")
            lines.extend(f"- {r.doc_path}" for r in successful)
            lines.append("")

        if failed:
            lines.append("## Failed Files\n")
            lines.extend(f"- {r.file}: {r.error}" for r in failed)
            lines.append("")

        if skipped:
            lines.append("## Skipped Files\n")
            lines.extend(f"- {r.file}: {r.error}" for r in skipped)
            lines.append("")

        return "\n".join(lines)

    def write_summary(
        self,
        results: list[FileResult],
        generated_at: Optional[datetime] = None,
    ) -> Path:
        """Write the summary report into the documentation directory.

        Args:
            results: Per-file results in processing order.
            generated_at: Timestamp to print. Defaults to now (UTC).

        Returns:
            Path to the written summary file.
        """
        self.ensure_docs_dir()
        summary_path = self.docs_dir / self.summary_file
        summary_path.write_text(
            self.render_summary(results, generated_at), encoding="utf-8"
        )
        logger.info("Wrote summary: %s (%d results)", summary_path, len(results))
        return summary_path
