"""Result records collected during a documentation run."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class FileResult:
    """Outcome of documenting a single source file.

    Attributes:
        file: Source path relative to the scan root.
        doc_path: Written documentation path, set on success.
        success: Whether documentation was written.
        error: Failure or skip message.
        skipped: True when the file was left out by a size threshold.
    """

    file: str
    doc_path: Optional[str] = None
    success: bool = False
    error: Optional[str] = None
    skipped: bool = False


@dataclass
class RunReport:
    """Aggregate outcome of a documentation run.

    Attributes:
        total_files: Number of source files discovered.
        pending_files: Number of files selected for documentation.
        results: Per-file results in processing order.
        summary_path: Location of the written summary, if any.
    """

    total_files: int = 0
    pending_files: int = 0
    results: list[FileResult] = field(default_factory=list)
    summary_path: Optional[str] = None

    @property
    def successful(self) -> list[FileResult]:
        """Results whose documentation was written."""
        return [r for r in self.results if r.success]

    @property
    def failed(self) -> list[FileResult]:
        """Results that failed for a reason other than a size threshold."""
        return [r for r in self.results if not r.success and not r.skipped]

    @property
    def skipped(self) -> list[FileResult]:
        """Results left out by a size threshold."""
        return [r for r in self.results if r.skipped]
