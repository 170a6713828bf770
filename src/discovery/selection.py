"""Selection of source files whose documentation is stale.

A file needs documentation when it changed in the latest commit, when
its mirrored Markdown file does not exist yet, or when a full
regeneration is forced.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path, PurePosixPath
from typing import Iterable, Optional

from src.utils.config import DEFAULT_EXTENSIONS

logger = logging.getLogger(__name__)


class Reason(str, Enum):
    """Why a file was selected for documentation."""

    FORCED = "forced"
    CHANGED = "changed"
    MISSING_DOCS = "missing-docs"


@dataclass
class PendingFile:
    """A source file scheduled for documentation.

    Attributes:
        file: Source path relative to the scan root.
        reason: Why the file was selected.
    """

    file: str
    reason: Reason


def doc_path_for(
    file: str,
    docs_dir: str = "Documentation",
    extensions: Optional[Iterable[str]] = None,
) -> Path:
    """Derive the documentation path mirroring a source file.

    The source extension is replaced by ``.md`` when it is one of the
    documented extensions; any other name is kept as is.

    Args:
        file: Source path relative to the scan root.
        docs_dir: Root of the documentation tree.
        extensions: Extensions eligible for substitution.

    Returns:
        Path of the Markdown file inside ``docs_dir``.
    """
    known = {ext.lower() for ext in (extensions or DEFAULT_EXTENSIONS)}
    source = PurePosixPath(file)
    if source.suffix.lower() in known:
        source = source.with_suffix(".md")
    return Path(docs_dir) / Path(*source.parts)


def select_files_needing_docs(
    files: list[str],
    changed: set[str],
    docs_dir: str = "Documentation",
    force_all: bool = False,
    extensions: Optional[Iterable[str]] = None,
) -> list[PendingFile]:
    """Pick the files whose documentation must be (re)generated.

    Args:
        files: All discovered source paths, relative to the scan root.
        changed: Paths reported as changed by git.
        docs_dir: Root of the documentation tree.
        force_all: Select every file regardless of state.
        extensions: Extensions eligible for ``.md`` substitution.

    Returns:
        Pending files in discovery order.
    """
    if force_all:
        logger.info("Force regenerate enabled - processing all files")
        return [PendingFile(file=f, reason=Reason.FORCED) for f in files]

    pending = []
    for file in files:
        if file in changed:
            pending.append(PendingFile(file=file, reason=Reason.CHANGED))
        elif not doc_path_for(file, docs_dir, extensions).exists():
            pending.append(PendingFile(file=file, reason=Reason.MISSING_DOCS))
    return pending


def count_by_reason(pending: list[PendingFile]) -> dict[Reason, int]:
    """Count pending files per selection reason.

    Args:
        pending: Files selected for documentation.

    Returns:
        Mapping of every Reason to its count (zero when absent).
    """
    counts = {reason: 0 for reason in Reason}
    for item in pending:
        counts[item.reason] += 1
    return counts
