"""Source file discovery with glob-style inclusion and exclusion.

Walks a source tree and returns the files whose extension is
documented, skipping hidden paths and anything matching an exclusion
pattern such as ``**/node_modules/**``.
"""

import fnmatch
import logging
from pathlib import Path
from typing import Iterable

logger = logging.getLogger(__name__)


def matches_pattern(path: str, pattern: str) -> bool:
    """Check whether a relative POSIX path matches a glob pattern.

    Supports:
    - Basic globs: *.py, test_*.py
    - Directory prefix: node_modules/**
    - Directory anywhere: **/dist/**
    - File name anywhere: **/*.spec.*

    Args:
        path: Path relative to the scan root, using ``/`` separators.
        pattern: Glob pattern where ``**`` spans any number of segments.

    Returns:
        True if the path matches the pattern.
    """
    if "**" not in pattern:
        return fnmatch.fnmatch(path, pattern)

    path_parts = [p for p in path.split("/") if p]
    pattern_parts = [p for p in pattern.split("/") if p]
    return _match_parts(path_parts, pattern_parts)


def _match_parts(path_parts: list[str], pattern_parts: list[str]) -> bool:
    """Recursively match path segments against pattern segments."""
    if not pattern_parts:
        return not path_parts

    if not path_parts:
        return all(p == "**" for p in pattern_parts)

    head, tail = pattern_parts[0], pattern_parts[1:]

    if head == "**":
        # ** consumes zero or more segments
        return any(
            _match_parts(path_parts[i:], tail) for i in range(len(path_parts) + 1)
        )

    if fnmatch.fnmatchcase(path_parts[0], head):
        return _match_parts(path_parts[1:], tail)
    return False


def is_excluded(path: str, exclude_patterns: Iterable[str]) -> bool:
    """Check whether a path matches any exclusion pattern.

    Args:
        path: Path relative to the scan root.
        exclude_patterns: Glob patterns to test against.

    Returns:
        True if at least one pattern matches.
    """
    return any(matches_pattern(path, pattern) for pattern in exclude_patterns)


def find_source_files(
    root: str,
    extensions: Iterable[str],
    exclude_patterns: Iterable[str] = (),
) -> list[str]:
    """Find all documentable source files under a directory.

    Hidden files and files inside hidden directories are never
    returned.

    Args:
        root: Directory to scan.
        extensions: File suffixes to include, with the leading dot.
        exclude_patterns: Glob patterns of paths to leave out.

    Returns:
        Sorted list of POSIX paths relative to ``root``.
    """
    root_path = Path(root)
    wanted = {ext.lower() for ext in extensions}
    patterns = list(exclude_patterns)

    logger.debug(
        "Searching %s for extensions %s excluding %s",
        root_path,
        sorted(wanted),
        patterns,
    )

    files = []
    for candidate in root_path.rglob("*"):
        if not candidate.is_file():
            continue
        rel = candidate.relative_to(root_path).as_posix()
        if any(part.startswith(".") for part in rel.split("/")):
            continue
        if candidate.suffix.lower() not in wanted:
            continue
        if is_excluded(rel, patterns):
            continue
        files.append(rel)

    files.sort()
    logger.info("Total source files found: %d", len(files))
    return files
