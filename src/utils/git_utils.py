"""Git integration utilities.

Wraps the git command line for change detection between two revisions
and for the remote operations used by the sync helper.
"""

import logging
import subprocess
from typing import Optional

logger = logging.getLogger(__name__)


def run_git(args: list[str], repo_path: Optional[str] = None) -> subprocess.CompletedProcess:
    """Run a git command and capture its output.

    Args:
        args: Arguments passed after ``git``.
        repo_path: Working directory for the command. Defaults to the
            current directory.

    Returns:
        The completed process with text stdout and stderr.

    Raises:
        subprocess.CalledProcessError: If git exits with a non-zero status.
        FileNotFoundError: If git is not installed.
    """
    logger.debug("Running git %s", " ".join(args))
    return subprocess.run(
        ["git", *args],
        cwd=repo_path,
        capture_output=True,
        text=True,
        check=True,
    )


def get_changed_files(
    repo_path: Optional[str] = None,
    base_ref: str = "HEAD~1",
    head_ref: str = "HEAD",
) -> set[str]:
    """Get the files changed between two revisions.

    A repository with a single commit has no ``HEAD~1``; that case, a
    directory that is not a repository, and a missing git binary all
    yield an empty set so every file falls back to the missing-docs check.

    Output is limited to ``repo_path`` and its paths are relative to it,
    so a subdirectory of a repository lines up with discovered paths.

    Args:
        repo_path: Directory to report changes for; may be any directory
            inside a git work tree.
        base_ref: Older revision to diff from.
        head_ref: Newer revision to diff to.

    Returns:
        Set of changed file paths relative to ``repo_path``.
    """
    try:
        result = run_git(
            ["diff", "--name-only", "--relative", base_ref, head_ref], repo_path
        )
    except subprocess.CalledProcessError as e:
        logger.info(
            "Could not get changed files (might be first commit): %s",
            (e.stderr or "").strip(),
        )
        return set()
    except FileNotFoundError:
        logger.warning("Git not found in PATH")
        return set()

    files = {f.strip() for f in result.stdout.splitlines() if f.strip()}
    logger.info(
        "Git diff found %d changed files between %s and %s",
        len(files),
        base_ref,
        head_ref,
    )
    logger.debug("Changed files: %s", sorted(files))
    return files
