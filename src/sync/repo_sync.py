"""Repository synchronization helper.

Brings a fork up to date with its upstream remote: fetch upstream,
merge the upstream branch, and push the result to origin.
"""

import logging
import subprocess
from typing import Optional

from src.utils.git_utils import run_git

logger = logging.getLogger(__name__)


def sync_commands(upstream: str, origin: str, branch: str) -> list[list[str]]:
    """Build the git commands run by a sync, in order.

    Args:
        upstream: Name of the remote to pull changes from.
        origin: Name of the remote to push to.
        branch: Branch to synchronize.

    Returns:
        Git argument lists for fetch, merge and push.
    """
    return [
        ["fetch", upstream],
        ["merge", f"{upstream}/{branch}"],
        ["push", origin, branch],
    ]


def sync_repository(
    repo_path: Optional[str] = None,
    upstream: str = "upstream",
    origin: str = "origin",
    branch: str = "main",
) -> bool:
    """Synchronize a repository with its upstream remote.

    Stops at the first failing command. Failures are logged and
    reported through the return value, never raised.

    Args:
        repo_path: Repository working directory.
        upstream: Name of the remote to pull changes from.
        origin: Name of the remote to push to.
        branch: Branch to synchronize.

    Returns:
        True if all three commands succeeded.
    """
    for args in sync_commands(upstream, origin, branch):
        try:
            result = run_git(args, repo_path)
        except subprocess.CalledProcessError as e:
            logger.error(
                "Sync failed at 'git %s': %s",
                " ".join(args),
                (e.stderr or e.stdout or "").strip(),
            )
            return False
        except FileNotFoundError:
            logger.error("Sync failed: git not found in PATH")
            return False
        if result.stdout.strip():
            logger.info("git %s: %s", " ".join(args), result.stdout.strip())

    logger.info("Repository synchronized with %s/%s", upstream, branch)
    return True
