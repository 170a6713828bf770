"""Tests for the repository sync helper."""

import subprocess
from unittest.mock import MagicMock, patch

from src.sync.repo_sync import sync_commands, sync_repository


class TestSyncCommands:
    """Tests for the command sequence."""

    def test_order(self) -> None:
        assert sync_commands("upstream", "origin", "main") == [
            ["fetch", "upstream"],
            ["merge", "upstream/main"],
            ["push", "origin", "main"],
        ]


class TestSyncRepository:
    """Tests for running the sync."""

    @patch("src.utils.git_utils.subprocess.run")
    def test_runs_three_commands(self, mock_run: MagicMock) -> None:
        mock_run.return_value = MagicMock(stdout="", returncode=0)
        assert sync_repository("/repo", branch="develop") is True

        commands = [c[0][0] for c in mock_run.call_args_list]
        assert commands == [
            ["git", "fetch", "upstream"],
            ["git", "merge", "upstream/develop"],
            ["git", "push", "origin", "develop"],
        ]
        assert all(c[1]["cwd"] == "/repo" for c in mock_run.call_args_list)

    @patch("src.utils.git_utils.subprocess.run")
    def test_stops_at_first_failure(self, mock_run: MagicMock) -> None:
        mock_run.side_effect = [
            MagicMock(stdout="", returncode=0),
            subprocess.CalledProcessError(1, "git", stderr="merge conflict"),
        ]
        assert sync_repository("/repo") is False
        assert mock_run.call_count == 2

    @patch("src.utils.git_utils.subprocess.run")
    def test_missing_git_is_swallowed(self, mock_run: MagicMock) -> None:
        mock_run.side_effect = FileNotFoundError("git")
        assert sync_repository("/repo") is False
