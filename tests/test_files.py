"""Tests for source file discovery and glob matching."""

from pathlib import Path

import pytest

from src.discovery.files import find_source_files, is_excluded, matches_pattern
from src.utils.config import DEFAULT_EXCLUDE_PATTERNS, DEFAULT_EXTENSIONS


class TestMatchesPattern:
    """Tests for gitignore-style pattern matching."""

    @pytest.mark.parametrize(
        "path",
        [
            "node_modules/lib/index.js",
            "web/node_modules/lib/index.js",
        ],
    )
    def test_directory_anywhere(self, path: str) -> None:
        assert matches_pattern(path, "**/node_modules/**")

    def test_directory_name_as_file_prefix_does_not_match(self) -> None:
        assert not matches_pattern("src/node_modules_helper.js", "**/node_modules/**")

    def test_file_name_anywhere(self) -> None:
        assert matches_pattern("app.spec.ts", "**/*.spec.*")
        assert matches_pattern("src/deep/app.test.js", "**/*.test.*")
        assert not matches_pattern("src/contest.js", "**/*.test.*")

    def test_directory_prefix(self) -> None:
        assert matches_pattern("dist/bundle.js", "dist/**")
        assert not matches_pattern("src/dist/bundle.js", "dist/**")

    def test_basic_glob(self) -> None:
        assert matches_pattern("setup.py", "*.py")

    def test_is_excluded(self) -> None:
        assert is_excluded("Documentation/src/a.md", DEFAULT_EXCLUDE_PATTERNS)
        assert not is_excluded("src/a.py", DEFAULT_EXCLUDE_PATTERNS)


class TestFindSourceFiles:
    """Tests for recursive source discovery."""

    @pytest.fixture
    def tree(self, tmp_path: Path) -> Path:
        """Create a small mixed source tree."""
        files = [
            "main.py",
            "src/app.ts",
            "src/app.test.ts",
            "src/readme.txt",
            "scripts/deploy.sh",
            "config/settings.yml",
            "node_modules/pkg/index.js",
            "build/out.js",
            "Documentation/main.md",
            ".github/workflows/ci.yml",
            "src/.hidden.py",
        ]
        for name in files:
            path = tmp_path / name
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text("content\n")
        return tmp_path

    def test_finds_included_files(self, tree: Path) -> None:
        files = find_source_files(
            str(tree), DEFAULT_EXTENSIONS, DEFAULT_EXCLUDE_PATTERNS
        )
        assert files == [
            "config/settings.yml",
            "main.py",
            "scripts/deploy.sh",
            "src/app.ts",
        ]

    def test_hidden_paths_skipped_without_patterns(self, tree: Path) -> None:
        files = find_source_files(str(tree), [".yml", ".py"])
        assert ".github/workflows/ci.yml" not in files
        assert "src/.hidden.py" not in files
        assert "main.py" in files

    def test_extension_filter(self, tree: Path) -> None:
        files = find_source_files(str(tree), [".sh"], DEFAULT_EXCLUDE_PATTERNS)
        assert files == ["scripts/deploy.sh"]

    def test_empty_directory(self, tmp_path: Path) -> None:
        assert find_source_files(str(tmp_path), DEFAULT_EXTENSIONS) == []
