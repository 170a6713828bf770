"""Mapping from file extensions to fenced-code language names."""

_LANGUAGES: dict[str, str] = {
    ".js": "javascript",
    ".ts": "typescript",
    ".py": "python",
    ".java": "java",
    ".cs": "csharp",
    ".go": "go",
    ".rs": "rust",
    ".cpp": "cpp",
    ".c": "c",
    ".rb": "ruby",
    ".php": "php",
    ".ps1": "powershell",
    ".psm1": "powershell",
    ".sh": "bash",
    ".bash": "bash",
    ".kt": "kotlin",
    ".swift": "swift",
    ".yml": "yaml",
    ".yaml": "yaml",
}


def get_language(ext: str) -> str:
    """Return the language name for a file extension.

    Args:
        ext: File suffix including the leading dot, e.g. ``.py``.

    Returns:
        The language name, or ``plaintext`` for unknown extensions.
    """
    return _LANGUAGES.get(ext.lower(), "plaintext")
