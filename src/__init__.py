"""AI Documentation Generator.

Scans a source tree, sends each changed or undocumented file to a
chat-completion API, and mirrors the returned Markdown into a
documentation directory.
"""

__version__ = "0.1.0"
