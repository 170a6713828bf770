"""Entry point for the AI Documentation Generator.

Delegates to the Click command group, which loads configuration and
sets up logging for every invocation.
"""

from src.cli.commands import docgen


def main() -> None:
    """Launch the CLI."""
    docgen(prog_name="docgen")


if __name__ == "__main__":
    main()
