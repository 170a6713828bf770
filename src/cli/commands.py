"""CLI commands for the AI Documentation Generator.

Provides the Click-based command group 'docgen' with subcommands for
generating per-file documentation and synchronizing a fork with its
upstream repository.
"""

import logging
from typing import Optional

import click

from src import __version__
from src.generators.doc_gen import DocumentationGenerator
from src.generators.llm_client import LLMClient
from src.generators.template_manager import DOC_TYPE_TEMPLATES
from src.sync.repo_sync import sync_repository
from src.utils.config import AppConfig, load_config
from src.utils.logging import setup_logging

logger = logging.getLogger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="docgen")
@click.option(
    "--config",
    "config_path",
    type=click.Path(),
    default=None,
    help="Path to a YAML config file.",
)
@click.pass_context
def docgen(ctx: click.Context, config_path: Optional[str]) -> None:
    """AI Documentation Generator: mirror source files as LLM-written docs."""
    # Console logging first so config warnings are not lost
    setup_logging()
    config = load_config(config_path)
    setup_logging(
        level=config.logging.level,
        log_format=config.logging.format,
        log_file=config.logging.file,
    )
    ctx.obj = config


@docgen.command()
@click.argument("root", type=click.Path(exists=True, file_okay=False), default=".")
@click.option(
    "--doc-type",
    type=click.Choice(["all", *DOC_TYPE_TEMPLATES]),
    default=None,
    help="Documentation type (overrides DOC_TYPE).",
)
@click.option(
    "--force-all",
    is_flag=True,
    default=False,
    help="Regenerate documentation for every file.",
)
@click.option("--docs-dir", type=click.Path(), default=None, help="Output directory.")
@click.option(
    "--dry-run",
    is_flag=True,
    help="Show which files would be documented without calling the API.",
)
@click.pass_obj
def generate(
    config: AppConfig,
    root: str,
    doc_type: Optional[str],
    force_all: bool,
    docs_dir: Optional[str],
    dry_run: bool,
) -> None:
    """Generate documentation for changed or undocumented files.

    Each stale source file under ROOT is sent to the LLM and the
    returned Markdown is written to the mirrored documentation tree,
    followed by a summary report.
    """
    if doc_type:
        config.generation.doc_type = doc_type
    if force_all:
        config.generation.force_all = True
    if docs_dir:
        config.output.docs_dir = docs_dir

    generator = DocumentationGenerator(LLMClient(config=config.api), config, root=root)
    try:
        report = generator.run(dry_run=dry_run)
    except Exception as e:
        logger.exception("Fatal error")
        click.echo(f"Fatal error: {e}", err=True)
        raise SystemExit(1) from e

    click.echo(f"Found {report.total_files} source files")
    click.echo(f"Files needing documentation: {report.pending_files}")
    if dry_run:
        click.echo("Dry run complete. No API calls made.")
        return
    if report.results:
        click.echo(f"Successful: {len(report.successful)}/{len(report.results)}")
    if report.summary_path:
        click.echo(f"Summary written to {report.summary_path}")


@docgen.command()
@click.argument("repo", type=click.Path(exists=True, file_okay=False), default=".")
@click.option("--upstream", default=None, help="Remote to pull changes from.")
@click.option("--origin", default=None, help="Remote to push to.")
@click.option("--branch", default=None, help="Branch to synchronize.")
@click.pass_obj
def sync(
    config: AppConfig,
    repo: str,
    upstream: Optional[str],
    origin: Optional[str],
    branch: Optional[str],
) -> None:
    """Synchronize a fork with its upstream remote.

    Runs git fetch, merge and push in order. Errors are reported
    but never fail the command.
    """
    upstream = upstream or config.sync.upstream_remote
    origin = origin or config.sync.origin_remote
    branch = branch or config.sync.branch

    if sync_repository(repo, upstream=upstream, origin=origin, branch=branch):
        click.echo(f"Synchronized {branch} with {upstream}/{branch}")
    else:
        click.echo("Error syncing repository; see log for details")
