"""CLI for docview."""

import asyncio
import sys
from pathlib import Path

import click
import structlog

from docview.config.logging import configure_logging
from docview.core.exceptions import FetchError, RenderError
from docview.core.models.origin import ReferenceKind

logger = structlog.get_logger(__name__)


def run_async(coro):
    """Run an async function synchronously."""
    return asyncio.run(coro)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
def cli(verbose: bool) -> None:
    """docview: Markdown viewer with origin-aware links."""
    log_level = "DEBUG" if verbose else "INFO"
    configure_logging(log_level=log_level)


@cli.command()
@click.argument("source_url")
def classify(source_url: str) -> None:
    """Show the repository location of a raw document URL."""
    from docview.config.settings import get_settings
    from docview.git.origin import classify_origin

    origin = classify_origin(source_url, get_settings().hosting)
    if origin is None:
        click.echo(f"Unrecognized source URL: {source_url}", err=True)
        sys.exit(1)

    click.echo(f"Owner:      {origin.owner}")
    click.echo(f"Repository: {origin.repo}")
    click.echo(f"Branch:     {origin.branch}")
    click.echo(f"Base path:  {origin.base_path or '(root)'}")


@cli.command()
@click.argument("source_url")
@click.argument("references", nargs=-1, required=True)
@click.option(
    "--kind",
    "-k",
    type=click.Choice([kind.value for kind in ReferenceKind]),
    default=ReferenceKind.PAGE.value,
    help="page for links, raw for images",
)
def resolve(source_url: str, references: tuple[str, ...], kind: str) -> None:
    """Resolve references found in the document at SOURCE_URL.

    Prints one absolute URL per reference, in order.
    """
    from docview.config.settings import get_settings
    from docview.git.url_resolver import ReferenceResolver

    resolver = ReferenceResolver.for_source(source_url, get_settings().hosting)
    for reference in references:
        click.echo(resolver.resolve(reference, ReferenceKind(kind)))


@cli.command()
@click.argument("source_url")
@click.option(
    "--file",
    "-f",
    "file_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Read the document from a local file instead of fetching it",
)
def render(source_url: str, file_path: Path | None) -> None:
    """Render the document at SOURCE_URL to HTML."""
    from docview.services.content import ContentService

    logger.debug("Rendering document", source_url=source_url, local_file=str(file_path or ""))

    local_text = None
    if file_path is not None:
        try:
            local_text = file_path.read_text(encoding="utf-8")
        except UnicodeDecodeError as e:
            click.echo(f"Error: {file_path} is not valid UTF-8 ({e.reason})", err=True)
            sys.exit(1)

    async def _render() -> str:
        service = ContentService()
        try:
            text = local_text
            if text is None:
                text = await service.fetch_text(source_url)
            return service.render(text, source_url)
        finally:
            await service.aclose()

    try:
        html = run_async(_render())
    except (FetchError, RenderError) as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)

    click.echo(html)


@cli.command()
def serve() -> None:
    """Run the HTTP API."""
    from docview.api.main import run

    run()


if __name__ == "__main__":
    cli()
