"""Command line entry point for the Context Mesh scope resolver."""

import logging
import sys
from pathlib import Path

import click

from .config import Config
from .exceptions import UsageError
from .formatter import render, render_no_results
from .models import OutputFormat, ResolverRequest
from .resolver import ContextResolver

LOG_FORMAT = "%(levelname)s: %(message)s"


def _attach_stderr_handler(verbose: bool) -> logging.Handler:
    """Send package log records to stderr for the duration of a command."""
    package_logger = logging.getLogger("context_mesh")
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return handler


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("scope", required=False)
@click.option("--hub", type=click.Path(path_type=Path), help="Path to the hub context/ directory")
@click.option(
    "--local",
    "local",
    type=click.Path(path_type=Path),
    help="Path to the local context/ directory (default: ./context)",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat]),
    help='Output format: "bundle" (default) or "list"',
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(scope: str | None, hub: Path | None, local: Path | None, output_format: str | None, verbose: bool):
    """Print the context documents whose ## Scope matches SCOPE.

    SCOPE is the scope to search for (e.g. api/auth, "api/*", "*").

    Examples:
        get-context api/auth

        get-context "api/*" --hub ../context-hub/context

        get-context "*" --format list
    """
    config = Config.from_env()

    try:
        request = ResolverRequest.create(
            query_scope=scope or "",
            hub_root=hub if hub is not None else config.hub_path,
            local_root=local if local is not None else config.local_path,
            output_format=output_format or config.output_format,
        )
    except UsageError as e:
        raise click.UsageError(str(e)) from e

    handler = _attach_stderr_handler(verbose)
    try:
        documents = ContextResolver(config).resolve(request)

        if not documents:
            click.echo(render_no_results(request.query_scope))
            return

        click.echo(render(documents, request.output_format, request.query_scope))
    finally:
        logging.getLogger("context_mesh").removeHandler(handler)


if __name__ == "__main__":
    cli()
