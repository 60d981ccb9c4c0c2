"""CLI interface for flatwiki."""

import logging
import sys
from pathlib import Path

import click
from jinja2 import TemplateError

from flatwiki.app_keys import templates_key
from flatwiki.config import Config


@click.group()
def cli() -> None:
    """flatwiki - a personal wiki kept in plain text files."""


@cli.command()
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover flatwiki.toml)",
)
@click.option(
    "--pages-dir",
    "-d",
    type=click.Path(exists=True, path_type=Path, file_okay=False),
    default=None,
    help="Directory holding page files (overrides config)",
)
@click.option(
    "--templates-dir",
    type=click.Path(exists=True, path_type=Path, file_okay=False),
    default=None,
    help="Directory with view.html and edit.html templates (overrides config)",
)
@click.option(
    "--host",
    default=None,
    help="Host to bind to (overrides config)",
)
@click.option(
    "--port",
    "-p",
    type=int,
    default=None,
    help="Port to bind to (overrides config)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable debug logging",
)
def serve(
    config_path: Path | None,
    pages_dir: Path | None,
    templates_dir: Path | None,
    host: str | None,
    port: int | None,
    verbose: bool,
) -> None:
    """Start the wiki server."""
    from flatwiki.server import create_app, run_server

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = Config.load(config_path).with_overrides(
            host=host,
            port=port,
            pages_dir=pages_dir,
            templates_dir=templates_dir,
        )
        # Parse templates before binding the port; a broken template is fatal.
        app = create_app(config)
    except (FileNotFoundError, ValueError, TemplateError) as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)

    click.echo(f"Starting server on {config.server.host}:{config.server.port}")
    click.echo(f"Pages directory: {config.pages.pages_dir}")
    loaded_templates_dir = app[templates_key].templates_dir
    if loaded_templates_dir is not None:
        click.echo(f"Templates directory: {loaded_templates_dir}")
    else:
        click.echo("Templates: bundled")

    run_server(config, app)


if __name__ == "__main__":
    cli()
