"""
Command line entry point: run the API server or dump its schema.
"""

from pathlib import Path

import click
import uvicorn

from userql import __version__
from userql.config import settings
from userql.logging import configure_logging, get_logger

logger = get_logger(__name__)

APP_IMPORT_PATH = "userql.api.app:app"
LOG_LEVELS = ["debug", "info", "warning", "error"]


@click.group()
@click.version_option(version=__version__, prog_name="userql")
def cli() -> None:
    """userql - read-only GraphQL API over the user directory."""


@cli.command()
@click.option("--host", default=settings.api_host, show_default=True, help="Interface to bind.")
@click.option("--port", default=settings.api_port, show_default=True, type=int, help="Port to bind.")
@click.option(
    "--reload/--no-reload",
    default=settings.api_reload,
    show_default=True,
    help="Restart the server when source files change.",
)
@click.option(
    "--workers",
    default=1,
    show_default=True,
    type=click.IntRange(min=1),
    help="Number of worker processes.",
)
@click.option(
    "--log-level",
    default=settings.log_level.lower(),
    show_default=True,
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
)
def serve(host: str, port: int, reload: bool, workers: int, log_level: str) -> None:
    """Serve the GraphQL API with uvicorn.

    Defaults come from the USERQL_API_* settings.
    """
    log_level = log_level.lower()
    configure_logging(debug=settings.debug, level=log_level)
    logger.info("Starting userql API server", host=host, port=port, reload=reload, workers=workers)

    try:
        # Reloader and worker processes import the app themselves
        if reload or workers > 1:
            target = APP_IMPORT_PATH
        else:
            from userql.api.app import app as target

        uvicorn.run(
            target,
            host=host,
            port=port,
            reload=reload,
            workers=1 if reload else workers,
            log_level=log_level,
        )
    except Exception as e:
        logger.error("Server startup failed", error=str(e))
        raise click.ClickException(str(e)) from e


@cli.command("export-schema")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the SDL to this file instead of stdout.",
)
def export_schema(output: Path | None) -> None:
    """Print the GraphQL schema in SDL form."""
    from userql.graphql.schema import get_schema_sdl

    sdl = get_schema_sdl() + "\n"

    if output is None:
        click.echo(sdl, nl=False)
        return

    output.write_text(sdl, encoding="utf-8")
    click.echo(f"✓ Schema written to {output}")


def main():
    cli()


if __name__ == "__main__":
    main()
