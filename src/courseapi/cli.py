"""CLI entry point for the course registration service."""

from __future__ import annotations

import os
import sys

import click
import uvicorn

from courseapi import __version__
from courseapi.config import ConfigError, Settings
from courseapi.logging import get_logger, sanitize_for_log, setup_logging
from courseapi.store import Database, seed_database

logger = get_logger("cli")

database_url_option = click.option(
    "--database-url",
    envvar="COURSEAPI_DATABASE_URL",
    default=None,
    help="SQLAlchemy database URL (default: sqlite:///courseapi.db)",
)


def load_settings(**overrides: object) -> Settings:
    """Read settings from the environment and apply CLI overrides."""
    try:
        return Settings.from_env().with_overrides(**overrides)
    except ConfigError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)


@click.group()
@click.version_option(version=__version__)
def main() -> None:
    """Course registration service."""
    pass


@main.command()
@click.option("--host", default=None, help="Interface to bind (default: 0.0.0.0)")
@click.option("--port", type=int, default=None, help="Port to listen on (default: 3000)")
@database_url_option
@click.option("--api-url", default=None, help="Base API URL advertised to the web client")
@click.option("--log-level", default=None, help="Log level (DEBUG, INFO, WARNING, ERROR)")
@click.option("--reload", is_flag=True, help="Restart the server when source files change")
def serve(
    host: str | None,
    port: int | None,
    database_url: str | None,
    api_url: str | None,
    log_level: str | None,
    reload: bool,
) -> None:
    """Run the HTTP API and web client."""
    from courseapi.api.app import create_app  # noqa: PLC0415

    setup_logging(level=log_level)
    settings = load_settings(host=host, port=port, database_url=database_url, api_url=api_url)

    logger.info("Serving on http://%s:%d", settings.host, settings.port)
    if reload:
        # The reloader imports the app in a fresh process that reads settings from the environment
        os.environ.update(settings.to_env())
        uvicorn.run(
            "courseapi.api.app:app",
            host=settings.host,
            port=settings.port,
            reload=True,
            log_level="info",
        )
    else:
        uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_level="info")


@main.command("init-db")
@database_url_option
def init_db(database_url: str | None) -> None:
    """Create the database tables."""
    settings = load_settings(database_url=database_url)
    database = Database(settings.database_url)
    try:
        database.create_tables()
    finally:
        database.close()
    click.echo(f"Initialized {sanitize_for_log(settings.database_url)}")


@main.command()
@database_url_option
def seed(database_url: str | None) -> None:
    """Wipe courses and students and load the fixed seed set."""
    settings = load_settings(database_url=database_url)
    database = Database(settings.database_url)
    try:
        database.create_tables()
        seed_database(database)
    finally:
        database.close()
    click.echo(f"Seeded {sanitize_for_log(settings.database_url)}")


if __name__ == "__main__":
    main()
