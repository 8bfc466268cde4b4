"""Command-line interface for Gatekeeper.

This module provides the CLI commands for running and managing
the Gatekeeper service.
"""

import asyncio
from pathlib import Path
from typing import NoReturn

import click

from gatekeeper.core.config import get_settings
from gatekeeper.core.exceptions import NotFoundError
from gatekeeper.core.logging import configure_logging, get_logger

MIGRATIONS_DIR = Path(__file__).resolve().parent / "migrations"


@click.group()
@click.version_option(version="0.1.0", prog_name="Gatekeeper")
def cli() -> None:
    """Gatekeeper - account registration, sign-in and session tokens.

    Settings are read from GATEKEEPER_* environment variables or a .env file.
    """


@cli.command()
@click.option("--host", type=str, default=None, help="Host to bind to (overrides config)")
@click.option("--port", type=int, default=None, help="Port to bind to (overrides config)")
@click.option(
    "--workers",
    type=int,
    default=None,
    help="Number of worker processes (overrides config)",
)
@click.option("--reload", is_flag=True, default=False, help="Enable auto-reload for development")
def serve(host: str | None, port: int | None, workers: int | None, reload: bool) -> None:
    """Start the Gatekeeper server."""
    import uvicorn

    settings = get_settings()

    bind_host = host or settings.host
    bind_port = port or settings.port
    bind_workers = workers or settings.workers

    configure_logging(settings)
    logger = get_logger(__name__)

    if not settings.secret_key:
        logger.error("Refusing to start: GATEKEEPER_SECRET_KEY is not set")
        click.echo("ERROR: GATEKEEPER_SECRET_KEY must be set.", err=True)
        raise SystemExit(1)

    logger.info(
        "Starting Gatekeeper server",
        host=bind_host,
        port=bind_port,
        workers=bind_workers,
        reload=reload,
        environment=settings.environment,
    )

    uvicorn.run(
        "gatekeeper.infrastructure.api.app:create_app",
        factory=True,
        host=bind_host,
        port=bind_port,
        workers=1 if reload else bind_workers,
        reload=reload,
        log_level=settings.log_level.lower(),
        access_log=True,
    )


@cli.command()
@click.option("--force", is_flag=True, help="Skip confirmation prompt")
def init_db(force: bool) -> None:
    """Create tables and seed default roles.

    Use this only in development. In production, use `migrate` instead.
    """
    from gatekeeper.infrastructure.persistence.database import (
        get_db_manager,
        init_database,
    )

    settings = get_settings()
    configure_logging(settings)

    if settings.is_production and not force:
        click.echo(
            "ERROR: Running in production mode. Use migrations instead of init-db.",
            err=True,
        )
        raise SystemExit(1)

    if not force:
        click.confirm(
            "This will create all database tables. Continue?",
            abort=True,
            default=False,
        )

    async def initialize() -> None:
        db = get_db_manager()
        try:
            await init_database(db)
            click.echo("Database initialized successfully.")
        finally:
            await db.disconnect()

    asyncio.run(initialize())


@cli.command()
@click.option("--revision", type=str, default="head", help="Target revision")
def migrate(revision: str) -> None:
    """Apply database migrations, then seed the configured default roles."""
    from alembic import command
    from alembic.config import Config

    from gatekeeper.infrastructure.persistence.database import DatabaseManager, seed_roles

    settings = get_settings()
    configure_logging(settings)

    config = Config()
    config.set_main_option("script_location", str(MIGRATIONS_DIR))
    config.set_main_option("sqlalchemy.url", settings.database_url)
    command.upgrade(config, revision)
    click.echo(f"Database upgraded to {revision}.")

    async def seed() -> None:
        db = DatabaseManager(settings)
        try:
            await seed_roles(db, settings.default_roles)
        finally:
            await db.disconnect()

    asyncio.run(seed())
    click.echo(f"Seeded roles: {', '.join(settings.default_roles)}.")


@cli.command()
@click.option("--email", type=str, required=True, help="Email of the account")
@click.option("--role", "role_name", type=str, default=None, help="Role to grant (default: admin role)")
def grant_role(email: str, role_name: str | None) -> None:
    """Grant a role to an existing account."""
    from gatekeeper.infrastructure.persistence.database import get_db_manager
    from gatekeeper.infrastructure.persistence.repositories import AccountRepository

    settings = get_settings()
    configure_logging(settings)
    logger = get_logger(__name__)
    role_name = role_name or settings.admin_role_name

    async def grant() -> None:
        db = get_db_manager()
        try:
            async with db.session() as session:
                repo = AccountRepository(session)
                account = await repo.get_by_email(email)
                if account is None:
                    raise NotFoundError(explanation=f"No account with email '{email}'")
                created = await repo.grant_role(account.id, role_name)
            if created:
                click.echo(f"Granted {role_name} to {email}.")
                logger.info("Role granted via CLI", account_id=account.id, role=role_name)
            else:
                click.echo(f"{email} already holds {role_name}.")
        except NotFoundError as e:
            click.echo(f"Error: {e.explanation}", err=True)
            raise SystemExit(1)
        finally:
            await db.disconnect()

    asyncio.run(grant())


@cli.command()
def info() -> None:
    """Display Gatekeeper configuration."""
    settings = get_settings()

    click.echo(f"""
Gatekeeper v{settings.app_version}
{'=' * 40}

Configuration:
  Environment:  {settings.environment}
  Debug:        {settings.debug}
  API Prefix:   {settings.api_prefix}

Server:
  Host:         {settings.host}
  Port:         {settings.port}
  Workers:      {settings.workers}

Database:
  URL:          {settings.database_url}
  Echo:         {settings.db_echo}

Security:
  Signing Key:  {'set' if settings.secret_key else 'MISSING'}
  Token Expire: {settings.access_token_expire_minutes} minutes
  Password:     {settings.password_min_length}-{settings.password_max_length} characters
  Admin Role:   {settings.admin_role_name}

Logging:
  Level:        {settings.log_level}
  Format:       {settings.log_format}
""")


def main() -> NoReturn:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
