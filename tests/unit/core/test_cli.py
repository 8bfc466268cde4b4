"""Tests for the command-line interface."""

import asyncio
from pathlib import Path

import pytest
from click.testing import CliRunner

import gatekeeper
from gatekeeper.cli import MIGRATIONS_DIR, cli
from gatekeeper.core.config import Settings, get_settings
from gatekeeper.infrastructure.persistence import database
from gatekeeper.infrastructure.persistence.database import DatabaseManager
from gatekeeper.infrastructure.persistence.repositories import AccountRepository


@pytest.fixture
def cli_env(tmp_path, monkeypatch):
    """Point the CLI at a throwaway SQLite file."""
    db_url = f"sqlite+aiosqlite:///{tmp_path / 'cli.db'}"
    monkeypatch.setenv("GATEKEEPER_DATABASE_URL", db_url)
    monkeypatch.setenv("GATEKEEPER_SECRET_KEY", "cli-secret")
    monkeypatch.setenv("GATEKEEPER_ENVIRONMENT", "testing")
    monkeypatch.setenv("GATEKEEPER_LOG_FORMAT", "console")
    monkeypatch.setenv("GATEKEEPER_LOG_LEVEL", "WARNING")
    monkeypatch.setattr(database, "_db_manager", None)
    get_settings.cache_clear()
    yield Settings()
    get_settings.cache_clear()


def run(coro_fn, settings: Settings):
    """Run a coroutine against a fresh manager and dispose of it afterwards."""

    async def runner():
        db = DatabaseManager(settings)
        try:
            async with db.session() as session:
                return await coro_fn(AccountRepository(session))
        finally:
            await db.disconnect()

    return asyncio.run(runner())


def test_info_shows_configuration(cli_env):
    result = CliRunner().invoke(cli, ["info"])

    assert result.exit_code == 0
    assert "Gatekeeper v0.1.0" in result.output
    assert "Signing Key:  set" in result.output
    assert "Admin Role:   ADMIN" in result.output


def test_serve_refuses_to_start_without_secret(cli_env, monkeypatch):
    """Test that the server does not start when no signing key is configured."""
    monkeypatch.setenv("GATEKEEPER_SECRET_KEY", "")
    get_settings.cache_clear()

    result = CliRunner().invoke(cli, ["serve"])

    assert result.exit_code == 1


def test_init_db_then_grant_role(cli_env):
    """Test creating the schema and granting the admin role from the CLI."""
    runner = CliRunner()

    init_result = runner.invoke(cli, ["init-db", "--force"])
    assert init_result.exit_code == 0
    assert "Database initialized successfully." in init_result.output

    async def create(repo):
        return (await repo.create("admin@example.com", "hash")).id

    account_id = run(create, cli_env)

    grant_result = runner.invoke(cli, ["grant-role", "--email", "Admin@Example.com"])
    assert grant_result.exit_code == 0
    assert "Granted ADMIN to Admin@Example.com." in grant_result.output

    async def check(repo):
        return await repo.has_role(account_id, "ADMIN")

    assert run(check, cli_env) is True

    again = runner.invoke(cli, ["grant-role", "--email", "admin@example.com"])
    assert again.exit_code == 0
    assert "already holds ADMIN" in again.output


def test_grant_role_unknown_email(cli_env):
    runner = CliRunner()
    runner.invoke(cli, ["init-db", "--force"])

    result = runner.invoke(cli, ["grant-role", "--email", "nobody@example.com"])

    assert result.exit_code == 1


def test_grant_role_unknown_role(cli_env):
    runner = CliRunner()
    runner.invoke(cli, ["init-db", "--force"])

    async def create(repo):
        await repo.create("alice@example.com", "hash")

    run(create, cli_env)

    result = runner.invoke(cli, ["grant-role", "--email", "alice@example.com", "--role", "AUDITOR"])

    assert result.exit_code == 1


def test_migrate_creates_schema_and_roles(cli_env):
    """Test that the initial migration creates the tables and seeds the roles."""
    result = CliRunner().invoke(cli, ["migrate"])
    assert result.exit_code == 0, result.output
    assert "Database upgraded to head." in result.output

    async def create_and_grant(repo):
        account = await repo.create("alice@example.com", "hash")
        await repo.grant_role(account.id, "ADMIN")
        return await repo.has_role(account.id, "ADMIN"), await repo.has_role(account.id, "CUSTOMER")

    assert run(create_and_grant, cli_env) == (True, False)


def test_migrate_seeds_configured_roles(cli_env, monkeypatch):
    """Test that the roles seeded after migrating come from the settings."""
    monkeypatch.setenv("GATEKEEPER_DEFAULT_ROLES", "ADMIN,CUSTOMER,AUDITOR")
    get_settings.cache_clear()
    settings = Settings()

    result = CliRunner().invoke(cli, ["migrate"])
    assert result.exit_code == 0, result.output
    assert "Seeded roles: ADMIN, CUSTOMER, AUDITOR." in result.output

    async def create_and_grant(repo):
        account = await repo.create("alice@example.com", "hash")
        return await repo.grant_role(account.id, "AUDITOR")

    assert run(create_and_grant, settings) is True


def test_migrate_is_repeatable(cli_env):
    runner = CliRunner()

    assert runner.invoke(cli, ["migrate"]).exit_code == 0
    result = runner.invoke(cli, ["migrate"])

    assert result.exit_code == 0, result.output


def test_migrations_ship_inside_the_package():
    """Test that the migration scripts resolve relative to the installed package."""
    package_dir = Path(gatekeeper.__file__).resolve().parent

    assert MIGRATIONS_DIR.parent == package_dir
    assert (MIGRATIONS_DIR / "env.py").is_file()
    assert list((MIGRATIONS_DIR / "versions").glob("0001_*.py"))
