"""Wobo CLI application using Typer.

This module provides command-line utilities for the Wobo backend:
secret generation, database schema management, a user listing and
the API server.
"""

import asyncio
import secrets

import typer
import uvicorn
from rich.console import Console
from rich.table import Table

from wobo.infrastructure.persistence import (
    build_engine,
    build_session_maker,
    create_tables,
    drop_tables,
)
from wobo_auth import JWTService, PasswordHashingService
from wobo_config.settings import Settings, get_settings
from wobo_identity.application.services import AuthenticationService
from wobo_identity.domain.user import UserProfile
from wobo_identity.infrastructure.persistence.sqlalchemy import (
    UserRepositorySQLAlchemy,
)

app = typer.Typer(
    name="wobo",
    help="Wobo - user account API CLI",
    no_args_is_help=True,
)
console = Console()


# Create secrets subcommand group
secrets_app = typer.Typer(
    name="secrets",
    help="Secret generation utilities",
    no_args_is_help=True,
)
app.add_typer(secrets_app)

db_app = typer.Typer(
    name="db",
    help="Database schema management",
    no_args_is_help=True,
)
app.add_typer(db_app)

users_app = typer.Typer(
    name="users",
    help="Inspect registered users",
    no_args_is_help=True,
)
app.add_typer(users_app)


@secrets_app.command("generate")
def generate_secrets() -> None:
    """Generate secure secrets for Wobo configuration.

    Generates two secrets:
    - JWT_SECRET_KEY: Secret for signing JWT authentication tokens
    - POSTGRES_PASSWORD: Database password

    Copy the output to your .env file.
    """
    console.print("\n[bold green]Wobo Secret Generation[/bold green]")
    console.print("=" * 60)
    console.print(
        "\nGenerated secrets for your [bold].env[/bold] configuration file:\n"
    )

    # 64 bytes of entropy for HS256
    jwt_secret = secrets.token_urlsafe(64)
    console.print(f"[cyan]JWT_SECRET_KEY[/cyan]={jwt_secret}")

    db_password = secrets.token_urlsafe(32)
    console.print(f"[cyan]POSTGRES_PASSWORD[/cyan]={db_password}")

    console.print("\n" + "=" * 60)
    console.print(
        "[yellow]Keep these secrets secure and never commit them "
        "to version control![/yellow]"
    )
    console.print(
        "[dim]Copy the above values to your config/.env (Docker) or "
        "config/.env.dev (local) file.[/dim]\n"
    )


async def _run_schema(settings: Settings, *, drop: bool) -> None:
    engine = build_engine(settings.sqlalchemy_url)
    try:
        if drop:
            await drop_tables(engine)
        else:
            await create_tables(engine)
    finally:
        await engine.dispose()


@db_app.command("init")
def db_init() -> None:
    """Create missing tables in the configured database."""
    asyncio.run(_run_schema(get_settings(), drop=False))
    console.print("[green]Database schema is up to date.[/green]")


@db_app.command("drop")
def db_drop(
    yes: bool = typer.Option(
        False,
        "--yes",
        "-y",
        help="Skip the confirmation prompt",
    ),
) -> None:
    """Drop all tables in the configured database."""
    if not yes:
        typer.confirm("This deletes every user. Continue?", abort=True)
    asyncio.run(_run_schema(get_settings(), drop=True))
    console.print("[yellow]All tables dropped.[/yellow]")


async def _list_users(settings: Settings) -> list[UserProfile]:
    engine = build_engine(settings.sqlalchemy_url)
    try:
        async with build_session_maker(engine)() as session:
            service = AuthenticationService(
                user_repository=UserRepositorySQLAlchemy(session),
                password_service=PasswordHashingService(rounds=settings.bcrypt_rounds),
                jwt_service=JWTService(
                    secret_key=settings.jwt_secret_key.get_secret_value(),
                    issuer=settings.jwt_issuer,
                    audience=settings.jwt_audience,
                    expire_minutes=settings.jwt_expiry_minutes,
                ),
            )
            return await service.list_all()
    finally:
        await engine.dispose()


@users_app.command("list")
def list_users() -> None:
    """Show all registered users."""
    profiles = asyncio.run(_list_users(get_settings()))

    if not profiles:
        console.print("[dim]No users registered.[/dim]")
        return

    table = Table(title="Users")
    table.add_column("ID", style="dim")
    table.add_column("Name")
    table.add_column("Email", style="cyan")
    table.add_column("Gender")
    table.add_column("Created")

    for profile in profiles:
        table.add_row(
            str(profile.id),
            profile.name,
            profile.email,
            profile.gender.value,
            profile.created_at.strftime("%Y-%m-%d %H:%M"),
        )

    console.print(table)


@app.command("serve")
def serve(
    host: str | None = typer.Option(None, help="Bind address (default: API_HOST)"),
    port: int | None = typer.Option(None, help="Port (default: API_PORT)"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the HTTP API with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "wobo.presentation.api.app:create_app",
        factory=True,
        host=host or settings.api_host,
        port=port or settings.api_port,
        reload=reload,
    )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
