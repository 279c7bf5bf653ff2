"""profilehub CLI application using Typer.

Maintenance commands that run against the configured storage backend.
"""

import asyncio
from typing import Awaitable, Callable, TypeVar

import typer
from rich.console import Console
from rich.table import Table

from profilehub.application.dtos import SystemStats
from profilehub.domain.account import Account
from profilehub.infrastructure.persistence.factory import create_repository_factory
from profilehub.presentation.container import ServiceContainer
from profilehub_auth import WeakPasswordError
from profilehub_config import get_settings

T = TypeVar("T")

app = typer.Typer(
    name="profilehub",
    help="profilehub - accounts, profiles, settings and files",
    no_args_is_help=True,
)
console = Console()

files_app = typer.Typer(
    name="files",
    help="File maintenance",
    no_args_is_help=True,
)
app.add_typer(files_app)

admin_app = typer.Typer(
    name="admin",
    help="Administration utilities",
    no_args_is_help=True,
)
app.add_typer(admin_app)


async def _with_services(action: Callable[[ServiceContainer], Awaitable[T]]) -> T:
    settings = get_settings()
    factory, engine = await create_repository_factory(settings)
    try:
        return await action(ServiceContainer.build(factory, settings))
    finally:
        if engine is not None:
            await engine.dispose()


@files_app.command("purge-expired")
def purge_expired() -> None:
    """Delete every file whose expiry date has passed."""

    async def _purge(services: ServiceContainer) -> int:
        return await services.files.delete_expired()

    removed = asyncio.run(_with_services(_purge))
    if removed:
        console.print(f"[green]Removed {removed} expired file(s)[/green]")
    else:
        console.print("[dim]No expired files[/dim]")


@admin_app.command("create-initial")
def create_initial_admin(
    email: str = typer.Option(None, help="Defaults to INITIAL_ADMIN_EMAIL"),
    name: str = typer.Option(None, help="Defaults to INITIAL_ADMIN_NAME"),
    password: str = typer.Option(
        ...,
        prompt=True,
        hide_input=True,
        confirmation_prompt=True,
        envvar="INITIAL_ADMIN_PASSWORD",
    ),
) -> None:
    """Create the administrator account unless the email is taken."""
    settings = get_settings()

    async def _create(services: ServiceContainer) -> Account | None:
        return await services.accounts.ensure_initial_admin(
            email=email or settings.initial_admin_email,
            name=name or settings.initial_admin_name,
            password=password,
        )

    try:
        created = asyncio.run(_with_services(_create))
    except WeakPasswordError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=1) from e

    if created is None:
        console.print("[yellow]An account with this email already exists[/yellow]")
        raise typer.Exit(code=1)
    console.print(f"[green]Admin created:[/green] {created.email} ({created.id})")


@admin_app.command("stats")
def show_stats() -> None:
    """Show account, profile and file totals."""

    async def _stats(services: ServiceContainer) -> SystemStats:
        return await services.user_data.get_system_stats()

    stats = asyncio.run(_with_services(_stats))

    table = Table(title="profilehub statistics")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")
    table.add_row("Accounts", str(stats.accounts.total))
    table.add_row("  active", str(stats.accounts.active))
    table.add_row("  inactive", str(stats.accounts.inactive))
    table.add_row("  admins", str(stats.accounts.admins))
    table.add_row("  regular", str(stats.accounts.regular))
    table.add_row("Profiles", str(stats.total_profiles))
    table.add_row("Files", str(stats.total_files))
    console.print(table)


@app.command("serve")
def serve(
    host: str = typer.Option(None, help="Defaults to API_HOST"),
    port: int = typer.Option(None, help="Defaults to API_PORT"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "profilehub.presentation.api.app:create_app",
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
