import asyncio
import json

from rich.markup import escape
from rich.table import Table
import typer

from labelkit.cli.context import (
    ConsoleNotifier,
    console,
    err_console,
    get_app_settings,
    get_settings,
)
from labelkit.errors import AppError
from labelkit.models import ProjectDefinition
from labelkit.projects import HistoryNavigator, ProjectNotFound, RecentProjectsPage, Resolved
from labelkit.storage import StorageProviderFactory

# Secrets never leave the process through the CLI
_SECRET_FIELDS = {"api_key": True, "source_connection": {"provider_options"}}


async def open_project_command(
    id_or_name: str, cached: bool = False
) -> Resolved | ProjectNotFound | ProjectDefinition:
    """
    Async implementation of project open
    """
    settings = get_settings()
    app_settings = get_app_settings()
    reference = app_settings.find_recent_project(id_or_name)
    if reference is None:
        raise typer.BadParameter(f"No recent project with id or name {id_or_name!r}")

    page = RecentProjectsPage.from_settings(
        app_settings,
        navigator=HistoryNavigator(),
        notifier=ConsoleNotifier(),
        storage_factory=StorageProviderFactory(settings.storage_timeout_seconds),
    )
    if cached:
        return page.open_cached_project(reference)
    return await page.open_project(reference)


app = typer.Typer(help="Recent projects")


@app.command("list")
def list_projects(
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """List recent projects"""
    try:
        app_settings = get_app_settings()
    except AppError as e:
        err_console.print(f"[bold red]Error:[/bold red] {escape(e.message)}")
        raise typer.Exit(code=1) from None

    if json_output:
        payload = [
            {
                "id": r.id,
                "name": r.name,
                "securityToken": r.security_token_name,
                "connection": r.source_connection.name,
            }
            for r in app_settings.recent_projects
        ]
        typer.echo(json.dumps(payload, indent=2))
        return

    table = Table(title="Recent projects")
    table.add_column("ID", style="cyan")
    table.add_column("Name", style="magenta")
    table.add_column("Connection")
    table.add_column("Security token")
    for reference in app_settings.recent_projects:
        table.add_row(
            reference.id,
            reference.name,
            reference.source_connection.name,
            reference.security_token_name,
        )
    console.print(table)


@app.command("open")
def open_project(
    project: str = typer.Argument(..., help="Project id or name"),
    cached: bool = typer.Option(
        False, "--cached", help="Use the recent list entry instead of reading storage"
    ),
    json_output: bool = typer.Option(False, "--json", help="Output the project as JSON"),
):
    """Resolve a recent project and print it"""
    try:
        result = asyncio.run(open_project_command(project, cached=cached))
    except AppError as e:
        err_console.print(f"[bold red]Error:[/bold red] {escape(e.message)}")
        raise typer.Exit(code=1) from None

    if isinstance(result, ProjectNotFound):
        # Already reported by the notifier
        raise typer.Exit(code=1)

    definition = result.project if isinstance(result, Resolved) else result
    if json_output:
        typer.echo(definition.model_dump_json(by_alias=True, indent=2, exclude=_SECRET_FIELDS))
        return

    console.print("[bold green]✓ Project loaded[/bold green]")
    console.print(f"ID: [cyan]{escape(definition.id)}[/cyan]")
    console.print(f"Name: [magenta]{escape(definition.name)}[/magenta]")
    console.print(f"Connection: {escape(definition.source_connection.name)}")
    if isinstance(result, Resolved) and result.used_legacy_name:
        console.print(f"[yellow]Loaded from legacy file {escape(result.file_name)}[/yellow]")
