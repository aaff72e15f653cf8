"""
CLI tool for SimplyBooks management.

Provides commands for viewing the registered HTTP routes and loading the
fixture data into a database that was not set up with Alembic.
"""

import asyncio

import typer
from fastapi.routing import APIRoute
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from simplybooks import app
from simplybooks.storage.db import async_session, engine
from simplybooks.storage.seed import seed_initial_data

# Initialize Typer app with help text
typer_app = typer.Typer(
    name="simplybooks-cli",
    help="SimplyBooks management CLI",
    add_completion=False,
)
console = Console()


@typer_app.command(name="routes")
def routes():
    """
    Display a table of all registered HTTP routes.

    Example:
        python cli.py routes
    """
    console.print()
    console.print(
        Panel.fit(
            "[bold cyan]Registered HTTP Routes[/bold cyan]",
            border_style="cyan",
        )
    )
    console.print()

    table = Table(
        "Method",
        "Path",
        "Endpoint",
        title="SimplyBooks API",
        show_lines=True,
    )

    api_routes = [route for route in app.routes if isinstance(route, APIRoute)]
    for route in api_routes:
        endpoint = route.endpoint
        table.add_row(
            f"[green]{', '.join(sorted(route.methods))}[/green]",
            route.path,
            f"{endpoint.__module__}.[yellow]{endpoint.__name__}[/yellow]",
        )

    console.print(table)
    console.print()
    console.print(f"[bold]Summary:[/bold] {len(api_routes)} routes registered")


async def _seed() -> tuple[int, int]:
    async with async_session() as session:
        counts = await seed_initial_data(session)
        await session.commit()
    await engine.dispose()
    return counts


@typer_app.command(name="seed")
def seed():
    """
    Insert the fixture authors and books that are missing.

    Safe to run repeatedly; databases migrated with Alembic already
    contain the fixtures.

    Example:
        python cli.py seed
    """
    authors, books = asyncio.run(_seed())
    console.print(
        f"[bold green]Seeded[/bold green] {authors} authors and {books} books"
    )


if __name__ == "__main__":
    typer_app()
