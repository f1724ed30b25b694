"""
CLI tool for the bookstore API.

Provides commands for running the server, listing the registered HTTP
routes and creating the database tables without Alembic.
"""

import asyncio

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from sqlalchemy.engine import make_url
from starlette.routing import Route

# Initialize Typer app with help text
typer_app = typer.Typer(
    name="bookstore-cli",
    help="Bookstore API Management CLI - Run the server and inspect routes",
    add_completion=False,
)
console = Console()


@typer_app.command(name="serve")
def serve(
    host: str | None = typer.Option(
        None, "--host", help="Bind address (default: HOST setting)"
    ),
    port: int | None = typer.Option(
        None, "--port", "-p", help="Bind port (default: PORT setting)"
    ),
    reload: bool = typer.Option(
        False, "--reload", help="Restart on code changes"
    ),
):
    """
    Run the API with uvicorn.

    Example:
        python cli.py serve
        python cli.py serve --port 8080 --reload
    """
    import uvicorn

    from bookstore.settings import app_settings
    from bookstore.uvicorn_filters import uvicorn_log_config

    uvicorn.run(
        "bookstore:app",
        host=host or app_settings.HOST,
        port=port or app_settings.PORT,
        reload=reload,
        log_config=uvicorn_log_config(),
    )


@typer_app.command(name="routes")
def routes():
    """
    Display a table of all registered HTTP routes.

    Example:
        python cli.py routes
    """
    from bookstore import app

    console.print()
    console.print(
        Panel.fit(
            "[bold cyan]Registered HTTP Routes[/bold cyan]",
            border_style="cyan",
        )
    )
    console.print()

    table = Table(title="HTTP Routes", show_lines=True)
    table.add_column("Methods")
    table.add_column("Path", no_wrap=True)
    table.add_column("Handler")

    for route in app.routes:
        if not isinstance(route, Route):
            continue
        methods = ", ".join(sorted(route.methods or []))
        handler = route.endpoint
        table.add_row(
            f"[green]{methods}[/green]",
            route.path,
            f"{handler.__module__}.[yellow]{handler.__name__}[/yellow]",
        )

    console.print(table)
    console.print()


@typer_app.command(name="init-db")
def init_db():
    """
    Create all tables on the configured database.

    Intended for local development and SQLite; use `alembic upgrade head`
    for PostgreSQL deployments.

    Example:
        python cli.py init-db
    """
    from bookstore.settings import app_settings
    from bookstore.storage.db import create_db_and_tables

    asyncio.run(create_db_and_tables())
    url = make_url(app_settings.DATABASE_URL).render_as_string(
        hide_password=True
    )
    console.print(
        Panel.fit(
            f"[green]✓ Tables created[/green]\n\n{url}",
            border_style="green",
            title="Success",
        )
    )


if __name__ == "__main__":
    typer_app()
