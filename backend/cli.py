"""
Pricing API CLI.

Command-line interface for common operations: running the server,
creating tables, issuing development tokens and checking configuration.
"""

import json
import sys

import typer
from rich.console import Console
from rich.table import Table

app = typer.Typer(
    name="pricing",
    help="Pricing REST API CLI",
    add_completion=False,
)
console = Console()


# =============================================================================
# Server Commands
# =============================================================================

@app.command()
def serve(
    host: str = typer.Option("0.0.0.0", help="Interface to bind"),
    port: int = typer.Option(None, help="Port (defaults to REST_API_PORT)"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
):
    """Run the REST API with uvicorn."""
    import uvicorn

    from shared.config.settings import settings

    port = port or settings.rest_api_port
    console.print(f"[blue]Starting REST API on {host}:{port}[/blue]")
    uvicorn.run("rest_api.main:app", host=host, port=port, reload=reload)


# =============================================================================
# Database Commands
# =============================================================================

@app.command()
def init_db():
    """Create all database tables."""
    from sqlalchemy.exc import SQLAlchemyError

    from rest_api.models import Base
    from shared.infrastructure.db import engine

    console.print(f"[blue]Creating tables on: {engine.url.render_as_string(hide_password=True)}[/blue]")
    try:
        Base.metadata.create_all(bind=engine)
    except SQLAlchemyError as e:
        console.print(f"[red]✗ Table creation failed: {e}[/red]")
        raise typer.Exit(1)

    table = Table(title="Tables")
    table.add_column("Name", style="cyan")
    for name in sorted(Base.metadata.tables):
        table.add_row(name)
    console.print(table)
    console.print("[green]✓ Database ready[/green]")


# =============================================================================
# Auth Commands
# =============================================================================

@app.command()
def issue_token(
    subject: str = typer.Option("dev-user", "--sub", help="Token subject (user id)"),
    resource: list[str] = typer.Option(
        ["*"], "--resource", "-r", help="Resource to grant on (repeatable, '*' for all)"
    ),
    entitlement: list[str] = typer.Option(
        ["Create", "Read", "Update", "Delete"],
        "--entitlement",
        "-e",
        help="Entitlement to grant (repeatable)",
    ),
    ttl: int = typer.Option(None, help="Lifetime in seconds (defaults to settings)"),
):
    """Print a signed bearer token with the given entitlements."""
    from shared.config.constants import Entitlement
    from shared.security.auth import sign_jwt

    valid = {e.value.lower(): e.value for e in Entitlement}
    unknown = [e for e in entitlement if e.lower() not in valid]
    if unknown:
        console.print(f"[red]Unknown entitlement(s): {', '.join(unknown)}[/red]")
        raise typer.Exit(1)

    granted = [valid[e.lower()] for e in entitlement]
    claims = {"sub": subject, "entitlements": {r: granted for r in resource}}
    token = sign_jwt(claims, ttl_seconds=ttl)

    console.print_json(json.dumps(claims))
    typer.echo(token)


# =============================================================================
# Configuration Commands
# =============================================================================

@app.command()
def check_config():
    """Show configuration problems that would block a production start."""
    from shared.config.settings import settings

    table = Table(title="Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("environment", settings.environment)
    table.add_row("debug", str(settings.debug))
    table.add_row("database_url", settings.database_url.split("@")[-1])
    table.add_row("allowed_origins", settings.allowed_origins or "(localhost defaults)")
    table.add_row("rest_api_port", str(settings.rest_api_port))
    console.print(table)

    errors = settings.validate_production_secrets()
    if not errors:
        console.print("[green]✓ No configuration problems[/green]")
        return

    for error in errors:
        console.print(f"[red]✗ {error}[/red]")
    raise typer.Exit(1)


@app.command()
def version():
    """Show version information."""
    table = Table(title="Pricing API Version")
    table.add_column("Component", style="cyan")
    table.add_column("Version", style="green")

    table.add_row("API", "1.0.0")
    table.add_row("Python", sys.version.split()[0])

    console.print(table)


if __name__ == "__main__":
    app()
