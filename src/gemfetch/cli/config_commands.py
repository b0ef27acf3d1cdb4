import typer
from rich.console import Console

from ..config import get_registry_url, set_registry_url, reset_registry_url, DEFAULT_REGISTRY_URL
from ..domain.errors import UrlError
from ..registry.client import RegistryClient

app = typer.Typer()
console = Console()


@app.command("show")
def show_config():
    """show the registry URL gemfetch talks to."""
    url = get_registry_url()
    suffix = " [dim](default)[/dim]" if url == DEFAULT_REGISTRY_URL else ""
    console.print(f"Registry URL: {url}{suffix}")


@app.command("set")
def set_config(url: str):
    """
    point gemfetch at a different registry.

    the URL must be the base of the gems endpoint, e.g.
    https://rubygems.org/api/v1/gems/
    """
    try:
        RegistryClient(url).close()
    except UrlError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    try:
        set_registry_url(url)
    except RuntimeError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    console.print(f"[green]✓[/green] Registry URL set to {url}")


@app.command("reset")
def reset_config():
    """go back to the default registry."""
    try:
        reset_registry_url()
    except RuntimeError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    console.print(f"[green]✓[/green] Registry URL reset to {DEFAULT_REGISTRY_URL}")
