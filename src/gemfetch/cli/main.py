import logging
import typer
from typing import Optional
from rich.console import Console
from rich.logging import RichHandler

from .. import __version__
from ..config import get_registry_url
from ..domain.errors import GemfetchError, NotFoundError
from ..registry.client import RegistryClient
from ..services.info import InfoService
from .config_commands import app as config_app

app = typer.Typer()
console = Console()
error_console = Console(stderr=True)

logger = logging.getLogger("gemfetch")

# add config subcommand
app.add_typer(config_app, name="config", help="Manage the registry URL")

def setup_logging(verbosity: int):
    """configure the gemfetch logger: 0=WARNING, 1=INFO, 2+=DEBUG."""
    if verbosity <= 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG

    logger.setLevel(level)

    # only add handler if not already configured
    if not logger.handlers:
        handler = RichHandler(
            console=error_console,
            show_time=verbosity >= 2,
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setLevel(level)
        logger.addHandler(handler)
    else:
        for h in logger.handlers:
            h.setLevel(level)

def get_info_service(url: Optional[str] = None) -> InfoService:
    registry_client = RegistryClient(url or get_registry_url())
    return InfoService(registry_client, console)

@app.callback()
def main_callback(
    verbose: int = typer.Option(0, "--verbose", "-v", count=True, help="Increase verbosity (-v info, -vv debug)")
):
    """look up gem metadata on RubyGems.org."""
    setup_logging(verbose)

@app.command()
def info(
    package_name: str,
    deps: bool = typer.Option(True, "--deps/--no-deps", help="Show runtime and development dependencies"),
    url: Optional[str] = typer.Option(None, "--url", help="Registry base URL (overrides config)"),
):
    """
    show information about a gem.
    """
    try:
        info_service = get_info_service(url)
    except GemfetchError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1)

    try:
        info_service.show_info(package_name, show_dependencies=deps)
    except NotFoundError:
        console.print(f"[red]Gem '{package_name}' not found in registry.[/red]")
        raise typer.Exit(code=1)
    except GemfetchError as e:
        console.print(f"[red]Error fetching gem info:[/red] {e}")
        raise typer.Exit(code=1)
    finally:
        info_service.registry_client.close()

@app.command()
def version():
    """show the gemfetch version."""
    console.print(f"gemfetch {__version__}")
