from typing import Optional, Tuple
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..domain.models import DependencyEntry, PackageInfo
from ..registry.client import RegistryClient

class InfoService:
    """handles fetching and displaying gem information."""

    def __init__(self, registry_client: RegistryClient, console: Optional[Console] = None):
        self.registry_client = registry_client
        self.console = console or Console()

    def show_info(self, package_name: str, show_dependencies: bool = True) -> PackageInfo:
        """
        fetch and display information about a gem.

        args:
            package_name: name of the gem
            show_dependencies: whether to list runtime/development dependencies

        returns:
            the fetched PackageInfo
        """
        with self.console.status(f"Fetching {package_name}..."):
            package = self.registry_client.fetch_package_info(package_name)

        grid = Table.grid(expand=True)
        grid.add_column(style="bold cyan", justify="right")
        grid.add_column(style="white")

        grid.add_row("Name:", package.name)
        grid.add_row("Version:", package.version)
        grid.add_row("Authors:", package.authors)
        grid.add_row("Description:", package.info or "No description provided.")

        if package.licenses:
            grid.add_row("Licenses:", ", ".join(package.licenses))

        grid.add_row("Project:", package.project_uri)
        grid.add_row("Gem:", package.gem_uri)

        # optional links, only when the publisher set them
        for label, uri in (
            ("Homepage:", package.homepage_uri),
            ("Source:", package.source_code_uri),
            ("Docs:", package.documentation_uri),
            ("Wiki:", package.wiki_uri),
            ("Changelog:", package.changelog_uri),
        ):
            if uri:
                grid.add_row(label, uri)

        grid.add_row("SHA256:", package.sha)

        if show_dependencies:
            grid.add_row("Runtime:", self._format_dependencies(package.dependencies.runtime))
            grid.add_row("Development:", self._format_dependencies(package.dependencies.development))

        self.console.print(Panel(grid, title=f"💎 Gem Info: {package.name}", border_style="cyan"))
        return package

    @staticmethod
    def _format_dependencies(entries: Optional[Tuple[DependencyEntry, ...]]) -> str:
        if entries is None:
            return "not provided"
        if not entries:
            return "None"
        return ", ".join(f"{d.name} ({d.requirements})" for d in entries)
