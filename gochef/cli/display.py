"""Display components for CLI using Rich."""

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from gochef.core.exceptions.errors import AggregateError, GoChefError
from gochef.models.recipe import Recipe

console = Console()
err_console = Console(stderr=True)


def show_success(message: str) -> None:
    """Display a success message."""
    console.print(f"[bold green]✓[/] {escape(message)}", soft_wrap=True)


def show_error(message: str) -> None:
    """Display an error message on stderr."""
    err_console.print(f"[bold red]error:[/] {escape(message)}", soft_wrap=True)


def show_exception(error: GoChefError) -> None:
    """Display a gochef error, listing every cause of aggregated errors."""
    show_error(error.message)
    if isinstance(error, AggregateError):
        for cause in error.errors:
            err_console.print(f"  [red]-[/] {escape(str(cause))}", soft_wrap=True)
    elif error.details:
        for key, value in error.details.items():
            err_console.print(f"  [dim]{escape(key)}:[/] {escape(str(value))}", soft_wrap=True)


def show_recipe_summary(recipe: Recipe) -> None:
    """Display the import groups of a recipe as a table."""
    table = Table(title="Import groups", show_lines=False)
    table.add_column("Build constraints", style="cyan")
    table.add_column("Packages", justify="right", style="green")

    for group in recipe.import_groups:
        table.add_row(escape(group.build_constraints or "(none)"), str(len(group.packages)))

    console.print(table)
