"""Main CLI entry point."""

import typer
from dotenv import load_dotenv
from rich.console import Console

from .populate import populate, show

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(
    name="ado-backlog",
    help="Populate Azure DevOps with the AWS infrastructure planning backlog",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()


app.command(name="populate", context_settings={"help_option_names": ["-h", "--help"]})(
    populate
)
app.command(name="show", context_settings={"help_option_names": ["-h", "--help"]})(
    show
)


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def version() -> None:
    """Show version information."""
    from ado_backlog import __version__

    console.print(f"ADO Backlog v{__version__}")


if __name__ == "__main__":
    app()
