"""Main CLI entry point."""

import typer
from dotenv import load_dotenv
from rich.console import Console

from .report import fetch, report

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(
    name="bugzilla-analysis",
    help="Bugzilla dependency tree reachability and project reports",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()


app.command(name="report", context_settings={"help_option_names": ["-h", "--help"]})(
    report
)
app.command(name="fetch", context_settings={"help_option_names": ["-h", "--help"]})(
    fetch
)


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def version() -> None:
    """Show version information."""
    from bz_analysis import __version__

    console.print(f"Bugzilla Analysis v{__version__}")


if __name__ == "__main__":
    app()
