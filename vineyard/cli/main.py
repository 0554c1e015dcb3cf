"""Main CLI entry point."""

import typer
from dotenv import load_dotenv
from rich.console import Console

from .plan import plan, show_config

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(
    name="vineyard",
    help="Configure and validate remapping runs",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()


app.command(name="plan", context_settings={"help_option_names": ["-h", "--help"]})(
    plan
)
app.command(
    name="show-config", context_settings={"help_option_names": ["-h", "--help"]}
)(show_config)


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def version() -> None:
    """Show version information."""
    from vineyard import __version__

    console.print(f"Vineyard v{__version__}")


if __name__ == "__main__":
    app()
