"""Main CLI application using Typer."""

import sys

import typer
from rich.console import Console

from switchboard import __version__

app = typer.Typer(
    name="switchboard",
    help="switchboard - in-process event dispatch registries",
    no_args_is_help=True,
)

console = Console()


@app.command()
def version():
    """Show switchboard version."""
    console.print(f"switchboard version {__version__}")


config_app = typer.Typer(help="Inspect and create registry configuration")
app.add_typer(config_app, name="config")


@config_app.command("init")
def config_init(
    config_path: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file (default: ~/.switchboard/switchboard.yaml)",
    ),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing config"),
):
    """Write a config file with default policies."""
    from switchboard.cli.config_cmd import init_command

    init_command(config_path=config_path, force=force)


@config_app.command("show")
def config_show(
    config_path: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file (default: ~/.switchboard/switchboard.yaml)",
    ),
):
    """Validate the config file and show the active policies."""
    from switchboard.cli.config_cmd import show_command

    show_command(config_path=config_path)


def main():
    """Entry point for the CLI."""
    try:
        app()
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user[/yellow]")
        sys.exit(130)
    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
