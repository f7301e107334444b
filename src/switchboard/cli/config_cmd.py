"""Config commands - create and inspect switchboard.yaml."""

import logging

import typer
from rich.console import Console
from rich.table import Table

from switchboard.broadcast import BroadcastRegistry
from switchboard.config.loader import ConfigError, load_config, resolve_config_path, save_config
from switchboard.config.schema import LoggingConfig, SwitchboardConfig
from switchboard.keyed import KeyedRegistry

console = Console()


def configure_logging(config: LoggingConfig) -> None:
    """Apply the configured root log level."""
    logging.basicConfig(
        level=getattr(logging, config.level),
        format="[%(asctime)s] %(levelname)s %(name)s | %(message)s",
    )


def init_command(config_path: str | None = None, force: bool = False) -> None:
    """Write a default config file."""
    path = resolve_config_path(config_path)

    if path.exists() and not force:
        console.print(f"[yellow]Config already exists at {path}[/yellow]")
        console.print("Use --force to overwrite")
        raise typer.Exit(code=1)

    written = save_config(SwitchboardConfig(), path)
    console.print(f"[green]✓[/green] Wrote default config to {written}")


def show_command(config_path: str | None = None) -> None:
    """Load, validate and display the active policies."""
    path = resolve_config_path(config_path)

    try:
        config = load_config(path)
    except ConfigError as e:
        console.print(f"[red]✗[/red] {e}")
        raise typer.Exit(code=1) from e

    configure_logging(config.logging)

    keyed = KeyedRegistry.from_config(config.keyed)
    broadcast = BroadcastRegistry.from_config(config.broadcast)

    source = str(path) if path.exists() else f"{path} (not found, using defaults)"

    table = Table(title="switchboard configuration", show_header=True, header_style="bold cyan")
    table.add_column("Setting", style="white")
    table.add_column("Value")
    table.add_row("keyed.duplicate_policy", keyed.duplicate_policy.value)
    table.add_row("broadcast.failure_policy", broadcast.failure_policy.value)
    table.add_row("logging.level", config.logging.level)

    console.print(f"Config: {source}")
    console.print(table)
