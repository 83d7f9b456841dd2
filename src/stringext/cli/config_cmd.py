"""Configuration CLI commands."""

from __future__ import annotations

from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from stringext.core.config import load_config

console = Console()
config_app = typer.Typer(name="config", help="Inspect the effective configuration.")


@config_app.command("show")
def show_config(
    path: Optional[str] = typer.Option(None, "--path", "-p", help="YAML file to load instead of config/default.yaml"),
) -> None:
    """Show the effective configuration (YAML defaults + environment)."""
    cfg = load_config(path)

    table = Table(title="stringext configuration")
    table.add_column("Section", style="cyan")
    table.add_column("Key", style="white")
    table.add_column("Value", style="green")

    for section, model in cfg:
        for key, value in model.model_dump().items():
            table.add_row(section, key, escape(repr(value)))

    console.print(table)
