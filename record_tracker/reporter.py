from __future__ import annotations

from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table

from record_tracker.config import Settings


def print_settings(settings: Settings, console: Optional[Console] = None) -> None:
    """
    Render the effective configuration as a rich table.

    Environment variable names are shown next to each value so overrides are
    easy to spot.
    """
    console = console or Console()

    table = Table(title="Record Tracker Settings", box=box.ROUNDED)
    table.add_column("Setting", style="cyan", no_wrap=True)
    table.add_column("Env", style="dim", no_wrap=True)
    table.add_column("Value", style="green")

    for name, field in type(settings).model_fields.items():
        env_name = field.alias or name.upper()
        table.add_row(name, env_name, repr(getattr(settings, name)))

    console.print(table)


__all__ = ["print_settings"]
