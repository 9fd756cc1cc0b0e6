# archie/menu.py

from rich.panel import Panel
from rich.table import Table

from archie import VERSION
from archie.commands import Operation


def show_version(console):
    console.print(Panel.fit(
        "\n".join([
            f"[bold]Archie Package Manager[/bold] v{VERSION}",
            "A modern package management frontend for Arch Linux",
            "Supporting paru, yay, and pacman",
        ]),
        border_style="cyan"
    ))


def show_help(console):
    table = Table(title="[cyan]Archie Package Manager Commands[/cyan]")
    table.add_column("Key", style="bold magenta", no_wrap=True)
    table.add_column("Command", style="white")
    for op in Operation:
        if op.letter:
            table.add_row(op.letter, op.description)
    console.print(table)
