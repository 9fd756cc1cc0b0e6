# archie/dispatcher.py

import logging
from dataclasses import dataclass
from typing import Callable

from rich.console import Console
from rich.markup import escape

from archie import executor
from archie.commands import (
    Operation,
    build_command,
    build_expanded_command,
    parse_command,
)
from archie.managers import Manager, ManagerDescriptor
from archie.menu import show_help
from archie.utils.errors import handle_errors

logger = logging.getLogger(__name__)

PROGRESS = {
    Operation.UPDATE: "Updating system packages...",
    Operation.CLEAN: "Cleaning package cache...",
    Operation.ORPHANS: "Removing orphaned packages...",
    Operation.INSTALL: "Installing {}...",
    Operation.REMOVE: "Removing {}...",
    Operation.PURGE: "Purging {}...",
}

CANCELLED = {
    Operation.INSTALL: "Installation cancelled",
    Operation.REMOVE: "Removal cancelled",
    Operation.PURGE: "Purge cancelled",
    Operation.SEARCH: "Search cancelled",
}


@dataclass
class Context:
    """Everything an operation needs; tests hand in fakes."""

    manager: ManagerDescriptor
    console: Console
    # prompt text -> line, or None on end of input
    ask: Callable[[str], "str | None"]
    execute: Callable = executor.execute
    query: Callable = executor.capture_lines


class Dispatcher:
    def __init__(self, context: Context):
        if context.manager.ident is Manager.NONE:
            raise ValueError("Dispatcher needs a detected package manager")
        self.context = context

    @property
    def console(self):
        return self.context.console

    @property
    def binary(self):
        return self.context.manager.binary

    def dispatch(self, line: str) -> bool:
        """Run the command for `line`; False means the loop should stop."""
        return self.run(parse_command(line))

    def run(self, op: Operation, target=None) -> bool:
        if op is Operation.QUIT:
            return False
        if op is Operation.HELP:
            show_help(self.console)
        elif op is Operation.INVALID:
            self.console.print("Invalid command. Type 'h' for help.")
        elif op is Operation.ORPHANS:
            self.remove_orphans()
        elif op.takes_argument:
            self.run_with_argument(op, target)
        else:
            self.run_simple(op)
        return True

    @handle_errors
    def run_simple(self, op: Operation):
        command = build_command(self.binary, op.flag)
        self.console.print(f"[cyan]{PROGRESS[op]}[/cyan]")
        return self.context.execute(command.argv)

    @handle_errors
    def run_with_argument(self, op: Operation, target=None):
        arg = target if target is not None else self.context.ask(f"{op.prompt}: ")
        arg = (arg or "").strip()
        if not arg:
            self.console.print(f"[yellow]{CANCELLED[op]}[/yellow]")
            return None

        # raises before anything runs if the name is rejected
        command = build_command(self.binary, op.flag, arg)
        if op in PROGRESS:
            self.console.print(f"[cyan]{PROGRESS[op].format(escape(arg))}[/cyan]")
        return self.context.execute(command.argv)

    @handle_errors
    def remove_orphans(self):
        manager = self.context.manager
        self.console.print(f"[cyan]{PROGRESS[Operation.ORPHANS]}[/cyan]")

        if manager.orphans_flag:
            command = build_command(self.binary, manager.orphans_flag)
        else:
            query = [self.binary, "-Qtdq"]
            names = self.context.query(query)
            if not names:
                self.console.print("[green]No orphaned packages found[/green]")
                return 0
            logger.debug("orphans: %s", names)
            command = build_expanded_command(self.binary, "-Rns", query, names)
        return self.context.execute(command.argv)
