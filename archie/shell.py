# archie/shell.py

import logging
from pathlib import Path

from rich.markup import escape

from archie.completion import PackageCompleter
from archie.utils.cache import read_history, write_history

logger = logging.getLogger(__name__)

HISTORY_FILE = Path(".archie_history")
HISTORY_LIMIT = 100
PROMPT = "archie> "


class PlainReader:
    """Reads lines with no editing, completion or history."""

    def __init__(self, console):
        self.console = console

    def read(self, prompt: str) -> str | None:
        try:
            return self.console.input(prompt)
        except (EOFError, KeyboardInterrupt):
            self.console.print()
            return None

    def close(self):
        pass


class ReadlineReader(PlainReader):
    """
    Line editing through readline, with tab completion of package names and
    a history file that is loaded on start and rewritten by close().
    """

    def __init__(self, console, completer: PackageCompleter,
                 history_path=HISTORY_FILE, limit=HISTORY_LIMIT):
        super().__init__(console)
        # importing readline turns on editing and history for every input()
        import readline

        self.readline = readline
        self.completer = completer
        self.history_path = Path(history_path)
        self.limit = limit
        self.history = read_history(self.history_path)[-limit:]

        self.readline.set_auto_history(False)
        self.readline.clear_history()
        for entry in self.history:
            self.readline.add_history(entry)
        self.readline.set_completer_delims(" \t\n")
        self.readline.set_completer(completer.complete)
        self.readline.parse_and_bind("tab: complete")
        logger.debug("loaded %d history entries from %s", len(self.history), self.history_path)

    def read(self, prompt: str) -> str | None:
        try:
            line = input(prompt)
        except (EOFError, KeyboardInterrupt):
            self.console.print()
            return None
        if line:
            self.readline.add_history(line)
            self.history.append(line)
        return line

    def close(self):
        self.readline.set_completer(None)
        self.completer.close()
        try:
            write_history(self.history_path, self.history, self.limit)
        except OSError as e:
            logger.warning(f"could not save history to {self.history_path}: {e}")


def run_interactive(dispatcher, reader):
    console = dispatcher.console
    console.print("[bold]Archie Package Manager[/bold] - Interactive Mode")
    console.print(f"Using: [green]{escape(dispatcher.context.manager.name)}[/green]")
    console.print("Type 'h' for help, 'q' to quit\n")

    try:
        while True:
            line = reader.read(PROMPT)
            if line is None:
                break
            line = line.rstrip("\n")
            if not line:
                continue
            if not dispatcher.dispatch(line):
                break
            console.print()
    finally:
        reader.close()

    console.print("Goodbye!")
