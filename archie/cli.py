# archie/cli.py
import sys
import logging
import argparse

from rich.console import Console
from rich.markup import escape

from archie.commands import LETTERS, Operation, parse_command
from archie.completion import PackageCompleter
from archie.dispatcher import Context, Dispatcher
from archie.installer import install_aur_helper
from archie.managers import MANAGERS, Manager, detect
from archie.menu import show_help, show_version
from archie.shell import HISTORY_FILE, PlainReader, ReadlineReader, run_interactive
from archie.utils.osdetect import is_arch_based

logger = logging.getLogger("archie")
console = Console()


class RichParser(argparse.ArgumentParser):
    def error(self, message):
        console.print(f"[bold red]Error:[/] {message}\n")
        self.print_usage()
        sys.exit(2)


def parse_args(argv=None):
    parser = RichParser(
        prog="archie",
        description="Archie: interactive frontend for paru, yay and pacman",
        allow_abbrev=False,
        add_help=False,
    )

    parser.add_argument(
        "-v", "--version", action="store_true", help="Show version and exit"
    )
    parser.add_argument(
        "-h", "--help", action="store_true", help="Show version and command menu"
    )
    parser.add_argument(
        "-e", "--exec", dest="command", metavar="CMD",
        help="Run a single command (u|i|r|p|s|c|o|h|q) and exit",
    )
    parser.add_argument(
        "target", nargs="?", help="Package name or search query for --exec"
    )
    parser.add_argument(
        "--plain", action="store_true",
        help="No line editing, tab completion or history",
    )
    parser.add_argument(
        "--history", default=str(HISTORY_FILE), help="History file location"
    )
    parser.add_argument("--verbose", action="store_true", help="Debug logging")

    args = parser.parse_args(argv)
    if args.target is not None and args.command is None:
        parser.error("a target is only accepted together with --exec")
    return args


def resolve_manager():
    """
    Detect the active manager, offering to install paru when none is found.
    Returns None when there is still nothing to work with.
    """
    manager = detect()
    if manager.ident is not Manager.NONE:
        return manager

    console.print("[bold red]No supported package manager found.[/]")
    console.print(f"Supported managers: {', '.join(m.name for m in MANAGERS)}\n")
    if not install_aur_helper(console):
        console.print("[red]Cannot proceed without a package manager.[/red]")
        return None

    manager = detect()
    if manager.ident is Manager.NONE:
        console.print("[red]❌ Installation failed[/red]")
        return None
    console.print("[green]✔️ Installation successful![/green]\n")
    return manager


def run_single(letter: str, target=None) -> int:
    op = parse_command(letter)
    if op is Operation.INVALID:
        console.print(f"[bold red]Invalid command:[/] {escape(letter)}")
        console.print(f"Valid commands: {'|'.join(LETTERS)}")
        return 1
    if op is Operation.QUIT:
        return 0
    if target is not None and not op.takes_argument:
        logger.warning(f"'{letter}' takes no argument, ignoring {target!r}")
        target = None

    manager = resolve_manager()
    if manager is None:
        return 1

    reader = PlainReader(console)
    dispatcher = Dispatcher(Context(manager, console, ask=reader.read))
    # the manager's own exit status is not passed on
    dispatcher.run(op, target)
    return 0


def main(argv=None) -> int:
    args = parse_args(argv)
    if args.verbose:
        logger.setLevel(logging.DEBUG)

    if args.version:
        show_version(console)
        return 0
    if args.help:
        show_version(console)
        show_help(console)
        return 0

    if not is_arch_based():
        logger.warning("this does not look like an Arch-based system")

    if args.command is not None:
        return run_single(args.command, args.target)

    manager = resolve_manager()
    if manager is None:
        return 1

    if args.plain:
        reader = PlainReader(console)
    else:
        reader = ReadlineReader(
            console, PackageCompleter(manager.binary), history_path=args.history
        )
    run_interactive(Dispatcher(Context(manager, console, ask=reader.read)), reader)
    return 0


if __name__ == "__main__":
    sys.exit(main())
