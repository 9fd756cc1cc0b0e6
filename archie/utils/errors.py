import functools
import logging
import sys

from rich.console import Console
from rich.markup import escape

logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")

logger = logging.getLogger("archie")
console = Console()


class ArchieError(Exception):
    """Base class for errors that abort a single operation."""


class InvalidPackageName(ArchieError):
    pass


class CommandTooLong(ArchieError):
    pass


class LaunchError(ArchieError):
    """The program could not be started at all."""


class Interrupted(ArchieError):
    pass


def handle_errors(func):
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except SystemExit:
            raise
        except ArchieError as e:
            # operation-level failure, the caller keeps going
            logger.debug(f"{func.__name__} ▶ {e}")
            out = getattr(args[0], "console", None) if args else None
            (out or console).print(f"[bold red]Error:[/] {escape(str(e))}")
            return None
        except Exception as e:
            logger.error(f"{func.__name__} ▶ {e}")
            print(f"[!] {func.__name__} failed: {e}")
            sys.exit(1)

    return wrapper
