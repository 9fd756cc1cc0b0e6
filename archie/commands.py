# archie/commands.py

import enum
import logging
from dataclasses import dataclass

from archie.utils.errors import CommandTooLong
from archie.validate import check_package_name

logger = logging.getLogger(__name__)

MAX_COMMAND = 2048


class Operation(enum.Enum):
    # letter, flag, argument prompt, menu text
    UPDATE = ("u", "-Syu", None, "Update system packages")
    INSTALL = ("i", "-S", "Package to install", "Install package")
    REMOVE = ("r", "-R", "Package to remove", "Remove package")
    PURGE = ("p", "-Rns", "Package to purge", "Purge package (remove with dependencies)")
    SEARCH = ("s", "-Ss", "Search query", "Search packages")
    CLEAN = ("c", "-Sc", None, "Clean package cache")
    ORPHANS = ("o", None, None, "Remove orphaned packages")
    HELP = ("h", None, None, "Show this help")
    QUIT = ("q", None, None, "Quit")
    INVALID = (None, None, None, "Invalid command")

    def __init__(self, letter, flag, prompt, description):
        self.letter = letter
        self.flag = flag
        self.prompt = prompt
        self.description = description

    @property
    def takes_argument(self) -> bool:
        return self.prompt is not None


LETTERS = {op.letter: op for op in Operation if op.letter}


def parse_command(line: str) -> Operation:
    if not line or len(line) != 1:
        return Operation.INVALID
    return LETTERS.get(line, Operation.INVALID)


@dataclass(frozen=True)
class CommandLine:
    argv: tuple
    text: str

    def __str__(self):
        return self.text


def _check_length(text: str):
    if len(text) > MAX_COMMAND:
        raise CommandTooLong(
            f"Command too long ({len(text)} > {MAX_COMMAND} characters)"
        )


def build_command(binary: str, flag: str, *arguments: str) -> CommandLine:
    """
    Compose `<binary> <flag> [arguments...]`.

    Every argument goes through the package-name validator first. The
    argv splits arguments on whitespace, the same way a shell would have
    split the composed text; nothing is ever handed to a shell.
    """
    argv = [binary, flag]
    for arg in arguments:
        check_package_name(arg)
        argv.extend(arg.split())

    text = " ".join([binary, flag, *arguments])
    _check_length(text)
    logger.debug("composed command: %s", text)
    return CommandLine(tuple(argv), text)


def build_expanded_command(binary: str, flag: str, query, names) -> CommandLine:
    """
    Compose `<binary> <flag> $(<query>)` with the query's output in `names`.

    Each name is validated on its own. The length limit applies to the
    composed text, so a long list of names is fine.
    """
    for name in names:
        check_package_name(name)

    text = f"{binary} {flag} $({' '.join(query)})"
    _check_length(text)
    logger.debug("composed command: %s (%d names)", text, len(names))
    return CommandLine((binary, flag, *names), text)
