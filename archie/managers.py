# archie/managers.py

import enum
import logging
import shutil
from dataclasses import dataclass

logger = logging.getLogger(__name__)


class Manager(enum.Enum):
    NONE = "none"
    PARU = "paru"
    YAY = "yay"
    PACMAN = "pacman"


@dataclass(frozen=True)
class ManagerDescriptor:
    ident: Manager
    binary: str
    name: str
    # flag that removes orphans in one call; None means query + -Rns
    orphans_flag: str | None = None


NONE = ManagerDescriptor(Manager.NONE, "", "none")

# probe order
MANAGERS = (
    ManagerDescriptor(Manager.PARU, "paru", "paru", "-c"),
    ManagerDescriptor(Manager.YAY, "yay", "yay", "-Yc"),
    ManagerDescriptor(Manager.PACMAN, "pacman", "pacman"),
)


def detect(which=shutil.which) -> ManagerDescriptor:
    """
    Return the first manager whose binary resolves on PATH, else NONE.
    """
    for desc in MANAGERS:
        if which(desc.binary):
            logger.debug("detected package manager: %s", desc.name)
            return desc
    logger.debug("no supported package manager on PATH")
    return NONE


def describe(ident) -> ManagerDescriptor | None:
    for desc in MANAGERS:
        if desc.ident is ident:
            return desc
    return None


def binary_name(ident) -> str:
    desc = describe(ident)
    return desc.binary if desc else "unknown"


def display_name(ident) -> str:
    desc = describe(ident)
    return desc.name if desc else "unknown"
