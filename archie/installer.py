# archie/installer.py

import logging
import shutil
import tempfile
from pathlib import Path

from rich.markup import escape
from rich.prompt import Prompt

from archie import executor
from archie.utils.errors import LaunchError

logger = logging.getLogger(__name__)

PARU_REPO = "https://aur.archlinux.org/paru.git"


def _confirm(console, question: str) -> bool:
    try:
        answer = Prompt.ask(question, choices=["y", "n"], default="n", console=console)
    except (EOFError, KeyboardInterrupt):
        console.print()
        return False
    return answer == "y"


def install_git(console, execute=executor.execute) -> bool:
    console.print("[yellow]Git is required but not installed.[/yellow]")
    if not _confirm(console, "Install git?"):
        return False
    console.print("[cyan]Installing git...[/cyan]")
    return execute(["sudo", "pacman", "-S", "--needed", "git"]) == 0


def install_aur_helper(console, execute=executor.execute, which=shutil.which) -> bool:
    """
    Offer to build and install paru from the AUR.

    Returns True only when every step exited 0. The caller re-runs
    detection afterwards.
    """
    if not _confirm(console, "Install paru AUR helper?"):
        return False

    if not which("git") and not install_git(console, execute):
        console.print("[red]❌ Cannot install AUR helper without git[/red]")
        return False

    console.print("[cyan]Installing paru...[/cyan]")
    try:
        with tempfile.TemporaryDirectory(prefix="archie-") as tmp:
            clone = Path(tmp) / "paru"
            if execute(["git", "clone", PARU_REPO, str(clone)]) != 0:
                console.print("[red]❌ git clone failed[/red]")
                return False
            if execute(["makepkg", "-si", "--noconfirm"], cwd=str(clone)) != 0:
                console.print("[red]❌ makepkg failed[/red]")
                return False
    except LaunchError as e:
        logger.debug("AUR helper install failed: %s", e)
        console.print(f"[red]❌ {escape(str(e))}[/red]")
        return False
    return True
