"""
Shared test fixtures.
"""

import io
import sys

import pytest
from rich.console import Console

from archie.dispatcher import Context
from archie.managers import Manager, describe


class FakeRunner:
    """Stands in for archie.executor: records argv instead of running it."""

    def __init__(self, status=0, orphans=()):
        self.status = status
        self.orphans = list(orphans)
        self.calls = []
        self.queries = []

    def execute(self, argv, cwd=None):
        self.calls.append(list(argv))
        return self.status

    def query(self, argv):
        self.queries.append(list(argv))
        return list(self.orphans)


def lister(*lines):
    """argv for a subprocess that prints `lines`, one per line."""
    text = "".join(f"{l}\n" for l in lines)
    return [sys.executable, "-c", "import sys; sys.stdout.write(sys.argv[1])", text]


@pytest.fixture
def console() -> Console:
    return Console(file=io.StringIO(), width=120, color_system=None, force_terminal=False)


@pytest.fixture
def output(console):
    return lambda: console.file.getvalue()


@pytest.fixture
def runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def pacman():
    return describe(Manager.PACMAN)


@pytest.fixture
def make_context(console, runner, pacman):
    def factory(answers=(), manager=None):
        pending = list(answers)

        def ask(prompt):
            return pending.pop(0) if pending else None

        return Context(
            manager=manager or pacman,
            console=console,
            ask=ask,
            execute=runner.execute,
            query=runner.query,
        )

    return factory


@pytest.fixture
def scripted_input(monkeypatch):
    """Feed lines to builtins.input; EOFError once they run out."""

    def feed(*lines):
        pending = list(lines)

        def fake_input(prompt=""):
            if not pending:
                raise EOFError
            return pending.pop(0)

        monkeypatch.setattr("builtins.input", fake_input)

    return feed


