# archie/executor.py

import subprocess
import logging

from archie.utils.errors import Interrupted, LaunchError

logger = logging.getLogger(__name__)


def execute(argv, cwd=None) -> int:
    """
    Run `argv` with the caller's stdin/stdout/stderr and return its exit status.

    Blocks until the child exits. Ctrl-C reaches the child through the
    terminal's process group; we keep waiting for it instead of bailing out.
    """
    argv = list(argv)
    logger.debug("exec: %s (cwd=%s)", argv, cwd)
    try:
        proc = subprocess.Popen(argv, cwd=cwd)
    except OSError as e:
        raise LaunchError(f"Could not start {argv[0]}: {e.strerror or e}") from e

    while True:
        try:
            code = proc.wait()
            break
        except KeyboardInterrupt:
            continue
    logger.debug("exit status %d: %s", code, argv[0])
    return code


def capture_lines(argv) -> list[str]:
    """
    Run a query command and return its non-empty output lines.

    The exit status is ignored; `pacman -Qtdq` exits 1 when it has nothing
    to report.
    """
    argv = list(argv)
    try:
        proc = subprocess.run(
            argv,
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            text=True,
            errors="replace",
        )
    except OSError as e:
        raise LaunchError(f"Could not start {argv[0]}: {e.strerror or e}") from e
    except KeyboardInterrupt:
        # run() has already killed the child
        raise Interrupted(f"Interrupted while running {argv[0]}") from None
    return [l.strip() for l in proc.stdout.splitlines() if l.strip()]
