# archie/completion.py

import logging
import subprocess

logger = logging.getLogger(__name__)


def _well_formed(name: str) -> bool:
    # one package name per line, no embedded whitespace
    return bool(name) and name.split() == [name]


class CompletionStream:
    """
    Lazily stream package names starting with `prefix` from `command`.

    The list subprocess is started on the first `next_match()` call and
    read one line at a time. The stream is finite and cannot be restarted:
    once it returns None it keeps returning None. A malformed line ends
    the stream early.
    """

    def __init__(self, prefix: str, command):
        self.prefix = prefix
        self.command = list(command)
        self.returned = []
        self._proc = None
        self._done = False

    @property
    def closed(self) -> bool:
        return self._done

    def _open(self):
        logger.debug("completion session for %r: %s", self.prefix, self.command)
        try:
            self._proc = subprocess.Popen(
                self.command,
                stdout=subprocess.PIPE,
                stderr=subprocess.DEVNULL,
                text=True,
                errors="replace",
            )
        except OSError as e:
            logger.debug("could not list packages: %s", e)
            self._done = True

    def next_match(self) -> str | None:
        if self._done:
            return None
        if self._proc is None:
            self._open()
            if self._done:
                return None

        for line in self._proc.stdout:
            name = line.rstrip("\n")
            if not _well_formed(name):
                logger.debug("malformed package list line %r, giving up", line)
                break
            if name.startswith(self.prefix):
                self.returned.append(name)
                return name

        self.close()
        return None

    def close(self):
        self._done = True
        proc, self._proc = self._proc, None
        if proc is not None:
            proc.stdout.close()
            if proc.poll() is None:
                proc.terminate()
            proc.wait()
        self.returned.clear()

    def __iter__(self):
        while True:
            name = self.next_match()
            if name is None:
                return
            yield name


class PackageCompleter:
    """
    readline completer: `complete(text, state)` is called with state 0, 1,
    2, ... until it returns None. State 0 starts a fresh session.
    """

    def __init__(self, binary: str, line_buffer=None, begidx=None):
        self.command = [binary, "-Slq"]
        if line_buffer is None or begidx is None:
            import readline

            line_buffer = line_buffer or readline.get_line_buffer
            begidx = begidx or readline.get_begidx
        self._line_buffer = line_buffer
        self._begidx = begidx
        self.session = None

    def at_token_start(self) -> bool:
        start = self._begidx()
        return start == 0 or self._line_buffer()[start - 1 : start].isspace()

    def complete(self, text, state):
        if state == 0:
            self.close()
            if not self.at_token_start():
                return None
            self.session = CompletionStream(text, self.command)
        if self.session is None:
            return None
        return self.session.next_match()

    def close(self):
        if self.session is not None:
            self.session.close()
            self.session = None
