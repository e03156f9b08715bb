import re
import sys
from typing import TextIO


QUIT_SENTINEL = "q"

_INT_RE = re.compile(r"[+-]?[0-9]+")


class InputParseError(ValueError):
    pass


def strip_line_ending(line: str) -> str:
    """Remove one trailing CRLF or LF; text without a terminator is returned as-is."""
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line


def parse_int(text: str) -> int:
    """Parse an optionally signed decimal integer, nothing else (no spaces, no underscores)."""
    if not _INT_RE.fullmatch(text):
        raise InputParseError(f"{text!r} is not a number")
    return int(text)


class Prompt:
    """
    Line oriented terminal I/O over injectable streams.

    Every ``ask*`` call prints an empty line, the message and a ``> `` marker,
    then consumes exactly one line of input.
    """

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def echo(self, text: str = "") -> None:
        _ = self.stdout.write(text + "\n")

    def read_line(self) -> str:
        line = self.stdin.readline()
        if line == "":
            raise EOFError("input stream exhausted")
        return strip_line_ending(line)

    def read_int(self) -> int:
        return parse_int(self.read_line())

    def _show(self, message: str) -> None:
        self.echo()
        self.echo(message)
        _ = self.stdout.write("> ")
        self.stdout.flush()

    def ask(self, message: str) -> str:
        """Free-text prompt. The quit sentinel ends the process."""
        self._show(message)
        reply = self.read_line()
        if reply == QUIT_SENTINEL:
            self.echo("Goodbye!")
            sys.exit(0)
        return reply

    def ask_raw(self, message: str) -> str:
        """Prompt for a line that will be parsed by the caller; the sentinel is not honoured."""
        self._show(message)
        return self.read_line()

    def ask_int(self, message: str) -> int:
        self._show(message)
        return self.read_int()
