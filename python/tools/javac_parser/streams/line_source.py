"""
Pull-based line supply with a single slot of pushback.

The parser reads compiler output one line at a time and occasionally needs to
look one line ahead; a line it does not want is handed back through
``push_back`` and returned by the next ``pull_line``.
"""

import io
from typing import Iterable, Iterator, Optional, Protocol

from ..core.exceptions import PushbackError


class LineSource(Protocol):
    """Protocol defining the interface the parser pulls lines from."""

    def pull_line(self) -> Optional[str]:
        """Return the next line, or None once the stream is exhausted."""
        ...

    def push_back(self, line: str) -> None:
        """Return a line so that the next pull yields it again."""
        ...


def strip_line_terminator(line: str) -> str:
    """Remove a trailing newline (``\\n``, ``\\r\\n`` or ``\\r``) and nothing else."""
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith(("\n", "\r")):
        return line[:-1]
    return line


class PushbackLineSource:
    """Adapts any iterable of strings (list, open file, process pipe) to a LineSource."""

    def __init__(self, lines: Iterable[str]):
        self._lines: Iterator[str] = iter(lines)
        self._pushback: Optional[str] = None
        self._exhausted = False

    @classmethod
    def from_text(cls, text: str) -> "PushbackLineSource":
        # only \n, \r and \r\n end a line; form feeds stay in the text
        return cls(io.StringIO(text, newline=""))

    @property
    def has_pushback(self) -> bool:
        return self._pushback is not None

    def pull_line(self) -> Optional[str]:
        if self._pushback is not None:
            line, self._pushback = self._pushback, None
            return line
        if self._exhausted:
            return None
        try:
            return strip_line_terminator(next(self._lines))
        except StopIteration:
            self._exhausted = True
            return None

    def push_back(self, line: str) -> None:
        if self._pushback is not None:
            raise PushbackError(self._pushback, line)
        self._pushback = line

    def __iter__(self) -> Iterator[str]:
        while (line := self.pull_line()) is not None:
            yield line
