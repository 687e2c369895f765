"""Line tokenizing helpers."""

from __future__ import annotations

import re
from collections.abc import Iterator, Sequence
from typing import cast, overload

from minishell.errors import fatal

# C-locale isspace() set
WHITESPACE = " \t\n\v\f\r"
TOKEN_RE = re.compile(r"[^ \t\r\n]+")
INITIAL_CAPACITY = 64


class TokenSequence(Sequence[str]):
    """Owned, explicit-length sequence of word tokens from one input line.

    Storage starts at ``INITIAL_CAPACITY`` slots and doubles whenever a new
    token would not fit. The end of the sequence is its length: ``get(len(seq))``
    returns ``None``.
    """

    def __init__(self, capacity: int = INITIAL_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self._slots: list[str | None] = [None] * capacity
        self._count = 0
        self._released = False

    @property
    def capacity(self) -> int:
        return len(self._slots)

    @property
    def released(self) -> bool:
        return self._released

    def append(self, token: str) -> None:
        if self._released:
            raise ValueError("token sequence has been released")
        if not token:
            raise ValueError("tokens are never empty")
        if self._count >= len(self._slots):
            self._grow()
        self._slots[self._count] = token
        self._count += 1

    def get(self, index: int) -> str | None:
        """Return the token at ``index``, or ``None`` at and past the end."""
        if 0 <= index < self._count:
            return self._slots[index]
        return None

    def release(self) -> None:
        """Drop every token and the slot storage. Safe to call repeatedly."""
        if self._released:
            return
        self._slots.clear()
        self._count = 0
        self._released = True

    def _grow(self) -> None:
        try:
            self._slots.extend([None] * len(self._slots))
        except MemoryError:
            fatal("cmd_parse: allocation error")

    @overload
    def __getitem__(self, index: int) -> str: ...

    @overload
    def __getitem__(self, index: slice) -> list[str]: ...

    def __getitem__(self, index: int | slice) -> str | list[str]:
        if isinstance(index, slice):
            return [token for token in self._slots[: self._count] if token is not None][index]
        if index < 0:
            index += self._count
        if not 0 <= index < self._count:
            raise IndexError("token index out of range")
        return cast(str, self._slots[index])

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[str]:
        for index in range(self._count):
            yield self[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (TokenSequence, list, tuple)):
            return list(self) == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"TokenSequence({list(self)!r})"

    def __enter__(self) -> TokenSequence:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        _ = (exc_type, exc, tb)
        self.release()


def trim(line: str | None) -> str | None:
    """Strip leading and trailing whitespace; ``None`` passes through."""
    if line is None:
        return None
    return line.strip(WHITESPACE)


def tokenize(line: str | None) -> TokenSequence:
    """Split one input line into whitespace-delimited tokens.

    Splits on runs of space, tab, CR and LF. No quoting or escaping is
    honored. The caller's string is never modified.
    """
    tokens = TokenSequence()
    if not line:
        return tokens
    for match in TOKEN_RE.finditer(line):
        tokens.append(match.group(0))
    return tokens


def release(tokens: TokenSequence | None) -> None:
    """Release a token sequence; ``None`` is a no-op."""
    if tokens is None:
        return
    tokens.release()
