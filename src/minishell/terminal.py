"""Terminal and process-group control."""

from __future__ import annotations

import os
import termios
from typing import Any, Protocol

TerminalAttributes = list[Any]


class TerminalController(Protocol):
    """OS capability used by the session to claim its terminal."""

    def is_terminal(self, fd: int) -> bool: ...

    def set_process_group(self, pid: int, pgid: int) -> None: ...

    def get_attributes(self, fd: int) -> TerminalAttributes: ...

    def set_foreground_group(self, fd: int, pgid: int) -> None: ...


class PosixTerminalController:
    """Controller backed by the real process and terminal calls."""

    def is_terminal(self, fd: int) -> bool:
        return os.isatty(fd)

    def set_process_group(self, pid: int, pgid: int) -> None:
        os.setpgid(pid, pgid)

    def get_attributes(self, fd: int) -> TerminalAttributes:
        return termios.tcgetattr(fd)

    def set_foreground_group(self, fd: int, pgid: int) -> None:
        os.tcsetpgrp(fd, pgid)


class NullTerminalController:
    """Controller that never touches OS state.

    Records the calls it receives so tests can assert on them.
    """

    def __init__(self, *, interactive: bool = False, attributes: TerminalAttributes | None = None) -> None:
        self.interactive = interactive
        self.attributes: TerminalAttributes = attributes if attributes is not None else []
        self.calls: list[tuple[str, tuple[int, ...]]] = []

    def is_terminal(self, fd: int) -> bool:
        self.calls.append(("is_terminal", (fd,)))
        return self.interactive

    def set_process_group(self, pid: int, pgid: int) -> None:
        self.calls.append(("set_process_group", (pid, pgid)))

    def get_attributes(self, fd: int) -> TerminalAttributes:
        self.calls.append(("get_attributes", (fd,)))
        return list(self.attributes)

    def set_foreground_group(self, fd: int, pgid: int) -> None:
        self.calls.append(("set_foreground_group", (fd, pgid)))
