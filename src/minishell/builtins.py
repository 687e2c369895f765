"""Builtin command dispatch."""

from __future__ import annotations

import sys
from collections.abc import Callable, Mapping, Sequence
from enum import Enum
from typing import TYPE_CHECKING

from loguru import logger

from minishell.directory import change_directory

if TYPE_CHECKING:
    from minishell.session import ShellSession

Terminate = Callable[[int], object]


class Builtin(str, Enum):
    """Commands interpreted by the shell itself."""

    EXIT = "exit"
    CD = "cd"
    HISTORY = "history"


def lookup_builtin(name: str) -> Builtin | None:
    """Match a command name exactly against the builtin set."""
    try:
        return Builtin(name)
    except ValueError:
        return None


def _do_exit(session: ShellSession, args: Sequence[str], terminate: Terminate) -> bool:
    _ = args
    if session.settings.skip_exit:
        logger.debug("exit bypassed")
        return True
    terminate(0)
    return True


def _do_cd(session: ShellSession, args: Sequence[str], terminate: Terminate) -> bool:
    _ = terminate
    # A failed cd is still a handled builtin.
    change_directory(args, session.env)
    return True


def _do_history(session: ShellSession, args: Sequence[str], terminate: Terminate) -> bool:
    _ = (session, args, terminate)
    return True


_HANDLERS: Mapping[Builtin, Callable[[ShellSession, Sequence[str], Terminate], bool]] = {
    Builtin.EXIT: _do_exit,
    Builtin.CD: _do_cd,
    Builtin.HISTORY: _do_history,
}


def dispatch_builtin(
    session: ShellSession,
    args: Sequence[str] | None,
    *,
    terminate: Terminate | None = None,
) -> bool:
    """Run ``args`` if it names a builtin.

    Returns ``True`` when the line was a builtin, ``False`` when the caller
    should try to execute it as an external command.
    """
    if not args:
        return False
    builtin = lookup_builtin(args[0])
    if builtin is None:
        return False
    logger.debug("builtin {}", builtin.value)
    return _HANDLERS[builtin](session, args, terminate or sys.exit)
