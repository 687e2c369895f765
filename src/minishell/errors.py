"""Application-level exception types and diagnostics for minishell."""

from __future__ import annotations

from typing import NoReturn

import typer

EXIT_FAILURE = 1


class ShellError(Exception):
    """Base exception for minishell."""


class SessionStateError(ShellError):
    """Raised when a session operation is invalid for its lifecycle state."""


class HomeDirectoryError(ShellError):
    """Raised when no home directory can be resolved for `cd`."""


def report(message: str) -> None:
    """Write one diagnostic line to stderr."""
    typer.echo(message, err=True)


def fatal(message: str, exit_code: int = EXIT_FAILURE) -> NoReturn:
    """Report a diagnostic and terminate the process."""
    report(message)
    raise SystemExit(exit_code)
