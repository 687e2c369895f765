"""Shell session lifecycle and terminal ownership."""

from __future__ import annotations

import os
import termios
from collections.abc import Mapping
from enum import Enum

from loguru import logger

from minishell.config import PROMPT_ENV, ShellSettings, load_settings
from minishell.errors import SessionStateError, fatal
from minishell.prompt import resolve_prompt
from minishell.terminal import PosixTerminalController, TerminalAttributes, TerminalController

STDIN_FILENO = 0


class SessionState(str, Enum):
    UNINITIALIZED = "uninitialized"
    INITIALIZED = "initialized"
    DESTROYED = "destroyed"


class ShellSession:
    """One running shell instance.

    Owns the terminal descriptor, the interactivity flag, the claimed process
    group, the saved terminal attributes and the resolved prompt.
    """

    def __init__(
        self,
        *,
        settings: ShellSettings | None = None,
        controller: TerminalController | None = None,
        env: Mapping[str, str] | None = None,
    ) -> None:
        self._settings = settings
        self._controller: TerminalController = controller or PosixTerminalController()
        self.env = env
        self.state = SessionState.UNINITIALIZED
        self.terminal: int | None = None
        self.is_interactive = False
        self.pgid: int | None = None
        self.saved_attributes: TerminalAttributes | None = None
        self.prompt: str | None = None

    @property
    def settings(self) -> ShellSettings:
        if self._settings is None:
            self._settings = load_settings()
        return self._settings

    def init(self) -> ShellSession:
        if self.state is not SessionState.UNINITIALIZED:
            raise SessionStateError(f"cannot init a session that is {self.state.value}")

        terminal = self.terminal = STDIN_FILENO
        self.is_interactive = self._controller.is_terminal(terminal)
        if self.is_interactive and not self.settings.skip_tc:
            self._claim_terminal(terminal)
        elif self.is_interactive:
            logger.debug("terminal control bypassed")

        self.prompt = resolve_prompt(PROMPT_ENV, self.env)
        self.state = SessionState.INITIALIZED
        logger.debug("session initialized interactive={} pgid={}", self.is_interactive, self.pgid)
        return self

    def destroy(self) -> None:
        if self.prompt is not None:
            self.prompt = None
        if self.state is SessionState.INITIALIZED:
            self.state = SessionState.DESTROYED
            logger.debug("session destroyed")

    def _claim_terminal(self, terminal: int) -> None:
        self.pgid = os.getpid()
        try:
            self._controller.set_process_group(self.pgid, self.pgid)
        except OSError as exc:
            fatal(f"sh_init: Couldn't put the shell in its own process group: {exc.strerror or exc}")

        try:
            self.saved_attributes = self._controller.get_attributes(terminal)
        except (OSError, termios.error) as exc:
            logger.warning("could not read terminal attributes: {}", exc)

        try:
            self._controller.set_foreground_group(terminal, self.pgid)
        except OSError as exc:
            logger.warning("could not take the terminal foreground: {}", exc)

    def __enter__(self) -> ShellSession:
        return self.init()

    def __exit__(self, exc_type, exc, tb) -> None:
        _ = (exc_type, exc, tb)
        self.destroy()


def create_session(
    *,
    settings: ShellSettings | None = None,
    controller: TerminalController | None = None,
    env: Mapping[str, str] | None = None,
) -> ShellSession:
    """Build and initialize a session."""
    return ShellSession(settings=settings, controller=controller, env=env).init()
