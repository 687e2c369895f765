from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from loguru import logger

from minishell import logging_utils


@pytest.fixture(autouse=True)
def _bypass_terminal_and_exit(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SKIP_TC", "1")
    monkeypatch.setenv("SKIP_EXIT", "1")
    # Any chdir performed by a test is undone on teardown.
    monkeypatch.chdir(Path.cwd())


@pytest.fixture(autouse=True)
def _reset_logging(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.setattr(logging_utils, "_CONFIGURED_PROFILE", None)
    yield
    # Back to the state the package has right after import.
    logger.remove()
    logger.disable("minishell")
