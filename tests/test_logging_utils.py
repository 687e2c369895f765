from pathlib import Path

from loguru import logger

from minishell.builtins import dispatch_builtin
from minishell.logging_utils import configure_logging
from minishell.session import ShellSession
from minishell.terminal import NullTerminalController


def _collect() -> list[str]:
    records: list[str] = []
    logger.add(records.append, level="DEBUG", format="{message}")
    return records


def test_library_calls_log_nothing_until_configured(tmp_path: Path) -> None:
    records = _collect()
    with ShellSession(controller=NullTerminalController()) as session:
        assert dispatch_builtin(session, ["history"]) is True
        assert dispatch_builtin(session, ["cd", str(tmp_path)]) is True
    assert records == []


def test_configure_logging_enables_package_logs(tmp_path: Path) -> None:
    configure_logging(level="DEBUG")
    records = _collect()
    with ShellSession(controller=NullTerminalController()) as session:
        dispatch_builtin(session, ["history"])
    assert any("builtin history" in record for record in records)


def test_interactive_profile_writes_through_rich(capsys, tmp_path: Path) -> None:
    configure_logging(profile="interactive", level="DEBUG")
    with ShellSession(controller=NullTerminalController()) as session:
        dispatch_builtin(session, ["history"])
    assert "builtin history" in capsys.readouterr().err


def test_level_defaults_to_settings(monkeypatch, capsys) -> None:
    monkeypatch.setenv("MINISHELL_LOG_LEVEL", "ERROR")
    configure_logging()
    logger.warning("below threshold")
    logger.error("at threshold")
    err = capsys.readouterr().err
    assert "below threshold" not in err
    assert "at threshold" in err
