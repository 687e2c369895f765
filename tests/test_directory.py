import os
import pwd
from pathlib import Path

from minishell.directory import CD_FAILURE, CD_SUCCESS, change_directory, resolve_home
from minishell.tokenizer import tokenize


def test_cd_without_target_uses_home(monkeypatch, tmp_path: Path) -> None:
    home = tmp_path / "x"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    with tokenize("cd") as args:
        assert change_directory(args) == CD_SUCCESS
    assert Path.cwd() == home.resolve()


def test_cd_to_root() -> None:
    assert change_directory(["cd", "/"]) == CD_SUCCESS
    assert os.getcwd() == "/"


def test_cd_to_missing_directory_fails(capsys, tmp_path: Path) -> None:
    os.chdir(tmp_path)
    assert change_directory(["cd", "/nonexistent"]) == CD_FAILURE
    assert Path.cwd() == tmp_path.resolve()
    assert "change_dir" in capsys.readouterr().err


def test_cd_target_is_used_verbatim(capsys, tmp_path: Path) -> None:
    os.chdir(tmp_path)
    assert change_directory(["cd", "~"]) == CD_FAILURE
    assert Path.cwd() == tmp_path.resolve()
    assert "~" in capsys.readouterr().err


def test_cd_relative_target(tmp_path: Path) -> None:
    (tmp_path / "sub").mkdir()
    os.chdir(tmp_path)
    assert change_directory(["cd", "sub"]) == CD_SUCCESS
    assert Path.cwd() == (tmp_path / "sub").resolve()


def test_home_falls_back_to_password_database(monkeypatch) -> None:
    class _Entry:
        pw_dir = "/home/from-db"

    monkeypatch.setattr(pwd, "getpwuid", lambda _uid: _Entry())
    assert resolve_home({}) == "/home/from-db"


def test_cd_reports_missing_home(monkeypatch, capsys, tmp_path: Path) -> None:
    def _missing(_uid: int):
        raise KeyError(_uid)

    monkeypatch.delenv("HOME", raising=False)
    monkeypatch.setattr(pwd, "getpwuid", _missing)
    os.chdir(tmp_path)
    assert change_directory(["cd"]) == CD_FAILURE
    assert Path.cwd() == tmp_path.resolve()
    assert "cannot determine home directory" in capsys.readouterr().err


def test_explicit_env_overrides_process_home(tmp_path: Path) -> None:
    assert change_directory(["cd"], env={"HOME": str(tmp_path)}) == CD_SUCCESS
    assert Path.cwd() == tmp_path.resolve()


def test_cd_target_with_nul_byte_fails(capsys, tmp_path: Path) -> None:
    os.chdir(tmp_path)
    with tokenize("cd a\x00b") as args:
        assert change_directory(args) == CD_FAILURE
    assert Path.cwd() == tmp_path.resolve()
    assert "change_dir" in capsys.readouterr().err
