"""The `cd` builtin."""

from __future__ import annotations

import os
import pwd
from collections.abc import Mapping, Sequence

from loguru import logger

from minishell.config import HOME_ENV
from minishell.errors import HomeDirectoryError, report

CD_SUCCESS = 0
CD_FAILURE = -1


def resolve_home(env: Mapping[str, str] | None = None) -> str:
    """Resolve the home directory from ``HOME`` or the password database."""
    source = os.environ if env is None else env
    home = source.get(HOME_ENV)
    if home is not None:
        return home
    try:
        return pwd.getpwuid(os.getuid()).pw_dir
    except KeyError as exc:
        raise HomeDirectoryError("cannot determine home directory") from exc


def change_directory(args: Sequence[str], env: Mapping[str, str] | None = None) -> int:
    """Change the working directory; ``args[0]`` is ``cd``, ``args[1]`` the optional target.

    Returns ``CD_SUCCESS`` or ``CD_FAILURE``. Failures are reported on stderr.
    """
    if len(args) > 1:
        target = args[1]
    else:
        try:
            target = resolve_home(env)
        except HomeDirectoryError as exc:
            report(f"change_dir: {exc}")
            return CD_FAILURE

    try:
        os.chdir(target)
    except OSError as exc:
        report(f"change_dir: {exc.strerror or exc}: {target}")
        return CD_FAILURE
    except ValueError as exc:
        # embedded NUL byte
        report(f"change_dir: {exc}: {target!r}")
        return CD_FAILURE

    logger.debug("cd -> {}", target)
    return CD_SUCCESS
