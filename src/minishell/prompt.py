"""Prompt resolution."""

from __future__ import annotations

import os
from collections.abc import Mapping

from minishell.config import DEFAULT_PROMPT, PROMPT_ENV


def resolve_prompt(name: str = PROMPT_ENV, env: Mapping[str, str] | None = None) -> str:
    """Return the configured value for ``name`` or the default prompt.

    Values are taken verbatim, the empty string included.
    """
    source = os.environ if env is None else env
    value = source.get(name)
    if value is None:
        return DEFAULT_PROMPT
    return value
