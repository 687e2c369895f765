"""minishell - front-end core of a line-oriented command shell."""

from loguru import logger

from .builtins import Builtin, dispatch_builtin
from .directory import change_directory
from .prompt import resolve_prompt
from .session import ShellSession, create_session
from .tokenizer import TokenSequence, release, tokenize, trim

logger.disable("minishell")

__version__ = "0.1.0"

__all__ = [
    "Builtin",
    "ShellSession",
    "TokenSequence",
    "change_directory",
    "create_session",
    "dispatch_builtin",
    "release",
    "resolve_prompt",
    "tokenize",
    "trim",
]
