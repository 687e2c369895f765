"""Command-line entry point for minishell."""

from __future__ import annotations

import typer

from minishell import __version__
from minishell.builtins import lookup_builtin
from minishell.config import load_settings
from minishell.logging_utils import configure_logging
from minishell.session import ShellSession
from minishell.tokenizer import tokenize, trim

app = typer.Typer(
    name="minishell",
    help="Front-end core of a line-oriented command shell.",
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"minishell {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=_version_callback,
        is_eager=True,
        help="Print the version and exit.",
    ),
) -> None:
    """Parse process arguments before any shell state is set up."""
    _ = version
    configure_logging(level=load_settings().log_level)


@app.command()
def tokens(line: str = typer.Argument(..., help="Input line to tokenize")) -> None:
    """Show how one input line is tokenized and whether it is a builtin."""
    with tokenize(trim(line)) as words:
        for word in words:
            typer.echo(word)
        builtin = lookup_builtin(words[0]) if words else None
        typer.echo(f"builtin: {builtin.value if builtin else 'no'}")


@app.command()
def session() -> None:
    """Initialize a shell session, print its state and destroy it."""
    settings = load_settings()
    with ShellSession(settings=settings) as shell:
        if shell.is_interactive:
            configure_logging(profile="interactive", level=settings.log_level)
        typer.echo(f"interactive: {'yes' if shell.is_interactive else 'no'}")
        typer.echo(f"process group: {shell.pgid if shell.pgid is not None else '-'}")
        typer.echo(f"prompt: {shell.prompt}")
