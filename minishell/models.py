"""Core data types shared by the tokenizer, the executor and the builtins."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum

from minishell.environment import Environment

WHITESPACE = " \t\r\n\v"
OPERATOR_SYMBOLS = "<|>"
FORBIDDEN_SYMBOLS = "&/;"
MAX_ARGS = 50


class TokenType(Enum):
    """Kinds of token; each value is the character used to tag it."""

    PIPE = "|"
    HEREDOC = "+"
    INPUT = "<"
    APPEND = "-"
    OUTPUT = ">"
    WORD = "w"


@dataclass
class Token:
    """A single lexical token of a command line."""

    content: str
    type: TokenType


@dataclass
class Command:
    """One simple command of a pipeline, with its redirections."""

    args: list[str] = field(default_factory=list)
    is_builtin: bool = False
    infile: str | None = None
    outfile: str | None = None
    append_mode: bool = False
    heredoc: str | None = None

    def __post_init__(self) -> None:
        # One slot of the fixed argument table is reserved as terminator.
        if len(self.args) >= MAX_ARGS:
            raise ValueError(
                f"too many arguments: at most {MAX_ARGS - 1} are allowed"
            )


class ShellExit(Exception):
    """Raised when the shell is asked to terminate."""

    def __init__(self, status: int) -> None:
        super().__init__(f"shell exited with status {status}")
        self.status = status


def _environment_from_os() -> Environment:
    return Environment(f"{key}={value}" for key, value in os.environ.items())


@dataclass
class Shell:
    """State of a running shell: its environment and last exit status."""

    env: Environment = field(default_factory=_environment_from_os)
    exit_status: int = 0

    def exit(self, status: int) -> None:
        """Record ``status`` and terminate the shell by raising ShellExit."""
        self.exit_status = status
        raise ShellExit(status)