"""Human-readable dumps of token and command lists."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from minishell.models import Command, Token


def _text(value: str | None) -> str:
    return "(null)" if value is None else value


def _address(obj: object | None) -> str:
    return "(nil)" if obj is None else f"{id(obj):#x}"


def format_tokens(tokens: Iterable[Token]) -> str:
    """Return one line per token showing its content and type tag."""
    return "".join(
        f"content = {token.content}, type : {token.type.value}\n" for token in tokens
    )


def format_commands(commands: Sequence[Command]) -> str:
    """Return a block per command showing its arguments and redirections."""
    commands = list(commands)
    blocks = []
    for index, command in enumerate(commands):
        following = commands[index + 1] if index + 1 < len(commands) else None
        args = "".join(f"{arg} " for arg in command.args)
        blocks.append(
            f"Cmd node {index}\n"
            f"Cmd node address : {_address(command)}\n"
            f"Args : {args}\n"
            f"Infile : {_text(command.infile)}\n"
            f"Outfile : {_text(command.outfile)}\n"
            f"Heredoc : {_text(command.heredoc)}\n"
            f"Append_mode : {int(command.append_mode)}\n"
            f"Builtin : {int(command.is_builtin)}\n"
            f"Next cmd address : {_address(following)}\n"
            "\n"
        )
    return "".join(blocks)


def print_tokens(tokens: Iterable[Token]) -> None:
    """Write the token dump to standard output."""
    print(format_tokens(tokens), end="")


def print_commands(commands: Sequence[Command]) -> None:
    """Write the command dump to standard output."""
    print(format_commands(commands), end="")