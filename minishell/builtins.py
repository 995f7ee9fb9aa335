"""Commands that run inside the shell process itself."""

from __future__ import annotations

import os
import re
import sys
from collections.abc import Callable

from minishell.models import Command, Shell

_LEADING_INTEGER = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")


def _atoi(text: str) -> int:
    """Parse a leading integer the lenient way; anything else yields 0."""
    match = _LEADING_INTEGER.match(text)
    return int(match.group(1)) if match else 0


def _error(message: str) -> None:
    print(message, file=sys.stderr)


def builtin_cd(command: Command, shell: Shell) -> None:
    """Change the working directory to the argument, or to $HOME without one."""
    argc = len(command.args)
    if argc == 1:
        target = shell.env.get("HOME")
        if target is None:
            _error("cd: HOME not set")
            shell.exit_status = 1
            return
    elif argc == 2:
        target = command.args[1]
    else:
        _error("cd: too many arguments")
        shell.exit_status = 1
        return
    try:
        os.chdir(target)
    except OSError as exc:
        _error(f"cd: chdir: {exc.strerror}")
        shell.exit_status = 1


def builtin_echo(command: Command, shell: Shell) -> None:
    """Print the arguments separated by spaces; ``-n`` drops the newline."""
    words = command.args[1:]
    newline = True
    if words and words[0] == "-n":
        newline = False
        words = words[1:]
    sys.stdout.write(" ".join(words))
    if newline:
        sys.stdout.write("\n")
    shell.exit_status = 0


def builtin_env(command: Command, shell: Shell) -> None:
    """Print every environment entry, one per line."""
    if len(command.args) == 1:
        for entry in shell.env:
            print(entry)
        shell.exit_status = 0
    else:
        _error("env: too many arguments")
        shell.exit_status = 1


def builtin_exit(command: Command, shell: Shell) -> None:
    """Terminate the shell with the given status or the last one."""
    argc = len(command.args)
    if argc == 1:
        shell.exit(shell.exit_status)
    elif argc == 2:
        shell.exit(_atoi(command.args[1]))
    else:
        _error("exit: too many arguments")
        shell.exit_status = 1


def builtin_export(command: Command, shell: Shell) -> None:
    """Set one ``KEY=VALUE`` entry in the environment."""
    if len(command.args) == 2:
        shell.env.set(command.args[1])
        shell.exit_status = 0
    else:
        _error("export: too many arguments")
        shell.exit_status = 1


def builtin_pwd(command: Command, shell: Shell) -> None:
    """Print the current working directory."""
    if len(command.args) != 1:
        _error("pwd: too many arguments")
        shell.exit_status = 1
        return
    try:
        cwd = os.getcwd()
    except OSError as exc:
        _error(f"pwd: getcwd: {exc.strerror}")
        shell.exit_status = 1
        return
    print(cwd)
    shell.exit_status = 0


def builtin_unset(command: Command, shell: Shell) -> None:
    """Remove one variable from the environment."""
    if len(command.args) == 2:
        shell.env.unset(command.args[1])
        shell.exit_status = 0
    else:
        _error("unset: too many arguments")
        shell.exit_status = 1


_BUILTINS: dict[str, Callable[[Command, Shell], None]] = {
    "env": builtin_env,
    "unset": builtin_unset,
    "export": builtin_export,
    "exit": builtin_exit,
    "echo": builtin_echo,
    "pwd": builtin_pwd,
    "cd": builtin_cd,
}


def is_builtin(name: str) -> bool:
    """Return whether ``name`` is handled by the shell itself."""
    return name in _BUILTINS


def run_builtin(command: Command, shell: Shell) -> None:
    """Run the builtin named by the command's first argument, if there is one."""
    if not command.args:
        return
    handler = _BUILTINS.get(command.args[0])
    if handler is not None:
        handler(command, shell)