"""Running commands: builtins in-process, everything else as a child."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import NamedTuple

from minishell.builtins import run_builtin
from minishell.models import Command, Shell


class RedirectionError(OSError):
    """Raised when a redirection file cannot be opened."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class CommandNotFound(LookupError):
    """Raised when a command cannot be resolved to an executable."""

    def __init__(self, message: str, status: int) -> None:
        super().__init__(message)
        self.message = message
        self.status = status


class _Streams(NamedTuple):
    stdin: int | None
    stdout: int | None


def resolve_path(name: str, shell: Shell) -> str:
    """Return the executable to run for ``name``, searching $PATH if needed."""
    if os.access(name, os.X_OK):
        return name
    path_var = shell.env.get("PATH")
    if path_var is None:
        raise CommandNotFound("PATH variable not set", 1)
    for directory in path_var.split(":"):
        if not directory:
            continue
        candidate = f"{directory}/{name}"
        if os.access(candidate, os.X_OK):
            return candidate
    raise CommandNotFound(f"{name}: command not found", 127)


def _open(path: str, flags: int, mode: int = 0o644) -> int:
    try:
        return os.open(path, flags, mode)
    except OSError as exc:
        raise RedirectionError(path, exc.strerror or str(exc)) from exc


@contextmanager
def open_redirections(command: Command) -> Iterator[_Streams]:
    """Open the command's output and input files; close them on exit.

    Yields the descriptors to use as standard input and output, None where
    the command does not redirect.
    """
    stdout_fd: int | None = None
    stdin_fd: int | None = None
    try:
        if command.outfile:
            flags = os.O_WRONLY | os.O_CREAT
            flags |= os.O_APPEND if command.append_mode else os.O_TRUNC
            stdout_fd = _open(command.outfile, flags)
        if command.infile:
            stdin_fd = _open(command.infile, os.O_RDONLY)
        yield _Streams(stdin_fd, stdout_fd)
    finally:
        for fd in (stdin_fd, stdout_fd):
            if fd is not None:
                os.close(fd)


def exec_command(command: Command, shell: Shell) -> None:
    """Run ``command`` and record its exit status on ``shell``."""
    if command.is_builtin:
        run_builtin(command, shell)
        return
    if not command.args:
        return
    sys.stdout.flush()
    sys.stderr.flush()
    try:
        with open_redirections(command) as streams:
            executable = resolve_path(command.args[0], shell)
            completed = subprocess.run(
                command.args,
                executable=executable,
                env=shell.env.as_dict(),
                stdin=streams.stdin,
                stdout=streams.stdout,
                check=False,
            )
    except RedirectionError as exc:
        print(str(exc), file=sys.stderr)
        shell.exit_status = 1
        return
    except CommandNotFound as exc:
        print(exc.message, file=sys.stderr)
        shell.exit_status = exc.status
        return
    except OSError as exc:
        print(f"execve: {exc.strerror or exc}", file=sys.stderr)
        shell.exit_status = 1
        return
    shell.exit_status = completed.returncode if completed.returncode >= 0 else 1