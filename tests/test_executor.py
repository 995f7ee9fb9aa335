import os
import stat

import pytest

from minishell.environment import Environment
from minishell.executor import (
    CommandNotFound,
    RedirectionError,
    exec_command,
    open_redirections,
    resolve_path,
)
from minishell.models import Command, Shell

SYSTEM_PATH = "PATH=/bin:/usr/bin"


def make_shell(*entries):
    return Shell(env=Environment(entries))


def make_executable(directory, name):
    path = directory / name
    path.write_text("#!/bin/sh\nexit 0\n")
    path.chmod(0o755)
    return path


def test_resolve_path_direct(tmp_path):
    script = make_executable(tmp_path, "tool")
    assert resolve_path(str(script), make_shell()) == str(script)


def test_resolve_path_searches_path(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    make_executable(bin_dir, "tool")
    shell = make_shell(f"PATH=::{bin_dir}")
    assert resolve_path("tool", shell) == f"{bin_dir}/tool"


def test_resolve_path_first_match_wins(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    first = tmp_path / "a"
    second = tmp_path / "b"
    first.mkdir()
    second.mkdir()
    make_executable(first, "tool")
    make_executable(second, "tool")
    shell = make_shell(f"PATH={first}:{second}")
    assert resolve_path("tool", shell) == f"{first}/tool"


def test_resolve_path_not_found(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    shell = make_shell(f"PATH={tmp_path}")
    with pytest.raises(CommandNotFound) as info:
        resolve_path("nosuch", shell)
    assert info.value.status == 127
    assert info.value.message == "nosuch: command not found"


def test_resolve_path_without_path(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(CommandNotFound) as info:
        resolve_path("nosuch", make_shell())
    assert info.value.status == 1
    assert info.value.message == "PATH variable not set"


def test_open_redirections_none():
    with open_redirections(Command(args=["x"])) as streams:
        assert streams.stdin is None
        assert streams.stdout is None


def test_open_redirections_creates_outfile(tmp_path):
    target = tmp_path / "out.txt"
    umask = os.umask(0)
    os.umask(umask)
    with open_redirections(Command(args=["x"], outfile=str(target))) as streams:
        os.write(streams.stdout, b"data")
    assert target.read_bytes() == b"data"
    assert stat.S_IMODE(target.stat().st_mode) == 0o644 & ~umask


def test_open_redirections_truncates_and_appends(tmp_path):
    target = tmp_path / "out.txt"
    target.write_text("old")
    with open_redirections(Command(args=["x"], outfile=str(target))) as streams:
        os.write(streams.stdout, b"new")
    assert target.read_text() == "new"
    appending = Command(args=["x"], outfile=str(target), append_mode=True)
    with open_redirections(appending) as streams:
        os.write(streams.stdout, b"more")
    assert target.read_text() == "newmore"


def test_open_redirections_reads_infile(tmp_path):
    source = tmp_path / "in.txt"
    source.write_text("content")
    with open_redirections(Command(args=["x"], infile=str(source))) as streams:
        assert os.read(streams.stdin, 100) == b"content"


def test_open_redirections_missing_infile(tmp_path):
    missing = str(tmp_path / "missing")
    with pytest.raises(RedirectionError) as info:
        with open_redirections(Command(args=["x"], infile=missing)):
            pass
    assert info.value.path == missing


def test_exec_builtin_runs_in_process():
    shell = make_shell()
    exec_command(Command(args=["export", "A=1"], is_builtin=True), shell)
    assert shell.env.get("A") == "1"
    assert shell.exit_status == 0


def test_exec_records_exit_status():
    shell = make_shell(SYSTEM_PATH)
    exec_command(Command(args=["sh", "-c", "exit 3"]), shell)
    assert shell.exit_status == 3


def test_exec_writes_outfile(tmp_path):
    target = tmp_path / "out.txt"
    shell = make_shell(SYSTEM_PATH)
    command = Command(args=["sh", "-c", "echo hello"], outfile=str(target))
    exec_command(command, shell)
    assert target.read_text() == "hello\n"
    assert shell.exit_status == 0


def test_exec_appends_outfile(tmp_path):
    target = tmp_path / "out.txt"
    shell = make_shell(SYSTEM_PATH)
    for word in ("one", "two"):
        command = Command(
            args=["sh", "-c", f"echo {word}"],
            outfile=str(target),
            append_mode=True,
        )
        exec_command(command, shell)
    assert target.read_text().splitlines() == ["one", "two"]


def test_exec_reads_infile(tmp_path):
    source = tmp_path / "in.txt"
    source.write_text("line one\nline two\n")
    target = tmp_path / "out.txt"
    shell = make_shell(SYSTEM_PATH)
    command = Command(args=["cat"], infile=str(source), outfile=str(target))
    exec_command(command, shell)
    assert target.read_text() == source.read_text()


def test_exec_passes_environment(tmp_path):
    target = tmp_path / "out.txt"
    shell = make_shell(SYSTEM_PATH, "GREETING=hi")
    command = Command(args=["sh", "-c", "echo $GREETING"], outfile=str(target))
    exec_command(command, shell)
    assert target.read_text() == "hi\n"


def test_exec_missing_infile(tmp_path, capsys):
    missing = str(tmp_path / "missing")
    shell = make_shell(SYSTEM_PATH)
    exec_command(Command(args=["cat"], infile=missing), shell)
    assert shell.exit_status == 1
    assert capsys.readouterr().err.startswith(f"{missing}: ")


def test_exec_command_not_found(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    shell = make_shell(f"PATH={tmp_path}")
    exec_command(Command(args=["nosuch"]), shell)
    assert shell.exit_status == 127
    assert capsys.readouterr().err == "nosuch: command not found\n"


def test_exec_killed_by_signal():
    shell = make_shell(SYSTEM_PATH)
    exec_command(Command(args=["sh", "-c", "kill -9 $$"]), shell)
    assert shell.exit_status == 1