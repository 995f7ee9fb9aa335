# minishell

The building blocks of a small command shell, as a Python library. It splits
a command line into tokens, keeps its own copy of the environment, runs a
handful of builtin commands in-process and starts every other program as a
child process, with input and output redirection.

## Modules

- `minishell.tokenizer`
  - `tokenize(line)` returns a list of `Token`s: words and the operators
    `|`, `<`, `<<`, `>` and `>>`.
  - Whitespace separates words. The characters `&`, `/` and `;` end a word.
  - A token that would begin with one of `&`, `/` or `;` raises
    `TokenizeError`, which records the `line` and the `position`.
- `minishell.environment.Environment` holds `KEY=VALUE` strings in order.
  - `get(key)` returns the value of the first matching entry, or `None`.
  - `set(expr)` replaces every entry with the same key by `expr`, or appends
    `expr` when the key is not present. The key is the text before the first
    `=`.
  - `unset(key)` removes every entry with that key.
  - `len()` and iteration work over the entries.
  - `as_dict()` gives a key-to-value mapping in which the first entry of a
    key wins.
- `minishell.models` defines the shared data types.
  - `TokenType` and `Token` describe tokens.
  - `Command` holds `args`, `is_builtin`, `infile`, `outfile`, `append_mode`
    and `heredoc`. Giving it 50 or more arguments raises `ValueError`.
  - `Shell` holds `env` and `exit_status`. Its environment defaults to a copy
    of the process environment.
  - `Shell.exit(status)` records the status and raises `ShellExit`, which
    carries it as `status`.
- `minishell.builtins` implements `echo` (with `-n`), `cd`, `pwd`, `env`,
  `export`, `unset` and `exit`, as `builtin_echo(command, shell)` and so on.
  - `is_builtin(name)` tells whether a name is one of them.
  - `run_builtin(command, shell)` dispatches on the command's first argument.
- `minishell.executor` runs commands.
  - `exec_command(command, shell)` runs the command as a builtin when
    `command.is_builtin` is set. Otherwise it finds the program with
    `resolve_path` and runs it as a child process with the shell's
    environment, then stores the exit status on the shell.
  - `resolve_path(name, shell)` returns `name` if it is executable as given.
    Otherwise it searches the directories of `PATH`. If nothing is found it
    raises `CommandNotFound`, whose `status` is 127, or 1 when `PATH` is not
    set.
  - `open_redirections(command)` is a context manager. It opens `outfile`
    (truncating, or appending with `append_mode`) and `infile`, and yields
    their descriptors as `stdin` and `stdout`. It raises `RedirectionError`
    when a file cannot be opened.
- `minishell.debug` provides `format_tokens`, `format_commands`,
  `print_tokens` and `print_commands` for inspecting token and command lists.

## Example

```python
from minishell.builtins import is_builtin
from minishell.debug import format_tokens
from minishell.environment import Environment
from minishell.executor import exec_command
from minishell.models import Command, Shell
from minishell.tokenizer import tokenize

print(format_tokens(tokenize("cat < in.txt | grep x >> out.txt")))

env = Environment(["HOME=/home/user", "PATH=/usr/bin:/bin"])
env.set("EDITOR=vi")
env.unset("HOME")
print(env.get("EDITOR"), len(env))

shell = Shell(env=env)
exec_command(Command(args=["echo", "hello"], is_builtin=is_builtin("echo")), shell)
print(shell.exit_status)
```

## Behaviour worth knowing

- Builtins write their errors to standard error and set the shell's exit
  status to 1. They do not raise.
- `export` and `unset` take exactly one argument.
- `exit` without an argument ends the shell with the last exit status. With
  one argument it uses the leading integer of that argument, or 0 when there
  is none. In both cases it raises `ShellExit`.
- When `exec_command` meets a redirection error or a missing command, it
  prints the message to standard error and sets the exit status. It does not
  raise.

## What it does not do

- There is no interactive prompt and no command to start: the package is a
  library.
- Nothing turns a token list into `Command` objects; build them yourself.
- `exec_command` runs one command. It does not connect a pipeline with `|`.
- The `heredoc` field is stored and shown by `minishell.debug`, but nothing
  reads a here-document.