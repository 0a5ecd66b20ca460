# composershell

A small toolkit for working with Composer-based PHP projects: a line-oriented
console with built-in commands, a project explorer that remembers
`composer.json` files between sessions, and an overview of a project's or a
dependency's package metadata. It has no third-party dependencies.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The shell

Start it with:

```
composershell
```

Options:

- `-d DIR`, `--directory DIR` — the directory the shell starts in (default:
  the current directory).
- `--settings FILE` — the settings file to read (default: see
  `default_settings_path()` below). The number of worker threads is taken
  from it.

The prompt shows the user and host, for example `[alice@workstation ~]# `.
The shell reads lines until end of input. Commands are matched by name,
case-insensitively; anything not recognised is answered with
`Unknown command: '<line>'`.

| Command  | What it does                                                     |
|----------|------------------------------------------------------------------|
| `help`   | Prints the help text                                             |
| `pwd`    | Prints the working directory                                     |
| `cd DIR` | Changes the working directory, if `DIR` exists                   |
| `ls`     | Lists the entries of the working directory, sorted by name       |
| `ls -r`  | Lists the working directory recursively                          |
| `clear`  | Clears the transcript (and the screen, when output is a terminal)|

`cd` with no path reports `Path is empty`; a path that does not exist reports
`No such directory`. `ls` recurses when its first argument ends in `-r`,
in either case.

## Using it from Python

```python
from composershell.command import Command
from composershell.concurrency import shared_pool
from composershell.shell import Shell, build_invoker, make_whoami

invoker = build_invoker(shared_pool(2))
shell = Shell(invoker, make_whoami(), "/path/to/project")
shell.execute("ls -r")       # runs on the pool and waits for it to finish
print(shell.transcript)

# An empty line is a command that does nothing.
assert not Command.parse("", "/path/to/project")
```

- `Shell.execute(line)` types a line after the prompt, runs it and returns
  the parsed `Command`. `Shell.paste(text)` runs pasted text line by line;
  the last line is only echoed, not run, as in an interactive console.
- `Shell.blocks` holds the transcript line by line, `Shell.history` the
  commands entered, `Shell.suggest(line)` completions for the command name
  being typed. The `output` signal carries each message a command prints;
  `cleared` fires on `clear`.
- `composershell.invoker.Invoker` dispatches a `Command` to its handler by
  name, falling back to the `unknown` handler; without one it raises
  `CommandNotFoundError`. `invoke` and `invoke_many` run on a
  `composershell.concurrency.WorkerPool` and return a `Future`.
- Every handler in `composershell.commands` reports through the `Signal`s
  `started`, `message` and `finished`; `Cd` also has `directory`.

## Other pieces

- `composershell.settings.AppSettings` loads and saves the settings (worker
  threads, Packagist search limit, PHP and Composer binary paths, HTTP and
  HTTPS proxies) as JSON. Worker threads are kept between 1 and the number of
  CPUs, the search limit between 0 and 99. `default_settings_path()` is
  `ComposerGUI/Application.json` under `%APPDATA%` on Windows, otherwise
  under `$XDG_CONFIG_HOME` or `~/.config`.
- `composershell.explorer.ProjectExplorer` keeps the open projects sorted by
  name, each with its version and its requirements as `name@constraint`.
  `save()` writes the list to `Projects.json` beside the settings file (or
  the path given), and a new explorer reloads it.
- `composershell.overview.Overview` reads a project's `composer.json`, or a
  dependency's under the vendor directory, adds the version locked in
  `composer.lock`, and fills in the package fields listed by `Field`.
  `describe_package()` gives the same values for any package mapping.
- `composershell.completer.Completer` suggests command names while the
  first word of a line is typed.
- `composershell.paginator.Paginator` steps through the pages of a
  multi-page dialog with back, next, finish and cancel, emitting `accepted`,
  `rejected` and `finished`.

## What it does not do

- It does not run `composer` or `php`. The help text lists both, but there is
  no handler for them, so they are answered as unknown commands; the binary
  paths and proxies in the settings are stored only.
- It does not query Packagist. `Overview` shows download and favourite counts
  as `?` unless it is given a `lookup` callable that returns them.
- It has no graphical interface and no form for creating or editing
  `composer.json` files; the explorer, overview and paginator are plain
  Python objects for a front end to build on.