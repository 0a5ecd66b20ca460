"""Built-in console commands and the signals they report through."""

from __future__ import annotations

import os
import threading
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator

from .command import Command

HELP_TEXT = (
    "composer \t Run composer command: composer --version\n"
    "php \t Run php command: php -v\n"
    "pwd \t Prints present working directory\n"
    "cd \t Change directory: cd path/to/new/directory\n"
    "ls \t Lists the files in the current working directory: ls, ls -r (recursive)\n"
    "clear \t Clear console contents"
)


class Signal:
    """A list of callables that are all called when the signal is emitted."""

    def __init__(self) -> None:
        self._slots: list[Callable[..., object]] = []
        self._lock = threading.Lock()

    def connect(self, slot: Callable[..., object]) -> Callable[..., object]:
        """Register ``slot``; returns it so this can be used as a decorator."""
        with self._lock:
            self._slots.append(slot)
        return slot

    def emit(self, *args: object) -> None:
        """Call every connected slot with ``args`` in connection order."""
        with self._lock:
            slots = list(self._slots)
        for slot in slots:
            slot(*args)


class AbstractCommand(ABC):
    """A console command.

    Reports through three signals: ``started(command)``,
    ``message(text)`` and ``finished(command)``.
    """

    def __init__(self) -> None:
        self.command = Command()
        self.started = Signal()
        self.message = Signal()
        self.finished = Signal()

    @abstractmethod
    def run(self) -> None:
        """Carry out ``self.command``."""


class Cd(AbstractCommand):
    """Change the console's directory; reports the new one via ``directory``."""

    def __init__(self) -> None:
        super().__init__()
        self.directory = Signal()

    def run(self) -> None:
        self.started.emit(self.command)
        arguments = self.command.arguments
        new_directory = arguments[0] if arguments else ""

        if not new_directory:
            self.message.emit("Path is empty")
        elif not os.path.exists(new_directory):
            self.message.emit("No such directory")
        else:
            self.directory.emit(new_directory)

        self.finished.emit(self.command)


class Clear(AbstractCommand):
    """Clear the console; only reports that it finished."""

    def run(self) -> None:
        self.finished.emit(self.command)


class Help(AbstractCommand):
    """Print the list of available commands."""

    def run(self) -> None:
        self.started.emit(self.command)
        self.message.emit(HELP_TEXT)
        self.finished.emit(self.command)


def _list_entries(directory: str, recursive: bool) -> Iterator[str]:
    try:
        with os.scandir(directory) as scan:
            entries = sorted(scan, key=lambda entry: entry.name)
    except OSError:
        return
    for entry in entries:
        yield entry.path
        if recursive and entry.is_dir(follow_symlinks=False):
            yield from _list_entries(entry.path, recursive)


class Ls(AbstractCommand):
    """List the entries of the execution directory, recursively with ``-r``."""

    def run(self) -> None:
        self.started.emit(self.command)

        arguments = self.command.arguments
        recursive = bool(arguments) and arguments[0].strip().lower().endswith("-r")

        for path in _list_entries(self.command.execution_directory, recursive):
            self.message.emit(path)

        self.finished.emit(self.command)


class Pwd(AbstractCommand):
    """Print the execution directory."""

    def run(self) -> None:
        self.started.emit(self.command)
        self.message.emit(self.command.execution_directory)
        self.finished.emit(self.command)


class Unknown(AbstractCommand):
    """Report a command that has no handler."""

    def run(self) -> None:
        self.started.emit(self.command)
        self.message.emit(f"Unknown command: '{self.command.fullname}'")
        self.finished.emit(self.command)