"""The interactive console: wiring commands to a text transcript, and the entry point."""

from __future__ import annotations

import argparse
import os
import socket
import sys
import threading

from .command import Command
from .commands import Cd, Clear, Help, Ls, Pwd, Signal, Unknown
from .completer import Completer
from .concurrency import WorkerPool
from .invoker import CommandNotFoundError, Invoker
from .settings import AppSettings

WELCOME_TEXT = "Welcome to ComposerGUI shell\nType 'help' to see available commands."
PROCESSING_TEXT_COLOR = "#00ff00"
DEFAULT_TEXT_COLOR = "#9ea1b3"
COMPLETIONS = ("cd", "pwd", "ls", "ls -r", "clear", "help")

_CLEAR_SCREEN = "\033[2J\033[H"


def make_whoami() -> str:
    """Build the prompt from the user name and the host name."""
    name = os.environ.get("USER", "") or os.environ.get("USERNAME", "")
    return f"[{name}@{socket.gethostname()} ~]# "


def build_invoker(pool: WorkerPool | None = None) -> Invoker:
    """Create an invoker holding a fresh set of the built-in commands."""
    return Invoker(
        {
            "cd": Cd(),
            "ls": Ls(),
            "pwd": Pwd(),
            "clear": Clear(),
            "help": Help(),
            "unknown": Unknown(),
        },
        pool,
    )


def _native(path: str) -> str:
    return path.replace("/", os.sep) if os.sep != "/" else path


class Shell:
    """A console session: runs command lines and keeps their transcript.

    The transcript is a list of blocks (lines as displayed). ``output``
    is emitted with each message a command prints, ``cleared`` when the
    transcript is emptied.
    """

    def __init__(
        self,
        invoker: Invoker,
        whoami: str | None = None,
        working_directory: str | os.PathLike | None = None,
    ) -> None:
        self.invoker = invoker
        self.whoami = whoami if whoami is not None else make_whoami()
        self.working_directory = (
            os.fspath(working_directory) if working_directory is not None else os.getcwd()
        )
        self.blocks: list[str] = []
        self.history: list[str] = []
        self.active = True
        self.text_color = DEFAULT_TEXT_COLOR
        self.completer = Completer(COMPLETIONS)
        self.output = Signal()
        self.cleared = Signal()
        self._lock = threading.RLock()

        self.add_text(WELCOME_TEXT, new_block=False)
        self.add_text(self.whoami)
        self._attach_listeners()

    @property
    def transcript(self) -> str:
        with self._lock:
            return "\n".join(self.blocks)

    def add_text(self, text: str, new_block: bool = True) -> None:
        """Append ``text`` as a new block, or to the last block."""
        with self._lock:
            if new_block or not self.blocks:
                self.blocks.append(text)
            else:
                self.blocks[-1] += text

    def clear(self) -> None:
        with self._lock:
            self.blocks.clear()
        self.cleared.emit()

    def suggest(self, line: str) -> list[str]:
        """Completions for the command name being typed on ``line``."""
        return self.completer.suggest(line, self.whoami)

    def execute(self, line: str) -> Command:
        """Type ``line`` after the prompt and run it, waiting until it ends."""
        command = Command.parse(line, self.working_directory)
        self.add_text(line, new_block=False)
        if command:
            self.history.append(line)
        self.invoker.invoke(command).result()
        return command

    def paste(self, text: str) -> list[Command]:
        """Run pasted text line by line; the last, unfinished line is only typed."""
        commands = [Command.parse(line, self.working_directory) for line in text.split("\n")]
        self.history.extend(command.fullname for command in commands[:-1] if command)
        self.invoker.invoke_many(commands).result()
        return commands

    def _attach_listeners(self) -> None:
        invoker = self.invoker
        invoker.dequeued.connect(lambda text: self.add_text(text, new_block=False))

        if invoker.exists("clear"):
            invoker.get_command("clear").finished.connect(lambda _command: self.clear())
        if invoker.exists("cd"):
            directory = getattr(invoker.get_command("cd"), "directory", None)
            if isinstance(directory, Signal):
                directory.connect(self._change_directory)

        for handler in invoker.commands.values():
            handler.started.connect(self._on_started)
            handler.message.connect(self._on_message)
            handler.finished.connect(self._on_finished)

    def _change_directory(self, directory: str) -> None:
        self.working_directory = _native(directory)

    def _on_started(self, _command: Command) -> None:
        self.active = False
        self.text_color = PROCESSING_TEXT_COLOR

    def _on_message(self, text: str) -> None:
        self.add_text(text)
        self.output.emit(text)

    def _on_finished(self, _command: Command) -> None:
        self.text_color = DEFAULT_TEXT_COLOR
        self.add_text(self.whoami)
        self.active = True


def main(argv: list[str] | None = None) -> int:
    """Run an interactive shell on standard input until end of file."""
    parser = argparse.ArgumentParser(
        prog="composershell", description="Interactive console for Composer projects."
    )
    parser.add_argument(
        "-d", "--directory", default=os.getcwd(), help="directory the shell starts in"
    )
    parser.add_argument("--settings", default=None, help="path of the settings file")
    args = parser.parse_args(argv)

    settings = AppSettings.load(args.settings)
    with WorkerPool(settings.worker_threads) as pool:
        shell = Shell(build_invoker(pool), make_whoami(), args.directory)
        shell.output.connect(print)
        if sys.stdout.isatty():
            shell.cleared.connect(lambda: print(_CLEAR_SCREEN, end=""))

        print(WELCOME_TEXT)
        while True:
            try:
                line = input(shell.whoami)
            except EOFError:
                print()
                break
            try:
                shell.execute(line)
            except CommandNotFoundError as error:
                print(error, file=sys.stderr)
    return 0