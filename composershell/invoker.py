"""Dispatches console commands to their handlers on a worker pool."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Mapping
from concurrent.futures import Future
from types import MappingProxyType

from .command import Command
from .commands import AbstractCommand, Signal
from .concurrency import WorkerPool, shared_pool

UNKNOWN = "unknown"


class CommandNotFoundError(LookupError):
    """Raised when no handler exists for a command name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Command {name} does not exists")
        self.name = name


class Invoker:
    """Runs commands by name; unhandled names go to the ``unknown`` handler.

    Emits ``dequeued(fullname)`` for each command taken from a pasted batch.
    """

    def __init__(
        self,
        commands: Mapping[str, AbstractCommand],
        pool: WorkerPool | None = None,
    ) -> None:
        self._commands = dict(commands)
        self._pool = pool
        self.dequeued = Signal()

    @property
    def commands(self) -> Mapping[str, AbstractCommand]:
        """The handlers by name, read only."""
        return MappingProxyType(self._commands)

    @property
    def pool(self) -> WorkerPool:
        if self._pool is None:
            self._pool = shared_pool()
        return self._pool

    def exists(self, name: str) -> bool:
        return name in self._commands

    def get_command(self, name: str) -> AbstractCommand:
        """Return the handler registered under exactly ``name``."""
        try:
            return self._commands[name]
        except KeyError:
            raise CommandNotFoundError(name) from None

    def execute(self, command: Command) -> None:
        """Run ``command`` on the current thread."""
        key = command.name.lower()
        if not self.exists(key):
            if not self.exists(UNKNOWN):
                raise CommandNotFoundError(command.name)
            key = UNKNOWN
        handler = self._commands[key]
        handler.command = command
        handler.run()

    def invoke(self, command: Command) -> Future:
        """Run ``command`` on the pool."""
        return self.pool.submit(lambda: self.execute(command))

    def invoke_many(self, commands: Iterable[Command]) -> Future:
        """Run a pasted batch on the pool, one after another.

        Every command is reported through ``dequeued``; empty commands and
        the final one, which holds the unfinished last line, are not run.
        """
        queue = deque(commands)

        def work() -> None:
            while queue:
                command = queue.popleft()
                self.dequeued.emit(command.fullname)
                if queue and command:
                    self.execute(command)

        return self.pool.submit(work)