"""A single console command line, split into name and arguments."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Command:
    """A command typed into the console and the directory it runs in."""

    execution_directory: str = ""
    arguments: tuple[str, ...] = ()
    fullname: str = ""
    name: str = ""

    @classmethod
    def parse(cls, fullname: str, execution_directory: str) -> "Command":
        """Split ``fullname`` at its first space into name and arguments.

        Arguments are split on single spaces, so a line without arguments
        yields one empty argument and repeated spaces yield empty ones.
        """
        name, _, rest = fullname.partition(" ")
        return cls(
            execution_directory=execution_directory,
            arguments=tuple(rest.split(" ")),
            fullname=fullname,
            name=name,
        )

    def __bool__(self) -> bool:
        return bool(self.fullname)