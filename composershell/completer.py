"""Command-name completion for the console."""

from __future__ import annotations

import re
from collections.abc import Iterable

_TRAILING_WORD = re.compile(r"\w*$")
MIN_PREFIX_LENGTH = 2


def _trailing_word(line: str) -> str:
    match = _TRAILING_WORD.search(line)
    return match.group(0) if match else ""


class Completer:
    """Suggests command names for the word being typed at the end of a line."""

    def __init__(self, completions: Iterable[str]) -> None:
        self.completions = list(completions)

    def completions_for(self, prefix: str) -> list[str]:
        """Completions starting with ``prefix``, ignoring case, in their given order."""
        folded = prefix.casefold()
        return [item for item in self.completions if item.casefold().startswith(folded)]

    def is_hint_needed(self, line: str, whoami: str) -> bool:
        """Whether the command name is still being typed: no space after the prompt."""
        content = line.strip().replace(whoami, "")
        return content.count(" ") == 0

    def suggest(self, line: str, whoami: str) -> list[str]:
        """Completions for the last word of ``line``.

        Nothing is suggested for words shorter than two characters or once
        arguments are being typed.
        """
        prefix = _trailing_word(line)
        if len(prefix) < MIN_PREFIX_LENGTH or not self.is_hint_needed(line, whoami):
            return []
        return self.completions_for(prefix)

    def apply(self, line: str, completion: str) -> str:
        """Replace the last word of ``line`` with ``completion`` and a space."""
        word = _trailing_word(line)
        return line[: len(line) - len(word)] + completion + " "