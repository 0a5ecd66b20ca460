"""A multi-page dialog model with Back, Next, Finish and Cancel buttons."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any

from .commands import Signal


class DialogResult(IntEnum):
    """How a paginator was closed."""

    REJECTED = 0
    ACCEPTED = 1


class PaginatorError(RuntimeError):
    """Raised when a button is pressed that is hidden or disabled."""


@dataclass
class Button:
    """Visibility and enabled state of one paginator button."""

    label: str
    visible: bool = True
    enabled: bool = True

    @property
    def clickable(self) -> bool:
        return self.visible and self.enabled


class Paginator:
    """Shows one page at a time and walks through them.

    ``finished(result)`` is emitted whenever the paginator closes, followed
    by ``accepted()`` on Finish or ``rejected()`` on Cancel.
    """

    def __init__(self, title: str = "") -> None:
        self.title = title
        self.pages: list[Any] = []
        self.current_index = 0
        self.result: DialogResult | None = None
        self.back_button = Button("Back")
        self.next_button = Button("Next")
        self.finish_button = Button("Finish")
        self.cancel_button = Button("Cancel")
        self.accepted = Signal()
        self.rejected = Signal()
        self.finished = Signal()
        self._shown: Any = None

    @property
    def current_page(self) -> Any:
        """The page on display, or None before the paginator is started."""
        return self._shown

    def add_page(self, page: Any) -> None:
        """Append ``page``; it stays hidden until it is switched to."""
        self.pages.append(page)

    def block(self, flag: bool) -> None:
        """Disable Next and Finish when ``flag`` is true, enable them otherwise."""
        self.next_button.enabled = not flag
        self.finish_button.enabled = not flag

    def set_page(self, num: int) -> None:
        """Show page ``num`` and update which buttons are visible."""
        if not 0 <= num < len(self.pages):
            raise IndexError(f"page {num} out of range")
        self._shown = self.pages[num]
        self.current_index = num

        last = len(self.pages) - 1
        self.back_button.visible = num != 0
        self.next_button.visible = num < last
        self.finish_button.visible = num == last

    def start(self) -> "Paginator":
        """Open the paginator on its first page."""
        self.result = None
        self.set_page(0)
        return self

    def next(self) -> None:
        self._press(self.next_button)
        self.set_page(self.current_index + 1)

    def back(self) -> None:
        self._press(self.back_button)
        self.set_page(self.current_index - 1)

    def finish(self) -> None:
        self._press(self.finish_button)
        self._close(DialogResult.ACCEPTED)

    def cancel(self) -> None:
        self._press(self.cancel_button)
        self._close(DialogResult.REJECTED)

    def _press(self, button: Button) -> None:
        if not button.clickable:
            raise PaginatorError(f"{button.label} is not available")

    def _close(self, result: DialogResult) -> None:
        self.result = result
        self.finished.emit(result)
        if result is DialogResult.ACCEPTED:
            self.accepted.emit()
        else:
            self.rejected.emit()