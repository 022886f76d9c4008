"""Terminal output for the process table."""

from typing import Protocol

from rich.console import Console


class Terminal(Protocol):
    """Where rendered frames go."""

    def clear(self) -> None: ...

    def write(self, text: str) -> None: ...


class ConsoleTerminal:
    """Terminal backed by a rich Console on stdout."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console(highlight=False, emoji=False)

    def clear(self) -> None:
        self._console.clear()

    def write(self, text: str) -> None:
        # soft_wrap keeps the fixed-width rows intact on narrow terminals
        self._console.print(
            text, markup=False, emoji=False, highlight=False, soft_wrap=True
        )
