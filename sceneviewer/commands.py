"""Commands triggered by user input."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Protocol


class _Closable(Protocol):
    def close(self) -> None: ...


class Command(ABC):
    """An action that can be executed on demand."""

    @abstractmethod
    def execute(self) -> None:
        """Perform the action."""


class ExitCommand(Command):
    """Asks a window to close."""

    def __init__(self, window: _Closable) -> None:
        self._window = window

    def execute(self) -> None:
        self._window.close()