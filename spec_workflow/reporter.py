"""Progress reporting for long-running CLI steps.

Commands receive a :class:`Reporter` instead of touching a global console, so
library code stays silent unless a caller wires in :class:`ConsoleReporter`.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from rich.console import Console
from rich.status import Status


class Reporter(ABC):
    """Receives progress, success and failure events."""

    @abstractmethod
    def start(self, message: str) -> None:
        """A step began."""

    @abstractmethod
    def succeed(self, message: str) -> None:
        """The current step finished successfully."""

    @abstractmethod
    def fail(self, message: str) -> None:
        """The current step failed."""

    @abstractmethod
    def info(self, message: str) -> None:
        """Informational message outside of any step."""

    @abstractmethod
    def warn(self, message: str) -> None:
        """Warning message outside of any step."""


class NullReporter(Reporter):
    """Reporter that discards every event."""

    def start(self, message: str) -> None:
        pass

    def succeed(self, message: str) -> None:
        pass

    def fail(self, message: str) -> None:
        pass

    def info(self, message: str) -> None:
        pass

    def warn(self, message: str) -> None:
        pass


class ConsoleReporter(Reporter):
    """Rich console reporter showing a spinner while a step runs."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()
        self._status: Status | None = None

    def _stop(self) -> None:
        if self._status is not None:
            self._status.stop()
            self._status = None

    def start(self, message: str) -> None:
        self._stop()
        self._status = self.console.status(message)
        self._status.start()

    def succeed(self, message: str) -> None:
        self._stop()
        self.console.print(f"[green]✓[/green] {message}")

    def fail(self, message: str) -> None:
        self._stop()
        self.console.print(f"[red]✗[/red] {message}")

    def info(self, message: str) -> None:
        self.console.print(message)

    def warn(self, message: str) -> None:
        self.console.print(f"[yellow]⚠[/yellow]  {message}")
