"""
Text output sinks

Every component that reports something to the user writes through an
OutputSink instead of printing, so the domain model can be exercised
without capturing process output.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from rich.console import Console


class OutputSink(ABC):
    """
    Abstract destination for user-facing text lines
    """

    @abstractmethod
    def write(self, message: str) -> None:
        """
        Emit a single line of text

        Args:
            message: Line to emit, without trailing newline
        """
        pass


class ConsoleSink(OutputSink):
    """
    Sink backed by a rich Console

    Markup and highlighting are disabled: product and customer names are
    printed verbatim even if they contain square brackets.
    """

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def write(self, message: str) -> None:
        self.console.print(message, markup=False, highlight=False)


class MemorySink(OutputSink):
    """Sink that keeps every line in memory"""

    def __init__(self):
        self.lines: List[str] = []

    def write(self, message: str) -> None:
        self.lines.append(message)

    @property
    def text(self) -> str:
        """All collected lines joined by newlines"""
        return "\n".join(self.lines)

    def clear(self) -> None:
        self.lines.clear()


class NullSink(OutputSink):
    """Sink that discards everything"""

    def write(self, message: str) -> None:
        pass
