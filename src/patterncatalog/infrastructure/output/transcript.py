"""Output adapters implementing the domain OutputPort."""

from typing import List


class TranscriptOutput:
    """Collects written lines in memory, in order."""

    def __init__(self):
        self._lines: List[str] = []

    def write(self, line: str) -> None:
        self._lines.append(line)

    @property
    def lines(self) -> List[str]:
        """Get a copy of all lines written so far."""
        return self._lines.copy()

    def clear(self) -> None:
        self._lines.clear()

    def __len__(self) -> int:
        return len(self._lines)


class ConsoleOutput:
    """Prints every line to stdout as it is written."""

    def write(self, line: str) -> None:
        print(line)
