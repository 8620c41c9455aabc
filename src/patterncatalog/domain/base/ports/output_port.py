"""Output port - where domain components send their human-readable lines."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class OutputPort(Protocol):
    """Protocol for line-oriented output.

    Domain components never print directly. Anything a pattern wants to show
    is written here and the adapter behind the port decides where it ends up
    (memory, console, nowhere).
    """

    def write(self, line: str) -> None:
        """Write a single line."""
        ...


class NullOutput:
    """Output that discards every line - the default for unwired components."""

    def write(self, line: str) -> None:
        pass
