"""Output adapters package."""

from .transcript import ConsoleOutput, TranscriptOutput

__all__ = ["ConsoleOutput", "TranscriptOutput"]
