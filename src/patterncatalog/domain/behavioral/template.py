"""Template method - a fixed skeleton with overridable steps."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from patterncatalog.domain.base.exceptions import ValidationError
from patterncatalog.domain.base.ports import NullOutput, OutputPort


class Downloader(ABC):
    """
    Drives a download from 0 to 100 percent.

    start_download() is the template: announce, report progress each step,
    finish. Subclasses only fill in on_percentage and on_done.
    """

    def __init__(self, url: str, step_percent: int = 10, output: Optional[OutputPort] = None):
        if not 1 <= step_percent <= 100:
            raise ValidationError(
                f"Download step must be between 1 and 100, got {step_percent}",
                details={"step_percent": step_percent},
            )
        self.url = url
        self.step_percent = step_percent
        self.output = output if output is not None else NullOutput()
        self._percentage = 0

    @property
    def percentage(self) -> int:
        return self._percentage

    def start_download(self) -> None:
        self.output.write(f"Start download {self.url}")
        while self._percentage < 100:
            self._percentage = min(100, self._percentage + self.step_percent)
            self.on_percentage(self._percentage)
        self.on_done()

    @abstractmethod
    def on_percentage(self, percentage: int) -> None:
        pass

    @abstractmethod
    def on_done(self) -> None:
        pass


class VideoDownloader(Downloader):
    def on_percentage(self, percentage: int) -> None:
        self.output.write(f"Downloading..... {percentage}%")

    def on_done(self) -> None:
        self.output.write(f"{self.url} done")
