"""Composite - a group answers the same interface as its members."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Optional, Tuple

from patterncatalog.domain.base.ports import NullOutput, OutputPort


class View(ABC):
    """Something drawable at a position."""

    def __init__(self, x: int, y: int, output: Optional[OutputPort] = None):
        self.x = x
        self.y = y
        self.output = output if output is not None else NullOutput()

    @abstractmethod
    def draw(self) -> None:
        pass


class LineView(View):
    def draw(self) -> None:
        self.output.write(f"Draw line to {self.x}, {self.y}")


class TextView(View):
    def __init__(self, x: int, y: int, text: str, output: Optional[OutputPort] = None):
        super().__init__(x, y, output)
        self.text = text

    def draw(self) -> None:
        self.output.write(f"Draw text {self.text} to {self.x}, {self.y}")


class ViewGroup(View):
    """Draws itself, then every child in declaration order."""

    def __init__(
        self,
        x: int,
        y: int,
        children: Iterable[View],
        output: Optional[OutputPort] = None,
    ):
        super().__init__(x, y, output)
        self._children: Tuple[View, ...] = tuple(children)

    @property
    def children(self) -> Tuple[View, ...]:
        return self._children

    def draw(self) -> None:
        self.output.write(f"Draw view group to {self.x}, {self.y}")
        for view in self._children:
            view.draw()
