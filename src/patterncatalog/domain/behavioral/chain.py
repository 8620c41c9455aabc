"""Chain of responsibility - first handler to accept an event wins."""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Iterable, Optional, Tuple

from patterncatalog.domain.base.ports import NullOutput, OutputPort
from patterncatalog.domain.base.value_objects import ValueObject

logger = logging.getLogger(__name__)


class TouchEvent(ValueObject):
    """A touch at screen coordinates. Carries no behavior."""

    x: int = 0
    y: int = 0


class View(ABC):
    """
    A node in the handler tree.

    An event is offered to the node itself first, then to each child in
    declaration order, depth first. The first handler returning True stops
    the traversal and True propagates back to the root.
    """

    def __init__(self, children: Iterable["View"] = (), output: Optional[OutputPort] = None):
        self._children: Tuple[View, ...] = tuple(children)
        self.output = output if output is not None else NullOutput()

    @property
    def children(self) -> Tuple["View", ...]:
        return self._children

    def handle_touch_event(self, event: TouchEvent) -> bool:
        if self.on_event(event):
            logger.debug(f"{self.__class__.__name__} handled {event!r}")
            return True
        for child in self._children:
            if child.handle_touch_event(event):
                return True
        return False

    @abstractmethod
    def on_event(self, event: TouchEvent) -> bool:
        """Return True to consume the event, False to pass it on."""


class TextView(View):
    def on_event(self, event: TouchEvent) -> bool:
        self.output.write("I am TextView, I don't want to handle the event")
        return False


class Button(View):
    def on_event(self, event: TouchEvent) -> bool:
        self.output.write("I am Button, Let me handle the event")
        return True
