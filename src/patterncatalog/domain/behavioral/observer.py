"""Observer - a subject fans a payload out to every registered observer."""
from __future__ import annotations

import logging
from typing import Dict, Generic, List, Optional, Protocol, TypeVar

from patterncatalog.domain.base.ports import NullOutput, OutputPort

logger = logging.getLogger(__name__)

T = TypeVar("T")
T_contra = TypeVar("T_contra", contravariant=True)


class Observer(Protocol[T_contra]):
    """Protocol for anything that wants to receive published payloads."""

    def notify(self, payload: T_contra) -> None:
        ...


class Subject(Generic[T]):
    """
    Holds a set of observers and delivers payloads to them synchronously.

    Membership is by identity: registering the same object twice is a no-op,
    even if it defines __eq__/__hash__. Delivery order is unspecified.
    """

    def __init__(self):
        self._observers: Dict[int, Observer[T]] = {}

    def register(self, observer: Observer[T]) -> None:
        if id(observer) in self._observers:
            return
        self._observers[id(observer)] = observer
        logger.debug(f"Registered observer {observer.__class__.__name__}")

    def unregister(self, observer: Observer[T]) -> None:
        if self._observers.pop(id(observer), None) is not None:
            logger.debug(f"Unregistered observer {observer.__class__.__name__}")

    def publish(self, payload: T) -> int:
        """
        Deliver payload once to every observer registered when the call starts.

        Registry changes made by observers during delivery take effect on the
        next publish. An observer that raises is logged and skipped.

        Returns:
            Number of observers that received the payload without error
        """
        recipients: List[Observer[T]] = list(self._observers.values())
        delivered = 0
        for observer in recipients:
            try:
                observer.notify(payload)
                delivered += 1
            except Exception as e:
                logger.error(f"Observer {observer.__class__.__name__} failed: {e}")
        return delivered

    def __contains__(self, observer: object) -> bool:
        return id(observer) in self._observers

    def __len__(self) -> int:
        return len(self._observers)


class WeatherReport(Subject[str]):
    """A subject publishing weather reports."""

    def new_report(self, report: str) -> int:
        return self.publish(report)


class TVStation:
    def __init__(self, output: Optional[OutputPort] = None):
        self.output = output if output is not None else NullOutput()

    def notify(self, payload: str) -> None:
        self.output.write(f"TV station got report: {payload}")


class EmailReceiver:
    def __init__(self, output: Optional[OutputPort] = None):
        self.output = output if output is not None else NullOutput()

    def notify(self, payload: str) -> None:
        self.output.write(f"Email receiver got report: {payload}")
