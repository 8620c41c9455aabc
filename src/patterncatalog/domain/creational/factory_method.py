"""Factory method - callers name a transport type, the factory picks the class."""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, Dict, Optional

from patterncatalog.domain.base.exceptions import UnsupportedVariantError
from patterncatalog.domain.base.ports import NullOutput, OutputPort

logger = logging.getLogger(__name__)


class TransportType(str, Enum):
    TRUCK = "truck"
    SHIP = "ship"


class Transport(ABC):
    def __init__(self, output: Optional[OutputPort] = None):
        self.output = output if output is not None else NullOutput()

    @abstractmethod
    def deliver(self) -> None:
        pass


class Truck(Transport):
    def deliver(self) -> None:
        self.output.write("Deliver by truck")


class Ship(Transport):
    def deliver(self) -> None:
        self.output.write("Deliver by ship")


class LogisticFactory:
    """Resolves a TransportType through a registration table."""

    _registry: Dict[TransportType, Callable[..., Transport]] = {
        TransportType.TRUCK: Truck,
        TransportType.SHIP: Ship,
    }

    @classmethod
    def create_transport(
        cls, transport_type: TransportType, output: Optional[OutputPort] = None
    ) -> Transport:
        """
        Create the transport for the given type.

        Raises:
            UnsupportedVariantError: If no transport is registered for the type
        """
        factory = cls._registry.get(transport_type)
        if factory is None:
            raise UnsupportedVariantError(cls.__name__, transport_type)
        logger.debug(f"Creating transport for {transport_type}")
        return factory(output)
