"""Abstract factory - one factory per transport family."""
from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Callable, Dict, Optional

from patterncatalog.domain.base.exceptions import UnsupportedVariantError
from patterncatalog.domain.base.ports import OutputPort
from patterncatalog.domain.creational.factory_method import Ship, Transport


class TransportKind(str, Enum):
    CAR = "car"
    MOTORBIKE = "motorbike"
    SHIP = "ship"
    BOAT = "boat"


class Car(Transport):
    def deliver(self) -> None:
        self.output.write("Deliver by car")


class MotorBike(Transport):
    def deliver(self) -> None:
        self.output.write("Deliver by motorbike")


class Boat(Transport):
    def deliver(self) -> None:
        self.output.write("Deliver by boat")


class TransportFactory(ABC):
    """A family of transports. Asking for a kind outside the family is an error."""

    family: str = "transport"

    @property
    @abstractmethod
    def products(self) -> Dict[TransportKind, Callable[..., Transport]]:
        pass

    def supports(self, kind: TransportKind) -> bool:
        return kind in self.products

    def make_transport(self, kind: TransportKind, output: Optional[OutputPort] = None) -> Transport:
        product = self.products.get(kind)
        if product is None:
            raise UnsupportedVariantError(f"{self.family} transport factory", kind)
        return product(output)


class RoadTransportFactory(TransportFactory):
    family = "road"

    @property
    def products(self) -> Dict[TransportKind, Callable[..., Transport]]:
        return {TransportKind.CAR: Car, TransportKind.MOTORBIKE: MotorBike}


class SeaTransportFactory(TransportFactory):
    family = "sea"

    @property
    def products(self) -> Dict[TransportKind, Callable[..., Transport]]:
        return {TransportKind.SHIP: Ship, TransportKind.BOAT: Boat}


class LogisticFactory:
    """Picks the family factory for a kind, then lets it build the product."""

    _factories = (RoadTransportFactory(), SeaTransportFactory())

    @classmethod
    def create_transport(cls, kind: TransportKind, output: Optional[OutputPort] = None) -> Transport:
        for factory in cls._factories:
            if factory.supports(kind):
                return factory.make_transport(kind, output)
        raise UnsupportedVariantError(cls.__name__, kind)
