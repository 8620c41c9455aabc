"""Visitor - double dispatch on the item's variant tag."""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from decimal import ROUND_HALF_EVEN, Decimal
from enum import Enum
from typing import Any, Callable, ClassVar, Dict, Optional

from pydantic import Field

from patterncatalog.domain.base.exceptions import UnsupportedVariantError
from patterncatalog.domain.base.value_objects import ValueObject

logger = logging.getLogger(__name__)


class ItemKind(str, Enum):
    """Variant tags for visitable items."""
    LIQUOR = "liquor"
    TOBACCO = "tobacco"
    NECESSITY = "necessity"


class Item(ValueObject):
    """A priced item that can accept a visitor."""

    kind: ClassVar[ItemKind]
    price: float = Field(ge=0)

    def accept(self, visitor: "Visitor") -> Any:
        return visitor.visit(self)


class Liquor(Item):
    kind: ClassVar[ItemKind] = ItemKind.LIQUOR


class Tobacco(Item):
    kind: ClassVar[ItemKind] = ItemKind.TOBACCO


class Necessity(Item):
    kind: ClassVar[ItemKind] = ItemKind.NECESSITY


class Visitor(ABC):
    """
    Base visitor with one operation per item variant.

    visit() resolves the operation from a table keyed by the item's tag. A new
    visitor only has to implement the three operations; a new item variant
    needs a new tag, a new table entry and an operation on every visitor.
    """

    _operations: ClassVar[Dict[ItemKind, str]] = {
        ItemKind.LIQUOR: "visit_liquor",
        ItemKind.TOBACCO: "visit_tobacco",
        ItemKind.NECESSITY: "visit_necessity",
    }

    def visit(self, item: Item) -> Any:
        """Dispatch to the operation matching the item's variant."""
        kind = getattr(item, "kind", None)
        operation_name = self._operations.get(kind)
        if operation_name is None:
            raise UnsupportedVariantError(self.__class__.__name__, kind)

        operation: Callable[[Any], Any] = getattr(self, operation_name)
        logger.debug(f"{self.__class__.__name__} resolved {kind} to {operation_name}")
        return operation(item)

    @abstractmethod
    def visit_liquor(self, liquor: Liquor) -> Any:
        pass

    @abstractmethod
    def visit_tobacco(self, tobacco: Tobacco) -> Any:
        pass

    @abstractmethod
    def visit_necessity(self, necessity: Necessity) -> Any:
        pass


DEFAULT_TAX_RATES: Dict[ItemKind, float] = {
    ItemKind.LIQUOR: 0.18,
    ItemKind.TOBACCO: 0.32,
    ItemKind.NECESSITY: 0.01,
}

_CENTS = Decimal("0.01")


class TaxVisitor(Visitor):
    """Computes the price including tax, rounded half-even to two decimals."""

    def __init__(self, rates: Optional[Dict[ItemKind, float]] = None):
        self._rates = dict(DEFAULT_TAX_RATES)
        if rates:
            self._rates.update(rates)

    @property
    def rates(self) -> Dict[ItemKind, float]:
        return dict(self._rates)

    def _taxed(self, price: float, kind: ItemKind) -> float:
        # Decimal from str so 2.525 rounds as written, not as its binary approximation
        price_d = Decimal(str(price))
        total = price_d + price_d * Decimal(str(self._rates[kind]))
        return float(total.quantize(_CENTS, rounding=ROUND_HALF_EVEN))

    def visit_liquor(self, liquor: Liquor) -> float:
        return self._taxed(liquor.price, ItemKind.LIQUOR)

    def visit_tobacco(self, tobacco: Tobacco) -> float:
        return self._taxed(tobacco.price, ItemKind.TOBACCO)

    def visit_necessity(self, necessity: Necessity) -> float:
        return self._taxed(necessity.price, ItemKind.NECESSITY)


class CategoryVisitor(Visitor):
    """Labels each item with its shelf category."""

    def visit_liquor(self, liquor: Liquor) -> str:
        return "Alcoholic beverage"

    def visit_tobacco(self, tobacco: Tobacco) -> str:
        return "Tobacco product"

    def visit_necessity(self, necessity: Necessity) -> str:
        return "Daily necessity"
