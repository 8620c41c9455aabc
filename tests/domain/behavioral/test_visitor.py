import pytest
from pydantic import ValidationError as PydanticValidationError

from patterncatalog.domain.base.exceptions import UnsupportedVariantError
from patterncatalog.domain.behavioral.visitor import (
    CategoryVisitor,
    Item,
    ItemKind,
    Liquor,
    Necessity,
    TaxVisitor,
    Tobacco,
    Visitor,
)


class RecordingVisitor(Visitor):
    def __init__(self):
        self.calls = []

    def visit_liquor(self, liquor):
        self.calls.append("liquor")
        return "liquor"

    def visit_tobacco(self, tobacco):
        self.calls.append("tobacco")
        return "tobacco"

    def visit_necessity(self, necessity):
        self.calls.append("necessity")
        return "necessity"


@pytest.mark.parametrize(
    "item, expected",
    [
        (Liquor(price=10.0), "liquor"),
        (Tobacco(price=10.0), "tobacco"),
        (Necessity(price=10.0), "necessity"),
    ],
)
def test_accept_invokes_only_the_matching_operation(item, expected):
    visitor = RecordingVisitor()

    result = item.accept(visitor)

    assert result == expected
    assert visitor.calls == [expected]


def test_dispatch_is_independent_of_other_visitors():
    items = [Liquor(price=1.0), Tobacco(price=1.0), Necessity(price=1.0)]

    labels = [item.accept(CategoryVisitor()) for item in items]
    recorder = RecordingVisitor()
    for item in items:
        item.accept(recorder)

    assert labels == ["Alcoholic beverage", "Tobacco product", "Daily necessity"]
    assert recorder.calls == ["liquor", "tobacco", "necessity"]


def test_tax_visitor_default_rates():
    tax_visitor = TaxVisitor()

    assert Necessity(price=2.5).accept(tax_visitor) == 2.52
    assert Tobacco(price=12.0).accept(tax_visitor) == 15.84
    assert Liquor(price=10.0).accept(tax_visitor) == 11.8


def test_tax_visitor_uses_supplied_rates():
    tax_visitor = TaxVisitor({ItemKind.NECESSITY: 0.0})

    assert Necessity(price=3.0).accept(tax_visitor) == 3.0
    assert tax_visitor.rates[ItemKind.LIQUOR] == 0.18


def test_item_without_variant_tag_is_rejected():
    with pytest.raises(UnsupportedVariantError) as exc_info:
        Item(price=1.0).accept(TaxVisitor())

    assert exc_info.value.family == "TaxVisitor"


def test_items_are_immutable_and_reject_negative_prices():
    item = Liquor(price=5.0)

    with pytest.raises(PydanticValidationError):
        item.price = 6.0
    with pytest.raises(PydanticValidationError):
        Liquor(price=-1.0)
