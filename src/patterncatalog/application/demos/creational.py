"""Creational pattern demonstrations."""

from patterncatalog.application.decorators import DemoContext, demonstration
from patterncatalog.application.dto.responses import PatternCategory
from patterncatalog.domain.creational import abstract_factory, factory_method
from patterncatalog.domain.creational.builder import DialogSpec
from patterncatalog.domain.creational.prototype import News
from patterncatalog.domain.creational.singleton import Counter

CREATIONAL = PatternCategory.CREATIONAL


@demonstration("factory_method", CREATIONAL, "Create a transport from its type")
def factory_method_demo(context: DemoContext) -> None:
    transport = factory_method.LogisticFactory.create_transport(
        factory_method.TransportType.TRUCK, context.output
    )
    transport.deliver()


@demonstration("abstract_factory", CREATIONAL, "Road and sea transport families")
def abstract_factory_demo(context: DemoContext) -> None:
    car = abstract_factory.LogisticFactory.create_transport(
        abstract_factory.TransportKind.CAR, context.output
    )
    car.deliver()
    boat = abstract_factory.LogisticFactory.create_transport(
        abstract_factory.TransportKind.BOAT, context.output
    )
    boat.deliver()


@demonstration("builder", CREATIONAL, "Assemble a dialog step by step")
def builder_demo(context: DemoContext) -> None:
    dialog = (
        DialogSpec.Builder()
        .set_title("Title")
        .set_content("Hello")
        .set_confirm_text("OK")
        .set_cancel_text("CANCEL")
        .build()
    )
    context.output.write(str(dialog))


@demonstration("prototype", CREATIONAL, "Copy news from an existing item")
def prototype_demo(context: DemoContext) -> None:
    first_news = News(title="Breaking", content="Broken")
    second_news = first_news.clone()

    context.output.write(f"News(title={second_news.title}, content={second_news.content})")
    context.output.write(
        f"Are first news and second news the same? {first_news is second_news}"
    )


@demonstration("singleton", CREATIONAL, "One explicitly shared counter")
def singleton_demo(context: DemoContext) -> None:
    counter = Counter()
    context.output.write(str(counter.count()))
    context.output.write(str(counter.count()))
