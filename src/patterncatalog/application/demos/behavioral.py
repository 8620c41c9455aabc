"""Behavioral pattern demonstrations."""

from patterncatalog.application.decorators import DemoContext, demonstration
from patterncatalog.application.dto.responses import PatternCategory
from patterncatalog.domain.behavioral.chain import Button, TextView, TouchEvent
from patterncatalog.domain.behavioral.command import EditorGui, EditorService
from patterncatalog.domain.behavioral.iterator import Friend, FriendCollection
from patterncatalog.domain.behavioral.mediator import Dialog
from patterncatalog.domain.behavioral.memento import Caretaker, Originator
from patterncatalog.domain.behavioral.observer import EmailReceiver, TVStation, WeatherReport
from patterncatalog.domain.behavioral.state import UI
from patterncatalog.domain.behavioral.strategy import always_true, is_even, is_odd, sum_with_condition
from patterncatalog.domain.behavioral.template import VideoDownloader
from patterncatalog.domain.behavioral.visitor import (
    CategoryVisitor,
    ItemKind,
    Necessity,
    TaxVisitor,
    Tobacco,
)

BEHAVIORAL = PatternCategory.BEHAVIORAL


@demonstration("chain_of_responsibility", BEHAVIORAL, "Touch event passed down a view tree")
def chain_demo(context: DemoContext) -> None:
    out = context.output
    chain = TextView(
        [TextView([Button([TextView(output=out)], output=out)], output=out)],
        output=out,
    )
    handled = chain.handle_touch_event(TouchEvent())
    out.write(f"Event handled: {handled}")


@demonstration("command", BEHAVIORAL, "Editor buttons bound to command objects")
def command_demo(context: DemoContext) -> None:
    editor_gui = EditorGui(EditorService(context.output))
    editor_gui.copy_button.click()
    editor_gui.paste_button.click()
    editor_gui.cut_button.click()


@demonstration("iterator", BEHAVIORAL, "Walk a friend list with a cursor")
def iterator_demo(context: DemoContext) -> None:
    my_friends = FriendCollection([Friend(name="Tony"), Friend(name="Tom"), Friend(name="TT")])
    while my_friends.has_next():
        context.output.write(f"Friend(name={my_friends.next().name})")


@demonstration("mediator", BEHAVIORAL, "Dialog components reporting through one mediator")
def mediator_demo(context: DemoContext) -> None:
    dialog = Dialog(context.output)
    dialog.check_box.on_check(True)
    dialog.radio_button.select(2)
    dialog.button.on_click()


@demonstration("memento", BEHAVIORAL, "Save and restore originator state")
def memento_demo(context: DemoContext) -> None:
    out = context.output
    originator = Originator("initial state")
    care_taker = Caretaker()
    care_taker.save(originator.capture())

    originator.state = "State #1"
    originator.state = "State #2"
    care_taker.save(originator.capture())

    originator.state = "State #3"
    out.write(f"Current State: {originator.state}")

    originator.restore(care_taker.restore_at(1))
    out.write(f"Second State: {originator.state}")

    originator.restore(care_taker.restore_at(0))
    out.write(f"Third State: {originator.state}")

    originator.restore(care_taker.restore_at(1))
    out.write(f"Last State: {originator.state}")


@demonstration("observer", BEHAVIORAL, "Weather report fanned out to subscribers")
def observer_demo(context: DemoContext) -> None:
    weather_report = WeatherReport()
    email_receiver = EmailReceiver(context.output)
    tv_station = TVStation(context.output)
    weather_report.register(email_receiver)
    weather_report.register(tv_station)

    weather_report.new_report("Cloudy, Temperature: 23 degrees")

    weather_report.unregister(email_receiver)
    weather_report.unregister(tv_station)


@demonstration("state", BEHAVIORAL, "UI rendering driven by its loading state")
def state_demo(context: DemoContext) -> None:
    ui = UI(context.output)
    ui.show_data()
    ui.fetch()
    ui.show_data()
    ui.done("Done")
    ui.show_data()


@demonstration("strategy", BEHAVIORAL, "Sum with a caller-supplied condition")
def strategy_demo(context: DemoContext) -> None:
    numbers = list(range(1, 9))
    context.output.write(f"Sum even numbers {sum_with_condition(numbers, is_even)}")
    context.output.write(f"Sum odd numbers {sum_with_condition(numbers, is_odd)}")
    context.output.write(f"Sum all numbers {sum_with_condition(numbers, always_true)}")


@demonstration("template_method", BEHAVIORAL, "Download skeleton with overridable steps")
def template_demo(context: DemoContext) -> None:
    video_downloader = VideoDownloader(
        "https://video",
        step_percent=context.config.download.step_percent,
        output=context.output,
    )
    video_downloader.start_download()


@demonstration("visitor", BEHAVIORAL, "Tax and category visitors over shop items")
def visitor_demo(context: DemoContext) -> None:
    tax = context.config.tax
    tax_visitor = TaxVisitor({
        ItemKind.LIQUOR: tax.liquor,
        ItemKind.TOBACCO: tax.tobacco,
        ItemKind.NECESSITY: tax.necessity,
    })
    category_visitor = CategoryVisitor()

    for item in (Necessity(price=2.5), Tobacco(price=12.0)):
        context.output.write(
            f"{item.accept(category_visitor)}: {item.accept(tax_visitor)}"
        )
