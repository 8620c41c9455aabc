"""Mediator - components talk to one hub instead of to each other."""
from __future__ import annotations

import logging
from typing import Annotated, Callable, Dict, Literal, Optional, Protocol, Union

from pydantic import Field

from patterncatalog.domain.base.exceptions import UnsupportedVariantError
from patterncatalog.domain.base.ports import NullOutput, OutputPort
from patterncatalog.domain.base.value_objects import ValueObject

logger = logging.getLogger(__name__)


class CheckBoxEvent(ValueObject):
    kind: Literal["checkbox"] = "checkbox"
    name: str
    checked: bool


class RadioEvent(ValueObject):
    kind: Literal["radio"] = "radio"
    name: str
    selected_index: int


class ButtonEvent(ValueObject):
    kind: Literal["button"] = "button"
    name: str


Notification = Annotated[
    Union[CheckBoxEvent, RadioEvent, ButtonEvent], Field(discriminator="kind")
]


class Mediator(Protocol):
    """The single entry point every component reports to."""

    def notify(self, notification: Notification) -> None:
        ...


class Component:
    """A UI component that knows its name and its mediator, nothing else."""

    def __init__(self, name: str, mediator: Mediator):
        self._name = name
        self._mediator = mediator

    @property
    def name(self) -> str:
        return self._name

    @property
    def mediator(self) -> Mediator:
        return self._mediator


class CheckBox(Component):
    def on_check(self, checked: bool) -> None:
        self._mediator.notify(CheckBoxEvent(name=self._name, checked=checked))


class RadioButton(Component):
    def select(self, index: int) -> None:
        self._mediator.notify(RadioEvent(name=self._name, selected_index=index))


class DialogButton(Component):
    def on_click(self) -> None:
        self._mediator.notify(ButtonEvent(name=self._name))


class Dialog:
    """
    A dialog acting as mediator for its components.

    notify() switches on the notification's kind. A new component type needs a
    new notification variant and a new entry in the handler table.
    """

    def __init__(self, output: Optional[OutputPort] = None):
        self.output = output if output is not None else NullOutput()
        self._handlers: Dict[str, Callable[..., None]] = {
            "checkbox": self._on_checkbox,
            "radio": self._on_radio,
            "button": self._on_button,
        }
        self.check_box = CheckBox("myCheckBox", self)
        self.radio_button = RadioButton("myRadioButton", self)
        self.button = DialogButton("myButton", self)

    def notify(self, notification: Notification) -> None:
        kind = getattr(notification, "kind", None)
        handler = self._handlers.get(kind)
        if handler is None:
            raise UnsupportedVariantError("Dialog", kind)
        logger.debug(f"Dialog routing {kind} notification from {notification.name}")
        handler(notification)

    def _on_checkbox(self, event: CheckBoxEvent) -> None:
        self.output.write(f"{event.name} is checked {str(event.checked).lower()}")

    def _on_radio(self, event: RadioEvent) -> None:
        self.output.write(f"{event.name} is selected {event.selected_index}")

    def _on_button(self, event: ButtonEvent) -> None:
        self.output.write(f"{event.name} clicked")
