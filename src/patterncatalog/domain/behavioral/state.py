"""State - behavior selected by a closed set of state tags."""
from __future__ import annotations

import logging
from enum import Enum
from typing import Annotated, Callable, Dict, Literal, Optional, Tuple, Union

from pydantic import Field

from patterncatalog.domain.base.exceptions import (
    InvalidStateTransitionError,
    UnsupportedVariantError,
    ValidationError,
)
from patterncatalog.domain.base.ports import NullOutput, OutputPort
from patterncatalog.domain.base.value_objects import ValueObject

logger = logging.getLogger(__name__)


class Idle(ValueObject):
    tag: Literal["idle"] = "idle"


class Loading(ValueObject):
    tag: Literal["loading"] = "loading"


class Done(ValueObject):
    tag: Literal["done"] = "done"
    data: str


UiState = Annotated[Union[Idle, Loading, Done], Field(discriminator="tag")]


class UiTrigger(str, Enum):
    """Events that can move the UI to another state."""
    FETCH = "fetch"
    COMPLETE = "complete"


def _to_loading(payload: Optional[str]) -> Loading:
    return Loading()


def _to_done(payload: Optional[str]) -> Done:
    if payload is None:
        raise ValidationError("COMPLETE requires a payload")
    return Done(data=payload)


# (current tag, trigger) -> builder of the next state
_TRANSITIONS: Dict[Tuple[str, UiTrigger], Callable[[Optional[str]], ValueObject]] = {
    ("idle", UiTrigger.FETCH): _to_loading,
    ("loading", UiTrigger.COMPLETE): _to_done,
}

_DESCRIPTIONS: Dict[str, Callable[[ValueObject], str]] = {
    "idle": lambda state: "Call fetch to update state",
    "loading": lambda state: "Loading, please be patient",
    "done": lambda state: f"Show: {state.data}",
}


class UI:
    """A screen whose rendering depends on exactly one current state."""

    def __init__(self, output: Optional[OutputPort] = None):
        self._state: UiState = Idle()
        self.output = output if output is not None else NullOutput()

    @property
    def state(self) -> UiState:
        return self._state

    def advance(self, trigger: UiTrigger, payload: Optional[str] = None) -> UiState:
        """
        Apply a trigger to the current state.

        The next state is built completely before it replaces the current one,
        so a rejected trigger leaves the UI where it was.

        Raises:
            InvalidStateTransitionError: If the trigger is not valid in the current state
            ValidationError: If COMPLETE is given without a payload
        """
        trigger = UiTrigger(trigger)
        builder = _TRANSITIONS.get((self._state.tag, trigger))
        if builder is None:
            raise InvalidStateTransitionError(self._state.tag, trigger.value)

        new_state = builder(payload)
        logger.debug(f"UI state {self._state.tag} -> {new_state.tag} on {trigger.value}")
        self._state = new_state
        return new_state

    def fetch(self) -> UiState:
        return self.advance(UiTrigger.FETCH)

    def done(self, remote_data: str) -> UiState:
        return self.advance(UiTrigger.COMPLETE, remote_data)

    def describe(self) -> str:
        render = _DESCRIPTIONS.get(getattr(self._state, "tag", None))
        if render is None:
            raise UnsupportedVariantError("UiState", getattr(self._state, "tag", self._state))
        return render(self._state)

    def show_data(self) -> None:
        self.output.write(self.describe())
