"""Command - requests wrapped as objects so invokers stay ignorant of receivers."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Optional

from patterncatalog.domain.base.ports import NullOutput, OutputPort


class Command(ABC):
    @abstractmethod
    def execute(self) -> None:
        pass


class EditorService:
    """The receiver: does the actual text editing."""

    def __init__(self, output: Optional[OutputPort] = None):
        self.output = output if output is not None else NullOutput()

    def copy(self) -> None:
        self.output.write("Copy text")

    def cut(self) -> None:
        self.output.write("Cut text")

    def paste(self) -> None:
        self.output.write("Paste text")


class CopyCommand(Command):
    def __init__(self, editor_service: EditorService):
        self._editor_service = editor_service

    def execute(self) -> None:
        self._editor_service.copy()


class CutCommand(Command):
    def __init__(self, editor_service: EditorService):
        self._editor_service = editor_service

    def execute(self) -> None:
        self._editor_service.cut()


class PasteCommand(Command):
    def __init__(self, editor_service: EditorService):
        self._editor_service = editor_service

    def execute(self) -> None:
        self._editor_service.paste()


OnClickListener = Callable[[], None]


class EditorButton:
    """The invoker: knows only a listener to call."""

    def __init__(self, on_click_listener: OnClickListener):
        self._on_click_listener = on_click_listener

    def click(self) -> None:
        self._on_click_listener()


class EditorGui:
    """Wires one button per command."""

    def __init__(self, editor_service: EditorService):
        self.copy_button = EditorButton(CopyCommand(editor_service).execute)
        self.paste_button = EditorButton(PasteCommand(editor_service).execute)
        self.cut_button = EditorButton(CutCommand(editor_service).execute)
