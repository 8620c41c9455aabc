"""Builder - assemble an immutable dialog step by step."""
from __future__ import annotations

from typing import Optional

from patterncatalog.domain.base.value_objects import ValueObject


class DialogSpec(ValueObject):
    title: Optional[str] = None
    content: Optional[str] = None
    confirm_text: Optional[str] = None
    cancel_text: Optional[str] = None

    class Builder:
        def __init__(self):
            self._title: Optional[str] = None
            self._content: Optional[str] = None
            self._confirm_text: Optional[str] = None
            self._cancel_text: Optional[str] = None

        def set_title(self, title: str) -> "DialogSpec.Builder":
            self._title = title
            return self

        def set_content(self, content: str) -> "DialogSpec.Builder":
            self._content = content
            return self

        def set_confirm_text(self, confirm_text: str) -> "DialogSpec.Builder":
            self._confirm_text = confirm_text
            return self

        def set_cancel_text(self, cancel_text: str) -> "DialogSpec.Builder":
            self._cancel_text = cancel_text
            return self

        def build(self) -> "DialogSpec":
            return DialogSpec(
                title=self._title,
                content=self._content,
                confirm_text=self._confirm_text,
                cancel_text=self._cancel_text,
            )

    def __str__(self) -> str:
        return (
            f"Dialog(title={self.title}, content={self.content}, "
            f"confirmText={self.confirm_text}, cancelText={self.cancel_text})"
        )
