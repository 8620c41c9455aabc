"""Prototype - new objects copied from an existing one."""
from __future__ import annotations

from typing import Any

from patterncatalog.domain.base.value_objects import ValueObject


class News(ValueObject):
    title: str
    content: str

    def clone(self, **changes: Any) -> "News":
        """Return a distinct copy, optionally with some fields replaced."""
        return self.model_validate({**self.model_dump(), **changes})
