"""Adapter - convert remote records into what the list view accepts."""
from __future__ import annotations

from typing import Iterable, List, Optional

from patterncatalog.domain.base.ports import NullOutput, OutputPort
from patterncatalog.domain.base.value_objects import ValueObject


class ListViewData(ValueObject):
    title: str
    content: str


class RemoteData(ValueObject):
    """Shape returned by the remote API; not accepted by ListView."""

    remote_title: str
    remote_content: str


class ListView:
    def __init__(self, output: Optional[OutputPort] = None):
        self.output = output if output is not None else NullOutput()

    def show_list_view_data(self, items: Iterable[ListViewData]) -> None:
        for item in items:
            if not isinstance(item, ListViewData):
                raise TypeError(f"ListView cannot show {type(item).__name__}")
            self.output.write(f"ListViewData(title={item.title}, content={item.content})")


class ListViewDataAdapter:
    def to_list_view_data(self, remote_data: RemoteData) -> ListViewData:
        return ListViewData(
            title=remote_data.remote_title,
            content=remote_data.remote_content,
        )

    def adapt_all(self, remote_list: Iterable[RemoteData]) -> List[ListViewData]:
        return [self.to_list_view_data(item) for item in remote_list]
