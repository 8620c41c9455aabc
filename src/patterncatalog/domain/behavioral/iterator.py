"""Iterator - walk a collection without exposing its storage."""
from __future__ import annotations

from typing import Iterable, Iterator, Tuple

from patterncatalog.domain.base.value_objects import ValueObject


class Friend(ValueObject):
    name: str


class FriendCollection:
    """
    A cursor over friends.

    Supports both the explicit has_next/next/reset cursor and Python's
    iterator protocol; the two share one position.
    """

    def __init__(self, friends: Iterable[Friend]):
        self._friends: Tuple[Friend, ...] = tuple(friends)
        self._position = 0

    def has_next(self) -> bool:
        return self._position < len(self._friends)

    def next(self) -> Friend:
        if not self.has_next():
            raise StopIteration
        friend = self._friends[self._position]
        self._position += 1
        return friend

    def reset(self) -> None:
        self._position = 0

    def __iter__(self) -> Iterator[Friend]:
        return self

    def __next__(self) -> Friend:
        return self.next()

    def __len__(self) -> int:
        return len(self._friends)
