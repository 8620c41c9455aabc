"""Memento - opaque snapshots kept by a caretaker."""
from __future__ import annotations

import copy
import logging
from typing import Any, List

from patterncatalog.domain.base.exceptions import InvalidIndexError

logger = logging.getLogger(__name__)


class Snapshot:
    """
    An immutable capture of an originator's state.

    Only Originator reads the captured value; everyone else just holds it.
    """

    __slots__ = ("_state",)

    def __init__(self, state: Any):
        object.__setattr__(self, "_state", copy.deepcopy(state))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Snapshot is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("Snapshot is immutable")

    def __repr__(self) -> str:
        return f"<Snapshot at {id(self):#x}>"


class Originator:
    """Owns mutable state and can capture or restore it. Keeps no history."""

    def __init__(self, state: Any):
        self.state = state

    def capture(self) -> Snapshot:
        return Snapshot(self.state)

    def restore(self, snapshot: Snapshot) -> None:
        self.state = copy.deepcopy(snapshot._state)


class Caretaker:
    """Append-only, indexed keeper of snapshots. Never looks inside them."""

    def __init__(self):
        self._snapshots: List[Snapshot] = []

    def save(self, snapshot: Snapshot) -> int:
        """Append a snapshot and return its index."""
        self._snapshots.append(snapshot)
        logger.debug(f"Saved snapshot #{len(self._snapshots) - 1}")
        return len(self._snapshots) - 1

    def restore_at(self, index: int) -> Snapshot:
        """
        Get the snapshot saved at index.

        Raises:
            InvalidIndexError: If index is outside 0..len-1 (negative indices included)
        """
        if not 0 <= index < len(self._snapshots):
            raise InvalidIndexError(index, len(self._snapshots))
        return self._snapshots[index]

    def __len__(self) -> int:
        return len(self._snapshots)
