"""Counter - what a language-level singleton becomes when passed explicitly.

Whoever needs a shared counter receives the same instance from the
composition root; nothing here is global.
"""


class Counter:
    def __init__(self, start: int = 0):
        self._count = start

    def count(self) -> int:
        self._count += 1
        return self._count

    @property
    def current(self) -> int:
        return self._count
