"""Keyboard edge detection: pressed this frame, released this frame, held for how long."""

from __future__ import annotations

from collections.abc import Iterable


class Keyboard:
    """Tracks key state frame by frame from the set of keys currently held."""

    def __init__(self) -> None:
        self._held: frozenset[int] = frozenset()
        self._down: frozenset[int] = frozenset()
        self._up: frozenset[int] = frozenset()
        self._keep: dict[int, int] = {}

    def update(self, pressed: Iterable[int]) -> None:
        """Take the key codes held this frame and refresh the edge state."""
        current = frozenset(pressed)
        previous = self._held
        for key in current & previous:
            self._keep[key] = self._keep.get(key, 0) + 1
        for key in current ^ previous:
            self._keep.pop(key, None)
        self._down = current - previous
        self._up = previous - current
        self._held = current

    def is_key_up(self, key: int) -> bool:
        """True on the frame ``key`` was released."""
        return key in self._up

    def is_key_down(self, key: int) -> bool:
        """True on the frame ``key`` was pressed."""
        return key in self._down

    def keep_count(self, key: int) -> int:
        """Frames ``key`` has been held beyond the one it was pressed on."""
        return self._keep.get(key, 0)