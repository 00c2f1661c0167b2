"""Module: observable.py

Author: Michael Economou
Date: 2026-10-02

Minimal push-based observable value.

Listeners are called synchronously with ``(new, old)`` whenever the value
changes. For Qt-aware notifications see ui/adapters/qt_panel_layout.py.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")

Listener = Callable[[T, T], None]


class ObservableValue(Generic[T]):
    """A value that notifies subscribers on change."""

    def __init__(self, value: T):
        self._value = value
        self._listeners: list[Listener] = []

    def __repr__(self) -> str:
        return f"ObservableValue({self._value!r})"

    @property
    def value(self) -> T:
        return self._value

    @value.setter
    def value(self, new_value: T) -> None:
        self.set(new_value)

    def set(self, new_value: T) -> None:
        old_value = self._value
        if new_value == old_value:
            return
        self._value = new_value
        # Copy so listeners may unsubscribe while being notified
        for listener in list(self._listeners):
            listener(new_value, old_value)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` and return a callable that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    @property
    def listener_count(self) -> int:
        return len(self._listeners)
