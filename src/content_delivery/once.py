"""Compute-once cell for values memoized on otherwise immutable models."""

import threading
from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")


class Once(Generic[T]):
    """Holds a value computed on first access.

    The first call to get() runs the factory under a lock; every later
    call returns the same object without running a factory again.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._computed = False
        self._value: T | None = None

    @property
    def computed(self) -> bool:
        return self._computed

    def get(self, factory: Callable[[], T]) -> T:
        if not self._computed:
            with self._lock:
                if not self._computed:
                    self._value = factory()
                    self._computed = True
        return self._value  # type: ignore[return-value]

    def __copy__(self) -> "Once[T]":
        # a copy starts uncomputed; it belongs to another owner
        return Once()

    def __deepcopy__(self, memo) -> "Once[T]":
        return Once()
