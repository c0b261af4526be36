"""Minimal synchronous signals used for save notifications and page actions."""

from __future__ import annotations

from typing import Any, Callable, Generic, List, TypeVar

R = TypeVar("R")


class Signal(Generic[R]):
    """Ordered list of handlers invoked synchronously on ``emit``."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._handlers: List[Callable[..., R]] = []

    def connect(self, handler: Callable[..., R]) -> Callable[..., R]:
        self._handlers.append(handler)
        return handler

    def disconnect(self, handler: Callable[..., R]) -> None:
        self._handlers.remove(handler)

    def __len__(self) -> int:
        return len(self._handlers)

    def emit(self, *args: Any, **kwargs: Any) -> List[R]:
        return [handler(*args, **kwargs) for handler in list(self._handlers)]


class CancellableSignal(Signal[bool]):
    """Signal whose handlers may veto the pending operation by returning ``False``."""

    def emit(self, *args: Any, **kwargs: Any) -> List[bool]:
        results = []
        for handler in list(self._handlers):
            result = handler(*args, **kwargs)
            results.append(result)
            if result is False:
                break
        return results

    def allowed(self, *args: Any, **kwargs: Any) -> bool:
        return all(result is not False for result in self.emit(*args, **kwargs))
