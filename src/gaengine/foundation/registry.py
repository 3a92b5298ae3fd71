"""
Name -> factory lookup used for the pluggable operator strategies.
"""

from __future__ import annotations

from typing import Callable, Generic, Iterator, TypeVar, overload

T = TypeVar("T")
_MISSING = object()


class Registry(Generic[T]):
    """Named factories (classes or callables); ``register`` also works as a decorator."""

    def __init__(self, name: str = "Registry") -> None:
        self.name = name
        self._entries: dict[str, T] = {}

    @overload
    def register(self, key: str, *, override: bool = ...) -> Callable[[T], T]: ...

    @overload
    def register(self, key: str, item: T, *, override: bool = ...) -> T: ...

    def register(self, key, item=_MISSING, *, override=False):
        def add(obj: T) -> T:
            if not override and key in self._entries:
                raise ValueError(f"{self.name} registry already has an entry named '{key}'")
            self._entries[key] = obj
            return obj

        return add if item is _MISSING else add(item)

    def get(self, key: str) -> T:
        try:
            return self._entries[key]
        except KeyError:
            raise KeyError(f"{self.name} registry has no entry named '{key}'") from None

    def names(self) -> list[str]:
        return sorted(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


__all__ = ["Registry"]
