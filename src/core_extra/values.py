"""Immutable container value types shared by every strategy family."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any, Final


class _AbsentType(Enum):
    ABSENT = "absent"

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT: Final = _AbsentType.ABSENT
"""Marker for "no value": out-of-range lookups and dropped filter-map results."""


def is_absent(value: object) -> bool:
    return value is ABSENT


@dataclass(frozen=True)
class Sequence:
    """Ordered, finite, randomly indexable container.

    Every operation returns a new `Sequence`; the backing tuple is never
    mutated. `get` outside `0 .. length-1` yields `ABSENT` instead of raising.
    """

    items: tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))

    @classmethod
    def empty(cls) -> "Sequence":
        return _EMPTY_SEQUENCE

    @classmethod
    def from_list(cls, items: Iterable[Any]) -> "Sequence":
        return cls(tuple(items))

    def length(self) -> int:
        return len(self.items)

    def get(self, index: int) -> Any:
        if 0 <= index < len(self.items):
            return self.items[index]
        return ABSENT

    def push(self, value: Any) -> "Sequence":
        return Sequence(self.items + (value,))

    def cons(self, value: Any) -> "Sequence":
        return Sequence((value,) + self.items)

    def pop(self) -> "Sequence":
        if not self.items:
            return self
        return Sequence(self.items[:-1])

    def to_list(self) -> list[Any]:
        return list(self.items)

    def to_indexed_list(self) -> list[tuple[int, Any]]:
        return list(enumerate(self.items))

    def foldl(self, fn: Callable[[Any, Any], Any], acc: Any) -> Any:
        for item in self.items:
            acc = fn(item, acc)
        return acc

    def foldr(self, fn: Callable[[Any, Any], Any], acc: Any) -> Any:
        for item in reversed(self.items):
            acc = fn(item, acc)
        return acc

    def map(self, fn: Callable[[Any], Any]) -> "Sequence":
        return Sequence(tuple(fn(item) for item in self.items))

    def indexed_map(self, fn: Callable[[int, Any], Any]) -> "Sequence":
        return Sequence(tuple(fn(idx, item) for idx, item in enumerate(self.items)))

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.items)

    def __repr__(self) -> str:
        return f"Sequence({list(self.items)!r})"


_EMPTY_SEQUENCE: Final[Sequence] = Sequence()


@dataclass(frozen=True)
class ValueSet:
    """Unordered collection of unique, orderable, hashable elements.

    `to_list` always returns the elements in strictly ascending order, which
    is what the merge-based symmetric difference relies on.
    """

    elements: frozenset[Any] = frozenset()

    def __post_init__(self) -> None:
        if not isinstance(self.elements, frozenset):
            object.__setattr__(self, "elements", frozenset(self.elements))

    @classmethod
    def empty(cls) -> "ValueSet":
        return _EMPTY_SET

    @classmethod
    def from_list(cls, items: Iterable[Any]) -> "ValueSet":
        return cls(frozenset(items))

    def member(self, value: Any) -> bool:
        return value in self.elements

    def insert(self, value: Any) -> "ValueSet":
        if value in self.elements:
            return self
        return ValueSet(self.elements | {value})

    def union(self, other: "ValueSet") -> "ValueSet":
        return ValueSet(self.elements | other.elements)

    def intersect(self, other: "ValueSet") -> "ValueSet":
        return ValueSet(self.elements & other.elements)

    def diff(self, other: "ValueSet") -> "ValueSet":
        return ValueSet(self.elements - other.elements)

    def is_empty(self) -> bool:
        return not self.elements

    def size(self) -> int:
        return len(self.elements)

    def to_list(self) -> list[Any]:
        return sorted(self.elements)

    def foldl(self, fn: Callable[[Any, Any], Any], acc: Any) -> Any:
        for item in self.to_list():
            acc = fn(item, acc)
        return acc

    def __contains__(self, value: object) -> bool:
        return value in self.elements

    def __len__(self) -> int:
        return len(self.elements)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.to_list())

    def __repr__(self) -> str:
        return f"ValueSet({self.to_list()!r})"


_EMPTY_SET: Final[ValueSet] = ValueSet()

