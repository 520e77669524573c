"""Index-pair mapping of a `Sequence` into a list, `fn(index, value)` per element."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from .values import Sequence

IndexedFn = Callable[[int, Any], Any]


def indexed_map_to_list_foldr(fn: IndexedFn, seq: Sequence) -> list[Any]:
    """Right fold prepending to the result, index counting down from the end."""

    def step(item: Any, state: tuple[int, list[Any]]) -> tuple[int, list[Any]]:
        index, out = state
        out.append(fn(index, item))
        return index - 1, out

    _, out = seq.foldr(step, (seq.length() - 1, []))
    # Appended back to front; flip once instead of prepending per element.
    out.reverse()
    return out


def indexed_map_to_list_indexed_list(fn: IndexedFn, seq: Sequence) -> list[Any]:
    return [fn(index, item) for index, item in seq.to_indexed_list()]


def indexed_map_to_list_list(fn: IndexedFn, seq: Sequence) -> list[Any]:
    return [fn(index, item) for index, item in enumerate(seq.to_list())]


def indexed_map_to_list_sequence(fn: IndexedFn, seq: Sequence) -> list[Any]:
    return seq.indexed_map(fn).to_list()
