"""Structural `Sequence` transforms: filter-map, unzip and reverse."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from .values import Sequence, is_absent

MaybeFn = Callable[[Any], Any]


# filter_map: `fn` returns a value, or ABSENT to drop the element.


def filter_map_push(fn: MaybeFn, seq: Sequence) -> Sequence:
    def step(item: Any, acc: Sequence) -> Sequence:
        mapped = fn(item)
        if is_absent(mapped):
            return acc
        return acc.push(mapped)

    return seq.foldl(step, Sequence.empty())


def filter_map_list(fn: MaybeFn, seq: Sequence) -> Sequence:
    mapped = (fn(item) for item in seq.to_list())
    return Sequence.from_list(value for value in mapped if not is_absent(value))


def filter_map_cons(fn: MaybeFn, seq: Sequence) -> Sequence:
    def step(item: Any, acc: list[Any]) -> list[Any]:
        mapped = fn(item)
        if not is_absent(mapped):
            acc.append(mapped)
        return acc

    # Right fold collects back to front.
    collected = seq.foldr(step, [])
    collected.reverse()
    return Sequence.from_list(collected)


# unzip


def unzip_projections(seq: Sequence) -> tuple[Sequence, Sequence]:
    return seq.map(lambda pair: pair[0]), seq.map(lambda pair: pair[1])


def unzip_list(seq: Sequence) -> tuple[Sequence, Sequence]:
    pairs = seq.to_list()
    if not pairs:
        return Sequence.empty(), Sequence.empty()
    firsts, seconds = zip(*pairs)
    return Sequence.from_list(firsts), Sequence.from_list(seconds)


def unzip_foldl(seq: Sequence) -> tuple[Sequence, Sequence]:
    def step(pair: tuple[Any, Any], acc: tuple[Sequence, Sequence]) -> tuple[Sequence, Sequence]:
        firsts, seconds = acc
        return firsts.push(pair[0]), seconds.push(pair[1])

    return seq.foldl(step, (Sequence.empty(), Sequence.empty()))


def unzip_foldr(seq: Sequence) -> tuple[Sequence, Sequence]:
    def step(pair: tuple[Any, Any], acc: tuple[Sequence, Sequence]) -> tuple[Sequence, Sequence]:
        firsts, seconds = acc
        return firsts.cons(pair[0]), seconds.cons(pair[1])

    return seq.foldr(step, (Sequence.empty(), Sequence.empty()))


# reverse


def reverse_fold_list(seq: Sequence) -> Sequence:
    def step(item: Any, acc: list[Any]) -> list[Any]:
        acc.insert(0, item)
        return acc

    return Sequence.from_list(seq.foldl(step, []))


def reverse_fold_cons(seq: Sequence) -> Sequence:
    return seq.foldl(lambda item, acc: acc.cons(item), Sequence.empty())


def reverse_list(seq: Sequence) -> Sequence:
    items = seq.to_list()
    items.reverse()
    return Sequence.from_list(items)
