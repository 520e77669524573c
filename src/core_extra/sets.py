"""Set disjointness and symmetric difference over `ValueSet`."""

from __future__ import annotations

from typing import Any

from .values import ValueSet


def disjoint_intersect(a: ValueSet, b: ValueSet) -> bool:
    return a.intersect(b).is_empty()


def disjoint_list_walk(a: ValueSet, b: ValueSet) -> bool:
    for item in a.to_list():
        if b.member(item):
            return False
    return True


def disjoint_fold(a: ValueSet, b: ValueSet) -> bool:
    return not a.foldl(lambda item, found: found or b.member(item), False)


def symmetric_difference_naive(a: ValueSet, b: ValueSet) -> ValueSet:
    return a.union(b).diff(a.intersect(b))


def merge_symmetric_difference(xs: list[Any], ys: list[Any]) -> list[Any]:
    """Two-pointer merge of two sorted lists, keeping elements found in only one.

    Both inputs must be strictly ascending and duplicate-free, as produced by
    `ValueSet.to_list`. This precondition is not checked; unsorted input gives
    an unspecified result. The output is strictly ascending.
    """
    out: list[Any] = []
    i = 0
    j = 0
    while i < len(xs) and j < len(ys):
        x = xs[i]
        y = ys[j]
        if x == y:
            i += 1
            j += 1
        elif x < y:
            out.append(x)
            i += 1
        else:
            out.append(y)
            j += 1
    out.extend(xs[i:])
    out.extend(ys[j:])
    return out


def symmetric_difference_merge(a: ValueSet, b: ValueSet) -> ValueSet:
    return ValueSet.from_list(merge_symmetric_difference(a.to_list(), b.to_list()))
