"""`all` / `any` / `member` over a `Sequence`, four interchangeable strategies each.

Every strategy of a family returns the same boolean for every input. The
traversal strategies short-circuit on the deciding element; the fold
strategies always visit every element.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from .values import Sequence, is_absent

Predicate = Callable[[Any], bool]


# all


def all_index_walk(predicate: Predicate, seq: Sequence) -> bool:
    index = 0
    while True:
        value = seq.get(index)
        if is_absent(value):
            return True
        if not predicate(value):
            return False
        index += 1


def all_last_first(predicate: Predicate, seq: Sequence) -> bool:
    while seq.length() > 0:
        if not predicate(seq.get(seq.length() - 1)):
            return False
        seq = seq.pop()
    return True


def all_list(predicate: Predicate, seq: Sequence) -> bool:
    return all(predicate(item) for item in seq.to_list())


def all_fold(predicate: Predicate, seq: Sequence) -> bool:
    return seq.foldl(lambda item, acc: bool(predicate(item)) and acc, True)


# any


def any_index_walk(predicate: Predicate, seq: Sequence) -> bool:
    index = 0
    while True:
        value = seq.get(index)
        if is_absent(value):
            return False
        if predicate(value):
            return True
        index += 1


def any_last_first(predicate: Predicate, seq: Sequence) -> bool:
    while seq.length() > 0:
        if predicate(seq.get(seq.length() - 1)):
            return True
        seq = seq.pop()
    return False


def any_list(predicate: Predicate, seq: Sequence) -> bool:
    return any(predicate(item) for item in seq.to_list())


def any_fold(predicate: Predicate, seq: Sequence) -> bool:
    return seq.foldl(lambda item, acc: bool(predicate(item)) or acc, False)


# member


def member_index_walk(needle: Any, seq: Sequence) -> bool:
    return any_index_walk(lambda item: item == needle, seq)


def member_last_first(needle: Any, seq: Sequence) -> bool:
    return any_last_first(lambda item: item == needle, seq)


def member_list(needle: Any, seq: Sequence) -> bool:
    return any(item == needle for item in seq.to_list())


def member_fold(needle: Any, seq: Sequence) -> bool:
    return seq.foldr(lambda item, acc: bool(item == needle) or acc, False)
