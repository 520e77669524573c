"""jax.numpy-backed strategies for numeric sequences and sets.

Each function matches the contract of its pure-Python siblings. Elements
must be all integers (bools count as integers) or all floats, and must
survive conversion to the array dtype unchanged; anything else raises
`UnsupportedElementError`. 64-bit mode is enabled only for the duration of
each call, never globally.
"""

from __future__ import annotations

import contextlib
import math
import numbers
from collections.abc import Callable, Iterable, Iterator
from typing import Any

import jax.numpy as jnp

try:
    from jax import enable_x64
except ImportError:
    from jax.experimental import enable_x64

from .config import load_settings
from .errors import UnsupportedElementError
from .values import Sequence, ValueSet


@contextlib.contextmanager
def _array_scope() -> Iterator[None]:
    if load_settings().enable_x64:
        with enable_x64(True):
            yield
    else:
        yield


def _same_value(got: Any, want: Any) -> bool:
    if got == want:
        return True
    return isinstance(got, float) and isinstance(want, float) and math.isnan(got) and math.isnan(want)


def as_numeric_array(items: Iterable[Any], *, where: str = "value", allow_nan: bool = True) -> jnp.ndarray:
    """Convert to a jax array, rejecting input the array cannot represent exactly.

    Call inside `_array_scope()` so the dtype width matches the settings.
    """
    values = list(items)
    kinds = set()
    for idx, item in enumerate(values):
        if isinstance(item, numbers.Integral):
            kinds.add("int")
        elif isinstance(item, numbers.Real):
            if not allow_nan and math.isnan(item):
                raise UnsupportedElementError(f"{where}[{idx}] is NaN")
            kinds.add("float")
        else:
            raise UnsupportedElementError(
                f"{where}[{idx}] has non-numeric type {type(item).__name__}"
            )
    if len(kinds) > 1:
        raise UnsupportedElementError(f"{where} mixes integer and float elements")

    cast = int if kinds == {"int"} else float
    plain = [cast(item) for item in values]
    try:
        arr = jnp.asarray(plain)
    except (OverflowError, TypeError, ValueError) as exc:
        raise UnsupportedElementError(f"{where} cannot be converted to an array: {exc}") from exc
    for idx, (got, want) in enumerate(zip(arr.tolist(), plain)):
        if not _same_value(got, want):
            raise UnsupportedElementError(
                f"{where}[{idx}] is not exactly representable as {arr.dtype}"
            )
    return arr


def _as_scalar(needle: Any, arr: jnp.ndarray) -> Any:
    """`needle` cast to `arr.dtype`, or None when the cast would change its value."""
    if not isinstance(needle, numbers.Real):
        return None
    try:
        converted = arr.dtype.type(needle)
    except (OverflowError, TypeError, ValueError):
        return None
    if converted.item() != needle:
        return None
    return converted


def _predicate_mask(predicate: Callable[[Any], bool], seq: Sequence) -> jnp.ndarray:
    return jnp.asarray([bool(predicate(item)) for item in seq.to_list()], dtype=jnp.bool_)


def all_vectorized(predicate: Callable[[Any], bool], seq: Sequence) -> bool:
    return bool(jnp.all(_predicate_mask(predicate, seq)))


def any_vectorized(predicate: Callable[[Any], bool], seq: Sequence) -> bool:
    return bool(jnp.any(_predicate_mask(predicate, seq)))


def member_vectorized(needle: Any, seq: Sequence) -> bool:
    with _array_scope():
        arr = as_numeric_array(seq.to_list(), where="sequence")
        if arr.size == 0:
            return False
        scalar = _as_scalar(needle, arr)
        if scalar is None:
            return False
        return bool(jnp.any(arr == scalar))


def reverse_vectorized(seq: Sequence) -> Sequence:
    with _array_scope():
        arr = as_numeric_array(seq.to_list(), where="sequence")
        if arr.size == 0:
            return Sequence.empty()
        return Sequence.from_list(jnp.flip(arr).tolist())


def disjoint_vectorized(a: ValueSet, b: ValueSet) -> bool:
    with _array_scope():
        xa = as_numeric_array(a.to_list(), where="a", allow_nan=False)
        xb = as_numeric_array(b.to_list(), where="b", allow_nan=False)
        if xa.size == 0 or xb.size == 0:
            return True
        if xa.dtype != xb.dtype:
            raise UnsupportedElementError("a and b hold different element kinds")
        return int(jnp.intersect1d(xa, xb, assume_unique=True).size) == 0


def symmetric_difference_vectorized(a: ValueSet, b: ValueSet) -> ValueSet:
    with _array_scope():
        xa = as_numeric_array(a.to_list(), where="a", allow_nan=False)
        xb = as_numeric_array(b.to_list(), where="b", allow_nan=False)
        if xa.size == 0:
            return b
        if xb.size == 0:
            return a
        if xa.dtype != xb.dtype:
            raise UnsupportedElementError("a and b hold different element kinds")
        return ValueSet.from_list(jnp.setxor1d(xa, xb, assume_unique=True).tolist())
