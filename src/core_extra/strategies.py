"""Catalog of strategy families and cross-strategy agreement checks."""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Final

from . import indexed, predicates, sets, transforms
from .config import load_settings
from .errors import StrategyMismatchError, UnknownStrategyError
from .values import ABSENT, Sequence, ValueSet

logger = logging.getLogger(__name__)

Normalizer = Callable[[Any], Any]


@dataclass(frozen=True)
class StrategyFamily:
    """One contract and the sibling functions implementing it."""

    name: str
    contract: str
    strategies: Mapping[str, Callable[..., Any]]
    normalize: Normalizer | None = None

    @property
    def strategy_names(self) -> tuple[str, ...]:
        return tuple(self.strategies)

    def get(self, strategy: str) -> Callable[..., Any]:
        try:
            return self.strategies[strategy]
        except KeyError:
            raise UnknownStrategyError(strategy, known=self.strategy_names) from None


@dataclass(frozen=True)
class AgreementReport:
    family: str
    reference: str
    results: dict[str, Any]
    mismatched: tuple[str, ...]

    @property
    def agreed(self) -> bool:
        return not self.mismatched


def _as_frozenset(value: ValueSet) -> frozenset[Any]:
    return value.elements


def _base_families() -> dict[str, StrategyFamily]:
    families = (
        StrategyFamily(
            name="all",
            contract="all(predicate, Sequence) -> bool; True on empty",
            strategies={
                "index_walk": predicates.all_index_walk,
                "last_first": predicates.all_last_first,
                "list": predicates.all_list,
                "fold": predicates.all_fold,
            },
        ),
        StrategyFamily(
            name="any",
            contract="any(predicate, Sequence) -> bool; False on empty",
            strategies={
                "index_walk": predicates.any_index_walk,
                "last_first": predicates.any_last_first,
                "list": predicates.any_list,
                "fold": predicates.any_fold,
            },
        ),
        StrategyFamily(
            name="member",
            contract="member(needle, Sequence) -> bool; False on empty",
            strategies={
                "index_walk": predicates.member_index_walk,
                "last_first": predicates.member_last_first,
                "list": predicates.member_list,
                "fold": predicates.member_fold,
            },
        ),
        StrategyFamily(
            name="indexed_map_to_list",
            contract="indexed_map_to_list(fn(index, value), Sequence) -> list",
            strategies={
                "foldr": indexed.indexed_map_to_list_foldr,
                "indexed_list": indexed.indexed_map_to_list_indexed_list,
                "list": indexed.indexed_map_to_list_list,
                "sequence": indexed.indexed_map_to_list_sequence,
            },
        ),
        StrategyFamily(
            name="filter_map",
            contract="filter_map(fn -> value | ABSENT, Sequence) -> Sequence",
            strategies={
                "push": transforms.filter_map_push,
                "list": transforms.filter_map_list,
                "cons": transforms.filter_map_cons,
            },
        ),
        StrategyFamily(
            name="unzip",
            contract="unzip(Sequence[(a, b)]) -> (Sequence[a], Sequence[b])",
            strategies={
                "projections": transforms.unzip_projections,
                "list": transforms.unzip_list,
                "foldl": transforms.unzip_foldl,
                "foldr": transforms.unzip_foldr,
            },
        ),
        StrategyFamily(
            name="reverse",
            contract="reverse(Sequence) -> Sequence",
            strategies={
                "fold_list": transforms.reverse_fold_list,
                "fold_cons": transforms.reverse_fold_cons,
                "list": transforms.reverse_list,
            },
        ),
        StrategyFamily(
            name="disjoint",
            contract="disjoint(ValueSet, ValueSet) -> bool",
            strategies={
                "intersect": sets.disjoint_intersect,
                "list_walk": sets.disjoint_list_walk,
                "fold": sets.disjoint_fold,
            },
        ),
        StrategyFamily(
            name="symmetric_difference",
            contract="symmetric_difference(ValueSet, ValueSet) -> ValueSet",
            strategies={
                "naive": sets.symmetric_difference_naive,
                "merge": sets.symmetric_difference_merge,
            },
            normalize=_as_frozenset,
        ),
    )
    return {family.name: family for family in families}


def _vectorized_strategies() -> dict[str, dict[str, Callable[..., Any]]]:
    try:
        from . import vectorized
    except ModuleNotFoundError as exc:
        if exc.name and exc.name.startswith("jax"):
            logger.debug("jax not importable; vectorized strategies not registered")
            return {}
        raise
    return {
        "all": {"vectorized": vectorized.all_vectorized},
        "any": {"vectorized": vectorized.any_vectorized},
        "member": {"vectorized": vectorized.member_vectorized},
        "reverse": {"vectorized": vectorized.reverse_vectorized},
        "disjoint": {"vectorized": vectorized.disjoint_vectorized},
        "symmetric_difference": {"vectorized": vectorized.symmetric_difference_vectorized},
    }


def build_catalog(*, include_vectorized: bool | None = None) -> dict[str, StrategyFamily]:
    """Assemble the family catalog, optionally with the jax-backed strategies."""
    catalog = _base_families()
    if include_vectorized is None:
        include_vectorized = load_settings().vectorized
    if not include_vectorized:
        return catalog
    for name, extra in _vectorized_strategies().items():
        family = catalog[name]
        catalog[name] = StrategyFamily(
            name=family.name,
            contract=family.contract,
            strategies={**family.strategies, **extra},
            normalize=family.normalize,
        )
    return catalog


FAMILIES: Final[dict[str, StrategyFamily]] = build_catalog()


def get_family(name: str) -> StrategyFamily:
    try:
        return FAMILIES[name]
    except KeyError:
        raise UnknownStrategyError(name, known=tuple(FAMILIES)) from None


def get_strategy(family: str, strategy: str) -> Callable[..., Any]:
    return get_family(family).get(strategy)


def run_all(family: str | StrategyFamily, *args: Any) -> dict[str, Any]:
    fam = get_family(family) if isinstance(family, str) else family
    return {name: fn(*args) for name, fn in fam.strategies.items()}


def check_agreement(
    family: str | StrategyFamily,
    *args: Any,
    normalize: Normalizer | None = None,
) -> AgreementReport:
    """Run every strategy of `family` on `args` and compare against the first one.

    Results are compared after `normalize` (or the family's own normalizer),
    so set-valued families compare by membership rather than representation.
    """
    fam = get_family(family) if isinstance(family, str) else family
    norm = normalize or fam.normalize or (lambda value: value)
    results = run_all(fam, *args)
    reference = fam.strategy_names[0]
    expected = norm(results[reference])
    mismatched = tuple(name for name, value in results.items() if norm(value) != expected)
    report = AgreementReport(family=fam.name, reference=reference, results=results, mismatched=mismatched)
    if mismatched:
        logger.warning("%s: strategies %s disagree with %s", fam.name, ", ".join(mismatched), reference)
    else:
        logger.debug("%s: %d strategies agree", fam.name, len(results))
    return report


def assert_agreement(
    family: str | StrategyFamily,
    *args: Any,
    normalize: Normalizer | None = None,
) -> Any:
    """Return the agreed result, or raise `StrategyMismatchError`."""
    report = check_agreement(family, *args, normalize=normalize)
    if not report.agreed:
        raise StrategyMismatchError(report)
    return report.results[report.reference]


def reports_to_markdown_table(reports: list[AgreementReport]) -> str:
    lines = [
        "| Family | Strategies | Reference | Mismatched | Status |",
        "|---|---:|---|---|---|",
    ]
    for report in reports:
        mismatched = ", ".join(report.mismatched) or "-"
        status = "agree" if report.agreed else "mismatch"
        lines.append(
            f"| `{report.family}` | {len(report.results)} | {report.reference} | {mismatched} | {status} |"
        )
    return "\n".join(lines)


def sample_inputs() -> dict[str, tuple[Any, ...]]:
    """Representative inputs per family, one call's worth of arguments each."""
    numbers = Sequence.from_list([10, 20, 30, 41])
    return {
        "all": (lambda value: value > 5, numbers),
        "any": (lambda value: value % 2 == 1, numbers),
        "member": (30, numbers),
        "indexed_map_to_list": (lambda index, value: (index, value), numbers),
        "filter_map": (lambda value: value // 2 if value % 2 == 0 else ABSENT, numbers),
        "unzip": (Sequence.from_list([(1, "a"), (2, "b")]),),
        "reverse": (numbers,),
        "disjoint": (ValueSet.from_list([1, 2, 3]), ValueSet.from_list([3, 4])),
        "symmetric_difference": (ValueSet.from_list([1, 2, 3]), ValueSet.from_list([2, 3, 4])),
    }


def check_catalog(
    inputs: Mapping[str, tuple[Any, ...]] | None = None,
    *,
    families: Mapping[str, StrategyFamily] | None = None,
) -> list[AgreementReport]:
    """Agreement report for every family that has inputs."""
    catalog = FAMILIES if families is None else families
    rows = sample_inputs() if inputs is None else inputs
    return [check_agreement(catalog[name], *rows[name]) for name in catalog if name in rows]


def report_payload(reports: list[AgreementReport]) -> list[dict[str, object]]:
    return [
        {
            "family": report.family,
            "reference": report.reference,
            "strategies": list(report.results),
            "mismatched": list(report.mismatched),
            "agreed": report.agreed,
        }
        for report in reports
    ]


def write_json(path: Path, payload: object) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
