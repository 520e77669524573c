"""core-extra public API."""

from .errors import (
    CoreExtraError,
    StrategyMismatchError,
    UnknownStrategyError,
    UnsupportedElementError,
)
from .indexed import (
    indexed_map_to_list_foldr,
    indexed_map_to_list_indexed_list,
    indexed_map_to_list_list,
    indexed_map_to_list_sequence,
)
from .logger import setup_logger
from .predicates import (
    all_fold,
    all_index_walk,
    all_last_first,
    all_list,
    any_fold,
    any_index_walk,
    any_last_first,
    any_list,
    member_fold,
    member_index_walk,
    member_last_first,
    member_list,
)
from .sets import (
    disjoint_fold,
    disjoint_intersect,
    disjoint_list_walk,
    merge_symmetric_difference,
    symmetric_difference_merge,
    symmetric_difference_naive,
)
from .strategies import (
    FAMILIES,
    AgreementReport,
    StrategyFamily,
    assert_agreement,
    check_agreement,
    check_catalog,
    get_family,
    get_strategy,
    run_all,
)
from .transforms import (
    filter_map_cons,
    filter_map_list,
    filter_map_push,
    reverse_fold_cons,
    reverse_fold_list,
    reverse_list,
    unzip_foldl,
    unzip_foldr,
    unzip_list,
    unzip_projections,
)
from .values import ABSENT, Sequence, ValueSet, is_absent

try:
    from .vectorized import (
        all_vectorized,
        any_vectorized,
        disjoint_vectorized,
        member_vectorized,
        reverse_vectorized,
        symmetric_difference_vectorized,
    )
except ModuleNotFoundError as exc:
    if exc.name and exc.name.startswith("jax"):
        _jax_import_error = exc

        def _requires_jax(name: str):
            def missing(*_args, **_kwargs):
                raise ModuleNotFoundError(
                    f"jax is required for {name}(). Install runtime deps first."
                ) from _jax_import_error

            missing.__name__ = name
            return missing

        all_vectorized = _requires_jax("all_vectorized")
        any_vectorized = _requires_jax("any_vectorized")
        member_vectorized = _requires_jax("member_vectorized")
        reverse_vectorized = _requires_jax("reverse_vectorized")
        disjoint_vectorized = _requires_jax("disjoint_vectorized")
        symmetric_difference_vectorized = _requires_jax("symmetric_difference_vectorized")

    else:
        raise

__all__ = [
    "ABSENT",
    "Sequence",
    "ValueSet",
    "is_absent",
    "all_index_walk",
    "all_last_first",
    "all_list",
    "all_fold",
    "all_vectorized",
    "any_index_walk",
    "any_last_first",
    "any_list",
    "any_fold",
    "any_vectorized",
    "member_index_walk",
    "member_last_first",
    "member_list",
    "member_fold",
    "member_vectorized",
    "indexed_map_to_list_foldr",
    "indexed_map_to_list_indexed_list",
    "indexed_map_to_list_list",
    "indexed_map_to_list_sequence",
    "filter_map_push",
    "filter_map_list",
    "filter_map_cons",
    "unzip_projections",
    "unzip_list",
    "unzip_foldl",
    "unzip_foldr",
    "reverse_fold_list",
    "reverse_fold_cons",
    "reverse_list",
    "reverse_vectorized",
    "disjoint_intersect",
    "disjoint_list_walk",
    "disjoint_fold",
    "disjoint_vectorized",
    "merge_symmetric_difference",
    "symmetric_difference_naive",
    "symmetric_difference_merge",
    "symmetric_difference_vectorized",
    "FAMILIES",
    "StrategyFamily",
    "AgreementReport",
    "get_family",
    "get_strategy",
    "run_all",
    "check_agreement",
    "assert_agreement",
    "check_catalog",
    "CoreExtraError",
    "UnknownStrategyError",
    "StrategyMismatchError",
    "UnsupportedElementError",
    "setup_logger",
]
