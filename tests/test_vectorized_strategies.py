from __future__ import annotations

import importlib.util
import os
import random
import unittest


JAX_AVAILABLE = importlib.util.find_spec("jax") is not None


@unittest.skipUnless(JAX_AVAILABLE, "jax is required for vectorized strategy tests")
class VectorizedStrategyTests(unittest.TestCase):
    def _sequences(self):
        from core_extra.values import Sequence

        rng = random.Random(13)
        out = [Sequence.empty(), Sequence.from_list([0])]
        for _ in range(30):
            out.append(Sequence.from_list(rng.randint(-4, 4) for _ in range(rng.randint(0, 10))))
        return out

    def test_predicates_match_pure_strategies(self) -> None:
        from core_extra import predicates, vectorized

        for seq in self._sequences():
            with self.subTest(seq=seq):
                self.assertEqual(
                    vectorized.all_vectorized(lambda v: v > -3, seq),
                    predicates.all_index_walk(lambda v: v > -3, seq),
                )
                self.assertEqual(
                    vectorized.any_vectorized(lambda v: v == 2, seq),
                    predicates.any_index_walk(lambda v: v == 2, seq),
                )
                for needle in (-4, 0, 3, 7):
                    self.assertEqual(
                        vectorized.member_vectorized(needle, seq),
                        predicates.member_index_walk(needle, seq),
                    )

    def test_empty_identities(self) -> None:
        from core_extra import vectorized
        from core_extra.values import Sequence

        empty = Sequence.empty()
        self.assertIs(vectorized.all_vectorized(lambda v: False, empty), True)
        self.assertIs(vectorized.any_vectorized(lambda v: True, empty), False)
        self.assertIs(vectorized.member_vectorized(1, empty), False)

    def test_member_with_non_numeric_needle_is_false(self) -> None:
        from core_extra import vectorized
        from core_extra.values import Sequence

        self.assertFalse(vectorized.member_vectorized("1", Sequence.from_list([1, 2])))

    def test_reverse(self) -> None:
        from core_extra import vectorized
        from core_extra.values import Sequence

        self.assertEqual(vectorized.reverse_vectorized(Sequence.from_list([1, 2, 3])), Sequence.from_list([3, 2, 1]))
        self.assertEqual(vectorized.reverse_vectorized(Sequence.empty()), Sequence.empty())

    def test_set_strategies_match_naive(self) -> None:
        from core_extra import sets, vectorized
        from core_extra.values import ValueSet

        rng = random.Random(4)
        pairs = [(ValueSet.from_list([1, 2, 3]), ValueSet.from_list([2, 3, 4]))]
        for _ in range(30):
            pairs.append(
                (
                    ValueSet.from_list(rng.randint(0, 12) for _ in range(rng.randint(0, 6))),
                    ValueSet.from_list(rng.randint(0, 12) for _ in range(rng.randint(0, 6))),
                )
            )
        for a, b in pairs:
            with self.subTest(a=a, b=b):
                self.assertEqual(vectorized.disjoint_vectorized(a, b), sets.disjoint_intersect(a, b))
                self.assertEqual(
                    vectorized.symmetric_difference_vectorized(a, b),
                    sets.symmetric_difference_naive(a, b),
                )

    def test_wide_integers_survive_round_trip(self) -> None:
        from core_extra import vectorized
        from core_extra.values import ValueSet

        big = 2**40
        out = vectorized.symmetric_difference_vectorized(ValueSet.from_list([big, 1]), ValueSet.from_list([1]))
        self.assertEqual(out, ValueSet.from_list([big]))

    def test_non_numeric_elements_rejected(self) -> None:
        from core_extra import vectorized
        from core_extra.errors import UnsupportedElementError
        from core_extra.values import Sequence, ValueSet

        with self.assertRaises(UnsupportedElementError) as ctx:
            vectorized.reverse_vectorized(Sequence.from_list([1, "two"]))
        self.assertIn("sequence[1]", str(ctx.exception))
        self.assertIsInstance(ctx.exception, TypeError)

        with self.assertRaises(UnsupportedElementError):
            vectorized.disjoint_vectorized(ValueSet.from_list(["a"]), ValueSet.from_list([1]))

    def test_float_and_bool_elements_match_pure_strategies(self) -> None:
        from core_extra import predicates, sets, vectorized
        from core_extra.values import Sequence, ValueSet

        nan = float("nan")
        sequences = [
            Sequence.from_list([0.5, -1.25, 3.0]),
            Sequence.from_list([0.1, 2.0**60, nan]),
            Sequence.from_list([True, False, True]),
            Sequence.from_list([2**53 + 1, -(2**62)]),
        ]
        needles = (0.5, 3, 0.1, 2.0**60, nan, True, 1, 0, 2**53, 2**53 + 1, "x")
        for seq in sequences:
            with self.subTest(seq=seq):
                self.assertEqual(
                    vectorized.all_vectorized(lambda v: v < 1, seq),
                    predicates.all_index_walk(lambda v: v < 1, seq),
                )
                self.assertEqual(
                    vectorized.any_vectorized(lambda v: v > 2, seq),
                    predicates.any_index_walk(lambda v: v > 2, seq),
                )
                for needle in needles:
                    self.assertEqual(
                        vectorized.member_vectorized(needle, seq),
                        predicates.member_index_walk(needle, seq),
                        msg=f"needle={needle!r}",
                    )

        set_pairs = [
            (ValueSet.from_list([0.5, 1.5]), ValueSet.from_list([1.5, 2.25])),
            (ValueSet.from_list([0.5]), ValueSet.from_list([-0.5])),
            (ValueSet.from_list([True, False]), ValueSet.from_list([True])),
            (ValueSet.from_list([2**53, 2**53 + 1]), ValueSet.from_list([2**53 + 1, 7])),
        ]
        for a, b in set_pairs:
            with self.subTest(a=a, b=b):
                self.assertEqual(vectorized.disjoint_vectorized(a, b), sets.disjoint_intersect(a, b))
                self.assertEqual(
                    vectorized.symmetric_difference_vectorized(a, b),
                    sets.symmetric_difference_naive(a, b),
                )

    def test_reverse_keeps_exact_values(self) -> None:
        from core_extra import transforms, vectorized
        from core_extra.values import Sequence

        for items in ([0.5, -1.25, 3.0], [True, False, False], [2**53 + 1, 1, -(2**62)]):
            seq = Sequence.from_list(items)
            with self.subTest(items=items):
                self.assertEqual(vectorized.reverse_vectorized(seq), transforms.reverse_list(seq))

    def test_mixed_int_and_float_elements_rejected(self) -> None:
        from core_extra import vectorized
        from core_extra.errors import UnsupportedElementError
        from core_extra.values import Sequence, ValueSet

        mixed = Sequence.from_list([2**53 + 1, 0.5])
        with self.assertRaises(UnsupportedElementError):
            vectorized.member_vectorized(2**53, mixed)
        with self.assertRaises(UnsupportedElementError):
            vectorized.reverse_vectorized(mixed)
        with self.assertRaises(UnsupportedElementError):
            vectorized.symmetric_difference_vectorized(
                ValueSet.from_list([2**53, 0.5]), ValueSet.from_list([2**53 + 1])
            )
        with self.assertRaises(UnsupportedElementError):
            vectorized.disjoint_vectorized(ValueSet.from_list([1]), ValueSet.from_list([1.5]))
        with self.assertRaises(UnsupportedElementError):
            vectorized.disjoint_vectorized(ValueSet.from_list([float("nan")]), ValueSet.from_list([1.0]))

    @unittest.skipIf(
        os.environ.get("JAX_ENABLE_X64", "").strip().lower() in {"1", "true", "yes"},
        "host process enables 64-bit jax globally",
    )
    def test_64_bit_mode_stays_scoped_to_calls(self) -> None:
        import jax

        import core_extra  # noqa: F401
        from core_extra import vectorized
        from core_extra.values import Sequence, ValueSet

        self.assertFalse(jax.config.jax_enable_x64)
        vectorized.reverse_vectorized(Sequence.from_list([2**40, 1]))
        vectorized.symmetric_difference_vectorized(ValueSet.from_list([2**40]), ValueSet.from_list([1]))
        self.assertFalse(jax.config.jax_enable_x64)

    def test_registered_in_catalog(self) -> None:
        from core_extra.strategies import build_catalog

        catalog = build_catalog(include_vectorized=True)
        for name in ("all", "any", "member", "reverse", "disjoint", "symmetric_difference"):
            with self.subTest(family=name):
                self.assertIn("vectorized", catalog[name].strategies)
        self.assertNotIn("vectorized", build_catalog(include_vectorized=False)["all"].strategies)


if __name__ == "__main__":
    unittest.main()
