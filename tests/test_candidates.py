import random
import unittest
from itertools import product

from wordgrid.core.constants import ALL_DIRECTIONS
from wordgrid.engine.candidates import CandidateEnumerator


class CandidateEnumeratorTests(unittest.TestCase):
    def test_order_covers_every_triple_once(self) -> None:
        enumerator = CandidateEnumerator(4, 3, random.Random(7))
        order = list(enumerator.order())
        self.assertEqual(len(order), enumerator.branching_factor)
        self.assertEqual(enumerator.branching_factor, 4 * 3 * 8)
        self.assertEqual(set(order), set(product(range(4), range(3), ALL_DIRECTIONS)))

    def test_columns_are_the_outer_level(self) -> None:
        order = list(CandidateEnumerator(3, 2, random.Random(1)).order())
        block = 2 * 8
        for start in range(0, len(order), block):
            xs = {x for x, _, _ in order[start:start + block]}
            self.assertEqual(len(xs), 1)

    def test_same_seed_same_order(self) -> None:
        first = list(CandidateEnumerator(5, 5, random.Random(42)).order())
        second = list(CandidateEnumerator(5, 5, random.Random(42)).order())
        self.assertEqual(first, second)

    def test_different_seeds_differ(self) -> None:
        first = list(CandidateEnumerator(6, 6, random.Random(1)).order())
        second = list(CandidateEnumerator(6, 6, random.Random(2)).order())
        self.assertNotEqual(first, second)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
