import random
import unittest

from wordgrid.core.constants import EMPTY
from wordgrid.core.exceptions import (EmptyWordError, InvalidDimensionsError, InvalidInputError,
                                      NoSolutionFoundError)
from wordgrid.core.models import Position
from wordgrid.engine.solver import (BacktrackingSolver, RollbackStrategy, SolverConfig,
                                    place_words)
from wordgrid.engine.validator import SolutionValidator


STRATEGIES = (RollbackStrategy.CLONE, RollbackStrategy.UNDO_LOG)


def make_solver(width, height, seed=None, rollback=RollbackStrategy.CLONE):
    return BacktrackingSolver(SolverConfig(width=width, height=height, seed=seed, rollback=rollback))


class SolverOutcomeTests(unittest.TestCase):
    def setUp(self) -> None:
        self.validator = SolutionValidator()

    def test_two_letters_never_fit_one_cell(self) -> None:
        for strategy in STRATEGIES:
            with self.subTest(strategy=strategy):
                self.assertIsNone(make_solver(1, 1, seed=0, rollback=strategy).solve(["ab"]))

    def test_single_word_on_empty_board(self) -> None:
        solution = place_words(["cat"], 5, 5, rng=random.Random(3))
        self.assertIsNotNone(solution)
        assert solution is not None
        self.assertEqual(len(solution.placed_words), 1)
        placement = solution.placed_words[0]
        self.assertEqual(placement.word, "cat")
        cells = placement.cells
        self.assertEqual([solution.board.cell(cell) for cell in cells], ["c", "a", "t"])
        for y in range(5):
            for x in range(5):
                if Position(x, y) not in cells:
                    self.assertIs(solution.board.cell(Position(x, y)), EMPTY)
        self.assertEqual(solution.board.filled_count, 3)

    def test_crossing_words_agree(self) -> None:
        for seed in range(10):
            for strategy in STRATEGIES:
                with self.subTest(seed=seed, strategy=strategy):
                    words = ["eye", "yes"]
                    solution = make_solver(5, 5, seed=seed, rollback=strategy).solve(words)
                    self.assertIsNotNone(solution)
                    assert solution is not None
                    result = self.validator.validate(solution, words)
                    self.assertTrue(result.ok, result.messages)

    def test_many_words_satisfy_invariants(self) -> None:
        words = ["zero", "one", "two", "three", "four", "five", "six", "seven", "eight"]
        for seed in (11, 12, 13):
            with self.subTest(seed=seed):
                solution = make_solver(8, 8, seed=seed).solve(words)
                self.assertIsNotNone(solution)
                assert solution is not None
                self.assertEqual([p.word for p in solution.placed_words], words)
                result = self.validator.validate(solution, words)
                self.assertTrue(result.ok, result.messages)

    def test_empty_word_list_is_trivially_solved(self) -> None:
        solution = make_solver(3, 3).solve([])
        self.assertIsNotNone(solution)
        assert solution is not None
        self.assertEqual(solution.placed_words, [])
        self.assertEqual(solution.board.filled_count, 0)

    def test_solve_or_raise(self) -> None:
        with self.assertRaises(NoSolutionFoundError):
            make_solver(1, 1).solve_or_raise(["ab"])


class SolverSearchTests(unittest.TestCase):
    def test_exhausted_search_statistics(self) -> None:
        # "ab" fits a 2x1 board two ways; "cd" then conflicts with both.
        for strategy in STRATEGIES:
            with self.subTest(strategy=strategy):
                solver = make_solver(2, 1, seed=9, rollback=strategy)
                self.assertIsNone(solver.solve(["ab", "cd"]))
                stats = solver.last_stats
                assert stats is not None
                self.assertEqual(stats.candidates_tried, 48)
                self.assertEqual(stats.out_of_bounds, 42)
                self.assertEqual(stats.placements, 2)
                self.assertEqual(stats.conflicts, 4)
                self.assertEqual(stats.backtracks, 2)
                self.assertEqual(stats.max_depth, 1)

    def test_same_seed_is_reproducible(self) -> None:
        words = ["eye", "yes", "sea", "ease"]
        first = make_solver(5, 5, seed=21).solve(words)
        second = make_solver(5, 5, seed=21).solve(words)
        self.assertIsNotNone(first)
        assert first is not None and second is not None
        self.assertEqual(first.placed_words, second.placed_words)
        self.assertEqual(first.board, second.board)

    def test_rollback_strategies_follow_the_same_path(self) -> None:
        words = ["eye", "yes", "sea", "ease", "see"]
        cloned = make_solver(5, 5, seed=8, rollback=RollbackStrategy.CLONE).solve(words)
        logged = make_solver(5, 5, seed=8, rollback=RollbackStrategy.UNDO_LOG).solve(words)
        self.assertIsNotNone(cloned)
        assert cloned is not None and logged is not None
        self.assertEqual(cloned.placed_words, logged.placed_words)
        self.assertEqual(cloned.board, logged.board)
        self.assertEqual(cloned.stats, logged.stats)

    def test_deep_word_lists_do_not_recurse(self) -> None:
        words = ["a"] * 3000
        solution = make_solver(1, 1, seed=1).solve(words)
        self.assertIsNotNone(solution)
        assert solution is not None
        self.assertEqual(len(solution.placed_words), 3000)
        self.assertEqual(solution.stats.max_depth, 3000)
        self.assertEqual(solution.board.cell(Position(0, 0)), "a")

    def test_input_words_are_not_mutated(self) -> None:
        words = ["cat", "act"]
        make_solver(4, 4, seed=2).solve(words)
        self.assertEqual(words, ["cat", "act"])


class SolverInputTests(unittest.TestCase):
    def test_rejects_bad_dimensions_before_search(self) -> None:
        with self.assertRaises(InvalidDimensionsError):
            make_solver(0, 4)
        with self.assertRaises(InvalidDimensionsError):
            place_words(["a"], 3, 0)

    def test_rejects_empty_word(self) -> None:
        with self.assertRaises(EmptyWordError):
            make_solver(3, 3).solve(["ok", ""])

    def test_rejects_non_word_input(self) -> None:
        with self.assertRaises(InvalidInputError):
            make_solver(3, 3).solve("cat")
        with self.assertRaises(InvalidInputError):
            make_solver(3, 3).solve(["cat", 7])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
