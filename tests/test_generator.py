import random
import unittest

from wordsearch.core.constants import ALPHABET, Direction
from wordsearch.core.exceptions import ConfigurationError
from wordsearch.engine.generator import GeneratorConfig, WordSearchGenerator, generate_grid
from wordsearch.engine.grid import line_between

ANIMALS = ["ELEPHANT", "GIRAFFE", "TIGER", "ZEBRA", "HORSE", "EAGLE", "OTTER", "LION", "BEAR", "CAT"]


def letters_by_cell(location):
    cells = line_between(location.start, location.end)
    return dict(zip(cells, location.word))


class GeneratorTests(unittest.TestCase):
    def test_single_word_is_placed_and_readable(self) -> None:
        state = generate_grid(["CAT"], 5, 5, rng=random.Random(42))
        self.assertEqual(state.placed_words, ["CAT"])
        location = state.words[0]
        self.assertEqual(state.grid.read_line(location.start, location.end), "CAT")
        self.assertEqual(state.dropped, [])

    def test_placement_soundness_and_shared_cells(self) -> None:
        for seed in range(20):
            state = generate_grid(ANIMALS, 12, 12, rng=random.Random(seed))
            for location in state.words:
                self.assertEqual(
                    state.grid.read_line(location.start, location.end), location.word
                )
            for i, first in enumerate(state.words):
                first_cells = letters_by_cell(first)
                for second in state.words[i + 1:]:
                    for cell, letter in letters_by_cell(second).items():
                        if cell in first_cells:
                            self.assertEqual(first_cells[cell], letter)

    def test_every_cell_holds_one_uppercase_letter(self) -> None:
        for rows, cols in [(1, 1), (1, 7), (4, 9), (10, 10)]:
            state = generate_grid(["CAT", "DOG"], rows, cols, rng=random.Random(rows * cols))
            self.assertEqual((state.grid.rows, state.grid.cols), (rows, cols))
            for point in state.grid.points():
                self.assertIn(state.grid.letter_at(point), ALPHABET)

    def test_placed_and_dropped_partition_requested_words(self) -> None:
        state = generate_grid(ANIMALS, 6, 6, rng=random.Random(3))
        self.assertEqual(sorted(state.placed_words + state.dropped), sorted(ANIMALS))

        state = generate_grid(["CAT", "42", "ice-cream", "!!", "42"], 10, 10, rng=random.Random(0))
        self.assertEqual(sorted(state.placed_words + state.dropped), ["!!", "42", "CAT", "ICECREAM"])
        self.assertEqual(state.dropped[:2], ["42", "!!"])

    def test_duplicates_collapse_case_insensitively(self) -> None:
        state = generate_grid(["cat", "CAT", "Cat"], 6, 6, rng=random.Random(1))
        self.assertEqual(state.placed_words, ["CAT"])

    def test_longest_words_are_attempted_first(self) -> None:
        state = generate_grid(["OX", "HORSE", "CAT"], 15, 15, rng=random.Random(5))
        self.assertEqual(state.placed_words, ["HORSE", "CAT", "OX"])

    def test_word_longer_than_grid_is_dropped(self) -> None:
        state = generate_grid(["HIPPOPOTAMUS", "CAT"], 4, 4, rng=random.Random(0))
        self.assertNotIn("HIPPOPOTAMUS", state.placed_words)
        self.assertEqual(state.dropped, ["HIPPOPOTAMUS"])

    def test_degenerate_grid_drops_everything(self) -> None:
        state = generate_grid(["A", "CAT"], 0, 5, rng=random.Random(0))
        self.assertEqual(state.words, [])
        self.assertEqual(state.dropped, ["CAT", "A"])
        self.assertEqual((state.grid.rows, state.grid.cols), (0, 5))

    def test_zero_attempts_places_nothing(self) -> None:
        generator = WordSearchGenerator(GeneratorConfig(rows=5, cols=5, placement_attempts=0))
        state = generator.generate(["CAT"])
        self.assertEqual(state.words, [])

    def test_restricted_directions(self) -> None:
        config = GeneratorConfig(rows=8, cols=8, directions=(Direction.HORIZONTAL,), seed=11)
        state = WordSearchGenerator(config).generate(["TIGER", "LION", "BEAR"])
        for location in state.words:
            self.assertEqual(location.start.row, location.end.row)
            self.assertEqual(location.end.col - location.start.col, len(location.word) - 1)

    def test_same_seed_same_grid(self) -> None:
        first = WordSearchGenerator(GeneratorConfig(rows=9, cols=9, seed=99)).generate(ANIMALS)
        second = WordSearchGenerator(GeneratorConfig(rows=9, cols=9, seed=99)).generate(ANIMALS)
        self.assertEqual(first.grid, second.grid)
        self.assertEqual(first.words, second.words)

    def test_dimensions_override_config(self) -> None:
        state = WordSearchGenerator(GeneratorConfig(seed=1)).generate(["CAT"], 3, 7)
        self.assertEqual((state.grid.rows, state.grid.cols), (3, 7))

    def test_invalid_config_rejected(self) -> None:
        with self.assertRaises(ConfigurationError):
            GeneratorConfig(rows=-1, cols=5)
        with self.assertRaises(ConfigurationError):
            GeneratorConfig(placement_attempts=-3)
        with self.assertRaises(ConfigurationError):
            GeneratorConfig(directions=())


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
