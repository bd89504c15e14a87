import unittest

from wordsearch.engine.trie import LexiconIndex


class LexiconIndexTests(unittest.TestCase):
    def setUp(self) -> None:
        self.index = LexiconIndex.from_words(["CAT", "CAR"])

    def test_prefix_and_word_queries(self) -> None:
        self.assertTrue(self.index.contains_prefix("CA"))
        self.assertFalse(self.index.contains_prefix("CO"))
        self.assertTrue(self.index.is_word(self.index.node_at("CAT")))
        self.assertFalse(self.index.is_word(self.index.node_at("CA")))

    def test_full_word_counts_as_prefix(self) -> None:
        self.assertTrue(self.index.contains_prefix("CAR"))
        self.assertFalse(self.index.contains_prefix("CART"))

    def test_lookups_are_case_insensitive(self) -> None:
        self.assertTrue(self.index.contains_prefix("ca"))
        self.assertEqual(self.index.word_at(self.index.node_at("car")), "CAR")

    def test_repeated_queries_are_stable(self) -> None:
        first = [self.index.contains_prefix("CA"), self.index.is_word(self.index.node_at("CAT"))]
        for _ in range(5):
            again = [self.index.contains_prefix("CA"), self.index.is_word(self.index.node_at("CAT"))]
            self.assertEqual(first, again)

    def test_incremental_lookup_from_node(self) -> None:
        node = self.index.node_at("C")
        self.assertIsNotNone(node)
        self.assertEqual(self.index.word_at(self.index.node_at("AT", start=node)), "CAT")
        self.assertIs(self.index.step(node, "A"), self.index.node_at("CA"))
        self.assertIsNone(self.index.step(node, "Z"))

    def test_absent_lookups_return_sentinels(self) -> None:
        self.assertIsNone(self.index.node_at("DOG"))
        self.assertFalse(self.index.is_word(None))
        self.assertIsNone(self.index.word_at(None))
        self.assertIs(self.index.node_at(""), self.index.root)

    def test_insert_is_idempotent_and_normalizes(self) -> None:
        index = LexiconIndex()
        index.insert("dog")
        index.insert("DOG")
        index.insert("")
        self.assertEqual(len(index), 1)
        self.assertIn("Dog", index)
        self.assertEqual(index.word_at(index.node_at("DOG")), "DOG")
        self.assertFalse(index.is_word(index.root))

    def test_contains_requires_terminal(self) -> None:
        self.assertTrue(self.index.contains("CAT"))
        self.assertFalse(self.index.contains("CA"))
        self.assertFalse(self.index.contains(""))
        self.assertNotIn(42, self.index)

    def test_lookups_fold_accents_like_insert(self) -> None:
        index = LexiconIndex(["crème"])
        self.assertTrue(index.contains("crème"))
        self.assertTrue(index.contains_prefix("crè"))
        self.assertTrue(index.contains_prefix("CRE"))
        self.assertIsNone(index.word_at(index.node_at("crèm")))
        self.assertEqual(index.word_at(index.node_at("Crème")), "CREME")
        self.assertFalse(index.contains_prefix("cr-"))

    def test_empty_prefix_needs_an_indexed_word(self) -> None:
        self.assertFalse(LexiconIndex().contains_prefix(""))
        self.assertFalse(LexiconIndex([""]).contains_prefix(""))
        self.assertTrue(self.index.contains_prefix(""))


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
