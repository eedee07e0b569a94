"""Tests for the Dictionary facade."""

import logging
import random

import pytest

from radixdict.dictionary import Dictionary, Phase


def make(words, removed=()):
    d = Dictionary()
    for word, definition in words.items():
        d.add(word, definition)
    for word in removed:
        d.remove(word)
    return d


def query_strings(words, seed=99):
    """Every prefix of every word plus some random strings."""
    prefixes = {""}
    for word in words:
        for i in range(1, len(word) + 2):
            prefixes.add(word[:i])
            prefixes.add(word[:i] + "a")
    rng = random.Random(seed)
    for _ in range(100):
        prefixes.add("".join(rng.choice("abcdef") for _ in range(rng.randint(1, 8))))
    return sorted(prefixes)


class TestScenarios:
    """Worked cat/car examples."""

    def test_before_and_after_compress(self):
        """Queries agree across compression; sequences show the split."""
        d = make({"cat": "feline", "car": "vehicle"})
        assert d.count_prefix("ca") == 2
        assert d.get_definition("cat") == "feline"

        d.compress()
        assert d.get_sequence("cat") == "ca-t"
        assert d.get_sequence("car") == "ca-r"
        assert d.count_prefix("ca") == 2
        assert d.count_prefix("c") == 2
        assert d.count_prefix("cab") == 0
        assert d.get_definition("ca") is None

    def test_removed_word_leaves_single_edge(self):
        """After removing car, cat compresses to one edge."""
        d = make({"cat": "feline", "car": "vehicle"}, removed=["car"])
        assert d.count_prefix("ca") == 1
        d.compress()
        assert d.get_sequence("cat") == "cat"
        assert d.get_sequence("car") is None
        assert d.get_definition("car") is None
        assert d.count_prefix("car") == 0

    def test_empty_dictionary(self):
        """An empty dictionary compresses and answers zero/None."""
        d = Dictionary()
        d.compress()
        assert d.count_prefix("") == 0
        assert d.get_definition("a") is None
        assert d.get_sequence("a") is None


class TestCompressionEquivalence:
    """Compression must not change observable results."""

    def test_definitions_preserved(self, random_words):
        """get_definition agrees before and after compress()."""
        removed = sorted(random_words)[::3]
        d = make(random_words, removed)
        queries = query_strings(random_words)
        before = {p: d.get_definition(p) for p in queries}
        d.compress()
        assert {p: d.get_definition(p) for p in queries} == before

    def test_counts_preserved(self, random_words):
        """count_prefix agrees before and after compress()."""
        removed = sorted(random_words)[1::4]
        d = make(random_words, removed)
        queries = query_strings(random_words)
        before = {p: d.count_prefix(p) for p in queries}
        d.compress()
        assert {p: d.count_prefix(p) for p in queries} == before

    def test_word_set_preserved(self, animal_words):
        """The same (word, definition) pairs survive compression."""
        d = make(animal_words, removed=["do"])
        before = sorted(d.words())
        d.compress()
        assert sorted(d.words()) == before

    def test_sequence_round_trip(self, random_words):
        """Joining a word's segments gives back the word."""
        d = make(random_words)
        d.compress()
        for word in random_words:
            sequence = d.get_sequence(word)
            assert sequence is not None
            assert sequence.replace("-", "") == word

    def test_compress_idempotent(self, random_words):
        """A second compress() changes nothing."""
        d = make(random_words)
        d.compress()
        queries = query_strings(random_words)
        first = [(d.count_prefix(p), d.get_definition(p), d.get_sequence(p)) for p in queries]
        d.compress()
        second = [(d.count_prefix(p), d.get_definition(p), d.get_sequence(p)) for p in queries]
        assert first == second


class TestDeepKeys:
    """Long chains of nested keys."""

    def test_nested_keys_compress(self):
        """Keys a, aa, ... survive compression with one segment per word."""
        d = make({"a" * i: str(i) for i in range(1, 700)})
        d.compress()
        assert d.get_sequence("a" * 699) == "-".join(["a"] * 699)
        assert d.get_definition("a" * 500) == "500"
        assert d.count_prefix("a" * 350) == 350
        assert len(d) == 699


class TestPhase:
    """Tests for the mutable -> frozen switch."""

    def test_initial_phase(self):
        """New dictionaries are mutable."""
        d = Dictionary()
        assert d.phase is Phase.MUTABLE
        assert not d.is_compressed

    def test_compress_freezes(self):
        """compress() moves to the frozen phase."""
        d = make({"cat": "feline"})
        d.compress()
        assert d.phase is Phase.FROZEN
        assert d.is_compressed

    def test_sequence_before_compress_is_none(self):
        """get_sequence is only answered once compressed."""
        d = make({"cat": "feline"})
        assert d.get_sequence("cat") is None

    def test_add_after_freeze_ignored(self, caplog):
        """add() on a frozen dictionary is a logged no-op."""
        d = make({"cat": "feline"})
        d.compress()
        with caplog.at_level(logging.WARNING, logger="radixdict"):
            d.add("dog", "canine")
            d.add("cat", "changed")
        assert d.get_definition("dog") is None
        assert d.get_definition("cat") == "feline"
        assert d.count_prefix("") == 1
        assert "Ignoring add('dog')" in caplog.text

    def test_remove_after_freeze_ignored(self, caplog):
        """remove() on a frozen dictionary is a logged no-op."""
        d = make({"cat": "feline"})
        d.compress()
        with caplog.at_level(logging.WARNING, logger="radixdict"):
            d.remove("cat")
        assert d.get_definition("cat") == "feline"
        assert "Ignoring remove('cat')" in caplog.text

    def test_second_compress_logged(self, caplog):
        """Repeated compress() is noted at debug level."""
        d = make({"cat": "feline"})
        d.compress()
        with caplog.at_level(logging.DEBUG, logger="radixdict"):
            d.compress()
        assert "already compressed" in caplog.text


class TestDunder:
    """Tests for len / in / repr."""

    def test_len_and_contains(self, animal_words):
        """len counts words; `in` checks exact words."""
        d = make(animal_words)
        assert len(d) == 6
        assert "cart" in d
        assert "ca" not in d
        d.compress()
        assert len(d) == 6
        assert "zebra" in d

    def test_repr(self):
        """repr shows phase and size."""
        d = make({"cat": "feline"})
        assert repr(d) == "Dictionary(mutable, words=1)"
        d.compress()
        assert repr(d) == "Dictionary(frozen, words=1)"


class TestLoad:
    """Tests for loading word lists from disk."""

    def test_load_file(self, tmp_path):
        """Each line adds a word; comments and blanks are skipped."""
        path = tmp_path / "words.txt"
        path.write_text(
            "# sample\n"
            "cat feline animal\n"
            "\n"
            "Dog\tcanine\n"
            "bare\n",
            encoding="utf-8",
        )
        d = Dictionary.from_file(str(path))
        assert len(d) == 3
        assert d.get_definition("cat") == "feline animal"
        assert d.get_definition("dog") == "canine"
        assert d.get_definition("bare") == ""

    def test_load_after_freeze_ignored(self, tmp_path):
        """load() is refused once compressed."""
        path = tmp_path / "words.txt"
        path.write_text("cat feline\n", encoding="utf-8")
        d = Dictionary()
        d.compress()
        assert d.load(str(path)) == 0
        assert len(d) == 0

    def test_missing_file_raises(self, tmp_path):
        """A missing word list is an error, not an empty dictionary."""
        with pytest.raises(FileNotFoundError):
            Dictionary(str(tmp_path / "nope.txt"))

    @pytest.mark.parametrize("line", ["e-mail message", "snake_case a style", "route66 a road", "caf\u00e9 coffee"])
    def test_load_skips_non_letter_words(self, tmp_path, line):
        """Words with characters outside a-z are skipped, not stored or fatal."""
        path = tmp_path / "words.txt"
        path.write_text(f"cat feline\n{line}\ndog canine\n", encoding="utf-8")
        d = Dictionary()
        assert d.load(str(path)) == 2
        assert len(d) == 2
        assert d.get_definition("dog") == "canine"
        assert d.get_definition("snakeycase") is None
        assert d.count_prefix("e") == 0

    def test_load_logs_skipped(self, tmp_path, caplog):
        """Skipped words are reported at debug level."""
        path = tmp_path / "words.txt"
        path.write_text("snake_case a style\n", encoding="utf-8")
        with caplog.at_level(logging.DEBUG, logger="radixdict"):
            Dictionary(str(path))
        assert "Skipping 'snake_case'" in caplog.text
        assert "(1 skipped)" in caplog.text
