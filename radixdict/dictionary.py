"""Word -> definition dictionary with a one-way switch to a radix trie."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Iterator

from radixdict.compressed import CompressedTrie
from radixdict.compression import compress_trie
from radixdict.constants import ALPHABET
from radixdict.trie import ExpandedTrie

log = logging.getLogger("radixdict")

_LETTERS = frozenset(ALPHABET)


class Phase(Enum):
    MUTABLE = "mutable"
    FROZEN = "frozen"


class Dictionary:
    """Stores lowercase words and their definitions.

    Starts out mutable, backed by an :class:`ExpandedTrie`. ``compress()``
    replaces that with a :class:`CompressedTrie` built from the current
    words; from then on the dictionary is read-only and ``add`` /
    ``remove`` are ignored (with a warning in the log).

    Lookups return ``None`` for missing words and ``0`` for prefixes that
    match nothing.
    """

    def __init__(self, dict_path: str | None = None):
        self._phase = Phase.MUTABLE
        self._trie: ExpandedTrie | CompressedTrie = ExpandedTrie()
        if dict_path:
            self.load(dict_path)

    @classmethod
    def from_file(cls, dict_path: str) -> Dictionary:
        return cls(dict_path)

    # state

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def is_compressed(self) -> bool:
        return self._phase is Phase.FROZEN

    # mutation

    def add(self, word: str, definition: str) -> None:
        """Add ``word`` or replace its definition."""
        if self._phase is Phase.FROZEN:
            log.warning("Ignoring add(%r): dictionary is compressed", word)
            return
        self._trie.add(word, definition)

    def remove(self, word: str) -> None:
        """Remove ``word`` if present."""
        if self._phase is Phase.FROZEN:
            log.warning("Ignoring remove(%r): dictionary is compressed", word)
            return
        self._trie.remove(word)

    def load(self, dict_path: str) -> int:
        """Add every ``word definition...`` line of a text file.

        Blank lines, lines starting with ``#`` and words with characters
        outside a-z are skipped. Returns the number of entries added.
        """
        if self._phase is Phase.FROZEN:
            log.warning("Ignoring load(%r): dictionary is compressed", dict_path)
            return 0
        loaded = skipped = 0
        with open(dict_path, "r", encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                if not line or line.startswith("#"):
                    continue
                parts = line.split(None, 1)
                word = parts[0].lower()
                if not set(word) <= _LETTERS:
                    log.debug("Skipping %r in %s: not a-z only", parts[0], dict_path)
                    skipped += 1
                    continue
                definition = parts[1] if len(parts) > 1 else ""
                self._trie.add(word, definition)
                loaded += 1
        log.info("Loaded %s entries from %s (%s skipped)", f"{loaded:,}", dict_path, skipped)
        return loaded

    # queries

    def get_definition(self, word: str) -> str | None:
        return self._trie.get_definition(word)

    def get_sequence(self, word: str) -> str | None:
        """Dash-joined segment path of ``word`` in the compressed trie.

        Always ``None`` before ``compress()``.
        """
        if self._phase is Phase.MUTABLE:
            return None
        return self._trie.get_sequence(word)

    def count_prefix(self, prefix: str) -> int:
        """Number of stored words starting with ``prefix``."""
        return self._trie.count_prefix(prefix)

    def words(self) -> Iterator[tuple[str, str]]:
        return self._trie.words()

    # phase change

    def compress(self) -> None:
        """Freeze the dictionary into its compressed form. Idempotent."""
        if self._phase is Phase.FROZEN:
            log.debug("compress() called again; already compressed")
            return
        root = compress_trie(self._trie.root)
        self._trie = CompressedTrie(root)
        self._phase = Phase.FROZEN

    def __len__(self) -> int:
        return len(self._trie)

    def __contains__(self, word: str) -> bool:
        return self.get_definition(word) is not None

    def __repr__(self) -> str:
        return f"Dictionary({self._phase.value}, words={len(self)})"
