"""Character-per-node prefix trie used while the dictionary is mutable."""

from __future__ import annotations

from typing import Iterator

from radixdict.constants import ALPHABET, ALPHABET_SIZE

_BASE = ord("a")


class ExpandedNode:
    """Single node in the expanded trie.

    ``subtree_count`` is the number of word nodes in the subtree rooted
    here, this node included.
    """

    __slots__ = ("children", "is_word", "definition", "subtree_count")

    def __init__(self):
        self.children: list[ExpandedNode | None] = [None] * ALPHABET_SIZE
        self.is_word: bool = False
        self.definition: str | None = None
        self.subtree_count: int = 0

    def child(self, letter: str) -> ExpandedNode | None:
        return self.children[ord(letter) - _BASE]

    def live_children(self) -> Iterator[tuple[str, ExpandedNode]]:
        """(letter, child) pairs in letter order, skipping dead branches."""
        for i, node in enumerate(self.children):
            if node is not None and node.subtree_count > 0:
                yield ALPHABET[i], node


class ExpandedTrie:
    """Prefix trie with one node per letter and running subtree counts."""

    def __init__(self):
        self.root = ExpandedNode()

    def add(self, key: str, definition: str) -> None:
        """Insert ``key`` or overwrite its definition."""
        if not key:
            return
        path = [self.root]
        node = self.root
        for ch in key:
            i = ord(ch) - _BASE
            if node.children[i] is None:
                node.children[i] = ExpandedNode()
            node = node.children[i]
            path.append(node)
        if not node.is_word:
            for n in path:
                n.subtree_count += 1
        node.is_word = True
        node.definition = definition

    def remove(self, key: str) -> bool:
        """Unmark ``key``. Returns False if it was not stored.

        Nodes are left in place; branches whose count drops to zero are
        dropped when the trie is compressed.
        """
        if not key:
            return False
        path = self._path(key)
        if path is None or not path[-1].is_word:
            return False
        node = path[-1]
        node.is_word = False
        node.definition = None
        for n in path:
            n.subtree_count -= 1
        return True

    def get_definition(self, key: str) -> str | None:
        node = self._walk(key)
        if node is None or not node.is_word:
            return None
        return node.definition

    def count_prefix(self, prefix: str) -> int:
        node = self._walk(prefix)
        return node.subtree_count if node is not None else 0

    def words(self) -> Iterator[tuple[str, str]]:
        """(key, definition) pairs in alphabetical order."""
        stack: list[tuple[ExpandedNode, str]] = [(self.root, "")]
        while stack:
            node, acc = stack.pop()
            if node.is_word:
                yield acc, node.definition
            for letter, child in reversed(list(node.live_children())):
                stack.append((child, acc + letter))

    def __len__(self) -> int:
        return self.root.subtree_count

    def _path(self, s: str) -> list[ExpandedNode] | None:
        node = self.root
        path = [node]
        for ch in s:
            node = node.child(ch)
            if node is None:
                return None
            path.append(node)
        return path

    def _walk(self, s: str) -> ExpandedNode | None:
        node = self.root
        for ch in s:
            node = node.child(ch)
            if node is None:
                return None
        return node
