"""Radix (segment-labelled) trie used once the dictionary is frozen."""

from __future__ import annotations

from typing import Iterator

from radixdict.constants import SEGMENT_SEPARATOR


class CompressedNode:
    """Node reached by consuming ``segment`` from its parent.

    Counts and definitions are fixed at compression time.
    """

    __slots__ = ("segment", "is_word", "definition", "subtree_count", "children")

    def __init__(
        self,
        segment: str,
        is_word: bool = False,
        definition: str | None = None,
        subtree_count: int = 0,
        children: list[CompressedNode] | None = None,
    ):
        self.segment = segment
        self.is_word = is_word
        self.definition = definition
        self.subtree_count = subtree_count
        self.children: list[CompressedNode] = children or []

    def match_child(self, rest: str) -> CompressedNode | None:
        """First child whose segment is a prefix of ``rest``."""
        for child in self.children:
            if rest.startswith(child.segment):
                return child
        return None

    def __repr__(self) -> str:
        mark = "*" if self.is_word else ""
        return f"CompressedNode({self.segment!r}{mark}, count={self.subtree_count})"


class CompressedTrie:
    """Read-only queries over a compressed root."""

    def __init__(self, root: CompressedNode):
        self.root = root

    def get_definition(self, key: str) -> str | None:
        path = self._match(key)
        if path is None or not path[-1].is_word:
            return None
        return path[-1].definition

    def get_sequence(self, key: str) -> str | None:
        """Segments consumed on the way to ``key``, joined by the separator.

        ``"cat"`` stored under edges ``ca`` and ``t`` gives ``"ca-t"``.
        """
        path = self._match(key)
        if path is None or not path[-1].is_word:
            return None
        return SEGMENT_SEPARATOR.join(node.segment for node in path[1:])

    def count_prefix(self, prefix: str) -> int:
        node = self.root
        rest = prefix
        while rest:
            for child in node.children:
                if rest.startswith(child.segment):
                    rest = rest[len(child.segment):]
                    node = child
                    break
                if child.segment.startswith(rest):
                    # prefix ends inside this edge
                    return child.subtree_count
            else:
                return 0
        return node.subtree_count

    def words(self) -> Iterator[tuple[str, str]]:
        """(key, definition) pairs in stored child order."""
        stack: list[tuple[CompressedNode, str]] = [(self.root, "")]
        while stack:
            node, acc = stack.pop()
            if node.is_word:
                yield acc, node.definition
            for child in reversed(node.children):
                stack.append((child, acc + child.segment))

    def node_count(self) -> int:
        total = 0
        stack = [self.root]
        while stack:
            node = stack.pop()
            total += 1
            stack.extend(node.children)
        return total

    def __len__(self) -> int:
        return self.root.subtree_count

    def _match(self, key: str) -> list[CompressedNode] | None:
        """Nodes visited while consuming all of ``key``, root first.

        None if some remaining suffix matches no child segment.
        """
        node = self.root
        path = [node]
        rest = key
        while rest:
            node = node.match_child(rest)
            if node is None:
                return None
            rest = rest[len(node.segment):]
            path.append(node)
        return path
