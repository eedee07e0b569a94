"""Expanded trie -> radix trie conversion.

Each maximal chain of non-word nodes with a single live child is folded
into one edge whose label (segment) is the concatenation of the chain's
letters. Children whose subtree count has dropped to zero, left behind
by removals, are pruned here and never reach the compressed tree.

    c-a-t*          ca-t*
       \\-r*   ->      \\-r*
"""

from __future__ import annotations

import logging

from radixdict.compressed import CompressedNode
from radixdict.trie import ExpandedNode

log = logging.getLogger("radixdict.compression")


class CompressionError(RuntimeError):
    """Raised when the built radix trie would be ambiguous to match."""


class _Compressor:
    """Walks an expanded trie once, tracking what it keeps and drops."""

    def __init__(self):
        self.emitted = 0
        self.pruned = 0

    def build(self, root: ExpandedNode) -> CompressedNode:
        compressed = CompressedNode("", subtree_count=root.subtree_count)
        built = [compressed]
        self._count_dead(root)
        # (letter, expanded child, compressed parent); reversed pushes keep
        # each parent's children in letter order
        stack: list[tuple[str, ExpandedNode, CompressedNode]] = [
            (letter, child, compressed)
            for letter, child in reversed(list(root.live_children()))
        ]
        while stack:
            letter, node, parent = stack.pop()
            edge, node = self._edge(letter, node)
            parent.children.append(edge)
            built.append(edge)
            for letter, child in reversed(list(node.live_children())):
                stack.append((letter, child, edge))
        for node in built:
            _check_siblings(node.children)
        self.emitted = len(built)
        return compressed

    def _edge(self, letter: str, node: ExpandedNode) -> tuple[CompressedNode, ExpandedNode]:
        """Fold the chain starting at ``node``; returns the edge and where it stopped."""
        segment = [letter]
        while not node.is_word:
            live = list(node.live_children())
            if len(live) != 1:
                break
            self._count_dead(node)
            letter, node = live[0]
            segment.append(letter)
        self._count_dead(node)
        edge = CompressedNode(
            "".join(segment),
            is_word=node.is_word,
            definition=node.definition,
            subtree_count=node.subtree_count,
        )
        return edge, node

    def _count_dead(self, node: ExpandedNode) -> None:
        for child in node.children:
            if child is not None and child.subtree_count == 0:
                self.pruned += 1


def _check_siblings(children: list[CompressedNode]) -> None:
    seen: set[str] = set()
    for child in children:
        if not child.segment:
            raise CompressionError("empty segment below a non-root node")
        head = child.segment[0]
        if head in seen:
            raise CompressionError(f"sibling segments share first letter {head!r}")
        seen.add(head)


def compress_trie(root: ExpandedNode) -> CompressedNode:
    """Build the radix form of the trie rooted at ``root``.

    The input is only read; the caller decides when to drop it.
    """
    compressor = _Compressor()
    compressed = compressor.build(root)
    log.info(
        "Compressed %s words into %s nodes (%s dead branches pruned)",
        f"{root.subtree_count:,}", f"{compressor.emitted:,}", compressor.pruned,
    )
    return compressed
