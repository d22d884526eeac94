# trie.py
# Persistent (immutable) prefix tree over characters.
# Each node optionally carries the dictionary word that ends at it.
# insert() never mutates: it copies the nodes on the word's path and shares
# every other subtree with the previous trie, so one dictionary root can be
# read by many search branches at once.

from __future__ import annotations
from functools import reduce
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Mapping, Optional

Word = str


class TrieNode:
    """
    A single node in the trie.
    children: char -> TrieNode (read-only view)
    word: the complete word spelled by the path from the root to here, or None
    """

    __slots__ = ("_children", "word")

    def __init__(
        self, children: Optional[Dict[str, TrieNode]] = None, word: Optional[Word] = None
    ) -> None:
        # callers hand over ownership of `children`, it is never written again
        self._children: Dict[str, TrieNode] = children if children is not None else {}
        self.word = word

    @property
    def children(self) -> Mapping[str, TrieNode]:
        return MappingProxyType(self._children)

    def child(self, ch: str) -> Optional[TrieNode]:
        return self._children.get(ch)

    # traversal ---------------------------------------------------------
    def words(self) -> Iterator[Word]:
        """DFS over every word stored under this node (sorted by path)."""
        stack = [self]
        while stack:
            node = stack.pop()
            if node.word is not None:
                yield node.word
            for ch in sorted(node._children, reverse=True):
                stack.append(node._children[ch])

    def size(self) -> int:
        """
        Count words under this node.
        (O(N) walk, for inspection/stats, not the search hot path.)
        """
        return sum(1 for _ in self.words())

    def __contains__(self, word: Word) -> bool:
        node = find(self, word)
        return node is not None and node.word == word

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TrieNode):
            return NotImplemented
        pairs = [(self, other)]
        while pairs:
            a, b = pairs.pop()
            if a is b:
                continue
            if a.word != b.word or a._children.keys() != b._children.keys():
                return False
            pairs.extend((a._children[ch], b._children[ch]) for ch in a._children)
        return True

    __hash__ = None  # structural equality, not hashable

    def __repr__(self) -> str:
        return f"TrieNode(word={self.word!r}, children={sorted(self._children)!r})"


EMPTY_TRIE = TrieNode()


# insertion -----------------------------------------------------
def insert(trie: TrieNode, word: Word) -> TrieNode:
    """
    Return a new trie that also holds `word`.
    Re-inserting an existing word gives an equal trie, the empty string
    is ignored so the root is never marked.
    """
    if not word:
        return trie
    # walk down, then rebuild the path bottom-up
    path = []
    node = trie
    for ch in word:
        path.append((node, ch))
        node = node._children.get(ch, EMPTY_TRIE)
    new = TrieNode(node._children, word)  # same children, new marker
    for parent, ch in reversed(path):
        children = dict(parent._children)
        children[ch] = new
        new = TrieNode(children, parent.word)
    return new


def build(words: Iterable[Word]) -> TrieNode:
    """Left fold of insert() over `words`, starting from the empty trie."""
    return reduce(insert, words, EMPTY_TRIE)


# lookup ---------------------------------------------------------
def child(trie: Optional[TrieNode], ch: str) -> Optional[TrieNode]:
    """Subtree reached by one character, None if no word continues that way."""
    if trie is None:
        return None
    return trie.child(ch)


def find(trie: TrieNode, prefix: str) -> Optional[TrieNode]:
    """Walk a whole prefix from `trie`. None as soon as the path breaks."""
    node: Optional[TrieNode] = trie
    for ch in prefix:
        node = child(node, ch)
        if node is None:
            return None
    return node

