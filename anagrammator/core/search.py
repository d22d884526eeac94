# search.py
"""
Backtracking anagram search over a persistent trie.

search(root, bag) lazily yields every tuple of dictionary words whose
letters, taken together, are exactly the letters in `bag`.

The walk keeps a cursor (node, remaining):
 - node: where we are inside the trie, i.e. the word typed so far
 - remaining: letters not used yet

At every node two things can happen, and both are tried:
 - completion: the node ends a word -> either the bag is empty (done) or we
   jump back to the dictionary root and spell the rest as further words
 - extension: take one more letter out of the bag and step to that child

Completion results come first, then extension over the bag's letters in
sorted order, so the enumeration is deterministic for a given trie and bag.
Each word sequence comes out exactly once. Nothing is shared or mutated
between branches (TrieNode and LetterBag are both immutable), so there is
no undo step on the way back up.

The walk runs off an explicit stack of (node, remaining, words_so_far)
frames rather than nested calls, so phrase length is not capped by the
interpreter recursion limit.
"""

from __future__ import annotations
from typing import Iterator, List, Tuple

from .letter_bag import LetterBag
from .trie import TrieNode

Anagram = Tuple[str, ...]


def search(dictionary: TrieNode, letters: LetterBag) -> Iterator[Anagram]:
    """
    Enumerate word sequences spelling exactly `letters`.
    Returns a generator, no work happens until the first result is pulled.
    """
    return _walk(dictionary, letters)


def _walk(root: TrieNode, letters: LetterBag) -> Iterator[Anagram]:
    # frames come off the end; pushed in reverse so completion runs before
    # extension and letters are tried in sorted order
    stack: List[Tuple[TrieNode, LetterBag, Anagram]] = [(root, letters, ())]
    while stack:
        node, remaining, done = stack.pop()

        # extension: keep typing the current word (runs on marked nodes too,
        # so "solar" does not hide "solaria")
        for ch in sorted(remaining, reverse=True):
            nxt = node.child(ch)
            if nxt is not None:
                stack.append((nxt, remaining.decrement(ch), done))

        # completion: stop the current word here
        if node.word is not None:
            if not remaining:
                yield done + (node.word,)
            elif node is not root:
                # a marked root would restart on itself forever
                stack.append((root, remaining, done + (node.word,)))
