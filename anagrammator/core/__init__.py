"""
anagrammator.core

The search engine behind the anagram generator.
Contains:
 - immutable letter multiset (LetterBag)
 - persistent prefix tree over dictionary words (TrieNode)
 - lazy backtracking search combining the two (search)
"""

from .letter_bag import EMPTY_BAG, LetterBag, decrement, frequencies
from .trie import EMPTY_TRIE, TrieNode, build, child, find, insert
from .search import Anagram, search

__all__ = [
    "EMPTY_BAG",
    "LetterBag",
    "decrement",
    "frequencies",
    "EMPTY_TRIE",
    "TrieNode",
    "build",
    "child",
    "find",
    "insert",
    "Anagram",
    "search",
]
