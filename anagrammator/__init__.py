"""
anagrammator

Multi-word anagram generator: rearranges the letters of a phrase into
sequences of dictionary words, using a persistent trie and a lazy
backtracking search.
"""

from .anagrammer import Anagrammer, anagrams, render
from .context.normalizer import sanitize
from .core import LetterBag, TrieNode, build, decrement, frequencies, insert, search
from .dictionary import build_dictionary, is_eligible, read_words

__all__ = [
    "Anagrammer",
    "anagrams",
    "render",
    "sanitize",
    "LetterBag",
    "TrieNode",
    "build",
    "decrement",
    "frequencies",
    "insert",
    "search",
    "build_dictionary",
    "is_eligible",
    "read_words",
]

__version__ = "0.1.0"
