# anagrammer.py
"""
Anagrammer - application facade.

Purpose:
 - Own the dictionary trie for one session (built once, read-only after)
 - Turn a phrase into a letter bag and drive the search
 - Render word tuples as display strings
 - Simple public API for CLI/tests:
     search(text), anagrams(text, limit, ordered), stats()

Results are lazy: iterating stops the search as soon as the caller stops
pulling. ordered=True is the one exception, it has to see every result
before it can sort them.
"""

from __future__ import annotations
import logging
from itertools import islice
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, Optional, Sequence, Union

from anagrammator.context.normalizer import sanitize
from anagrammator.core.letter_bag import frequencies
from anagrammator.core.search import Anagram, search
from anagrammator.dictionary import MIN_WORD_LENGTH, build_dictionary, read_words

logger = logging.getLogger(__name__)

SEPARATOR = " "


def render(words: Sequence[str], separator: str = SEPARATOR) -> str:
    """Join one word sequence for display."""
    return separator.join(words)


class Anagrammer:
    """Multi-word anagram generator over a fixed dictionary.
    Public API:
      - search(text) -> Iterator[tuple of words]
      - anagrams(text, limit=None, ordered=False) -> Iterator[str]
      - stats() -> Dict[str, Any]
    """

    def __init__(
        self,
        words: Iterable[str],
        min_length: int = MIN_WORD_LENGTH,
        separator: str = SEPARATOR,
    ):
        self.min_length = min_length
        self.separator = separator
        self.dictionary = build_dictionary(words, min_length)
        logger.debug("Dictionary ready (min_length=%d)", min_length)

    @classmethod
    def from_file(cls, path: Union[str, Path], **kwargs) -> "Anagrammer":
        """Build from a line-oriented UTF-8 word list. OSError and UnicodeDecodeError propagate."""
        return cls(read_words(path), **kwargs)

    # Search -------------------------------------------------------------
    def search(self, text: str) -> Iterator[Anagram]:
        """Word tuples for `text` (whitespace and case ignored)."""
        letters = frequencies(sanitize(text))
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Searching %d letters: %s", letters.total(), letters.letters())
        return search(self.dictionary, letters)

    def anagrams(
        self, text: str, limit: Optional[int] = None, ordered: bool = False
    ) -> Iterator[str]:
        """
        Rendered anagrams of `text`.
        limit: stop after this many (None = all)
        ordered: sort lexicographically by rendered string. This runs the
                 whole search first, so combine with care on long phrases.
        """
        if limit is not None and limit < 0:
            raise ValueError(f"limit must not be negative, got {limit}")
        out: Iterable[str] = (render(words, self.separator) for words in self.search(text))
        if ordered:
            out = iter(sorted(out))
        if limit is not None:
            out = islice(out, limit)
        return iter(out)

    # Stats ----------------------------------------------------------------
    def stats(self) -> Dict[str, Any]:
        return {
            "words": self.dictionary.size(),
            "min_length": self.min_length,
            "separator": self.separator,
        }


def anagrams(
    text: str,
    word_source: Iterable[str],
    min_length: int = MIN_WORD_LENGTH,
    separator: str = SEPARATOR,
) -> Iterator[str]:
    """One-shot helper: build the dictionary from `word_source` and search `text`."""
    return Anagrammer(word_source, min_length=min_length, separator=separator).anagrams(text)
