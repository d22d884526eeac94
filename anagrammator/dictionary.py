# dictionary.py
# Word list loading + eligibility filtering + trie construction.
# Dictionary words go through the same sanitize() as the input phrase,
# so "Hair Pin" in a word list is stored as "hairpin".

from __future__ import annotations
import logging
from pathlib import Path
from typing import Iterable, Iterator, List, Union

from anagrammator.context.normalizer import sanitize
from anagrammator.core.trie import TrieNode, build

logger = logging.getLogger(__name__)

SYSTEM_DICTIONARY = Path("/usr/share/dict/words")
MIN_WORD_LENGTH = 5  # shorter words make for dull anagrams ("a", "in", "on", ...)


def read_words(path: Union[str, Path] = SYSTEM_DICTIONARY) -> List[str]:
    """
    Read a newline-delimited UTF-8 word list.
    Missing/unreadable files raise OSError, a file in another encoding
    raises UnicodeDecodeError; the caller decides what to do.
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        words = f.read().splitlines()
    logger.info("Read %d lines from word list %s", len(words), path)
    return words


def check_min_length(min_length: int) -> int:
    if min_length < 1:
        raise ValueError(f"min_length must be a positive integer, got {min_length}")
    return min_length


def is_eligible(word: str, min_length: int = MIN_WORD_LENGTH) -> bool:
    return len(word) >= min_length


def eligible_words(words: Iterable[str], min_length: int = MIN_WORD_LENGTH) -> Iterator[str]:
    """Sanitize every word and keep the ones long enough to be used."""
    check_min_length(min_length)
    for raw in words:
        word = sanitize(raw)
        if is_eligible(word, min_length):
            yield word


def build_dictionary(words: Iterable[str], min_length: int = MIN_WORD_LENGTH) -> TrieNode:
    """Trie of every eligible word in `words`."""
    return build(eligible_words(words, min_length))
