# letter_bag.py
# Immutable letter multiset ("bag") used by the anagram search.
# Every decrement returns a new bag, so sibling search branches that
# start from the same parent bag never see each other's changes.

from __future__ import annotations
from collections import Counter
from collections.abc import Mapping
from typing import Dict, Iterator, Optional


class LetterBag(Mapping):
    """
    Read-only mapping: character -> remaining count.
    All stored counts are strictly positive, a missing key means zero.
    Compares equal to any mapping with the same items and is hashable.
    """

    __slots__ = ("_counts", "_hash")

    def __init__(self, counts: Optional[Mapping] = None) -> None:
        clean: Dict[str, int] = {}
        for key, n in (counts or {}).items():
            if not isinstance(n, int) or isinstance(n, bool):
                raise ValueError(f"count for {key!r} must be an int, got {n!r}")
            if n < 0:
                raise ValueError(f"count for {key!r} must not be negative, got {n}")
            if n:
                clean[key] = n
        self._counts = clean
        self._hash: Optional[int] = None

    # Mapping interface ------------------------------------------------
    def __getitem__(self, key: str) -> int:
        return self._counts[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._counts)

    def __len__(self) -> int:
        """Number of distinct letters (not the letter total, see total())."""
        return len(self._counts)

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash(frozenset(self._counts.items()))
        return self._hash

    def __repr__(self) -> str:
        return f"LetterBag({self.letters()!r})"

    # bag operations ---------------------------------------------------
    def decrement(self, key: str) -> "LetterBag":
        """
        Return a new bag with one `key` taken out.
        A count that drops to zero removes the key. Taking out a letter
        that isn't there returns an equal bag.
        """
        n = self._counts.get(key, 0)
        if n == 0:
            return self
        out = LetterBag.__new__(LetterBag)
        counts = dict(self._counts)
        if n == 1:
            del counts[key]
        else:
            counts[key] = n - 1
        out._counts = counts
        out._hash = None
        return out

    def total(self) -> int:
        """Number of letters left in the bag."""
        return sum(self._counts.values())

    def letters(self) -> str:
        """Sorted rendering, e.g. 'aahiilnoprrs' for 'liron shapira'."""
        return "".join(ch * n for ch, n in sorted(self._counts.items()))


EMPTY_BAG = LetterBag()


def frequencies(text: str) -> LetterBag:
    """Count each character of an already sanitized string."""
    if not text:
        return EMPTY_BAG
    return LetterBag(Counter(text))


def decrement(bag: LetterBag, key: str) -> LetterBag:
    return bag.decrement(key)
