# anagrammator/context/normalizer.py
import re

_space_re = re.compile(r"\s+")


def sanitize(s: str) -> str:
    """
    Normalize a phrase (or dictionary word) before letter counting:
    drop all whitespace and lower-case. Punctuation and accents are kept.
    """
    if not s:
        return ""
    return _space_re.sub("", s).lower()
