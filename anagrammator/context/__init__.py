# anagrammator/context/__init__.py
# text normalization applied to phrases and dictionary words

from .normalizer import sanitize  # strip whitespace + lower-case

__all__ = [
    "sanitize",
]
