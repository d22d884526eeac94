# tests/conftest.py
# shared fixtures: small word lists and a word list file on disk

import pytest

# words that rearrange into each other ("stone notes", "onset tones", ...)
STONE_WORDS = ["stone", "notes", "tones", "onset", "seton", "steno"]

# mixed list: short words, a prefix pair, the scenario words, odd casing
MIXED_WORDS = [
    "a", "in", "tin", "note",          # too short at the default threshold
    "solar", "solaria", "hairpin",
    "inner", "soviet",
    "Stone", "NOTES",
] + STONE_WORDS


@pytest.fixture
def stone_words():
    return list(STONE_WORDS)


@pytest.fixture
def mixed_words():
    return list(MIXED_WORDS)


@pytest.fixture
def words_file(tmp_path, mixed_words):
    """Newline-delimited word list file, like /usr/share/dict/words."""
    path = tmp_path / "words.txt"
    path.write_text("\n".join(mixed_words) + "\n", encoding="utf-8")
    return path
