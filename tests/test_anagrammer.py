# tests/test_anagrammer.py
# facade + dictionary filtering + sanitize

import logging

import pytest
from anagrammator import Anagrammer, anagrams, render, sanitize
from anagrammator.core.letter_bag import LetterBag
from anagrammator.dictionary import build_dictionary, eligible_words, is_eligible, read_words


# -----------------------------------
# sanitize / eligibility
# -----------------------------------
@pytest.mark.parametrize(
    "raw, clean",
    [
        ("Liron Shapira", "lironshapira"),
        ("  in\tven\ntories ", "inventories"),
        ("", ""),
        ("   \n\t", ""),
        ("Don't", "don't"),  # punctuation is kept
    ],
)
def test_sanitize(raw, clean):
    assert sanitize(raw) == clean


def test_sanitize_none():
    assert sanitize(None) == ""


def test_is_eligible_threshold():
    assert is_eligible("solar")
    assert not is_eligible("note")
    assert is_eligible("note", min_length=4)


def test_dictionary_words_are_sanitized(mixed_words):
    words = list(eligible_words(mixed_words))
    assert "stone" in words and "notes" in words
    assert "Stone" not in words
    assert "note" not in words and "tin" not in words
    assert "hairpin" in list(eligible_words(["Hair Pin"]))


def test_min_length_must_be_positive():
    with pytest.raises(ValueError):
        build_dictionary(["solar"], min_length=0)
    with pytest.raises(ValueError):
        Anagrammer(["solar"], min_length=-3)


def test_read_words(words_file, mixed_words):
    assert read_words(words_file) == mixed_words


def test_read_words_missing_file(tmp_path):
    with pytest.raises(OSError):
        read_words(tmp_path / "nope.txt")


# -----------------------------------
# anagrams()
# -----------------------------------
def test_liron_shapira_scenario():
    out = list(anagrams("liron shapira", ["solar", "hairpin"]))
    assert "solar hairpin" in out
    assert {" ".join(sorted(s.split())) for s in out} == {"hairpin solar"}


def test_inventories_scenario(mixed_words):
    out = set(anagrams("inventories", mixed_words))
    assert {"soviet inner", "inner soviet"} <= out


def test_empty_dictionary_scenario():
    assert list(anagrams("anything", [])) == []
    # only ineligible words is the same as no words
    assert list(anagrams("anything", ["any", "thing"])) == []


@pytest.mark.parametrize("text", ["", "   ", "\n\t "])
def test_empty_input_scenario(text, mixed_words):
    assert list(anagrams(text, mixed_words)) == []


def test_every_result_uses_eligible_words(mixed_words):
    for line in anagrams("Stone Notes", mixed_words):
        for w in line.split():
            assert len(w) >= 5


def test_lower_threshold_allows_short_words():
    out = set(anagrams("tin note", ["tin", "note", "tinnote"], min_length=3))
    assert {"tin note", "note tin", "tinnote"} <= out


def test_render_and_separator():
    assert render(("solar", "hairpin")) == "solar hairpin"
    assert render(("solar", "hairpin"), separator="-") == "solar-hairpin"
    out = set(anagrams("liron shapira", ["solar", "hairpin"], separator=" + "))
    assert out == {"solar + hairpin", "hairpin + solar"}


# -----------------------------------
# Anagrammer facade
# -----------------------------------
@pytest.fixture
def engine(stone_words):
    return Anagrammer(stone_words)


def test_search_returns_word_tuples(engine):
    results = list(engine.search("Stone   NOTES"))
    assert ("stone", "notes") in results
    assert len(results) == 36


def test_limit(engine):
    assert len(list(engine.anagrams("stone notes", limit=5))) == 5
    assert list(engine.anagrams("stone notes", limit=0)) == []
    assert len(list(engine.anagrams("stone notes", limit=1000))) == 36


def test_negative_limit_rejected(engine):
    with pytest.raises(ValueError):
        engine.anagrams("stone notes", limit=-1)


def test_ordered_is_lexicographic(engine):
    out = list(engine.anagrams("stone notes", ordered=True))
    assert out == sorted(out)
    assert out[0] == "notes notes"
    assert list(engine.anagrams("stone notes", ordered=True, limit=2)) == out[:2]


def test_same_phrase_twice_same_results(engine):
    assert set(engine.anagrams("tones onset")) == set(engine.anagrams("stone notes"))


def test_stats(engine):
    assert engine.stats() == {"words": 6, "min_length": 5, "separator": " "}


def test_from_file(words_file):
    eng = Anagrammer.from_file(words_file)
    assert "solar hairpin" in set(eng.anagrams("liron shapira"))


def test_from_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        Anagrammer.from_file(tmp_path / "missing.txt")


def test_long_phrase():
    out = list(Anagrammer(["aaaaa"]).anagrams("a" * 1500, limit=1))
    assert out == [" ".join(["aaaaa"] * 300)]


def test_debug_letters_only_built_when_enabled(engine, monkeypatch, caplog):
    def boom(self):
        raise AssertionError("letters() called with debug off")

    caplog.set_level(logging.INFO, logger="anagrammator.anagrammer")
    monkeypatch.setattr(LetterBag, "letters", boom)
    assert len(list(engine.search("stone notes"))) == 36

    monkeypatch.undo()
    caplog.set_level(logging.DEBUG, logger="anagrammator.anagrammer")
    list(engine.search("stone notes"))
    assert "eennoosstt" in caplog.text


# -----------------------------------
# word list encodings
# -----------------------------------
@pytest.fixture
def latin1_file(tmp_path):
    path = tmp_path / "latin1.txt"
    path.write_bytes("caf\xe9s\nsolar\nhairpin\n".encode("latin-1"))
    return path


def test_read_words_wrong_encoding(latin1_file):
    with pytest.raises(UnicodeDecodeError):
        read_words(latin1_file)
    with pytest.raises(UnicodeDecodeError):
        Anagrammer.from_file(latin1_file)
