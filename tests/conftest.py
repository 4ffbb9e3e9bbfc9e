"""Shared fixtures for Countdown solver tests."""

from __future__ import annotations

import pytest

from countdown.dictionary import Dictionary

RUSTY_WORDS = ["aaa", "rut", "ruts", "rust", "rusty", "xxx"]


@pytest.fixture
def rusty_dictionary() -> Dictionary:
    """Six words built from an in-memory list. No file I/O."""
    return Dictionary.from_string("\n".join(RUSTY_WORDS) + "\n", max_word_length=5)


@pytest.fixture
def small_dictionary() -> Dictionary:
    """~40 hand-picked words, no length limit."""
    words = [
        # 2-letter
        "at", "an", "as", "in", "is", "it", "on", "or", "so", "to",
        # 3-letter
        "ant", "ate", "eat", "ion", "net", "not", "one", "ran", "rat",
        "sat", "set", "tan", "tea", "ten", "tin", "ton", "toe",
        # 4-letter
        "note", "rant", "rate", "sort", "star", "tear", "tone", "toot",
        # 5-letter
        "notes", "stare", "stone", "tenor", "otter",
        # 6+ letter
        "senator", "treason", "atoner",
    ]
    return Dictionary.from_string("\n".join(words))


@pytest.fixture
def word_file(tmp_path):
    """Plain-text word list on disk."""
    path = tmp_path / "words.txt"
    path.write_text("\n".join(RUSTY_WORDS) + "\n", encoding="utf-8")
    return path
