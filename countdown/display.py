"""Terminal rendering of found words, grouped by length."""

from __future__ import annotations

import shutil
from collections.abc import Iterable
from itertools import groupby


def sort_words(words: Iterable[str]) -> list[str]:
    """Longest first, then alphabetical."""
    return sorted(words, key=lambda w: (-len(w), w))


def group_by_length(words: Iterable[str]) -> list[tuple[int, list[str]]]:
    return [(length, list(group)) for length, group in groupby(sort_words(words), key=len)]


def columns_for(width: int, word_length: int) -> int:
    """How many words of *word_length* fit on a line of *width* characters."""
    if width <= 0:
        return 1
    return max(1, (width - 1) // (word_length + 2))


def terminal_width() -> int:
    """Width of the attached terminal, or 0 if there isn't one."""
    return shutil.get_terminal_size(fallback=(0, 0)).columns


def render_results(words: Iterable[str], width: int = 0) -> str:
    """Render the words as a count line followed by one block per length."""
    groups = group_by_length(words)
    total = sum(len(group) for _, group in groups)

    lines: list[str] = [f"{total:,} {'word' if total == 1 else 'words'} found"]

    for length, group in groups:
        lines.append(f"== {length} letter words ({len(group)}) ==")
        cols = columns_for(width, length)
        for start in range(0, len(group), cols):
            lines.append("  " + "  ".join(group[start:start + cols]))

    return "\n".join(lines)


def print_results(words: Iterable[str]) -> None:
    """Print the words laid out for the current terminal."""
    print(render_results(words, terminal_width()))
