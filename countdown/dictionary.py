"""Arena-backed prefix trie built from a word list, with O(1) letter transitions."""

from __future__ import annotations

import gzip
import io
import logging
import os
import struct
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

log = logging.getLogger("countdown")

ALPHABET_SIZE = 26

# Each slot holds one object reference.
SLOT_SIZE = struct.calcsize("P")

GZIP_MAGIC = b"\x1f\x8b"

DEFAULT_DICTIONARIES = [
    "words.txt",
    "words.txt.gz",
    "data/words.txt",
    "data/words.txt.gz",
    "/etc/dictionaries-common/words",
    "/usr/share/dict/words",
]


class DuplicateWordError(ValueError):
    """The same word was inserted into the trie twice."""

    def __init__(self, word: str) -> None:
        super().__init__(f"Duplicate word {word}")
        self.word = word


class TransitionKind(Enum):
    ABSENT = "x"
    CONTINUES = "n"
    WORD_END = "e"
    WORD_END_CONTINUES = "en"


@dataclass(frozen=True)
class Transition:
    """Value of one (node, letter) slot."""
    kind: TransitionKind
    child: int | None = None

    @property
    def is_word_end(self) -> bool:
        return self.kind in (TransitionKind.WORD_END, TransitionKind.WORD_END_CONTINUES)

    @property
    def has_child(self) -> bool:
        return self.child is not None

    @property
    def code(self) -> str:
        return self.kind.value


ABSENT = Transition(TransitionKind.ABSENT)
WORD_END = Transition(TransitionKind.WORD_END)


def continues(child: int) -> Transition:
    return Transition(TransitionKind.CONTINUES, child)


def word_end_continues(child: int) -> Transition:
    return Transition(TransitionKind.WORD_END_CONTINUES, child)


@dataclass
class LoadStats:
    """Counters gathered while reading a word source."""
    lines: int = 0
    words: int = 0
    too_short_or_long: int = 0
    wrong_case: int = 0
    duplicates: int = 0


def _letter_index(letter: str | int) -> int:
    if isinstance(letter, int):
        return letter
    return ord(letter) - ord("A")


def _is_ascii_lower(word: str) -> bool:
    return all("a" <= ch <= "z" for ch in word)


def _empty_node() -> list[Transition]:
    return [ABSENT] * ALPHABET_SIZE


class Dictionary:
    """Immutable trie of words stored as a flat list of 26-slot nodes.

    Node 0 is the root. Slots are indexed by ``ord(letter) - ord("A")`` and
    hold a :class:`Transition`. Build one with :func:`build_dictionary` or
    the loaders below; there is no way to add words afterwards.
    """

    __slots__ = ("_nodes", "_stats")

    def __init__(self, nodes: list[list[Transition]], stats: LoadStats) -> None:
        self._nodes = nodes
        self._stats = stats

    @classmethod
    def from_string(cls, text: str, max_word_length: int | None = None,
                    on_duplicate: str = "error") -> Dictionary:
        """Build from newline-separated words."""
        return build_dictionary(text.split("\n"), max_word_length, on_duplicate)

    def transition(self, node: int, letter: str | int) -> Transition:
        """Follow *letter* (``"A"``-``"Z"`` or 0-25) out of *node*."""
        return self._nodes[node][_letter_index(letter)]

    def __len__(self) -> int:
        return len(self._nodes)

    @property
    def node_count(self) -> int:
        return len(self._nodes)

    @property
    def word_count(self) -> int:
        return self._stats.words

    @property
    def mem_usage(self) -> int:
        """Bytes taken by the slot tables."""
        return self.node_count * ALPHABET_SIZE * SLOT_SIZE

    @property
    def stats(self) -> LoadStats:
        return self._stats

    def __contains__(self, word: str) -> bool:
        word = word.upper()
        if not word or not all("A" <= ch <= "Z" for ch in word):
            return False
        node = 0
        for ch in word[:-1]:
            result = self.transition(node, ch)
            if not result.has_child:
                return False
            node = result.child
        return self.transition(node, word[-1]).is_word_end


def build_dictionary(lines: Iterable[str], max_word_length: int | None,
                     on_duplicate: str = "error") -> Dictionary:
    """Build a :class:`Dictionary` from lowercase word lines.

    Lines shorter than 2, longer than *max_word_length* (``None`` for no
    limit) or containing anything but ``a``-``z`` are skipped and counted.
    A repeated word raises :class:`DuplicateWordError` unless
    *on_duplicate* is ``"ignore"``, in which case the first one is kept.
    """
    if on_duplicate not in ("error", "ignore"):
        raise ValueError(f"on_duplicate must be 'error' or 'ignore', not {on_duplicate!r}")

    nodes: list[list[Transition]] = [_empty_node()]
    stats = LoadStats()

    for line in lines:
        stats.lines += 1
        word = line.rstrip("\r\n")

        length = len(word)
        if length < 2 or (max_word_length is not None and length > max_word_length):
            stats.too_short_or_long += 1
            continue

        if not _is_ascii_lower(word):
            stats.wrong_case += 1
            continue

        try:
            _insert(nodes, word)
        except DuplicateWordError:
            if on_duplicate == "error":
                raise
            stats.duplicates += 1
            log.debug("Skipping duplicate word %s", word)
            continue

        stats.words += 1

    return Dictionary(nodes, stats)


def _insert(nodes: list[list[Transition]], word: str) -> None:
    node = 0
    last = len(word) - 1

    for i, ch in enumerate(word):
        letter = ord(ch) - ord("a")
        slot = nodes[node][letter]

        if i == last:
            if slot.kind is TransitionKind.ABSENT:
                nodes[node][letter] = WORD_END
            elif slot.kind is TransitionKind.CONTINUES:
                nodes[node][letter] = word_end_continues(slot.child)
            else:
                raise DuplicateWordError(word)
        elif slot.has_child:
            node = slot.child
        else:
            nodes.append(_empty_node())
            child = len(nodes) - 1
            if slot.kind is TransitionKind.WORD_END:
                nodes[node][letter] = word_end_continues(child)
            else:
                nodes[node][letter] = continues(child)
            node = child


def describe_path(path: str | Path) -> str:
    """Describe *path*, following symlinks as ``link -> target``."""
    path = Path(path)
    if path.is_symlink():
        target = Path(os.readlink(path))
        if not target.is_absolute():
            target = path.parent / target
        return f"{path} -> {describe_path(target)}"
    return str(path)


def load_words_from_file(path: str | Path, max_word_length: int | None,
                         on_duplicate: str = "error") -> Dictionary:
    """Load a word list, transparently decompressing gzip files."""
    log.info("Loading words from %s", describe_path(path))

    with open(path, "rb") as raw:
        compressed = raw.read(2) == GZIP_MAGIC
        raw.seek(0)
        binary = gzip.GzipFile(fileobj=raw) if compressed else raw
        with io.TextIOWrapper(binary, encoding="utf-8") as f:
            try:
                dictionary = build_dictionary(f, max_word_length, on_duplicate)
            except UnicodeDecodeError as e:
                raise OSError(f"{path} is not valid UTF-8: {e}") from e

    stats = dictionary.stats
    log.info(
        "%s total lines, (%s too short or long, %s not all lower case)",
        f"{stats.lines:,}", f"{stats.too_short_or_long:,}", f"{stats.wrong_case:,}",
    )
    if stats.duplicates:
        log.info("%s duplicate words skipped", f"{stats.duplicates:,}")
    log.info(
        "Dictionary words %s, size %s (%s bytes)",
        f"{dictionary.word_count:,}", f"{dictionary.node_count:,}", f"{dictionary.mem_usage:,}",
    )
    return dictionary


def default_dictionary_path() -> str | None:
    """Return the first default word list that exists, if any."""
    for path in DEFAULT_DICTIONARIES:
        if os.path.isfile(path):
            return path
    return None


def load_default_dictionary(max_word_length: int | None = None,
                            on_duplicate: str = "error") -> Dictionary:
    """Load the first word list found in :data:`DEFAULT_DICTIONARIES`."""
    path = default_dictionary_path()
    if path is None:
        raise FileNotFoundError(
            "No dictionary found. Looked for: " + ", ".join(DEFAULT_DICTIONARIES)
        )
    return load_words_from_file(path, max_word_length, on_duplicate)
