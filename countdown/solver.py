"""Backtracking letters solver: permutations of the bag walked through the trie."""

from __future__ import annotations

from countdown.dictionary import Dictionary, Transition


class InvalidLettersError(ValueError):
    """Letters given to the solver are too few or not A-Z."""


def validate_letters(text: str) -> str:
    """Uppercase *text* and check it is at least 2 letters, A-Z only."""
    if len(text) < 2:
        raise InvalidLettersError("At least 2 letters must be provided")
    # Before upper(): case mapping turns some non-ASCII characters into A-Z.
    if not text.isascii() or not text.isalpha():
        raise InvalidLettersError("Letters must be A-Z only")
    return text.upper()


class _SingleUsePool:
    """Each position in the bag may be used once per word.

    Repeated letters stay as separate positions, so "AA" can spell "AA".
    """

    def __init__(self, letters: str) -> None:
        self.letters = list(letters)
        self._used = [False] * len(self.letters)

    def eligible(self, i: int) -> bool:
        return not self._used[i]

    def take(self, i: int) -> None:
        self._used[i] = True

    def release(self, i: int) -> None:
        self._used[i] = False


class _ReusablePool:
    """Any distinct letter of the bag may be used any number of times."""

    def __init__(self, letters: str) -> None:
        self.letters = sorted(set(letters))

    def eligible(self, i: int) -> bool:
        return True

    def take(self, i: int) -> None:
        pass

    def release(self, i: int) -> None:
        pass


def _trace(chosen: list[str], result: Transition) -> None:
    indent = " " * (len(chosen) - 1)
    print(f"{indent}{''.join(chosen)} ({result.code})")


def find_words(letters: str, dictionary: Dictionary, min_length: int = 1,
               reuse_letters: bool = False, debug: bool = False) -> set[str]:
    """Find every dictionary word that can be spelt from *letters*.

    Letters are chosen one at a time and fed straight into the trie, so a
    prefix no word starts with is dropped before any longer arrangement of
    it is tried. *letters* must already be uppercase A-Z. With
    *reuse_letters* each distinct letter may appear any number of times.
    With *debug* every lookup is printed, indented by depth.
    """
    pool = _ReusablePool(letters) if reuse_letters else _SingleUsePool(letters)
    found: set[str] = set()
    chosen: list[str] = []

    def _search(node: int) -> None:
        for i, letter in enumerate(pool.letters):
            if not pool.eligible(i):
                continue

            chosen.append(letter)
            result = dictionary.transition(node, letter)

            if debug:
                _trace(chosen, result)

            if result.is_word_end and len(chosen) >= min_length:
                found.add("".join(chosen))

            # Absent and plain word ends have no child, which prunes this branch.
            if result.has_child:
                pool.take(i)
                _search(result.child)
                pool.release(i)

            chosen.pop()

    _search(0)
    return found
