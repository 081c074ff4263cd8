"""String utilities: case changes, counting, validation, duplicates and permutations."""

from __future__ import annotations

import itertools
import string
from collections import Counter
from collections.abc import Iterator
from dataclasses import dataclass

_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_VOWELS = frozenset("aeiouAEIOU")
_ASCII_LETTERS = frozenset(string.ascii_letters)
_ASCII_ALNUM = frozenset(string.ascii_letters + string.digits)
_LOWERCASE = frozenset(string.ascii_lowercase)


@dataclass(frozen=True)
class LetterCounts:
    """Vowel, consonant and word counts of a sentence."""

    vowels: int
    consonants: int
    words: int


def to_upper(text: str) -> str:
    """Convert ASCII lowercase letters to uppercase."""
    return text.translate(_TO_UPPER)


def to_lower(text: str) -> str:
    """Convert ASCII uppercase letters to lowercase."""
    return text.translate(_TO_LOWER)


def is_vowel(ch: str) -> bool:
    """True for an English vowel in either case."""
    return ch in _VOWELS


def count_letters(sentence: str) -> LetterCounts:
    """Count vowels, consonants and space-separated words.

    Every space that does not follow another space starts a new word.
    """
    vowels = sum(1 for ch in sentence if is_vowel(ch))
    consonants = sum(1 for ch in sentence if ch in _ASCII_LETTERS and not is_vowel(ch))
    breaks = sum(
        1
        for i, ch in enumerate(sentence)
        if ch == " " and (i == 0 or sentence[i - 1] != " ")
    )
    return LetterCounts(vowels, consonants, 1 + breaks)


def is_valid_password(password: str) -> bool:
    """True when the text holds at least one ASCII letter or digit."""
    return any(ch in _ASCII_ALNUM for ch in password)


def reverse_string(text: str) -> str:
    """The text reversed."""
    return text[::-1]


def is_palindrome(text: str) -> bool:
    """True when the text equals its reversal in lower case."""
    return text == to_lower(reverse_string(text))


def _require_lowercase(text: str) -> None:
    bad = {ch for ch in text if ch not in _LOWERCASE}
    if bad:
        raise ValueError(f"only lowercase letters a-z are allowed, got {sorted(bad)!r}")


def duplicate_letters(text: str) -> dict[str, int]:
    """Letters occurring more than once, with their counts, in alphabetical order."""
    _require_lowercase(text)
    counts = Counter(text)
    return {ch: counts[ch] for ch in sorted(counts) if counts[ch] > 1}


def duplicate_letters_bitwise(text: str) -> list[str]:
    """Each repeated occurrence of a letter, in order, found with a bit mask."""
    _require_lowercase(text)
    seen = 0
    repeats: list[str] = []
    for ch in text:
        bit = 1 << (ord(ch) - ord("a"))
        if seen & bit:
            repeats.append(ch)
        else:
            seen |= bit
    return repeats


def is_anagram(first: str, second: str) -> bool:
    """True when both words use the same lowercase letters equally often."""
    if len(first) != len(second):
        return False
    _require_lowercase(first)
    _require_lowercase(second)
    return Counter(first) == Counter(second)


def permutations(text: str) -> Iterator[str]:
    """Yield every arrangement of the characters, ordered by their positions."""
    for arrangement in itertools.permutations(text):
        yield "".join(arrangement)