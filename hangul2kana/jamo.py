"""Decomposition of precomposed Hangul syllables into their jamo."""

from __future__ import annotations

from typing import NamedTuple

SYLLABLE_BASE = 0xAC00

INITIAL: tuple[str, ...] = (
    "ㄱ", "ㄲ", "ㄴ", "ㄷ", "ㄸ",
    "ㄹ", "ㅁ", "ㅂ", "ㅃ", "ㅅ",
    "ㅆ", "ㅇ", "ㅈ", "ㅉ", "ㅊ",
    "ㅋ", "ㅌ", "ㅍ", "ㅎ",
)

MEDIAL: tuple[str, ...] = (
    "ㅏ", "ㅐ", "ㅑ", "ㅒ", "ㅓ",
    "ㅔ", "ㅕ", "ㅖ", "ㅗ", "ㅘ",
    "ㅙ", "ㅚ", "ㅛ", "ㅜ", "ㅝ",
    "ㅞ", "ㅟ", "ㅠ", "ㅡ", "ㅢ",
    "ㅣ",
)

# The empty string stands for "no final consonant".
FINAL: tuple[str, ...] = (
    "", "ㄱ", "ㄲ", "ㄳ", "ㄴ",
    "ㄵ", "ㄶ", "ㄷ", "ㄹ", "ㄺ",
    "ㄻ", "ㄼ", "ㄽ", "ㄾ", "ㄿ",
    "ㅀ", "ㅁ", "ㅂ", "ㅄ", "ㅅ",
    "ㅆ", "ㅇ", "ㅈ", "ㅊ", "ㅋ",
    "ㅌ", "ㅍ", "ㅎ",
)

SYLLABLE_COUNT = len(INITIAL) * len(MEDIAL) * len(FINAL)


class Jamo(NamedTuple):
    """The initial, medial and final jamo of one syllable."""

    initial: str
    medial: str
    final: str


def decompose_hangul(syllable: str) -> Jamo:
    """Split a precomposed syllable (U+AC00..U+D7A3) into its jamo.

    Raises ValueError if ``syllable`` is not a single precomposed syllable.
    """
    if len(syllable) != 1:
        raise ValueError(f"expected a single character, got {syllable!r}")
    index = ord(syllable) - SYLLABLE_BASE
    if not 0 <= index < SYLLABLE_COUNT:
        raise ValueError(f"{syllable!r} is not a precomposed Hangul syllable")
    per_initial = len(MEDIAL) * len(FINAL)
    initial, rest = divmod(index, per_initial)
    medial, final = divmod(rest, len(FINAL))
    return Jamo(INITIAL[initial], MEDIAL[medial], FINAL[final])


def decompose_string(text: str) -> list[str]:
    """Decompose every syllable of ``text``; other characters are kept as is."""
    result: list[str] = []
    for char in text:
        try:
            jamo = decompose_hangul(char)
        except ValueError:
            result.append(char)
            continue
        result.extend(part for part in jamo if part)
    return result