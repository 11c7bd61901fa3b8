"""Conversion of Hangul transcriptions of Japanese into kana."""

from __future__ import annotations

from .jamo import decompose_hangul
from .tables import KanaRow, KanaTable, kana_table

_INITIAL_ROWS: dict[str, KanaRow] = {
    "ㄱ": KanaRow.GA,
    "ㅋ": KanaRow.KA,
    "ㄲ": KanaRow.KA,
    "ㄴ": KanaRow.NA,
    "ㄷ": KanaRow.DA,
    "ㅌ": KanaRow.TA,
    "ㄸ": KanaRow.TA,
    "ㅂ": KanaRow.BA,
    "ㅍ": KanaRow.PA,
    "ㅃ": KanaRow.PA,
    "ㅅ": KanaRow.SA,
    "ㅈ": KanaRow.JA,
    "ㅎ": KanaRow.HA,
    "ㅁ": KanaRow.MA,
    "ㄹ": KanaRow.RA,
    "ㅇ": KanaRow.AA,
}

_BASIC_VOWELS: dict[str, int] = {
    "ㅏ": 0,
    "ㅣ": 1,
    "ㅜ": 2,
    "ㅡ": 2,
    "ㅔ": 3,
    "ㅐ": 3,
    "ㅗ": 4,
}

_YO_VOWELS: dict[str, int] = {"ㅑ": 0, "ㅠ": 2, "ㅛ": 4}

_I_COLUMN = 1
_NASAL_FINALS = frozenset({"ㄴ", "ㅇ"})
_STOP_FINALS = frozenset({"ㄱ", "ㄷ", "ㅂ", "ㅅ"})


def _hiragana_specials(table: KanaTable) -> dict[str, str]:
    wa = table[KanaRow.WA]
    ya = table[KanaRow.YA]
    chi = table[KanaRow.TA][_I_COLUMN]
    yo = table[KanaRow.YO]
    chot = table[KanaRow.CHOT][0]
    return {
        "은": wa[0],
        "는": wa[0],
        "을": wa[4],
        "를": wa[4],
        "야": ya[0],
        "유": ya[2],
        "요": ya[4],
        "치": chi,
        "차": chi + yo[0],
        "챠": chi + yo[0],
        "츄": chi + yo[2],
        "초": chi + yo[4],
        "쵸": chi + yo[4],
        "츠": chot,
        "추": chot,
        "와": wa[0],
        " ": " ",
        ",": "、",
        ".": "。",
        "-": "ー",
    }


_HIRAGANA_SPECIALS = _hiragana_specials(kana_table(False))


def _convert_char(char: str, table: KanaTable, specials: dict[str, str]) -> str:
    special = specials.get(char)
    if special is not None:
        return special
    try:
        initial, medial, final = decompose_hangul(char)
    except ValueError:
        return char

    row = _INITIAL_ROWS.get(initial)
    if row is None:
        # Initials without a kana row are left untouched.
        return char

    parts: list[str] = []
    if medial in _BASIC_VOWELS:
        parts.append(table[row][_BASIC_VOWELS[medial]])
    elif medial in _YO_VOWELS:
        parts.append(table[row][_I_COLUMN])
        parts.append(table[KanaRow.YO][_YO_VOWELS[medial]])

    if final in _NASAL_FINALS:
        parts.append(table[KanaRow.N][0])
    elif final in _STOP_FINALS:
        parts.append(table[KanaRow.CHOT][0])
    return "".join(parts)


def convert_string(hangul: str, to_katakana: bool = False) -> str:
    """Convert a Hangul reading of Japanese into hiragana or katakana.

    Characters that are not Hangul syllables are passed through; in hiragana
    mode a few particles, ㅊ syllables and punctuation marks are special-cased.
    """
    table = kana_table(to_katakana)
    specials = {} if to_katakana else _HIRAGANA_SPECIALS
    return "".join(_convert_char(char, table, specials) for char in hangul)