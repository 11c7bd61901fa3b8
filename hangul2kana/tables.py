"""Hiragana and katakana tables indexed by kana row and vowel column."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from functools import lru_cache


class KanaRow(IntEnum):
    """Rows of the kana tables."""

    AA = 0
    KA = 1
    SA = 2
    TA = 3
    NA = 4
    HA = 5
    MA = 6
    YA = 7
    RA = 8
    WA = 9
    N = 10
    GA = 11
    JA = 12
    DA = 13
    BA = 14
    PA = 15
    YO = 16
    CHOT = 17


@dataclass(frozen=True)
class KanaTable:
    """One kana script laid out as rows of vowel columns (a, i, u, e, o)."""

    entries: tuple[tuple[str, ...], ...]

    def __post_init__(self) -> None:
        entries = tuple(tuple(row) for row in self.entries)
        if len(entries) != len(KanaRow):
            raise ValueError(
                f"a kana table needs {len(KanaRow)} rows, got {len(entries)}"
            )
        object.__setattr__(self, "entries", entries)

    def __getitem__(self, row: KanaRow | int) -> tuple[str, ...]:
        return self.entries[KanaRow(row)]

    def rows(self) -> tuple[tuple[str, ...], ...]:
        """All rows in KanaRow order."""
        return self.entries


def _table(rows: dict[KanaRow, tuple[str, ...]]) -> KanaTable:
    return KanaTable(tuple(rows.get(row, ()) for row in KanaRow))


def build_hiragana_table() -> KanaTable:
    """Build the hiragana table."""
    return _table({
        KanaRow.AA: ("あ", "い", "う", "え", "お"),
        KanaRow.KA: ("か", "き", "く", "け", "こ"),
        KanaRow.SA: ("さ", "し", "す", "せ", "そ"),
        KanaRow.TA: ("た", "ち", "つ", "て", "と"),
        KanaRow.NA: ("な", "に", "ぬ", "ね", "の"),
        KanaRow.HA: ("は", "ひ", "ふ", "へ", "ほ"),
        KanaRow.MA: ("ま", "み", "む", "め", "も"),
        KanaRow.YA: ("や", "", "ゆ", "", "よ"),
        KanaRow.RA: ("ら", "り", "る", "れ", "ろ"),
        KanaRow.WA: ("わ", "", "", "", "を"),
        KanaRow.N: ("ん",),
        KanaRow.GA: ("が", "ぎ", "ぐ", "げ", "ご"),
        KanaRow.JA: ("ざ", "じ", "ず", "ぜ", "ぞ"),
        KanaRow.DA: ("だ", "ぢ", "づ", "で", "ど"),
        KanaRow.BA: ("ば", "び", "ぶ", "べ", "ぼ"),
        KanaRow.PA: ("ぱ", "ぴ", "ぷ", "ぺ", "ぽ"),
        KanaRow.YO: ("ゃ", "", "ゅ", "", "ょ"),
        KanaRow.CHOT: ("っ",),
    })


def build_katakana_table() -> KanaTable:
    """Build the katakana table."""
    return _table({
        KanaRow.AA: ("ア", "イ", "ウ", "エ", "オ"),
        KanaRow.KA: ("カ", "キ", "ク", "ケ", "コ"),
        KanaRow.SA: ("サ", "シ", "ス", "セ", "ソ"),
        KanaRow.TA: ("タ", "チ", "ツ", "テ", "ト"),
        KanaRow.NA: ("ナ", "ニ", "ヌ", "ネ", "ノ"),
        KanaRow.HA: ("ハ", "ヒ", "フ", "ヘ", "ホ"),
        KanaRow.MA: ("マ", "ミ", "ム", "メ", "モ"),
        KanaRow.YA: ("ヤ", "", "ユ", "", "ヨ"),
        KanaRow.RA: ("ラ", "リ", "ル", "レ", "ロ"),
        KanaRow.WA: ("ワ", "", "", "", "ヲ"),
        KanaRow.N: ("ン",),
        KanaRow.GA: ("ガ", "ギ", "グ", "ゲ", "ゴ"),
        KanaRow.JA: ("ザ", "ジ", "ズ", "ゼ", "ゾ"),
        KanaRow.DA: ("ダ", "ヂ", "ヅ", "デ", "ド"),
        KanaRow.BA: ("バ", "ビ", "ブ", "ベ", "ボ"),
        KanaRow.PA: ("パ", "ピ", "プ", "ペ", "ポ"),
        KanaRow.YO: ("ャ", "", "ュ", "", "ョ"),
        KanaRow.CHOT: ("ッ",),
    })


@lru_cache(maxsize=None)
def kana_table(katakana: bool) -> KanaTable:
    """The shared katakana table if ``katakana`` is true, else hiragana."""
    return build_katakana_table() if katakana else build_hiragana_table()