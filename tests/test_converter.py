import pytest

from hangul2kana.converter import convert_string
from hangul2kana.tables import KanaRow, build_hiragana_table, build_katakana_table

HIRA = build_hiragana_table()
KATA = build_katakana_table()


def test_worked_example():
    assert convert_string("곤니치와") == "ごんにちわ"


def test_default_is_hiragana():
    assert convert_string("가") == convert_string("가", False) == HIRA[KanaRow.GA][0]


@pytest.mark.parametrize(
    "text, row, col",
    [("은", KanaRow.WA, 0), ("는", KanaRow.WA, 0), ("을", KanaRow.WA, 4),
     ("를", KanaRow.WA, 4), ("야", KanaRow.YA, 0), ("유", KanaRow.YA, 2),
     ("요", KanaRow.YA, 4), ("와", KanaRow.WA, 0), ("치", KanaRow.TA, 1)],
)
def test_hiragana_special_syllables(text, row, col):
    assert convert_string(text) == HIRA[row][col]


def test_ch_contractions():
    chi = HIRA[KanaRow.TA][1]
    yo = HIRA[KanaRow.YO]
    assert convert_string("차") == convert_string("챠") == chi + yo[0]
    assert convert_string("츄") == chi + yo[2]
    assert convert_string("초") == convert_string("쵸") == chi + yo[4]
    assert convert_string("츠") == convert_string("추") == HIRA[KanaRow.CHOT][0]


@pytest.mark.parametrize("char, kana", [(",", "、"), (".", "。"), ("-", "ー"), (" ", " ")])
def test_hiragana_punctuation(char, kana):
    assert convert_string(char) == kana


def test_katakana_keeps_punctuation():
    assert convert_string(",.-", True) == ",.-"


def test_finals():
    ga = HIRA[KanaRow.GA][0]
    assert convert_string("강") == ga + HIRA[KanaRow.N][0]
    assert convert_string("간") == ga + HIRA[KanaRow.N][0]
    assert convert_string("각") == ga + HIRA[KanaRow.CHOT][0]
    assert convert_string("갓") == ga + HIRA[KanaRow.CHOT][0]
    assert convert_string("갈") == ga


def test_yo_vowel_katakana():
    assert convert_string("캬", True) == KATA[KanaRow.KA][1] + KATA[KanaRow.YO][0]


def test_katakana_has_no_special_cases():
    assert convert_string("야", True) == KATA[KanaRow.AA][1] + KATA[KanaRow.YO][0]


def test_unmapped_vowel_yields_only_final():
    assert convert_string("거") == ""
    assert convert_string("건") == HIRA[KanaRow.N][0]


def test_unmapped_initial_passes_through():
    assert convert_string("짜") == "짜"
    assert convert_string("쳐", True) == "쳐"


def test_non_hangul_passes_through():
    assert convert_string("abc") == "abc"
    assert convert_string("") == ""


def test_katakana_output_contains_no_hiragana():
    result = convert_string("가나다라마바사아자카타파하", True)
    assert result
    assert not any("\u3040" <= ch <= "\u309f" for ch in result)


def test_scripts_match_on_plain_syllables():
    text = "고마워바보"
    hira = convert_string(text)
    kata = convert_string(text, True)
    assert [ord(k) - ord(h) for h, k in zip(hira, kata)] == [0x60] * len(hira)