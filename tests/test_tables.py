import pytest

from hangul2kana.tables import (
    KanaRow,
    KanaTable,
    build_hiragana_table,
    build_katakana_table,
    kana_table,
)


def test_hiragana_vowel_row():
    assert build_hiragana_table()[KanaRow.AA] == ("あ", "い", "う", "え", "お")


def test_katakana_n_row():
    assert build_katakana_table()[KanaRow.N] == ("ン",)


def test_ya_and_wa_rows_have_gaps():
    table = build_hiragana_table()
    assert table[KanaRow.YA] == ("や", "", "ゆ", "", "よ")
    assert table[KanaRow.WA] == ("わ", "", "", "", "を")


def test_index_by_int():
    table = build_hiragana_table()
    assert table[int(KanaRow.CHOT)] == table[KanaRow.CHOT] == ("っ",)


def test_row_lengths():
    for table in (build_hiragana_table(), build_katakana_table()):
        rows = table.rows()
        assert len(rows) == len(KanaRow)
        for row in KanaRow:
            expected = 1 if row in (KanaRow.N, KanaRow.CHOT) else 5
            assert len(rows[row]) == expected


def test_scripts_align():
    hira = build_hiragana_table().rows()
    kata = build_katakana_table().rows()
    for hira_row, kata_row in zip(hira, kata):
        assert len(hira_row) == len(kata_row)
        for h, k in zip(hira_row, kata_row):
            assert (h == "") == (k == "")
            if h:
                assert ord(k) - ord(h) == 0x60


def test_kana_table_selects_script():
    assert kana_table(False) == build_hiragana_table()
    assert kana_table(True) == build_katakana_table()
    assert kana_table(True) is kana_table(True)


def test_wrong_row_count_rejected():
    with pytest.raises(ValueError):
        KanaTable((("あ",),))


def test_unknown_row_rejected():
    with pytest.raises(ValueError):
        build_hiragana_table()[len(KanaRow)]