# hangul2kana

Turn Japanese readings written in Hangul into kana.

Korean speakers often write Japanese words by ear in Hangul. For example,
*konnichiwa* is written `곤니치와`. `hangul2kana` converts such text syllable
by syllable into hiragana (the default) or katakana.

## Installation

```
pip install .
```

## Library use

```python
from hangul2kana.converter import convert_string
from hangul2kana.jamo import decompose_hangul, decompose_string

convert_string("곤니치와")          # -> 'ごんにちわ'
convert_string("사쿠라", True)      # -> 'サクラ'

decompose_hangul("강")              # -> Jamo(initial='ㄱ', medial='ㅏ', final='ㅇ')
decompose_string("강감찬")          # -> ['ㄱ', 'ㅏ', 'ㅇ', 'ㄱ', 'ㅏ', 'ㅁ', 'ㅊ', 'ㅏ', 'ㄴ']
```

`decompose_hangul` accepts one precomposed syllable (U+AC00 to U+D7A3). It
returns a `Jamo` named tuple with the fields `initial`, `medial` and `final`.
`final` is the empty string when the syllable has no final consonant. Any
other input raises `ValueError`. `decompose_string` applies it to every
character and keeps the characters that are not syllables as they are.

### How `convert_string(hangul, to_katakana=False)` works

- The initial consonant picks a kana row:
  - ㄱ → が
  - ㅋ/ㄲ → か
  - ㄴ → な
  - ㄷ → だ
  - ㅌ/ㄸ → た
  - ㅂ → ば
  - ㅍ/ㅃ → ぱ
  - ㅅ → さ
  - ㅈ → ざ
  - ㅎ → は
  - ㅁ → ま
  - ㄹ → ら
  - ㅇ → あ
- The medial vowel picks the column:
  - ㅏ → a
  - ㅣ → i
  - ㅜ/ㅡ → u
  - ㅔ/ㅐ → e
  - ㅗ → o
- ㅑ, ㅠ and ㅛ give the i-column kana followed by a small ゃ, ゅ or ょ.
- A final ㄴ or ㅇ adds ん. A final ㄱ, ㄷ, ㅂ or ㅅ adds っ. Other finals add nothing.
- Characters that are not Hangul syllables pass through unchanged.
- A syllable passes through unchanged when its initial consonant has no kana row (for example ㅊ, ㅆ, ㅉ outside the special cases below).
- A syllable whose vowel is not listed above gets no kana for its vowel.

In hiragana mode a few syllables and marks are handled specially:

| Input | Output |
|-------|--------|
| 은, 는, 와 | わ |
| 을, 를 | を |
| 야, 유, 요 | や, ゆ, よ |
| 치 | ち |
| 차, 챠 | ちゃ |
| 츄 | ちゅ |
| 초, 쵸 | ちょ |
| 츠, 추 | っ |
| `,` | `、` |
| `.` | `。` |
| `-` | `ー` |

Katakana mode has none of these special cases.

### Kana tables

`hangul2kana.tables` provides the tables on their own.

- `KanaRow` is an `IntEnum` of the rows: `AA`, `KA`, … `PA`, `YO` (small ya/yu/yo) and `CHOT` (small tsu).
- `KanaTable` is indexed by a `KanaRow`. Its `rows()` method returns every row in order.
- `build_hiragana_table()` and `build_katakana_table()` build fresh tables.
- `kana_table(katakana)` returns a shared, cached table for the chosen script.

## Command line

```
hangul2kana [--katakana]
```

The command first prints a banner, a decomposition of `강감찬` and the
conversion of `곤니치와`. It then prompts for input and reads lines from
standard input. It prints the kana for each line until input ends. With
`--katakana` the lines are converted into katakana.

## What it does not do

Conversion works on whole strings only. The package does not convert input
incrementally, jamo by jamo, as it is typed.

## Running the tests

```
pip install .[test]
pytest
```