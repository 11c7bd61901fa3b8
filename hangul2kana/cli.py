"""Interactive command line front end for the converter."""

from __future__ import annotations

import argparse
import sys

from .converter import convert_string
from .jamo import decompose_string

BANNER = "************ Initialization Complete! ************"
PROMPT = "일본어 독음을 입력하세요."
DECOMPOSE_SAMPLE = "강감찬"
CONVERT_SAMPLE = "곤니치와"


def main(argv: list[str] | None = None) -> int:
    """Show the sample conversions, then convert lines read from stdin."""
    parser = argparse.ArgumentParser(
        prog="hangul2kana",
        description="Convert Hangul readings of Japanese into kana.",
    )
    parser.add_argument(
        "--katakana", action="store_true", help="convert into katakana"
    )
    args = parser.parse_args(argv)

    print(BANNER)
    print("DecomposeString: " + " ".join(decompose_string(DECOMPOSE_SAMPLE)))
    print(f'convertString("{CONVERT_SAMPLE}"): {convert_string(CONVERT_SAMPLE)}')

    while True:
        print(PROMPT, flush=True)
        line = sys.stdin.readline()
        if not line:
            break
        print(convert_string(line.rstrip("\r\n"), args.katakana))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())