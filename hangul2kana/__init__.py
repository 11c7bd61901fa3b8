"""Convert Hangul transcriptions of Japanese readings into kana, with jamo decomposition and kana tables."""

__version__ = "0.1.0"
__all__ = ["cli", "converter", "jamo", "tables"]