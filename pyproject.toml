[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hangul2kana"
version = "0.1.0"
description = "Convert Korean Hangul transcriptions of Japanese readings into hiragana or katakana"
requires-python = ">=3.10"
dependencies = []
keywords = ["hangul", "kana", "hiragana", "katakana", "korean", "japanese", "transliteration"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Environment :: Console",
    "Natural Language :: Korean",
    "Natural Language :: Japanese",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Linguistic",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hangul2kana = "hangul2kana.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hangul2kana"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
