"""Crossword builder: places words with clues onto a fixed-size grid.

This package exposes the public API surface via:

- ``crossword_builder.engine.generator.CrosswordGenerator``: runs one generation.
- ``crossword_builder.engine.generator.generate_crossword``: one-call helper.
- ``crossword_builder.io.word_list`` helpers: read ``WORD:Clue`` and JSON word lists.
"""

from .engine.generator import (
    CrosswordGenerator,
    GenerationResult,
    GeneratorConfig,
    generate_crossword,
)
from .io.word_list import load_word_file, parse_word_entries

__all__ = [
    "CrosswordGenerator",
    "GenerationResult",
    "GeneratorConfig",
    "generate_crossword",
    "load_word_file",
    "parse_word_entries",
]

__version__ = "0.1.0"
