"""Readers for user-supplied word lists."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, Iterable, List

from ..core.exceptions import WordListError
from ..core.models import WordEntry
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


def parse_word_entries(raw_entries: Iterable[str]) -> List[WordEntry]:
    """Parse ``WORD`` or ``WORD:Clue`` strings.

    Blank entries and ``#`` comments are skipped. The clue is everything after
    the first colon; a word without one gets an empty clue. Words are kept as
    written here, normalization happens in the generator.
    """

    entries: List[WordEntry] = []
    for item in raw_entries:
        item = item.strip()
        if not item or item.startswith("#"):
            continue
        if ":" in item:
            word, _, clue = item.partition(":")
            entries.append(WordEntry(word.strip(), clue.strip()))
        else:
            entries.append(WordEntry(item, ""))
    return entries


def entries_to_mapping(entries: Iterable[WordEntry]) -> Dict[str, str]:
    """Later entries for the same word overwrite earlier clues."""
    return {entry.word: entry.clue for entry in entries}


def load_word_file(path: Path | str) -> List[WordEntry]:
    """Load a word list from a ``.json`` object file or a ``WORD:Clue`` text file."""

    source = Path(path)
    if not source.exists():
        raise WordListError(f"Missing word list: {source}")
    try:
        text = source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise WordListError(f"Cannot read word list {source}: {exc}") from exc

    if source.suffix.lower() == ".json":
        entries = _parse_json(text, source)
    else:
        entries = parse_word_entries(text.splitlines())
    LOGGER.info("Loaded %d words from %s", len(entries), source)
    return entries


def _parse_json(text: str, source: Path) -> List[WordEntry]:
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise WordListError(f"Invalid JSON in {source}: {exc}") from exc
    if not isinstance(payload, dict):
        raise WordListError(f"{source} must contain a JSON object mapping words to clues")

    entries: List[WordEntry] = []
    for word, clue in payload.items():
        if not isinstance(clue, str):
            raise WordListError(f"Clue for {word!r} in {source} must be a string")
        entries.append(WordEntry(word, clue))
    return entries


__all__ = ["entries_to_mapping", "load_word_file", "parse_word_entries"]
