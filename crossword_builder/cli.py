"""Command line interface: read words, generate a crossword, emit JSON."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import List

from .core.exceptions import CrosswordError
from .core.models import WordEntry
from .engine.generator import CrosswordGenerator, GeneratorConfig
from .io.word_list import entries_to_mapping, load_word_file, parse_word_entries
from .utils.logger import configure_logging
from .utils.pretty import print_generation_stats


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Place words with clues onto a crossword grid",
    )
    parser.add_argument("--rows", type=int, required=True, help="Grid height in cells")
    parser.add_argument("--cols", type=int, required=True, help="Grid width in cells")
    parser.add_argument(
        "--words",
        nargs="+",
        metavar="WORD",
        help="Words to place (format: WORD or WORD:Clue)",
    )
    parser.add_argument(
        "--words-file",
        type=Path,
        metavar="FILE",
        help="JSON object of word -> clue, or one WORD:Clue entry per line (# comments and blank lines ignored)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument(
        "--no-isolated",
        action="store_true",
        help="Do not force unconnected words into empty regions of the board",
    )
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--pretty",
        action="store_true",
        help="Print the grid and clues instead of JSON on stdout",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    parser.add_argument(
        "--engine-log-level",
        type=str,
        default=None,
        help="Separate logging level for the placement engine (defaults to --log-level)",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.WARNING)
    engine_level = None
    if args.engine_log_level:
        engine_level = getattr(logging, args.engine_log_level.upper(), None)
    configure_logging(level, engine_level=engine_level)

    if not args.words and not args.words_file:
        parser.error("provide at least --words or --words-file")

    entries: List[WordEntry] = []
    try:
        if args.words_file:
            entries.extend(load_word_file(args.words_file))
        if args.words:
            entries.extend(parse_word_entries(args.words))

        config = GeneratorConfig(
            rows=args.rows,
            cols=args.cols,
            seed=args.seed,
            place_isolated=not args.no_isolated,
        )
        result = CrosswordGenerator(entries_to_mapping(entries), config).generate()
    except CrosswordError as exc:
        parser.exit(status=2, message=f"error: {exc}\n")

    output_text = json.dumps(result.to_jsonable(), ensure_ascii=False, indent=2)
    if args.output:
        args.output.write_text(output_text, encoding="utf-8")
    if args.pretty:
        print_generation_stats(result)
    elif not args.output:
        print(output_text)


if __name__ == "__main__":  # pragma: no cover
    main()
