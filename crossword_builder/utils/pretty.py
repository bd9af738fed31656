"""Pretty-print helpers for generated crosswords."""

from __future__ import annotations

import sys
from collections import Counter
from typing import TYPE_CHECKING, List

from ..core.constants import Direction

if TYPE_CHECKING:
    from ..engine.generator import GenerationResult


EMPTY_SYMBOL = "."


def format_grid(result: GenerationResult) -> str:
    width = result.cols
    header_cells = [f"{c:>2}" for c in range(width)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * width - 1))
    for r, row in enumerate(result.board):
        row_render = " ".join(f"{letter or EMPTY_SYMBOL:>2}" for letter in row)
        lines.append(f"{r:>2} | {row_render}")
    return "\n".join(lines)


def format_clues(result: GenerationResult) -> str:
    lines: List[str] = []
    for direction in (Direction.ACROSS, Direction.DOWN):
        lines.append(direction.value.title())
        for number, clue in result.clues(direction).items():
            lines.append(f"  {number:>3}. {clue}")
    return "\n".join(lines)


def print_generation_stats(result: GenerationResult, *, stream=None) -> None:
    """Print grid, clues and placement stats for a finished run."""

    stream = stream or sys.stdout
    print(format_grid(result), file=stream)

    # --- Grid geometry ---
    total_cells = result.rows * result.cols
    letter_cells = sum(1 for row in result.board for letter in row if letter is not None)

    print(file=stream)
    print("--- Grid ---", file=stream)
    print(f"  Size:          {result.rows} x {result.cols} ({total_cells} cells)", file=stream)
    print(f"  Letters:       {letter_cells} ({letter_cells / total_cells * 100:.0f}%)", file=stream)

    # --- Word stats ---
    placed = result.placed_words
    directions = Counter(p.direction for p in placed)
    lengths = [p.length for p in placed]

    print(file=stream)
    print("--- Words ---", file=stream)
    print(f"  Placed:        {len(placed)}/{len(result.words)}", file=stream)
    print(f"  Across:        {directions[Direction.ACROSS]}", file=stream)
    print(f"  Down:          {directions[Direction.DOWN]}", file=stream)
    if lengths:
        print(f"  Length range:  {min(lengths)}-{max(lengths)} (avg {sum(lengths) / len(lengths):.1f})", file=stream)
    if result.unplaced_words:
        print(f"  Unplaced:      {', '.join(result.unplaced_words)}", file=stream)
    if result.seed_unfittable:
        print("  Seed word does not fit the board; nothing was placed", file=stream)

    # --- Clues ---
    if placed:
        print(file=stream)
        print("--- Clues ---", file=stream)
        print(format_clues(result), file=stream)

    if result.seed is not None:
        print(file=stream)
        print(f"Seed: {result.seed}", file=stream)
