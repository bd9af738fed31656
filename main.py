"""CLI entrypoint for the crossword builder."""

from crossword_builder.cli import main


if __name__ == "__main__":  # pragma: no cover
    main()
