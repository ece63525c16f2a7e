"""
Command-line entry point for building Bananagrams crosswords.

Usage:
    python -m bananagrid.main C A T S
    python -m bananagrid.main "q u e e n s" --side 15 --depth 2 --verbose
    python -m bananagrid.main --replay placements.txt
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .board import replay
from .dictionary import Dictionary, DictionaryLoadError
from .engine import LetterInventory, Solver, SolverConfig, load_config


FAILURE_MESSAGE = (
    "Unable to build a complete crossword from these tiles. "
    "Try adding more tiles or a larger word list."
)


def build_config(args: argparse.Namespace) -> SolverConfig:
    """Config file first, then command-line overrides."""
    config = load_config(args.config) if args.config else SolverConfig()

    overrides = {}
    if args.side is not None:
        overrides["side_length"] = args.side
    if args.depth is not None:
        overrides["search_depth"] = args.depth
    if args.words is not None:
        overrides["words_path"] = args.words
    if overrides:
        config = SolverConfig(**{**config.model_dump(), **overrides})
    return config


def load_dictionary(config: SolverConfig) -> Dictionary:
    if config.words_path is not None:
        return Dictionary.from_file(config.words_path)
    return Dictionary.default()


def prompt_for_tiles(args: argparse.Namespace) -> List[str]:
    """Ask for a side length and tiles on stdin."""
    print("Hello! Initial set up:")
    decision = input("Do you wish to set a custom board dimension? (y/n): ")
    if decision.strip().lower() == "y":
        args.side = int(input("Board side length: "))
    return [input("Enter all tiles, separated by spaces: ")]


def run_replay(path: str, dictionary: Dictionary, config: SolverConfig, trim: bool) -> int:
    log_path = Path(path)
    if not log_path.exists():
        print(f"Error: Placement log not found: {path}", file=sys.stderr)
        return 1

    board = replay(log_path.read_text(), dictionary, side_length=config.side_length)
    result = board.validate()
    print(board.render(trim=trim))
    print()
    print(f"Valid: {result.valid}")
    for error in result.errors:
        print(f"  {error.message}")
    return 0 if result.valid else 2


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        description="Build a Bananagrams crossword that uses every tile",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  side_length: 21
  search_depth: 2
  words_path: words.txt
  weights:
    tile_penalty: 25
        """
    )
    parser.add_argument(
        "tiles",
        nargs="*",
        help="Letter tiles, e.g. 'C A T S' (prompted for when omitted)"
    )
    parser.add_argument(
        "--side", "-s",
        type=int,
        help="Board side length (default: 33)"
    )
    parser.add_argument(
        "--depth", "-d",
        type=int,
        help="Search depth in moves (default: 1)"
    )
    parser.add_argument(
        "--words", "-w",
        help="Path to a word list, one word per line (default: bundled list)"
    )
    parser.add_argument(
        "--config", "-c",
        help="Path to YAML configuration file"
    )
    parser.add_argument(
        "--output", "-o",
        help="Path to save the build result as JSON"
    )
    parser.add_argument(
        "--trim",
        action="store_true",
        help="Only print the occupied part of the board"
    )
    parser.add_argument(
        "--replay",
        help="Rebuild a board from a placement log file and check it"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log progress and print the placement log"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    tiles = args.tiles
    try:
        if not tiles and not args.replay:
            tiles = prompt_for_tiles(args)
        config = build_config(args)
        dictionary = load_dictionary(config)
    except (ValueError, FileNotFoundError, DictionaryLoadError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.replay:
        try:
            return run_replay(args.replay, dictionary, config, args.trim)
        except ValueError as e:
            print(f"Error replaying {args.replay}: {e}", file=sys.stderr)
            return 1

    try:
        inventory = LetterInventory.from_tiles(tiles)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    solver = Solver(dictionary, config)
    board, success = solver.build(inventory)
    result = solver.result(trim=args.trim)

    print()
    print(board.render(trim=args.trim))

    if args.verbose:
        print()
        print("=== Placements ===")
        for line in result.placements:
            print(line)

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w') as f:
            json.dump(result.model_dump(), f, indent=2, default=str)
        if args.verbose:
            print(f"Result saved to: {output_path}")

    if not success:
        print()
        print(FAILURE_MESSAGE)
        print(f"Reason: {result.end_reason}")
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
