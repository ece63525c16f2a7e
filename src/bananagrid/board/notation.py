"""Placement log: write a board as text and rebuild it from that text."""

import re
from typing import List, Tuple

from ..dictionary import Dictionary
from .board import Board
from .grid import DEFAULT_SIDE_LENGTH
from .models import Move, NotationError, Orientation, PlacedWord, PlacementEntry


ROOT_RE = re.compile(r'^(?P<word>[A-Z]+)\s+H$', re.IGNORECASE | re.ASCII)
# WORD[j] @ TARGET[i] D, with an optional #n ordinal on the target
MOVE_RE = re.compile(
    r'^(?P<word>[A-Z]+)\[(?P<word_idx>\d+)\]\s*@\s*'
    r'(?P<target>[A-Z]+)(?:#(?P<ordinal>[1-9]\d*))?\[(?P<target_idx>\d+)\]\s+'
    r'(?P<orientation>[HV])$',
    re.IGNORECASE | re.ASCII,
)


def format_placements(board: Board) -> str:
    """One line per placement, in the order they were made."""
    lines = []
    for placed, move in board.history():
        if move is None:
            lines.append(f"{placed.text} {board.position_of(placed).orientation.value}")
        else:
            lines.append(move.notation())
    return "\n".join(lines)


def _entry_from_move(match: re.Match) -> PlacementEntry:
    return PlacementEntry(
        word=match["word"].upper(),
        word_idx=int(match["word_idx"]),
        target=match["target"].upper(),
        target_ordinal=int(match["ordinal"] or 1),
        target_idx=int(match["target_idx"]),
        orientation=match["orientation"].upper(),
    )


def parse_placements(text: str) -> Tuple[List[PlacementEntry], List[NotationError]]:
    """
    Parse a placement log into entries, collecting errors.

    The first line is `WORD H`; each later line is `NEW[j] @ ANCHOR[i] D`.
    A bad first line stops parsing since every later line hangs off it; bad
    later lines are reported and skipped.
    """
    numbered = [(n, line.strip()) for n, line in enumerate(text.splitlines(), start=1)]
    numbered = [(n, line) for n, line in numbered if line]
    if not numbered:
        return [], [NotationError(code="EMPTY_LOG", message="Placement log is empty")]

    first_no, first = numbered[0]
    root = ROOT_RE.match(first)
    if root is None:
        return [], [NotationError(
            code="INVALID_ROOT",
            message=f"Invalid first line, expected 'WORD H': '{first}'",
            line=first_no,
        )]

    entries = [PlacementEntry(word=root["word"].upper(), orientation=Orientation.HORIZONTAL)]
    errors: List[NotationError] = []
    for line_no, line in numbered[1:]:
        match = MOVE_RE.match(line)
        if match is None:
            errors.append(NotationError(
                code="INVALID_LINE",
                message=f"Invalid line format: '{line}'",
                line=line_no,
            ))
        else:
            entries.append(_entry_from_move(match))

    return entries, errors


def replay(text: str, dictionary: Dictionary, side_length: int = DEFAULT_SIDE_LENGTH) -> Board:
    """
    Rebuild a board from a placement log.

    Raises:
        ValueError: if the log does not parse or a placement is rejected
    """
    entries, errors = parse_placements(text)
    if errors:
        raise ValueError(f"Parse errors: {[e.message for e in errors]}")

    board = Board(dictionary, side_length=side_length)
    root = entries[0]
    if not board.add_first_word(root.word):
        raise ValueError(f"First word '{root.word}' could not be placed")

    for entry in entries[1:]:
        move = Move(
            anchor=PlacedWord(entry.target, entry.target_ordinal),
            anchor_index=entry.target_idx,
            word=entry.word,
            word_index=entry.word_idx,
            orientation=entry.orientation,
        )
        if not board.add_move(move):
            raise ValueError(f"Placement '{move.notation()}' was rejected")

    return board
