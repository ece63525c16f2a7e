"""Board evaluation used at the leaves of the search."""

from typing import Mapping, Optional

from ..board import Board
from ..dictionary import is_vowel
from .models import HeuristicWeights


# Just under the 32-bit maximum, above any heuristic value
WIN_SCORE = (2 ** 31 - 1) - 30

DEFAULT_WEIGHTS = HeuristicWeights()


def evaluate(
    board: Board,
    inventory: Mapping[str, int],
    no_moves: bool = False,
    weights: Optional[HeuristicWeights] = None,
) -> int:
    """
    Score a board and the tiles still in hand.

    An empty hand is a win and a stuck non-empty hand is a loss. Otherwise
    the words on the board earn their letter scores (once per placement),
    every tile left costs a flat penalty, rare letters cost more, and a hand
    dominated by one letter is penalized, consonants harder than vowels.
    """
    w = weights or DEFAULT_WEIGHTS
    remaining = sum(inventory.values())

    if remaining == 0:
        return WIN_SCORE
    if no_moves:
        return -WIN_SCORE

    dictionary = board.dictionary
    score = sum(
        board.word_frequency(word) * dictionary.word_score(word)
        for word in board.words()
    )

    score -= w.tile_penalty * remaining
    score -= w.rare_penalty * sum(inventory.get(letter, 0) for letter in w.rare_letters)

    for letter, count in inventory.items():
        if count <= 0:
            continue
        vowel = is_vowel(letter)
        share = count / remaining
        if share >= w.share_threshold:
            score -= w.vowel_share_penalty if vowel else w.consonant_share_penalty
        if share >= w.high_share_threshold and remaining <= w.small_hand:
            score -= w.vowel_high_share_penalty if vowel else w.consonant_high_share_penalty
        if count >= w.cluster_count and remaining - count <= w.cluster_others:
            score -= w.vowel_cluster_penalty if vowel else w.consonant_cluster_penalty

    return score
