"""Round scoring helpers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence, Tuple

from .errors import MissingBid, WrongPhase
from .round_state import RoundPhase, RoundState, finish_round

logger = logging.getLogger(__name__)

EXACT_BID_BONUS = 5


@dataclass(frozen=True)
class ScoredRound:
    round: RoundState
    scores: Tuple[int, ...]
    contributions: Tuple[int, ...]


def init_scores(player_order: Sequence[str]) -> Tuple[int, ...]:
    return (0,) * len(player_order)


def round_contribution(tricks: int, bid: int, bonus: int = EXACT_BID_BONUS) -> int:
    """Tricks taken, plus the bonus when they match the bid exactly."""
    return tricks + (bonus if tricks == bid else 0)


def score_round(
    round_state: RoundState,
    scores: Sequence[int],
    *,
    bonus: int = EXACT_BID_BONUS,
) -> ScoredRound:
    if round_state.phase is not RoundPhase.SCORING:
        raise WrongPhase(f"Round is not ready for scoring (phase {round_state.phase.name}).")
    if len(scores) != round_state.num_players:
        raise ValueError("Scores must hold one entry per player.")

    contributions = []
    for player_id, tricks in zip(round_state.player_order, round_state.tricks_won):
        bid = round_state.bid_of(player_id)
        if bid is None:
            raise MissingBid(f"Missing bid for player {player_id!r}.")
        contributions.append(round_contribution(tricks, bid, bonus))

    new_scores = tuple(score + gained for score, gained in zip(scores, contributions))
    logger.debug("round %d scored: %s", round_state.round_index, contributions)
    return ScoredRound(
        round=finish_round(round_state),
        scores=new_scores,
        contributions=tuple(contributions),
    )
