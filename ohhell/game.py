"""High-level game orchestration: hand-size schedule, dealer rotation, scores."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from random import Random
from typing import Dict, List, Optional, Sequence, Tuple

from .errors import InvalidPlayerCount, WrongPhase
from .round_state import RoundPhase, RoundState, create_round
from .rules_schema import DEFAULT_RULES, RuleSet
from .scoring import ScoredRound, init_scores, score_round

logger = logging.getLogger(__name__)


def build_schedule(max_cards: int) -> List[int]:
    """Return hand sizes ``1..max_cards`` followed by ``max_cards-1..1``."""
    up = list(range(1, max_cards + 1))
    down = list(range(max_cards - 1, 0, -1))
    return up + down


def compute_max_cards_per_player(num_players: int, rules: RuleSet = DEFAULT_RULES) -> int:
    """Largest hand size for the table: 12 for three, 9 for four, else 36 // n."""
    return rules.max_cards_for(num_players)


@dataclass(frozen=True)
class GameState:
    player_order: Tuple[str, ...]
    dealer_index: int
    max_cards_per_player: int
    schedule: Tuple[int, ...]
    round_index: int
    round: RoundState
    scores: Tuple[int, ...]
    history: Tuple[ScoredRound, ...] = ()
    rules: RuleSet = DEFAULT_RULES

    @property
    def is_over(self) -> bool:
        return self.round.phase is RoundPhase.DONE and self.round_index >= len(self.schedule)

    @property
    def current_cards_per_player(self) -> int:
        return self.round.cards_per_player

    def score_of(self, player_id: str) -> int:
        return self.scores[self.player_order.index(player_id)]

    def scores_by_player(self) -> Dict[str, int]:
        """Scores keyed by player, iterated in seating order."""
        return dict(zip(self.player_order, self.scores))


def create_game(
    player_order: Sequence[str],
    dealer_index: int = 0,
    rng: Optional[Random] = None,
    rules: Optional[RuleSet] = None,
) -> GameState:
    rules = rules or DEFAULT_RULES
    order = tuple(player_order)
    if len(order) < rules.min_players:
        raise InvalidPlayerCount(f"Need at least {rules.min_players} players, got {len(order)}.")

    max_cards = compute_max_cards_per_player(len(order), rules)
    if max_cards < 1:
        raise InvalidPlayerCount(f"Too many players ({len(order)}) to deal from a 36-card deck.")
    schedule = tuple(build_schedule(max_cards))

    round_state = create_round(0, order, dealer_index, schedule[0], rng=rng)
    logger.debug("new game: players=%s schedule=%s", order, schedule)

    return GameState(
        player_order=order,
        dealer_index=dealer_index,
        max_cards_per_player=max_cards,
        schedule=schedule,
        round_index=0,
        round=round_state,
        scores=init_scores(order),
        rules=rules,
    )


def with_round(game: GameState, round_state: RoundState) -> GameState:
    """Return the game carrying a newer snapshot of its current round."""
    if round_state.round_index != game.round.round_index:
        raise ValueError("Round snapshot belongs to a different round of this game.")
    return replace(game, round=round_state)


def finish_round_and_start_next(game: GameState, rng: Optional[Random] = None) -> GameState:
    """Score the finished round, rotate the dealer and deal the next schedule entry.

    Once the schedule is exhausted the returned game keeps the scored round
    (phase DONE) and no further round is dealt.
    """
    if game.round.phase is not RoundPhase.SCORING:
        raise WrongPhase(f"Cannot finish round in phase {game.round.phase.name}.")

    scored = score_round(game.round, game.scores, bonus=game.rules.exact_bid_bonus)
    next_round_index = game.round_index + 1
    next_dealer = (game.dealer_index + 1) % len(game.player_order)
    history = game.history + (scored,)

    if next_round_index >= len(game.schedule):
        logger.debug("game over after %d rounds: %s", next_round_index, scored.scores)
        return replace(
            game,
            round_index=next_round_index,
            dealer_index=next_dealer,
            round=scored.round,
            scores=scored.scores,
            history=history,
        )

    next_round = create_round(
        next_round_index,
        game.player_order,
        next_dealer,
        game.schedule[next_round_index],
        rng=rng,
    )
    return replace(
        game,
        round_index=next_round_index,
        dealer_index=next_dealer,
        round=next_round,
        scores=scored.scores,
        history=history,
    )


def winners(game: GameState) -> List[str]:
    """Players sharing the top cumulative score, in seating order."""
    best = max(game.scores)
    return [player for player, score in zip(game.player_order, game.scores) if score == best]
