"""Simple bot arena: plays complete games between bot strategies."""

from __future__ import annotations

import argparse
import logging
from random import Random
from typing import Dict, Iterable, Mapping

from ohhell.bidding import Bid, expected_bidder
from ohhell.cards import short_label
from ohhell.game import GameState, create_game, finish_round_and_start_next, winners, with_round
from ohhell.round_state import RoundPhase, RoundState, expected_player, play_card, submit_bid

from .base import BotStrategy
from .baseline_first_legal import FirstLegalBot
from .random_bot import RandomBot

logger = logging.getLogger(__name__)

BOT_REGISTRY: Dict[str, type[BotStrategy]] = {
    "first": FirstLegalBot,
    "random": RandomBot,
}


def _resolve_bidding(round_state: RoundState, bots: Mapping[str, BotStrategy]) -> RoundState:
    while round_state.phase is RoundPhase.BIDDING:
        player = expected_bidder(round_state.player_order, round_state.dealer_index, len(round_state.bids))
        tricks = bots[player].choose_bid(round_state, player)
        round_state = submit_bid(round_state, Bid(player, tricks))
    return round_state


def _play_out(round_state: RoundState, bots: Mapping[str, BotStrategy]) -> RoundState:
    while round_state.phase is RoundPhase.PLAYING:
        player = expected_player(round_state)
        card = bots[player].choose_card(round_state, player)
        round_state = play_card(round_state, player, card)
    return round_state


def play_round(round_state: RoundState, bots: Mapping[str, BotStrategy]) -> RoundState:
    for bot in dict.fromkeys(bots.values()):
        bot.on_round_start(round_state)
    round_state = _resolve_bidding(round_state, bots)
    return _play_out(round_state, bots)


def run_game(
    bots: Mapping[str, BotStrategy],
    *,
    seed: int | None = None,
    dealer_index: int = 0,
) -> GameState:
    rng = Random(seed)
    game = create_game(list(bots), dealer_index, rng=rng)
    while not game.is_over:
        logger.info(
            "round %d: %d cards, trump %s, dealer %s",
            game.round_index,
            game.round.cards_per_player,
            game.round.trump_suit,
            game.round.dealer_id,
        )
        game = with_round(game, play_round(game.round, bots))
        before = game.scores
        game = finish_round_and_start_next(game, rng=rng)
        if any(after < prior for prior, after in zip(before, game.scores)):
            raise RuntimeError("Score decreased unexpectedly.")
    return game


def main(argv: Iterable[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Run a bot game.")
    parser.add_argument("--players", type=int, default=4, help="Number of seats at the table.")
    parser.add_argument("--bot", default="first", choices=BOT_REGISTRY.keys())
    parser.add_argument("--seed", type=int, default=123)
    parser.add_argument("--verbose", action="store_true", help="Log every round and play.")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    bot_cls = BOT_REGISTRY[args.bot]
    bots = {f"P{idx + 1}": bot_cls() for idx in range(args.players)}
    game = run_game(bots, seed=args.seed)

    for result in game.history:
        played = result.round
        tricks = " ".join(
            short_label(trick.winning_card) for trick in played.completed_tricks
        )
        print(
            f"Round {played.round_index:2d} | cards={played.cards_per_player:2d} | "
            f"trump={played.trump_suit} | contributions={list(result.contributions)} | {tricks}"
        )
    print(f"Final scores: {game.scores_by_player()}")
    print(f"Winners: {', '.join(winners(game))}")


if __name__ == "__main__":
    main()
