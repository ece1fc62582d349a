"""Command-line entry point: play one round in the terminal."""

import sys
from random import Random
from typing import TextIO

from cmdblackjack.cards import Deck
from cmdblackjack.game import BlackjackGame, EventType
from cmdblackjack.hand import GameResult
from cmdblackjack.render import TableRenderer


def run(out: TextIO | None = None, rng: Random | None = None) -> GameResult | None:
    """
    Play a full round, writing the table to `out`.

    Shows the deck before and after shuffling, then the dealt hands,
    totals and result.
    """
    renderer = TableRenderer(out or sys.stdout)
    renderer.draw_table()

    deck = Deck(rng=rng)
    renderer.draw_deck(deck)
    deck.shuffle()
    renderer.blank_line()
    renderer.draw_deck(deck)
    renderer.blank_line()

    game = BlackjackGame(deck=deck)
    game.subscribe(renderer.handle_event, EventType.ROUND_RESOLVED)
    result = game.play()
    if result is not None:
        renderer.draw_result(result)
    return result


def main() -> int:
    """Console script entry. Takes no arguments and always succeeds."""
    run()
    return 0
