"""
Pytest configuration and fixtures for blackjack tests.
"""

from unittest.mock import Mock

import pytest

from cardtable.blackjack.actor import Player
from cardtable.blackjack.blackjack import BlackjackGame
from cardtable.blackjack.hand import BlackjackHand
from cardtable.blackjack.rules import Rules
from cardtable.common.card import Card
from cardtable.common.deck import Deck
from cardtable.common.io_interface import TestIOInterface


def _make_hand(*codes) -> BlackjackHand:
    hand = BlackjackHand()
    for code in codes:
        hand.add_card(Card.from_code(code))
    return hand


@pytest.fixture
def io_interface():
    return TestIOInterface()


@pytest.fixture
def rules():
    return Rules()


@pytest.fixture
def stacked_deck():
    """
    Build a deck that deals the given card codes in order.

    Cards are dealt dealer first, then the player's two cards, then the
    player's hits, then the dealer's draws. Shuffling is a no-op.
    """

    def _stacked_deck(*codes):
        return Deck([Card.from_code(code) for code in codes], rng=Mock())

    return _stacked_deck


@pytest.fixture
def stacked_game(io_interface, rules, stacked_deck):
    """Build a game whose deck deals the given cards and whose player acts from the IO queue."""

    def _stacked_game(*codes, strategy=None, game_rules=None):
        player = Player("Player", io_interface, strategy)
        return BlackjackGame(
            game_rules or rules, io_interface, player, deck=stacked_deck(*codes)
        )

    return _stacked_game


@pytest.fixture
def make_hand():
    """Build a blackjack hand from card codes."""
    return _make_hand
