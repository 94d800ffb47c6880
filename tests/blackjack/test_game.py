import random

import pytest

from cardtable.blackjack.action import Action
from cardtable.blackjack.blackjack import BlackjackGame
from cardtable.blackjack.result import Outcome
from cardtable.blackjack.rules import Rules
from cardtable.blackjack.state import EndRoundState, ShuffleState
from cardtable.blackjack.strategy import BasicStrategy, ThresholdStrategy
from cardtable.common.card import Card
from cardtable.common.deck import DeckExhaustedError
from cardtable.common.io_interface import DummyIOInterface


def codes(cards):
    return [str(card) for card in cards]


def test_new_game(rules, io_interface):
    game = BlackjackGame(rules, io_interface)
    assert game.player.name == "Player"
    assert game.dealer.name == "Dealer"
    assert game.deck.size == 52
    assert isinstance(game.current_state, ShuffleState)
    assert game.result is None


def test_player_stands_and_wins(stacked_game, io_interface):
    game = stacked_game("TS", "KH", "QD", "7C")
    io_interface.add_player_action(Action.STAND)

    assert game.play_round() == Outcome.PLAYER_WIN
    assert isinstance(game.current_state, EndRoundState)
    assert game.result.player_score == 20
    assert game.result.dealer_score == 17
    assert codes(game.result.dealer_cards) == ["TS", "7C"]
    assert io_interface.sent_messages == [
        "The dealer is showing: 10 (TS)",
        "You are showing: 20 (KH, QD)",
        "The dealer flips a 7C.\tThey now have: 17",
        "You win!",
    ]


def test_player_busts_and_dealer_does_not_play(stacked_game, io_interface):
    game = stacked_game("5S", "TH", "6D", "9C", "2C")
    io_interface.add_player_action(Action.HIT)

    assert game.play_round() == Outcome.DEALER_WIN
    assert game.result.player_busted
    assert game.result.player_score == 25
    assert codes(game.dealer.hand.cards) == ["5S"]
    assert game.deck.remaining == 1
    assert "You were dealt 9C.\tYou now have: 25" in io_interface.sent_messages
    assert io_interface.sent_messages[-2:] == ["You went bust!", "You lose!"]


def test_player_ace_renormalized_instead_of_busting(stacked_game, io_interface):
    game = stacked_game("TS", "AH", "6D", "9C", "8C")
    io_interface.add_player_action(Action.HIT)
    io_interface.add_player_action(Action.STAND)

    assert game.play_round() == Outcome.DEALER_WIN
    assert not game.result.player_busted
    assert game.result.player_score == 16
    assert game.result.dealer_score == 18
    assert "You were dealt 9C.\tYou now have: 16" in io_interface.sent_messages


def test_dealer_busts(stacked_game, io_interface):
    game = stacked_game("6S", "TH", "8D", "TC", "9H")
    io_interface.add_player_action(Action.STAND)

    assert game.play_round() == Outcome.PLAYER_WIN
    assert game.result.dealer_busted
    assert game.result.dealer_score == 25
    assert io_interface.sent_messages[-2:] == ["The dealer went bust!", "You win!"]


def test_dealer_ace_renormalized(stacked_game, io_interface):
    game = stacked_game("AS", "TH", "9D", "5C", "TD", "4H")
    io_interface.add_player_action(Action.STAND)

    assert game.play_round() == Outcome.DEALER_WIN
    assert codes(game.dealer.hand.cards) == ["AS", "5C", "TD", "4H"]
    assert game.result.dealer_score == 20
    assert not game.result.dealer_busted


def test_player_on_21_is_not_asked(stacked_game, io_interface):
    game = stacked_game("9S", "AH", "KD", "TC")

    # the IO queue is empty, so any question would raise
    assert game.play_round() == Outcome.PLAYER_WIN
    assert game.result.player_score == 21
    assert game.result.dealer_score == 19


def test_player_stops_hitting_at_21(stacked_game, io_interface):
    game = stacked_game("9S", "TH", "5D", "6C", "8C")
    io_interface.add_player_action(Action.HIT)

    assert game.play_round() == Outcome.PLAYER_WIN
    assert game.result.player_score == 21
    assert io_interface.player_actions == []


def test_tie_goes_to_dealer_by_default(stacked_game, io_interface):
    game = stacked_game("TS", "TH", "7D", "7C")
    io_interface.add_player_action(Action.STAND)

    assert game.play_round() == Outcome.DEALER_WIN
    assert io_interface.sent_messages[-1] == "You lose!"


def test_tie_is_push_when_configured(stacked_game, io_interface):
    game = stacked_game("TS", "TH", "7D", "7C", game_rules=Rules(push_on_tie=True))
    io_interface.add_player_action(Action.STAND)

    assert game.play_round() == Outcome.PUSH
    assert io_interface.sent_messages[-1] == "Push."
    assert game.stats.draws == 1


@pytest.mark.parametrize(
    "hit_soft_17, dealer_cards, outcome",
    [
        (False, ["AS", "6C"], Outcome.DEALER_WIN),
        (True, ["AS", "6C", "2D"], Outcome.DEALER_WIN),
    ],
)
def test_dealer_soft_17(stacked_game, io_interface, hit_soft_17, dealer_cards, outcome):
    game = stacked_game(
        "AS", "TH", "6D", "6C", "2D", game_rules=Rules(dealer_hit_soft_17=hit_soft_17)
    )
    io_interface.add_player_action(Action.STAND)

    assert game.play_round() == outcome
    assert codes(game.dealer.hand.cards) == dealer_cards


def test_round_with_strategy(stacked_game, io_interface):
    game = stacked_game(
        "TS", "TH", "3D", "4C", "6C", "8C", strategy=ThresholdStrategy(17)
    )

    assert game.play_round() == Outcome.PLAYER_WIN
    assert game.result.player_score == 17
    assert game.result.dealer_busted


def test_deck_exhausted_mid_round(stacked_game, io_interface):
    game = stacked_game("TS", "TH", "2D")
    io_interface.add_player_action(Action.HIT)

    with pytest.raises(DeckExhaustedError):
        game.play_round()


def test_rounds_reshuffle_and_update_stats():
    io_interface = DummyIOInterface()
    game = BlackjackGame(Rules(), io_interface, rng=random.Random(11))
    game.player.strategy = BasicStrategy()

    outcomes = [game.play_round() for _ in range(25)]

    report = game.stats.report()
    assert report["games_played"] == 25
    assert game.round_number == 25
    assert report["player_wins"] == outcomes.count(Outcome.PLAYER_WIN)
    assert report["dealer_wins"] == outcomes.count(Outcome.DEALER_WIN)
    assert report["draws"] == 0


def test_game_is_reproducible_with_seed():
    def play(seed):
        game = BlackjackGame(Rules(), DummyIOInterface(), rng=random.Random(seed))
        game.player.strategy = BasicStrategy()
        return [game.play_round() for _ in range(10)], game.result.to_dict()

    assert play(99) == play(99)


def test_result_to_dict(stacked_game, io_interface):
    game = stacked_game("TS", "KH", "QD", "7C")
    io_interface.add_player_action(Action.STAND)
    game.play_round()

    assert game.result.to_dict() == {
        "outcome": "player",
        "player_score": 20,
        "dealer_score": 17,
        "player_busted": False,
        "dealer_busted": False,
        "player_cards": ["KH", "QD"],
        "dealer_cards": ["TS", "7C"],
    }
    assert game.result.player_won


def test_card_from_stacked_deck_is_a_card(stacked_deck):
    assert stacked_deck("QH").deal() == Card.from_code("QH")
