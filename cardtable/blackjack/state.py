"""
This module provides the round state machine for a Blackjack game. It uses the
state design pattern: each phase of a round is a state whose handle method
performs the phase, notifies the interface, and moves the game to the next
state. A round progresses through ShuffleState, DealingState, PlayerTurnState,
DealerTurnState and EndRoundState.

Classes:

GameState: An abstract base class for game states.
ShuffleState: The deck is shuffled and both hands are cleared.
DealingState: The dealer receives one card and the player two.
PlayerTurnState: The player hits until standing, reaching the bust limit or busting.
DealerTurnState: The dealer draws while under the dealer limit.
EndRoundState: Scores are compared and the outcome recorded.
"""

import logging
from abc import ABC, abstractmethod

from cardtable.blackjack.decision_logger import decision_logger
from cardtable.blackjack.result import Outcome, RoundResult

logger = logging.getLogger(__name__)


class GameState(ABC):
    """
    Abstract base class for game states.
    """

    @abstractmethod
    def handle(self, game) -> None:
        """The method that handles the game state."""

    def __str__(self) -> str:
        return self.__class__.__name__


class ShuffleState(GameState):
    """
    The game state where the deck is shuffled for a new round.
    """

    def handle(self, game):
        game.deck.shuffle()
        game.player.reset()
        game.dealer.reset()
        game.result = None
        decision_logger.log_round_start(game.round_number, [game.player.name])
        game.set_state(DealingState())


class DealingState(GameState):
    """
    The game state where the dealer deals the opening cards.
    """

    def handle(self, game):
        rules = game.rules

        game.dealer.receive_card(game.deck.deal())
        game.io_interface.output(
            f"The dealer is showing: {game.dealer.score(rules)} ({game.dealer.hand})"
        )

        game.player.receive_card(game.deck.deal())
        game.player.receive_card(game.deck.deal())
        game.io_interface.output(
            f"You are showing: {game.player.score(rules)} ({game.player.hand})"
        )

        game.set_state(PlayerTurnState())


class PlayerTurnState(GameState):
    """
    The game state where it's the player's turn to play.
    """

    def handle(self, game):
        rules = game.rules
        player = game.player

        while player.score(rules) < rules.bust_limit and player.wants_hit(
            game.dealer.up_card, rules
        ):
            card = game.deck.deal()
            score = player.hit(card, rules)
            game.io_interface.output(f"You were dealt {card}.\tYou now have: {score}")

        if player.is_busted(rules):
            game.io_interface.output("You went bust!")
            logger.debug("%s busted with %d", player.name, player.score(rules))
            game.set_state(EndRoundState())
            return

        if not player.done:
            player.stand()
        game.set_state(DealerTurnState())


class DealerTurnState(GameState):
    """
    The game state where it's the dealer's turn to play.
    """

    def handle(self, game):
        rules = game.rules
        dealer = game.dealer

        while dealer.should_hit(rules):
            card = game.deck.deal()
            score = dealer.hit(card, rules)
            game.io_interface.output(
                f"The dealer flips a {card}.\tThey now have: {score}"
            )

        if dealer.is_busted(rules):
            game.io_interface.output("The dealer went bust!")
            logger.debug("Dealer busted with %d", dealer.score(rules))
        elif not dealer.done:
            dealer.stand()

        game.set_state(EndRoundState())


class EndRoundState(GameState):
    """
    The game state where the round is ending.
    """

    def handle(self, game):
        result = self.resolve(game)
        game.result = result
        game.stats.update(result)

        if result.outcome is Outcome.PLAYER_WIN:
            game.io_interface.output("You win!")
        elif result.outcome is Outcome.PUSH:
            game.io_interface.output("Push.")
        else:
            game.io_interface.output("You lose!")

        decision_logger.log_round_end({game.player.name: result.outcome.value})
        logger.info(
            "Round %d: %s (player %d, dealer %d)",
            game.round_number,
            result.outcome.value,
            result.player_score,
            result.dealer_score,
        )

    def resolve(self, game) -> RoundResult:
        """Decide the outcome of the round from the final hands."""
        rules = game.rules
        player_score = game.player.score(rules)
        dealer_score = game.dealer.score(rules)
        player_busted = game.player.is_busted(rules)
        dealer_busted = game.dealer.is_busted(rules)

        if player_busted:
            outcome = Outcome.DEALER_WIN
        elif dealer_busted or player_score > dealer_score:
            outcome = Outcome.PLAYER_WIN
        elif player_score == dealer_score and rules.push_on_tie:
            outcome = Outcome.PUSH
        else:
            outcome = Outcome.DEALER_WIN

        return RoundResult(
            outcome=outcome,
            player_score=player_score,
            dealer_score=dealer_score,
            player_busted=player_busted,
            dealer_busted=dealer_busted,
            player_cards=list(game.player.hand.cards),
            dealer_cards=list(game.dealer.hand.cards),
        )
