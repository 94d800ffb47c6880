import random
from abc import ABC, abstractmethod
from typing import Optional

from cardtable.blackjack.action import Action
from cardtable.blackjack.constants import get_blackjack_value
from cardtable.blackjack.decision_logger import decision_logger
from cardtable.blackjack.rules import Rules
from cardtable.common.card import Card


class Strategy(ABC):
    """Decides between hitting and standing for an automated player."""

    name = "strategy"

    @abstractmethod
    def decide_action(
        self, player, dealer_up_card: Optional[Card], rules: Rules
    ) -> Action:
        pass

    def reason(self) -> str:
        """A short description used in the decision log."""
        return self.name

    def reseeded(self, seed: Optional[int]) -> "Strategy":
        """The strategy to use in a game seeded with ``seed``."""
        return self


class DealerStrategy(Strategy):
    """Plays the player's hand exactly like the dealer plays its own."""

    name = "dealer"

    def decide_action(self, player, dealer_up_card=None, rules=None) -> Action:
        rules = rules or Rules()
        if rules.should_dealer_hit(player.hand):
            return Action.HIT
        return Action.STAND


class ThresholdStrategy(Strategy):
    """Hit until the hand reaches a fixed total."""

    name = "threshold"

    def __init__(self, stand_on: int = 17):
        self.stand_on = stand_on

    def decide_action(self, player, dealer_up_card=None, rules=None) -> Action:
        rules = rules or Rules()
        if rules.score(player.hand) < self.stand_on:
            return Action.HIT
        return Action.STAND

    def reason(self) -> str:
        return f"threshold {self.stand_on}"


class BasicStrategy(Strategy):
    """
    Hit/stand basic strategy for a game without doubles or splits.

    Hard 17 and up stands, hard 13-16 stands against a dealer 2-6, hard 12
    stands against a dealer 4-6. Soft 19 and up stands, soft 18 stands against
    a dealer 2-8. Everything else hits.
    """

    name = "basic"

    def decide_action(self, player, dealer_up_card=None, rules=None) -> Action:
        rules = rules or Rules()
        hand = player.hand
        total = rules.score(hand)
        upcard = get_blackjack_value(dealer_up_card.rank) if dealer_up_card else 10

        if hand.soft(rules.bust_limit):
            hand_type = f"Soft{total}"
            stand = total >= 19 or (total == 18 and upcard <= 8)
        else:
            hand_type = f"Hard{total}"
            stand = (
                total >= 17
                or (13 <= total <= 16 and upcard <= 6)
                or (total == 12 and 4 <= upcard <= 6)
            )

        action = Action.STAND if stand else Action.HIT
        decision_logger.log_rule_evaluation(
            "basic_strategy", stand, f"{hand_type} vs {upcard} -> {action.value}"
        )
        return action


class RandomStrategy(Strategy):
    """Hit or stand with equal probability."""

    name = "random"

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()

    def decide_action(self, player, dealer_up_card=None, rules=None) -> Action:
        return self.rng.choice([Action.HIT, Action.STAND])

    def reseeded(self, seed: Optional[int]) -> "RandomStrategy":
        return RandomStrategy(random.Random(seed))


STRATEGIES = {
    "basic": BasicStrategy,
    "threshold": ThresholdStrategy,
    "dealer": DealerStrategy,
    "random": RandomStrategy,
}


def create_strategy(name: str, rng: Optional[random.Random] = None) -> Strategy:
    """Build a strategy from its command line name."""
    try:
        strategy_cls = STRATEGIES[name]
    except KeyError as exc:
        raise ValueError(f"Unknown strategy: {name}") from exc
    if strategy_cls is RandomStrategy:
        return RandomStrategy(rng)
    return strategy_cls()
