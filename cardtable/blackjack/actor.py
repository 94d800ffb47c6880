"""
This module provides the `Player` and `Dealer` classes for a game of Blackjack.

The `Player` class represents the person facing the dealer. It decides whether
to hit either through its strategy or, without one, by asking through its IO
interface. The `Dealer` class never decides anything: it draws while the rules
say it should.

Exceptions:
    - `InvalidActionError`: Raised when a participant is asked to act after its turn is over.
"""

from datetime import datetime
from typing import List, Optional

from cardtable.blackjack.action import Action
from cardtable.blackjack.decision_logger import DecisionContext, decision_logger
from cardtable.blackjack.hand import BlackjackHand
from cardtable.blackjack.rules import Rules
from cardtable.blackjack.strategy import Strategy
from cardtable.common.actor import Actor
from cardtable.common.card import Card
from cardtable.common.io_interface import IOInterface


class InvalidActionError(Exception):
    """Raised when a participant attempts to perform an action that is not currently valid."""

    pass


class Participant(Actor):
    """Common state of everyone playing blackjack: a scored hand and a finished flag."""

    def __init__(self, name: str, io_interface: IOInterface):
        super().__init__(name, io_interface)
        self.done = False

    def new_hand(self) -> BlackjackHand:
        return BlackjackHand()

    def reset(self):
        self.hand = self.new_hand()
        self.done = False

    def score(self, rules: Rules) -> int:
        return rules.score(self.hand)

    def is_busted(self, rules: Rules) -> bool:
        return rules.is_bust(self.hand)

    def hit(self, card: Card, rules: Rules) -> int:
        """Take another card and return the new score."""
        if self.done:
            raise InvalidActionError(f"{self.name} has already finished their turn.")
        self.receive_card(card)
        if self.is_busted(rules):
            self.done = True
        return self.score(rules)

    def stand(self):
        if self.done:
            raise InvalidActionError(f"{self.name} has already finished their turn.")
        self.done = True


class Player(Participant):
    """A player in a game of Blackjack."""

    def __init__(
        self,
        name: str,
        io_interface: IOInterface,
        strategy: Optional[Strategy] = None,
    ):
        super().__init__(name, io_interface)
        self.strategy = strategy

    def valid_actions(self, rules: Rules) -> List[Action]:
        """A player may only act while under the bust limit."""
        if self.done or self.score(rules) >= rules.bust_limit:
            return []
        return [Action.HIT, Action.STAND]

    def decide_action(self, dealer_up_card: Optional[Card], rules: Rules) -> Action:
        """Ask the strategy, or the IO interface when there is none."""
        valid = self.valid_actions(rules)
        if not valid:
            raise InvalidActionError(f"{self.name} cannot act at this time.")

        if self.strategy is not None:
            action = self.strategy.decide_action(self, dealer_up_card, rules)
            reason = self.strategy.reason()
        else:
            action = self.io_interface.get_player_action(self, valid)
            reason = "player choice"

        if action not in valid:
            raise InvalidActionError(f"{action} is not a valid action for {self.name}.")

        decision_logger.log_decision_point(
            DecisionContext(
                timestamp=datetime.now(),
                player_name=self.name,
                hand_cards=list(self.hand.cards),
                hand_value=self.score(rules),
                is_soft=self.hand.soft(rules.bust_limit),
                dealer_upcard=dealer_up_card,
                valid_actions=valid,
                chosen_action=action,
                strategy_reason=reason,
                rule_constraints={"bust_limit": rules.bust_limit},
            )
        )
        return action

    def wants_hit(self, dealer_up_card: Optional[Card], rules: Rules) -> bool:
        return self.decide_action(dealer_up_card, rules) == Action.HIT


class Dealer(Participant):
    """The dealer, who draws by the house rules alone."""

    def __init__(self, io_interface: IOInterface, name: str = "Dealer"):
        super().__init__(name, io_interface)

    @property
    def up_card(self) -> Optional[Card]:
        return self.hand.cards[0] if self.hand.cards else None

    def should_hit(self, rules: Rules) -> bool:
        if self.done:
            return False
        hit = rules.should_dealer_hit(self.hand)
        decision_logger.log_rule_evaluation(
            "dealer_hit", hit, f"score {self.score(rules)} vs limit {rules.dealer_limit}"
        )
        return hit
