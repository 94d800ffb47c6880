"""Round outcomes and the record kept for each finished round."""

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from cardtable.common.card import Card


class Outcome(Enum):
    """Who took the round."""

    PLAYER_WIN = "player"
    DEALER_WIN = "dealer"
    PUSH = "draw"


@dataclass
class RoundResult:
    """Final state of one round, as seen after the dealer has finished."""

    outcome: Outcome
    player_score: int
    dealer_score: int
    player_busted: bool = False
    dealer_busted: bool = False
    player_cards: List[Card] = field(default_factory=list)
    dealer_cards: List[Card] = field(default_factory=list)

    @property
    def player_won(self) -> bool:
        return self.outcome is Outcome.PLAYER_WIN

    def to_dict(self) -> dict:
        return {
            "outcome": self.outcome.value,
            "player_score": self.player_score,
            "dealer_score": self.dealer_score,
            "player_busted": self.player_busted,
            "dealer_busted": self.dealer_busted,
            "player_cards": [str(card) for card in self.player_cards],
            "dealer_cards": [str(card) for card in self.dealer_cards],
        }
