"""
BlackjackHand implementation with ace renormalization and cached scoring.
"""

from typing import Any, Dict

from cardtable.blackjack.constants import ACE_ADJUSTMENT, BUST_LIMIT, get_blackjack_value
from cardtable.common.card import Card, Rank
from cardtable.common.hand import Hand


class BlackjackHand(Hand):
    """A hand in the game of Blackjack."""

    __slots__ = ("_cards", "_cache")

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._cache: Dict[Any, Any] = {}

    def add_card(self, card: Card) -> None:
        super().add_card(card)
        self._cache.clear()

    def remove_card(self, card: Card) -> None:
        super().remove_card(card)
        self._cache.clear()

    def clear(self) -> None:
        super().clear()
        self._cache.clear()

    @property
    def num_aces(self) -> int:
        """The number of aces in the hand."""
        return sum(1 for card in self._cards if card.rank == Rank.ACE)

    @property
    def hard_total(self) -> int:
        """The total with every ace counted as 11."""
        return sum(get_blackjack_value(card.rank) for card in self._cards)

    def _score(self, bust_limit: int):
        """Return (value, aces still counted high) for the given limit."""
        key = ("score", bust_limit)
        if key not in self._cache:
            value = self.hard_total
            high_aces = self.num_aces
            # Re-value one ace at a time from 11 to 1 while the hand is over
            while value > bust_limit and high_aces > 0:
                value -= ACE_ADJUSTMENT
                high_aces -= 1
            self._cache[key] = (value, high_aces)
        return self._cache[key]

    def value(self, bust_limit: int = BUST_LIMIT) -> int:
        """Calculate the value of the hand with ace handling."""
        return self._score(bust_limit)[0]

    def soft(self, bust_limit: int = BUST_LIMIT) -> bool:
        """Whether an ace still counts high under the given limit."""
        return self._score(bust_limit)[1] > 0

    @property
    def is_soft(self) -> bool:
        """Determine if the hand is soft (contains an ace counted as 11)."""
        return self.soft()

    def is_bust(self, bust_limit: int = BUST_LIMIT) -> bool:
        """Whether the hand exceeds the limit even with every ace counted low."""
        return self.value(bust_limit) > bust_limit

    @property
    def is_blackjack(self) -> bool:
        """Determine if the hand is a natural blackjack."""
        return len(self._cards) == 2 and self.value() == BUST_LIMIT

    def __repr__(self) -> str:
        return f"BlackjackHand({self.cards!r})"
