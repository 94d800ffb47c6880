from cardtable.blackjack.constants import BUST_LIMIT, DEALER_LIMIT
from cardtable.blackjack.hand import BlackjackHand


class Rules:
    def __init__(
        self,
        bust_limit: int = BUST_LIMIT,
        dealer_limit: int = DEALER_LIMIT,
        dealer_hit_soft_17: bool = False,
        push_on_tie: bool = False,
        max_input_attempts: int = 3,
    ):
        if bust_limit <= 0:
            raise ValueError(f"bust_limit must be positive, got {bust_limit}")
        if not 1 <= dealer_limit <= bust_limit:
            raise ValueError(
                f"dealer_limit must be between 1 and {bust_limit}, got {dealer_limit}"
            )
        if max_input_attempts < 1:
            raise ValueError(
                f"max_input_attempts must be at least 1, got {max_input_attempts}"
            )
        self.bust_limit = bust_limit
        self.dealer_limit = dealer_limit
        self.dealer_hit_soft_17 = dealer_hit_soft_17
        self.push_on_tie = push_on_tie
        self.max_input_attempts = max_input_attempts

    def to_dict(self) -> dict:
        """Convert rules to a dictionary for serialization."""
        return {
            "bust_limit": self.bust_limit,
            "dealer_limit": self.dealer_limit,
            "dealer_hit_soft_17": self.dealer_hit_soft_17,
            "push_on_tie": self.push_on_tie,
            "max_input_attempts": self.max_input_attempts,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Rules":
        """Build rules from a dictionary, ignoring keys that are not rules."""
        known = cls().to_dict().keys()
        return cls(**{key: value for key, value in data.items() if key in known})

    def score(self, hand: BlackjackHand) -> int:
        """The value of a hand under these rules."""
        return hand.value(self.bust_limit)

    def is_bust(self, hand: BlackjackHand) -> bool:
        """Check if a hand is over the bust limit."""
        return hand.is_bust(self.bust_limit)

    def should_dealer_hit(self, hand: BlackjackHand) -> bool:
        """Determine if the dealer should hit based on the game rules."""
        score = self.score(hand)
        if score < self.dealer_limit:
            return True
        is_soft_limit = score == self.dealer_limit and hand.soft(self.bust_limit)
        return is_soft_limit and self.dealer_hit_soft_17

    def __eq__(self, other):
        if isinstance(other, Rules):
            return self.to_dict() == other.to_dict()
        return NotImplemented

    def __repr__(self) -> str:
        args = ", ".join(f"{key}={value!r}" for key, value in self.to_dict().items())
        return f"Rules({args})"
