"""Blackjack-specific constants and value mappings."""

from cardtable.common.card import Rank

BUST_LIMIT = 21
DEALER_LIMIT = 17

# An ace counts 11 until the hand would bust, then 1
ACE_HIGH = 11
ACE_LOW = 1
ACE_ADJUSTMENT = ACE_HIGH - ACE_LOW

# Array-indexed lookup (indexed by Rank.value)
_BLACKJACK_VALUE_ARRAY = [
    0,   # unused
    11,  # ACE (1)
    2,   # TWO (2)
    3,   # THREE (3)
    4,   # FOUR (4)
    5,   # FIVE (5)
    6,   # SIX (6)
    7,   # SEVEN (7)
    8,   # EIGHT (8)
    9,   # NINE (9)
    10,  # TEN (10)
    10,  # JACK (11)
    10,  # QUEEN (12)
    10,  # KING (13)
]


def get_blackjack_value(rank: Rank) -> int:
    """Get the blackjack value for a given rank, counting an ace as 11."""
    return _BLACKJACK_VALUE_ARRAY[rank.value]
