"""
This module contains the Deck class, which represents a single deck of 52 cards.

Cards are dealt sequentially from a cursor that only moves forward until the
next shuffle, so the order of a shuffled deck is fixed for the whole round.

>>> deck = Deck()
>>> deck.size
52
>>> deck.deal()
Card(Suit.CLUBS, Rank.ACE)
>>> deck.remaining
51
"""

import random
from typing import List, Optional, Union

from cardtable.common.card import Card, Rank, Suit


class DeckExhaustedError(IndexError):
    """Raised when a card is dealt from a deck that has gone through all its cards."""

    pass


class Deck:
    """
    A class representing a deck of cards with a monotonic deal cursor.
    """

    # Precompute the default deck: suit-major, ace through king
    _default_deck = [Card(suit, rank) for suit in Suit for rank in Rank]

    def __init__(
        self,
        cards: Union[List[Card], None] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize a Deck instance.

        :param cards: A list of Card instances to populate the deck (optional).
                      If not provided, the default 52-card deck is constructed.
        :param rng: The random number generator used by shuffle (optional).
        """
        if cards is None:
            self._initial_cards = self.initialize_default_deck()
        else:
            self._initial_cards = list(cards)
        self.cards: List[Card] = self._initial_cards.copy()
        self.rng = rng if rng is not None else random.Random()
        self._next_card_index = 0

    def initialize_default_deck(self) -> List[Card]:
        """
        Construct a default deck with all possible combinations of suits and ranks.

        :return: A list of Card instances representing the default deck.
        """
        return self._default_deck.copy()

    def shuffle(self):
        """
        Shuffle every card of the deck and move the deal cursor back to the top.
        """
        self.rng.shuffle(self.cards)
        self._next_card_index = 0
        return self

    def deal(self, num_cards=1) -> Union[Card, List[Card]]:
        """
        Deal the next card, or a list of the next ``num_cards`` cards.

        :raises DeckExhaustedError: If the deck has gone through all its cards.
        """
        if num_cards == 1:
            return self._deal_one()
        return [self._deal_one() for _ in range(num_cards)]

    def _deal_one(self) -> Card:
        if self._next_card_index >= len(self.cards):
            raise DeckExhaustedError("Deck has gone through all cards!")
        card = self.cards[self._next_card_index]
        self._next_card_index += 1
        return card

    @property
    def size(self) -> int:
        """The number of cards the deck holds, dealt or not."""
        return len(self.cards)

    @property
    def remaining(self) -> int:
        """The number of cards not yet dealt."""
        return len(self.cards) - self._next_card_index

    @property
    def dealt(self) -> int:
        """The position of the deal cursor."""
        return self._next_card_index

    def is_empty(self) -> bool:
        """
        Check if every card has been dealt.
        """
        return self.remaining == 0

    def reset(self):
        """
        Restore the construction order and move the deal cursor back to the top.
        """
        self.cards = self._initial_cards.copy()
        self._next_card_index = 0

    def __repr__(self) -> str:
        return f"Deck({[repr(card) for card in self.cards]})"

    def __str__(self) -> str:
        return f"Deck of {len(self.cards)} cards ({self.remaining} remaining)"
