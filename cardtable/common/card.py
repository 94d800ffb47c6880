"""
This module defines the `Suit`, `Rank`, and `Card` classes, which are used to represent playing cards.

- `Suit`: An enum representing the four suits of a standard deck of playing
cards: Clubs, Diamonds, Hearts, and Spades.

- `Rank`: An enum representing the thirteen ranks of a standard deck of playing
cards: Ace, Two through Ten, Jack, Queen and King.

- `Card`: An immutable value representing a playing card. A card has a suit and a
rank, compares and hashes by both, and prints as a two-character code such as
``AS`` or ``TD``.

This module is part of the `cardtable` package.
"""

from enum import Enum, unique


@unique
class Suit(Enum):
    """
    Enum for suits in a card deck, in deck construction order.
    """

    CLUBS = "C"
    DIAMONDS = "D"
    HEARTS = "H"
    SPADES = "S"

    @property
    def code(self) -> str:
        """The one-letter code of the suit."""
        return self.value

    @property
    def symbol(self) -> str:
        """The display symbol of the suit."""
        return _SUIT_SYMBOLS[self]

    def __str__(self) -> str:
        return self.value


_SUIT_SYMBOLS = {
    Suit.CLUBS: "♣",
    Suit.DIAMONDS: "♦",
    Suit.HEARTS: "♥",
    Suit.SPADES: "♠",
}


@unique
class Rank(Enum):
    """
    Enum for ranks in a card deck, in deck construction order.
    """

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    @property
    def code(self) -> str:
        """The one-character code of the rank."""
        return _RANK_CODES[self.value - 1]

    def __str__(self) -> str:
        return self.code


_RANK_CODES = "A23456789TJQK"


class Card:
    """
    Class representing a playing card. Cards are plain values and never change
    after construction.

    >>> card = Card(Suit.SPADES, Rank.ACE)
    >>> print(card)
    AS
    >>> Card.from_code("td")
    Card(Suit.DIAMONDS, Rank.TEN)
    """

    __slots__ = ("_suit", "_rank")

    def __init__(self, suit: Suit, rank: Rank):
        """
        Initialize a Card instance.

        :param suit: Suit of the card (one of the Suit enums)
        :param rank: Rank of the card (one of the Rank enums)
        """
        if not isinstance(suit, Suit):
            raise TypeError(f"Invalid suit: {suit!r}")
        if not isinstance(rank, Rank):
            raise TypeError(f"Invalid rank: {rank!r}")
        object.__setattr__(self, "_suit", suit)
        object.__setattr__(self, "_rank", rank)

    @classmethod
    def from_code(cls, code: str) -> "Card":
        """
        Build a card from its two-character code, rank first (``"QH"``).

        :raises ValueError: If the code does not name a card.
        """
        if not isinstance(code, str) or len(code) != 2:
            raise ValueError(f"Invalid card code: {code!r}")
        rank_code, suit_code = code.upper()
        index = _RANK_CODES.find(rank_code)
        if index < 0:
            raise ValueError(f"Invalid rank in card code: {code!r}")
        try:
            suit = Suit(suit_code)
        except ValueError as exc:
            raise ValueError(f"Invalid suit in card code: {code!r}") from exc
        return cls(suit, Rank(index + 1))

    @property
    def suit(self) -> Suit:
        return self._suit

    @property
    def rank(self) -> Rank:
        return self._rank

    def __setattr__(self, name, value):
        raise AttributeError("Card is immutable")

    def __eq__(self, other):
        """
        Checks if this card is equal to another card.

        :param other: The other card to compare to.
        :return: True if the cards have the same rank and suit, False otherwise.
        """
        if isinstance(other, Card):
            return self._rank == other._rank and self._suit == other._suit
        return NotImplemented

    def __hash__(self):
        return hash((self._suit, self._rank))

    def __reduce__(self):
        return (Card, (self._suit, self._rank))

    def __repr__(self) -> str:
        return f"Card(Suit.{self._suit.name}, Rank.{self._rank.name})"

    def __str__(self) -> str:
        return f"{self._rank.code}{self._suit.code}"
