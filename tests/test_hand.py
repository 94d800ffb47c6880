from cardtable.common.card import Card, Suit, Rank
from cardtable.common.hand import Hand


def test_hand_initialization():
    hand = Hand()
    assert hand.cards == []
    assert len(hand) == 0


def test_add_card():
    hand = Hand()
    card = Card(Suit.HEARTS, Rank.EIGHT)
    hand.add_card(card)
    assert card in hand.cards


def test_remove_card():
    hand = Hand()
    card = Card(Suit.HEARTS, Rank.EIGHT)
    hand.add_card(card)
    hand.remove_card(card)
    assert card not in hand.cards


def test_remove_card_not_in_hand():
    hand = Hand()
    try:
        hand.remove_card(Card(Suit.HEARTS, Rank.EIGHT))
    except ValueError:
        pass
    else:
        assert False, "Expected ValueError when removing card not in hand"


def test_clear():
    hand = Hand()
    hand.add_card(Card(Suit.HEARTS, Rank.EIGHT))
    hand.clear()
    assert hand.cards == []


def test_order_of_cards():
    hand = Hand()
    cards = [Card(Suit.HEARTS, Rank.EIGHT), Card(Suit.CLUBS, Rank.ACE)]
    for card in cards:
        hand.add_card(card)
    assert hand.cards == cards


def test_hand_repr():
    hand = Hand()
    card = Card(Suit.HEARTS, Rank.EIGHT)
    hand.add_card(card)
    assert repr(hand) == f"Hand([{card!r}])"


def test_hand_str():
    hand = Hand()
    hand.add_card(Card(Suit.HEARTS, Rank.EIGHT))
    hand.add_card(Card(Suit.CLUBS, Rank.ACE))
    assert str(hand) == "8H, AC"


def test_empty_hand_str():
    assert str(Hand()) == ""
