"""
This module contains the Actor abstract base class.

Actor serves as a blueprint for any individual seated at the table. It holds
the participant's name, its hand and the IO interface it talks through, and
leaves the rules of when to draw a card to the concrete game classes.
"""

from abc import ABC, abstractmethod

from cardtable.common.card import Card
from cardtable.common.hand import Hand
from cardtable.common.io_interface import IOInterface


class Actor(ABC):
    """
    Abstract base class representing an actor in a card game.

    :param name: Name of the actor
    :param io_interface: The interface used to talk to the actor
    """

    def __init__(self, name: str, io_interface: IOInterface):
        self.name = name
        self.io_interface = io_interface
        self.hand = self.new_hand()

    def new_hand(self) -> Hand:
        """Create an empty hand of the type this actor plays with."""
        return Hand()

    @abstractmethod
    def reset(self):
        """
        Reset the actor for a new round.

        :return: None
        """

    def display_message(self, message: str):
        """
        Sends a message from the actor to the IO interface.

        :param message: The message to send
        :return: None
        """
        self.io_interface.output(f"{self.name}: {message}")

    def receive_card(self, card: Card):
        """
        Add a new card to the actor's hand.

        :param card: The card to add
        :return: None
        """
        self.hand.add_card(card)
