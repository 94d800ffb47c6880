"""
This module contains the IOInterface abstract base class and its implementations.
"""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

import aiofiles

from cardtable.blackjack.action import Action

if TYPE_CHECKING:
    from cardtable.common.actor import Actor


class TooManyInvalidAttemptsError(Exception):
    """Raised when a console user keeps giving answers that cannot be used."""

    pass


class IOInterface(ABC):
    """
    Abstract base class for an IO interface.

    This class defines the interface for input/output operations in the game.
    """

    @abstractmethod
    def output(self, message: str) -> None:
        """Output a message to the interface."""
        pass

    @abstractmethod
    def input(self, prompt: str) -> str:
        """Get input from the user with a prompt."""
        pass

    @abstractmethod
    def get_player_action(self, player: Actor, valid_actions: list[Action]) -> Action:
        """Retrieve an action from a player."""
        pass

    @abstractmethod
    def check_numeric_response(self, ctx: str) -> int:
        """Check if a response is numeric and return the integer value."""
        pass


class DummyIOInterface(IOInterface):
    """
    A dummy IO interface for simulation purposes. Does not perform any actual IO.
    """

    def output(self, message: str) -> None:
        pass

    def input(self, prompt: str) -> str:
        return ""

    def get_player_action(self, player: Actor, valid_actions: list[Action]) -> Action:
        if valid_actions:
            return valid_actions[0]
        raise ValueError("No valid actions available.")

    def check_numeric_response(self, ctx: str) -> int:
        return 1


class TestIOInterface(IOInterface):
    """
    A test IO interface. Collects output messages and replays queued player actions
    and input responses.
    """

    __test__ = False

    def __init__(self):
        self.sent_messages = []
        self.player_actions = []
        self.input_responses = []
        self.prompts = []

    def output(self, message: str) -> None:
        self.sent_messages.append(message)

    def input(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.input_responses:
            return self.input_responses.pop(0)
        return "test_input"

    def add_player_action(self, action: Action):
        """Add a player action to the queue."""
        self.player_actions.append(action)

    def get_player_action(self, player: Actor, valid_actions: list[Action]) -> Action:
        if self.player_actions:
            return self.player_actions.pop(0)
        raise ValueError("No more actions left in TestIOInterface queue.")

    def check_numeric_response(self, ctx: str) -> int:
        return 1


class ConsoleIOInterface(IOInterface):
    """
    A console IO interface for interactive gameplay.

    Hit and stand can be answered with their full name or their first letter.
    """

    def __init__(self, max_attempts: int = 3):
        self.max_attempts = max_attempts

    def output(self, message: str) -> None:
        print(message)

    def input(self, prompt: str) -> str:
        return input(prompt)

    def get_player_action(self, player: Actor, valid_actions: list[Action]) -> Action:
        choices = {}
        for action in valid_actions:
            choices[action.value] = action
            choices[action.value[0]] = action
        prompt = " or ".join(f"({a.value[0]}) to {a.value}" for a in valid_actions)

        for _ in range(self.max_attempts):
            answer = self.input(f"{prompt}: ").strip().lower()
            if answer in choices:
                return choices[answer]
            print(
                f"Invalid action, valid actions are: {', '.join(a.name for a in valid_actions)}"
            )

        raise TooManyInvalidAttemptsError("Too many invalid attempts. Game aborted.")

    def check_numeric_response(self, ctx: str) -> int:
        for _ in range(self.max_attempts):
            response = self.input(ctx)
            try:
                return int(response)
            except ValueError:
                print("Invalid response, please enter a number.")
        raise TooManyInvalidAttemptsError(
            "Too many invalid responses. Operation aborted."
        )


class LoggingIOInterface(IOInterface):
    """
    A logging IO interface for recording purposes. Writes output messages to a log file.

    Player decisions are taken from the player's strategy, so a logged game runs
    without anyone at the keyboard.
    """

    def __init__(self, log_file_path: str):
        self.log_file_path = log_file_path

    def output(self, message: str) -> None:
        """Write an output message to the log file."""
        with open(self.log_file_path, "a", encoding="utf-8") as log_file:
            log_file.write(message + "\n")

    def input(self, prompt: str) -> str:
        """Log the prompt and return empty string."""
        self.output(f"[INPUT PROMPT] {prompt}")
        return ""

    def get_player_action(self, player: Actor, valid_actions: list[Action]) -> Action:
        """Default to standing; players with a strategy never ask the interface."""
        self.output(f"[ACTION PROMPT] {player.name}")
        return Action.STAND if Action.STAND in valid_actions else valid_actions[0]

    def check_numeric_response(self, ctx: str) -> int:
        self.output(f"[NUMERIC PROMPT] {ctx}")
        return 1

    async def output_async(self, message: str) -> None:
        """Async version of output for callers already inside an event loop."""
        async with aiofiles.open(
            self.log_file_path, mode="a", encoding="utf-8"
        ) as log_file:
            await log_file.write(message + "\n")

    async def get_player_action_async(
        self, player: Actor, valid_actions: list[Action]
    ) -> Action:
        await asyncio.sleep(0)
        return self.get_player_action(player, valid_actions)
