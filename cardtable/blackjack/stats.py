"""
This module contains the SimulationStats class which is responsible for
tracking and updating the statistics of the blackjack game simulation.
"""

from cardtable.blackjack.result import Outcome, RoundResult


class SimulationStats:
    """
    A class that holds the statistics of the simulation.
    """

    def __init__(self):
        self.games_played = 0
        self.player_wins = 0
        self.dealer_wins = 0
        self.draws = 0
        self.player_busts = 0
        self.dealer_busts = 0

    def update(self, result: RoundResult):
        """Updates the statistics with the result of a finished round."""
        self.games_played += 1

        if result.outcome is Outcome.PLAYER_WIN:
            self.player_wins += 1
        elif result.outcome is Outcome.DEALER_WIN:
            self.dealer_wins += 1
        elif result.outcome is Outcome.PUSH:
            self.draws += 1

        if result.player_busted:
            self.player_busts += 1
        if result.dealer_busted:
            self.dealer_busts += 1

    def merge(self, report: dict):
        """Add the counters of another report to these statistics."""
        for key, value in report.items():
            setattr(self, key, getattr(self, key) + value)

    @property
    def net_result(self) -> int:
        """Rounds won minus rounds lost."""
        return self.player_wins - self.dealer_wins

    def report(self):
        """
        Returns a dictionary containing the current statistics.
        """
        return {
            "games_played": self.games_played,
            "player_wins": self.player_wins,
            "dealer_wins": self.dealer_wins,
            "draws": self.draws,
            "player_busts": self.player_busts,
            "dealer_busts": self.dealer_busts,
        }
