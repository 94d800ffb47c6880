"""
This module is used to execute a game of Blackjack.

It can be used to play a game in different modes:
- Interactive console mode, where the user interacts with the game via the console.
- Simulation mode, where the game runs automatically with a strategy.
- Logging mode, where game output is logged to a specified file.
- Visualization mode, where a real-time graph of the net result is displayed.

To run the game in different modes, specific command line arguments are used.
For example, `--console` runs the game in interactive console mode,
`--simulate` runs the game in simulation mode and `--log_file` followed by a filename runs the game in logging mode.
`--vis` enables real-time visualization of the simulation results.
"""

import argparse
import logging
import multiprocessing
import random
import sys
import time
from typing import List, Optional

import matplotlib.pyplot as plt

from cardtable.blackjack.actor import Dealer, Player
from cardtable.blackjack.result import Outcome, RoundResult
from cardtable.blackjack.rules import Rules
from cardtable.blackjack.state import EndRoundState, GameState, ShuffleState
from cardtable.blackjack.stats import SimulationStats
from cardtable.blackjack.strategy import STRATEGIES, Strategy, create_strategy
from cardtable.common.deck import Deck
from cardtable.common.io_interface import (
    ConsoleIOInterface,
    DummyIOInterface,
    IOInterface,
    LoggingIOInterface,
    TooManyInvalidAttemptsError,
)

logger = logging.getLogger(__name__)


class BlackjackGraph:
    def __init__(self, max_games):
        self.max_games = max_games
        self.games = []
        self.net_results = []

        plt.ion()
        self.fig, self.ax = plt.subplots()
        (self.line,) = self.ax.plot([], [], "b-")

        self.ax.set_xlim(0, max_games)
        self.ax.set_ylim(-10, 10)
        self.ax.set_title("Blackjack Performance")
        self.ax.set_xlabel("Games")
        self.ax.set_ylabel("Wins minus losses")
        self.ax.grid(True)

    def update(self, game_number, net_result):
        self.games.append(game_number)
        self.net_results.append(net_result)

        self.line.set_data(self.games, self.net_results)

        if game_number > self.ax.get_xlim()[1]:
            self.ax.set_xlim(0, game_number + 10)

        self.ax.set_ylim(min(self.net_results) - 10, max(self.net_results) + 10)

        self.fig.canvas.draw()
        self.fig.canvas.flush_events()

    def close(self):
        plt.ioff()
        plt.show()


class BlackjackGame:
    """
    A class to represent a game of Blackjack between one player and the dealer.

    Attributes
    ----------
    rules : Rules
        Object defining game rules.
    io_interface : IOInterface
        Interface for input and output operations.
    player : Player
        The player facing the dealer.
    dealer : Dealer
        Dealer for the game.
    deck : Deck
        The single deck the round is dealt from.
    current_state : GameState
        Current state of the game.
    stats : SimulationStats
        Statistics for the game.
    result : RoundResult
        Result of the last finished round.
    """

    def __init__(
        self,
        rules: Rules,
        io_interface: IOInterface,
        player: Optional[Player] = None,
        rng: Optional[random.Random] = None,
        deck: Optional[Deck] = None,
    ):
        self.rules = rules
        self.io_interface = io_interface
        self.player = player if player is not None else Player("Player", io_interface)
        self.dealer = Dealer(io_interface)
        self.deck = deck if deck is not None else Deck(rng=rng)
        self.current_state: GameState = ShuffleState()
        self.stats = SimulationStats()
        self.result: Optional[RoundResult] = None
        self.round_number = 0

    def set_state(self, state: GameState):
        """Change the current state of the game."""
        logger.debug("Changing state to %s", state)
        self.current_state = state

    def play_round(self) -> Outcome:
        """Play a round of the game until it reaches the end state."""
        self.round_number += 1
        self.set_state(ShuffleState())
        while not isinstance(self.current_state, EndRoundState):
            self.current_state.handle(self)
        self.current_state.handle(self)
        return self.result.outcome


def strategy_seed(seed: Optional[int]) -> Optional[int]:
    """Seed for a strategy's own random stream, kept apart from the deck's."""
    return None if seed is None else seed + 1


def create_io_interface(args, rules: Rules):
    """Create the IO interface and strategy based on the command line arguments."""
    strategy = None
    rng = random.Random(strategy_seed(args.seed))
    if args.console:
        io_interface = ConsoleIOInterface(max_attempts=rules.max_input_attempts)
    elif args.simulate:
        io_interface = DummyIOInterface()
        strategy = create_strategy(args.strat, rng)
    elif args.log_file:
        io_interface = LoggingIOInterface(args.log_file)
        strategy = create_strategy(args.strat, rng)
    else:
        io_interface = ConsoleIOInterface(max_attempts=rules.max_input_attempts)
    return io_interface, strategy


def create_rules(args) -> Rules:
    """Create the Rules object based on the command line arguments."""
    return Rules(
        bust_limit=args.bust_limit,
        dealer_limit=args.dealer_limit,
        dealer_hit_soft_17=args.dealer_hit_soft_17,
        push_on_tie=args.push_on_tie,
        max_input_attempts=args.max_attempts,
    )


def create_simulated_game(
    rules: Rules, strategy: Strategy, seed: Optional[int] = None
) -> BlackjackGame:
    """A silent game whose deck and strategy draw from streams derived from ``seed``."""
    io_interface = DummyIOInterface()
    player = Player("Bob", io_interface, strategy.reseeded(strategy_seed(seed)))
    return BlackjackGame(rules, io_interface, player, rng=random.Random(seed))


def play_game_batch(
    rules: Rules, strategy: Strategy, num_games: int, seed: Optional[int] = None
):
    """Play a batch of rounds with a strategy, to be executed in a separate process."""
    game = create_simulated_game(rules, strategy, seed)
    outcomes = [game.play_round() for _ in range(num_games)]
    return game.stats.report(), outcomes


def run_simulation(
    rules: Rules,
    strategy: Strategy,
    num_games: int,
    single_cpu: bool = False,
    seed: Optional[int] = None,
    graph: Optional[BlackjackGraph] = None,
) -> SimulationStats:
    """Play ``num_games`` rounds and return the aggregated statistics."""
    stats = SimulationStats()
    game_number = 0
    net_result = 0

    def record(outcome: Outcome):
        nonlocal game_number, net_result
        game_number += 1
        if outcome is Outcome.PLAYER_WIN:
            net_result += 1
        elif outcome is Outcome.DEALER_WIN:
            net_result -= 1
        if graph:
            graph.update(game_number, net_result)

    if single_cpu:
        game = create_simulated_game(rules, strategy, seed)
        for _ in range(num_games):
            record(game.play_round())
        stats.merge(game.stats.report())
        return stats

    cpu_count = multiprocessing.cpu_count()
    games_per_cpu, remainder = divmod(num_games, cpu_count)
    seeds = random.Random(seed).sample(range(2**31), cpu_count)
    batches = [
        (rules, strategy, games_per_cpu + (1 if i < remainder else 0), seeds[i])
        for i in range(cpu_count)
    ]
    with multiprocessing.Pool() as pool:
        batch_results = pool.starmap(play_game_batch, batches)

    for report, outcomes in batch_results:
        stats.merge(report)
        for outcome in outcomes:
            record(outcome)

    return stats


def print_simulation_report(stats: SimulationStats, duration: float):
    report = stats.report()
    games = report["games_played"]
    games_per_second = games / duration if duration > 0 else 0
    decided = games - report["draws"]
    player_ratio = report["player_wins"] / decided if decided else 0
    dealer_ratio = report["dealer_wins"] / decided if decided else 0

    print("Simulation completed.")
    print(f"Games played: {games:,}")
    print(f"Player wins: {report['player_wins']:,} ({player_ratio:.2%})")
    print(f"Dealer wins: {report['dealer_wins']:,} ({dealer_ratio:.2%})")
    print(f"Draws: {report['draws']:,}")
    print(f"Player busts: {report['player_busts']:,}")
    print(f"Dealer busts: {report['dealer_busts']:,}")
    print(f"Net result: {stats.net_result:+,}")
    print(f"\nDuration of simulation: {duration:.2f} seconds")
    print(f"Games simulated per second: {games_per_second:,.2f}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run a Blackjack game.")
    parser.add_argument(
        "--simulate",
        action="store_true",
        help="Run the game in simulation mode with the strategy given by --strat.",
        default=False,
    )
    parser.add_argument(
        "--console",
        action="store_true",
        help="Run the game in interactive console mode. This is the default mode.",
        default=False,
    )
    parser.add_argument(
        "--num_games", type=int, default=1, help="Number of games to play"
    )
    parser.add_argument(
        "--log_file",
        type=str,
        help="Log game output to the specified file instead of the console.",
    )
    parser.add_argument(
        "--single_cpu",
        action="store_true",
        help="If provided, run the simulations on a single CPU instead of multiple.",
    )
    parser.add_argument(
        "--strat",
        type=str,
        choices=sorted(STRATEGIES),
        default="basic",
        help="Strategy used by simulated and logged players.",
    )
    parser.add_argument(
        "--vis",
        action="store_true",
        help="Visualize the simulation results in real-time graph.",
        default=False,
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Seed for reproducible shuffles"
    )
    parser.add_argument(
        "--bust_limit", type=int, default=21, help="Score above which a hand busts"
    )
    parser.add_argument(
        "--dealer_limit",
        type=int,
        default=17,
        help="Score at which the dealer stops drawing",
    )
    parser.add_argument(
        "--dealer_hit_soft_17",
        action="store_true",
        help="The dealer also draws on a soft dealer limit.",
        default=False,
    )
    parser.add_argument(
        "--push_on_tie",
        action="store_true",
        help="Equal scores are a push instead of a dealer win.",
        default=False,
    )
    parser.add_argument(
        "--max_attempts",
        type=int,
        default=3,
        help="Invalid console answers tolerated before the game is aborted",
    )
    parser.add_argument(
        "--log_level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level for game diagnostics",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main function to start the game.

    It handles command-line arguments to determine the mode of operation of the game,
    creates the game, and then plays the requested number of rounds.
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        rules = create_rules(args)
    except ValueError as exc:
        print(f"Invalid rules: {exc}", file=sys.stderr)
        return 2

    io_interface, strategy = create_io_interface(args, rules)

    if args.simulate and not args.console:
        graph = BlackjackGraph(args.num_games) if args.vis else None
        start_time = time.time()
        stats = run_simulation(
            rules,
            strategy,
            args.num_games,
            single_cpu=args.single_cpu,
            seed=args.seed,
            graph=graph,
        )
        print_simulation_report(stats, time.time() - start_time)
        if graph:
            graph.close()
        return 0

    rng = random.Random(args.seed) if args.seed is not None else None
    player = Player("Player", io_interface, strategy)
    game = BlackjackGame(rules, io_interface, player, rng=rng)

    try:
        for _ in range(args.num_games):
            game.play_round()
    except (TooManyInvalidAttemptsError, EOFError, KeyboardInterrupt) as exc:
        logger.warning("Game aborted: %s", str(exc) or type(exc).__name__)
        io_interface.output("Game aborted.")
        return 1

    if args.num_games > 1:
        report = game.stats.report()
        io_interface.output(
            f"Won {report['player_wins']}, lost {report['dealer_wins']}, "
            f"pushed {report['draws']} of {report['games_played']} games."
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
