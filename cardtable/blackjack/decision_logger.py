"""
Logging system for blackjack hit/stand decisions.
Tracks every decision with the hand and dealer card it was made against.
"""

import json
import logging
import os
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from ..common.card import Card
from .action import Action


@dataclass
class DecisionContext:
    """Context for a single decision point."""

    timestamp: datetime
    player_name: str
    hand_cards: List[Card]
    hand_value: int
    is_soft: bool
    dealer_upcard: Optional[Card]
    valid_actions: List[Action]
    chosen_action: Optional[Action] = None
    strategy_reason: Optional[str] = None
    rule_constraints: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for logging."""
        return {
            "timestamp": self.timestamp.isoformat(),
            "player": self.player_name,
            "cards": [str(c) for c in self.hand_cards],
            "value": self.hand_value,
            "soft": self.is_soft,
            "dealer_up": str(self.dealer_upcard) if self.dealer_upcard else None,
            "valid_actions": [a.value for a in self.valid_actions],
            "chosen": self.chosen_action.value if self.chosen_action else None,
            "reason": self.strategy_reason,
            "constraints": self.rule_constraints,
        }


class DecisionLogger:
    """Logs the decision-making of every participant."""

    def __init__(self, log_level=logging.NOTSET):
        self.logger = logging.getLogger("cardtable.decisions")
        if os.environ.get("CARDTABLE_DISABLE_LOGGING", "").lower() in (
            "1",
            "true",
            "yes",
        ):
            self.logger.setLevel(logging.ERROR)
        else:
            self.logger.setLevel(log_level)

        self.decision_history: List[DecisionContext] = []
        self.current_round_decisions: List[DecisionContext] = []

    def set_level(self, level):
        """Set the logging level."""
        self.logger.setLevel(level)

    def log_decision_point(self, context: DecisionContext):
        """Log a decision point with full context."""
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug(
                "Decision for %s: %s (value=%d, soft=%s) vs dealer %s",
                context.player_name,
                [str(c) for c in context.hand_cards],
                context.hand_value,
                context.is_soft,
                context.dealer_upcard,
            )

        if self.logger.isEnabledFor(logging.INFO):
            self.current_round_decisions.append(context)
            if context.chosen_action:
                self.logger.info(
                    "%s chose %s (reason: %s)",
                    context.player_name,
                    context.chosen_action.value,
                    context.strategy_reason or "unknown",
                )

    def log_rule_evaluation(self, rule_name: str, result: bool, reason: str = ""):
        """Log a rule evaluation."""
        if self.logger.isEnabledFor(logging.DEBUG):
            self.logger.debug("Rule '%s': %s %s", rule_name, result, reason)

    def log_round_start(self, round_num: int, players: List[str]):
        """Log the start of a new round."""
        if self.logger.isEnabledFor(logging.INFO):
            self.logger.info(
                "=== Round %d starting with players: %s ===", round_num, players
            )
        self.current_round_decisions = []

    def log_round_end(self, outcomes: Dict[str, Any]):
        """Log the end of a round with outcomes."""
        if self.logger.isEnabledFor(logging.INFO):
            self.logger.info("=== Round ended ===")
            for player, outcome in outcomes.items():
                self.logger.info("%s: %s", player, outcome)

        self.decision_history.extend(self.current_round_decisions)
        self.current_round_decisions = []

    def get_decision_summary(self) -> Dict[str, Any]:
        """Get a summary of all decisions made."""
        summary: Dict[str, Any] = {
            "total_decisions": len(self.decision_history),
            "by_action": {},
            "by_player": {},
        }

        for decision in self.decision_history:
            action = decision.chosen_action.value if decision.chosen_action else "none"
            summary["by_action"][action] = summary["by_action"].get(action, 0) + 1

            player = decision.player_name
            summary["by_player"][player] = summary["by_player"].get(player, 0) + 1

        return summary

    def export_decisions(self, filepath: str):
        """Export decision history to a JSON file."""
        data = {
            "decisions": [d.to_dict() for d in self.decision_history],
            "summary": self.get_decision_summary(),
        }

        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)

        self.logger.info(
            "Exported %d decisions to %s", len(self.decision_history), filepath
        )

    def clear(self):
        """Forget every recorded decision."""
        self.decision_history = []
        self.current_round_decisions = []


# Global logger instance
decision_logger = DecisionLogger()
