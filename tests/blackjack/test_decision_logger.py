import json
import logging

from cardtable.blackjack.action import Action
from cardtable.blackjack.blackjack import BlackjackGame
from cardtable.blackjack.decision_logger import DecisionLogger, decision_logger
from cardtable.blackjack.strategy import ThresholdStrategy


def test_decisions_not_recorded_below_info():
    logger = DecisionLogger(log_level=logging.WARNING)
    logger.log_round_start(1, ["Bob"])
    assert logger.current_round_decisions == []
    assert logger.get_decision_summary()["total_decisions"] == 0


def test_disable_with_environment(monkeypatch):
    monkeypatch.setenv("CARDTABLE_DISABLE_LOGGING", "true")
    logger = DecisionLogger(log_level=logging.DEBUG)
    assert logger.logger.level == logging.ERROR


def test_round_decisions_are_archived(stacked_game, io_interface, caplog):
    decision_logger.set_level(logging.INFO)
    game = stacked_game("TS", "TH", "2D", "5C", "KH", "7C")
    io_interface.add_player_action(Action.HIT)
    io_interface.add_player_action(Action.STAND)

    with caplog.at_level(logging.INFO, logger="cardtable.decisions"):
        game.play_round()

    assert decision_logger.current_round_decisions == []
    assert [d.chosen_action for d in decision_logger.decision_history] == [
        Action.HIT,
        Action.STAND,
    ]
    assert "Player chose hit (reason: player choice)" in caplog.text
    assert "=== Round ended ===" in caplog.text


def test_summary_and_export(stacked_game, tmp_path):
    decision_logger.set_level(logging.INFO)
    game = stacked_game(
        "TS", "TH", "2D", "2C", "3C", "7H", strategy=ThresholdStrategy(17)
    )
    game.play_round()

    summary = decision_logger.get_decision_summary()
    assert summary == {
        "total_decisions": 3,
        "by_action": {"hit": 2, "stand": 1},
        "by_player": {"Player": 3},
    }

    path = tmp_path / "decisions.json"
    decision_logger.export_decisions(str(path))
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["summary"] == summary
    assert data["decisions"][0]["cards"] == ["TH", "2D"]
    assert data["decisions"][0]["dealer_up"] == "TS"
    assert data["decisions"][-1]["value"] == 17
    assert data["decisions"][-1]["chosen"] == "stand"
