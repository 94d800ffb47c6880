"""
Pytest configuration for tests at the root level.

This module contains pytest fixtures and configuration for testing components.
"""

import os

# Simulation graphs must never open a window during tests
os.environ.setdefault("MPLBACKEND", "Agg")

import pytest

from cardtable.blackjack.decision_logger import decision_logger


@pytest.fixture(scope="function", autouse=True)
def reset_decision_logger():
    """Forget recorded decisions before and after each test."""
    original_level = decision_logger.logger.level
    decision_logger.clear()
    yield
    decision_logger.clear()
    decision_logger.set_level(original_level)
