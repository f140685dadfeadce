"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from four_bishops.core.configuration import Configuration
from four_bishops.core.notation import configuration_from_layout
from four_bishops.engine import SearchResult, find_shortest_path

# White cannot move at all: every ray is blocked by its own tokens, attacked
# by black, or ends on a black token.
STUCK_LAYOUT = "....B/W...B/.W..B/W.W.B"


@pytest.fixture
def initial() -> Configuration:
    return Configuration.initial()


@pytest.fixture
def goal() -> Configuration:
    return Configuration.goal()


@pytest.fixture
def stuck() -> Configuration:
    return configuration_from_layout(STUCK_LAYOUT)


@pytest.fixture(scope="session")
def solved_swap() -> SearchResult:
    """The canonical swap, solved once per test session."""
    return find_shortest_path(Configuration.initial(), Configuration.goal())
