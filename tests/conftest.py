"""Shared fixtures for deal files."""

import pytest

RANK_ORDER = ["A", "2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K"]

# Red A-K, then Black A-K
ORDERED_LINES = [f"RED {r}" for r in RANK_ORDER] + [f"BLACK {r}" for r in RANK_ORDER]

# Every card can go straight to a deposit pile: reds from pile 0 into
# pile 5, then blacks into pile 6.
WINNABLE_LINES = (
    ["BLACK 3", "BLACK 2", "BLACK A"]
    + [f"RED {r}" for r in reversed(RANK_ORDER)]
    + [f"BLACK {r}" for r in RANK_ORDER[3:]]
)

WINNING_COMMANDS = (
    [f"move red {r} to 5" for r in RANK_ORDER]
    + [f"move black {r} to 6" for r in RANK_ORDER]
)


@pytest.fixture
def ordered_lines():
    return list(ORDERED_LINES)


@pytest.fixture
def deal_file(tmp_path):
    path = tmp_path / "deal.txt"
    path.write_text("\n".join(ORDERED_LINES) + "\n")
    return path


@pytest.fixture
def winnable_file(tmp_path):
    path = tmp_path / "winnable.txt"
    path.write_text("\n".join(WINNABLE_LINES) + "\n")
    return path


@pytest.fixture
def winning_commands():
    return list(WINNING_COMMANDS)
