from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = ROOT / "src"
sys.path.insert(0, str(SRC_DIR))

from fairrps.protocol import (  # noqa: E402
    InvalidArguments,
    MoveSet,
    determine_winner,
    verdict_message,
)

ODD_SIZES = [3, 5, 7, 9, 11, 21, 101]


def _reference_rule(user: int, computer: int, n: int) -> str:
    # Comparison-based form of the rule, without modulo arithmetic.
    if user == computer:
        return "Draw"
    half = n // 2
    if (user < computer <= user + half) or (computer < user and computer + n <= user + half):
        return "Lose"
    return "Win"


def test_classic_rock_paper_scissors() -> None:
    # Rock=0, Paper=1, Scissors=2
    assert determine_winner(0, 1, 3) == "Lose"
    assert determine_winner(1, 0, 3) == "Win"
    assert determine_winner(1, 2, 3) == "Lose"
    assert determine_winner(2, 1, 3) == "Win"
    assert determine_winner(2, 0, 3) == "Lose"
    assert determine_winner(0, 2, 3) == "Win"


@pytest.mark.parametrize("n", ODD_SIZES)
def test_same_move_is_draw(n: int) -> None:
    for i in range(n):
        assert determine_winner(i, i, n) == "Draw"


@pytest.mark.parametrize("n", ODD_SIZES)
def test_antisymmetry(n: int) -> None:
    for i in range(n):
        for j in range(n):
            if i == j:
                continue
            forward = determine_winner(i, j, n)
            backward = determine_winner(j, i, n)
            assert {forward, backward} == {"Win", "Lose"}


@pytest.mark.parametrize("n", ODD_SIZES)
def test_each_move_beats_half_of_the_others(n: int) -> None:
    for i in range(n):
        verdicts = [determine_winner(i, j, n) for j in range(n) if j != i]
        assert verdicts.count("Win") == n // 2
        assert verdicts.count("Lose") == n // 2


def test_five_moves_each_beats_two() -> None:
    # Rock, Paper, Scissors, Lizard, Spock
    assert [determine_winner(0, j, 5) for j in range(5)] == ["Draw", "Lose", "Lose", "Win", "Win"]
    assert [determine_winner(3, j, 5) for j in range(5)] == ["Lose", "Win", "Win", "Draw", "Lose"]


@pytest.mark.parametrize("n", ODD_SIZES)
def test_matches_comparison_form(n: int) -> None:
    for i in range(n):
        for j in range(n):
            assert determine_winner(i, j, n) == _reference_rule(i, j, n)


def test_out_of_range_index_rejected() -> None:
    with pytest.raises(ValueError):
        determine_winner(3, 0, 3)
    with pytest.raises(ValueError):
        determine_winner(0, -1, 3)


def test_verdict_messages() -> None:
    assert verdict_message("Draw") == "Draw"
    assert verdict_message("Win") == "You win!"
    assert verdict_message("Lose") == "You lose!"


def test_moveset_accepts_odd_unique_labels() -> None:
    moves = MoveSet.from_labels(["Rock", "Paper", "Scissors"])
    assert len(moves) == 3
    assert moves.label(1) == "Paper"
    assert list(moves) == ["Rock", "Paper", "Scissors"]


@pytest.mark.parametrize(
    "labels",
    [
        [],
        ["Rock"],
        ["Rock", "Paper"],
        ["Rock", "Paper", "Scissors", "Lizard"],
        ["Rock", "Paper", "Rock"],
    ],
)
def test_moveset_rejects_bad_labels(labels: list[str]) -> None:
    with pytest.raises(InvalidArguments):
        MoveSet.from_labels(labels)


def test_moveset_duplicates_are_case_sensitive() -> None:
    moves = MoveSet.from_labels(["rock", "Rock", "ROCK"])
    assert len(moves) == 3


def test_moveset_duplicate_reason_names_label() -> None:
    with pytest.raises(InvalidArguments, match="Paper"):
        MoveSet.from_labels(["Rock", "Paper", "Paper", "Lizard", "Spock"])
