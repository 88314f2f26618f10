from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Literal, Sequence

Verdict = Literal["Draw", "Win", "Lose"]

_VERDICT_MESSAGES: dict[str, str] = {
    "Draw": "Draw",
    "Win": "You win!",
    "Lose": "You lose!",
}


class InvalidArguments(ValueError):
    """The move labels cannot form a playable game."""


def determine_winner(user_move: int, computer_move: int, n: int) -> Verdict:
    if not (0 <= user_move < n and 0 <= computer_move < n):
        raise ValueError(f"move index out of range for {n} moves")
    if user_move == computer_move:
        return "Draw"

    # Each move loses to the n // 2 moves that follow it around the circle.
    half = n // 2
    return "Lose" if 1 <= (computer_move - user_move) % n <= half else "Win"


def verdict_message(verdict: Verdict) -> str:
    return _VERDICT_MESSAGES[verdict]


@dataclass(frozen=True)
class MoveSet:
    labels: tuple[str, ...]

    @classmethod
    def from_labels(cls, labels: Sequence[str]) -> "MoveSet":
        count = len(labels)
        if count < 3:
            raise InvalidArguments(f"got {count} move(s), need at least 3")
        if count % 2 == 0:
            raise InvalidArguments(f"got {count} moves, the number of moves must be odd")

        seen: set[str] = set()
        duplicates: list[str] = []
        for label in labels:
            if label in seen and label not in duplicates:
                duplicates.append(label)
            seen.add(label)
        if duplicates:
            raise InvalidArguments("duplicate move(s): " + ", ".join(duplicates))

        return cls(labels=tuple(labels))

    def label(self, index: int) -> str:
        return self.labels[index]

    def __len__(self) -> int:
        return len(self.labels)

    def __iter__(self) -> Iterator[str]:
        return iter(self.labels)


@dataclass(frozen=True)
class RoundResult:
    user_move: str
    computer_move: str
    verdict: Verdict
    key: str
    commitment: str
