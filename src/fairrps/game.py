from __future__ import annotations

import logging
import secrets
from dataclasses import dataclass, field

from fairrps.commit_reveal import compute_commitment, generate_key
from fairrps.protocol import MoveSet, RoundResult, determine_winner

logger = logging.getLogger(__name__)


class RoundAlreadyRevealed(RuntimeError):
    pass


@dataclass(frozen=True)
class _Commit:
    key: str = field(repr=False)
    computer_move: int = field(repr=False)
    commitment: str


@dataclass
class GameRound:
    """One commit-reveal round against the computer.

    The key and computer move are fixed at start in a frozen record and only
    leave the object through the result of :meth:`reveal`, which can be
    called once.
    """

    moves: MoveSet
    _commit: _Commit
    status: str = "committed"

    @classmethod
    def start(cls, moves: MoveSet) -> "GameRound":
        key = generate_key()
        computer_move = secrets.randbelow(len(moves))
        commitment = compute_commitment(key, moves.label(computer_move))
        logger.debug("round committed moves=%d commitment=%s", len(moves), commitment)
        return cls(moves=moves, _commit=_Commit(key=key, computer_move=computer_move, commitment=commitment))

    @property
    def commitment(self) -> str:
        return self._commit.commitment

    def reveal(self, user_move: int) -> RoundResult:
        if self.status == "revealed":
            raise RoundAlreadyRevealed("this round has already been revealed")
        if not 0 <= user_move < len(self.moves):
            raise ValueError(f"user move must be in [0, {len(self.moves)})")

        computer_move = self._commit.computer_move
        verdict = determine_winner(user_move, computer_move, len(self.moves))
        self.status = "revealed"
        logger.debug("round revealed user=%d computer=%d verdict=%s", user_move, computer_move, verdict)
        return RoundResult(
            user_move=self.moves.label(user_move),
            computer_move=self.moves.label(computer_move),
            verdict=verdict,
            key=self._commit.key,
            commitment=self._commit.commitment,
        )
