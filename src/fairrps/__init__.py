"""Rock-paper-scissors for any odd number of moves with a committed computer move."""
from fairrps.commit_reveal import compute_commitment, generate_key, verify_commitment
from fairrps.game import GameRound
from fairrps.protocol import MoveSet, determine_winner

__all__ = ["GameRound", "MoveSet", "compute_commitment", "determine_winner", "generate_key", "verify_commitment"]
