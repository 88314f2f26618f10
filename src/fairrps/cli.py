from __future__ import annotations

import argparse
import logging
import sys

from fairrps.commit_reveal import verify_commitment
from fairrps.game import GameRound
from fairrps.help_table import PAGE_SIZE, HelpTable
from fairrps.protocol import InvalidArguments, MoveSet, RoundResult, verdict_message

logger = logging.getLogger(__name__)

USAGE_ERROR = "Error: Invalid arguments. You must provide an odd number (>= 3) of unique moves."
USAGE_EXAMPLE = "Example: fair-rps Rock Paper Scissors"
DASH_HINT = "Moves starting with '-' go after a -- separator: fair-rps -- -x -y -z"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="fair-rps",
        description="Rock-paper-scissors with any odd number of moves and a provably fair computer move.",
        epilog=DASH_HINT,
    )
    parser.add_argument("moves", nargs="*", help="Move labels, e.g. Rock Paper Scissors")
    parser.add_argument("--page-size", type=int, default=PAGE_SIZE, help="Help table columns per page")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for diagnostics on stderr",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    if args.page_size < 1:
        parser.error("--page-size must be at least 1")

    try:
        moves = MoveSet.from_labels(args.moves)
    except InvalidArguments as exc:
        print(USAGE_ERROR, file=sys.stderr)
        print(f"Reason: {exc}", file=sys.stderr)
        print(USAGE_EXAMPLE, file=sys.stderr)
        print(DASH_HINT, file=sys.stderr)
        return 2

    help_table = HelpTable(moves, page_size=args.page_size)
    try:
        _play(moves, help_table)
    except (KeyboardInterrupt, EOFError):
        print("\nExiting...")
    return 0


def verify_main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="fair-rps-verify",
        description="Check that a revealed key and move match the HMAC shown before you moved.",
    )
    parser.add_argument("--key", required=True, help="HMAC key revealed after the round")
    parser.add_argument("--move", required=True, help="Computer move revealed after the round")
    parser.add_argument("--hmac", required=True, help="HMAC shown before you moved")
    args = parser.parse_args(argv)

    if verify_commitment(expected_commitment=args.hmac, key=args.key, message=args.move):
        print("OK: the computer move matches the HMAC")
        return 0
    print("MISMATCH: the key and move do not produce this HMAC")
    return 1


def _play(moves: MoveSet, help_table: HelpTable) -> None:
    game_round = GameRound.start(moves)
    print(f"HMAC: {game_round.commitment}")

    while True:
        _print_menu(moves)
        choice = input("Enter your move: ").strip()
        if choice == "0":
            print("Exiting...")
            return
        if choice == "?":
            help_table.display(read_line=input)
            continue

        user_move = _parse_choice(choice, len(moves))
        if user_move is None:
            logger.debug("rejected menu input %r", choice)
            print("Invalid input. Please try again.")
            continue

        _show_result(game_round.reveal(user_move))
        return


def _parse_choice(choice: str, count: int) -> int | None:
    # Menu numbers are 1-based; 0 is reserved for exit.
    if not choice.isdecimal():
        return None
    number = int(choice)
    if not 1 <= number <= count:
        return None
    return number - 1


def _print_menu(moves: MoveSet) -> None:
    print("Available moves:")
    for i, label in enumerate(moves, start=1):
        print(f"{i} - {label}")
    print("0 - exit")
    print("? - help")


def _show_result(result: RoundResult) -> None:
    print(f"Your move: {result.user_move}")
    print(f"Computer move: {result.computer_move}")
    print(verdict_message(result.verdict))
    print(f"HMAC key: {result.key}")
    print("\nVerify the computer did not change its move with:")
    print(f'  fair-rps-verify --key {result.key} --move "{result.computer_move}" --hmac {result.commitment}')


if __name__ == "__main__":
    raise SystemExit(main())
