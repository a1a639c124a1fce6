from __future__ import annotations

import argparse
import logging
import sys

from commit_reveal import verify
from config import Config
from dominance import build_table, format_table
from errors import EntropyError, InvalidMoveError, MoveSetError
from game_round import GameRound
from protocol import MoveSet, outcome_label

EXAMPLE_MOVES = "rock paper scissors"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_ENTROPY = 2
EXIT_INTERRUPTED = 130

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="fair-rps")
    parser.add_argument("--log-level", default=Config.LOG_LEVEL, type=str.upper, choices=LOG_LEVELS)
    parser.add_argument("--table-format", default=Config.TABLE_FORMAT, help="tabulate format for the help table")
    sub = parser.add_subparsers(dest="cmd", required=True)

    play = sub.add_parser("play", help="Play one round against the computer")
    play.add_argument("moves", nargs="*", help="Odd number (>= 3) of unique moves, e.g. " + EXAMPLE_MOVES)

    table = sub.add_parser("table", help="Print the win/lose table for a move list")
    table.add_argument("moves", nargs="*")

    check = sub.add_parser("verify", help="Check a published HMAC against a disclosed key")
    check.add_argument("--key", required=True)
    check.add_argument("--move", required=True)
    check.add_argument("--hmac", required=True, dest="tag")

    args = parser.parse_args(argv)
    # Defaults from the environment are not checked against choices.
    if args.log_level not in LOG_LEVELS:
        parser.error(f"invalid log level {args.log_level!r} (choose from {', '.join(LOG_LEVELS)})")
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    if args.cmd == "verify":
        if verify(args.key, args.move, args.tag):
            print("OK: the HMAC matches the disclosed key and move.")
            return EXIT_OK
        print("MISMATCH: the HMAC does not match the disclosed key and move.")
        return EXIT_INVALID

    try:
        move_set = MoveSet.from_args(args.moves)
    except MoveSetError as exc:
        print(f"Error: {exc.reason}.", file=sys.stderr)
        print(f"Example: {EXAMPLE_MOVES}", file=sys.stderr)
        return EXIT_INVALID

    if args.cmd == "table":
        print(format_table(build_table(move_set), tablefmt=args.table_format))
        return EXIT_OK

    if args.cmd == "play":
        try:
            return _play(move_set, table_format=args.table_format)
        except EntropyError as exc:
            print(f"Fatal: {exc}. The round was aborted.", file=sys.stderr)
            return EXIT_ENTROPY
        except (KeyboardInterrupt, EOFError):
            print("\nGame interrupted.")
            return EXIT_INTERRUPTED

    raise SystemExit("unhandled command")


def _play(move_set: MoveSet, *, table_format: str) -> int:
    game = GameRound(move_set)
    commitment = game.commit()
    print(f"HMAC: {commitment.tag}")

    while True:
        choice = _prompt_for_move(move_set)
        if choice == "?":
            print(format_table(build_table(move_set), tablefmt=table_format))
            continue
        if choice == "0":
            print("Exiting the game.")
            return EXIT_OK

        try:
            move = move_set.by_number(int(choice))
        except (ValueError, InvalidMoveError):
            print("Error: Invalid move! Please enter a valid number corresponding to a move.")
            print(f'Example: Enter 1 for "{move_set.moves[0]}", 2 for "{move_set.moves[1]}", etc.')
            continue
        break

    outcome = game.resolve(move)
    disclosure = game.disclose()
    logger.info(f"[round] challenger={move} opponent={disclosure.move} outcome={outcome}")

    print(f"Your move: {move}")
    print(f"Computer move: {disclosure.move}")
    print(outcome_label(outcome))
    print(f"HMAC key: {disclosure.key}")
    print("Check the HMAC key to verify the integrity of the game:")
    print(f"  {Config.VERIFY_URL}")
    print(f"  or run: fair-rps verify --key {disclosure.key} --move {disclosure.move} --hmac {commitment.tag}")
    return EXIT_OK


def _prompt_for_move(move_set: MoveSet) -> str:
    print("\nAvailable moves:")
    for number, move in enumerate(move_set, start=1):
        print(f"{number} - {move}")
    print("0 - Exit")
    print("? - Help")
    return input("Enter your move: ").strip()


if __name__ == "__main__":
    raise SystemExit(main())
