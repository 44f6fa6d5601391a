#!/usr/bin/env python3
"""
Quick verification that the Agile board works end-to-end.
"""
import sys

from agileboard.board import Board
from agileboard.config import BoardConfig, setup_logging
from agileboard.errors import WIPLimitExceeded
from agileboard.report import format_board_summary, format_card_summary
from agileboard.schema import Card


def main(config_path=None):
    print("=" * 60)
    print("Agile Board Verification")
    print("=" * 60)

    # Load config
    print("\n[1/6] Loading board config...")
    cfg = BoardConfig.load(config_path)
    setup_logging(cfg)
    board = Board.from_config(cfg)
    iteration = board.iteration
    print(f"✅ Board '{board.name}' with columns {[c.name for c in board.columns]}")

    # Add cards
    print("\n[2/6] Adding cards to the iteration...")
    login = Card(title="Login page", description="Email + password form", estimate=5)
    search = Card(title="Search API", description="Full text search endpoint", estimate=8)
    iteration.add(login)
    iteration.add(search)
    print(f"✅ {len(iteration)} cards in '{board.start_column.name}'")
    print(f"   Velocity: {iteration.velocity()}")

    # Finish a card
    print("\n[3/6] Moving a card to done...")
    iteration.move(login, board.done_column)
    print(f"✅ '{login.title}' now in '{login.column.name}'")
    print(f"   Velocity: {iteration.velocity()}")

    # Undo
    print("\n[4/6] Undoing the last move...")
    iteration.undo_last_move()
    print(f"✅ '{login.title}' back in '{login.column.name}'")
    print(f"   Velocity: {iteration.velocity()}")

    # WIP limit
    print("\n[5/6] Checking WIP limits...")
    limited = [c for c in board.columns if c.has_limit]
    if limited:
        column = limited[0]
        big = Card(title="Rewrite billing", estimate=column.points_limit + 1)
        iteration.add(big)
        try:
            iteration.move(big, column)
            print(f"❌ '{big.title}' should not fit in '{column.name}'")
            return 1
        except WIPLimitExceeded as e:
            print(f"✅ Rejected: {e}")
    else:
        print("   No column has a points limit, skipping")

    # Summaries
    print("\n[6/6] Board summary...")
    print(format_board_summary(board))
    print()
    print(format_card_summary(search))

    print("\n" + "=" * 60)
    print("✅ ALL CHECKS PASSED")
    print("=" * 60)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1] if len(sys.argv) > 1 else None))
