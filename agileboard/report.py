"""
Plain-text summaries of a board and its cards.
"""
from .board import Board
from .schema import Card, ColumnType

TYPE_MARKERS = {
    ColumnType.STARTING: "▶",
    ColumnType.NORMAL: "•",
    ColumnType.DONE: "✔",
}


def format_card_summary(card: Card) -> str:
    """Format a card as a concise summary."""
    lines = [
        f"🎯 {card.title}",
        f"📊 Estimate: {card.estimate} pts",
        f"📍 Column: {card.column.name if card.column else 'unassigned'}",
    ]
    if card.description:
        lines.append(f"📝 {card.description}")
    return "\n".join(lines)


def format_board_summary(board: Board) -> str:
    """Format every column in board order, followed by the velocity."""
    iteration = board.iteration
    lines = [f"📋 {board.name} ({len(iteration)} cards):"]

    for column in board.columns:
        points = iteration.points_in(column)
        capacity = f"{points}/{column.points_limit}" if column.has_limit else f"{points}"
        lines.append(f"{TYPE_MARKERS[column.type]} {column.name} [{capacity} pts]")

        cards = iteration.cards_in(column)
        if not cards:
            lines.append("    (empty)")
        for card in cards:
            lines.append(f"    - {card.title} ({card.estimate})")

    lines.append(f"🚀 Velocity: {iteration.velocity()}")
    return "\n".join(lines)
