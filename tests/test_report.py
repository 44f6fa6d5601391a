"""
Tests for iteration events and plain-text summaries.
"""
import logging

import pytest

from agileboard.errors import CardNotFound, WIPLimitExceeded
from agileboard.events import IterationEvents
from agileboard.report import format_board_summary, format_card_summary
from agileboard.schema import Card


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Event Tests
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━


def test_events_fire_after_mutation(iteration, columns, make_card):
    """Each successful operation emits its event"""
    seen = []
    for event_type in ("card_added", "card_moved", "move_undone", "card_removed"):
        iteration.subscribe(
            event_type,
            lambda event_type=event_type, **kw: seen.append((event_type, kw["card"], kw["column"])),
        )

    card = make_card()
    iteration.add(card)
    iteration.move(card, columns[2])
    iteration.undo_last_move()
    iteration.remove(card)

    assert seen == [
        ("card_added", card, columns[0]),
        ("card_moved", card, columns[2]),
        ("move_undone", card, columns[0]),
        ("card_removed", card, columns[0]),
    ]


def test_move_event_carries_source_column(iteration, columns, make_card):
    moves = []
    iteration.subscribe("card_moved", lambda **kw: moves.append((kw["from_column"], kw["column"])))

    card = make_card()
    iteration.add(card)
    iteration.move(card, columns[1])
    assert moves == [(columns[0], columns[1])]


def test_no_event_on_failure(iteration, columns, make_card):
    moves = []
    iteration.subscribe("card_moved", lambda **kw: moves.append(kw))

    with pytest.raises(CardNotFound):
        iteration.move(make_card(), columns[2])

    card = make_card(20)
    iteration.add(card)
    with pytest.raises(WIPLimitExceeded):
        iteration.move(card, columns[1])
    assert moves == []


def test_failing_callback_does_not_block(iteration, columns, make_card, caplog):
    def boom(**kw):
        raise RuntimeError("subscriber broke")

    after = []
    iteration.subscribe("card_added", boom)
    iteration.subscribe("card_added", lambda **kw: after.append(kw["card"]))

    card = make_card()
    with caplog.at_level(logging.ERROR, logger="agileboard.events"):
        iteration.add(card)

    assert card in iteration
    assert after == [card]
    assert "card_added" in caplog.text


def test_unknown_event_type():
    with pytest.raises(ValueError):
        IterationEvents().subscribe("card_exploded", lambda **kw: None)


def test_unsubscribe():
    events = IterationEvents()
    calls = []
    callback = lambda **kw: calls.append(kw)
    events.subscribe("card_added", callback)
    events.unsubscribe("card_added", callback)
    events.emit("card_added", card=None)
    assert calls == []


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Summary Tests
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━


def test_card_summary(iteration):
    card = Card(title="Login page", description="Email form", estimate=3)
    assert "unassigned" in format_card_summary(card)

    iteration.add(card)
    summary = format_card_summary(card)
    assert "Login page" in summary
    assert "3 pts" in summary
    assert "To Do" in summary
    assert "Email form" in summary


def test_board_summary(board, columns):
    iteration = board.iteration
    a = Card(title="Task 1", estimate=5)
    b = Card(title="Task 2", estimate=3)
    iteration.add(a)
    iteration.add(b)
    iteration.move(a, columns[1])
    iteration.move(b, columns[2])

    summary = format_board_summary(board)
    lines = summary.splitlines()
    assert "test-board" in lines[0]
    assert "2 cards" in lines[0]
    assert "In Progress [5/8 pts]" in summary
    assert "Done [3 pts]" in summary
    assert "Task 1 (5)" in summary
    assert "(empty)" in summary  # To Do
    assert lines[-1].endswith("Velocity: 3")

    # Columns appear in board order
    assert summary.index("To Do") < summary.index("In Progress") < summary.index("Done [")
