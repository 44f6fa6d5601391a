# Agile board: columns, cards, and the iteration that moves cards between them
#
# Components:
#   schema.py    - Data model (Card, Column, ColumnType, MoveRecord)
#   errors.py    - BoardError taxonomy raised by Board and Iteration
#   board.py     - Validated, immutable column set owning one Iteration
#   iteration.py - Card placement, moves, undo, velocity, WIP limits
#   events.py    - Subscriber registry for iteration changes
#   config.py    - YAML board definitions and logging setup
#   report.py    - Plain-text board and card summaries
