"""
Event registry: lets callers react to iteration changes.

The iteration emits events after each successful mutation:
  card_added, card_removed, card_moved, move_undone
"""
import logging
from typing import Dict, Callable, List

logger = logging.getLogger(__name__)

EVENT_TYPES = ("card_added", "card_removed", "card_moved", "move_undone")


class IterationEvents:
    """Routes iteration changes to subscribed callbacks."""

    def __init__(self):
        self.subscribers: Dict[str, List[Callable]] = {}  # event_type -> list of callbacks

    def subscribe(self, event_type: str, callback: Callable) -> None:
        """Register a callback for an event type."""
        if event_type not in EVENT_TYPES:
            raise ValueError(f"Unknown event type {event_type!r}. Available: {list(EVENT_TYPES)}")
        self.subscribers.setdefault(event_type, []).append(callback)

    def unsubscribe(self, event_type: str, callback: Callable) -> None:
        callbacks = self.subscribers.get(event_type, [])
        if callback in callbacks:
            callbacks.remove(callback)

    def emit(self, event_type: str, **kwargs) -> None:
        """Emit an event to all subscribers. A failing callback never blocks the others."""
        for callback in list(self.subscribers.get(event_type, [])):
            try:
                callback(**kwargs)
            except Exception:
                logger.exception(f"Error in {event_type} callback {callback!r}")
