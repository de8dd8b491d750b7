# compare/signals.py
import logging

from django.dispatch import Signal, receiver

logger = logging.getLogger(__name__)

# kwargs: surface, entity_id, change ("added" | "removed")
selection_changed = Signal()


def notify_selection_changed(surface: str, entity_id: str, change: str) -> None:
    """Fire-and-forget: receiver errors are logged, never raised into the caller."""
    responses = selection_changed.send_robust(
        sender=None, surface=surface, entity_id=entity_id, change=change
    )
    for rcv, result in responses:
        if isinstance(result, Exception):
            logger.warning("selection_changed receiver %r failed: %s", rcv, result)


def notifier_for(surface: str):
    """Bind a surface name into the (entity_id, change) callback the engine expects."""
    def callback(entity_id, change):
        notify_selection_changed(surface, entity_id, change)
    return callback


@receiver(selection_changed)
def log_selection_change(sender, surface, entity_id, change, **kwargs):
    logger.info("compare %s: %s %s", surface, entity_id, change)
