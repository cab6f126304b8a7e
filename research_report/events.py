"""Thread-safe event bus for generation observability.

Pipelines emit events from worker threads (the provider call runs in
``asyncio.to_thread``). The listener list is snapshotted under a lock;
listeners then run synchronously, outside it.
"""

import logging
import threading
import time
from typing import Callable, List

logger = logging.getLogger(__name__)

_listeners: List[Callable[[dict], None]] = []
_lock = threading.Lock()


def add_listener(fn: Callable[[dict], None]):
    with _lock:
        _listeners.append(fn)


def remove_listener(fn: Callable[[dict], None]):
    with _lock:
        try:
            _listeners.remove(fn)
        except ValueError:
            pass


def emit(event: dict):
    """Broadcast *event* to every registered listener.

    A failing listener is logged and skipped so it cannot break a generation
    call.
    """
    event.setdefault("timestamp", time.time())
    with _lock:
        listeners = list(_listeners)
    for fn in listeners:
        try:
            fn(event)
        except Exception:
            logger.warning("Event listener %r failed on %s", fn, event.get("type"), exc_info=True)
