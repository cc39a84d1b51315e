"""Observability — event model for change collection and job dispatch.

Records every step of a collect-then-flush cycle:
- **Collection**: provider answers and detected moves
- **Dispatch**: each job accepted by the queue, and each completed flush

All events are frozen dataclasses with nanosecond timestamps, safe for
concurrent production from multiple threads.

Quick Start:
    >>> from staticqueue.observability import EventLog, PublishCollector
    >>> log = EventLog()
    >>> collector = PublishCollector(log)
    >>> # Pass collector to PublishingEventHandler(..., collector=collector)

"""

from staticqueue.observability.collector import PublishCollector
from staticqueue.observability.events import (
    ChangesCollected,
    ChangesFlushed,
    JobQueued,
    MoveDetected,
    QueueEvent,
    now_ns,
)
from staticqueue.observability.log import EventLog

__all__ = [
    "ChangesCollected",
    "ChangesFlushed",
    "EventLog",
    "JobQueued",
    "MoveDetected",
    "PublishCollector",
    "QueueEvent",
    "now_ns",
]
