"""Event model for publish-queue observability.

All events are frozen dataclasses with:
- ``timestamp_ns``: Monotonic nanosecond timestamp
- Descriptive fields for the specific event type

Thread Safety:
    All events are frozen (immutable) and safe to share across threads.

"""

import time
from dataclasses import dataclass
from typing import Any, Literal


# ---------------------------------------------------------------------------
# Collection events
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class ChangesCollected:
    """A collection pass stored a new pending change set.

    Attributes:
        node: Label of the node that was queried.
        action: The lifecycle action passed to the provider.
        to_update: Number of items returned for regeneration.
        to_delete: Number of items returned for purging.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    node: str
    action: Literal["publish", "unpublish"]
    to_update: int
    to_delete: int
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class MoveDetected:
    """A published node changed parent or URL segment.

    Attributes:
        node: Label of the node after the move.
        old_parent_id: Parent before the publish.
        new_parent_id: Parent after the publish.
        old_segment: URL segment before the publish.
        new_segment: URL segment after the publish.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    node: str
    old_parent_id: Any
    new_parent_id: Any
    old_segment: str
    new_segment: str
    timestamp_ns: int


# ---------------------------------------------------------------------------
# Dispatch events
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class JobQueued:
    """A job payload was accepted by the queue.

    Attributes:
        kind: ``update`` (build) or ``delete`` (purge).
        job_id: Identifier assigned by the queue.
        url_count: Number of URLs in the job's batch.
        label: Human-readable label of the payload.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    kind: Literal["update", "delete"]
    job_id: str
    url_count: int
    label: str
    timestamp_ns: int


@dataclass(frozen=True, slots=True)
class ChangesFlushed:
    """A flush completed and the pending set returned to idle.

    Attributes:
        node: Label of the node whose pending set was flushed.
        update_jobs: Number of update jobs queued.
        delete_jobs: Number of delete jobs queued.
        duration_ms: Wall-clock time for the flush.
        timestamp_ns: Monotonic nanosecond timestamp.

    """

    node: str
    update_jobs: int
    delete_jobs: int
    duration_ms: float
    timestamp_ns: int


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

type QueueEvent = ChangesCollected | MoveDetected | JobQueued | ChangesFlushed


def now_ns() -> int:
    """Return the current monotonic clock value in nanoseconds."""
    return time.monotonic_ns()
