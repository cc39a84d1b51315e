"""Job dispatcher — builds job payloads and hands them to the queue.

One payload per batch.  Submission happens in item order and, within an
item, in ascending batch order.  Failures from the queue are not caught.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from staticqueue._types import JobKind
    from staticqueue.contracts import CacheableItem, JobQueue
    from staticqueue.engine.batcher import Batch, JobBatcher
    from staticqueue.observability.collector import PublishCollector
    from staticqueue.queue import JobHandle

_LABEL_PREFIX: dict[str, str] = {
    "update": "Building URLs: ",
    "delete": "Purging URLs: ",
}


@dataclass(frozen=True, slots=True)
class JobPayload:
    """What the queue receives for one job.

    Attributes:
        batch: The URLs to regenerate or purge.
        label: Human-readable description, e.g. ``"Building URLs: ['/a/']"``.

    """

    batch: Batch
    label: str

    @property
    def kind(self) -> JobKind:
        return self.batch.kind

    @property
    def urls(self) -> tuple[str, ...]:
        return self.batch.urls


def describe_batch(batch: Batch) -> str:
    """Build the payload label for a batch."""
    return f"{_LABEL_PREFIX[batch.kind]}{list(batch.urls)!r}"


class JobDispatcher:
    """Submits one job per batch to a ``JobQueue``.

    Args:
        queue: Execution engine that receives the payloads.
        batcher: Batch policy for update and delete items.
        collector: Optional observability collector.

    """

    __slots__ = ("_batcher", "_collector", "_queue")

    def __init__(
        self,
        queue: JobQueue,
        batcher: JobBatcher,
        collector: PublishCollector | None = None,
    ) -> None:
        self._queue = queue
        self._batcher = batcher
        self._collector = collector

    @property
    def batcher(self) -> JobBatcher:
        return self._batcher

    def build_payload(self, batch: Batch) -> JobPayload:
        return JobPayload(batch=batch, label=describe_batch(batch))

    def submit(self, batch: Batch) -> JobHandle:
        """Build the payload for one batch and queue it."""
        payload = self.build_payload(batch)
        handle = self._queue.queue_job(payload)
        if self._collector is not None:
            self._collector.record_job(
                batch.kind, handle.job_id, url_count=len(batch), label=payload.label,
            )
        return handle

    def dispatch_updates(self, items: Iterable[CacheableItem]) -> list[JobHandle]:
        """Queue regeneration jobs, split by the batcher's limit."""
        handles: list[JobHandle] = []
        for item in items:
            for batch in self._batcher.update_batches(item):
                handles.append(self.submit(batch))
        return handles

    def dispatch_deletes(self, items: Iterable[CacheableItem]) -> list[JobHandle]:
        """Queue one purge job per item."""
        return [self.submit(self._batcher.delete_batch(item)) for item in items]
