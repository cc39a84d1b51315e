"""In-process job queue.

``MemoryJobQueue`` accepts payloads and records them in submission order
without executing anything.  It stands in for a real execution engine in
tests and local tooling, and is the reference for what a ``JobQueue``
implementation must return.

Thread Safety:
    Submission and inspection are protected by a ``threading.Lock`` so one
    queue can be shared by handlers running in different threads.

"""

from __future__ import annotations

import itertools
import threading
from dataclasses import dataclass
from typing import TYPE_CHECKING

from staticqueue._errors import SubmissionError

if TYPE_CHECKING:
    from staticqueue.engine.dispatcher import JobPayload


@dataclass(frozen=True, slots=True)
class JobHandle:
    """Receipt for a job accepted by a queue.

    Attributes:
        job_id: Identifier assigned by the queue.
        payload: The submitted payload.

    """

    job_id: str
    payload: JobPayload


class MemoryJobQueue:
    """Records submitted jobs in memory.

    Args:
        prefix: Prefix for generated job ids (``"job"`` -> ``"job-1"``).

    """

    __slots__ = ("_closed", "_counter", "_handles", "_lock", "_prefix")

    def __init__(self, prefix: str = "job") -> None:
        self._prefix = prefix
        self._counter = itertools.count(1)
        self._handles: list[JobHandle] = []
        self._lock = threading.Lock()
        self._closed = False

    def queue_job(self, payload: JobPayload) -> JobHandle:
        """Accept a payload and return its handle.

        Raises:
            SubmissionError: If the queue has been closed.

        """
        with self._lock:
            if self._closed:
                msg = f"Queue is closed; refused job: {payload.label}"
                raise SubmissionError(msg)
            handle = JobHandle(job_id=f"{self._prefix}-{next(self._counter)}", payload=payload)
            self._handles.append(handle)
            return handle

    def close(self) -> None:
        """Refuse all further submissions."""
        with self._lock:
            self._closed = True

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def handles(self) -> tuple[JobHandle, ...]:
        """All accepted jobs in submission order."""
        with self._lock:
            return tuple(self._handles)

    @property
    def payloads(self) -> tuple[JobPayload, ...]:
        """Payloads of all accepted jobs in submission order."""
        with self._lock:
            return tuple(h.payload for h in self._handles)

    def drain(self) -> list[JobHandle]:
        """Remove and return all accepted jobs."""
        with self._lock:
            handles = self._handles
            self._handles = []
            return handles

    def __len__(self) -> int:
        with self._lock:
            return len(self._handles)
