"""Publish collector — records engine activity into the event log.

The engine calls the ``record_*`` methods at each step of a
collect-then-flush cycle.  With ``verbose`` enabled, each flush also
prints a one-line summary to stderr.

Thread Safety:
    The collector delegates to ``EventLog`` which is internally locked.
    Safe for concurrent use from handlers in multiple threads.

"""

from __future__ import annotations

import sys
from typing import Any

from staticqueue.observability.events import (
    ChangesCollected,
    ChangesFlushed,
    JobQueued,
    MoveDetected,
    now_ns,
)
from staticqueue.observability.log import EventLog


class PublishCollector:
    """Event collector for change collection and job dispatch.

    Args:
        log: The EventLog to store events in.
        verbose: Print flush summaries to stderr.

    """

    __slots__ = ("_log", "_verbose")

    def __init__(self, log: EventLog | None = None, *, verbose: bool = False) -> None:
        self._log = log if log is not None else EventLog()
        self._verbose = verbose

    @property
    def log(self) -> EventLog:
        """The underlying event log."""
        return self._log

    # ----- Collection -----

    def record_collect(
        self,
        node: str,
        action: str,
        *,
        to_update: int = 0,
        to_delete: int = 0,
    ) -> None:
        """Record a completed collection pass."""
        self._log.append(
            ChangesCollected(
                node=node,
                action=action,  # type: ignore[arg-type]
                to_update=to_update,
                to_delete=to_delete,
                timestamp_ns=now_ns(),
            )
        )

    def record_move(
        self,
        node: str,
        *,
        old_parent_id: Any,
        new_parent_id: Any,
        old_segment: str,
        new_segment: str,
    ) -> None:
        """Record that a publish moved a node to a new address."""
        self._log.append(
            MoveDetected(
                node=node,
                old_parent_id=old_parent_id,
                new_parent_id=new_parent_id,
                old_segment=old_segment,
                new_segment=new_segment,
                timestamp_ns=now_ns(),
            )
        )

    # ----- Dispatch -----

    def record_job(self, kind: str, job_id: str, *, url_count: int, label: str) -> None:
        """Record a job accepted by the queue."""
        self._log.append(
            JobQueued(
                kind=kind,  # type: ignore[arg-type]
                job_id=job_id,
                url_count=url_count,
                label=label,
                timestamp_ns=now_ns(),
            )
        )

    def record_flush(
        self,
        node: str,
        *,
        update_jobs: int = 0,
        delete_jobs: int = 0,
        duration_ms: float = 0.0,
    ) -> None:
        """Record a completed flush."""
        event = ChangesFlushed(
            node=node,
            update_jobs=update_jobs,
            delete_jobs=delete_jobs,
            duration_ms=duration_ms,
            timestamp_ns=now_ns(),
        )
        self._log.append(event)

        if self._verbose:
            self._print_summary(event)

    def _print_summary(self, event: ChangesFlushed) -> None:
        """Print a one-line flush summary to stderr."""
        if not event.update_jobs and not event.delete_jobs:
            return
        builds = "job" if event.update_jobs == 1 else "jobs"
        purges = "job" if event.delete_jobs == 1 else "jobs"
        print(
            f"  [{event.duration_ms:.0f}ms] {event.node} -> "
            f"{event.update_jobs} build {builds}, {event.delete_jobs} purge {purges}",
            file=sys.stderr,
        )
