"""Change collection — pending update/delete sets for one node.

A ``ChangeCollector`` is bound to one content node for one logical
operation.  ``collect_changes`` asks the node which items an action
affects and stores the answer; ``flush_changes`` turns the stored answer
into queued jobs and empties it again::

    idle --collect_changes--> collected --flush_changes--> idle

Collecting replaces the pending set, it never merges.  Flushing while idle
queues nothing.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from staticqueue.contracts import ChangeProvider

if TYPE_CHECKING:
    from staticqueue._types import PendingState
    from staticqueue.contracts import CacheableItem, ResourceBudget
    from staticqueue.engine.context import ActionContext
    from staticqueue.engine.dispatcher import JobDispatcher
    from staticqueue.observability.collector import PublishCollector
    from staticqueue.queue import JobHandle


@dataclass(slots=True)
class PendingChangeSet:
    """Items waiting to be turned into jobs.

    Attributes:
        to_update: Items whose URLs need regenerating, in provider order.
        to_delete: Items whose URLs need purging, in provider order.

    """

    to_update: list[CacheableItem] = field(default_factory=list)
    to_delete: list[CacheableItem] = field(default_factory=list)

    @property
    def state(self) -> PendingState:
        return "collected" if self.to_update or self.to_delete else "idle"

    def replace(
        self,
        to_update: list[CacheableItem],
        to_delete: list[CacheableItem],
    ) -> None:
        self.to_update = to_update
        self.to_delete = to_delete

    def clear(self) -> None:
        self.to_update = []
        self.to_delete = []


def node_label(node: Any) -> str:
    """Short description of a node for events and summaries."""
    segment = getattr(node, "url_segment", None)
    if segment is None:
        return repr(node)
    return f"{type(node).__name__}({segment!r})"


class ChangeCollector:
    """Collects and flushes pending changes for one node.

    Args:
        node: The content node.  Participates only if it satisfies
            ``ChangeProvider``; otherwise collection is a no-op.
        dispatcher: Submits jobs on flush.
        budget: Asked to raise process limits before every collection.
        collector: Optional observability collector.

    """

    __slots__ = ("_budget", "_collector", "_dispatcher", "_node", "_pending")

    def __init__(
        self,
        node: Any,
        dispatcher: JobDispatcher,
        budget: ResourceBudget,
        collector: PublishCollector | None = None,
    ) -> None:
        self._node = node
        self._dispatcher = dispatcher
        self._budget = budget
        self._collector = collector
        self._pending = PendingChangeSet()

    @property
    def node(self) -> Any:
        return self._node

    @property
    def pending(self) -> PendingChangeSet:
        return self._pending

    def collect_changes(self, context: ActionContext) -> None:
        """Store the node's answer for ``context`` as the pending set.

        Provider errors propagate and leave the previous pending set intact.

        """
        self._budget.request()

        if not isinstance(self._node, ChangeProvider):
            return

        to_update = list(self._node.objects_to_update(context))
        to_delete = list(self._node.objects_to_delete(context))
        self._pending.replace(to_update, to_delete)

        if self._collector is not None:
            self._collector.record_collect(
                node_label(self._node),
                context.action,
                to_update=len(to_update),
                to_delete=len(to_delete),
            )

    def flush_changes(self) -> list[JobHandle]:
        """Queue jobs for the pending set, then empty it.

        Each list is cleared only after all of its jobs were queued.  If the
        queue fails midway the list keeps every item, including those whose
        jobs were already accepted, so a retried flush queues them again.

        Returns:
            Handles of all queued jobs, update jobs first.

        """
        start = time.perf_counter()
        pending = self._pending

        update_handles: list[JobHandle] = []
        if pending.to_update:
            update_handles = self._dispatcher.dispatch_updates(pending.to_update)
            pending.to_update = []

        delete_handles: list[JobHandle] = []
        if pending.to_delete:
            delete_handles = self._dispatcher.dispatch_deletes(pending.to_delete)
            pending.to_delete = []

        if self._collector is not None and (update_handles or delete_handles):
            self._collector.record_flush(
                node_label(self._node),
                update_jobs=len(update_handles),
                delete_jobs=len(delete_handles),
                duration_ms=(time.perf_counter() - start) * 1000,
            )

        return update_handles + delete_handles
