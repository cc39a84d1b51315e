"""Publishing event handler — lifecycle binding for one content node.

Hooks the collect-then-flush cycle onto the three lifecycle events a
content tree emits:

- ``on_after_publish(original)``: if the node moved (new parent or URL
  segment), purge the old address first, then regenerate the new one.
- ``on_before_unpublish()``: collect while the node still resolves its
  URLs.
- ``on_after_unpublish()``: queue what was collected before.

One handler instance serves one node for one logical operation; the
pending set it holds is not safe to share across concurrent operations.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from staticqueue.config import StaticQueueConfig
from staticqueue.engine.batcher import JobBatcher
from staticqueue.engine.changes import ChangeCollector, node_label
from staticqueue.engine.context import ActionContext
from staticqueue.engine.dispatcher import JobDispatcher
from staticqueue.observability.collector import PublishCollector
from staticqueue.observability.log import EventLog
from staticqueue.resources import NullResourceBudget, ProcessResourceBudget

if TYPE_CHECKING:
    from staticqueue.contracts import CacheableItem, ContentNode, JobQueue, ResourceBudget
    from staticqueue.engine.changes import PendingChangeSet
    from staticqueue.queue import JobHandle


def _default_budget(config: StaticQueueConfig) -> ResourceBudget:
    if not config.raise_resource_limits:
        return NullResourceBudget()
    return ProcessResourceBudget(config.memory_limit_bytes, config.time_limit_seconds)


def _default_collector(config: StaticQueueConfig) -> PublishCollector | None:
    if not config.verbose:
        return None
    return PublishCollector(EventLog(config.event_log_size), verbose=True)


class PublishingEventHandler:
    """Turns publish/unpublish events on a node into cache jobs.

    Args:
        node: The content node this handler is bound to.
        queue: Execution engine for the jobs.
        config: Batch policy and defaults for budget/collector.
        budget: Resource budget requested before each collection.  Built
            from ``config`` when omitted.
        collector: Observability collector.  A verbose one is built when
            omitted and ``config.verbose`` is set.

    """

    def __init__(
        self,
        node: Any,
        queue: JobQueue,
        config: StaticQueueConfig | None = None,
        *,
        budget: ResourceBudget | None = None,
        collector: PublishCollector | None = None,
    ) -> None:
        self._config = config if config is not None else StaticQueueConfig()
        self._queue = queue
        self._budget = budget if budget is not None else _default_budget(self._config)
        self._collector = collector if collector is not None else _default_collector(self._config)
        dispatcher = JobDispatcher(
            queue, JobBatcher(self._config.max_urls_per_job), self._collector,
        )
        self._changes = ChangeCollector(node, dispatcher, self._budget, self._collector)

    @property
    def node(self) -> Any:
        return self._changes.node

    @property
    def config(self) -> StaticQueueConfig:
        return self._config

    @property
    def collector(self) -> PublishCollector | None:
        return self._collector

    # ----- Pending state -----

    @property
    def pending(self) -> PendingChangeSet:
        return self._changes.pending

    @property
    def to_update(self) -> list[CacheableItem]:
        return self._changes.pending.to_update

    @to_update.setter
    def to_update(self, items: list[CacheableItem]) -> None:
        self._changes.pending.to_update = list(items)

    @property
    def to_delete(self) -> list[CacheableItem]:
        return self._changes.pending.to_delete

    @to_delete.setter
    def to_delete(self, items: list[CacheableItem]) -> None:
        self._changes.pending.to_delete = list(items)

    def collect_changes(self, context: ActionContext) -> None:
        self._changes.collect_changes(context)

    def flush_changes(self) -> list[JobHandle]:
        return self._changes.flush_changes()

    # ----- Lifecycle events -----

    def for_node(self, node: Any) -> PublishingEventHandler:
        """A handler for another node sharing this handler's collaborators."""
        return PublishingEventHandler(
            node,
            self._queue,
            self._config,
            budget=self._budget,
            collector=self._collector,
        )

    def is_moved(self, original: ContentNode | None) -> bool:
        """Whether publishing changed the node's address."""
        if original is None:
            return False
        node = self.node
        return (
            original.parent_id != node.parent_id
            or original.url_segment != node.url_segment
        )

    def on_after_publish(self, original: ContentNode | None = None) -> list[JobHandle]:
        """Queue jobs for a publish.

        A moved node is treated as an unpublish of ``original`` followed by
        a publish of the current node; the purge jobs for the old address
        are all queued before the new address is collected.

        Args:
            original: The node as it was before this publish, or ``None``
                on first publish.

        Returns:
            Handles of all queued jobs in submission order.

        """
        handles: list[JobHandle] = []
        if self.is_moved(original):
            if self._collector is not None:
                node = self.node
                self._collector.record_move(
                    node_label(node),
                    old_parent_id=original.parent_id,
                    new_parent_id=node.parent_id,
                    old_segment=original.url_segment,
                    new_segment=node.url_segment,
                )
            previous = self.for_node(original)
            previous.collect_changes(ActionContext.unpublish())
            handles.extend(previous.flush_changes())

        self.collect_changes(ActionContext.publish())
        handles.extend(self.flush_changes())
        return handles

    def on_before_unpublish(self) -> None:
        """Collect affected items while the node is still published."""
        self.collect_changes(ActionContext.unpublish())

    def on_after_unpublish(self) -> list[JobHandle]:
        """Queue jobs for the items collected before the unpublish."""
        return self.flush_changes()
