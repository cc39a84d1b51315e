"""Engine — change collection and batched job dispatch.

Connects lifecycle events on a content node to queued cache jobs through
the change collector, the job batcher, and the job dispatcher.
"""

from staticqueue.engine.batcher import Batch, JobBatcher
from staticqueue.engine.changes import ChangeCollector, PendingChangeSet
from staticqueue.engine.context import ActionContext
from staticqueue.engine.dispatcher import JobDispatcher, JobPayload
from staticqueue.engine.handler import PublishingEventHandler

__all__ = [
    "ActionContext",
    "Batch",
    "ChangeCollector",
    "JobBatcher",
    "JobDispatcher",
    "JobPayload",
    "PendingChangeSet",
    "PublishingEventHandler",
]
