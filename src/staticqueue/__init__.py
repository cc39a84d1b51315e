"""staticqueue — keep a static page cache in sync with a content tree.

When a content node is published, unpublished, or moved, staticqueue asks
the node which cached URLs are affected and queues background jobs to
regenerate or purge them.  Rendering and deleting the artifacts is up to
whatever executes the jobs.

Quick start::

    from staticqueue import MemoryJobQueue, PublishingEventHandler, StaticQueueConfig

    queue = MemoryJobQueue()
    handler = PublishingEventHandler(page, queue, StaticQueueConfig(max_urls_per_job=50))
    handler.on_after_publish(previous_version)

Lifecycle hooks::

    handler.on_after_publish(original)   # publish (and purge old address on move)
    handler.on_before_unpublish()        # collect while URLs still resolve
    handler.on_after_unpublish()         # queue what was collected

Nodes opt in by implementing ``objects_to_update(context)`` and
``objects_to_delete(context)``; the returned items implement
``urls_to_cache()``.

"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from staticqueue.config import StaticQueueConfig
    from staticqueue.engine import ActionContext, PublishingEventHandler
    from staticqueue.queue import JobHandle, MemoryJobQueue

# PEP 703: Declare this module as free-threading safe
_Py_mod_gil = 0

__version__ = "0.1.0-dev"
__all__ = [
    "ActionContext",
    "JobHandle",
    "MemoryJobQueue",
    "PublishingEventHandler",
    "StaticQueueConfig",
    "__version__",
    "load_config",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import staticqueue`` fast while providing a clean top-level API.
    """
    if name == "StaticQueueConfig":
        from staticqueue.config import StaticQueueConfig

        return StaticQueueConfig

    if name == "load_config":
        from staticqueue.config_loader import load_config

        return load_config

    if name == "ActionContext":
        from staticqueue.engine.context import ActionContext

        return ActionContext

    if name == "PublishingEventHandler":
        from staticqueue.engine.handler import PublishingEventHandler

        return PublishingEventHandler

    if name in ("JobHandle", "MemoryJobQueue"):
        from staticqueue import queue

        return getattr(queue, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
