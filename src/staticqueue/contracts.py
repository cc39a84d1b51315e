"""Capabilities consumed by the engine.

Collaborators are duck-typed: any object with the right methods satisfies a
protocol, no base class required. ``ChangeProvider`` is runtime-checkable so
the collector can ask a node whether it participates in static caching.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from staticqueue._types import UrlMap
    from staticqueue.engine.context import ActionContext
    from staticqueue.engine.dispatcher import JobPayload
    from staticqueue.queue import JobHandle


@runtime_checkable
class CacheableItem(Protocol):
    """Anything that owns a set of cached URLs."""

    def urls_to_cache(self) -> UrlMap:
        """Return URL -> metadata for every artifact this item owns."""
        ...


@runtime_checkable
class ChangeProvider(Protocol):
    """A node that can report which items an action affects."""

    def objects_to_update(self, context: ActionContext) -> Sequence[CacheableItem]: ...

    def objects_to_delete(self, context: ActionContext) -> Sequence[CacheableItem]: ...


class ContentNode(Protocol):
    """The addressing fields used for move detection."""

    parent_id: Any
    url_segment: str


class ResourceBudget(Protocol):
    """Raises memory/time ceilings before a potentially long traversal."""

    def request(self) -> None: ...


class JobQueue(Protocol):
    """Asynchronous execution engine that accepts job payloads.

    Implementations raise ``SubmissionError`` when a job is refused.
    """

    def queue_job(self, payload: JobPayload) -> JobHandle: ...
