"""Shared test fixtures for staticqueue."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from staticqueue.config import StaticQueueConfig
from staticqueue.engine.handler import PublishingEventHandler
from staticqueue.queue import MemoryJobQueue
from staticqueue.resources import NullResourceBudget


class FakeItem:
    """A cacheable item with a fixed URL map."""

    def __init__(self, urls: dict[str, Any] | list[str]) -> None:
        if isinstance(urls, list):
            urls = dict.fromkeys(urls, 1)
        self.urls = urls

    def urls_to_cache(self) -> dict[str, Any]:
        return dict(self.urls)

    def __repr__(self) -> str:
        return f"FakeItem({sorted(self.urls)!r})"


class FakePage:
    """A content node implementing the change-provider capability.

    ``updates`` / ``deletes`` map an action name to the items returned for
    it.  Every provider call is recorded in ``calls``.
    """

    def __init__(
        self,
        url_segment: str = "page",
        parent_id: int = 0,
        *,
        updates: dict[str, list[FakeItem]] | None = None,
        deletes: dict[str, list[FakeItem]] | None = None,
    ) -> None:
        self.url_segment = url_segment
        self.parent_id = parent_id
        self.updates = updates or {}
        self.deletes = deletes or {}
        self.calls: list[tuple[str, str]] = []

    def objects_to_update(self, context: Any) -> list[FakeItem]:
        self.calls.append(("update", context.action))
        return list(self.updates.get(context.action, []))

    def objects_to_delete(self, context: Any) -> list[FakeItem]:
        self.calls.append(("delete", context.action))
        return list(self.deletes.get(context.action, []))


class PlainNode:
    """A content node that does not take part in static caching."""

    def __init__(self, url_segment: str = "plain", parent_id: int = 0) -> None:
        self.url_segment = url_segment
        self.parent_id = parent_id


@pytest.fixture
def queue() -> MemoryJobQueue:
    return MemoryJobQueue()


@pytest.fixture
def budget() -> NullResourceBudget:
    return NullResourceBudget()


@pytest.fixture
def make_handler(queue: MemoryJobQueue, budget: NullResourceBudget):
    """Factory for handlers sharing the ``queue`` and ``budget`` fixtures."""

    def _make(node: Any, *, max_urls_per_job: int = 0, **kwargs: Any) -> PublishingEventHandler:
        config = StaticQueueConfig(max_urls_per_job=max_urls_per_job)
        return PublishingEventHandler(node, queue, config, budget=budget, **kwargs)

    return _make


@pytest.fixture
def tmp_root(tmp_path: Path) -> Path:
    """An empty project root for config loading tests."""
    root = tmp_path / "site"
    root.mkdir()
    return root
