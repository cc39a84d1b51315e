"""Tests for staticqueue.engine.dispatcher — payloads and submission order."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from staticqueue._errors import SubmissionError
from staticqueue.engine.batcher import Batch, JobBatcher
from staticqueue.engine.dispatcher import JobDispatcher, describe_batch
from staticqueue.observability.collector import PublishCollector
from staticqueue.observability.events import JobQueued
from staticqueue.queue import MemoryJobQueue

from .conftest import FakeItem


class TestLabels:
    """Payload labels list the batch URLs."""

    def test_update_label(self) -> None:
        batch = Batch(kind="update", entries=(("/a/", 1), ("/b/", 1)))
        assert describe_batch(batch) == "Building URLs: ['/a/', '/b/']"

    def test_delete_label(self) -> None:
        batch = Batch(kind="delete", entries=(("/gone/", 1),))
        assert describe_batch(batch) == "Purging URLs: ['/gone/']"

    def test_payload_exposes_batch(self) -> None:
        dispatcher = JobDispatcher(MemoryJobQueue(), JobBatcher())
        batch = Batch(kind="update", entries=(("/a/", 1),))
        payload = dispatcher.build_payload(batch)
        assert payload.kind == "update"
        assert payload.urls == ("/a/",)
        assert payload.batch is batch


class TestDispatch:
    """Jobs are submitted in item order, then batch order."""

    def test_update_order(self) -> None:
        queue = MemoryJobQueue()
        dispatcher = JobDispatcher(queue, JobBatcher(2))
        items = [FakeItem(["/z/", "/y/", "/x/"]), FakeItem(["/b/"])]

        handles = dispatcher.dispatch_updates(items)

        assert [h.payload.urls for h in handles] == [("/x/", "/y/"), ("/z/",), ("/b/",)]
        assert list(queue.handles) == handles

    def test_deletes_one_job_per_item(self) -> None:
        queue = MemoryJobQueue()
        dispatcher = JobDispatcher(queue, JobBatcher(1))
        items = [FakeItem(["/c/", "/a/", "/b/"]), FakeItem(["/d/"])]

        handles = dispatcher.dispatch_deletes(items)

        assert [h.payload.urls for h in handles] == [("/a/", "/b/", "/c/"), ("/d/",)]
        assert all(h.payload.kind == "delete" for h in handles)

    def test_submission_error_propagates(self) -> None:
        queue = MagicMock()
        queue.queue_job.side_effect = SubmissionError("down")
        dispatcher = JobDispatcher(queue, JobBatcher())

        with pytest.raises(SubmissionError, match="down"):
            dispatcher.dispatch_updates([FakeItem(["/a/"])])

    def test_records_queued_jobs(self) -> None:
        collector = PublishCollector()
        dispatcher = JobDispatcher(MemoryJobQueue(), JobBatcher(), collector)

        dispatcher.dispatch_deletes([FakeItem(["/a/", "/b/"])])

        [event] = collector.log.query(event_type=JobQueued)
        assert event.kind == "delete"
        assert event.job_id == "job-1"
        assert event.url_count == 2
        assert event.label == "Purging URLs: ['/a/', '/b/']"
