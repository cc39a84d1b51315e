"""Shared type definitions for staticqueue."""

from collections.abc import Mapping
from typing import Any, Literal

# Lifecycle action passed to change providers
type ActionName = Literal["publish", "unpublish"]

# Kind of job handed to the queue
type JobKind = Literal["update", "delete"]

# Cached artifact address (e.g., "/about/", "https://example.com/news/")
type URL = str

# URL -> opaque metadata, as reported by a cacheable item
type UrlMap = Mapping[URL, Any]

# One sorted (url, metadata) pair inside a batch
type UrlEntry = tuple[URL, Any]

# Pending-state lifecycle of a collector
type PendingState = Literal["idle", "collected"]
