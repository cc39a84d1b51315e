"""Job batcher — turns an item's URL set into ordered, bounded batches.

URLs are always sorted by key so identical inputs produce identical
payloads.  Update batches are split by ``max_urls_per_job``; delete
batches never are, since purging is cheap compared to rendering.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from staticqueue._types import URL, JobKind, UrlEntry
    from staticqueue.contracts import CacheableItem


@dataclass(frozen=True, slots=True)
class Batch:
    """An ordered slice of one item's URLs, the unit of work for one job.

    Attributes:
        kind: ``update`` to regenerate the URLs, ``delete`` to purge them.
        entries: ``(url, metadata)`` pairs, ascending by URL.

    """

    kind: JobKind
    entries: tuple[UrlEntry, ...]

    @property
    def urls(self) -> tuple[URL, ...]:
        return tuple(url for url, _ in self.entries)

    def as_dict(self) -> dict[URL, object]:
        """URL -> metadata, in batch order."""
        return dict(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


class JobBatcher:
    """Splits sorted URL sets into batches.

    Args:
        max_urls_per_job: Maximum URLs per update batch; ``0`` disables
            splitting.

    """

    __slots__ = ("_limit",)

    def __init__(self, max_urls_per_job: int = 0) -> None:
        if max_urls_per_job < 0:
            msg = f"max_urls_per_job must be >= 0, got {max_urls_per_job}"
            raise ValueError(msg)
        self._limit = max_urls_per_job

    @property
    def max_urls_per_job(self) -> int:
        return self._limit

    def sort_urls(self, item: CacheableItem) -> tuple[UrlEntry, ...]:
        """Fetch an item's URLs sorted ascending by key."""
        return tuple(sorted(item.urls_to_cache().items(), key=lambda entry: entry[0]))

    def update_batches(self, item: CacheableItem) -> list[Batch]:
        """Split an item's sorted URLs into consecutive update batches.

        With a positive limit this yields ``ceil(n / limit)`` batches (none
        for an item without URLs).  With no limit it yields exactly one.

        """
        entries = self.sort_urls(item)
        if self._limit == 0:
            return [Batch(kind="update", entries=entries)]
        return [
            Batch(kind="update", entries=entries[start:start + self._limit])
            for start in range(0, len(entries), self._limit)
        ]

    def delete_batch(self, item: CacheableItem) -> Batch:
        """All of an item's sorted URLs as a single delete batch."""
        return Batch(kind="delete", entries=self.sort_urls(item))
