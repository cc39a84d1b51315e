"""staticqueue configuration.

StaticQueueConfig is the central configuration object, frozen after creation.
"""

from dataclasses import dataclass

from staticqueue._errors import ConfigError


@dataclass(frozen=True, slots=True)
class StaticQueueConfig:
    """Configuration for change collection and job dispatch.

    Attributes:
        max_urls_per_job: Upper bound on URLs in one update job. ``0`` puts
            every URL of an item into a single job. Never applied to delete
            jobs, which always carry all of an item's URLs.
        raise_resource_limits: Build a ``ProcessResourceBudget`` when the
            handler is not given a budget explicitly.
        memory_limit_bytes: Target for the soft address-space limit
            (``None`` = raise to the hard limit).
        time_limit_seconds: Target for the soft CPU-time limit
            (``None`` = raise to the hard limit).
        event_log_size: Ring-buffer size for the default event log.
        verbose: Print a one-line summary of each flush to stderr.

    """

    max_urls_per_job: int = 0
    raise_resource_limits: bool = True
    memory_limit_bytes: int | None = None
    time_limit_seconds: int | None = None
    event_log_size: int = 10_000
    verbose: bool = False

    def __post_init__(self) -> None:
        limit = self.max_urls_per_job
        if limit is None:
            object.__setattr__(self, "max_urls_per_job", 0)
            limit = 0
        if isinstance(limit, bool) or not isinstance(limit, int):
            msg = f"max_urls_per_job must be an integer, got {limit!r}"
            raise ConfigError(msg)
        if limit < 0:
            msg = f"max_urls_per_job must be >= 0, got {limit}"
            raise ConfigError(msg)
        if self.event_log_size < 1:
            msg = f"event_log_size must be >= 1, got {self.event_log_size}"
            raise ConfigError(msg)

    @property
    def batching_enabled(self) -> bool:
        """Whether update jobs are split into bounded batches."""
        return self.max_urls_per_job > 0
