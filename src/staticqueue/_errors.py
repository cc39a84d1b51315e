"""staticqueue error hierarchy.

All staticqueue-specific errors inherit from StaticQueueError for easy catching.
Provider failures are not wrapped; they reach the lifecycle caller unchanged.
"""


class StaticQueueError(Exception):
    """Base error for all staticqueue operations."""


class ConfigError(StaticQueueError):
    """Invalid or missing configuration."""


class SubmissionError(StaticQueueError):
    """A job queue refused to accept a job."""


class ResourceBudgetError(StaticQueueError):
    """Process limits could not be raised before a collection pass."""
