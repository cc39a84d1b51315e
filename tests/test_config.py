"""Tests for staticqueue.config."""

import pytest

from staticqueue._errors import ConfigError
from staticqueue.config import StaticQueueConfig


class TestStaticQueueConfig:
    """StaticQueueConfig — frozen dataclass with sensible defaults."""

    def test_defaults(self) -> None:
        config = StaticQueueConfig()
        assert config.max_urls_per_job == 0
        assert config.raise_resource_limits is True
        assert config.memory_limit_bytes is None
        assert config.time_limit_seconds is None
        assert config.event_log_size == 10_000
        assert config.verbose is False

    def test_frozen(self) -> None:
        config = StaticQueueConfig()
        with pytest.raises(AttributeError):
            config.max_urls_per_job = 5  # type: ignore[misc]

    def test_batching_enabled(self) -> None:
        assert StaticQueueConfig().batching_enabled is False
        assert StaticQueueConfig(max_urls_per_job=10).batching_enabled is True

    def test_none_limit_means_unbounded(self) -> None:
        config = StaticQueueConfig(max_urls_per_job=None)  # type: ignore[arg-type]
        assert config.max_urls_per_job == 0

    def test_negative_limit_rejected(self) -> None:
        with pytest.raises(ConfigError, match=">= 0"):
            StaticQueueConfig(max_urls_per_job=-1)

    @pytest.mark.parametrize("value", ["10", 2.5, True])
    def test_non_integer_limit_rejected(self, value: object) -> None:
        with pytest.raises(ConfigError, match="integer"):
            StaticQueueConfig(max_urls_per_job=value)  # type: ignore[arg-type]

    def test_event_log_size_must_be_positive(self) -> None:
        with pytest.raises(ConfigError, match="event_log_size"):
            StaticQueueConfig(event_log_size=0)
