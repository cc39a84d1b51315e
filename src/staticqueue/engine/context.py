"""Action context handed to change providers."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping

    from staticqueue._types import ActionName

_ACTIONS = frozenset({"publish", "unpublish"})


@dataclass(frozen=True, slots=True)
class ActionContext:
    """Immutable description of the lifecycle action being processed.

    Attributes:
        action: ``"publish"`` or ``"unpublish"``.
        extra: Additional key/value context. Opaque to the engine and
            forwarded to providers as-is.

    """

    action: ActionName
    extra: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        if self.action not in _ACTIONS:
            msg = f"action must be 'publish' or 'unpublish', got {self.action!r}"
            raise ValueError(msg)
        object.__setattr__(self, "extra", MappingProxyType(dict(self.extra)))

    @classmethod
    def publish(cls, **extra: Any) -> ActionContext:
        return cls("publish", extra)

    @classmethod
    def unpublish(cls, **extra: Any) -> ActionContext:
        return cls("unpublish", extra)

    def as_dict(self) -> dict[str, Any]:
        """Flat mapping view, ``{"action": ..., **extra}``."""
        return {**self.extra, "action": self.action}
