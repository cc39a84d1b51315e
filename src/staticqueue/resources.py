"""Resource budgets — raise process ceilings before long collections.

Computing the affected URLs of a node can walk a large part of the content
tree.  Before each collection pass the engine calls ``budget.request()`` so
the surrounding process does not hit its soft memory or CPU limits midway.

``ProcessResourceBudget`` adjusts the soft ``RLIMIT_AS`` and ``RLIMIT_CPU``
limits through the ``resource`` module.  Limits are only ever raised and
never beyond the hard limit.  On platforms without ``resource`` (Windows)
requests are no-ops.
"""

from __future__ import annotations

import sys

from staticqueue._errors import ResourceBudgetError

if sys.platform != "win32":
    import resource
else:  # pragma: no cover
    resource = None


class NullResourceBudget:
    """Budget that never touches the process.  Counts requests."""

    __slots__ = ("requests",)

    def __init__(self) -> None:
        self.requests = 0

    def request(self) -> None:
        self.requests += 1


class ProcessResourceBudget:
    """Raises soft memory and CPU-time limits of the current process.

    Args:
        memory_limit_bytes: Target soft ``RLIMIT_AS`` (``None`` = hard limit).
        time_limit_seconds: Target soft ``RLIMIT_CPU`` (``None`` = hard limit).
        strict: Raise ``ResourceBudgetError`` when a limit cannot be changed
            instead of reporting it on stderr.

    """

    __slots__ = ("_memory", "_strict", "_time")

    def __init__(
        self,
        memory_limit_bytes: int | None = None,
        time_limit_seconds: int | None = None,
        *,
        strict: bool = False,
    ) -> None:
        self._memory = memory_limit_bytes
        self._time = time_limit_seconds
        self._strict = strict

    @property
    def supported(self) -> bool:
        """Whether this platform exposes process resource limits."""
        return resource is not None

    def request(self) -> None:
        """Raise the soft limits toward their targets."""
        if resource is None:
            return
        self._raise(resource.RLIMIT_AS, self._memory, "memory")
        self._raise(resource.RLIMIT_CPU, self._time, "time")

    def _raise(self, which: int, target: int | None, name: str) -> None:
        soft, hard = resource.getrlimit(which)
        wanted = _clamp(target, hard)
        if not _is_higher(wanted, soft):
            return
        try:
            resource.setrlimit(which, (wanted, hard))
        except (ValueError, OSError) as exc:
            if self._strict:
                msg = f"Could not raise {name} limit to {wanted}: {exc}"
                raise ResourceBudgetError(msg) from exc
            print(f"  Resource limit: could not raise {name} limit: {exc}", file=sys.stderr)


def _clamp(target: int | None, hard: int) -> int:
    """Cap a target at the hard limit.  ``None`` means the hard limit itself."""
    if target is None:
        return hard
    if hard == resource.RLIM_INFINITY:
        return target
    return min(target, hard)


def _is_higher(wanted: int, soft: int) -> bool:
    if soft == resource.RLIM_INFINITY:
        return False
    if wanted == resource.RLIM_INFINITY:
        return True
    return wanted > soft
