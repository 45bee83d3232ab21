"""Motion preference for chart transition hints.

Every drawable a renderer emits carries ``transition_ms``, the time a
painter may take to ease hover feedback in. ``transition_hint`` is the only
place that number is produced: with reduced motion preferred it is always
0, so highlight changes are applied on the next paint with no easing.

The preference is process-wide. ``DASHCHART_PREFER_REDUCED_MOTION`` set to
1/true/yes/on turns it on when this module is first imported; hosts that
follow an OS accessibility setting call ``prefer_reduced_motion`` instead.
"""

from __future__ import annotations

import contextlib
import os
from typing import Iterator

from .. import settings

__all__ = [
    "prefer_reduced_motion",
    "prefers_reduced_motion",
    "transition_hint",
    "motion_preference",
]

_TRUTHY = frozenset({"1", "true", "yes", "on"})

_reduced: bool = os.getenv("DASHCHART_PREFER_REDUCED_MOTION", "").strip().lower() in _TRUTHY


def prefer_reduced_motion(enabled: bool = True) -> None:
    global _reduced
    _reduced = bool(enabled)


def prefers_reduced_motion() -> bool:
    return _reduced


def transition_hint(base_ms: int = settings.TRANSITION_MS) -> int:
    """Easing time for a hover change; 0 under reduced motion or for negative input."""
    if _reduced:
        return 0
    return max(0, int(base_ms))


@contextlib.contextmanager
def motion_preference(reduced: bool) -> Iterator[None]:
    """Apply ``reduced`` for the duration of the block, then restore."""
    saved = _reduced
    prefer_reduced_motion(reduced)
    try:
        yield
    finally:
        prefer_reduced_motion(saved)
