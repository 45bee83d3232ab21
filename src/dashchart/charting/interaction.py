"""Pointer interaction state.

``InteractionState`` is a value; pointer events produce a new state through
the pure transition functions below instead of mutating fields on a widget.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Tuple

from .tooltip import TooltipPlacement, position_tooltip

__all__ = ["InteractionState", "pointer_moved", "pointer_left", "cleared"]


@dataclass(frozen=True)
class InteractionState:
    hovered_index: Optional[int] = None
    tooltip: Optional[TooltipPlacement] = None
    zoom: float = 1.0

    @property
    def is_hovering(self) -> bool:
        return self.hovered_index is not None


def pointer_moved(
    state: InteractionState,
    index: Optional[int],
    pointer: Tuple[float, float],
    tooltip_size: Tuple[float, float],
    viewport: Tuple[float, float],
) -> InteractionState:
    """Apply a hit-test result.

    A miss (``None``) keeps the current hover, matching pointer travel over
    gaps between elements. An unchanged index returns ``state`` itself.
    """
    if index is None or index == state.hovered_index:
        return state
    placement = position_tooltip(state.tooltip, index, pointer, tooltip_size, viewport)
    return replace(state, hovered_index=index, tooltip=placement)


def pointer_left(state: InteractionState) -> InteractionState:
    if state.hovered_index is None and state.tooltip is None:
        return state
    return replace(state, hovered_index=None, tooltip=None)


def cleared() -> InteractionState:
    return InteractionState()
