"""Drill-down navigation stack.

The bottom level is the host-supplied root series; each drill-down pushes
the selected point's children. ``pop`` walks back up one level and never
removes the root, so a host that only wants single-level behavior can simply
never call it (or call ``reset`` with fresh root data).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from .types import DataPoint, Series

__all__ = ["DrillLevel", "DrillDownNavigator"]


@dataclass(frozen=True)
class DrillLevel:
    series: Series
    label: Optional[str] = None  # label of the point drilled into; None for root
    parent_index: Optional[int] = None


class DrillDownNavigator:
    def __init__(self, root: Series, root_label: str = "All") -> None:
        self._root_label = root_label
        self._stack: List[DrillLevel] = [DrillLevel(tuple(root))]

    @property
    def current(self) -> Series:
        return self._stack[-1].series

    @property
    def root(self) -> Series:
        return self._stack[0].series

    @property
    def depth(self) -> int:
        return len(self._stack) - 1

    @property
    def is_root(self) -> bool:
        return len(self._stack) == 1

    def can_drill(self, point: DataPoint) -> bool:
        return point.has_children

    def push(self, point: DataPoint, index: Optional[int] = None) -> bool:
        if not point.has_children:
            return False
        self._stack.append(DrillLevel(tuple(point.drill_down_children), point.label, index))
        return True

    def pop(self) -> bool:
        if self.is_root:
            return False
        self._stack.pop()
        return True

    def reset(self, root: Series) -> None:
        self._stack = [DrillLevel(tuple(root))]

    def trail(self) -> List[str]:
        """Breadcrumb labels from the root to the current level."""
        return [self._root_label] + [lvl.label or "" for lvl in self._stack[1:]]

    def breadcrumb(self, separator: str = " / ") -> str:
        return separator.join(self.trail())
