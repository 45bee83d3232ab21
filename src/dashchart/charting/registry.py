"""Chart kind registry.

Maps each ``ChartKind`` to the trio of functions that implement it: a
geometry builder, a renderer and a hit-tester. Kind modules (``bar``,
``line``, ``pie``) register themselves at import; dispatch is a dictionary
lookup on the enum, never a string comparison.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Protocol

from .types import ChartConfig, ChartKind, GeometryTable, Scene, Series

__all__ = [
    "GeometryBuilder",
    "Renderer",
    "HitTester",
    "KindHandlers",
    "ChartKindRegistry",
    "chart_kinds",
    "register_chart_kind",
]

GeometryBuilder = Callable[[Series, ChartConfig, ChartKind], GeometryTable]


class Renderer(Protocol):  # pragma: no cover - structural only
    def __call__(
        self,
        table: GeometryTable,
        series: Series,
        config: ChartConfig,
        hovered_index: Optional[int],
    ) -> Scene: ...


HitTester = Callable[[float, float, GeometryTable], Optional[int]]


@dataclass(frozen=True)
class KindHandlers:
    """Functions implementing one chart kind."""

    kind: ChartKind
    geometry: GeometryBuilder
    renderer: Renderer
    hit_tester: HitTester
    description: str


class ChartKindRegistry:
    def __init__(self) -> None:
        self._kinds: Dict[ChartKind, KindHandlers] = {}

    def register(
        self,
        kind: ChartKind,
        *,
        geometry: GeometryBuilder,
        renderer: Renderer,
        hit_tester: HitTester,
        description: str,
    ) -> None:
        if kind in self._kinds:
            raise ValueError(f"Chart kind already registered: {kind.value}")
        self._kinds[kind] = KindHandlers(kind, geometry, renderer, hit_tester, description)

    def get(self, kind: ChartKind) -> KindHandlers:
        handlers = self._kinds.get(kind)
        if handlers is None:
            raise KeyError(f"Unknown chart kind: {kind}")
        return handlers

    def list_kinds(self) -> Dict[str, str]:
        return {k.value: v.description for k, v in self._kinds.items()}

    def missing_kinds(self) -> List[ChartKind]:
        return [k for k in ChartKind if k not in self._kinds]


chart_kinds = ChartKindRegistry()


def register_chart_kind(
    kinds: tuple[ChartKind, ...],
    *,
    geometry: GeometryBuilder,
    renderer: Renderer,
    hit_tester: HitTester,
    description: str,
) -> None:
    """Register one implementation for every kind in ``kinds``."""
    for kind in kinds:
        chart_kinds.register(
            kind,
            geometry=geometry,
            renderer=renderer,
            hit_tester=hit_tester,
            description=description,
        )
