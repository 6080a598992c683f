from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from reuse_architect.core.domain.entities.generated_result import DiagramPoint

PALETTE = ("#06b6d4", "#8b5cf6", "#10b981", "#f59e0b")


@dataclass(frozen=True, slots=True)
class ChartSlice:
    label: str
    value: float
    percentage: float
    color: str


def proportion_slices(points: Sequence[DiagramPoint] | None) -> list[ChartSlice]:
    points = points or []
    total = sum(max(p.value, 0.0) for p in points)
    return [
        ChartSlice(
            label=p.name,
            value=p.value,
            percentage=round(max(p.value, 0.0) * 100 / total, 1) if total else 0.0,
            color=PALETTE[i % len(PALETTE)],
        )
        for i, p in enumerate(points)
    ]


def reuse_percentage(points: Sequence[DiagramPoint] | None) -> float:
    """Value of the first point labelled as reuse, 0 when the model sent none."""
    for point in points or []:
        if "Reuse" in point.name:
            return point.value
    return 0.0


def conic_gradient(slices: Sequence[ChartSlice]) -> str:
    """CSS ``conic-gradient`` stops drawing the slices as a pie."""
    if not slices:
        return "conic-gradient(#1e293b 0 100%)"
    stops = []
    start = 0.0
    for chart_slice in slices:
        end = start + chart_slice.percentage
        stops.append(f"{chart_slice.color} {start:.1f}% {end:.1f}%")
        start = end
    return f"conic-gradient({', '.join(stops)})"
