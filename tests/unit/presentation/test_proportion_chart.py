from reuse_architect.core.domain.entities.generated_result import DiagramPoint
from reuse_architect.presentation.proportion_chart import (
    PALETTE,
    conic_gradient,
    proportion_slices,
    reuse_percentage,
)


def test_slices_share_the_whole_and_cycle_palette():
    points = [DiagramPoint(name=f"p{i}", value=v) for i, v in enumerate([1, 1, 1, 1, 4])]

    slices = proportion_slices(points)

    assert [s.percentage for s in slices] == [12.5, 12.5, 12.5, 12.5, 50.0]
    assert [s.color for s in slices] == [*PALETTE, PALETTE[0]]


def test_zero_total_gives_zero_percentages():
    slices = proportion_slices([DiagramPoint(name="Reuse", value=0)])

    assert slices[0].percentage == 0.0


def test_reuse_percentage_reads_first_reuse_point():
    points = [
        DiagramPoint(name="New Code", value=30),
        DiagramPoint(name="Code Reuse", value=70),
        DiagramPoint(name="Reuse Libs", value=5),
    ]

    assert reuse_percentage(points) == 70


def test_reuse_percentage_defaults_to_zero():
    assert reuse_percentage([DiagramPoint(name="New Code", value=100)]) == 0.0
    assert reuse_percentage(None) == 0.0


def test_conic_gradient_stops():
    slices = proportion_slices([DiagramPoint(name="Reuse", value=70), DiagramPoint(name="New", value=30)])

    assert conic_gradient(slices) == "conic-gradient(#06b6d4 0.0% 70.0%, #8b5cf6 70.0% 100.0%)"
    assert conic_gradient([]).startswith("conic-gradient(")
