"""Tests for the progress ring geometry."""

import math

import pytest

from ring_timer import geometry
from ring_timer.geometry import render, qt_arc_angles

PROGRESS_SAMPLES = [0.0, 0.1, 0.25, 0.5, 0.75, 0.8, 0.99, 1.0]


class TestAngles:
    @pytest.mark.parametrize("p", PROGRESS_SAMPLES)
    def test_dot_angle(self, p) -> None:
        assert render(p).dot_angle == pytest.approx((270 - 360 * p) % 360)

    @pytest.mark.parametrize("p", PROGRESS_SAMPLES)
    def test_arc_sweep(self, p) -> None:
        expected = math.fmod(270 - 360 * p, 360) - 270
        assert render(p).arc_sweep == pytest.approx(expected)
        assert render(p).arc_sweep == pytest.approx(-360 * p)

    def test_start_is_top_with_no_sweep(self) -> None:
        plan = render(0.0)
        assert plan.dot_angle == 270
        assert plan.arc_sweep == 0
        assert plan.progress_arc.start_angle == 270

    def test_full_progress_wraps_dot_and_sweeps_full_circle(self) -> None:
        plan = render(1.0)
        assert plan.dot_angle == pytest.approx(270)
        assert plan.arc_sweep == pytest.approx(-360)

    def test_out_of_range_progress_is_clamped(self) -> None:
        assert render(-0.5).arc_sweep == render(0.0).arc_sweep
        assert render(1.5).arc_sweep == pytest.approx(render(1.0).arc_sweep)


class TestLayout:
    def test_radius_uses_smaller_side(self) -> None:
        plan = render(0.0, width=300, height=200)
        assert plan.background_ring.center == (150, 100)
        assert plan.background_ring.radius == 100

    def test_inset_shrinks_radius(self) -> None:
        plan = render(0.0, width=200, height=200, inset=8)
        assert plan.inner_ring.radius == 92
        assert plan.progress_arc.radius == 92

    def test_dot_sits_at_top_on_ring(self) -> None:
        plan = render(0.0, width=200, height=200)
        x, y = plan.dot.center
        assert x == pytest.approx(100)
        assert y == pytest.approx(0)

    def test_dot_at_quarter_progress_is_on_the_left(self) -> None:
        # 270 - 90 = 180 degrees: 9 o'clock
        x, y = render(0.25, width=200, height=200).dot.center
        assert x == pytest.approx(0)
        assert y == pytest.approx(100)

    def test_normalized_default_surface(self) -> None:
        plan = render(0.5)
        assert plan.background_ring.center == (0.5, 0.5)
        assert plan.background_ring.radius == 0.5


class TestPrimitives:
    def test_strokes_and_roles(self) -> None:
        plan = render(0.3)
        assert plan.background_ring.role == geometry.BACKGROUND
        assert plan.inner_ring.role == geometry.INNER
        assert plan.progress_arc.role == geometry.ACCENT
        assert plan.dot.role == geometry.ACCENT
        assert plan.inner_ring.stroke_width < plan.background_ring.stroke_width
        assert plan.dot.filled
        assert not plan.background_ring.filled

    def test_paint_order(self) -> None:
        plan = render(0.3)
        assert plan.primitives() == (
            plan.background_ring, plan.inner_ring, plan.progress_arc, plan.dot,
        )


class TestQtArcAngles:
    def test_start_at_top(self) -> None:
        start, span = qt_arc_angles(render(0.0).progress_arc)
        assert start == -270 * 16
        assert span == 0

    def test_half_progress(self) -> None:
        _, span = qt_arc_angles(render(0.5).progress_arc)
        assert span == 180 * 16
