"""Tests for arc construction, arc-length queries and coordinate frames."""

import math

import pytest

from arcseekbar.core.geometry import (
    ArcConfig,
    build_arc_path,
    content_rect,
    length,
    path_ops,
    position_and_tangent_at,
    to_arc_space,
    to_screen_space,
)
from arcseekbar.core.mapper import progress_to_distance
from arcseekbar.core.math import angle_of, distance


@pytest.fixture
def config():
    return ArcConfig(open_angle=120.0, rotate_angle=90.0, bounding_rect=(20.0, 20.0, 280.0, 280.0), max_value=100)


@pytest.fixture
def path(config):
    return build_arc_path(config)


class TestArcConfig:
    @pytest.mark.parametrize("open_angle", [0.0, 360.0, -10.0, 400.0])
    def test_rejects_open_angle_out_of_range(self, open_angle):
        with pytest.raises(ValueError):
            ArcConfig(open_angle, 0.0, (0.0, 0.0, 10.0, 10.0), 100)

    def test_rejects_non_positive_max(self):
        with pytest.raises(ValueError):
            ArcConfig(120.0, 0.0, (0.0, 0.0, 10.0, 10.0), 0)

    def test_rejects_degenerate_rect(self):
        with pytest.raises(ValueError):
            ArcConfig(120.0, 0.0, (0.0, 0.0, 0.0, 10.0), 100)

    def test_rotate_angle_is_normalized(self):
        cfg = ArcConfig(120.0, 450.0, (0.0, 0.0, 10.0, 10.0), 100)
        assert cfg.rotate_angle == pytest.approx(90.0)

    def test_derived_angles(self, config):
        assert config.start_angle == 60.0
        assert config.sweep_angle == 240.0
        assert config.center == (150.0, 150.0)


class TestArcPath:
    def test_inscribed_circle(self, path):
        assert path.center == (150.0, 150.0)
        assert path.radius == pytest.approx(130.0)

    def test_length(self, path):
        assert length(path) == pytest.approx(130.0 * math.radians(240.0))

    def test_start_point(self, path):
        point, _ = position_and_tangent_at(path, 0.0)
        assert point == pytest.approx((150.0 + 130.0 * math.cos(math.radians(60.0)),
                                       150.0 + 130.0 * math.sin(math.radians(60.0))))

    def test_end_point(self, path):
        point, _ = position_and_tangent_at(path, length(path))
        assert point == pytest.approx(path.end_point)
        assert angle_of(point, path.center) == pytest.approx(300.0)

    def test_distance_is_clamped(self, path):
        before, _ = position_and_tangent_at(path, -50.0)
        after, _ = position_and_tangent_at(path, length(path) + 50.0)
        assert before == pytest.approx(path.start_point)
        assert after == pytest.approx(path.end_point)

    def test_tangent_is_unit_and_perpendicular_to_radius(self, path):
        point, (tx, ty) = position_and_tangent_at(path, length(path) / 3.0)
        assert math.hypot(tx, ty) == pytest.approx(1.0)
        rx, ry = point[0] - path.center[0], point[1] - path.center[1]
        assert rx * tx + ry * ty == pytest.approx(0.0, abs=1e-9)

    def test_positions_advance_clockwise(self, path):
        angles = []
        for i in range(11):
            point, _ = position_and_tangent_at(path, progress_to_distance(i / 10, path))
            angles.append(angle_of(point, path.center))
        # 60° -> 300° without wrapping through 0°
        assert angles == sorted(angles)
        assert angles[0] == pytest.approx(60.0)
        assert angles[-1] == pytest.approx(300.0)

    def test_rebuild_is_idempotent(self, config):
        assert build_arc_path(config) == build_arc_path(config)

    def test_non_square_rect_uses_shorter_side(self):
        cfg = ArcConfig(90.0, 0.0, (0.0, 0.0, 200.0, 100.0), 10)
        p = build_arc_path(cfg)
        assert p.radius == pytest.approx(50.0)
        assert p.center == (100.0, 50.0)


class TestProgressToDistance:
    def test_monotonic(self, path):
        distances = [progress_to_distance(i / 50, path) for i in range(51)]
        assert all(a <= b for a, b in zip(distances, distances[1:]))

    def test_endpoints(self, path):
        assert progress_to_distance(0.0, path) == 0.0
        assert progress_to_distance(1.0, path) == pytest.approx(length(path))

    def test_clamps_fraction(self, path):
        assert progress_to_distance(-0.5, path) == 0.0
        assert progress_to_distance(1.5, path) == pytest.approx(length(path))


class TestPathOps:
    def test_starts_with_move_and_ends_at_end_point(self, path):
        ops = path_ops(path)
        assert ops[0] == ("M", path.start_point)
        assert all(op == "C" for op, _ in ops[1:])
        assert ops[-1][1][2] == pytest.approx(path.end_point)

    def test_segments_at_most_quarter_turn(self, path):
        # 240° sweep -> three 80° segments
        assert len(path_ops(path)) == 4

    def test_control_points_stay_near_circle(self, path):
        for _, (c1, c2, _p) in path_ops(path)[1:]:
            for c in (c1, c2):
                assert distance(c, path.center) > path.radius


class TestFrames:
    def test_round_trip(self, config):
        p = (42.0, 77.0)
        assert to_screen_space(to_arc_space(p, config), config) == pytest.approx(p)

    def test_arc_start_is_bottom_left_on_screen(self, config, path):
        x, y = to_screen_space(path.start_point, config)
        assert x < 150.0
        assert y > 150.0


class TestContentRect:
    def test_square_view(self):
        assert content_rect(300, 300, arc_width=40.0) == pytest.approx((20.0, 20.0, 280.0, 280.0))

    def test_wide_view_centers_horizontally(self):
        left, top, right, bottom = content_rect(400, 200)
        assert (left, top, right, bottom) == pytest.approx((100.0, 0.0, 300.0, 200.0))

    def test_tall_view_centers_vertically(self):
        left, top, right, bottom = content_rect(200, 400)
        assert (left, top, right, bottom) == pytest.approx((0.0, 100.0, 200.0, 300.0))

    def test_padding_and_insets(self):
        rect = content_rect(300, 300, (10, 10, 10, 10), arc_width=20.0, border_width=2.0, shadow_radius=4.0)
        # fix = 10 + 2 + 8 = 20
        assert rect == pytest.approx((30.0, 30.0, 270.0, 270.0))

    def test_too_small(self):
        with pytest.raises(ValueError):
            content_rect(30, 30, arc_width=40.0)
