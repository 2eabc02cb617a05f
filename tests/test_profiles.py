import logging
import math

import pytest

from portalmask.config import (
    DEFAULTS,
    FALLBACK_DEPTH,
    INNER_DIVISOR,
    ProfileKind,
    segment_count,
    z_offset,
)
from portalmask.geom import iscircle
from portalmask.profiles import (
    build,
    build_arc,
    build_frame,
    build_path,
    build_polygon,
    build_tube,
    polygon_points,
)


def corners(ring):
    return sorted((p[0], p[1]) for p in ring)


class TestDefaults:

    def test_table(self):
        assert DEFAULTS[ProfileKind.RECTANGLE].outer_mult == 3
        assert DEFAULTS[ProfileKind.POLYGON].subdivisions == 7
        assert DEFAULTS[ProfileKind.ARC].flatness == 0.005
        assert DEFAULTS[ProfileKind.TUBE].depth_factor == 2
        assert DEFAULTS[ProfileKind.PATH].flatness == 0.6

    @pytest.mark.parametrize('subdivisions, count', [(7, 128), (2, 4), (1, 4), (0, 4), (-3, 4), (3, 8)])
    def test_segment_count(self, subdivisions, count):
        assert segment_count(subdivisions) == count

    @pytest.mark.parametrize('depth', [4.0, 2.0, 0.5, 10.0])
    def test_z_offset(self, depth):
        assert z_offset(depth) == -depth / 2.0 + 0.0003


class TestFrame:

    def test_rings(self):
        profile = build_frame((2.0, 1.0))
        outer, inner = profile.outline.rings
        assert corners(outer) == [(-6.0, -6.0), (-6.0, 6.0), (6.0, -6.0), (6.0, 6.0)]
        hw, hh = 2.0 / INNER_DIVISOR, 1.0 / INNER_DIVISOR
        assert corners(inner) == [(-hw, -hh), (-hw, hh), (hw, -hh), (hw, hh)]

    def test_depth_and_scale(self):
        profile = build_frame((2.0, 1.0))
        assert profile.kind is ProfileKind.RECTANGLE
        assert profile.depth == 4.0
        assert profile.outer_scale == 3.0
        assert profile.tube is None

    def test_explicit_depth(self):
        assert build_frame((2.0, 1.0), depth=0.5).depth == 0.5

    def test_outer_mult_floor(self):
        profile = build_frame((2.0, 2.0), outer_mult=0.2)
        assert profile.outer_scale == 1.0
        assert profile.outline.bounds() == (4.0, 4.0)

    @pytest.mark.parametrize('size', [(0.0, 0.0), (-1.0, -2.0)])
    def test_bad_size(self, size):
        with pytest.raises(ValueError):
            build_frame(size)

    def test_bad_depth(self):
        with pytest.raises(ValueError):
            build_frame((1.0, 1.0), depth=0.0)


class TestPolygon:

    def test_points(self):
        pts = polygon_points(1.0, 2)
        expected = [(1.0, 0.0), (0.0, 1.0), (-1.0, 0.0), (0.0, -1.0)]
        for p, q in zip(pts, expected):
            assert p[0] == pytest.approx(q[0], abs=1e-12)
            assert p[1] == pytest.approx(q[1], abs=1e-12)

    def test_defaults(self):
        profile = build_polygon(1.0)
        inner, outer = profile.outline.rings
        assert len(inner) == 128
        assert corners(outer)[0] == (-6.0, -6.0)
        assert profile.depth == 4.0
        assert profile.outer_scale == 6.0

    def test_subdivisions_clamped(self):
        inner = build_polygon(1.0, subdivisions=1).outline.rings[0]
        assert len(inner) == 4

    def test_radius_must_be_positive(self):
        with pytest.raises(ValueError):
            build_polygon(0.0)


class TestArc:

    def test_defaults(self):
        profile = build_arc(2.0)
        assert profile.outline.flatness == pytest.approx(0.01)
        circle, outer = profile.outline.rings
        assert iscircle(circle)
        assert corners(outer)[-1] == (10.0, 10.0)
        assert profile.depth == 8.0
        assert profile.outer_scale == 5.0

    def test_sampling(self):
        loops = build_arc(1.0).outline.tessellate()
        assert len(loops[0]) == 32
        for p in loops[0]:
            assert math.hypot(p[0], p[1]) == pytest.approx(1.0)

    def test_flatness_ceiling(self, caplog):
        with caplog.at_level(logging.INFO, logger='portalmask'):
            build_arc(1.0, flatness=0.1)
        assert 'recommended ceiling' in caplog.text

    def test_bad_flatness(self):
        with pytest.raises(ValueError):
            build_arc(1.0, flatness=0.0)


class TestTube:

    def test_radii_and_segments(self):
        profile = build_tube(1.0)
        assert profile.outline is None
        assert profile.tube.inner_radius == 1.0 / INNER_DIVISOR
        assert profile.tube.outer_radius == 5.0
        assert profile.tube.segments == 128
        assert profile.depth == 2.0

    def test_subdivisions(self):
        assert build_tube(1.0, subdivisions=3).tube.segments == 8


class TestPath:

    def test_unit_square(self, unit_square):
        profile = build_path(unit_square)
        inner, outer = profile.outline.rings
        assert len(inner) == 4
        assert corners(outer) == [(-3.0, -3.0), (-3.0, 3.0), (3.0, -3.0), (3.0, 3.0)]
        assert profile.depth == 2.0
        assert profile.outer_scale == 3.0
        assert profile.outline.flatness == pytest.approx(0.6)

    def test_wide_path(self):
        profile = build_path([(0, 0), (4, 0), (4, 1), (0, 1)], depth=1.0, outer_mult=2)
        outer = profile.outline.rings[1]
        assert corners(outer)[0] == (-8.0, -2.0)
        assert profile.depth == 1.0

    def test_empty_path(self, caplog):
        with caplog.at_level(logging.WARNING, logger='portalmask'):
            profile = build_path([])
        assert profile.depth == FALLBACK_DEPTH
        assert len(profile.outline) == 0
        assert profile.outline.bounds() == (0.0, 0.0)
        assert 'falling back' in caplog.text

    def test_single_point_path(self):
        profile = build_path([(2.0, 3.0)])
        assert profile.depth == FALLBACK_DEPTH
        assert len(profile.outline) == 0

    def test_explicit_depth_on_empty_path(self):
        assert build_path([], depth=0.5).depth == 0.5


class TestDispatch:

    def test_by_kind(self):
        assert build(ProfileKind.TUBE, 1.0).kind is ProfileKind.TUBE
        assert build('rectangle', (1.0, 1.0)).kind is ProfileKind.RECTANGLE

    def test_unknown(self):
        with pytest.raises(ValueError):
            build('hexagon', 1.0)
