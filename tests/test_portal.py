import logging
import math

import pytest

from portalmask import (
    OCCLUDER,
    SEE_THROUGH,
    STRUCTURAL,
    PortalGeometry,
    PortalState,
    ProfileKind,
    UnsupportedOperation,
)
from portalmask.config import FALLBACK_DEPTH
from portalmask.geom3d import issolidclosed, solidbbox, volumeof
from portalmask.mesh import render_batches


def inner_corners(portal, index):
    return sorted((p[0], p[1]) for p in portal.outline.rings[index])


class TestFrame:

    def setup_method(self):
        self.portal = PortalGeometry.frame((2.0, 1.0))

    def test_state(self):
        p = self.portal
        assert p.kind is ProfileKind.RECTANGLE
        assert p.state is PortalState.CONSTRUCTED
        assert p.depth == 4.0
        assert p.outer_scale == 3.0
        assert p.z_offset == pytest.approx(-1.9997)
        assert p.intents == [OCCLUDER, STRUCTURAL, SEE_THROUGH]

    def test_hole_size(self):
        hw, hh = 2.0 / 1.975, 1.0 / 1.975
        assert inner_corners(self.portal, 1) == [(-hw, -hh), (-hw, hh), (hw, -hh), (hw, hh)]

    def test_solid(self):
        sld = self.portal.solid
        assert issolidclosed(sld)
        inner_area = (2.0 / 1.975) * (1.0 / 1.975) * 4.0
        assert volumeof(sld) == pytest.approx((144.0 - inner_area) * 4.0)
        assert sld[2] == self.portal.intents

    def test_placed_front_cap(self):
        placed = self.portal.placement().placed_solid()
        box = solidbbox(placed)
        assert box[1][2] == pytest.approx(0.0003)
        assert box[0][2] == pytest.approx(-4.0 + 0.0003)
        # the unplaced solid is untouched
        assert solidbbox(self.portal.solid)[1][2] == pytest.approx(2.0)


@pytest.mark.parametrize('portal, depth', [
    (lambda: PortalGeometry.frame((2.0, 1.0)), 4.0),
    (lambda: PortalGeometry.polygon(1.0), 4.0),
    (lambda: PortalGeometry.arc(1.0), 4.0),
    (lambda: PortalGeometry.tube(1.0), 2.0),
    (lambda: PortalGeometry.path([(0, 0), (1, 0), (1, 1), (0, 1)]), 2.0),
    (lambda: PortalGeometry.frame((1.0, 1.0), depth=0.25), 0.25),
])
def test_z_offset(portal, depth):
    p = portal()
    assert p.depth == depth
    assert p.z_offset == -depth / 2.0 + 0.0003
    assert p.placement().transform.translation[2] == p.z_offset


def test_polygon():
    p = PortalGeometry.polygon(1.0, subdivisions=2)
    ring = p.outline.rings[0]
    assert len(ring) == 4
    assert ring[0][:2] == [1.0, 0.0]
    assert p.outline.bounds() == (12.0, 12.0)
    assert issolidclosed(p.solid)


def test_arc():
    p = PortalGeometry.arc(1.0)
    assert p.outline.flatness == pytest.approx(0.005)
    assert p.outer_scale == 5.0
    # the hole is the 32-gon sampled from the circle
    hole = 2.0 * 32 * math.sin(math.pi / 32) * math.cos(math.pi / 32) / 2.0
    assert p.solid[1][0][5]
    assert volumeof(p.solid) == pytest.approx((100.0 - hole) * 4.0)


class TestTube:

    def setup_method(self):
        self.portal = PortalGeometry.tube(1.0)

    def test_layout(self):
        p = self.portal
        assert p.kind is ProfileKind.TUBE
        assert len(p.outline) == 0
        assert len(p.solid[1]) == 2
        assert p.intents == [OCCLUDER, SEE_THROUGH]
        assert p.depth == 2.0

    def test_cannot_reshape(self):
        with pytest.raises(UnsupportedOperation):
            self.portal.update_geometry([(0, 0), (1, 0), (1, 1)])
        assert self.portal.state is PortalState.CONSTRUCTED


class TestPath:

    def setup_method(self):
        self.portal = PortalGeometry.path([(0, 0), (1, 0), (1, 1), (0, 1)])

    def test_construct(self):
        p = self.portal
        assert p.depth == 2.0
        assert p.outline.bounds() == (6.0, 6.0)
        assert issolidclosed(p.solid)

    def test_reshape(self):
        p = self.portal
        placement = p.placement()
        before = p.solid
        offset, intents = p.z_offset, p.intents

        p.update_geometry([(0, 0), (2, 0), (2, 1), (0, 1)])

        assert p.state is PortalState.RESHAPED
        assert p.placement() is placement
        assert p.solid is not before
        assert p.depth == 2.0
        assert p.outer_scale == 3.0
        assert p.z_offset == offset
        assert p.intents == intents
        assert p.outline.bounds() == (12.0, 6.0)
        assert solidbbox(p.solid)[1][2] == pytest.approx(1.0)

    def test_reshape_twice(self):
        p = self.portal
        p.update_geometry([(0, 0), (2, 0), (2, 2), (0, 2)])
        p.update_geometry([(0, 0), (1, 0), (1, 1)])
        assert len(p.outline) == 2
        assert p.outline.bounds() == (6.0, 6.0)
        assert p.depth == 2.0
        assert p.state is PortalState.RESHAPED

    def test_empty_path_does_not_crash(self):
        p = PortalGeometry.path([])
        assert p.depth == FALLBACK_DEPTH
        assert p.z_offset == -FALLBACK_DEPTH / 2.0 + 0.0003
        assert len(p.solid[1]) == 3
        assert all(not s[1] for s in p.solid[1])

    def test_empty_path_can_be_reshaped(self, unit_square):
        p = PortalGeometry.path([])
        p.update_geometry(unit_square)
        assert p.state is PortalState.RESHAPED
        assert p.depth == FALLBACK_DEPTH
        assert p.outline.bounds() == (6.0, 6.0)
        assert issolidclosed(p.solid)

    @pytest.mark.parametrize('points', [
        [],
        [(0.5, 0.5)],
        [(0.0, 0.0), (1.0, 0.0), (2.0, 0.0)],
    ])
    def test_reshape_with_degenerate_points(self, points):
        p = self.portal
        placement = p.placement()
        depth, scale, offset, intents = p.depth, p.outer_scale, p.z_offset, p.intents

        p.update_geometry(points)

        assert p.state is PortalState.RESHAPED
        assert p.placement() is placement
        assert p.depth == depth
        assert p.outer_scale == scale
        assert p.z_offset == offset
        assert p.intents == intents
        assert len(p.solid[1]) == 3
        assert all(not s[1] for s in p.solid[1])

    def test_failed_reshape_leaves_portal_untouched(self, monkeypatch):
        p = self.portal
        outline, sld = p.outline, p.solid
        rings = outline.rings

        def broken(path, depth):
            raise ValueError('extrusion failed')

        monkeypatch.setattr('portalmask.portal.extrude_outline', broken)
        with pytest.raises(ValueError):
            p.update_geometry([(0, 0), (2, 0), (2, 1), (0, 1)])

        assert p.outline is outline
        assert p.outline.rings == rings
        assert p.solid is sld
        assert p.state is PortalState.CONSTRUCTED

    def test_overlapping_offcenter_path(self, caplog):
        # the hole's bounding box holds the outer frame's first corner
        with caplog.at_level(logging.WARNING, logger='portalmask'):
            p = PortalGeometry.path([(-2.6, -2.6), (-2.6, -3.6), (-3.6, -3.6), (-3.6, -2.6)])
        assert p.depth == pytest.approx(2.0)
        assert len(p.solid[1]) == 3
        assert p.solid[1][0][1]
        assert 'overlaps' in caplog.text

    def test_frame_can_reshape(self):
        p = PortalGeometry.frame((1.0, 1.0))
        p.update_geometry([(0, 0), (1, 0), (1, 1), (0, 1)])
        assert p.kind is ProfileKind.RECTANGLE
        assert p.depth == 2.0
        assert p.outline.bounds() == (6.0, 6.0)


def test_attach(node):
    p = PortalGeometry.frame((2.0, 1.0))
    placement = p.attach(node)
    assert node.children == [placement]
    p.update_geometry([(0, 0), (1, 0), (1, 1), (0, 1)])
    assert node.children[0].solid is p.solid


def test_render_batches_follow_intents():
    frame = render_batches(PortalGeometry.frame((2.0, 1.0)).placement())
    assert [intent for intent, _ in frame] == [OCCLUDER, STRUCTURAL, SEE_THROUGH]
    assert all(tris for _, tris in frame)

    tube = render_batches(PortalGeometry.tube(1.0, subdivisions=3).placement())
    assert [intent for intent, _ in tube] == [OCCLUDER, SEE_THROUGH]
    assert len(tube[0][1]) == 16


def test_from_encoded():
    with pytest.raises(UnsupportedOperation):
        PortalGeometry.from_encoded({'kind': 'rectangle'})
    with pytest.raises(NotImplementedError):
        PortalGeometry.from_encoded(None)
