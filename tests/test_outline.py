import logging

import pytest

from portalmask.errors import DegenerateInput
from portalmask.geom import iscircle, point
from portalmask.outline import DEFAULT_FLATNESS, OutlinePath


def test_new_path_is_empty_and_evenodd():
    path = OutlinePath()
    assert len(path) == 0
    assert path.usesEvenOddFillRule
    assert path.flatness == DEFAULT_FLATNESS
    assert path.bbox() is None
    assert path.bounds() == (0.0, 0.0)


def test_add_ring_keeps_order_and_points(unit_square):
    path = OutlinePath()
    assert path.add_ring(unit_square)
    ring = path.rings[0]
    assert len(ring) == 4
    assert ring[0] == point(0.0, 0.0)
    assert ring[2] == point(1.0, 1.0)


def test_explicit_closing_point_is_dropped(unit_square):
    path = OutlinePath()
    path.add_ring(unit_square + [unit_square[0]])
    assert len(path.rings[0]) == 4


def test_repeated_points_are_dropped():
    path = OutlinePath()
    path.add_ring([(0, 0), (1, 0), (1, 0), (1, 1)])
    assert len(path.rings[0]) == 3


def test_rings_are_copies(unit_square):
    path = OutlinePath()
    path.add_ring(unit_square)
    path.rings[0][0][0] = 99
    assert path.rings[0][0][0] == 0.0


@pytest.mark.parametrize('points', [[], [(1.0, 2.0)], [(1.0, 2.0), (1.0, 2.0)]])
def test_degenerate_ring_is_noop(points, caplog):
    path = OutlinePath()
    with caplog.at_level(logging.WARNING, logger='portalmask'):
        assert not path.add_ring(points)
    assert len(path) == 0
    assert 'degenerate ring' in caplog.text


def test_degenerate_ring_strict():
    path = OutlinePath()
    with pytest.raises(DegenerateInput) as info:
        path.add_ring([(1.0, 2.0)], strict=True)
    assert info.value.points == [(1.0, 2.0)]
    assert isinstance(info.value, ValueError)


def test_two_point_ring_is_kept():
    path = OutlinePath()
    assert path.add_ring([(0, 0), (1, 0)])
    assert len(path) == 1


def test_add_frame():
    path = OutlinePath()
    path.add_frame(3.0, 2.0)
    ring = path.rings[0]
    assert [p[:2] for p in ring] == [[-3.0, -2.0], [-3.0, 2.0], [3.0, 2.0], [3.0, -2.0]]
    assert path.bounds() == (6.0, 4.0)


def test_add_frame_off_center():
    path = OutlinePath()
    path.add_frame(1.0, 1.0, center=(2.0, 0.0))
    box = path.bbox()
    assert box[0][:2] == [1.0, -1.0]
    assert box[1][:2] == [3.0, 1.0]


def test_add_circle_is_lazy():
    path = OutlinePath(flatness=0.005)
    assert path.add_circle((0, 0), 1.0)
    assert iscircle(path.rings[0])
    assert path.bounds() == (2.0, 2.0)
    assert not path.add_circle((0, 0), 0.0)


def test_tessellate_uses_flatness():
    path = OutlinePath(flatness=0.005)
    path.add_circle((0, 0), 1.0)
    path.add_frame(5.0, 5.0)
    loops = path.tessellate()
    assert len(loops[0]) == 32
    assert len(loops[1]) == 4

    path.flatness = 0.05
    assert len(path.tessellate()[0]) < 32


def test_bad_flatness():
    with pytest.raises(ValueError):
        OutlinePath(flatness=0.0)
    path = OutlinePath()
    with pytest.raises(ValueError):
        path.flatness = -1.0


def test_clear(unit_square):
    path = OutlinePath()
    path.add_ring(unit_square)
    path.add_frame(3, 3)
    path.clear()
    assert len(path) == 0
    assert list(path) == []


class TestEvenOdd:
    """a point is inside when enclosed by an odd number of rings"""

    def setup_method(self):
        self.path = OutlinePath()
        self.path.add_frame(3.0, 3.0)
        self.path.add_frame(1.0, 1.0)

    def test_frame_region(self):
        assert self.path.contains((2.0, 0.0))
        assert self.path.contains((0.0, -2.5))

    def test_hole(self):
        assert not self.path.contains((0.0, 0.0))
        assert not self.path.contains((0.5, 0.5))

    def test_outside(self):
        assert not self.path.contains((5.0, 0.0))

    def test_single_ring_is_solid(self):
        disk = OutlinePath()
        disk.add_circle((0, 0), 1.0)
        assert disk.contains((0.0, 0.0))
        assert not disk.contains((2.0, 0.0))
