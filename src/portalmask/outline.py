## planar outline paths for portalmask
## Copyright (c) 2026 portalmask contributors

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
# 
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
# 
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""
Outline Paths
=============

An OutlinePath is a mutable planar outline: an ordered list of
closed rings with an even-odd fill rule.  A point belongs to the
filled region if it is enclosed by an odd number of rings, which is
what turns "outer ring plus inner ring" into a frame with a hole, and
a single ring into a solid disk or polygon.

Rings are held either as point rings (see portalmask.geom) or as
full circles.  Circles stay unsampled until tessellate() is
called, at which point they are approximated to within the path's
flatness, an absolute chordal-deviation tolerance.

No winding or self-intersection validation is performed; the caller
is responsible for supplying simple rings.
"""

from __future__ import annotations

import logging
from copy import deepcopy
from typing import Iterator, List, Optional, Sequence, Tuple

from portalmask.errors import DegenerateInput
from portalmask.geom import (
    bbox,
    bboxunion,
    circle,
    circle2ring,
    dist,
    epsilon,
    iscircle,
    isinsideringXY,
    point,
)

logger = logging.getLogger(__name__)

DEFAULT_FLATNESS = 0.6


class OutlinePath:
    """Ordered closed rings combined with the even-odd fill rule."""

    def __init__(self, flatness: float = DEFAULT_FLATNESS):
        self._rings: List[list] = []
        self.flatness = flatness

    def __repr__(self):
        return 'OutlinePath({} rings, flatness={})'.format(len(self._rings), self.flatness)

    def __len__(self):
        return len(self._rings)

    def __iter__(self) -> Iterator[list]:
        return iter(deepcopy(self._rings))

    @property
    def usesEvenOddFillRule(self) -> bool:
        # the fill rule is not configurable; every portal carves its
        # hole with it
        return True

    @property
    def rings(self) -> List[list]:
        """copies of the stored rings, in insertion order"""
        return deepcopy(self._rings)

    @property
    def flatness(self) -> float:
        return self._flatness

    @flatness.setter
    def flatness(self, value: float) -> None:
        if value <= 0:
            raise ValueError('flatness must be positive, got {}'.format(value))
        self._flatness = float(value)

    def add_ring(self, points: Sequence[Sequence[float]], strict: bool = False) -> bool:
        """Append a closed ring through points.

        The first point is the move target, the remaining points are
        joined by line segments and the ring is closed back to the
        first point.  A trailing copy of the first point is dropped.
        Fewer than two usable points add nothing and return False
        unless strict is set, in which case DegenerateInput is
        raised.
        """
        ring = []
        for p in points:
            pt = point(p)
            pt[2] = 0
            if ring and dist(ring[-1], pt) <= epsilon:
                continue
            ring.append(pt)
        if len(ring) > 1 and dist(ring[0], ring[-1]) <= epsilon:
            ring.pop()

        if len(ring) < 2:
            if strict:
                raise DegenerateInput('ring needs at least two distinct points, got {}'
                                      .format(len(ring)), points=list(points))
            logger.warning('skipping degenerate ring with %d usable point(s)', len(ring))
            return False

        self._rings.append(ring)
        return True

    def add_frame(self, half_width: float, half_height: float,
                  center: Sequence[float] = (0.0, 0.0)) -> bool:
        """Append an axis-aligned rectangle with the given half-extents."""
        cx, cy = center[0], center[1]
        return self.add_ring([(cx - half_width, cy - half_height),
                              (cx - half_width, cy + half_height),
                              (cx + half_width, cy + half_height),
                              (cx + half_width, cy - half_height)])

    def add_circle(self, center: Sequence[float], radius: float) -> bool:
        """Append a full circle, sampled lazily by tessellate()."""
        if radius <= epsilon:
            logger.warning('skipping circle with non-positive radius %r', radius)
            return False
        self._rings.append(circle(point(center), radius))
        return True

    def clear(self) -> None:
        self._rings = []

    def bbox(self) -> Optional[list]:
        """2D bounding box of every ring, or None for an empty path."""
        box = False
        for ring in self._rings:
            box = bboxunion(box, bbox(ring))
        return box or None

    def bounds(self) -> Tuple[float, float]:
        """(width, height) of the bounding box; (0, 0) when empty."""
        box = self.bbox()
        if box is None:
            return 0.0, 0.0
        return box[1][0] - box[0][0], box[1][1] - box[0][1]

    def tessellate(self, minseg: int = 4) -> List[list]:
        """Return every ring as a point ring, sampling circles to within
        flatness.
        """
        loops = []
        for ring in self._rings:
            if iscircle(ring):
                loops.append(circle2ring(ring, self._flatness, minseg))
            else:
                loops.append(deepcopy(ring))
        return loops

    def contains(self, p: Sequence[float]) -> bool:
        """Even-odd membership test for point p."""
        pt = point(p)
        count = 0
        for ring in self._rings:
            if iscircle(ring):
                if dist(ring[0], pt) < ring[1][0]:
                    count += 1
            elif len(ring) > 2 and isinsideringXY(ring, pt):
                count += 1
        return count % 2 == 1


__all__ = ["DEFAULT_FLATNESS", "OutlinePath"]
