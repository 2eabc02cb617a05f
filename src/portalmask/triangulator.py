## even-odd cap triangulation for portalmask
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

"""Even-odd region classification and cap triangulation.

Rings from an outline are grouped into filled regions according to
the even-odd rule: a ring enclosed by an even number of other rings
bounds a filled region, a ring enclosed by an odd number is a hole in
the innermost region that encloses it.  Each region is then handed to
``mapbox-earcut`` (the ear clipping implementation used by Mapbox GL).

Triangles are returned as index triples into the region's own vertex
list, and the vertex list is exactly the region's ring points in ring
order, so the extruder can stitch walls onto the cap boundaries
without duplicating or moving a single vertex.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

import numpy as np

try:
    import mapbox_earcut as _earcut
except ImportError as exc:  # pragma: no cover - import guard
    raise ImportError(
        "mapbox-earcut must be installed to triangulate portal outlines"
    ) from exc

from portalmask.geom import isinsideringXY, ringarea

logger = logging.getLogger(__name__)

Point2D = Tuple[float, float]
Triangle = Tuple[int, int, int]


@dataclass
class Region:
    """One filled even-odd region: a counter-clockwise outer loop and
    zero or more clockwise hole loops."""

    outer: List[Point2D]
    holes: List[List[Point2D]] = field(default_factory=list)

    @property
    def loops(self) -> List[List[Point2D]]:
        return [self.outer] + self.holes

    @property
    def vertices(self) -> List[Point2D]:
        verts: List[Point2D] = []
        for loop in self.loops:
            verts.extend(loop)
        return verts

    def loop_indices(self) -> List[List[int]]:
        """vertex indices of each loop, outer first"""
        indices = []
        start = 0
        for loop in self.loops:
            indices.append(list(range(start, start + len(loop))))
            start += len(loop)
        return indices

    @property
    def area(self) -> float:
        return ringarea(self.outer) + sum(ringarea(h) for h in self.holes)


def _as_loop(ring: Sequence[Sequence[float]]) -> List[Point2D]:
    return [(float(p[0]), float(p[1])) for p in ring]


def _oriented(loop: List[Point2D], ccw: bool) -> List[Point2D]:
    area = ringarea(loop)
    if (ccw and area < 0) or (not ccw and area > 0):
        return list(reversed(loop))
    return loop


def evenodd_regions(rings: Sequence[Sequence[Sequence[float]]]) -> List[Region]:
    """Group rings into filled regions under the even-odd rule.

    Rings with fewer than three points bound no area and are ignored.
    Regions are returned in the insertion order of their outer rings.
    """

    loops = []
    for ring in rings:
        loop = _as_loop(ring)
        if len(loop) < 3 or abs(ringarea(loop)) <= 0.0:
            logger.debug('ignoring ring without area (%d points)', len(loop))
            continue
        loops.append(loop)

    # containers[i] lists every loop that encloses loop i
    containers: List[List[int]] = []
    for i, loop in enumerate(loops):
        probe = loop[0]
        containers.append([j for j, other in enumerate(loops)
                           if j != i and isinsideringXY(other, probe)])

    regions = {}
    order = []
    for i, loop in enumerate(loops):
        if len(containers[i]) % 2 == 0:
            regions[i] = Region(outer=_oriented(loop, ccw=True))
            order.append(i)

    for i, loop in enumerate(loops):
        depth = len(containers[i])
        if depth % 2 == 0:
            continue
        owners = [j for j in containers[i] if len(containers[j]) == depth - 1]
        if not owners:
            # overlapping rings with no consistent nesting; fill this one on its own
            logger.warning('ring %d overlaps its enclosing rings, filling it as a separate region', i)
            regions[i] = Region(outer=_oriented(loop, ccw=True))
            order.append(i)
            continue
        owner = min(owners, key=lambda j: abs(ringarea(loops[j])))
        regions[owner].holes.append(_oriented(loop, ccw=False))

    return [regions[i] for i in sorted(order)]


def triangulate_region(region: Region) -> List[Triangle]:
    """Return counter-clockwise triangles covering region.

    Indices refer to region.vertices.  Zero-area triangles that the
    ear clipper produces at hole bridges are dropped.
    """

    verts = region.vertices
    if len(region.outer) < 3:
        return []

    ring_ends = []
    total = 0
    for loop in region.loops:
        total += len(loop)
        ring_ends.append(total)

    vertices = np.asarray(verts, dtype=np.float64).reshape(-1, 2)
    ends = np.asarray(ring_ends, dtype=np.uint32)
    indices = _earcut.triangulate_float64(vertices, ends)

    triangles: List[Triangle] = []
    for k in range(0, len(indices), 3):
        a, b, c = int(indices[k]), int(indices[k + 1]), int(indices[k + 2])
        (x0, y0), (x1, y1), (x2, y2) = verts[a], verts[b], verts[c]
        area = (x1 - x0) * (y2 - y0) - (x2 - x0) * (y1 - y0)
        if area == 0.0:
            continue
        if area < 0:
            b, c = c, b
        triangles.append((a, b, c))
    return triangles


__all__ = ["Point2D", "Region", "Triangle", "evenodd_regions", "triangulate_region"]
