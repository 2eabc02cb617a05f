## portal geometry orchestration for portalmask
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
Portal Geometry
===============

``PortalGeometry`` owns one outline, the frozen depth and outer
scale, and the current solid.  It does not *is-a* scene node: it
produces a ``Placement`` (solid, z-offset transform and paint
intents) that an externally owned scene node adopts through
``attach()``.  The placement object is kept for the lifetime of the
portal and its solid is swapped in place by ``update_geometry()``, so
a node that adopted it sees re-shapes without being re-attached.

All operations are synchronous and unlocked.  Call them from the
thread that owns the scene graph.

Example::

    portal = PortalGeometry.frame((2.0, 1.0))
    portal.attach(node)          # node.add_child(placement)
    portal.update_geometry(...)  # only for path portals
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional, Protocol, Sequence

from portalmask import materials
from portalmask.config import ProfileKind, z_offset
from portalmask.errors import UnsupportedOperation
from portalmask.extrude import extrude_outline, extrude_tube
from portalmask.geom import point
from portalmask.geom3d import transformsolid
from portalmask.materials import PaintIntent
from portalmask.outline import OutlinePath
from portalmask.profiles import Profile, build, path_rings
from portalmask.xform import Matrix, Translation

logger = logging.getLogger(__name__)


class PortalState(Enum):
    CONSTRUCTED = "constructed"
    RESHAPED = "reshaped"


class SceneNode(Protocol):
    """The part of a host scene node that a portal needs."""

    def add_child(self, child: Any) -> Any:
        ...


@dataclass
class Placement:
    """What the scene graph receives: a solid, the transform that places
    it, and the paint intent of each of its surfaces."""

    solid: list
    transform: Matrix
    z_offset: float
    intents: List[PaintIntent] = field(default_factory=list)

    def placed_solid(self) -> list:
        """Copy of the solid in placed (z-offset) coordinates."""
        return transformsolid(self.solid, self.transform)


class PortalGeometry:
    """Masking volume that leaves a hole through an occluding surface.

    Build one with a construction classmethod: ``frame``, ``polygon``,
    ``arc``, ``tube`` or ``path``.
    """

    def __init__(self, profile: Profile):
        self._kind = profile.kind
        self._depth = profile.depth
        self._outer_scale = profile.outer_scale
        self._outline = profile.outline if profile.outline is not None else OutlinePath()
        self._tube = profile.tube
        self._state = PortalState.CONSTRUCTED

        if self._kind is ProfileKind.TUBE:
            intents = materials.tube_intents()
        else:
            intents = materials.framed_intents()

        offset = z_offset(self._depth)
        self._placement = Placement(solid=self._extrude(self._outline, intents),
                                    transform=Translation(point(0, 0, offset)),
                                    z_offset=offset,
                                    intents=intents)
        logger.debug('constructed %s portal: depth=%g outer_scale=%g z_offset=%g',
                     self._kind.value, self._depth, self._outer_scale, offset)

    def __repr__(self):
        return 'PortalGeometry({}, depth={}, outer_scale={})'.format(
            self._kind.value, self._depth, self._outer_scale)

    ## construction variants

    @classmethod
    def frame(cls, frame_size: Sequence[float], depth: Optional[float] = None,
              outer_mult: float = 3) -> "PortalGeometry":
        """Rectangular portal of ``frame_size = (width, height)``.

        Depth defaults to twice the larger dimension; the square outer
        mask is ``outer_mult`` times the larger dimension.
        """
        return cls(build(ProfileKind.RECTANGLE, frame_size, depth=depth, outer_mult=outer_mult))

    @classmethod
    def polygon(cls, radius: float, subdivisions: int = 7, depth: Optional[float] = None,
                outer_mult: float = 6) -> "PortalGeometry":
        """Circular portal approximated by ``2**subdivisions`` points
        (subdivisions are clamped to at least 2)."""
        return cls(build(ProfileKind.POLYGON, radius, subdivisions=subdivisions,
                         depth=depth, outer_mult=outer_mult))

    @classmethod
    def arc(cls, radius: float, flatness: float = 0.005, depth: Optional[float] = None,
            outer_mult: float = 5) -> "PortalGeometry":
        """Circular portal tessellated to within ``radius * flatness``.
        Flatness above 0.01 is not recommended."""
        return cls(build(ProfileKind.ARC, radius, flatness=flatness,
                         depth=depth, outer_mult=outer_mult))

    @classmethod
    def tube(cls, radius: float, subdivisions: int = 7, depth: Optional[float] = None,
             outer_mult: float = 5) -> "PortalGeometry":
        """Tubular portal: an open annular wall with no planar outline."""
        return cls(build(ProfileKind.TUBE, radius, subdivisions=subdivisions,
                         depth=depth, outer_mult=outer_mult))

    @classmethod
    def path(cls, points: Sequence[Sequence[float]], flatness: float = 0.6,
             depth: Optional[float] = None, outer_mult: float = 3) -> "PortalGeometry":
        """Portal whose hole follows the closed polyline ``points``.

        The outer mask is the path's bounding box scaled by
        ``outer_mult``; depth defaults to twice its larger dimension.
        """
        return cls(build(ProfileKind.PATH, points, flatness=flatness,
                         depth=depth, outer_mult=outer_mult))

    @classmethod
    def from_encoded(cls, data: Any) -> "PortalGeometry":
        """Rebuilding a portal from persisted state is not supported."""
        raise UnsupportedOperation('PortalGeometry cannot be decoded from persisted state')

    ## state

    @property
    def kind(self) -> ProfileKind:
        return self._kind

    @property
    def state(self) -> PortalState:
        return self._state

    @property
    def depth(self) -> float:
        return self._depth

    @property
    def outer_scale(self) -> float:
        return self._outer_scale

    @property
    def outline(self) -> OutlinePath:
        return self._outline

    @property
    def solid(self) -> list:
        return self._placement.solid

    @property
    def z_offset(self) -> float:
        return self._placement.z_offset

    @property
    def intents(self) -> List[PaintIntent]:
        return list(self._placement.intents)

    def placement(self) -> Placement:
        return self._placement

    def attach(self, node: SceneNode) -> Placement:
        """Hand the placement to ``node`` as a child and return it."""
        node.add_child(self._placement)
        return self._placement

    ## re-shape

    def update_geometry(self, points: Sequence[Sequence[float]]) -> None:
        """Replace the hole with the closed polyline ``points``.

        The outer rectangle follows the new bounding box at the stored
        outer scale and the solid is re-extruded at the stored depth.
        Depth, outer scale, z-offset and paint intents do not change.
        """
        if self._kind is ProfileKind.TUBE:
            raise UnsupportedOperation('tube portals have no outline to re-shape')

        # a failed extrusion leaves outline, solid and state as they were
        outline = OutlinePath(flatness=self._outline.flatness)
        path_rings(outline, points, self._outer_scale)
        sld = self._extrude(outline, self._placement.intents)

        self._outline = outline
        self._placement.solid = sld
        self._state = PortalState.RESHAPED
        logger.debug('re-shaped %s portal from %d point(s)', self._kind.value, len(points))

    def _extrude(self, outline: OutlinePath, intents: Sequence[PaintIntent]) -> list:
        if self._tube is not None:
            tube = self._tube
            sld = extrude_tube(tube.inner_radius, tube.outer_radius, self._depth, tube.segments)
        else:
            sld = extrude_outline(outline, self._depth)
        return materials.assign_intents(sld, intents)


__all__ = ["Placement", "PortalGeometry", "PortalState", "SceneNode"]
