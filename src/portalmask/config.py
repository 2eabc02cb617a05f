## numeric constants and per-profile defaults for portalmask
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

"""Numeric constants and per-profile construction defaults.

The table in DEFAULTS is the single source for the optional
parameters of each portal construction variant.  Depth defaults are
expressed as a multiple of the profile's characteristic size (the
larger frame dimension, the radius, or the larger bounding-box
dimension of a path).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

# pulls the placed solid just in front of its geometric center so the
# front cap never z-fights with content seen through the hole
Z_FIGHT_EPSILON = 0.0003

# inner frame half-extents are size / INNER_DIVISOR, not size / 2, so
# the hole edge never coincides with a tracked marker's true edge
INNER_DIVISOR = 1.975

MIN_SUBDIVISIONS = 2

# default depth when the characteristic size is zero (empty path)
FALLBACK_DEPTH = 1.0

LOG_LEVEL_ENV = "PORTALMASK_LOG_LEVEL"


class ProfileKind(Enum):
    """The five supported portal profiles."""

    RECTANGLE = "rectangle"
    POLYGON = "polygon"
    ARC = "arc"
    TUBE = "tube"
    PATH = "path"


@dataclass(frozen=True)
class ProfileDefaults:
    """Optional-parameter defaults for one profile kind."""

    outer_mult: float
    depth_factor: float
    subdivisions: Optional[int] = None
    flatness: Optional[float] = None


DEFAULTS: Dict[ProfileKind, ProfileDefaults] = {
    ProfileKind.RECTANGLE: ProfileDefaults(outer_mult=3.0, depth_factor=2.0),
    ProfileKind.POLYGON: ProfileDefaults(outer_mult=6.0, depth_factor=4.0, subdivisions=7),
    ProfileKind.ARC: ProfileDefaults(outer_mult=5.0, depth_factor=4.0, flatness=0.005),
    ProfileKind.TUBE: ProfileDefaults(outer_mult=5.0, depth_factor=2.0, subdivisions=7),
    ProfileKind.PATH: ProfileDefaults(outer_mult=3.0, depth_factor=2.0, flatness=0.6),
}

# recommended ceiling for the smooth-arc relative flatness
ARC_FLATNESS_CEILING = 0.01


def z_offset(depth: float) -> float:
    """Placement offset along z for a solid of the given depth."""

    return -depth / 2.0 + Z_FIGHT_EPSILON


def segment_count(subdivisions: int) -> int:
    """Number of polygon segments for a subdivision level (min 2**2)."""

    return 1 << max(MIN_SUBDIVISIONS, int(subdivisions))


def default_depth(kind: ProfileKind, size: float) -> float:
    return DEFAULTS[kind].depth_factor * size


def env_log_level(default: str = "WARNING") -> str:
    """Log level name requested through the environment, if any."""

    return os.environ.get(LOG_LEVEL_ENV, default).upper()


__all__ = [
    "ARC_FLATNESS_CEILING",
    "DEFAULTS",
    "FALLBACK_DEPTH",
    "INNER_DIVISOR",
    "LOG_LEVEL_ENV",
    "MIN_SUBDIVISIONS",
    "ProfileDefaults",
    "ProfileKind",
    "Z_FIGHT_EPSILON",
    "default_depth",
    "env_log_level",
    "segment_count",
    "z_offset",
]
