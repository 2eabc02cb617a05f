## paint intents for portal solids
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

"""Paint intents and their assignment to portal solids.

A paint intent tells the renderer what a surface is *for*, not how to
draw it.  The renderer decides how "write no color" or "transparent"
is realized.  Intents are stored, in order, in the material slot of a
solid and entry ``i`` applies to surface ``i``.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Sequence

from portalmask.geom3d import issolid


@dataclass(frozen=True)
class PaintIntent:
    """Render-layer semantics for one surface of a portal solid."""

    name: str
    writes_color: bool = True
    writes_depth: bool = True
    double_sided: bool = False
    transparent: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# blocks whatever lies behind it without being visible itself
OCCLUDER = PaintIntent("occluder", writes_color=False, writes_depth=True,
                       double_sided=True)

# default opaque paint for the frame's own surfaces
STRUCTURAL = PaintIntent("structural")

# nothing here may hide the content seen through the portal
SEE_THROUGH = PaintIntent("see-through", transparent=True)


def framed_intents() -> List[PaintIntent]:
    """Intents for outline solids: front cap, back cap, side walls."""
    return [OCCLUDER, STRUCTURAL, SEE_THROUGH]


def tube_intents() -> List[PaintIntent]:
    """Intents for tube solids: outer wall, inner wall."""
    return [OCCLUDER, SEE_THROUGH]


def assign_intents(sld: list, intents: Sequence[PaintIntent]) -> list:
    """Store ``intents`` in the material slot of ``sld`` and return it."""
    if not issolid(sld):
        raise ValueError('bad solid passed to assign_intents')
    if not intents:
        raise ValueError('at least one paint intent is required')
    sld[2] = list(intents)
    return sld


def intent_for(sld: list, index: int) -> PaintIntent:
    """Paint intent of surface ``index``.

    When a solid has more surfaces than intents the list is reused
    cyclically, the way scene-graph renderers apply material lists.
    """
    if not issolid(sld):
        raise ValueError('bad solid passed to intent_for')
    intents = sld[2]
    if not intents:
        raise ValueError('solid has no paint intents assigned')
    return intents[index % len(intents)]


__all__ = [
    "OCCLUDER",
    "PaintIntent",
    "SEE_THROUGH",
    "STRUCTURAL",
    "assign_intents",
    "framed_intents",
    "intent_for",
    "tube_intents",
]
