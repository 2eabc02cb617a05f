# -*- coding: utf-8 -*-
"""Masking volumes that open a portal through an occluding surface."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("portalmask")
except PackageNotFoundError:  # pragma: no cover - handled when package not installed
    __version__ = "unknown"

from portalmask.config import ProfileKind
from portalmask.errors import DegenerateInput, PortalError, UnsupportedOperation
from portalmask.materials import OCCLUDER, SEE_THROUGH, STRUCTURAL, PaintIntent
from portalmask.outline import OutlinePath
from portalmask.portal import Placement, PortalGeometry, PortalState

__all__ = [
    "DegenerateInput",
    "OCCLUDER",
    "OutlinePath",
    "PaintIntent",
    "Placement",
    "PortalError",
    "PortalGeometry",
    "PortalState",
    "ProfileKind",
    "SEE_THROUGH",
    "STRUCTURAL",
    "UnsupportedOperation",
    "__version__",
]
