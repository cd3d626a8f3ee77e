from .base import Breakpoints, Scale, ScaleFit, ScaleLaw
from .periodic import PeriodicScale
from .subdivision import ScaleCategory, SubdivisionScale
from .utils import range_mapper, sawtooth, snap_to_integer, staircase

__all__ = [
    "Breakpoints",
    "Scale",
    "ScaleFit",
    "ScaleLaw",
    "PeriodicScale",
    "ScaleCategory",
    "SubdivisionScale",
    "range_mapper",
    "sawtooth",
    "snap_to_integer",
    "staircase",
]
