"""Number line public API."""

from .errors import (NumberLineError, ConfigurationError, InvalidPatternError, InvalidBreakpointsError,
                     InvalidZoomPeriodError, InvalidZoomFactorError, InvalidStretchModuloError,
                     InvalidInitialMagnificationError, InvalidSubdivisionError, InvalidArgumentError,
                     InvalidRangeError, InvalidStretchTargetError)
from .labels import TickMarkLabelStrategy, PatternLabelStrategy, SIPrefixLabelStrategy, si_format
from .number_line import NumberLine
from .options import NumberLineOptions
from .scales import (Breakpoints, Scale, ScaleFit, ScaleLaw, PeriodicScale, SubdivisionScale, ScaleCategory,
                     range_mapper, sawtooth, staircase)
from .view_model import NumberLineViewModel, TickMark, pattern_index_for
from .zoom import ZoomSession

__all__ = [
    "NumberLine",
    "NumberLineOptions",
    "NumberLineViewModel",
    "TickMark",
    "pattern_index_for",
    "ZoomSession",
    "TickMarkLabelStrategy",
    "PatternLabelStrategy",
    "SIPrefixLabelStrategy",
    "si_format",
    "Breakpoints",
    "Scale",
    "ScaleFit",
    "ScaleLaw",
    "PeriodicScale",
    "SubdivisionScale",
    "ScaleCategory",
    "range_mapper",
    "sawtooth",
    "staircase",
    "NumberLineError",
    "ConfigurationError",
    "InvalidPatternError",
    "InvalidBreakpointsError",
    "InvalidZoomPeriodError",
    "InvalidZoomFactorError",
    "InvalidStretchModuloError",
    "InvalidInitialMagnificationError",
    "InvalidSubdivisionError",
    "InvalidArgumentError",
    "InvalidRangeError",
    "InvalidStretchTargetError",
]
