import logging
import math
from typing import Hashable, Optional, Tuple

import numpy as np

from .errors import InvalidArgumentError, InvalidRangeError, InvalidStretchTargetError
from .labels import resolve_label_strategy
from .options import NumberLineOptions
from .scales.base import Breakpoints, Scale, ScaleFit
from .scales.utils import snap_to_integer
from .view_model import NumberLineViewModel, TickMark, pattern_index_for
from .zoom import ZoomSession

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


class NumberLine:
    """
    Stretchable, zoomable number line that can back rulers, axes and grids.

    The line is infinite in both directions. Its geometry is described by a
    magnification, which the configured scale law turns into a unit length
    (pixels) and a unit value, and a displacement, the pixel offset of the
    assumed rendering start from the origin:

        position = value * unit_length / unit_value - displacement

    Panning by +130 pixels therefore moves the value found 130 pixels to the
    right of the origin to position 0. Magnification above 1 means zoomed in.

    Unit length and unit value are recomputed on every call that changes the
    magnification, so every query is a plain read.
    """

    def __init__(self, options: NumberLineOptions) -> None:
        """Validate options and establish the initial magnification and displacement."""
        options.validate()
        self._options = options
        self._breakpoints = options.breakpoints
        self._pattern = tuple(options.pattern)
        self._biggest_pattern_value = max(self._pattern)
        self._label_for = resolve_label_strategy(options.label_strategy)
        self._magnification = options.initial_magnification
        self._displacement = 0.0
        self._revision = 0
        self.zoom_to(options.initial_magnification)
        self.pan_to(options.initial_displacement)
        logger.debug("NumberLine created: scale=%r breakpoints=%s magnification=%s displacement=%s",
                     options.scale, self._breakpoints, self._magnification, self._displacement)

    # ------------------------------------------------------------------ state

    @property
    def options(self) -> NumberLineOptions:
        return self._options

    @property
    def breakpoints(self) -> Breakpoints:
        return self._breakpoints

    @property
    def pattern(self) -> Tuple[float, ...]:
        return self._pattern

    @property
    def magnification(self) -> float:
        """Zoom level fed to the scale law. 1 is the base case, above 1 is zoomed in."""
        return self._magnification

    @property
    def displacement(self) -> float:
        """Pixel offset of the rendering start with respect to the origin."""
        return self._displacement

    @property
    def unit_length(self) -> float:
        return self._scale.unit_length

    @property
    def unit_value(self) -> float:
        return self._scale.unit_value

    @property
    def scale(self) -> Scale:
        return self._scale

    @property
    def tick_count(self) -> int:
        """Number of tick marks in a unit."""
        return len(self._pattern)

    @property
    def tick_gap(self) -> float:
        """Pixel gap between ticks of a unit."""
        return self.unit_length / self.tick_count

    @property
    def biggest_pattern_value(self) -> float:
        return self._biggest_pattern_value

    @property
    def first_value(self) -> float:
        """Value at position 0."""
        return self.value_at(0)

    @property
    def scale_category(self) -> Hashable:
        return self._options.scale.category(self._magnification, self._breakpoints)

    @property
    def revision(self) -> int:
        """Incremented on every change to magnification or displacement."""
        return self._revision

    def within_breakpoint_range(self, length: float) -> bool:
        return self._breakpoints.contains(length)

    def _set_magnification(self, magnification: float) -> None:
        self._magnification = magnification
        self._scale = self._options.scale.compute(magnification, self._breakpoints)

    # ------------------------------------------------------------- transforms

    def value_at(self, position: float, wrt_origin: bool = False) -> float:
        """Value found at position. With wrt_origin, position is measured from the origin instead of the start."""
        if wrt_origin:
            return position * self.unit_value / self.unit_length
        return (position + self._displacement) * self.unit_value / self.unit_length

    def position_of(self, value: float, wrt_origin: bool = False) -> float:
        """Pixel position of value, from the start or, with wrt_origin, from the origin."""
        if wrt_origin:
            return value * self.unit_length / self.unit_value
        return value * self.unit_length / self.unit_value - self._displacement

    def location_of(self, value: float, wrt_origin: bool = False) -> float:
        return self.position_of(value, wrt_origin)

    def measure(self, length: float) -> float:
        """Value spanned by length pixels, regardless of displacement."""
        return length * self.unit_value / self.unit_length

    # ---------------------------------------------------------------- panning

    def pan_to(self, position: float) -> None:
        self._displacement = position
        self._revision += 1

    def pan_by(self, delta: float) -> None:
        """Move the line by delta pixels. Either sign is fine, the line is unbounded."""
        self._displacement += delta
        self._revision += 1

    move_by = pan_by

    # ------------------------------------------------------------------- zoom

    def zoom_to(self, magnification: float) -> None:
        """Set magnification directly, without anchoring."""
        if not self._options.scale.defined_at(magnification):
            raise InvalidArgumentError(f"{self._options.scale!r} is not defined at magnification {magnification}")
        self._set_magnification(magnification)
        self._revision += 1

    def zoom_around(self, anchor_position: float, delta: float) -> bool:
        """
        Magnify by delta while keeping the value under anchor_position in place.

        Returns False, leaving the line untouched, when the resulting
        magnification is not admitted by the scale law (at or below its
        minimum, or past the maximum length of the last subdivision).
        """
        return self.zoom_around_value(self.value_at(anchor_position), delta)

    def zoom_around_value(self, value: float, delta: float) -> bool:
        """Magnify by delta while keeping value at its current position."""
        target = self._magnification + delta
        if not self._options.scale.admits(target, self._breakpoints):
            logger.debug("Zoom rejected: magnification %s + %s is out of range", self._magnification, delta)
            return False
        debug = logger.isEnabledFor(logging.DEBUG)
        category = self.scale_category if debug else None
        before = self.position_of(value)
        self._set_magnification(target)
        after = self.position_of(value)
        self._displacement += after - before
        self._revision += 1
        if debug and self.scale_category != category:
            logger.debug("Scale category changed from %s to %s at magnification %s", category, self.scale_category, target)
        return True

    def zoom_session(self) -> ZoomSession:
        """Open a session for one drag or wheel gesture, see ZoomSession."""
        return ZoomSession(self)

    # ---------------------------------------------------------------- fitting

    def _check_range(self, start_value: float, end_value: float, length: float) -> None:
        if end_value <= start_value:
            raise InvalidRangeError(f"Ending value has to be greater than starting value, got [{start_value}, {end_value}]")
        if length <= 0:
            raise InvalidArgumentError(f"Length has to be positive, got {length}")

    def range_fit(self, start_value: float, end_value: float, length: float, for_unit_length: Optional[float] = None) -> Optional[ScaleFit]:
        """
        Magnification and displacement that best fit [start_value, end_value] into length.

        The target unit length defaults to the lower breakpoint and is clamped
        into the breakpoints. When the unit value it needs is not one of the
        scale law's step values, the next larger step value is used, so the
        range still fits, only with trailing space. Nothing is mutated; pass
        the result to apply_fit. Returns None when no representable scale fits.
        """
        self._check_range(start_value, end_value, length)
        target = self._breakpoints.clamp(self._breakpoints.lower if for_unit_length is None else for_unit_length)
        fit = self._options.scale.fit((end_value - start_value) / length, self._breakpoints, target)
        if fit is None:
            logger.debug("No representable scale fits [%s, %s] into %s", start_value, end_value, length)
            return None
        displacement = start_value * fit.unit_length / fit.unit_value
        fit = fit._replace(displacement=displacement)
        logger.debug("Range [%s, %s] fitted into %s: %s", start_value, end_value, length, fit)
        return fit

    def is_range_fittable(self, start_value: float, end_value: float, length: float, for_unit_length: Optional[float] = None) -> bool:
        """Whether range_fit would fit the range exactly, without snapping."""
        fit = self.range_fit(start_value, end_value, length, for_unit_length)
        return fit is not None and fit.exact

    def apply_fit(self, fit: ScaleFit) -> None:
        self.zoom_to(fit.magnification)
        self.pan_to(fit.displacement)

    def stretch_to_fit(self, final_value: float, length: float) -> bool:
        """
        Stretch the line so that 0 sits at position 0 and final_value at length.

        Returns False without changing anything when the scale law cannot
        represent the required scale.
        """
        if final_value <= 0:
            raise InvalidStretchTargetError(f"Final value has to be positive, got {final_value}. Consider using range_fit instead")
        if length <= 0:
            raise InvalidStretchTargetError(f"Length has to be positive, got {length}")
        magnification = self._options.scale.stretch(final_value / length, self._breakpoints)
        if magnification is None:
            logger.debug("Cannot stretch %s over %s pixels", final_value, length)
            return False
        self._set_magnification(magnification)
        self._displacement = 0.0
        self._revision += 1
        return True

    # ------------------------------------------------------------- view model

    def build_view_model(self, length: float) -> NumberLineViewModel:
        """
        Build a view model describing this number line over length pixels.

        Tick marks cover [0, length] inclusively. The first one is the first
        tick at or after position 0, found from the displacement.
        """
        if length < 0:
            raise InvalidArgumentError(f"Length cannot be negative, got {length}")
        gap = self.tick_gap
        tick_value = self.unit_value / self.tick_count
        first_ordinal = math.ceil(snap_to_integer(self._displacement / gap))
        offset = first_ordinal * gap - self._displacement
        if offset < 0:
            # snapping absorbed float noise, or rounding lost a real fraction
            if -offset <= gap * 1e-9:
                offset = 0.0
            else:
                first_ordinal += 1
                offset += gap
        total_ticks = max(0, math.floor(snap_to_integer((length - offset) / gap)) + 1)

        ordinals = np.arange(first_ordinal, first_ordinal + total_ticks)
        positions = ordinals * gap - self._displacement
        values = ordinals * tick_value + 0.0

        tick_marks = []
        for ordinal, position, value in zip(ordinals.tolist(), positions.tolist(), values.tolist()):
            index = pattern_index_for(ordinal, self.tick_count)
            label = self._label_for(value, index, position, self) if self._label_for is not None else None
            tick_marks.append(TickMark(value, position, self._pattern[index], index, label))

        leftover_space = length - tick_marks[-1].position if tick_marks else length
        return NumberLineViewModel(
            offset=offset,
            leftover_space=leftover_space,
            gap=gap,
            tick_marks=tuple(tick_marks),
            length=length,
            starting_value=self.value_at(0) + 0.0,
            ending_value=self.value_at(length) + 0.0,
            number_line=self,
        )
