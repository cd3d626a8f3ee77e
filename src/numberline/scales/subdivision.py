import math
from enum import Enum
from typing import Optional, Sequence, Tuple

from ..errors import ConfigurationError, InvalidStretchModuloError, InvalidSubdivisionError
from .base import Breakpoints, Scale, ScaleFit, ScaleLaw
from .utils import range_mapper, sawtooth, snap_to_integer


class ScaleCategory(str, Enum):
    """Where a magnification sits relative to the subdivision fallout."""
    ABOVE = "above"
    WITHIN = "within"
    LAST = "last"


class SubdivisionScale(ScaleLaw):
    """
    Scale law stepping through a descending list of "nice" unit values.

    For the fallout [200, 100, 50, 20, 10] zooming in subdivides a unit of 200
    into 100, then 50, 20 and finally 10, which is never subdivided further.

    - above: magnification below base_unit_value / fallout[0]. The unit length
      is pinned to the lower breakpoint and the unit value is
      base_unit_value / magnification.
    - within: every stretch_modulo of magnification maps to one fallout value
      while the unit length sweeps from the lower to the upper breakpoint.
    - last: the unit value is pinned to the last fallout value and the unit
      length grows linearly up to maximum_length_of_last_subdivision. Zooming
      in past that length is rejected.

    An empty fallout keeps the law in the above regime forever. The law is
    undefined at magnification 0, where the unit value would be
    base_unit_value / 0, so a number line using it needs a positive
    initial_magnification.
    """

    minimum_magnification = 1.0

    def __init__(self, base_unit_value: float, subdivision_fallout: Sequence[float] = (), maximum_length_of_last_subdivision: Optional[float] = None, stretch_modulo: float = 1.3) -> None:
        self._base_unit_value = base_unit_value
        self._subdivision_fallout = tuple(subdivision_fallout)
        self._maximum_length_of_last_subdivision = maximum_length_of_last_subdivision
        self._stretch_modulo = stretch_modulo

    @property
    def base_unit_value(self) -> float:
        return self._base_unit_value

    @property
    def subdivision_fallout(self) -> Tuple[float, ...]:
        return self._subdivision_fallout

    @property
    def maximum_length_of_last_subdivision(self) -> Optional[float]:
        return self._maximum_length_of_last_subdivision

    @property
    def stretch_modulo(self) -> float:
        return self._stretch_modulo

    def __repr__(self) -> str:
        return (f"SubdivisionScale(base_unit_value={self.base_unit_value!r}, "
                f"subdivision_fallout={list(self.subdivision_fallout)!r}, "
                f"maximum_length_of_last_subdivision={self.maximum_length_of_last_subdivision!r}, "
                f"stretch_modulo={self.stretch_modulo!r})")

    def validate(self, breakpoints: Breakpoints) -> None:
        if self.base_unit_value <= 0:
            raise ConfigurationError(f"Base unit value must be positive, got {self.base_unit_value}")
        if self.stretch_modulo <= 1:
            raise InvalidStretchModuloError(f"Stretch modulo must be greater than 1, got {self.stretch_modulo}")
        fallout = self.subdivision_fallout
        if any(current >= previous for previous, current in zip(fallout, fallout[1:])):
            raise InvalidSubdivisionError("Subdivision fallout must be sorted in strictly descending order")
        if fallout:
            if fallout[-1] <= 0:
                raise InvalidSubdivisionError("Last value of subdivision fallout must be positive")
            if fallout[0] > self.base_unit_value:
                raise InvalidSubdivisionError("First subdivision cannot be greater than the base unit value")
        if self.maximum_length_of_last_subdivision is not None and self.maximum_length_of_last_subdivision <= 0:
            raise InvalidSubdivisionError("Maximum length of the last subdivision must be positive")

    def maximum_length(self, breakpoints: Breakpoints) -> float:
        if self.maximum_length_of_last_subdivision is None:
            return breakpoints.upper
        return self.maximum_length_of_last_subdivision

    @property
    def starting_magnification(self) -> float:
        """Magnification at which the first subdivision takes over."""
        return self.base_unit_value / self.subdivision_fallout[0]

    @property
    def last_magnification(self) -> float:
        """Magnification at which the last subdivision takes over."""
        return self.starting_magnification + self.stretch_modulo * (len(self.subdivision_fallout) - 1)

    def _bands(self, magnification: float) -> float:
        return snap_to_integer((magnification - self.starting_magnification) / self.stretch_modulo)

    def defined_at(self, magnification: float) -> bool:
        return magnification > 0

    def category(self, magnification: float, breakpoints: Optional[Breakpoints] = None) -> ScaleCategory:
        if not self.subdivision_fallout or magnification < self.starting_magnification:
            return ScaleCategory.ABOVE
        if math.floor(self._bands(magnification)) < len(self.subdivision_fallout) - 1:
            return ScaleCategory.WITHIN
        return ScaleCategory.LAST

    def _last_length(self, magnification: float, breakpoints: Breakpoints) -> float:
        """Unit length in the last regime before the maximum is enforced."""
        maximum = self.maximum_length(breakpoints)
        if maximum < breakpoints.lower:
            return maximum
        t = max(0.0, self._bands(magnification) - (len(self.subdivision_fallout) - 1))
        return breakpoints.lower + t * (maximum - breakpoints.lower)

    def admits(self, magnification: float, breakpoints: Breakpoints) -> bool:
        if magnification <= self.minimum_magnification:
            return False
        if self.category(magnification) is ScaleCategory.LAST:
            length = self._last_length(magnification, breakpoints)
            maximum = self.maximum_length(breakpoints)
            return length <= maximum or math.isclose(length, maximum)
        return True

    def compute(self, magnification: float, breakpoints: Breakpoints) -> Scale:
        category = self.category(magnification)
        if category is ScaleCategory.ABOVE:
            return Scale(breakpoints.lower, self.base_unit_value / magnification)
        if category is ScaleCategory.WITHIN:
            bands = self._bands(magnification)
            unit_length = sawtooth(bands, breakpoints.lower, breakpoints.upper, 1.0)
            return Scale(unit_length, self.subdivision_fallout[math.floor(bands)])
        unit_length = min(self._last_length(magnification, breakpoints), self.maximum_length(breakpoints))
        return Scale(unit_length, self.subdivision_fallout[-1])

    def magnification_at(self, index: int, unit_length: float, breakpoints: Breakpoints) -> float:
        """Inverse of compute() for a fallout index and a unit length valid for it."""
        if index < len(self.subdivision_fallout) - 1:
            if breakpoints.upper > breakpoints.lower:
                phase = range_mapper(unit_length, breakpoints.lower, breakpoints.upper, 0.0, 1.0)
            else:
                phase = 0.0
            return self.starting_magnification + self.stretch_modulo * (index + phase)
        maximum = self.maximum_length(breakpoints)
        if maximum <= breakpoints.lower:
            return self.last_magnification
        return self.last_magnification + self.stretch_modulo * (unit_length - breakpoints.lower) / (maximum - breakpoints.lower)

    def _within_band(self, unit_length: float, breakpoints: Breakpoints) -> bool:
        if math.isclose(unit_length, breakpoints.lower):
            return True
        return breakpoints.lower < unit_length < breakpoints.upper

    def stretch(self, value_per_pixel: float, breakpoints: Breakpoints) -> Optional[float]:
        fallout = self.subdivision_fallout
        if not fallout or value_per_pixel * breakpoints.lower > fallout[0]:
            return self.base_unit_value / (value_per_pixel * breakpoints.lower)
        for index, subdivision in enumerate(fallout[:-1]):
            unit_length = subdivision / value_per_pixel
            if self._within_band(unit_length, breakpoints):
                return self.magnification_at(index, max(unit_length, breakpoints.lower), breakpoints)
        unit_length = fallout[-1] / value_per_pixel
        maximum = self.maximum_length(breakpoints)
        if maximum < breakpoints.lower:
            if math.isclose(unit_length, maximum):
                return self.last_magnification
            return None
        if breakpoints.lower <= unit_length <= maximum or math.isclose(unit_length, breakpoints.lower):
            return self.magnification_at(len(fallout) - 1, max(unit_length, breakpoints.lower), breakpoints)
        return None

    def fit(self, value_per_pixel: float, breakpoints: Breakpoints, unit_length: float) -> Optional[ScaleFit]:
        fallout = self.subdivision_fallout
        if not fallout or value_per_pixel * breakpoints.lower > fallout[0]:
            unit_value = value_per_pixel * breakpoints.lower
            return ScaleFit(self.base_unit_value / unit_value, 0.0, breakpoints.lower, unit_value, True)
        last = len(fallout) - 1
        if unit_length >= breakpoints.upper > breakpoints.lower and last > 0:
            unit_length = breakpoints.lower
        raw_value = value_per_pixel * unit_length
        exact = False
        index = None
        for position, subdivision in enumerate(fallout):
            if math.isclose(subdivision, raw_value):
                index, exact = position, True
                break
            if subdivision >= raw_value:
                index = position
        if index is None:
            # larger than every subdivision; the first one fits at a shorter unit
            index, unit_length = 0, fallout[0] / value_per_pixel
        if index == last:
            maximum = self.maximum_length(breakpoints)
            if maximum < breakpoints.lower:
                unit_length = maximum
            elif unit_length > maximum:
                unit_length = maximum
                exact = False
        magnification = self.magnification_at(index, unit_length, breakpoints)
        return ScaleFit(magnification, 0.0, unit_length, fallout[index], exact)
