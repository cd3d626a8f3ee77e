import math
from typing import Optional

from ..errors import ConfigurationError, InvalidZoomFactorError, InvalidZoomPeriodError
from .base import Breakpoints, Scale, ScaleFit, ScaleLaw
from .utils import sawtooth, snap_to_integer, staircase


class PeriodicScale(ScaleLaw):
    """
    Scale law where unit length follows a sawtooth and unit value a staircase.

    At magnification 1 one unit is `breakpoints.lower` pixels long and is worth
    base_coverage / base_length. Every zoom_period of magnification the unit
    length sweeps from the lower to the upper breakpoint, then falls back and
    the unit value is divided by zoom_factor. Zooming out runs the same
    staircase backwards, multiplying the unit value instead.

    zoom_factor defaults to upper / lower, which keeps pixels per value
    continuous across a step. It must be at least 1; exactly 1 pins the unit
    value to base_coverage / base_length.
    """

    minimum_magnification = 0.0

    def __init__(self, base_coverage: float, base_length: float, zoom_period: float = 1.0, zoom_factor: Optional[float] = None) -> None:
        self._base_coverage = base_coverage
        self._base_length = base_length
        self._zoom_period = zoom_period
        self._zoom_factor = zoom_factor

    # read-only once constructed
    @property
    def base_coverage(self) -> float:
        return self._base_coverage

    @property
    def base_length(self) -> float:
        return self._base_length

    @property
    def zoom_period(self) -> float:
        return self._zoom_period

    @property
    def zoom_factor(self) -> Optional[float]:
        return self._zoom_factor

    def __repr__(self) -> str:
        return (f"PeriodicScale(base_coverage={self.base_coverage!r}, base_length={self.base_length!r}, "
                f"zoom_period={self.zoom_period!r}, zoom_factor={self.zoom_factor!r})")

    @property
    def base_unit_value(self) -> float:
        return self.base_coverage / self.base_length

    def validate(self, breakpoints: Breakpoints) -> None:
        if self.base_coverage <= 0 or self.base_length <= 0:
            raise ConfigurationError("Base coverage and base length must both be positive")
        if self.zoom_period <= 0:
            raise InvalidZoomPeriodError(f"Zoom period must be positive, got {self.zoom_period}")
        if self.zoom_factor is not None and self.zoom_factor < 1:
            raise InvalidZoomFactorError(f"Zoom factor must be at least 1 so unit value shrinks when zooming in, got {self.zoom_factor}")

    def factor_for(self, breakpoints: Breakpoints) -> float:
        if self.zoom_factor is not None:
            return self.zoom_factor
        return breakpoints.upper / breakpoints.lower

    def _periods(self, magnification: float) -> float:
        return snap_to_integer((magnification - 1) / self.zoom_period)

    def step(self, magnification: float) -> int:
        """Number of staircase steps between magnification 1 and magnification."""
        return int(staircase(self._periods(magnification), 1, 1.0))

    def compute(self, magnification: float, breakpoints: Breakpoints) -> Scale:
        periods = self._periods(magnification)
        unit_length = sawtooth(periods, breakpoints.lower, breakpoints.upper, 1.0)
        unit_value = self.base_unit_value / self.factor_for(breakpoints) ** self.step(magnification)
        return Scale(unit_length, unit_value)

    def category(self, magnification: float, breakpoints: Breakpoints) -> int:
        return self.step(magnification)

    def magnification_at(self, step: int, unit_length: float, breakpoints: Breakpoints) -> float:
        """Inverse of compute() for a step and a unit length inside [lower, upper)."""
        if breakpoints.upper > breakpoints.lower:
            phase = (unit_length - breakpoints.lower) / (breakpoints.upper - breakpoints.lower)
        else:
            phase = 0.0
        return 1 + self.zoom_period * (step + phase)

    def _reachable(self, unit_length: float, breakpoints: Breakpoints) -> bool:
        # the sawtooth never reaches its upper end
        if math.isclose(unit_length, breakpoints.lower):
            return True
        return breakpoints.lower < unit_length < breakpoints.upper

    def stretch(self, value_per_pixel: float, breakpoints: Breakpoints) -> Optional[float]:
        factor = self.factor_for(breakpoints)
        base = self.base_unit_value
        if factor == 1:
            candidates = [0]
        else:
            estimate = math.floor(math.log(base / (value_per_pixel * breakpoints.lower)) / math.log(factor))
            candidates = [estimate - 1, estimate, estimate + 1]
        for step in candidates:
            unit_length = base / factor ** step / value_per_pixel
            if not self._reachable(unit_length, breakpoints):
                continue
            unit_length = max(unit_length, breakpoints.lower)
            magnification = self.magnification_at(step, unit_length, breakpoints)
            if magnification > self.minimum_magnification:
                return magnification
        return None

    def fit(self, value_per_pixel: float, breakpoints: Breakpoints, unit_length: float) -> Optional[ScaleFit]:
        if unit_length >= breakpoints.upper > breakpoints.lower:
            unit_length = breakpoints.lower
        factor = self.factor_for(breakpoints)
        base = self.base_unit_value
        raw_value = value_per_pixel * unit_length
        if factor == 1:
            step = 0
            exact = math.isclose(raw_value, base)
        else:
            steps = math.log(base / raw_value) / math.log(factor)
            snapped = snap_to_integer(steps)
            exact = snapped.is_integer()
            step = int(snapped) if exact else math.floor(steps)
        magnification = self.magnification_at(step, unit_length, breakpoints)
        if magnification <= self.minimum_magnification:
            return None
        return ScaleFit(magnification, 0.0, unit_length, base / factor ** step, exact)
