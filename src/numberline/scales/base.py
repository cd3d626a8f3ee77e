from abc import ABC, abstractmethod
from typing import Hashable, NamedTuple, Optional


class Breakpoints(NamedTuple):
    """Minimum and maximum pixel length a unit may have."""
    lower: float
    upper: float

    def clamp(self, length: float) -> float:
        return max(self.lower, min(length, self.upper))

    def contains(self, length: float) -> bool:
        return self.lower <= length <= self.upper


class Scale(NamedTuple):
    """Pixel length of one unit and the value that unit represents."""
    unit_length: float
    unit_value: float

    @property
    def pixels_per_value(self) -> float:
        return self.unit_length / self.unit_value


class ScaleFit(NamedTuple):
    """Result of fitting a value range into a pixel length."""
    magnification: float
    displacement: float
    unit_length: float
    unit_value: float
    exact: bool


class ScaleLaw(ABC):
    """
    Maps a magnification to a (unit length, unit value) pair.

    Magnification above 1 always means zoomed in. Implementations are
    stateless: every method is a pure function of its arguments and the
    law's own parameters, so one law may be shared by several number lines.
    """

    # Zooming to a magnification at or below this value is rejected
    minimum_magnification: float = 0.0

    def validate(self, breakpoints: Breakpoints) -> None:
        """Raise a ConfigurationError if the law cannot work with these breakpoints."""

    def defined_at(self, magnification: float) -> bool:
        """Whether compute() is defined for magnification (zoom limits aside)."""
        return magnification >= 0

    def admits(self, magnification: float, breakpoints: Breakpoints) -> bool:
        """Whether a zoom may land on magnification."""
        return magnification > self.minimum_magnification

    @abstractmethod
    def compute(self, magnification: float, breakpoints: Breakpoints) -> Scale:
        """Unit length and unit value at magnification, in constant time."""

    @abstractmethod
    def category(self, magnification: float, breakpoints: Breakpoints) -> Hashable:
        """Identifies the scale regime; changes whenever unit value steps."""

    @abstractmethod
    def stretch(self, value_per_pixel: float, breakpoints: Breakpoints) -> Optional[float]:
        """Magnification at which one pixel represents exactly value_per_pixel, None if unreachable."""

    @abstractmethod
    def fit(self, value_per_pixel: float, breakpoints: Breakpoints, unit_length: float) -> Optional[ScaleFit]:
        """
        Best magnification for showing value_per_pixel around the target unit_length.

        The returned fit carries a zero displacement; the caller positions it.
        `exact` is True only when the unit value needed at the target unit
        length is one of the law's step values. Returns None when nothing
        representable fits.
        """
