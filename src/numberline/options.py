from dataclasses import dataclass
from typing import Optional, Sequence

from .errors import InvalidBreakpointsError, InvalidInitialMagnificationError, InvalidPatternError
from .labels import LabelStrategy
from .scales.base import Breakpoints, ScaleLaw


@dataclass(frozen=True)
class NumberLineOptions:
    """
    Configurational description of a number line.

    pattern is the tick pattern repeated across the whole line: each item is
    the height of one tick, so its length is the number of ticks per unit.
    The breakpoints bound the pixel length of one unit, and scale decides how
    magnification moves unit length and unit value between them.
    """

    pattern: Sequence[float]
    breakpoint_lower_bound: float
    breakpoint_upper_bound: float
    scale: ScaleLaw
    label_strategy: Optional[LabelStrategy] = None
    initial_magnification: float = 1.0
    initial_displacement: float = 0.0

    @property
    def breakpoints(self) -> Breakpoints:
        return Breakpoints(self.breakpoint_lower_bound, self.breakpoint_upper_bound)

    def validate(self) -> None:
        """Raise the matching ConfigurationError for the first inconsistency found."""
        if len(self.pattern) == 0:
            raise InvalidPatternError("Tick pattern must contain at least one tick")
        if any(height <= 0 for height in self.pattern):
            raise InvalidPatternError("Tick heights in the pattern must be positive")
        if self.breakpoint_lower_bound > self.breakpoint_upper_bound:
            raise InvalidBreakpointsError("Breakpoint lower bound cannot be greater than breakpoint upper bound")
        if self.breakpoint_lower_bound <= 0:
            raise InvalidBreakpointsError("Breakpoints must be positive pixel lengths")
        self.scale.validate(self.breakpoints)
        if self.initial_magnification < 0:
            raise InvalidInitialMagnificationError("Initial magnification can never be negative. Use a number between 0 and 1 to zoom out")
        if not self.scale.defined_at(self.initial_magnification):
            raise InvalidInitialMagnificationError(f"{self.scale!r} is not defined at magnification {self.initial_magnification}")
