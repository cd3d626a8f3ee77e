from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional, Tuple

if TYPE_CHECKING:
    from .number_line import NumberLine


def pattern_index_for(ordinal: int, tick_count: int) -> int:
    """
    Pattern index of the tick `ordinal` ticks away from the origin.

    The pattern is mirrored around the origin: index 0 always sits on value 0
    and indices count down towards the origin from the negative side, then up
    past it. Ordinal -1 and ordinal 1 therefore share index 1.
    """
    return abs(ordinal) % tick_count


@dataclass(frozen=True)
class TickMark:
    """One tick on the rendered number line."""
    value: float
    position: float
    height: float
    pattern_index: int
    label: Optional[str]


@dataclass(frozen=True)
class NumberLineViewModel:
    """Snapshot of what a number line looks like over a given pixel length."""
    offset: float
    leftover_space: float
    gap: float
    tick_marks: Tuple[TickMark, ...]
    length: float
    starting_value: float
    ending_value: float
    number_line: "NumberLine" = field(repr=False, compare=False)

    @property
    def max_height(self) -> float:
        """Tallest tick in the pattern, handy for scaling heights to pixels."""
        return self.number_line.biggest_pattern_value

    def labelled_tick_marks(self) -> Tuple[TickMark, ...]:
        return tuple(tick for tick in self.tick_marks if tick.label is not None)
