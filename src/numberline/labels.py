import math
from typing import TYPE_CHECKING, Callable, Iterable, Optional, Protocol, Union

if TYPE_CHECKING:
    from .number_line import NumberLine


class TickMarkLabelStrategy(Protocol):
    """Supplies the label of each tick mark while a view model is built."""

    def label_for(self, value: float, index: int, position: float, number_line: "NumberLine") -> Optional[str]:
        """Label for a tick with this value, pattern index and position. None for blank ticks."""
        ...


LabelStrategy = Union[TickMarkLabelStrategy, Callable[[float, int, float, "NumberLine"], Optional[str]]]


def resolve_label_strategy(strategy: Optional[LabelStrategy]) -> Optional[Callable[[float, int, float, "NumberLine"], Optional[str]]]:
    """Accept either an object with label_for or a plain callable."""
    if strategy is None:
        return None
    label_for = getattr(strategy, "label_for", None)
    if label_for is not None:
        return label_for
    return strategy


SI_SUFFIXES = {
    15: 'P',
    12: 'T',
    9: 'G',
    6: 'M',
    3: 'k',
    0: '',
    -3: 'm',
    -6: 'µ',
    -9: 'n'
}


def si_format(value: float) -> str:
    """Format value with an SI suffix, e.g. 1500 -> '1.5k', 0.002 -> '2m'."""
    if value == 0:
        return "0"
    magnitude = int(math.floor(math.log10(abs(value)) / 3) * 3)
    magnitude = max(min(magnitude, 15), -9)
    scaled = value / (10 ** magnitude)
    suffix = SI_SUFFIXES[magnitude]
    return f"{int(scaled)}{suffix}" if float(scaled).is_integer() else f"{scaled:.6g}{suffix}"


def fixed_format(value: float) -> str:
    return f"{value:.0f}"


class PatternLabelStrategy:
    """Labels the ticks whose pattern index is in indices, blank otherwise."""

    def __init__(self, indices: Iterable[int] = (0,), formatter: Callable[[float], str] = fixed_format) -> None:
        self.indices = frozenset(indices)
        self.formatter = formatter

    def label_for(self, value: float, index: int, position: float, number_line: "NumberLine") -> Optional[str]:
        if index in self.indices:
            return self.formatter(value)
        return None


class SIPrefixLabelStrategy(PatternLabelStrategy):
    """Pattern based labels formatted with SI suffixes."""

    def __init__(self, indices: Iterable[int] = (0,)) -> None:
        super().__init__(indices, si_format)
