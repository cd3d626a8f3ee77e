import logging
from typing import TYPE_CHECKING, Hashable, Optional

if TYPE_CHECKING:
    from .number_line import NumberLine

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())


class ZoomSession:
    """
    Keeps the value under the cursor in sync over one zoom gesture.

    Renderers usually turn a cursor address (e.g. event.x) back into a value
    through the last view model. Over many wheel events that value drifts by
    fractions of a pixel. When two consecutive zooms come from the same
    address, the session moves the line so the value recorded first stays
    where the newly reported value is.

    The session forgets its recorded value when the scale category changes
    or when the number line was panned or zoomed by anyone else in between.
    Open one per gesture and drop it afterwards.
    """

    def __init__(self, number_line: "NumberLine") -> None:
        self.number_line = number_line
        self._last_value: Optional[float] = None
        self._last_address: Optional[float] = None
        self._last_category: Optional[Hashable] = None
        self._revision: Optional[int] = None

    @property
    def valid(self) -> bool:
        return self._last_value is not None and self._revision == self.number_line.revision

    @property
    def last_value(self) -> Optional[float]:
        return self._last_value

    @property
    def last_address(self) -> Optional[float]:
        return self._last_address

    def reset(self) -> None:
        self._last_value = None
        self._last_address = None
        self._last_category = None
        self._revision = None

    def zoom_around(self, value: float, address: float, delta: float) -> bool:
        """
        Magnify by delta around value, reported by the renderer at address.

        Returns False, leaving both the number line and the session untouched,
        when the number line rejects the zoom.
        """
        number_line = self.number_line
        if self._revision is not None and self._revision != number_line.revision:
            logger.debug("Zoom session invalidated: number line changed since last zoom")
            self.reset()
        if not number_line.zoom_around_value(value, delta):
            return False

        category = number_line.scale_category
        if self._last_category is not None and category != self._last_category:
            logger.debug("Zoom session invalidated: scale category %s -> %s", self._last_category, category)
            self._last_value = None

        if self._last_value is not None and address == self._last_address:
            correction = (value - self._last_value) * number_line.unit_length / number_line.unit_value
            number_line.pan_by(-correction)
        else:
            self._last_value = value
            self._last_address = address
        self._last_category = category
        self._revision = number_line.revision
        return True
