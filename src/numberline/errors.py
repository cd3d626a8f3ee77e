class NumberLineError(Exception):
    """Base class for every error raised by the number line engine."""


class ConfigurationError(NumberLineError, ValueError):
    """Options supplied at construction time are inconsistent."""


class InvalidPatternError(ConfigurationError):
    pass


class InvalidBreakpointsError(ConfigurationError):
    pass


class InvalidZoomPeriodError(ConfigurationError):
    pass


class InvalidZoomFactorError(ConfigurationError):
    pass


class InvalidStretchModuloError(ConfigurationError):
    pass


class InvalidInitialMagnificationError(ConfigurationError):
    pass


class InvalidSubdivisionError(ConfigurationError):
    pass


class InvalidArgumentError(NumberLineError, ValueError):
    """A query or mutation was called with arguments it cannot work with."""


class InvalidRangeError(InvalidArgumentError):
    pass


class InvalidStretchTargetError(InvalidArgumentError):
    pass
