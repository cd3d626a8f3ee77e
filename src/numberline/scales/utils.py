import math


def range_mapper(x: float, a: float, b: float, c: float, d: float) -> float:
    """Linearly map x from [a, b] to [c, d]. No clamping, a must differ from b."""
    return ((x - a) / (b - a)) * (d - c) + c


def sawtooth(x: float, lower: float, upper: float, period: float) -> float:
    """Periodic ramp from lower to upper, restarting every period. Floored, so negative x is fine."""
    phase = (x / period) - math.floor(x / period)
    return lower + (upper - lower) * phase


def staircase(x: float, step_height: float, period: float) -> float:
    """Step function rising by step_height every period: floor(x / period) * step_height."""
    return math.floor(x / period) * step_height


def snap_to_integer(x: float, tolerance: float = 1e-9) -> float:
    """Return the nearest integer when x lies within an absolute tolerance of it, x otherwise."""
    nearest = round(x)
    if abs(x - nearest) <= tolerance:
        return float(nearest)
    return x
