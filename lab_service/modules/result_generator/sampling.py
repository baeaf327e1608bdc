import random
from decimal import ROUND_HALF_UP, Decimal
from typing import Callable

# same contract as random.uniform(a, b)
Uniform = Callable[[float, float], float]

OVERSHOOT = 0.1
DECIMALS = Decimal("0.1")


def sampling_spread(low: float, high: float) -> float:
    # zero-width ranges fall back to 10% of the lower bound, at least 1
    return (high - low) or max(1, low * 0.1)


def sampling_window(low: float, high: float) -> tuple[float, float]:
    """Reference range widened by 10% of the spread, floored at zero.

    Inverted bounds yield an inverted window; the ends are not swapped.
    """
    spread = sampling_spread(low, high)
    return max(0, low - spread * OVERSHOOT), high + spread * OVERSHOOT


def sample(low: float, high: float, uniform: Uniform = random.uniform) -> float:
    window_low, window_high = sampling_window(low, high)
    value = uniform(window_low, window_high)
    # halves round up, on the exact binary value of the draw
    return float(Decimal(value).quantize(DECIMALS, rounding=ROUND_HALF_UP))


def format_bound(value: float) -> str:
    """Render a bound the way it reads in a reference range: 4.0 -> "4"."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_reference(low: float, high: float) -> str:
    return f"{format_bound(low)} - {format_bound(high)}"
