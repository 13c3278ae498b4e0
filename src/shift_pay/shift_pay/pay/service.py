from __future__ import annotations

import logging
import math
from typing import Optional, Union

from ..core.exceptions import InvalidRate, PayComputationError
from .calculator.base import PayCalculator
from .calculator.standard_calculator import StandardPayCalculator
from .model import PayResult, PaySummary
from .normalizer import normalize_shift
from .parser import parse_time

logger = logging.getLogger(__name__)

Rate = Union[int, float, str]

_DEFAULT_CALCULATOR = StandardPayCalculator()


def parse_rate(value: Rate) -> float:
    """Accept a number or a numeric string; reject negatives, NaN and infinity."""
    if isinstance(value, bool):
        raise InvalidRate(f"Invalid hourly rate {value!r}")
    try:
        rate = float(value)
    except (TypeError, ValueError):
        raise InvalidRate(f"Invalid hourly rate {value!r}") from None
    except OverflowError:
        # repr of a huge int can itself fail on the digit limit
        raise InvalidRate("Hourly rate is too large") from None
    if not math.isfinite(rate) or rate < 0:
        raise InvalidRate(f"Hourly rate must be a non-negative number, got {value!r}")
    return rate


def compute_pay_or_raise(
    start: str,
    end: str,
    hourly_rate: Rate,
    *,
    calculator: Optional[PayCalculator] = None,
) -> PaySummary:
    """Same as ``compute_pay`` but raises ``PayComputationError`` subclasses."""
    interval = normalize_shift(parse_time(start), parse_time(end))
    rate = parse_rate(hourly_rate)
    return (calculator or _DEFAULT_CALCULATOR).summarize(interval, rate)


def compute_pay(
    start: str,
    end: str,
    hourly_rate: Rate,
    *,
    calculator: Optional[PayCalculator] = None,
) -> PayResult:
    """Compute pay for one shift. Failures come back as values, never raised."""
    try:
        summary = compute_pay_or_raise(start, end, hourly_rate, calculator=calculator)
    except PayComputationError as e:
        logger.debug("pay computation failed for %r-%r: %s", start, end, e)
        return PayResult.error(e.kind, str(e))
    return PayResult.success(summary)
