"""
Numeric input validation for values coming from the presentation layer.

Edits typed by the user are never rejected: invalid or out-of-range values are
corrected to the nearest valid bound and a warning is logged, so NaN or
negative numbers never reach the stored state.
"""

import math
from typing import Any, Optional

from catchery import log_warning

from .errors import InvalidNumericInputError


def coerce_number(value: Any) -> Optional[float]:
    """
    Converts a raw input value to a finite float.

    Args:
        value (Any):
            The raw value (int, float or numeric string).

    Returns:
        Optional[float]:
            The finite float value, or None if the value is not a usable
            number (None, NaN, infinity, booleans, non-numeric strings).

    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def ensure_int_in_range(
    value: Any,
    param_name: str,
    min_val: int,
    max_val: Optional[int] = None,
    context: Optional[dict[str, Any]] = None,
) -> int:
    """
    Ensures a value is an integer within the specified range, correcting if
    needed. Logs a warning for corrected values but continues execution.

    Args:
        value (Any):
            The value to validate.
        param_name (str):
            Human-readable parameter name for warning messages.
        min_val (int):
            Minimum allowed value (inclusive).
        max_val (Optional[int]):
            Maximum allowed value (inclusive), None for no maximum.
        context (Optional[dict[str, Any]]):
            Additional context for logging.

    Returns:
        int:
            The corrected integer value.

    """
    number = coerce_number(value)
    if number is None:
        log_warning(
            f"{param_name} is not a number, got: {value!r}, correcting to {min_val}",
            {**(context or {}), "param_name": param_name, "corrected_to": min_val},
        )
        return min_val

    corrected = math.floor(number)
    if corrected < min_val:
        corrected = min_val
    elif max_val is not None and corrected > max_val:
        corrected = max_val

    if corrected != number:
        range_desc = f">= {min_val}" if max_val is None else f"between {min_val} and {max_val}"
        log_warning(
            f"{param_name} must be integer {range_desc}, got: {value!r}, correcting to {corrected}",
            {
                **(context or {}),
                "param_name": param_name,
                "min_val": min_val,
                "max_val": max_val,
                "corrected_to": corrected,
            },
        )
    return corrected


def ensure_non_negative_int(
    value: Any, param_name: str, context: Optional[dict[str, Any]] = None
) -> int:
    """Shorthand for ensure_int_in_range with a lower bound of zero."""
    return ensure_int_in_range(value, param_name, 0, None, context)


def require_non_negative_number(value: Any, param_name: str) -> float:
    """
    Returns the value as a finite, non-negative number.

    Raises:
        InvalidNumericInputError:
            If the value is missing, not a number, NaN, infinite or negative.

    """
    number = coerce_number(value)
    if number is None or number < 0:
        raise InvalidNumericInputError(
            f"{param_name} must be a non-negative number, got: {value!r}"
        )
    return number
