"""
Display formatting helpers.

Numbers never raise here: anything that is not a finite number formats as
UNAVAILABLE.
"""

import math
from datetime import datetime, tzinfo
from typing import Optional

UNAVAILABLE = "--"

TIME_TOKENS = ("MM", "DD", "HH", "mm", "ss")


def _to_number(value) -> Optional[float]:
    if value is None:
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def fix_round(
    value,
    precision: int,
    show_sign: bool = False,
    show_grouping: bool = False,
    is_increase: Optional[bool] = None,
) -> str:
    """
    Format a number with a fixed count of fractional digits.

    Args:
        value: Number to format (None / NaN / non-numeric -> UNAVAILABLE)
        precision: Fractional digits
        show_sign: Prefix a sign character. With `is_increase` given the
            prefix is '+' or '-' from that flag alone (callers pass an
            abs()-ed magnitude); otherwise '+' is added to positive values.
        show_grouping: Thousands separators in the integer part
        is_increase: Direction computed by the caller

    Returns:
        Display string
    """
    number = _to_number(value)
    if number is None:
        return UNAVAILABLE

    text = format(number, f",.{precision}f" if show_grouping else f".{precision}f")

    if show_sign:
        if is_increase is not None:
            text = ("+" if is_increase else "-") + text
        elif number > 0:
            text = "+" + text

    return text


def format_timestamp(
    epoch_millis: int, pattern: str = "MM-DD HH:mm", tz: Optional[tzinfo] = None
) -> str:
    """
    Render a timestamp with MM / DD / HH / mm / ss tokens.

    Each token's first occurrence is replaced, in the order month, day,
    hour, minute, second. Local time unless `tz` is given.
    """
    moment = datetime.fromtimestamp(epoch_millis / 1000, tz=tz)
    values = (moment.month, moment.day, moment.hour, moment.minute, moment.second)

    text = pattern
    for token, number in zip(TIME_TOKENS, values):
        text = text.replace(token, f"{number:02d}", 1)
    return text
