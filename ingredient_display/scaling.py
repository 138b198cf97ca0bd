import logging
import math
import re
from enum import Enum
from fractions import Fraction
from typing import NamedTuple, Optional

log = logging.getLogger(__name__)

FRAC_MIN_DENOM = 10
DECIMAL_PRECISION = 3

SERVINGS_NUM = re.compile(r"(\d+[\.,]?\d*)")


class RenderMode(str, Enum):
    MARKUP = "markup"
    PLAIN = "plain"

    @classmethod
    def of(cls, value):
        """Accepts a RenderMode, its value, or a bool (True means markup)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            return cls.MARKUP if value else cls.PLAIN
        return cls(value)


class Fraction3(NamedTuple):
    whole: int
    numerator: int
    denominator: int


def coerce_quantity(value) -> Optional[float]:
    """Numbers and numeric-looking strings become floats, anything else None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        num = float(value)
    except (TypeError, ValueError):
        log.debug("ignoring non-numeric quantity %r", value)
        return None
    return num if math.isfinite(num) else None


def extract_servings_num(servings_raw):
    if not servings_raw:
        return None
    m = SERVINGS_NUM.search(str(servings_raw))
    return float(m.group(1).replace(",", ".")) if m else None


def servings_scale(base, target) -> float:
    base, target = coerce_quantity(base), coerce_quantity(target)
    if not base or not target or base < 0 or target < 0:
        return 1.0
    return target / base


def to_fraction(value: float, max_denominator: int = FRAC_MIN_DENOM, simplify: bool = True) -> Fraction3:
    whole = math.floor(value)
    rest = value - whole
    if simplify:
        part = Fraction(rest).limit_denominator(max_denominator)
        num, den = part.numerator, part.denominator
    else:
        num, den = round(rest * max_denominator), max_denominator
    # 0.97 with a cap of 10 lands on 1/1
    if num >= den:
        whole += num // den
        num = num % den
        den = den if not simplify or num else 1
    return Fraction3(int(whole), int(num), int(den))


def _format_decimal(value: float) -> str:
    rounded = float(f"{value:.{DECIMAL_PRECISION}g}")
    return str(int(rounded)) if rounded.is_integer() else repr(rounded)


def format_quantity(raw_quantity, scale: float, use_fraction: bool, mode=RenderMode.MARKUP,
                    converter=to_fraction) -> str:
    """Render ``raw_quantity * scale`` as a decimal or a vulgar fraction.

    The result is not sanitized; in markup mode it carries ``sup``/``sub``
    markup for the fraction part. An absent or zero quantity yields "".
    """
    quantity = coerce_quantity(raw_quantity)
    if not quantity:
        return ""
    scaled = quantity * scale

    if not use_fraction:
        min_val = 10 ** -DECIMAL_PRECISION
        return _format_decimal(scaled) if scaled >= min_val else f"< {min_val}"

    min_val = 1 / FRAC_MIN_DENOM
    under_min = not scaled >= min_val
    whole, num, den = (0, 1, FRAC_MIN_DENOM) if under_min else converter(scaled, FRAC_MIN_DENOM, True)

    txt = str(whole) if whole and whole > 0 else ""
    if num > 0:
        if RenderMode.of(mode) is RenderMode.MARKUP:
            txt += f"<sup>{num}</sup><span>&frasl;</span><sub>{den}</sub>"
        else:
            txt += f"{' ' if txt else ''}{num}/{den}"
    elif not txt:
        log.debug("fraction of %s rendered empty", scaled)
    return f"< {txt}" if under_min else txt
