"""
SI prefix codecs.

Exponents are decimal. Only the prefixes below are recognized; there is
no deca/hecto and nothing past yotta/atto.
"""

import math

from physanalysis.errors import InvalidSIPrefixError

PREFIX_TO_EXP: dict[str, int] = {
    "k": 3, "M": 6, "G": 9, "T": 12, "P": 15, "E": 18, "Z": 21, "Y": 24,
    "a": -18, "f": -15, "p": -12, "n": -9, "u": -6, "m": -3, "c": -2, "d": -1,
}
EXP_TO_PREFIX: dict[int, str] = {exp: prefix for prefix, exp in PREFIX_TO_EXP.items()}

MIN_EXP = min(EXP_TO_PREFIX)
MAX_EXP = max(EXP_TO_PREFIX)


def prefix_exponent(prefix: str) -> int:
    """
    Return the decimal exponent of the first character of ``prefix``.

    Raises:
        ValueError: ``prefix`` is empty
        InvalidSIPrefixError: the character is not an SI prefix
    """
    if not prefix:
        raise ValueError("SI prefix cannot be empty.")
    try:
        return PREFIX_TO_EXP[prefix[0]]
    except KeyError:
        raise InvalidSIPrefixError(f"Invalid SI prefix: {prefix}") from None


def read_si_prefix(prefix: str) -> float:
    """
    Read a prefix such as the "k" of "kg" and return its factor.

    Example:
        read_si_prefix("k") -> 1000.0, read_si_prefix("mm") -> 0.001
    """
    return 10.0 ** prefix_exponent(prefix)


def si_prefix_index(value: float) -> int:
    """
    Select the exponent of the prefix used to display ``value``.

    The decimal exponent is ``floor(log10(|value|))``. Within [-3, 3] it is
    used as is when a prefix exists for it (m, c, d, k) and mapped to 0
    otherwise; outside that band it is snapped down to a multiple of 3 and
    clamped to the a..Y range. Exact powers of ten belong to the higher
    prefix, so 1000.0 selects "k" and 999.9 selects no prefix.
    """
    if value == 0 or not math.isfinite(value):
        return 0
    exponent = math.floor(math.log10(abs(value)))
    if -3 <= exponent <= 3:
        return exponent if exponent in EXP_TO_PREFIX else 0
    index = (exponent // 3) * 3
    return max(MIN_EXP, min(MAX_EXP, index))


def write_si_prefix(value: float) -> str:
    """
    Format ``value`` with an SI prefix and a 3.3-digit mantissa.

    Ex: 1234 -> "001.234 k", 123456 -> "123.456 k", 1234567 -> "001.235 M"

    The mantissa is rounded to three decimals after the prefix is chosen,
    so 999.9996 renders as "1000.000" without a prefix.
    """
    index = si_prefix_index(value)
    mantissa = value / 10.0 ** index
    if index == 0:
        return f"{mantissa:07.3f}"
    return f"{mantissa:07.3f} {EXP_TO_PREFIX[index]}"


def powered_prefix_index(value: float, power: float) -> int:
    """
    Select the prefix exponent for a unit symbol raised to ``power``.

    A prefix on ``symbol^power`` scales the magnitude by
    ``10 ** (index * power)``, so "km^2" is 1e6 m^2 and "ms^-1" is
    1e3 s^-1. The index is the multiple of 3 that leaves the smallest
    mantissa of at least 1, clamped to the a..Y range. Power 1 defers to
    ``si_prefix_index``.
    """
    if power == 1:
        return si_prefix_index(value)
    if value == 0 or power == 0 or not math.isfinite(value):
        return 0
    scaled = math.floor(math.log10(abs(value))) / power
    if power > 0:
        index = math.floor(scaled / 3) * 3
    else:
        index = math.ceil(scaled / 3) * 3
    return max(MIN_EXP, min(MAX_EXP, index))
