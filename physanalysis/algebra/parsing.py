"""
Lexing and resolution of quantity literals and unit expressions.

Grammar:

    quantity   := number [attached-unit] (" " unit-token)*
    unit-token := symbol ["^" power]

A unit symbol is resolved in this order:

1. plain unit symbol table ("m", "lb", "°C")
2. composite unit symbol table ("N", "Pa"); its magnitude and vector
   are substituted, raised to the token's power
3. one leading SI prefix stripped ("km", "kN"), then steps 1 and 2 on
   the remainder; the magnitude is scaled by the prefix factor raised
   to the token's power

Anything else raises UnitNotFoundError.
"""

from __future__ import annotations

import logging
from typing import Optional

from physanalysis.algebra.dimension_vector import QuantityDimension
from physanalysis.algebra.prefixes import prefix_exponent
from physanalysis.catalog.units import UnitRegistry, ureg
from physanalysis.errors import InvalidSIPrefixError, MalformedQuantityError, UnitNotFoundError

logger = logging.getLogger(__name__)

DIGITS = "0123456789"


def split_leading_number(token: str) -> tuple[str, str]:
    """
    Split a token such as "100kg" into its number and unit parts.

    The number is an optional sign, digits and decimal points, and an
    exponent when "e"/"E" is followed by a digit or a signed digit, so
    "2.5e3m" splits as ("2.5e3", "m") but "5em" as ("5", "em").

    Returns:
        Tuple of (number_text, rest); either may be empty
    """
    i, n = 0, len(token)
    if i < n and token[i] in "+-":
        i += 1
    while i < n and (token[i] in DIGITS or token[i] == "."):
        i += 1
    if i < n and token[i] in "eE":
        j = i + 1
        if j < n and token[j] in "+-":
            j += 1
        if j < n and token[j] in DIGITS:
            i = j
            while i < n and token[i] in DIGITS:
                i += 1
    return token[:i], token[i:]


def parse_number(text: str) -> float:
    """Parse a magnitude, raising MalformedQuantityError on failure."""
    try:
        return float(text)
    except ValueError:
        raise MalformedQuantityError(f"Invalid number: {text!r}") from None


def parse_power(text: str) -> float:
    """Parse the signed decimal after "^" in a unit token."""
    try:
        return float(text)
    except ValueError:
        raise MalformedQuantityError(f"Invalid unit power: {text!r}") from None


def _resolve_symbol(
    symbol: str,
    power: float,
    registry: UnitRegistry,
) -> Optional[tuple[float, QuantityDimension]]:
    unit = registry.find(symbol)
    if unit is not None:
        return 1.0, QuantityDimension([(unit, power)])
    composite = registry.find_composite(symbol)
    if composite is not None:
        return composite.value ** power, composite.dimension * power
    return None


def resolve_unit_token(
    token: str,
    registry: Optional[UnitRegistry] = None,
) -> tuple[float, QuantityDimension]:
    """
    Resolve one ``symbol[^power]`` token.

    Args:
        token: Unit token, e.g. "m", "s^-2", "kN", "cm^2"
        registry: Symbol tables to use (shared registry by default)

    Returns:
        Tuple of (magnitude factor, dimension vector) contributed by the token

    Raises:
        UnitNotFoundError: the symbol resolves to nothing
        MalformedQuantityError: empty symbol or invalid power
    """
    registry = registry or ureg
    symbol, caret, power_text = token.partition("^")
    if not symbol:
        raise MalformedQuantityError(f"Missing unit symbol in {token!r}")
    power = parse_power(power_text) if caret else 1.0

    resolved = _resolve_symbol(symbol, power, registry)
    if resolved is not None:
        return resolved

    if len(symbol) > 1:
        try:
            exponent = prefix_exponent(symbol)
        except InvalidSIPrefixError as err:
            raise UnitNotFoundError(f"Unit {symbol} does not exist.") from err
        resolved = _resolve_symbol(symbol[1:], power, registry)
        if resolved is not None:
            factor, vector = resolved
            logger.debug("Resolved %s as prefix %s + %s", symbol, symbol[0], symbol[1:])
            return factor * (10.0 ** exponent) ** power, vector

    raise UnitNotFoundError(f"Unit {symbol} does not exist.")


def parse_unit_tokens(
    tokens: list[str],
    registry: Optional[UnitRegistry] = None,
) -> tuple[float, QuantityDimension]:
    """Fold a list of unit tokens into a magnitude factor and a vector."""
    factor = 1.0
    vector = QuantityDimension()
    for token in tokens:
        token_factor, token_vector = resolve_unit_token(token, registry)
        factor *= token_factor
        vector = vector + token_vector
    return factor, vector


def parse_unit_expression(
    text: str,
    registry: Optional[UnitRegistry] = None,
) -> tuple[float, QuantityDimension]:
    """Parse a space-separated unit expression such as "kg m s^-2"."""
    return parse_unit_tokens(text.split(), registry)


def parse_quantity(
    text: str,
    registry: Optional[UnitRegistry] = None,
) -> tuple[float, QuantityDimension]:
    """
    Parse a quantity literal such as "123.456 kg m s^-2" or "100kg".

    Returns:
        Tuple of (magnitude, dimension vector). Prefixes and composite
        units are folded into the magnitude, so "1 kg" is (1000.0, g).

    Raises:
        MalformedQuantityError: empty text or no leading number
        UnitNotFoundError: an unknown unit symbol
    """
    tokens = text.split()
    if not tokens:
        raise MalformedQuantityError("Quantity text is empty")

    number, attached = split_leading_number(tokens[0])
    if not number:
        raise MalformedQuantityError(f"Quantity must start with a number: {text!r}")
    unit_tokens = tokens[1:]
    if attached:
        unit_tokens.insert(0, attached)

    value = parse_number(number)
    factor, vector = parse_unit_tokens(unit_tokens, registry)
    return value * factor, vector
