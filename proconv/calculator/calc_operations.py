#!/usr/bin/env python3
"""
Pure Python conversion and calculation functions.

Six operations, each a pure function of its arguments:
    - convert_temperature()  — Celsius ↔ Fahrenheit via explicit formulas
    - convert_number_base()  — Binary/decimal/octal/hex via integer rendering
    - compute_logarithm()    — log10, ln, log2
    - convert_currency()     — Fixed directional exchange rates
    - convert_length()       — Meters ↔ feet
    - calculate()            — Arithmetic and degree-based trigonometry

Unit and operator codes are single letters matched case-insensitively.
Failures raise a ConverterError subclass; the dispatcher turns them into
result values.
"""

import math
import re
from typing import NamedTuple, Optional

from proconv.calculator.conversion_tables import (
    TEMPERATURE_UNITS, LENGTH_UNITS, LENGTH_FACTORS, CURRENCIES, EXCHANGE_RATES,
    NUMBER_BASES, DIGITS, MAX_MAGNITUDE, BINARY_OPERATORS, UNARY_OPERATORS,
    normalize_code
)
from proconv.calculator.exceptions import (
    InvalidUnit, InvalidFormat, OutOfRange, DomainError, UnsupportedPair,
    DivisionByZero, UndefinedResult, InvalidOperation
)

# Tangent is treated as undefined when |cos| falls below this
COS_ZERO_TOLERANCE = 1e-12

_DECIMAL_INTEGER = re.compile( r"^\+?[0-9]+$" )
_DECIMAL_NUMBER  = re.compile( r"^[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?$" )


class BaseConversion( NamedTuple ):
    """Parsed integer and its rendering in the target base."""

    value : int
    text  : str


def convert_temperature( value, from_unit, to_unit ):
    """
    Convert a temperature between Celsius and Fahrenheit.

    Requires:
        - value is a real number
        - from_unit and to_unit are unit codes (C or F, any case)

    Ensures:
        - Returns value * 9/5 + 32 for C → F
        - Returns (value - 32) * 5/9 for F → C
        - Returns value unchanged when both units are the same

    Raises:
        - InvalidUnit if either code is not C or F
        - OutOfRange if the converted value overflows
    """
    from_code = normalize_code( from_unit )
    to_code   = normalize_code( to_unit )

    if from_code not in TEMPERATURE_UNITS or to_code not in TEMPERATURE_UNITS:
        raise InvalidUnit( "Invalid temperature units (use C or F)", from_unit=from_code, to_unit=to_code )

    if from_code == to_code:
        return value

    if from_code == "C":
        return _finite_conversion( value * 9.0 / 5.0 + 32.0, value )

    return _finite_conversion( ( value - 32.0 ) * 5.0 / 9.0, value )


def convert_number_base( raw_value, from_base, to_base ):
    """
    Convert a number written in one base into another base.

    The input is parsed completely before the target base is looked at, so a
    malformed number is reported even when the target base is also invalid.
    Binary, octal and hex inputs are parsed as integers; decimal inputs may
    carry a fraction, which is truncated toward zero. The result is rendered
    straight from the parsed integer.

    Requires:
        - raw_value is a string
        - from_base and to_base are base codes (B, D, O, H, any case)

    Ensures:
        - Returns BaseConversion( value=<parsed int>, text=<digits in to_base> )
        - text uses digits 0-9A-F, most significant first, "0" for zero

    Raises:
        - InvalidUnit if from_base or to_base is not B, D, O or H
        - InvalidFormat if raw_value does not parse in from_base
        - OutOfRange if the number is negative or exceeds a signed 64-bit integer
    """
    value   = parse_number( raw_value, from_base )
    to_code = normalize_code( to_base )

    if to_code not in NUMBER_BASES:
        raise InvalidUnit( "Invalid target base (use B, D, O, H)", from_unit=normalize_code( from_base ), to_unit=to_code )

    return BaseConversion( value=value, text=render_in_base( value, NUMBER_BASES[ to_code ] ) )


def parse_number( raw_value, base ):
    """
    Parse a string in the given base into a non-negative integer.

    Requires:
        - raw_value is a string
        - base is a base code (B, D, O, H, any case)

    Ensures:
        - Returns an int in the range 0 .. 2**63 - 1
        - Decimal fractions are truncated toward zero

    Raises:
        - InvalidUnit for an unknown base code
        - InvalidFormat for empty, malformed or non-finite input
        - OutOfRange for negative or oversized values
    """
    code = normalize_code( base )
    if code not in NUMBER_BASES:
        raise InvalidUnit( "Invalid source base (use B, D, O, H)", from_unit=code )

    text = ( raw_value or "" ).strip()
    if not text:
        raise InvalidFormat( "Invalid number format for the specified base", raw_value=raw_value, base=code )

    if code == "D":
        value = _parse_decimal( text )
    else:
        value = _parse_radix( text, code )

    if value < 0:
        raise OutOfRange( "Negative numbers are not supported for base conversion", raw_value=text, base=code )

    if value > MAX_MAGNITUDE:
        raise OutOfRange( "Number out of range for conversion", raw_value=text, base=code )

    return value


def _parse_decimal( text ):
    # Whole numbers skip the float path so large values keep every digit
    if _DECIMAL_INTEGER.match( text ):
        return int( text )

    # ASCII digits only; float() alone would also take "1_000" and other scripts
    if not _DECIMAL_NUMBER.match( text ):
        raise InvalidFormat( "Invalid number format for the specified base", raw_value=text, base="D" )

    number = float( text )

    if not math.isfinite( number ):
        raise InvalidFormat( "Invalid number format for the specified base", raw_value=text, base="D" )

    # -0.5 would truncate to zero; any negative input is refused instead
    if number < 0:
        raise OutOfRange( "Negative numbers are not supported for base conversion", raw_value=text, base="D" )

    return int( number )


def _parse_radix( text, code ):
    radix   = NUMBER_BASES[ code ]
    allowed = DIGITS[ :radix ]
    body    = text[ 1: ] if text[ 0 ] in "+-" else text

    if not body or any( ch not in allowed for ch in body.upper() ):
        raise InvalidFormat( "Invalid number format for the specified base", raw_value=text, base=code )

    return int( text, radix )


def render_in_base( value, radix ):
    """
    Render a non-negative integer using repeated remainder extraction.

    Requires:
        - value is a non-negative int
        - radix is 2, 8, 10 or 16

    Ensures:
        - Returns "0" for zero
        - Returns digits most significant first, upper-case hex letters
    """
    if value == 0:
        return "0"

    digits = []
    while value > 0:
        value, remainder = divmod( value, radix )
        digits.append( DIGITS[ remainder ] )

    return "".join( reversed( digits ) )


def compute_logarithm( value, log_type ):
    """
    Compute a logarithm of the given type.

    Requires:
        - value is a real number
        - log_type is L (log10), N (natural) or B (log2), any case

    Ensures:
        - Returns the logarithm of value

    Raises:
        - DomainError if value <= 0 (checked before the log type)
        - InvalidUnit if log_type is not L, N or B
    """
    if value <= 0:
        raise DomainError( "Logarithm undefined for non-positive numbers", value=value )

    code = normalize_code( log_type )

    if code == "L":
        return math.log10( value )
    if code == "N":
        return math.log( value )
    if code == "B":
        return math.log2( value )

    raise InvalidUnit( "Invalid log type (use L, N, B)", from_unit=code )


def convert_currency( amount, from_currency, to_currency ):
    """
    Convert an amount using the fixed directional exchange rates.

    Only INR→USD, USD→INR, USD→EUR, USD→GBP, EUR→USD and GBP→USD have a
    rate. There is no triangulation through USD.

    Requires:
        - amount is a real number
        - from_currency and to_currency are currency codes (I, U, E, G)

    Ensures:
        - Returns amount * rate for a listed pair
        - Returns amount unchanged for the same known currency

    Raises:
        - UnsupportedPair for unknown codes and unlisted pairs
        - OutOfRange if the converted amount overflows
    """
    from_code = normalize_code( from_currency )
    to_code   = normalize_code( to_currency )

    rate = EXCHANGE_RATES.get( ( from_code, to_code ) )
    if rate is not None:
        return _finite_conversion( amount * rate, amount )

    if from_code == to_code and from_code in CURRENCIES:
        return amount

    raise UnsupportedPair( "Invalid or unsupported currency (use I, U, E, G)", from_currency=from_code, to_currency=to_code )


def convert_length( length, from_unit, to_unit ):
    """
    Convert a length between meters and feet.

    Requires:
        - length is a real number
        - from_unit and to_unit are M or F, any case

    Ensures:
        - Returns length * 3.28084 for M → F, length * 0.3048 for F → M
        - Returns length unchanged for the same unit

    Raises:
        - InvalidUnit if either code is not M or F
        - OutOfRange if the converted length overflows
    """
    from_code = normalize_code( from_unit )
    to_code   = normalize_code( to_unit )

    if from_code not in LENGTH_UNITS or to_code not in LENGTH_UNITS:
        raise InvalidUnit( "Invalid length units (use M or F)", from_unit=from_code, to_unit=to_code )

    if from_code == to_code:
        return length

    return _finite_conversion( length * LENGTH_FACTORS[ ( from_code, to_code ) ], length )


def calculate( operand1, operator, operand2: Optional[float] = None ):
    """
    Evaluate a binary arithmetic or unary trigonometric operation.

    Trigonometric operators read operand1 in degrees and ignore operand2.

    Requires:
        - operand1 is a real number
        - operator is one of + - * / ^ S C T (letters any case)
        - operand2 is a real number for binary operators

    Ensures:
        - Returns the real, finite result of the operation

    Raises:
        - DivisionByZero for "/" with operand2 == 0
        - UndefinedResult for tangent where cosine is zero, and for any
          arithmetic result that is complex, infinite or NaN
        - InvalidOperation for an unknown operator, or a binary operator
          without operand2
    """
    op = normalize_code( operator )

    if op in UNARY_OPERATORS:
        return _trig( operand1, op )

    if op not in BINARY_OPERATORS:
        raise InvalidOperation( "Invalid operation (use +, -, *, /, ^, S, C, T)", operator=op )

    if operand2 is None:
        raise InvalidOperation( f"Operation '{op}' requires a second number", operator=op )

    if op == "+":
        result = operand1 + operand2
    elif op == "-":
        result = operand1 - operand2
    elif op == "*":
        result = operand1 * operand2
    elif op == "/":
        if operand2 == 0:
            raise DivisionByZero( dividend=operand1 )
        result = operand1 / operand2
    else:
        try:
            result = math.pow( operand1, operand2 )
        except ( ValueError, OverflowError ):
            raise UndefinedResult( "Power has no real finite result", operator=op, operand=operand1 )

    if not math.isfinite( result ):
        raise UndefinedResult( "Result is not a finite number", operator=op, operand=operand1 )

    return result


def _finite_conversion( result, value ):
    if not math.isfinite( result ):
        raise OutOfRange( "Number out of range for conversion", raw_value=value )
    return result


def _trig( degrees, op ):
    radians = degrees * math.pi / 180.0

    if op == "S":
        return math.sin( radians )
    if op == "C":
        return math.cos( radians )

    # cos( 90° ) evaluates to ~6e-17, not zero, so odd multiples of 90 are caught exactly
    if degrees % 180 == 90 or abs( math.cos( radians ) ) < COS_ZERO_TOLERANCE:
        raise UndefinedResult( "Tan undefined", operator=op, operand=degrees )

    return math.tan( radians )


def quick_smoke_test():
    """Module-level smoke test."""

    print( "Testing calc_operations module..." )
    passed = True

    try:
        # ── Converters ──
        result = convert_temperature( 100, "c", "f" )
        assert result == 212.0
        print( f"  ✓ convert_temperature: 100 C → {result} F" )

        result = convert_number_base( "255", "D", "H" )
        assert result.text == "FF"
        print( f"  ✓ convert_number_base: 255 D → {result.text} H" )

        result = compute_logarithm( 100, "L" )
        assert result == 2.0
        print( f"  ✓ compute_logarithm: log10( 100 ) → {result}" )

        result = convert_currency( 100, "I", "U" )
        assert abs( result - 1.2 ) < 1e-9
        print( f"  ✓ convert_currency: 100 INR → {result} USD" )

        result = convert_length( 1, "M", "F" )
        assert abs( result - 3.28084 ) < 1e-9
        print( f"  ✓ convert_length: 1 M → {result} F" )

        # ── Calculator ──
        result = calculate( 2, "^", 10 )
        assert result == 1024
        print( f"  ✓ calculate: 2 ^ 10 → {result}" )

        try:
            calculate( 90, "T" )
            assert False, "Should have raised UndefinedResult"
        except UndefinedResult:
            pass
        print( "  ✓ calculate: tan( 90 ) raises UndefinedResult" )

        print( "✓ calc_operations module smoke test PASSED" )

    except Exception as e:
        print( f"✗ calc_operations module smoke test FAILED: {e}" )
        import traceback
        traceback.print_exc()
        passed = False

    return passed


if __name__ == "__main__":
    success = quick_smoke_test()
    exit( 0 if success else 1 )
