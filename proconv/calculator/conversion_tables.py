#!/usr/bin/env python3
"""
Unit codes, fixed factors and display labels for the converter operations.

Every unit is addressed by a single-letter code, matched case-insensitively.
Length and currency are ratio-based with directional factors; temperature is
handled via explicit formulas in calc_operations. Exchange rates are fixed
constants and are not read from configuration.

No external libraries required, pure Python dicts.
"""

# ─────────────────────────────────────────────────────────────────────
# Temperature: not ratio-based, handled via formulas
# ─────────────────────────────────────────────────────────────────────
TEMPERATURE_UNITS = {
    "C" : "celsius",
    "F" : "fahrenheit",
}

# ─────────────────────────────────────────────────────────────────────
# Length: directional factors, (from, to) → multiplier
# ─────────────────────────────────────────────────────────────────────
LENGTH_UNITS = {
    "M" : "meter",
    "F" : "foot",
}

LENGTH_FACTORS = {
    ( "M", "F" ) : 3.28084,
    ( "F", "M" ) : 0.3048,
}

# ─────────────────────────────────────────────────────────────────────
# Currency: only these six ordered pairs have a rate
# ─────────────────────────────────────────────────────────────────────
CURRENCIES = {
    "I" : "INR",
    "U" : "USD",
    "E" : "EUR",
    "G" : "GBP",
}

EXCHANGE_RATES = {
    ( "I", "U" ) : 0.012,
    ( "U", "I" ) : 83.33,
    ( "U", "E" ) : 0.92,
    ( "U", "G" ) : 0.79,
    ( "E", "U" ) : 1.09,
    ( "G", "U" ) : 1.27,
}

# ─────────────────────────────────────────────────────────────────────
# Number bases: code → radix
# ─────────────────────────────────────────────────────────────────────
NUMBER_BASES = {
    "B" : 2,
    "D" : 10,
    "O" : 8,
    "H" : 16,
}

DIGITS = "0123456789ABCDEF"

# Parsed magnitudes must fit a signed 64-bit integer
MAX_MAGNITUDE = 2 ** 63 - 1

# ─────────────────────────────────────────────────────────────────────
# Logarithms: code → display label
# ─────────────────────────────────────────────────────────────────────
LOG_TYPES = {
    "L" : "log10",
    "N" : "ln",
    "B" : "log2",
}

# ─────────────────────────────────────────────────────────────────────
# Calculator operators
# ─────────────────────────────────────────────────────────────────────
BINARY_OPERATORS = ( "+", "-", "*", "/", "^" )
UNARY_OPERATORS  = ( "S", "C", "T" )

# ─────────────────────────────────────────────────────────────────────
# History/result labels per operation kind
# ─────────────────────────────────────────────────────────────────────
KIND_LABELS = {
    "calculation" : "Calculator",
    "temperature" : "Temperature",
    "number_base" : "Number Base",
    "logarithm"   : "Logarithm",
    "currency"    : "Currency",
    "length"      : "Length",
}


def normalize_code( code ):
    """
    Normalize a unit/base/operator code to its canonical single-letter form.

    Requires:
        - code is a string (may be empty or padded with whitespace)

    Ensures:
        - Returns the stripped, upper-cased string
        - Returns "" for None
    """
    if code is None:
        return ""
    return str( code ).strip().upper()


def is_unary( operator ):
    """Return True if the operator code takes a single operand."""
    return normalize_code( operator ) in UNARY_OPERATORS


def quick_smoke_test():
    """Module-level smoke test."""

    print( "Testing conversion_tables module..." )
    passed = True

    try:
        assert normalize_code( " c " ) == "C"
        assert normalize_code( None ) == ""
        print( "  ✓ Code normalization" )

        assert len( EXCHANGE_RATES ) == 6
        assert ( "E", "G" ) not in EXCHANGE_RATES
        print( "  ✓ Exchange rate table has six directional pairs" )

        assert is_unary( "t" )
        assert not is_unary( "^" )
        print( "  ✓ Unary operator lookup" )

        print( "✓ conversion_tables module smoke test PASSED" )

    except Exception as e:
        print( f"✗ conversion_tables module smoke test FAILED: {e}" )
        import traceback
        traceback.print_exc()
        passed = False

    return passed


if __name__ == "__main__":
    success = quick_smoke_test()
    exit( 0 if success else 1 )
