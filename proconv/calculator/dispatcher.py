#!/usr/bin/env python3
"""
Request dispatch and result formatting for converter operations.

Pure functions that bridge request models to calc_operations calls and turn
their outcome into an OperationResult the session can render and log.

Functions:
    compute: Routes a request → calc_operations function by kind, raising on failure
    dispatch: Wraps compute, converting ConverterError into an error result
    describe_input: Formats the request the way the history log shows it
    describe_unit_info: Short middle-column label, e.g. "C to F" or "log10"
    format_value: Fixed-precision rendering of a numeric result
"""

import logging
from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict

from proconv.calculator import calc_operations
from proconv.calculator.conversion_tables import LOG_TYPES, KIND_LABELS
from proconv.calculator.exceptions import ConverterError

logger = logging.getLogger( __name__ )

DEFAULT_DECIMAL_PLACES = 2


class OperationResult( BaseModel ):
    """
    Outcome of one dispatched request.

    Fields:
        status: "ok" or "error"
        kind: Request discriminator, e.g. "temperature"
        kind_label: History label, e.g. "Temperature"
        input_description: Formatted input, e.g. "100.00 C to F"
        unit_info: Middle column of the result table, e.g. "C to F"
        value: Numeric result, the exact parsed int for number bases
        display: Canonical result string, e.g. "212.00" or "FF"
        error_kind: ErrorKind value on failure
        message: Error message on failure
    """

    model_config = ConfigDict( frozen=True )

    status            : Literal[ "ok", "error" ]
    kind              : str
    kind_label        : str
    input_description : str
    unit_info         : str
    value             : Optional[Union[int, float]] = None
    display           : str = ""
    error_kind        : Optional[str] = None
    message           : str = ""

    @property
    def ok( self ):
        return self.status == "ok"


def compute( request ):
    """
    Route a request to the matching calc_operations function.

    Requires:
        - request is one of the request variants from proconv.calculator.requests

    Ensures:
        - Returns a float for numeric operations
        - Returns a BaseConversion for number base requests

    Raises:
        - ConverterError subclass when the operation fails
        - ValueError for an unknown request kind
    """
    kind = request.kind

    if kind == "calculation":
        return calc_operations.calculate(
            operand1 = request.operand1,
            operator = request.operator,
            operand2 = request.operand2
        )

    elif kind == "temperature":
        return calc_operations.convert_temperature( request.value, request.from_unit, request.to_unit )

    elif kind == "number_base":
        return calc_operations.convert_number_base( request.raw_value, request.from_base, request.to_base )

    elif kind == "logarithm":
        return calc_operations.compute_logarithm( request.value, request.log_type )

    elif kind == "currency":
        return calc_operations.convert_currency( request.value, request.from_unit, request.to_unit )

    elif kind == "length":
        return calc_operations.convert_length( request.value, request.from_unit, request.to_unit )

    else:
        raise ValueError( f"Unknown request kind '{kind}'. Valid: {list( KIND_LABELS )}" )


def dispatch( request, decimal_places=DEFAULT_DECIMAL_PLACES ):
    """
    Compute a request and package the outcome as an OperationResult.

    Requires:
        - request is one of the request variants
        - decimal_places is a non-negative int

    Ensures:
        - Returns status="ok" with value and display on success
        - Returns status="error" with error_kind and message on ConverterError
        - Never raises ConverterError
    """
    logger.debug( "dispatch: kind=%s request=%r", request.kind, request )

    common = {
        "kind"              : request.kind,
        "kind_label"        : KIND_LABELS[ request.kind ],
        "input_description" : describe_input( request, decimal_places ),
        "unit_info"         : describe_unit_info( request, decimal_places ),
    }

    try:
        outcome = compute( request )
    except ConverterError as e:
        logger.warning( "%s failed: %s", common[ "kind_label" ], e )
        return OperationResult(
            status     = "error",
            error_kind = e.kind.value,
            message    = e.message,
            **common
        )

    if isinstance( outcome, calc_operations.BaseConversion ):
        value   = outcome.value
        display = outcome.text
    else:
        value   = outcome
        display = format_value( outcome, decimal_places )

    return OperationResult( status="ok", value=value, display=display, **common )


def format_value( value, decimal_places=DEFAULT_DECIMAL_PLACES ):
    """Render a number with fixed precision, e.g. 212 → "212.00"."""
    return f"{value:.{decimal_places}f}"


def describe_unit_info( request, decimal_places=DEFAULT_DECIMAL_PLACES ):
    """
    Short label for the middle column of the result table.

    Ensures:
        - Returns "<FROM> to <TO>" for unit and base conversions
        - Returns the log label ("log10", "ln", "log2") for logarithms
        - Returns the full input description for calculations
    """
    kind = request.kind

    if kind == "logarithm":
        return LOG_TYPES.get( request.log_type, request.log_type )

    if kind == "number_base":
        return f"{request.from_base} to {request.to_base}"

    if kind == "calculation":
        return describe_input( request, decimal_places )

    return f"{request.from_unit} to {request.to_unit}"


def describe_input( request, decimal_places=DEFAULT_DECIMAL_PLACES ):
    """
    Format a request the way the history log records it.

    Examples:
        - "10.00 + 5.00"      calculation
        - "90.00 T"           unary trig calculation
        - "100.00 C to F"     temperature, currency, length
        - "FF H to D"         number base (input kept verbatim)
        - "log10(100.00)"     logarithm
    """
    kind = request.kind

    if kind == "calculation":
        text = f"{format_value( request.operand1, decimal_places )} {request.operator}"
        if not request.is_unary() and request.operand2 is not None:
            text += f" {format_value( request.operand2, decimal_places )}"
        return text

    if kind == "logarithm":
        label = LOG_TYPES.get( request.log_type, request.log_type )
        return f"{label}({format_value( request.value, decimal_places )})"

    if kind == "number_base":
        return f"{request.raw_value} {request.from_base} to {request.to_base}"

    return f"{format_value( request.value, decimal_places )} {request.from_unit} to {request.to_unit}"


def quick_smoke_test():
    """Module-level smoke test."""

    from proconv.calculator.requests import TemperatureRequest, NumberBaseRequest, CalculationRequest

    print( "Testing dispatcher module..." )
    passed = True

    try:
        result = dispatch( TemperatureRequest( value=100, from_unit="c", to_unit="f" ) )
        assert result.ok
        assert result.display == "212.00"
        assert result.input_description == "100.00 C to F"
        print( f"  ✓ dispatch temperature: {result.input_description} → {result.display}" )

        result = dispatch( NumberBaseRequest( raw_value="1010", from_base="B", to_base="D" ) )
        assert result.display == "10"
        print( f"  ✓ dispatch number base: {result.input_description} → {result.display}" )

        result = dispatch( CalculationRequest( operand1=10, operator="/", operand2=0 ) )
        assert not result.ok
        assert result.error_kind == "DivisionByZero"
        print( f"  ✓ dispatch error: {result.message}" )

        print( "✓ dispatcher module smoke test PASSED" )

    except Exception as e:
        print( f"✗ dispatcher module smoke test FAILED: {e}" )
        import traceback
        traceback.print_exc()
        passed = False

    return passed


if __name__ == "__main__":
    success = quick_smoke_test()
    exit( 0 if success else 1 )
