"""
Converter Custom Exceptions

Provides hierarchical exception types for the recoverable, operation-scoped
failures of the conversion and calculation operations. All exceptions inherit
from ConverterError so the dispatcher can catch any of them with a single
except clause.

Exception Hierarchy:
    ConverterError (base)
    ├── InvalidUnit       (unit, base, log type outside the allowed codes)
    ├── InvalidFormat     (string that does not parse in the given base)
    ├── OutOfRange        (magnitude or sign not representable)
    ├── DomainError       (value outside the function's domain)
    ├── UnsupportedPair   (currency pair with no fixed rate)
    ├── DivisionByZero
    ├── UndefinedResult   (tangent at odd multiples of 90 degrees, complex powers)
    └── InvalidOperation  (unknown calculator operator)

Usage:
    from proconv.calculator.exceptions import ConverterError

    try:
        value = calc_operations.convert_length( 1.0, "M", "X" )
    except ConverterError as e:
        print( f"Error: {e.message}" )
        print( f"Kind: {e.kind.value}" )
"""

from enum import Enum


class ErrorKind( Enum ):
    """Names of the recoverable error categories."""

    INVALID_UNIT      = "InvalidUnit"
    INVALID_FORMAT    = "InvalidFormat"
    OUT_OF_RANGE      = "OutOfRange"
    DOMAIN_ERROR      = "DomainError"
    UNSUPPORTED_PAIR  = "UnsupportedPair"
    DIVISION_BY_ZERO  = "DivisionByZero"
    UNDEFINED_RESULT  = "UndefinedResult"
    INVALID_OPERATION = "InvalidOperation"


class ConverterError( Exception ):
    """
    Base exception for all conversion and calculation errors.

    Attributes:
        message (str): Human-readable, single-line error message
        context (dict): Optional context information (offending codes, values)
        kind (ErrorKind): Category of the failure, set by each subclass
    """

    kind = None

    def __init__( self, message, context=None ):
        """
        Initialize base exception.

        Requires:
            - message is non-empty string
            - context is None or dict

        Ensures:
            - Exception initialized with message and optional context
            - None values are dropped from context
        """
        super().__init__( message )
        self.message = message
        self.context = { k: v for k, v in ( context or {} ).items() if v is not None }

    def __str__( self ):
        """
        String representation of exception.

        Ensures:
            - Returns formatted error message with context if available
        """
        if self.context:
            context_str = ", ".join( f"{k}={v}" for k, v in self.context.items() )
            return f"{self.message} (Context: {context_str})"
        return self.message


class InvalidUnit( ConverterError ):
    """
    Raised when a unit, base or log type code is outside the allowed set.

    Example:
        raise InvalidUnit(
            message   = "Invalid temperature units (use C or F)",
            from_unit = "K",
            to_unit   = "C"
        )
    """

    kind = ErrorKind.INVALID_UNIT

    def __init__( self, message, from_unit=None, to_unit=None ):
        super().__init__( message, { 'from_unit': from_unit, 'to_unit': to_unit } )
        self.from_unit = from_unit
        self.to_unit   = to_unit


class InvalidFormat( ConverterError ):
    """
    Raised when an input string cannot be parsed in the requested base.

    Attributes:
        raw_value (str): The string that failed to parse
        base (str): Base code the string was parsed against
    """

    kind = ErrorKind.INVALID_FORMAT

    def __init__( self, message, raw_value=None, base=None ):
        super().__init__( message, { 'raw_value': raw_value, 'base': base } )
        self.raw_value = raw_value
        self.base      = base


class OutOfRange( ConverterError ):
    """Raised when a parsed number is negative or too large to convert."""

    kind = ErrorKind.OUT_OF_RANGE

    def __init__( self, message, raw_value=None, base=None ):
        super().__init__( message, { 'raw_value': raw_value, 'base': base } )
        self.raw_value = raw_value
        self.base      = base


class DomainError( ConverterError ):
    """Raised when a value lies outside the domain of the requested function."""

    kind = ErrorKind.DOMAIN_ERROR

    def __init__( self, message, value=None ):
        super().__init__( message, { 'value': value } )
        self.value = value


class UnsupportedPair( ConverterError ):
    """
    Raised when no fixed rate exists for an ordered currency pair.

    Only the six listed directions are supported. EUR→GBP and GBP→EUR are
    not, even though both currencies are known.
    """

    kind = ErrorKind.UNSUPPORTED_PAIR

    def __init__( self, message, from_currency=None, to_currency=None ):
        super().__init__( message, { 'from_currency': from_currency, 'to_currency': to_currency } )
        self.from_currency = from_currency
        self.to_currency   = to_currency


class DivisionByZero( ConverterError ):

    kind = ErrorKind.DIVISION_BY_ZERO

    def __init__( self, message="Division by zero", dividend=None ):
        super().__init__( message, { 'dividend': dividend } )
        self.dividend = dividend


class UndefinedResult( ConverterError ):
    """Raised when an operation has no real, finite result for its operands."""

    kind = ErrorKind.UNDEFINED_RESULT

    def __init__( self, message, operator=None, operand=None ):
        super().__init__( message, { 'operator': operator, 'operand': operand } )
        self.operator = operator
        self.operand  = operand


class InvalidOperation( ConverterError ):

    kind = ErrorKind.INVALID_OPERATION

    def __init__( self, message, operator=None ):
        super().__init__( message, { 'operator': operator } )
        self.operator = operator
