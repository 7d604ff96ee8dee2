#!/usr/bin/env python3
"""
Request models for the converter and calculator operations.

Each operation is one variant of a closed tagged union keyed by ``kind``.
Variants carry only their own validated fields; unit and operator codes are
normalized to upper case at the boundary, but whether a code is *allowed* is
decided by the compute functions so every failure surfaces through the same
ConverterError taxonomy.

Pattern follows CalcIntent: a pydantic model per intent, with a single
dispatch function routing on the discriminator.
"""

import math
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

from proconv.calculator.conversion_tables import KIND_LABELS, normalize_code
from proconv.calculator.conversion_tables import is_unary as _is_unary_code


class _RequestBase( BaseModel ):
    """Shared configuration: requests are immutable value objects."""

    model_config = ConfigDict( frozen=True )

    @property
    def kind_label( self ):
        return KIND_LABELS[ self.kind ]


def _finite( value ):
    if value is not None and not math.isfinite( value ):
        raise ValueError( "value must be a finite number" )
    return value


class _UnitPairRequest( _RequestBase ):
    """A numeric value with a source and target unit code."""

    value     : float = Field( ..., description="Amount to convert" )
    from_unit : str   = Field( ..., description="Source unit code" )
    to_unit   : str   = Field( ..., description="Target unit code" )

    @field_validator( "from_unit", "to_unit", mode="before" )
    @classmethod
    def _normalize_code( cls, v ):
        return normalize_code( v )

    @field_validator( "value" )
    @classmethod
    def _check_finite( cls, v ):
        return _finite( v )


class TemperatureRequest( _UnitPairRequest ):
    """Temperature conversion, units C or F."""

    kind : Literal[ "temperature" ] = "temperature"


class LengthRequest( _UnitPairRequest ):
    """Length conversion, units M or F."""

    kind : Literal[ "length" ] = "length"


class CurrencyRequest( _UnitPairRequest ):
    """Currency conversion, codes I, U, E or G."""

    kind : Literal[ "currency" ] = "currency"


class NumberBaseRequest( _RequestBase ):
    """
    Number base conversion.

    The payload stays a string so binary, octal and hex digits survive
    untouched until they are parsed in their source base.
    """

    kind      : Literal[ "number_base" ] = "number_base"
    raw_value : str = Field( ..., description="Number written in from_base" )
    from_base : str = Field( ..., description="Source base code: B, D, O, H" )
    to_base   : str = Field( ..., description="Target base code: B, D, O, H" )

    @field_validator( "from_base", "to_base", mode="before" )
    @classmethod
    def _normalize_code( cls, v ):
        return normalize_code( v )

    @field_validator( "raw_value", mode="before" )
    @classmethod
    def _strip( cls, v ):
        return str( v ).strip() if v is not None else ""


class LogarithmRequest( _RequestBase ):
    """Logarithm of a value, type L (log10), N (ln) or B (log2)."""

    kind     : Literal[ "logarithm" ] = "logarithm"
    value    : float = Field( ..., description="Argument of the logarithm" )
    log_type : str   = Field( ..., description="Log type code: L, N, B" )

    @field_validator( "log_type", mode="before" )
    @classmethod
    def _normalize_code( cls, v ):
        return normalize_code( v )

    @field_validator( "value" )
    @classmethod
    def _check_finite( cls, v ):
        return _finite( v )


class CalculationRequest( _RequestBase ):
    """
    Calculator operation over one or two operands.

    operand2 is required for + - * / ^ and ignored for S, C and T. A missing
    operand2 for a binary operator is reported when the request is computed.
    """

    kind     : Literal[ "calculation" ] = "calculation"
    operand1 : float           = Field( ..., description="First operand, degrees for trig" )
    operator : str             = Field( ..., description="Operator code: + - * / ^ S C T" )
    operand2 : Optional[float] = Field( default=None, description="Second operand for binary operators" )

    @field_validator( "operator", mode="before" )
    @classmethod
    def _normalize_code( cls, v ):
        return normalize_code( v )

    @field_validator( "operand1", "operand2" )
    @classmethod
    def _check_finite( cls, v ):
        return _finite( v )

    def is_unary( self ):
        return _is_unary_code( self.operator )


Request = Annotated[
    Union[
        CalculationRequest,
        TemperatureRequest,
        NumberBaseRequest,
        LogarithmRequest,
        CurrencyRequest,
        LengthRequest,
    ],
    Field( discriminator="kind" )
]

_request_adapter = TypeAdapter( Request )


def parse_request( data ):
    """
    Build the matching request variant from a plain dict.

    Requires:
        - data is a dict with a "kind" key naming one of the variants

    Ensures:
        - Returns the validated, frozen request model

    Raises:
        - pydantic.ValidationError for an unknown kind or missing fields
    """
    return _request_adapter.validate_python( data )
