"""
Professional Converter Package

An interactive console utility for unit conversion (temperature, number base,
length, currency) and basic arithmetic/trigonometric/logarithmic calculation,
with a history log scoped to the session.

Main Components:
- calculator: request models, pure operations, dispatcher, history
- config: YAML configuration loader
- cli: terminal interface, report formatter, session controller

Programmatic Usage:
    from proconv.calculator.requests import TemperatureRequest
    from proconv.calculator.dispatcher import dispatch

    result = dispatch( TemperatureRequest( value=100, from_unit="C", to_unit="F" ) )
    print( result.display )   # 212.00

Command Line:
    proconv
"""

__version__ = '1.0.0'
