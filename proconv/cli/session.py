#!/usr/bin/env python3
"""
SessionController — the menu-driven converter loop.

Reads a menu choice, collects the inputs for the chosen operation through the
terminal interface, builds the matching request, dispatches it, renders the
outcome and records successes in the session history.

Architecture:
    - run(): welcome banner, then menu → handler until Quit or end of input
    - _collect_*(): prompt sequence per operation, returns a request model
    - _execute(): dispatch() + render + HistoryLog.record()
"""

import logging

from proconv.calculator.conversion_tables import BINARY_OPERATORS
from proconv.calculator.dispatcher import dispatch, DEFAULT_DECIMAL_PLACES
from proconv.calculator.history import HistoryLog
from proconv.calculator.requests import (
    CalculationRequest, TemperatureRequest, NumberBaseRequest,
    LogarithmRequest, CurrencyRequest, LengthRequest
)
from proconv.cli.terminal import TerminalInterface, EndOfInput

logger = logging.getLogger( __name__ )

QUIT_CHOICE = 8


class SessionController:
    """
    Interactive loop mediating between the terminal and the converter core.

    Requires:
        - terminal is a TerminalInterface
        - history is None or a HistoryLog

    Ensures:
        - Every operation failure is rendered and the loop continues
        - Only successful operations reach the history
        - run() returns exit status 0 on Quit or end of input
    """

    def __init__( self, terminal: TerminalInterface, history: HistoryLog = None,
                  decimal_places: int = DEFAULT_DECIMAL_PLACES ):
        self.terminal       = terminal
        self.history        = history if history is not None else HistoryLog()
        self.decimal_places = decimal_places

        self.collectors = {
            1 : self._collect_calculation,
            2 : self._collect_temperature,
            3 : self._collect_number_base,
            4 : self._collect_logarithm,
            5 : self._collect_currency,
            6 : self._collect_length,
        }

    def run( self ) -> int:
        """
        Run the menu loop until the user quits.

        Ensures:
            - Returns 0 when option 8 is chosen or input ends
        """
        logger.info( "Session started" )
        self.terminal.render_welcome()

        try:
            while True:
                self.terminal.render_menu()
                choice = int( self.terminal.read_number( "Enter choice (1-8): " ) )

                if choice == QUIT_CHOICE:
                    break

                if not self.handle_choice( choice ):
                    self.terminal.render_notice( "Invalid choice. Please select 1-8." )

        except EndOfInput:
            logger.info( "Input ended, closing session" )

        self.terminal.render_goodbye()
        logger.info( "Session finished with %d history entries", len( self.history ) )
        return 0

    def handle_choice( self, choice: int ) -> bool:
        """
        Run the operation for one menu choice other than Quit.

        Ensures:
            - Returns True if choice was a known option (1-7)
            - Returns False for anything else, without reading input
        """
        if choice == 7:
            self.terminal.render_history( self.history )
            return True

        collector = self.collectors.get( choice )
        if collector is None:
            return False

        self._execute( collector() )
        return True

    def _execute( self, request ):
        result = dispatch( request, decimal_places=self.decimal_places )

        if not result.ok:
            self.terminal.render_error( result.message )
            return result

        self.terminal.render_result( result.unit_info, result.display )
        self.history.record( result )
        return result

    def _collect_calculation( self ) -> CalculationRequest:
        operand1 = self.terminal.read_number( "Enter first number: " )
        operator = self.terminal.read_char( "Enter operation (+, -, *, /, ^, S(sin), C(cos), T(tan)): " )

        # Unary and unknown operators never ask for a second number
        operand2 = None
        if operator in BINARY_OPERATORS:
            operand2 = self.terminal.read_number( "Enter second number: " )

        return CalculationRequest( operand1=operand1, operator=operator, operand2=operand2 )

    def _collect_temperature( self ) -> TemperatureRequest:
        value     = self.terminal.read_number( "Enter temperature: " )
        from_unit = self.terminal.read_char( "Enter from unit (C or F): " )
        to_unit   = self.terminal.read_char( "Enter to unit (C or F): " )
        return TemperatureRequest( value=value, from_unit=from_unit, to_unit=to_unit )

    def _collect_number_base( self ) -> NumberBaseRequest:
        raw_value = self.terminal.read_line( "Enter number: " )
        from_base = self.terminal.read_char( "Enter from base (B(binary), D(decimal), O(octal), H(hex)): " )
        to_base   = self.terminal.read_char( "Enter to base (B, D, O, H): " )
        return NumberBaseRequest( raw_value=raw_value, from_base=from_base, to_base=to_base )

    def _collect_logarithm( self ) -> LogarithmRequest:
        value    = self.terminal.read_number( "Enter number: " )
        log_type = self.terminal.read_char( "Enter log type (L=log10, N=ln, B=log2): " )
        return LogarithmRequest( value=value, log_type=log_type )

    def _collect_currency( self ) -> CurrencyRequest:
        amount        = self.terminal.read_number( "Enter amount: " )
        from_currency = self.terminal.read_char( "Enter from currency (I, U, E, or G): " )
        to_currency   = self.terminal.read_char( "Enter to currency (I, U, E, or G): " )
        return CurrencyRequest( value=amount, from_unit=from_currency, to_unit=to_currency )

    def _collect_length( self ) -> LengthRequest:
        length    = self.terminal.read_number( "Enter length: " )
        from_unit = self.terminal.read_char( "Enter from unit (M or F): " )
        to_unit   = self.terminal.read_char( "Enter to unit (M or F): " )
        return LengthRequest( value=length, from_unit=from_unit, to_unit=to_unit )
