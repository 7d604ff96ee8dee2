"""
Terminal interface for the converter session.

Supplies validated primitive inputs (numbers, single characters, tokens) to
the session and prints formatter output. Input and output streams are
injectable so the whole session can be driven from io.StringIO in tests.

Every read consumes one line. Malformed numbers are re-prompted forever;
end of input raises EndOfInput.
"""

import math
import sys
from typing import Optional, TextIO

from proconv.cli.report_formatter import ReportFormatter


class EndOfInput( Exception ):
    """Raised when the input stream is exhausted while waiting for a value."""


class TerminalInterface:
    """
    Line-oriented prompt/read/render helper.

    Requires:
        - formatter is a ReportFormatter
        - input_stream supports readline(), output_stream supports write()

    Ensures:
        - read_number() returns a finite float
        - read_char() returns exactly one non-whitespace character
        - read_line() returns a non-empty token without whitespace
    """

    def __init__( self, formatter: ReportFormatter, input_stream: Optional[TextIO] = None,
                  output_stream: Optional[TextIO] = None ):
        self.formatter     = formatter
        self.input_stream  = input_stream if input_stream is not None else sys.stdin
        self.output_stream = output_stream if output_stream is not None else sys.stdout

    def read_number( self, prompt: str ) -> float:
        """
        Prompt until the user enters a finite number.

        Ensures:
            - Returns the first token of the line parsed as float
            - Writes "Invalid input. " and re-prompts on anything else

        Raises:
            - EndOfInput if the stream ends
        """
        self._write( self.formatter.format_prompt( prompt ) )

        while True:
            token = self._next_token()
            try:
                number = float( token )
                if math.isfinite( number ):
                    return number
            except ValueError:
                pass

            self._write( self.formatter.format_invalid_input() + self.formatter.format_prompt( prompt ) )

    def read_char( self, prompt: str ) -> str:
        """
        Prompt for a single character code.

        Ensures:
            - Returns the first character of the first token on the line
        """
        return self.read_line( prompt )[ 0 ]

    def read_line( self, prompt: str ) -> str:
        """
        Prompt for one whitespace-delimited token.

        Ensures:
            - Returns the first token on the line, skipping blank lines
        """
        self._write( self.formatter.format_prompt( prompt ) )
        return self._next_token()

    def render_result( self, label: str, result: str ):
        self._print( self.formatter.format_result( label, result ) )

    def render_error( self, message: str ):
        self._print( self.formatter.format_error( message ) )

    def render_notice( self, message: str, color: str = "RED" ):
        self._print( self.formatter.format_notice( message, color ) )

    def render_menu( self ):
        self._print( self.formatter.format_menu() )

    def render_history( self, entries ):
        self._print( self.formatter.format_history( entries ) )

    def render_welcome( self ):
        self._print( self.formatter.format_welcome() )

    def render_goodbye( self ):
        self._print( self.formatter.format_goodbye() )

    def _next_token( self ) -> str:
        while True:
            line = self.input_stream.readline()
            if not line:
                raise EndOfInput()

            tokens = line.split()
            if tokens:
                return tokens[ 0 ]

    def _write( self, text: str ):
        self.output_stream.write( text )
        self.output_stream.flush()

    def _print( self, text: str ):
        self._write( text + "\n" )
