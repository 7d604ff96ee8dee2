"""
Report Formatter for the converter console

Formats results, errors, the menu and the history log as boxed tables with
optional ANSI colors. Every method returns a string; printing is left to the
terminal interface.

Design Principles:
- Configuration-driven formatting (column widths, colors)
- Padding is computed on visible text, color codes wrap the padded cell
- Cells wider than their column are kept whole and push the border out

Usage:
    from proconv.cli.report_formatter import ReportFormatter

    formatter = ReportFormatter( config )
    print( formatter.format_result( "C to F", "212.00" ) )
    print( formatter.format_error( "Division by zero" ) )
"""

from typing import Dict, Iterable, List

COLORS = {
    "BLUE"   : "\033[34m",
    "GREEN"  : "\033[32m",
    "YELLOW" : "\033[33m",
    "RED"    : "\033[31m",
    "CYAN"   : "\033[36m",
    "RESET"  : "\033[0m",
}

MENU_OPTIONS = [
    ( "1", "Calculator" ),
    ( "2", "Temperature (C/F)" ),
    ( "3", "Number Base (B/D/O/H)" ),
    ( "4", "Logarithm (L/N/B)" ),
    ( "5", "Currency (I/U/E/G)" ),
    ( "6", "Length (M/F)" ),
    ( "7", "View History" ),
    ( "8", "Quit" ),
]


class ReportFormatter:
    """
    Renders console output for the converter session.

    Requires:
        - config has a "display" section as produced by ConfigLoader

    Ensures:
        - All output is returned as strings without trailing newline
        - Colors are omitted when display.use_color is false
    """

    def __init__( self, config: Dict ):
        display = config.get( 'display', {} )

        self.column_width = display.get( 'column_width', 15 )
        self.error_width  = display.get( 'error_width', 45 )
        self.banner_width = display.get( 'banner_width', 40 )
        self.menu_width   = display.get( 'menu_width', 25 )
        self.use_color    = display.get( 'use_color', True )

    def colorize( self, text: str, color: str ) -> str:
        """Wrap text in an ANSI color code when colors are enabled."""
        if not self.use_color:
            return text
        return f"{COLORS[ color ]}{text}{COLORS[ 'RESET' ]}"

    def format_result( self, label: str, result: str ) -> str:
        """
        Three-column result box: "Input" | label | result.

        Example (colors off):
            +---------------+---------------+---------------+
            |Input          |C to F         |212.00         |
            +---------------+---------------+---------------+
        """
        row = [ ( "Input", "BLUE" ), ( label, "BLUE" ), ( result, "GREEN" ) ]
        return self._table( [ self.column_width ] * 3, [ row ] )

    def format_error( self, message: str ) -> str:
        """Single-cell box with "Error: <message>" in red."""
        return self._box( f"Error: {message}", "RED", self.error_width )

    def format_notice( self, message: str, color: str = "RED" ) -> str:
        """Single-cell box sized like the welcome banner."""
        return self._box( message, color, self.banner_width )

    def format_welcome( self ) -> str:
        lines = [
            "Welcome to the Professional Converter!",
            "Advanced conversion and calculation tool",
        ]
        border = self._border( [ self.banner_width ] )
        body   = [ self._row( [ self.banner_width ], [ ( line, "CYAN" ) ] ) for line in lines ]
        return "\n".join( [ border ] + body + [ border ] )

    def format_goodbye( self ) -> str:
        return self.format_notice( "Thank you for using Professional Converter!", "CYAN" )

    def format_menu( self ) -> str:
        """Two-column option/description menu."""
        widths = [ self.menu_width, self.menu_width ]
        header = [ ( "Option", "CYAN" ), ( "Description", "CYAN" ) ]
        rows   = [ [ ( number, "CYAN" ), ( description, "CYAN" ) ] for number, description in MENU_OPTIONS ]
        return "\n" + self._table( widths, [ header ], body=rows )

    def format_history( self, entries: Iterable ) -> str:
        """
        Three-column history table, or a notice when there are no entries.

        Requires:
            - entries yields objects with kind, input_description, result_description
        """
        entries = list( entries )
        if not entries:
            return self.colorize( "No history available.", "YELLOW" )

        widths = [ self.column_width ] * 3
        header = [ ( "Type", "BLUE" ), ( "Input", "BLUE" ), ( "Result", "BLUE" ) ]
        rows   = [
            [ ( entry.kind, None ), ( entry.input_description, None ), ( entry.result_description, "GREEN" ) ]
            for entry in entries
        ]
        return "\n" + self._table( widths, [ header ], body=rows )

    def format_prompt( self, prompt: str ) -> str:
        return self.colorize( prompt, "YELLOW" )

    def format_invalid_input( self ) -> str:
        return self.colorize( "Invalid input. ", "RED" )

    def _box( self, text: str, color: str, width: int ) -> str:
        border = self._border( [ width ] )
        return "\n".join( [ border, self._row( [ width ], [ ( text, color ) ] ), border ] )

    def _table( self, widths: List[int], header: List, body: List = None ) -> str:
        border = self._border( widths )
        lines  = [ border ] + [ self._row( widths, row ) for row in header ] + [ border ]
        if body:
            lines += [ self._row( widths, row ) for row in body ] + [ border ]
        return "\n".join( lines )

    def _border( self, widths: List[int] ) -> str:
        return "+" + "+".join( "-" * width for width in widths ) + "+"

    def _row( self, widths: List[int], cells: List ) -> str:
        parts = []
        for width, ( text, color ) in zip( widths, cells ):
            padded = str( text ).ljust( width )
            parts.append( self.colorize( padded, color ) if color else padded )
        return "|" + "|".join( parts ) + "|"
