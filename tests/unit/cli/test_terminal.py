#!/usr/bin/env python3
"""
Unit tests for TerminalInterface, driven through io.StringIO streams.
"""

import io

import pytest

from proconv.cli.report_formatter import ReportFormatter
from proconv.cli.terminal import EndOfInput, TerminalInterface


def _terminal( text ):
    output   = io.StringIO()
    terminal = TerminalInterface(
        ReportFormatter( { "display": { "use_color": False } } ),
        input_stream  = io.StringIO( text ),
        output_stream = output
    )
    return terminal, output


class TestTerminalInterface:
    """Tests for prompting and reading."""

    def test_read_number( self ):
        terminal, output = _terminal( "42.5\n" )
        assert terminal.read_number( "Enter amount: " ) == 42.5
        assert output.getvalue() == "Enter amount: "

    def test_read_number_reprompts_on_garbage( self ):
        terminal, output = _terminal( "abc\nnan\n\n7\n" )
        assert terminal.read_number( "Enter length: " ) == 7.0
        assert output.getvalue().count( "Invalid input. Enter length: " ) == 2

    def test_read_number_takes_first_token( self ):
        terminal, _ = _terminal( "  3   4\n" )
        assert terminal.read_number( "> " ) == 3.0

    def test_read_char( self ):
        terminal, _ = _terminal( "celsius\n" )
        assert terminal.read_char( "Enter from unit (C or F): " ) == "c"

    def test_read_line_skips_blank_lines( self ):
        terminal, _ = _terminal( "\n   \n1010 extra\n" )
        assert terminal.read_line( "Enter number: " ) == "1010"

    def test_end_of_input( self ):
        terminal, _ = _terminal( "" )
        with pytest.raises( EndOfInput ):
            terminal.read_number( "Enter choice (1-8): " )

    def test_end_of_input_after_garbage( self ):
        terminal, _ = _terminal( "xyz\n" )
        with pytest.raises( EndOfInput ):
            terminal.read_number( "Enter choice (1-8): " )

    def test_render_error_writes_box( self ):
        terminal, output = _terminal( "" )
        terminal.render_error( "Tan undefined" )
        assert "|Error: Tan undefined" in output.getvalue()
        assert output.getvalue().endswith( "+\n" )
