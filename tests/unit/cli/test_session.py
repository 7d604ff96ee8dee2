#!/usr/bin/env python3
"""
Unit tests for SessionController, running full menu sessions over StringIO.
"""

import io

from proconv.config import ConfigLoader
from proconv.run_converter import build_session


def _run( script ):
    """Run a whole session on the given input; returns (exit_code, output, session)."""
    config = ConfigLoader().load()
    config[ "display" ][ "use_color" ] = False

    output  = io.StringIO()
    session = build_session( config, input_stream=io.StringIO( script ), output_stream=output )
    exit_code = session.run()
    return exit_code, output.getvalue(), session


class TestSessionController:
    """End-to-end menu sessions."""

    def test_quit_immediately( self ):
        exit_code, output, session = _run( "8\n" )

        assert exit_code == 0
        assert "Welcome to the Professional Converter!" in output
        assert "Thank you for using Professional Converter!" in output
        assert session.history.is_empty()

    def test_temperature_conversion_is_recorded( self ):
        exit_code, output, session = _run( "2\n100\nc\nf\n7\n8\n" )

        assert exit_code == 0
        assert "|C to F         |212.00         |" in output
        assert "|Temperature    |100.00 C to F  |212.00         |" in output
        assert len( session.history ) == 1

    def test_failure_is_rendered_and_not_recorded( self ):
        exit_code, output, session = _run( "1\n10\n/\n0\n7\n8\n" )

        assert exit_code == 0
        assert "Error: Division by zero" in output
        assert "No history available." in output
        assert session.history.is_empty()

    def test_one_success_one_failure( self ):
        _, _, session = _run( "6\n1\nM\nF\n5\n10\nE\nG\n8\n" )

        entries = session.history.entries
        assert len( entries ) == 1
        assert entries[ 0 ].kind == "Length"
        assert entries[ 0 ].result_description == "3.28"

    def test_unary_operator_skips_second_number( self ):
        _, output, session = _run( "1\n30\ns\n1\n90\nT\n8\n" )

        assert "Enter second number: " not in output
        assert "|30.00 S        |0.50           |" in output
        assert "Error: Tan undefined" in output
        assert session.history.entries[ 0 ].input_description == "30.00 S"

    def test_binary_operator_asks_second_number( self ):
        _, output, session = _run( "1\n2\n^\n10\n8\n" )

        assert "Enter second number: " in output
        assert session.history.entries[ 0 ].result_description == "1024.00"
        assert session.history.entries[ 0 ].input_description == "2.00 ^ 10.00"

    def test_number_base_and_logarithm( self ):
        _, _, session = _run( "3\nff\nH\nB\n4\n100\nL\n8\n" )

        first, second = session.history.entries
        assert ( first.kind, first.input_description, first.result_description ) == ( "Number Base", "ff H to B", "11111111" )
        assert ( second.kind, second.input_description, second.result_description ) == ( "Logarithm", "log10(100.00)", "2.00" )

    def test_currency( self ):
        _, output, _ = _run( "5\n100\ni\nu\n8\n" )
        assert "|I to U         |1.20           |" in output

    def test_invalid_choice_redisplays_menu( self ):
        exit_code, output, _ = _run( "9\n0\n8\n" )

        assert exit_code == 0
        assert output.count( "Invalid choice. Please select 1-8." ) == 2
        assert output.count( "View History" ) == 3

    def test_non_numeric_choice_reprompts( self ):
        _, output, _ = _run( "menu\n8\n" )
        assert "Invalid input. Enter choice (1-8): " in output

    def test_fractional_choice_truncates( self ):
        _, _, session = _run( "6.9\n2\nM\nM\n8\n" )
        assert session.history.entries[ 0 ].kind == "Length"

    def test_end_of_input_ends_session( self ):
        exit_code, output, _ = _run( "2\n100\n" )

        assert exit_code == 0
        assert "Thank you for using Professional Converter!" in output

    def test_handle_choice_rejects_unknown( self ):
        _, _, session = _run( "8\n" )
        assert session.handle_choice( 42 ) is False
