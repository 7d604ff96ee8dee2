#!/usr/bin/env python3
"""
Unit tests for the command line entry point.
"""

import io

from proconv import run_converter


class TestMain:
    """Tests for run_converter.main()."""

    def test_quit_returns_zero( self, monkeypatch ):
        output = io.StringIO()
        monkeypatch.setattr( "sys.stdin", io.StringIO( "8\n" ) )
        monkeypatch.setattr( "sys.stdout", output )

        assert run_converter.main() == 0
        assert "Thank you for using Professional Converter!" in output.getvalue()

    def test_bad_config_returns_one( self, tmp_path, capsys ):
        path = tmp_path / "bad.yaml"
        path.write_text( "display:\n  decimal_places: -1\n", encoding="utf-8" )

        assert run_converter.main( config_path=str( path ) ) == 1
        assert "decimal_places" in capsys.readouterr().err

    def test_keyboard_interrupt_returns_130( self, monkeypatch ):
        class _Interrupting:
            def readline( self ):
                raise KeyboardInterrupt()

        monkeypatch.setattr( "sys.stdin", _Interrupting() )
        monkeypatch.setattr( "sys.stdout", io.StringIO() )

        assert run_converter.main() == 130
