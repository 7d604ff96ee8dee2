#!/usr/bin/env python3
"""
Unit tests for ConfigLoader.
"""

import pytest

from proconv.config import ConfigLoader, ConfigurationError


def _write( tmp_path, text ):
    path = tmp_path / "override.yaml"
    path.write_text( text, encoding="utf-8" )
    return str( path )


class TestConfigLoader:
    """Tests for default loading, overrides and validation."""

    def test_default_values( self ):
        config = ConfigLoader().load()
        assert config[ "display" ][ "column_width" ] == 15
        assert config[ "display" ][ "decimal_places" ] == 2
        assert config[ "display" ][ "use_color" ] is True
        assert config[ "logging" ][ "level" ] == "WARNING"

    def test_get_dot_path( self ):
        loader = ConfigLoader()
        loader.load()
        assert loader.get( "display.error_width" ) == 45
        assert loader.get( "display.missing", default="fallback" ) == "fallback"

    def test_get_before_load( self ):
        with pytest.raises( ValueError ):
            ConfigLoader().get( "display.column_width" )

    def test_override_merges_with_defaults( self, tmp_path ):
        path   = _write( tmp_path, "display:\n  decimal_places: 4\n  use_color: false\n" )
        config = ConfigLoader( config_path=path ).load()

        assert config[ "display" ][ "decimal_places" ] == 4
        assert config[ "display" ][ "use_color" ] is False
        assert config[ "display" ][ "column_width" ] == 15

    def test_empty_override_uses_defaults( self, tmp_path ):
        config = ConfigLoader( config_path=_write( tmp_path, "" ) ).load()
        assert config[ "display" ][ "menu_width" ] == 25

    def test_missing_file( self, tmp_path ):
        with pytest.raises( ConfigurationError ) as exc_info:
            ConfigLoader( config_path=str( tmp_path / "nope.yaml" ) ).load()
        assert "not found" in exc_info.value.message

    def test_invalid_yaml( self, tmp_path ):
        with pytest.raises( ConfigurationError ) as exc_info:
            ConfigLoader( config_path=_write( tmp_path, "display: [unclosed\n" ) ).load()
        assert "Invalid YAML" in exc_info.value.message

    def test_non_mapping( self, tmp_path ):
        with pytest.raises( ConfigurationError ):
            ConfigLoader( config_path=_write( tmp_path, "- just\n- a list\n" ) ).load()

    @pytest.mark.parametrize( "override, field", [
        ( "display:\n  decimal_places: 42\n", "display.decimal_places" ),
        ( "display:\n  decimal_places: true\n", "display.decimal_places" ),
        ( "display:\n  column_width: 2\n", "display.column_width" ),
        ( "display:\n  use_color: maybe\n", "display.use_color" ),
        ( "logging:\n  level: LOUD\n", "logging.level" ),
        ( "logging: off\n", "logging" ),
    ] )
    def test_invalid_values( self, tmp_path, override, field ):
        with pytest.raises( ConfigurationError ) as exc_info:
            ConfigLoader( config_path=_write( tmp_path, override ) ).load()
        assert exc_info.value.field == field
        assert field in str( exc_info.value )
