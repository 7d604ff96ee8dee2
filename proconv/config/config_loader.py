"""
Configuration Loader for proconv

Handles loading and validating YAML configuration files. Provides defaults
from the embedded default_config.yaml and supports an optional override file
supplied programmatically.

Design Principles:
- Fail fast with clear error messages
- Validate all configuration values at load time
- Support partial overrides (merge with defaults)
- Provide access helpers for nested configuration

Usage:
    from proconv.config.config_loader import ConfigLoader

    loader = ConfigLoader()
    config = loader.load()

    # Access nested values
    width = config['display']['column_width']

    # Or use helper method
    places = loader.get( 'display.decimal_places', default=2 )
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .exceptions import ConfigurationError

logger = logging.getLogger( __name__ )

VALID_LOG_LEVELS = [ 'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL' ]

# ( key, minimum ) for every integer width in the display section
_WIDTH_FIELDS = [
    ( 'column_width', 5 ),
    ( 'error_width',  10 ),
    ( 'banner_width', 10 ),
    ( 'menu_width',   5 ),
]


class ConfigLoader:
    """
    Loads and validates YAML configuration files.

    Provides configuration loading with defaults, validation, and
    convenient access methods for nested configuration values.
    """

    def __init__( self, config_path: Optional[str] = None ):
        """
        Initialize configuration loader.

        Requires:
            - config_path is None or valid file path

        Ensures:
            - Loader initialized and ready to load configuration
            - Default config path identified

        Raises:
            - ConfigurationError if default config cannot be located
        """
        self.config_path = config_path
        self.config      = None

        # Default config lives next to this module
        self.default_path = Path( __file__ ).parent / 'default_config.yaml'

        if not self.default_path.exists():
            raise ConfigurationError(
                message     = "Default configuration file not found",
                config_path = str( self.default_path )
            )

    def load( self ) -> Dict[str, Any]:
        """
        Load configuration from files.

        Loads default configuration first, then merges user configuration
        if provided. Validates the final configuration.

        Ensures:
            - Returns complete configuration dict
            - All required sections present
            - All values validated

        Raises:
            - ConfigurationError if loading or validation fails
        """
        default_config = self._load_yaml_file( self.default_path )
        logger.debug( "Loaded default config: %d top-level keys", len( default_config ) )

        if not self.config_path:
            self.config = default_config
        else:
            user_config = self._load_yaml_file( Path( self.config_path ) )
            logger.debug( "Loaded user config %s: %d top-level keys", self.config_path, len( user_config ) )

            # User values override defaults
            self.config = self._merge_configs( default_config, user_config )

        self._validate_config( self.config )

        return self.config

    def get( self, key_path: str, default: Any = None ) -> Any:
        """
        Get configuration value by dot-separated key path.

        Example:
            value = loader.get( 'display.use_color', default=True )

        Requires:
            - key_path is non-empty string
            - Configuration has been loaded (self.config is not None)

        Ensures:
            - Returns configuration value if found
            - Returns default if key path not found

        Raises:
            - ValueError if configuration not loaded yet
        """
        if self.config is None:
            raise ValueError( "Configuration not loaded. Call load() first." )

        current = self.config

        for key in key_path.split( '.' ):
            if isinstance( current, dict ) and key in current:
                current = current[key]
            else:
                return default

        return current

    def _load_yaml_file( self, path: Path ) -> Dict[str, Any]:
        """
        Load and parse YAML file.

        Ensures:
            - Returns dict parsed from YAML
            - Empty files yield an empty dict

        Raises:
            - ConfigurationError if file not found, unreadable or invalid YAML
        """
        if not path.exists():
            raise ConfigurationError(
                message     = f"Configuration file not found: {path}",
                config_path = str( path )
            )

        try:
            with open( path, 'r', encoding='utf-8' ) as f:
                config = yaml.safe_load( f )
        except yaml.YAMLError as e:
            raise ConfigurationError(
                message     = f"Invalid YAML syntax: {e}",
                config_path = str( path )
            )
        except OSError as e:
            raise ConfigurationError(
                message     = f"Failed to read configuration file: {e}",
                config_path = str( path )
            )

        # yaml.safe_load returns None for empty files
        if config is None:
            config = {}

        if not isinstance( config, dict ):
            raise ConfigurationError(
                message     = "Configuration must be a YAML dictionary",
                config_path = str( path ),
                value       = type( config ).__name__
            )

        return config

    def _merge_configs( self, default: Dict[str, Any], user: Dict[str, Any] ) -> Dict[str, Any]:
        """
        Recursively merge user config into default config.

        Ensures:
            - Returns merged configuration dict
            - User values override defaults
            - Nested dicts are deep merged
        """
        merged = default.copy()

        for key, user_value in user.items():
            if key in merged and isinstance( merged[key], dict ) and isinstance( user_value, dict ):
                merged[key] = self._merge_configs( merged[key], user_value )
            else:
                merged[key] = user_value

        return merged

    def _validate_config( self, config: Dict[str, Any] ) -> None:
        """
        Validate configuration structure and values.

        Raises:
            - ConfigurationError if validation fails
        """
        for section in [ 'display', 'logging' ]:
            if not isinstance( config.get( section ), dict ):
                raise ConfigurationError(
                    message     = f"Missing required configuration section: {section}",
                    config_path = self.config_path,
                    field       = section
                )

        self._validate_display_section( config['display'] )
        self._validate_logging_section( config['logging'] )

    def _validate_display_section( self, display_config: Dict[str, Any] ) -> None:
        """Validate display configuration section."""
        for field, minimum in _WIDTH_FIELDS:
            width = display_config.get( field )
            # bool is an int subclass, so reject it explicitly
            if not isinstance( width, int ) or isinstance( width, bool ) or width < minimum:
                raise ConfigurationError(
                    message     = f"{field} must be an integer >= {minimum}",
                    config_path = self.config_path,
                    field       = f"display.{field}",
                    value       = width
                )

        places = display_config.get( 'decimal_places' )
        if not isinstance( places, int ) or isinstance( places, bool ) or not 0 <= places <= 10:
            raise ConfigurationError(
                message     = "decimal_places must be an integer between 0 and 10",
                config_path = self.config_path,
                field       = "display.decimal_places",
                value       = places
            )

        if not isinstance( display_config.get( 'use_color' ), bool ):
            raise ConfigurationError(
                message     = "use_color must be a boolean",
                config_path = self.config_path,
                field       = "display.use_color",
                value       = display_config.get( 'use_color' )
            )

    def _validate_logging_section( self, logging_config: Dict[str, Any] ) -> None:
        """Validate logging configuration section."""
        level = logging_config.get( 'level' )
        if not isinstance( level, str ) or level.upper() not in VALID_LOG_LEVELS:
            raise ConfigurationError(
                message     = f"Invalid logging level. Must be one of: {', '.join( VALID_LOG_LEVELS )}",
                config_path = self.config_path,
                field       = "logging.level",
                value       = level
            )

        if not isinstance( logging_config.get( 'format' ), str ):
            raise ConfigurationError(
                message     = "logging format must be a string",
                config_path = self.config_path,
                field       = "logging.format",
                value       = logging_config.get( 'format' )
            )
