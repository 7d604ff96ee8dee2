"""
Configuration exceptions.

Raised only while loading configuration at start-up. Unlike ConverterError,
a ConfigurationError is fatal: the entry point reports it and exits with
status 1.
"""


class ConfigurationError( Exception ):
    """
    Exception raised when configuration loading or validation fails.

    Attributes:
        message (str): Human-readable error message
        config_path (str): Path to configuration file (if applicable)
        field (str): Specific configuration field causing error (if applicable)
        value (any): Invalid value (if applicable)

    Example:
        raise ConfigurationError(
            message     = "decimal_places must be between 0 and 10",
            config_path = "/path/to/config.yaml",
            field       = "display.decimal_places",
            value       = 42
        )
    """

    def __init__( self, message, config_path=None, field=None, value=None ):
        """
        Initialize configuration error.

        Requires:
            - message is non-empty string

        Ensures:
            - Exception initialized with configuration context
        """
        super().__init__( message )
        context = {
            'config_path' : config_path,
            'field'       : field,
            'value'       : str( value )[:100] if value is not None else None
        }
        self.message     = message
        self.context     = { k: v for k, v in context.items() if v is not None }
        self.config_path = config_path
        self.field       = field
        self.value       = value

    def __str__( self ):
        if self.context:
            context_str = ", ".join( f"{k}={v}" for k, v in self.context.items() )
            return f"{self.message} (Context: {context_str})"
        return self.message
