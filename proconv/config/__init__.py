from .config_loader import ConfigLoader
from .exceptions import ConfigurationError

__all__ = [
    'ConfigLoader',
    'ConfigurationError',
]
