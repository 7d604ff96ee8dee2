"""
Terminal side of the converter: prompting, rendering and the menu loop.
"""

from .report_formatter import ReportFormatter
from .session import SessionController
from .terminal import TerminalInterface, EndOfInput

__all__ = [
    'ReportFormatter',
    'SessionController',
    'TerminalInterface',
    'EndOfInput',
]
