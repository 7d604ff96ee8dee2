#!/usr/bin/env python3
"""
Professional Converter - Command Line Entry Point

Starts the interactive, menu-driven converter session on the current
terminal. The program takes no arguments and reads no environment
variables; display and logging settings come from the embedded
default_config.yaml.

Design Principles:
- Exit codes: 0=normal quit, 1=configuration error, 130=interrupted
- Operation errors never end the session
- Log records go to stderr so they do not interleave with the tables

Usage Examples:
    proconv
    python -m proconv.run_converter
"""

import logging
import sys

from proconv.cli.report_formatter import ReportFormatter
from proconv.cli.session import SessionController
from proconv.cli.terminal import TerminalInterface
from proconv.config import ConfigLoader, ConfigurationError


def configure_logging( config ) -> None:
    """
    Configure the root logger from the logging section of the config.

    Requires:
        - config has a validated "logging" section
    """
    logging.basicConfig(
        level  = getattr( logging, config['logging']['level'].upper() ),
        format = config['logging']['format'],
        stream = sys.stderr
    )


def build_session( config, input_stream=None, output_stream=None ) -> SessionController:
    """
    Wire formatter, terminal interface and session controller together.

    Ensures:
        - Returns a SessionController with an empty history
    """
    formatter = ReportFormatter( config )
    terminal  = TerminalInterface( formatter, input_stream=input_stream, output_stream=output_stream )
    return SessionController( terminal, decimal_places=config['display']['decimal_places'] )


def main( config_path=None ) -> int:
    """
    Main entry point for CLI.

    Ensures:
        - Returns exit code (0=success, 1=configuration error, 130=interrupted)
        - Errors printed to stderr

    Raises:
        - Never raises ConfigurationError or KeyboardInterrupt
    """
    try:
        config = ConfigLoader( config_path=config_path ).load()
    except ConfigurationError as e:
        print( f"Error: {e}", file=sys.stderr )
        return 1

    configure_logging( config )

    try:
        return build_session( config ).run()

    except KeyboardInterrupt:
        print( "\nInterrupted by user", file=sys.stderr )
        return 130  # Standard SIGINT exit code


if __name__ == '__main__':
    sys.exit( main() )
