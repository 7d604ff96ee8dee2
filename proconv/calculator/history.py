#!/usr/bin/env python3
"""
Session History for completed conversions and calculations.

Append-only, insertion-ordered record of successful operations. Lives for the
duration of one session; nothing is written to disk. Failed operations are
never recorded.

Usage:
    from proconv.calculator.history import HistoryLog

    history = HistoryLog()
    history.record( dispatch( request ) )

    for entry in history:
        print( entry.kind, entry.input_description, entry.result_description )
"""

import logging
from dataclasses import dataclass
from typing import Iterator, List

logger = logging.getLogger( __name__ )


@dataclass( frozen=True )
class HistoryEntry:
    """One completed operation: kind label, formatted input, formatted result."""

    kind               : str
    input_description  : str
    result_description : str


class HistoryLog:
    """
    Ordered log of successful operations for one session.

    Requires:
        - Entries are appended from a single thread

    Ensures:
        - Entries are kept in insertion order
        - Entries are immutable once recorded
        - Error results are ignored by record()
    """

    def __init__( self ):
        """Initialize empty history."""
        self._entries: List[HistoryEntry] = []

    def append( self, kind: str, input_description: str, result_description: str ) -> HistoryEntry:
        """
        Append one entry.

        Ensures:
            - Returns the stored HistoryEntry
        """
        entry = HistoryEntry( kind, input_description, result_description )
        self._entries.append( entry )
        logger.debug( "history: %s | %s | %s", kind, input_description, result_description )
        return entry

    def record( self, result ):
        """
        Append an OperationResult if it succeeded.

        Requires:
            - result is an OperationResult from the dispatcher

        Ensures:
            - Returns the new HistoryEntry for status="ok"
            - Returns None and leaves the log untouched for status="error"
        """
        if not result.ok:
            return None

        return self.append( result.kind_label, result.input_description, result.display )

    @property
    def entries( self ) -> List[HistoryEntry]:
        """Snapshot copy of the entries in insertion order."""
        return list( self._entries )

    def is_empty( self ) -> bool:
        return not self._entries

    def __len__( self ):
        return len( self._entries )

    def __iter__( self ) -> Iterator[HistoryEntry]:
        return iter( list( self._entries ) )
