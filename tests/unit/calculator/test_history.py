#!/usr/bin/env python3
"""
Unit tests for HistoryLog and HistoryEntry.
"""

import dataclasses

import pytest

from proconv.calculator.dispatcher import dispatch
from proconv.calculator.history import HistoryEntry, HistoryLog
from proconv.calculator.requests import CalculationRequest, LengthRequest, NumberBaseRequest


class TestHistoryLog:
    """Tests for the session history."""

    def test_starts_empty( self ):
        history = HistoryLog()
        assert history.is_empty()
        assert len( history ) == 0
        assert history.entries == []

    def test_append_keeps_insertion_order( self ):
        history = HistoryLog()
        history.append( "Length", "1.00 M to F", "3.28" )
        history.append( "Currency", "100.00 I to U", "1.20" )

        kinds = [ entry.kind for entry in history ]
        assert kinds == [ "Length", "Currency" ]

    def test_entries_are_immutable( self ):
        entry = HistoryLog().append( "Length", "1.00 M to F", "3.28" )
        with pytest.raises( dataclasses.FrozenInstanceError ):
            entry.kind = "Other"

    def test_entries_property_is_a_copy( self ):
        history = HistoryLog()
        history.append( "Length", "1.00 M to F", "3.28" )
        history.entries.clear()
        assert len( history ) == 1

    def test_success_and_failure_leave_one_entry( self ):
        history = HistoryLog()

        ok_entry = history.record( dispatch( LengthRequest( value=1, from_unit="M", to_unit="F" ) ) )
        failed   = history.record( dispatch( CalculationRequest( operand1=10, operator="/", operand2=0 ) ) )

        assert failed is None
        assert len( history ) == 1
        assert history.entries == [ ok_entry ]
        assert ok_entry == HistoryEntry( "Length", "1.00 M to F", "3.28" )

    def test_number_base_records_direct_string( self ):
        history = HistoryLog()
        entry = history.record( dispatch( NumberBaseRequest( raw_value="255", from_base="D", to_base="H" ) ) )
        assert entry.result_description == "FF"
        assert entry.input_description == "255 D to H"
