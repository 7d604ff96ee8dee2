"""
Converter Core — Deterministic conversions and calculations.

Handles temperature, number base, logarithm, currency and length conversions
plus a small arithmetic/trigonometric calculator, all via pure Python
dispatch over a closed set of request models.

Modules:
    requests.py          — Request models (pydantic tagged union)
    dispatcher.py        — compute() + dispatch() + input/result formatting
    calc_operations.py   — Pure Python conversion and calculation functions
    conversion_tables.py — Unit codes, fixed factors and rates
    history.py           — HistoryLog / HistoryEntry for the session
    exceptions.py        — ConverterError hierarchy and ErrorKind
"""
