"""Core Layer: pure logic, no IO, no async.

Invariants:
    - No module in core/ imports from api/, infrastructure/ or config
    - All functions are pure and deterministic (utc_now aside)
"""
