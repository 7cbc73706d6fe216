"""Core Layer: pure report logic, no IO, no async.

Invariants:
    - No module in core/ imports from services/, api/ or infrastructure/
    - All functions are pure and deterministic; errors are raised, never returned
"""
