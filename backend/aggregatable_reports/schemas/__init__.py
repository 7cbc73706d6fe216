"""Pydantic Schemas: wire contracts shared with the browser and the HTTP boundary.

Invariants:
    - Field names match the aggregatable-report JSON exactly
    - Domain enums from core/ used for tagged fields
"""
