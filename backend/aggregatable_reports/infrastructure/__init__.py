"""Infrastructure Layer: file persistence and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from core/ domain logic (errors excepted)
    - All IO failures mapped to typed errors from core/errors.py
"""
