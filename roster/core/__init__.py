"""Core Layer - domain types, error hierarchy and store contract.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Nothing here performs IO
"""
