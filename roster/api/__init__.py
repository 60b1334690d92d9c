"""API Layer - FastAPI routes, request observer and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Successful responses are JSON; failures are plain-text reason phrases

Design Decisions:
    - Thin routes delegate to RosterService
"""
