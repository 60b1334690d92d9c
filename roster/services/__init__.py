"""Services Layer - request orchestration between the API and the store.

Invariants:
    - Services hold no per-request state
    - Stores are injected, never imported as module globals
"""
