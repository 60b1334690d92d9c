"""Infrastructure Layer - persistence backends and cross-cutting concerns.

Invariants:
    - Every persistence failure leaves this layer as StoreError
"""
