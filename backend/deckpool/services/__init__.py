"""Services Layer: imperative shell around the core pool.

Invariants:
    - All shared-state access goes through PoolService
"""
