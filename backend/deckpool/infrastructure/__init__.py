"""Infrastructure Layer: file persistence and logging.

Invariants:
    - IO failures mapped to core/errors.py types before leaving this layer
"""
