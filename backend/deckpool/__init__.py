"""deckpool: a shuffled, replenishing pool of unique tokens served over HTTP.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
