"""Values Service: request intake for pending index computations.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
