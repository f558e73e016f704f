"""Core Layer: pure domain rules (index validation, error hierarchy, boundary protocols).

Invariants:
    - Core never imports from infrastructure/, services/ or api/
"""
