"""Service Layer: intake orchestration and startup gating over the boundary protocols.

Invariants:
    - Services receive adapters through their constructors (no module globals)
    - Services never import FastAPI; routes translate results into HTTP
"""
