"""Infrastructure Layer: backing-service adapters and cross-cutting concerns.

Invariants:
    - Infrastructure imports core/ errors and protocols, never services/ or api/
    - Every driver exception is mapped to a core/errors.py type before leaving an adapter
"""
