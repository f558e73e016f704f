"""Value Schemas: Pydantic models for the /values API boundary.

Invariants:
    - ValueSubmission.index accepts int, float or str; range and integer checks happen
      in core parse_index so every input shape shares one rule
    - A missing index field is a malformed body (400), not a rejection (422)
"""

from pydantic import BaseModel, StrictInt


class ValueSubmission(BaseModel):
    """Body of POST /values."""
    index: StrictInt | str | float | bool


class SubmissionAccepted(BaseModel):
    """Acknowledgement that intake side effects have been started."""
    working: bool = True


class ValueRecord(BaseModel):
    """One durable Request Record."""
    number: int | None
