"""Values Routes: submit an index, read durable history, read current cache values.

Invariants:
    - POST /values answers {"working": true} once intake side effects are started
    - Rejected indices answer 422 through the global ValuesServiceError handler
    - GET /values/all mirrors the store, GET /values/current mirrors the cache;
      neither merges with the other
"""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from values_service.api.dependencies import get_intake_service
from values_service.schemas.values import (
    SubmissionAccepted, ValueRecord, ValueSubmission,
)
from values_service.services.value_intake import ValueIntakeService

router = APIRouter(tags=["values"])


@router.get("/", response_class=PlainTextResponse)
async def root():
    return "Hi"


@router.get("/values/all", response_model=list[ValueRecord])
async def all_values(
    service: ValueIntakeService = Depends(get_intake_service),
):
    """Every accepted submission, in store order."""
    return await service.all_values()


@router.get("/values/current", response_model=dict[str, str])
async def current_values(
    service: ValueIntakeService = Depends(get_intake_service),
):
    """Latest known value per index (placeholder until the worker writes back)."""
    return await service.current_values()


@router.post("/values", response_model=SubmissionAccepted)
async def submit_value(
    body: ValueSubmission,
    service: ValueIntakeService = Depends(get_intake_service),
):
    """Accept an index for computation."""
    service.submit(body.index)
    return SubmissionAccepted()
