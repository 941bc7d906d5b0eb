from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from libs.common.constants import HEALTH_MESSAGE

from ..dependencies import get_reference_id_factory, get_registry
from ..schemas import TopupRequestBody, TopupResponseBody
from ..services.topup import AllowListRegistry, ReferenceIdFactory, decide

router = APIRouter()


@router.post(
    "/topup",
    response_model=TopupResponseBody,
    response_model_exclude_none=True,
)
async def process_topup(
    payload: TopupRequestBody,
    registry: AllowListRegistry = Depends(get_registry),
    reference_id_factory: ReferenceIdFactory = Depends(get_reference_id_factory),
) -> TopupResponseBody:
    # Business outcomes travel in the body; the status code is always 200.
    result = decide(payload.to_domain(), registry, reference_id_factory)
    return TopupResponseBody.from_domain(result)


@router.get("/health", response_class=PlainTextResponse)
async def health_check() -> str:
    return HEALTH_MESSAGE
