from fastapi import APIRouter

from libs.common.constants import API_PREFIX

from . import gopay

router = APIRouter()
router.include_router(gopay.router, prefix=API_PREFIX, tags=["gopay"])

__all__ = ["router"]
