from .registry import AllowListRegistry, build_default_registry
from .service import (
    ReferenceIdFactory,
    TopupRequest,
    TopupResponse,
    TopupStatus,
    decide,
    make_reference_id_factory,
)

__all__ = [
    "AllowListRegistry",
    "ReferenceIdFactory",
    "TopupRequest",
    "TopupResponse",
    "TopupStatus",
    "build_default_registry",
    "decide",
    "make_reference_id_factory",
]
