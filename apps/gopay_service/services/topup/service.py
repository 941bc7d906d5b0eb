from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable
from uuid import uuid4

from libs.common.constants import (
    DEFAULT_GOPAY_REF_PREFIX,
    MESSAGE_INVALID_PARAMETERS,
    MESSAGE_PHONE_NOT_REGISTERED,
    MESSAGE_TOPUP_SUCCESS,
)

from .registry import AllowListRegistry

LOGGER = logging.getLogger(__name__)

ReferenceIdFactory = Callable[[], str]


class TopupStatus(str):
    SUCCESS = "SUCCESS"
    FAILED = "FAILED"


@dataclass(frozen=True, slots=True)
class TopupRequest:
    partner_id: str | None
    phone_number: str | None
    amount: int
    upstream_transaction_id: str | None


@dataclass(frozen=True, slots=True)
class TopupResponse:
    status: str
    reference_id: str | None
    upstream_transaction_id: str | None
    message: str

    @property
    def is_success(self) -> bool:
        return self.status == TopupStatus.SUCCESS


def make_reference_id_factory(prefix: str = DEFAULT_GOPAY_REF_PREFIX) -> ReferenceIdFactory:
    """Return a generator of ``<prefix><uuid4>`` reference ids.

    Ids are unique per call; nothing records previously issued ids.
    """

    def _generate() -> str:
        return f"{prefix}{uuid4()}"

    return _generate


_default_reference_id = make_reference_id_factory()


def _failed(request: TopupRequest, message: str) -> TopupResponse:
    return TopupResponse(
        status=TopupStatus.FAILED,
        reference_id=None,
        upstream_transaction_id=request.upstream_transaction_id,
        message=message,
    )


def decide(
    request: TopupRequest,
    registry: AllowListRegistry,
    reference_id_factory: ReferenceIdFactory | None = None,
) -> TopupResponse:
    """Validate a top-up request and resolve it against the allow-list.

    Business failures are returned as ``FAILED`` responses, never raised.
    The upstream transaction id is echoed on every branch.
    """
    LOGGER.info(
        "Top-up request received: phone_number=%s, amount=%s, transaction_id=%s",
        request.phone_number,
        request.amount,
        request.upstream_transaction_id,
    )

    if not request.phone_number or request.amount <= 0:
        LOGGER.warning(
            "Transaction %s FAILED: invalid parameters (phone_number=%r, amount=%s)",
            request.upstream_transaction_id,
            request.phone_number,
            request.amount,
        )
        return _failed(request, MESSAGE_INVALID_PARAMETERS)

    if not registry.is_registered(request.phone_number):
        LOGGER.warning(
            "Transaction %s FAILED: phone number %s not registered",
            request.upstream_transaction_id,
            request.phone_number,
        )
        return _failed(request, MESSAGE_PHONE_NOT_REGISTERED)

    generate = reference_id_factory or _default_reference_id
    reference_id = generate()
    LOGGER.info("Transaction %s SUCCESS: reference_id=%s", request.upstream_transaction_id, reference_id)
    return TopupResponse(
        status=TopupStatus.SUCCESS,
        reference_id=reference_id,
        upstream_transaction_id=request.upstream_transaction_id,
        message=MESSAGE_TOPUP_SUCCESS,
    )
