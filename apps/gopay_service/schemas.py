from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .services.topup import TopupRequest, TopupResponse


class TopupRequestBody(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    partner_id: str | None = Field(default=None, alias="partnerId")
    phone_number: str | None = Field(default=None, alias="phoneNumber")
    amount: int = 0
    bni_transaction_id: str | None = Field(default=None, alias="bniTransactionId")

    @field_validator("amount", mode="before")
    @classmethod
    def _null_amount_as_zero(cls, value):
        # An explicit null amount behaves like a missing one
        return 0 if value is None else value

    def to_domain(self) -> TopupRequest:
        return TopupRequest(
            partner_id=self.partner_id,
            phone_number=self.phone_number,
            amount=self.amount,
            upstream_transaction_id=self.bni_transaction_id,
        )


class TopupResponseBody(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    status: Literal["SUCCESS", "FAILED"]
    gopay_ref_id: str | None = Field(default=None, alias="gopayRefId")
    bni_transaction_id: str | None = Field(default=None, alias="bniTransactionId")
    message: str

    @classmethod
    def from_domain(cls, response: TopupResponse) -> "TopupResponseBody":
        return cls(
            status=response.status,
            gopay_ref_id=response.reference_id,
            bni_transaction_id=response.upstream_transaction_id,
            message=response.message,
        )
