"""Coupon request and response schemas."""

from datetime import date, datetime
from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, field_validator
from pydantic.alias_generators import to_camel

MAX_RAW_CODE_LENGTH = 20

# Decimal rendered as a JSON number rather than pydantic's default string
JsonDecimal = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class CouponCreate(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    code: str = Field(
        min_length=1,
        max_length=MAX_RAW_CODE_LENGTH,
        description=(
            "Coupon code. Special characters are removed; exactly 6 alphanumeric "
            "characters must remain."
        ),
        examples=["SAVE@10"],
    )
    description: str = Field(min_length=1, max_length=255, examples=["10% off the first order"])
    discount_value: Decimal = Field(ge=Decimal("0.5"), examples=["10.00"])
    expiration_date: date = Field(examples=["2026-12-31"])
    published: bool = False

    @field_validator("code", "description")
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value


class CouponResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)

    id: int
    code: str
    description: str
    discount_value: JsonDecimal
    expiration_date: date
    published: bool
    created_at: datetime
