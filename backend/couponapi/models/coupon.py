"""Coupon model and its domain rules."""

import re
from datetime import date
from decimal import Decimal

from sqlalchemy import Boolean, Column, Date, DateTime, Integer, Numeric, String

from couponapi.core.database import Base
from couponapi.core.exceptions import BusinessRuleError
from couponapi.models.shared import utc_now

CODE_LENGTH = 6
MIN_DISCOUNT_VALUE = Decimal("0.5")

_NON_ALPHANUMERIC = re.compile(r"[^A-Za-z0-9]")


class Coupon(Base):
    """Discount coupon.

    A coupon is active while ``deleted_at`` is null. Deletion only stamps
    ``deleted_at``; rows are never removed, so ``code`` stays unique across
    active and deleted coupons.
    """

    __tablename__ = "coupons"

    id = Column(Integer, primary_key=True, autoincrement=True)
    code = Column(String(CODE_LENGTH), unique=True, index=True, nullable=False)
    description = Column(String(255), nullable=False)
    discount_value = Column(Numeric(10, 2), nullable=False)
    expiration_date = Column(Date, nullable=False)
    published = Column(Boolean, nullable=False, default=False)

    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
    deleted_at = Column(DateTime(timezone=True), nullable=True)

    @staticmethod
    def sanitize_code(raw_code: str) -> str:
        """Strip every character that is not an ASCII letter or digit."""
        return _NON_ALPHANUMERIC.sub("", raw_code)

    @staticmethod
    def validate_code(sanitized_code: str) -> None:
        if len(sanitized_code) != CODE_LENGTH:
            raise BusinessRuleError(
                f"Field 'code' must contain exactly {CODE_LENGTH} alphanumeric characters "
                f"after special characters are removed. Sanitized code: "
                f"'{sanitized_code}' ({len(sanitized_code)} chars)."
            )

    @staticmethod
    def validate_discount_value(discount_value: Decimal) -> None:
        if Decimal(str(discount_value)) < MIN_DISCOUNT_VALUE:
            raise BusinessRuleError(f"Minimum discount value is {MIN_DISCOUNT_VALUE}.")

    @staticmethod
    def validate_expiration_date(expiration_date: date, today: date) -> None:
        """Reject dates strictly before ``today``; ``today`` itself is valid."""
        if expiration_date < today:
            raise BusinessRuleError("Expiration date cannot be in the past.")

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def soft_delete(self) -> None:
        """Mark the coupon as deleted. A coupon can only be deleted once."""
        if self.is_deleted:
            raise BusinessRuleError(f"Coupon with id {self.id} has already been removed.")
        self.deleted_at = utc_now()  # type: ignore[assignment]
