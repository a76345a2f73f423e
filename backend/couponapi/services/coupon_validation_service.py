"""Coupon validation combining model rules with storage-backed checks."""

from collections.abc import Callable
from datetime import date
from decimal import Decimal

from sqlalchemy.orm import Session

from couponapi.core.exceptions import BusinessRuleError
from couponapi.models.coupon import Coupon
from couponapi.repositories.coupon_repository import CouponRepository


def duplicate_code_error(code: str) -> BusinessRuleError:
    return BusinessRuleError(f"A coupon with code '{code}' already exists.")


class CouponValidationService:
    """Service for validating coupon fields before persistence."""

    def __init__(self, db: Session, today_provider: Callable[[], date] = date.today):
        self.db = db
        self.coupon_repo = CouponRepository(db)
        self.today_provider = today_provider

    def sanitize_and_validate_code(self, raw_code: str) -> str:
        """Sanitize a raw code and make sure it is usable.

        Args:
            raw_code: The code as submitted by the client.

        Returns:
            The sanitized six-character code.

        Raises:
            BusinessRuleError: If the sanitized code has the wrong length or
                is already used by any coupon, deleted ones included.
        """
        sanitized = Coupon.sanitize_code(raw_code)
        Coupon.validate_code(sanitized)
        if self.coupon_repo.exists_by_code(sanitized):
            raise duplicate_code_error(sanitized)
        return sanitized

    def validate_discount_value(self, discount_value: Decimal) -> None:
        Coupon.validate_discount_value(discount_value)

    def validate_expiration_date(self, expiration_date: date) -> None:
        Coupon.validate_expiration_date(expiration_date, self.today_provider())
