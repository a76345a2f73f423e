"""Coupon creation use case."""

import logging
from collections.abc import Callable
from datetime import date

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from couponapi.core.database import transaction
from couponapi.models.coupon import Coupon
from couponapi.repositories.coupon_repository import CouponRepository
from couponapi.schemas.coupon import CouponCreate
from couponapi.services.coupon_validation_service import (
    CouponValidationService,
    duplicate_code_error,
)

logger = logging.getLogger(__name__)


class CouponCreationService:
    """Service for creating coupons."""

    def __init__(self, db: Session, today_provider: Callable[[], date] = date.today):
        self.db = db
        self.coupon_repo = CouponRepository(db)
        self.validation_service = CouponValidationService(db, today_provider=today_provider)

    def create(self, data: CouponCreate) -> Coupon:
        """Validate and persist a new coupon.

        Rules run in order (code, discount value, expiration date) and the
        first violation aborts the whole operation.

        Args:
            data: The validated request payload.

        Returns:
            The persisted Coupon.

        Raises:
            BusinessRuleError: If any business rule fails.
        """
        with transaction(self.db):
            code = self.validation_service.sanitize_and_validate_code(data.code)
            self.validation_service.validate_discount_value(data.discount_value)
            self.validation_service.validate_expiration_date(data.expiration_date)

            coupon = Coupon(
                code=code,
                description=data.description,
                discount_value=data.discount_value,
                expiration_date=data.expiration_date,
                published=data.published,
            )
            try:
                coupon = self.coupon_repo.save(coupon)
            except IntegrityError as exc:
                # Another request inserted the same code after our check
                raise duplicate_code_error(code) from exc

        logger.info("Created coupon %s with code %s", coupon.id, coupon.code)
        return coupon
