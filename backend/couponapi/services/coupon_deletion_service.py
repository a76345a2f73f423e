"""Coupon soft-deletion use case."""

import logging

from sqlalchemy.orm import Session

from couponapi.core.database import transaction
from couponapi.core.exceptions import CouponNotFoundError
from couponapi.repositories.coupon_repository import CouponRepository

logger = logging.getLogger(__name__)


class CouponDeletionService:
    """Service for soft-deleting coupons."""

    def __init__(self, db: Session):
        self.db = db
        self.coupon_repo = CouponRepository(db)

    def delete(self, coupon_id: int) -> None:
        """Soft-delete a coupon.

        The lookup includes deleted coupons so that an unknown id (not
        found) can be told apart from a second delete (business rule).

        Raises:
            CouponNotFoundError: If no coupon ever had this id.
            BusinessRuleError: If the coupon was already deleted.
        """
        with transaction(self.db):
            coupon = self.coupon_repo.get_by_id(coupon_id)
            if coupon is None:
                raise CouponNotFoundError(coupon_id)
            coupon.soft_delete()
            self.coupon_repo.save(coupon)

        logger.info("Soft-deleted coupon %s", coupon_id)
