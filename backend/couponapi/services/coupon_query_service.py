"""Read-only coupon queries."""

from sqlalchemy.orm import Session

from couponapi.core.database import transaction
from couponapi.core.exceptions import CouponNotFoundError
from couponapi.models.coupon import Coupon
from couponapi.repositories.coupon_repository import CouponRepository


class CouponQueryService:
    """Service for looking up active coupons."""

    def __init__(self, db: Session):
        self.db = db
        self.coupon_repo = CouponRepository(db)

    def find_by_id(self, coupon_id: int) -> Coupon:
        """Get an active coupon, raising CouponNotFoundError for missing or deleted ones."""
        with transaction(self.db):
            coupon = self.coupon_repo.get_active_by_id(coupon_id)
        if coupon is None:
            raise CouponNotFoundError(coupon_id)
        return coupon

    def find_all(self) -> list[Coupon]:
        with transaction(self.db):
            return self.coupon_repo.get_all_active()
