"""Coupon service facade used by the API layer."""

from collections.abc import Callable
from datetime import date

from sqlalchemy.orm import Session

from couponapi.models.coupon import Coupon
from couponapi.schemas.coupon import CouponCreate
from couponapi.services.coupon_creation_service import CouponCreationService
from couponapi.services.coupon_deletion_service import CouponDeletionService
from couponapi.services.coupon_query_service import CouponQueryService


class CouponService:
    """Single entry point delegating to the coupon use-case services."""

    def __init__(self, db: Session, today_provider: Callable[[], date] = date.today):
        self.creation_service = CouponCreationService(db, today_provider=today_provider)
        self.query_service = CouponQueryService(db)
        self.deletion_service = CouponDeletionService(db)

    def create(self, data: CouponCreate) -> Coupon:
        return self.creation_service.create(data)

    def find_by_id(self, coupon_id: int) -> Coupon:
        return self.query_service.find_by_id(coupon_id)

    def find_all(self) -> list[Coupon]:
        return self.query_service.find_all()

    def delete(self, coupon_id: int) -> None:
        self.deletion_service.delete(coupon_id)
