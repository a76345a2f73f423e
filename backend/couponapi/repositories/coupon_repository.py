"""Coupon repository for data access."""

from sqlalchemy.orm import Session

from couponapi.models.coupon import Coupon


class CouponRepository:
    """Repository for Coupon model.

    Reads named ``*_active`` skip soft-deleted rows; everything else sees
    the whole table. Writes only flush, so the caller's transaction decides
    when they are committed.
    """

    def __init__(self, db: Session):
        self.db = db

    def get_all_active(self) -> list[Coupon]:
        """Get all coupons that have not been deleted, newest first."""
        return (
            self.db.query(Coupon)
            .filter(Coupon.deleted_at.is_(None))
            .order_by(Coupon.created_at.desc(), Coupon.id.desc())
            .all()
        )

    def get_active_by_id(self, coupon_id: int) -> Coupon | None:
        """Get a coupon by ID unless it has been deleted."""
        return (
            self.db.query(Coupon)
            .filter(Coupon.id == coupon_id, Coupon.deleted_at.is_(None))
            .first()
        )

    def get_by_id(self, coupon_id: int) -> Coupon | None:
        """Get a coupon by ID, deleted or not."""
        return self.db.query(Coupon).filter(Coupon.id == coupon_id).first()

    def exists_by_code(self, code: str) -> bool:
        """Check whether any coupon, deleted or not, uses this code."""
        return self.db.query(Coupon.id).filter(Coupon.code == code).first() is not None

    def save(self, coupon: Coupon) -> Coupon:
        """Insert or update a coupon."""
        self.db.add(coupon)
        self.db.flush()
        self.db.refresh(coupon)
        return coupon

    def delete(self, coupon: Coupon) -> None:
        """Physically remove a coupon row."""
        self.db.delete(coupon)
        self.db.flush()
