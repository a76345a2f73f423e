from couponapi.schemas.coupon import CouponCreate, CouponResponse

__all__ = [
    "CouponCreate",
    "CouponResponse",
]
