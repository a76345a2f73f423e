from couponapi.models.coupon import CODE_LENGTH, MIN_DISCOUNT_VALUE, Coupon

__all__ = [
    "CODE_LENGTH",
    "MIN_DISCOUNT_VALUE",
    "Coupon",
]
