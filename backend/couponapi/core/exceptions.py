"""Exceptions raised by the coupon domain and services."""


class BusinessRuleError(ValueError):
    """A coupon business rule was violated."""


class CouponNotFoundError(LookupError):
    """No coupon matches the requested id."""

    def __init__(self, coupon_id: int):
        self.coupon_id = coupon_id
        super().__init__(f"Coupon with id {coupon_id} not found or already removed.")
