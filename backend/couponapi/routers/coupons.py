"""Coupon API endpoints."""

from fastapi import APIRouter, Depends, Path, Response
from sqlalchemy.orm import Session

from couponapi.core.database import get_db
from couponapi.models.coupon import Coupon
from couponapi.schemas.coupon import CouponCreate, CouponResponse
from couponapi.services.coupon_service import CouponService

router = APIRouter()

# Largest value a 64-bit signed INTEGER column can hold
MAX_COUPON_ID = 2**63 - 1

ERROR_ENVELOPE_EXAMPLE = {
    "timestamp": "2026-02-18T10:30:00+00:00",
    "status": 422,
    "error": "Unprocessable Entity",
    "message": "Expiration date cannot be in the past.",
}


def get_coupon_service(db: Session = Depends(get_db)) -> CouponService:
    return CouponService(db)


@router.post(
    "",
    response_model=CouponResponse,
    status_code=201,
    summary="Create coupon",
    responses={
        400: {"description": "Malformed or missing fields"},
        422: {
            "description": "Invalid code, low discount, past expiration date or duplicate code",
            "content": {"application/json": {"example": ERROR_ENVELOPE_EXAMPLE}},
        },
    },
)
async def create_coupon(
    data: CouponCreate,
    service: CouponService = Depends(get_coupon_service),
) -> Coupon:
    """Create a new coupon.

    Special characters are stripped from `code`; exactly six alphanumeric
    characters must remain.
    """
    return service.create(data)


@router.get(
    "",
    response_model=list[CouponResponse],
    summary="List coupons",
)
async def list_coupons(
    service: CouponService = Depends(get_coupon_service),
) -> list[Coupon]:
    """List active coupons, newest first."""
    return service.find_all()


@router.get(
    "/{coupon_id}",
    response_model=CouponResponse,
    summary="Get coupon",
    responses={404: {"description": "Coupon not found or already removed"}},
)
async def get_coupon(
    coupon_id: int = Path(ge=1, le=MAX_COUPON_ID),
    service: CouponService = Depends(get_coupon_service),
) -> Coupon:
    """Get an active coupon by ID."""
    return service.find_by_id(coupon_id)


@router.delete(
    "/{coupon_id}",
    status_code=204,
    response_class=Response,
    summary="Delete coupon",
    responses={
        404: {"description": "Coupon not found"},
        422: {"description": "Coupon was already removed"},
    },
)
async def delete_coupon(
    coupon_id: int = Path(ge=1, le=MAX_COUPON_ID),
    service: CouponService = Depends(get_coupon_service),
) -> Response:
    """Soft-delete a coupon. The row is kept with `deletedAt` set."""
    service.delete(coupon_id)
    return Response(status_code=204)
