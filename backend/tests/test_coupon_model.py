"""Tests for the Coupon model and its domain rules."""

import re
from datetime import date, timedelta
from decimal import Decimal

import pytest

from couponapi.core.exceptions import BusinessRuleError
from couponapi.models.coupon import CODE_LENGTH, MIN_DISCOUNT_VALUE, Coupon

TODAY = date(2026, 3, 15)


def _is_subsequence(part: str, whole: str) -> bool:
    it = iter(whole)
    return all(ch in it for ch in part)


class TestSanitizeCode:
    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("SAV#E10", "SAVE10"),
            ("SAVE10", "SAVE10"),
            ("a-b_c d.e!f", "abcdef"),
            ("  12 34 56  ", "123456"),
            ("#@!$%", ""),
            ("", ""),
            ("ÁBC123", "BC123"),
        ],
    )
    def test_strips_non_alphanumeric(self, raw, expected):
        assert Coupon.sanitize_code(raw) == expected

    @pytest.mark.parametrize(
        "raw",
        ["SAV#E10", "x!y@z#1$2%3", "--__--", "Ünïcödé-42", "tab\tand\nnewline", "ok"],
    )
    def test_output_is_alphanumeric_subsequence(self, raw):
        """Sanitizing keeps only [A-Za-z0-9] and preserves relative order."""
        sanitized = Coupon.sanitize_code(raw)
        assert re.fullmatch(r"[A-Za-z0-9]*", sanitized)
        assert _is_subsequence(sanitized, raw)


class TestValidateCode:
    def test_accepts_exact_length(self):
        Coupon.validate_code("ABC123")

    @pytest.mark.parametrize("code", ["", "ABC12", "ABC1234"])
    def test_rejects_other_lengths(self, code):
        with pytest.raises(BusinessRuleError, match=f"exactly {CODE_LENGTH}"):
            Coupon.validate_code(code)

    def test_message_reports_sanitized_code(self):
        with pytest.raises(BusinessRuleError, match=r"'ABC' \(3 chars\)"):
            Coupon.validate_code("ABC")


class TestValidateDiscountValue:
    @pytest.mark.parametrize(
        "value", [Decimal("0.5"), Decimal("0.50"), Decimal("10"), Decimal("9999.99")]
    )
    def test_accepts_values_at_or_above_minimum(self, value):
        Coupon.validate_discount_value(value)

    @pytest.mark.parametrize("value", [Decimal("0.49"), Decimal("0"), Decimal("-1")])
    def test_rejects_values_below_minimum(self, value):
        with pytest.raises(BusinessRuleError, match=str(MIN_DISCOUNT_VALUE)):
            Coupon.validate_discount_value(value)


class TestValidateExpirationDate:
    def test_today_is_accepted(self):
        Coupon.validate_expiration_date(TODAY, TODAY)

    def test_future_is_accepted(self):
        Coupon.validate_expiration_date(TODAY + timedelta(days=1), TODAY)

    def test_yesterday_is_rejected(self):
        with pytest.raises(BusinessRuleError, match="past"):
            Coupon.validate_expiration_date(TODAY - timedelta(days=1), TODAY)


class TestSoftDelete:
    def test_first_call_sets_deleted_at(self):
        coupon = Coupon(code="ABC123")
        assert coupon.is_deleted is False

        coupon.soft_delete()

        assert coupon.deleted_at is not None
        assert coupon.is_deleted is True

    def test_second_call_fails_and_keeps_timestamp(self):
        coupon = Coupon(code="ABC123")
        coupon.soft_delete()
        first = coupon.deleted_at

        with pytest.raises(BusinessRuleError, match="already been removed"):
            coupon.soft_delete()
        assert coupon.deleted_at == first


class TestCouponPersistence:
    def test_defaults(self, db_session):
        """Storage assigns id, created_at and the published default."""
        coupon = Coupon(
            code="DEF001",
            description="Defaults",
            discount_value=Decimal("1.00"),
            expiration_date=TODAY,
        )
        db_session.add(coupon)
        db_session.commit()
        db_session.refresh(coupon)

        assert coupon.id is not None
        assert coupon.published is False
        assert coupon.created_at is not None
        assert coupon.deleted_at is None
        assert coupon.discount_value == Decimal("1.00")
        assert coupon.expiration_date == TODAY
