"""
Tests for the subscription entitlement predicate.
"""

from datetime import datetime, timedelta, timezone

import pytest

from symbolic.services.entitlement import (
    Transaction,
    VerificationResult,
    has_entitlement,
    is_entitled,
)

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)
PAST = NOW - timedelta(days=1)
FUTURE = NOW + timedelta(days=30)


class TestIsEntitled:
    """Test each branch of the predicate."""

    def test_unverified_is_not_entitled(self):
        result = VerificationResult.unverified_transaction(Transaction(expiration_date=FUTURE))
        assert is_entitled(result, NOW) is False

    def test_revoked_is_not_entitled(self):
        result = VerificationResult.verified_transaction(
            Transaction(revocation_date=PAST, expiration_date=FUTURE))
        assert is_entitled(result, NOW) is False

    def test_expired_is_not_entitled(self):
        result = VerificationResult.verified_transaction(Transaction(expiration_date=PAST))
        assert is_entitled(result, NOW) is False

    def test_upgraded_but_unexpired_is_entitled(self):
        result = VerificationResult.verified_transaction(
            Transaction(is_upgraded=True, expiration_date=FUTURE))
        assert is_entitled(result, NOW) is True

    def test_no_expiration_or_revocation_is_entitled(self):
        result = VerificationResult.verified_transaction(Transaction(product_id="pro.lifetime"))
        assert is_entitled(result, NOW) is True

    def test_expiring_exactly_now_is_still_entitled(self):
        result = VerificationResult.verified_transaction(Transaction(expiration_date=NOW))
        assert is_entitled(result, NOW) is True

    def test_naive_datetimes_are_utc(self):
        result = VerificationResult.verified_transaction(
            Transaction(expiration_date=datetime(2026, 10, 19, 11, 0)))
        assert is_entitled(result, NOW) is False

    def test_defaults_to_current_time(self):
        soon = datetime.now(timezone.utc) + timedelta(hours=1)
        result = VerificationResult.verified_transaction(Transaction(expiration_date=soon))
        assert result.is_valid is True

    def test_verification_result_is_unverified_by_default(self):
        assert VerificationResult(Transaction()).is_valid is False


class TestHasEntitlement:

    @pytest.mark.parametrize("expirations, expected", [
        ([PAST, FUTURE], True),
        ([PAST, PAST], False),
        ([], False),
    ])
    def test_any_valid_transaction(self, expirations, expected):
        results = [VerificationResult.verified_transaction(Transaction(expiration_date=e))
                   for e in expirations]
        assert has_entitlement(results, NOW) is expected
