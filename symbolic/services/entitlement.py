"""
Entitlement - Decide whether a subscription transaction grants access.

A transaction counts only when its signature was verified, it has not
been revoked and it has not expired. An upgraded transaction, superseded
by another subscription, stays valid until it expires.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Iterable, Optional


@dataclass(frozen=True)
class Transaction:
    """Subscription transaction record."""
    product_id: str = ""
    purchase_date: Optional[datetime] = None
    revocation_date: Optional[datetime] = None
    expiration_date: Optional[datetime] = None
    is_upgraded: bool = False


@dataclass(frozen=True)
class VerificationResult:
    """A transaction wrapped with the outcome of its signature check."""
    transaction: Transaction
    verified: bool = False

    @classmethod
    def verified_transaction(cls, transaction: Transaction) -> "VerificationResult":
        return cls(transaction=transaction, verified=True)

    @classmethod
    def unverified_transaction(cls, transaction: Transaction) -> "VerificationResult":
        return cls(transaction=transaction, verified=False)

    @property
    def is_valid(self) -> bool:
        return is_entitled(self)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def is_entitled(result: VerificationResult, now: Optional[datetime] = None) -> bool:
    """
    Check whether a verified transaction currently grants access.

    Args:
        result: Transaction and its verification outcome
        now: Reference time, defaults to the current UTC time. Naive
            datetimes are treated as UTC.

    Returns:
        False if unverified, revoked or expired (expiration strictly before
        now), True otherwise
    """
    if not result.verified:
        return False

    transaction = result.transaction
    if transaction.revocation_date is not None:
        return False

    now = _as_utc(now) if now is not None else datetime.now(timezone.utc)
    if transaction.expiration_date is not None and _as_utc(transaction.expiration_date) < now:
        return False

    # Upgraded (superseded) transactions remain valid until they expire
    return True


def has_entitlement(results: Iterable[VerificationResult], now: Optional[datetime] = None) -> bool:
    """True if any of the transactions grants access."""
    return any(is_entitled(result, now) for result in results)
