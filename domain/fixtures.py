# domain/fixtures.py
"""
Test-mode fixtures understood by the remote API.

The funding source picked for a scenario decides which webhook event the
otherwise identical call chains end up producing.
"""
from __future__ import annotations

from enum import Enum


class FundingSource(str, Enum):
    # Charge succeeds.
    VALID = "tok_visa"
    # Charge is declined -> charge.failed.
    DECLINED = "tok_chargeDeclined"
    # Charge succeeds and is immediately disputed -> charge.dispute.created.
    DISPUTE = "tok_createDisputeInquiry"
    # Attaches to a customer, every later charge fails -> invoice.payment_failed.
    CHARGE_CUSTOMER_FAIL = "tok_chargeCustomerFail"

    @property
    def outcome(self) -> str:
        return _SOURCE_OUTCOMES[self]


class CardNumber(str, Enum):
    # Always succeeds.
    VISA = "4242424242424242"
    # Always declined.
    DECLINED = "4000000000000002"

    @property
    def outcome(self) -> str:
        return _CARD_OUTCOMES[self]


_SOURCE_OUTCOMES = {
    FundingSource.VALID: "charge succeeds",
    FundingSource.DECLINED: "charge is declined",
    FundingSource.DISPUTE: "charge succeeds, then a dispute inquiry is opened",
    FundingSource.CHARGE_CUSTOMER_FAIL: "source attaches, charges against it fail",
}

_CARD_OUTCOMES = {
    CardNumber.VISA: "payment succeeds",
    CardNumber.DECLINED: "payment is declined",
}


def lookup_fixture(enum_cls, name: str):
    """Resolve a fixture member by case-insensitive name, None when unknown."""
    try:
        return enum_cls[name.upper()]
    except KeyError:
        return None
