from decimal import Decimal

import pytest

from cashflow.models import Transaction
from cashflow.services.validation import (
    InvalidAmount,
    InvalidParticipant,
    InvalidParticipantPair,
    SettlementError,
    assert_valid_pair,
    assert_valid_transaction,
    coerce_amount,
    coerce_balance,
)


def test_coerce_amount_accepts_numbers_and_strings():
    assert coerce_amount(Decimal("12.50")) == Decimal("12.50")
    assert coerce_amount(3) == Decimal("3")
    assert coerce_amount(0.1) == Decimal("0.1")
    assert coerce_amount(" 7.25 ") == Decimal("7.25")


@pytest.mark.parametrize("value", [0, -1, "-0.01", float("nan"), float("inf"), "Infinity", "abc", True, None])
def test_coerce_amount_rejects_bad_values(value):
    with pytest.raises(InvalidAmount):
        coerce_amount(value)


def test_assert_valid_transaction_returns_amount():
    amount = assert_valid_transaction(Transaction(from_id="A", to_id="B", amount=Decimal("4")))
    assert amount == Decimal("4")


def test_self_transaction_rejected():
    with pytest.raises(InvalidParticipantPair):
        assert_valid_transaction(Transaction(from_id="A", to_id="A", amount=Decimal("1")))


@pytest.mark.parametrize("participant", ["", "   ", None, 5])
def test_empty_participant_rejected(participant):
    with pytest.raises(InvalidParticipant):
        assert_valid_transaction(Transaction(from_id=participant, to_id="B", amount=Decimal("1")))


def test_errors_are_value_errors():
    assert issubclass(SettlementError, ValueError)
    with pytest.raises(ValueError):
        coerce_amount(-5)


def test_coerce_balance_allows_signed_values():
    assert coerce_balance(Decimal("-4.5")) == Decimal("-4.5")
    assert coerce_balance(0) == Decimal("0")
    assert coerce_balance(-0.3) == Decimal("-0.3")


@pytest.mark.parametrize("value", [float("nan"), float("-inf"), "1", None, False])
def test_coerce_balance_rejects_bad_values(value):
    with pytest.raises(InvalidAmount):
        coerce_balance(value)


def test_assert_valid_pair():
    assert_valid_pair("A", "B")
    with pytest.raises(InvalidParticipantPair):
        assert_valid_pair("A", "A")
    with pytest.raises(InvalidParticipant):
        assert_valid_pair("", "B")
