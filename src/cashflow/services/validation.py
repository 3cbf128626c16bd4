from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Protocol


class TransactionLike(Protocol):
    from_id: str
    to_id: str
    amount: Decimal


class SettlementError(ValueError):
    pass


class InvalidAmount(SettlementError):
    pass


class InvalidParticipant(SettlementError):
    pass


class InvalidParticipantPair(SettlementError):
    pass


class UnbalancedLedger(SettlementError):
    pass


def coerce_amount(value: object) -> Decimal:
    """Convert a caller-supplied amount to Decimal, rejecting anything not finite and positive.

    Floats go through ``str`` so that ``0.1`` becomes ``Decimal("0.1")`` rather than
    its binary expansion.
    """
    if isinstance(value, bool):
        raise InvalidAmount(f"amount must be a number, got {value!r}")
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, (int, float, str)):
        try:
            amount = Decimal(str(value).strip())
        except InvalidOperation as exc:
            raise InvalidAmount(f"amount is not a number: {value!r}") from exc
    else:
        raise InvalidAmount(f"amount must be a number, got {type(value).__name__}")

    if not amount.is_finite():
        raise InvalidAmount(f"amount must be finite, got {value!r}")
    if amount <= 0:
        raise InvalidAmount(f"amount must be positive, got {value!r}")
    return amount


def assert_valid_participant(participant_id: object) -> str:
    if not isinstance(participant_id, str) or not participant_id.strip():
        raise InvalidParticipant(f"participant id must be a non-empty string, got {participant_id!r}")
    return participant_id


def coerce_balance(value: object) -> Decimal:
    """Convert a signed net balance to Decimal; zero and negative values are allowed."""
    if isinstance(value, bool):
        raise InvalidAmount(f"balance must be a number, got {value!r}")
    if isinstance(value, Decimal):
        balance = value
    elif isinstance(value, (int, float)):
        balance = Decimal(str(value))
    else:
        raise InvalidAmount(f"balance must be a number, got {type(value).__name__}")

    if not balance.is_finite():
        raise InvalidAmount(f"balance must be finite, got {value!r}")
    return balance


def assert_valid_pair(from_id: object, to_id: object) -> None:
    assert_valid_participant(from_id)
    assert_valid_participant(to_id)
    if from_id == to_id:
        raise InvalidParticipantPair(f"{from_id!r} cannot owe themselves")


def assert_valid_transaction(transaction: TransactionLike) -> Decimal:
    assert_valid_pair(transaction.from_id, transaction.to_id)
    return coerce_amount(transaction.amount)
