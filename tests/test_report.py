from decimal import Decimal

import pytest

from cashflow.models import Settlement, Transaction
from cashflow.services.report import format_amount, format_settlements, format_summary, summarize


def test_format_settlements_lines():
    settlements = [
        Settlement(from_id="A", to_id="B", amount=Decimal("20")),
        Settlement(from_id="C", to_id="B", amount=Decimal("1234.5")),
    ]

    text = format_settlements(settlements)

    assert text == "1. A → B: $20.00\n2. C → B: $1,234.50"


def test_format_settlements_empty():
    assert format_settlements([]) == "No payments needed."


def test_format_amount_rounds_half_even():
    assert format_amount(Decimal("2.345"), "€", 2) == "€2.34"
    assert format_amount(Decimal("10"), "", 0) == "10"


def test_summary_counts_saved_payments():
    transactions = [
        Transaction(from_id="A", to_id="B", amount=Decimal("10")),
        Transaction(from_id="B", to_id="C", amount=Decimal("10")),
        Transaction(from_id="A", to_id="C", amount=Decimal("5")),
    ]
    settlements = [Settlement(from_id="A", to_id="C", amount=Decimal("15"))]

    summary = summarize(transactions, settlements)

    assert summary.transaction_count == 3
    assert summary.settlement_count == 1
    assert summary.payments_saved == 2
    assert summary.participant_count == 3
    assert summary.total_settled == Decimal("15")

    text = format_summary(summary)
    assert "Payments saved: 2" in text
    assert "Total settled: $15.00" in text


def test_format_amount_rejects_negative_places():
    with pytest.raises(ValueError):
        format_amount(Decimal("1"), "$", -1)
