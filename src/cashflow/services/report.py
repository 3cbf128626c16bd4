from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Decimal
from typing import Sequence

from cashflow.models import Settlement, Transaction


@dataclass(slots=True)
class SettlementSummary:
    transaction_count: int
    settlement_count: int
    participant_count: int
    total_settled: Decimal

    @property
    def payments_saved(self) -> int:
        return max(0, self.transaction_count - self.settlement_count)


def summarize(transactions: Sequence[Transaction], settlements: Sequence[Settlement]) -> SettlementSummary:
    participants = {tx.from_id for tx in transactions} | {tx.to_id for tx in transactions}
    return SettlementSummary(
        transaction_count=len(transactions),
        settlement_count=len(settlements),
        participant_count=len(participants),
        total_settled=sum((s.amount for s in settlements), Decimal(0)),
    )


def format_amount(amount: Decimal, symbol: str = "$", places: int = 2) -> str:
    if places < 0:
        raise ValueError(f"places must be non-negative, got {places}")
    quantum = Decimal(1).scaleb(-places)
    value = Decimal(amount).quantize(quantum, rounding=ROUND_HALF_EVEN)
    return f"{symbol}{value:,.{places}f}"


def format_settlements(settlements: Sequence[Settlement], symbol: str = "$", places: int = 2) -> str:
    if not settlements:
        return "No payments needed."
    lines = []
    for index, s in enumerate(settlements, start=1):
        lines.append(f"{index}. {s.from_id} → {s.to_id}: {format_amount(s.amount, symbol, places)}")
    return "\n".join(lines)


def format_summary(summary: SettlementSummary, symbol: str = "$", places: int = 2) -> str:
    lines = [
        f"Original transactions: {summary.transaction_count}",
        f"Optimized settlements: {summary.settlement_count}",
        f"Payments saved: {summary.payments_saved}",
        f"Participants: {summary.participant_count}",
        f"Total settled: {format_amount(summary.total_settled, symbol, places)}",
    ]
    return "\n".join(lines)
