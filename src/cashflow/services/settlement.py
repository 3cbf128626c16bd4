from __future__ import annotations

import heapq
from decimal import Decimal, localcontext
from typing import Iterable, List, Mapping

from cashflow.logging import get_logger
from cashflow.models import Settlement, Transaction
from cashflow.services.validation import UnbalancedLedger, assert_valid_transaction, coerce_balance

# Balances at or below this magnitude count as settled.
ZERO_TOLERANCE = Decimal("1e-9")
# Significant digits used while accumulating balances.
BALANCE_PRECISION = 50


def compute_net_balances(transactions: Iterable[Transaction]) -> dict[str, Decimal]:
    # Every row is validated before any balance changes.
    checked = [(tx, assert_valid_transaction(tx)) for tx in transactions]

    balances: dict[str, Decimal] = {}
    with localcontext() as ctx:
        ctx.prec = BALANCE_PRECISION
        for tx, amount in checked:
            balances[tx.from_id] = balances.get(tx.from_id, Decimal(0)) - amount
            balances[tx.to_id] = balances.get(tx.to_id, Decimal(0)) + amount
    return balances


def minimize_settlements(balances: Mapping[str, Decimal | float | int]) -> List[Settlement]:
    """Greedily pair the largest creditor with the largest debtor until nobody is owed.

    Both sides live in heaps keyed by ``(-magnitude, participant_id)`` so the extremal
    participant comes out first and equal balances resolve to the smallest id.
    Each round zeroes at least one participant, which caps the result at
    ``nonzero_participants - 1`` payments.
    """
    with localcontext() as ctx:
        ctx.prec = BALANCE_PRECISION
        return _match_extremes({pid: coerce_balance(value) for pid, value in balances.items()})


def _match_extremes(balances: dict[str, Decimal]) -> List[Settlement]:
    total = sum(balances.values(), Decimal(0))
    if abs(total) > ZERO_TOLERANCE:
        raise UnbalancedLedger(f"balances must sum to zero, got {total}")

    creditors: list[tuple[Decimal, str]] = []
    debtors: list[tuple[Decimal, str]] = []

    for participant_id, balance in balances.items():
        if balance > ZERO_TOLERANCE:
            creditors.append((-balance, participant_id))
        elif balance < -ZERO_TOLERANCE:
            debtors.append((balance, participant_id))

    heapq.heapify(creditors)
    heapq.heapify(debtors)

    settlements: list[Settlement] = []

    while creditors and debtors:
        neg_credit, cred_id = heapq.heappop(creditors)
        neg_debt, debt_id = heapq.heappop(debtors)
        cred_amount = -neg_credit
        debt_amount = -neg_debt

        transfer_amount = min(cred_amount, debt_amount)
        settlements.append(Settlement(from_id=debt_id, to_id=cred_id, amount=transfer_amount))

        cred_amount -= transfer_amount
        debt_amount -= transfer_amount

        if cred_amount > ZERO_TOLERANCE:
            heapq.heappush(creditors, (-cred_amount, cred_id))
        if debt_amount > ZERO_TOLERANCE:
            heapq.heappush(debtors, (-debt_amount, debt_id))

    return settlements


def minimize(transactions: Iterable[Transaction]) -> List[Settlement]:
    log = get_logger(__name__)
    transactions = list(transactions)

    try:
        balances = compute_net_balances(transactions)
    except ValueError as exc:
        log.warning("settlement.rejected", error=str(exc))
        raise

    settlements = minimize_settlements(balances)
    log.info(
        "settlement.minimized",
        transactions=len(transactions),
        participants=len(balances),
        settlements=len(settlements),
    )
    return settlements
