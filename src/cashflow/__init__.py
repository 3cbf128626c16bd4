"""Debt-settlement minimizer: turns pairwise IOUs into the fewest payments."""

from cashflow.models import Settlement, Transaction
from cashflow.services.settlement import ZERO_TOLERANCE, compute_net_balances, minimize, minimize_settlements
from cashflow.services.validation import (
    InvalidAmount,
    InvalidParticipant,
    InvalidParticipantPair,
    SettlementError,
    UnbalancedLedger,
)

__all__ = [
    "InvalidAmount",
    "InvalidParticipant",
    "InvalidParticipantPair",
    "Settlement",
    "SettlementError",
    "Transaction",
    "UnbalancedLedger",
    "ZERO_TOLERANCE",
    "compute_net_balances",
    "minimize",
    "minimize_settlements",
]
