from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True, slots=True)
class Transaction:
    from_id: str
    to_id: str
    amount: Decimal


@dataclass(frozen=True, slots=True)
class Settlement:
    from_id: str
    to_id: str
    amount: Decimal
