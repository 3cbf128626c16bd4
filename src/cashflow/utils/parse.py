from __future__ import annotations

import re
from typing import Iterable

from cashflow.models import Transaction
from cashflow.services.validation import assert_valid_pair, coerce_amount

# "A -> B: 10", "A → B 10.50", "A,B,10"
ARROW_RE = re.compile(r"^(?P<src>.+?)\s*(?:->|→)\s*(?P<dst>.+?)(?:\s*:\s*|\s+)(?P<amount>\S+)$")
CSV_RE = re.compile(r"^(?P<src>[^,]+),(?P<dst>[^,]+),(?P<amount>[^,]+)$")


def parse_transaction(line: str) -> Transaction:
    """
    Parse one transaction written as text.

    Supported forms:
    - Alice -> Bob: 10
    - Alice → Bob 10.50
    - Alice,Bob,10
    """
    text = line.strip()
    match = ARROW_RE.match(text) or CSV_RE.match(text)
    if not match:
        raise ValueError(f"Cannot parse transaction: {line.strip()!r}")

    src = match.group("src").strip()
    dst = match.group("dst").strip()
    raw = match.group("amount").strip().lstrip("$")

    assert_valid_pair(src, dst)
    return Transaction(from_id=src, to_id=dst, amount=coerce_amount(raw))


def parse_transactions(lines: Iterable[str]) -> list[Transaction]:
    transactions: list[Transaction] = []
    for line in lines:
        if not line.strip() or line.lstrip().startswith("#"):
            continue
        transactions.append(parse_transaction(line))
    return transactions
