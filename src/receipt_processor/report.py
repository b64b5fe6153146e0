"""Human readable output for the ledger and the settlement"""
from typing import Dict, List, Optional, Sequence, Set

from .accounting import resolve_person
from .class_models import Ledger, Receipt, Settlement
from .config import settings
from .price import format_price


def format_people(receipts: Sequence[Receipt]) -> str:
    buyers = sorted({receipt.purchaser for receipt in receipts})
    consumers = sorted(set().union(*(receipt.recipients() for receipt in receipts)))
    return "\n".join([
        f"All people who made purchases: {', '.join(buyers)}",
        f"All people who received items: {', '.join(consumers)}",
    ])


def format_most_expensive(receipts: Sequence[Receipt], currency: Optional[str] = None) -> str:
    currency = currency or settings.currency
    if not receipts:
        return "No receipts were parsed"
    receipt = max(receipts, key=lambda r: r.total_spent())
    return (f"Most expensive receipt: {receipt.file_path} by {receipt.purchaser}, "
            f"{format_price(receipt.total_spent())} {currency}")


def format_ledger(
    ledger: Ledger,
    participants: Set[str],
    overrides: Optional[Dict[str, str]] = None,
    currency: Optional[str] = None
) -> str:
    """
    Per purchaser breakdown, e.g.

        oskars spent a total of
        2.00 GBP on raitis
        3.00 GBP on all
    """
    currency = currency or settings.currency
    blocks: List[str] = []
    for buyer in sorted(ledger):
        lines = [f"{buyer} spent a total of"]
        for recipient in sorted(ledger[buyer]):
            name = resolve_person(participants, recipient, overrides)
            lines.append(f"{format_price(ledger[buyer][recipient])} {currency} on {name}")
        blocks.append("\n".join(lines))
    return "\n\n".join(blocks)


def format_settlement(settlement: Settlement, currency: Optional[str] = None) -> str:
    currency = currency or settings.currency
    lines = []
    pairs = ((settlement.debtor, settlement.creditor), (settlement.creditor, settlement.debtor))
    for debtor, creditor in pairs:
        lines.append(f"{debtor} debt to {creditor}: {format_price(settlement.debts[debtor])} {currency}")
    lines.append(f"{settlement.debtor} owes {settlement.creditor} {format_price(settlement.amount)} {currency}!")
    return "\n".join(lines)
