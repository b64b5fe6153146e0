from typing import Dict, Iterable, Optional, Set, Tuple

from loguru import logger

from .class_models import Ledger, Receipt, Settlement
from .config import SettlementParty, settings


def participants(receipts: Iterable[Receipt]) -> Set[str]:
    """Everyone who paid for at least one receipt."""
    return {receipt.purchaser for receipt in receipts}


def aggregate(receipts: Iterable[Receipt]) -> Ledger:
    """
    Sum up how much each purchaser spent on each consumer across all receipts.

    Returns:
        Ledger mapping purchaser -> consumer identifier -> total in minor units.
        Every purchaser is present, even one whose receipts have no items.
    """
    spending: Ledger = {}
    for receipt in receipts:
        recipients = spending.setdefault(receipt.purchaser, {})
        for item in receipt.items:
            recipients[item.consumer] = recipients.get(item.consumer, 0) + item.total_price

    return spending


def resolve_person(
    participants: Set[str],
    prefix: str,
    overrides: Optional[Dict[str, str]] = None
) -> str:
    """
    Turn a consumer identifier into a display name.

    The identifier is matched as a prefix against the participants. If nobody matches,
    the override table is consulted ("a" -> "all" by default), and anything left over
    becomes "Person <prefix>".

    Note: when several participants share the prefix the alphabetically first one wins.
    """
    if overrides is None:
        overrides = settings.name_overrides

    matches = sorted(person for person in participants if person.startswith(prefix))
    if matches:
        if len(matches) > 1:
            logger.warning(f"Identifier '{prefix}' is ambiguous between {', '.join(matches)}; using {matches[0]}")
        return matches[0]

    if prefix in overrides:
        return overrides[prefix]
    return f"Person {prefix}"


def calculate_settlement(
    ledger: Ledger,
    parties: Tuple[SettlementParty, SettlementParty],
    shared_identifier: Optional[str] = None
) -> Settlement:
    """
    Net out what two people owe each other.

    Each party owes the other whatever the other bought for them, plus half of what
    the other bought for everyone. The smaller debt is then subtracted from the larger.

    Args:
        ledger: Output of aggregate()
        parties: The two people to settle; the first one is the debtor only if
            its debt is strictly larger, so a tie names the second one
        shared_identifier: Consumer identifier meaning "everyone"

    Returns:
        Settlement naming the debtor, the creditor and the net amount.
    """
    if shared_identifier is None:
        shared_identifier = settings.shared_identifier

    first, second = parties

    def debt_of(debtor: SettlementParty, creditor: SettlementParty) -> int:
        bought = ledger.get(creditor.name, {})
        return bought.get(debtor.identifier, 0) + bought.get(shared_identifier, 0) // 2

    first_debt = debt_of(first, second)
    second_debt = debt_of(second, first)
    debts = {first.name: first_debt, second.name: second_debt}

    if first_debt > second_debt:
        return Settlement(debtor=first.name, creditor=second.name, amount=first_debt - second_debt, debts=debts)
    return Settlement(debtor=second.name, creditor=first.name, amount=second_debt - first_debt, debts=debts)
