from pathlib import Path
from typing import Dict, List, Set

from pydantic import BaseModel, ConfigDict, Field

# purchaser -> consumer identifier -> total in minor units
Ledger = Dict[str, Dict[str, int]]


class Item(BaseModel):
    """Single line of a receipt."""
    model_config = ConfigDict(frozen=True)

    name: str
    consumer: str = Field(min_length=1, max_length=1)  # case-sensitive
    single_price: int = Field(ge=0)  # in pence / cents
    count: int = Field(default=1, ge=0)

    @property
    def total_price(self) -> int:
        return self.single_price * self.count


class Receipt(BaseModel):
    """One parsed receipt file: who paid and what was bought."""
    model_config = ConfigDict(frozen=True)

    file_path: Path
    purchaser: str = Field(min_length=1)
    items: List[Item] = Field(default_factory=list)

    def total_spent(self) -> int:
        """Sum of all item totals on this receipt."""
        return sum(item.total_price for item in self.items)

    def recipients(self) -> Set[str]:
        """All consumer identifiers that received items from the purchase."""
        return {item.consumer for item in self.items}


class Settlement(BaseModel):
    """Net result of the two-party split."""
    debtor: str
    creditor: str
    amount: int  # debtor owes creditor this many minor units
    debts: Dict[str, int]  # gross debt of each party before netting
