from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from ..interfaces import IAccount, IToDict, ITransaction, RecursiveDict


@dataclass
class QAccount:
    """
    Represents an account in QIF format.

    Account fields are applied as their lines are read, so re-declaring an
    account by name keeps everything already set on it.
    """

    name: str
    type: Optional[str] = None
    description: Optional[str] = None
    initial_balance: Optional[Decimal] = None
    transactions: Optional[list[ITransaction]] = None

    def add_transaction(self, transaction: ITransaction) -> None:
        if self.transactions is None:
            self.transactions = []
        self.transactions.append(transaction)

    def to_dict(self) -> dict[str, RecursiveDict]:
        # The name is the key of the owning accounts mapping, not a field here
        d: dict[str, RecursiveDict] = {}
        if self.type is not None:
            d["type"] = self.type
        if self.description is not None:
            d["description"] = self.description
        if self.initial_balance is not None:
            d["initial_balance"] = self.initial_balance
        if self.transactions is not None:
            d["transactions"] = [t.to_dict() for t in self.transactions]
        return d


if TYPE_CHECKING:
    _is_IAccount: type[IAccount] = QAccount
    _is_IToDict: type[IToDict] = QAccount
