# qif_json/data_model/interfaces/i_account.py
from __future__ import annotations

from decimal import Decimal
from typing import Optional

from typing_extensions import Protocol, runtime_checkable

from .i_to_dict import IToDict
from .i_transaction import ITransaction


@runtime_checkable
class IAccount(IToDict, Protocol):
    # --- data attributes ---
    name: str
    type: Optional[str]
    description: Optional[str]
    initial_balance: Optional[Decimal]

    # None until the first transaction is attached
    transactions: Optional[list[ITransaction]]

    def add_transaction(self, transaction: ITransaction) -> None: ...
