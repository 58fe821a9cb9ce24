# qif_json/data_model/interfaces/i_transaction.py
from __future__ import annotations

from decimal import Decimal
from typing import Optional

from typing_extensions import Protocol, runtime_checkable

from .i_to_dict import IToDict


@runtime_checkable
class ITransaction(IToDict, Protocol):
    """Structural shape of one transaction record from a ``!Type:`` section."""

    date: Optional[str]
    amount: Optional[Decimal]
    payee: Optional[str]
    memo: Optional[str]
    cleared_status: Optional[str]
    category: Optional[str]
    transaction_type: Optional[str]
    split_category: Optional[str]
    split_memo: Optional[str]
    split_amount: Optional[Decimal]

    def is_empty(self) -> bool: ...
    def is_transfer(self) -> bool: ...
