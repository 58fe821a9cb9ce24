from __future__ import annotations

from dataclasses import dataclass, fields
from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from ..interfaces import ITransaction, IToDict, RecursiveDict

TRANSFER = "Transfer"


@dataclass
class QTransaction:
    """
    One transaction record from a ``!Type:`` section.

    Every field is optional; a field that never appeared in the record stays None
    and is left out of ``to_dict``.
    """

    date: Optional[str] = None
    amount: Optional[Decimal] = None
    payee: Optional[str] = None
    memo: Optional[str] = None
    cleared_status: Optional[str] = None
    category: Optional[str] = None
    transaction_type: Optional[str] = None
    split_category: Optional[str] = None
    split_memo: Optional[str] = None
    split_amount: Optional[Decimal] = None

    def set_category(self, value: str) -> None:
        """Set the category, marking the record as a transfer for ``[Account]`` values."""
        self.category = value
        if "[" in value and "]" in value:
            self.transaction_type = TRANSFER

    def is_transfer(self) -> bool:
        return self.transaction_type == TRANSFER

    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))

    def to_dict(self) -> dict[str, RecursiveDict]:
        return {
            f.name: value
            for f in fields(self)
            if (value := getattr(self, f.name)) is not None
        }


if TYPE_CHECKING:
    _is_ITransaction: type[ITransaction] = QTransaction
    _is_IToDict: type[IToDict] = QTransaction
