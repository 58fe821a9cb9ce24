# qif_json/data_model/interfaces/i_qif_document.py
from __future__ import annotations

from collections.abc import Iterator
from typing import Optional

from typing_extensions import Protocol, runtime_checkable

from .i_account import IAccount
from .i_category import ICategory
from .i_to_dict import IToDict
from .i_transaction import ITransaction


@runtime_checkable
class IQifDocument(IToDict, Protocol):
    """Root of a parsed QIF file: accounts keyed by name plus the category list."""

    accounts: dict[str, IAccount]
    categories: list[ICategory]

    def ensure_account(self, name: str) -> IAccount: ...
    def get_account(self, name: Optional[str]) -> Optional[IAccount]: ...
    def add_category(self, category: ICategory) -> None: ...
    def iter_transactions(self) -> Iterator[tuple[str, ITransaction]]: ...
