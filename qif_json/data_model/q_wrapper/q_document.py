from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from ..interfaces import (
    IAccount,
    ICategory,
    IQifDocument,
    IToDict,
    ITransaction,
    RecursiveDict,
)
from .q_account import QAccount


@dataclass
class QifDocument:
    """Accounts (keyed by name, in declaration order) and categories parsed from one QIF file."""

    accounts: dict[str, IAccount] = field(default_factory=dict)
    categories: list[ICategory] = field(default_factory=list)

    def ensure_account(self, name: str) -> IAccount:
        """Return the account called ``name``, creating it on first use."""
        account = self.accounts.get(name)
        if account is None:
            account = QAccount(name=name)
            self.accounts[name] = account
        return account

    def get_account(self, name: Optional[str]) -> Optional[IAccount]:
        if name is None:
            return None
        return self.accounts.get(name)

    def add_category(self, category: ICategory) -> None:
        self.categories.append(category)

    def iter_transactions(self) -> Iterator[tuple[str, ITransaction]]:
        """Yield ``(account_name, transaction)`` pairs in document order."""
        for name, account in self.accounts.items():
            for txn in account.transactions or ():
                yield name, txn

    def to_dict(self) -> dict[str, RecursiveDict]:
        return {
            "accounts": {name: acct.to_dict() for name, acct in self.accounts.items()},
            "categories": [c.to_dict() for c in self.categories],
        }


if TYPE_CHECKING:
    _is_IQifDocument: type[IQifDocument] = QifDocument
    _is_IToDict: type[IToDict] = QifDocument
