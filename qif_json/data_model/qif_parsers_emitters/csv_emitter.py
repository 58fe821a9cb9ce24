from __future__ import annotations

from typing import IO, TYPE_CHECKING

import pandas as pd

from qif_json.data_model.interfaces import IDocumentEmitter, IQifDocument

TRANSACTION_COLUMNS: list[str] = [
    "account",
    "date",
    "amount",
    "payee",
    "memo",
    "cleared_status",
    "category",
    "transaction_type",
    "split_category",
    "split_memo",
    "split_amount",
]


def transactions_frame(document: IQifDocument) -> pd.DataFrame:
    """One row per transaction, in document order, with the owning account first."""
    rows = [
        {"account": name, **txn.to_dict()}
        for name, txn in document.iter_transactions()
    ]
    return pd.DataFrame(rows, columns=TRANSACTION_COLUMNS)


class CsvTransactionEmitter:
    """
    Emit the transactions of a document as a flat CSV table.

    Accounts without transactions and the category list have no rows here;
    use the JSON emitter for the full document.
    """

    file_format: str = "csv"
    extensions: tuple[str, ...] = (".csv",)

    def emit(self, document: IQifDocument) -> str:
        return transactions_frame(document).to_csv(index=False, lineterminator="\n")

    def write(self, document: IQifDocument, fp: IO[str]) -> None:
        fp.write(self.emit(document))


if TYPE_CHECKING:
    _is_IDocumentEmitter: type[IDocumentEmitter] = CsvTransactionEmitter
