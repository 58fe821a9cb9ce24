from .csv_emitter import TRANSACTION_COLUMNS, CsvTransactionEmitter, transactions_frame
from .json_emitter import JsonDocumentEmitter
from .qif_state_parser import QifStateParser, parse_qif_lines

__all__ = [
    "QifStateParser",
    "parse_qif_lines",
    "JsonDocumentEmitter",
    "CsvTransactionEmitter",
    "transactions_frame",
    "TRANSACTION_COLUMNS",
]
