# qif_json/__init__.py
"""Convert QIF (Quicken Interchange Format) files into JSON-ready documents."""

from qif_json.controllers.qif_loader import convert_qif, load_qif_document, write_document
from qif_json.data_model import QAccount, QCategory, QifDocument, QifSection, QTransaction
from qif_json.data_model.qif_parsers_emitters import (
    CsvTransactionEmitter,
    JsonDocumentEmitter,
    QifStateParser,
    parse_qif_lines,
)
from qif_json.exceptions import (
    FieldParseError,
    QifParseError,
    UnsupportedOutputFormatError,
)

__version__ = "0.1.0"

__all__ = [
    "QifStateParser",
    "parse_qif_lines",
    "load_qif_document",
    "write_document",
    "convert_qif",
    "JsonDocumentEmitter",
    "CsvTransactionEmitter",
    "QifDocument",
    "QAccount",
    "QTransaction",
    "QCategory",
    "QifSection",
    "QifParseError",
    "FieldParseError",
    "UnsupportedOutputFormatError",
]
