# qif_json/data_model/interfaces/__init__.py
"""
Interfaces and Enums for the QIF document model.
"""

from .enum_qif_section import (
    ACCOUNT_HEADER,
    CATEGORY_HEADER,
    TRANSACTION_HEADER_PREFIX,
    QifSection,
)
from .i_account import IAccount
from .i_category import ICategory
from .i_document_emitter import IDocumentEmitter
from .i_qif_document import IQifDocument
from .i_to_dict import IToDict, RecursiveDict
from .i_transaction import ITransaction

__all__ = [
    "ACCOUNT_HEADER",
    "CATEGORY_HEADER",
    "TRANSACTION_HEADER_PREFIX",
    "QifSection",
    "IAccount",
    "ICategory",
    "IDocumentEmitter",
    "IQifDocument",
    "IToDict",
    "ITransaction",
    "RecursiveDict",
]
