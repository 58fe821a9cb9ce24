# qif_json/data_model/__init__.py
from .interfaces import (
    IAccount,
    ICategory,
    IDocumentEmitter,
    IQifDocument,
    IToDict,
    ITransaction,
    QifSection,
)
from .q_wrapper import TRANSFER, QAccount, QCategory, QifDocument, QTransaction

__all__ = [
    "QifSection", "IAccount", "ICategory", "IDocumentEmitter", "IQifDocument",
    "IToDict", "ITransaction", "QAccount", "QCategory", "QTransaction",
    "QifDocument", "TRANSFER"]
