# qif_json/data_model/q_wrapper/__init__.py

from .q_account import QAccount
from .q_category import QCategory
from .q_document import QifDocument
from .q_transaction import TRANSFER, QTransaction

__all__ = [
    "QAccount",
    "QCategory",
    "QTransaction",
    "QifDocument",
    "TRANSFER",
]
