# qif_json/data_model/interfaces/enum_qif_section.py
from __future__ import annotations

from enum import Enum
from typing import Optional

ACCOUNT_HEADER = "!Account"
CATEGORY_HEADER = "!Type:Cat"
TRANSACTION_HEADER_PREFIX = "!Type:"


class QifSection(Enum):
    """
    The interpretation context for field lines in a QIF file.

    NONE is the state before any recognized header has been read.
    """

    NONE = "None"
    ACCOUNT = "Account"
    TRANSACTION = "Transaction"
    CATEGORY = "Category"

    @classmethod
    def from_header(cls, line: str) -> Optional["QifSection"]:
        """
        Map a ``!`` header line to the section it opens.

        Returns None for headers we do not recognize (e.g. ``!Option:AutoSwitch``).
        """
        if line == ACCOUNT_HEADER:
            return cls.ACCOUNT
        if line == CATEGORY_HEADER:
            return cls.CATEGORY
        if line.startswith(TRANSACTION_HEADER_PREFIX):
            return cls.TRANSACTION
        return None
