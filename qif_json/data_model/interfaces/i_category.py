# qif_json/data_model/interfaces/i_category.py
from __future__ import annotations

from typing import Optional

from typing_extensions import Protocol, runtime_checkable

from .i_to_dict import IToDict


@runtime_checkable
class ICategory(IToDict, Protocol):
    """
    Protocol for QIF Category list entries (i.e., records in !Type:Cat).

    A conforming object should expose at least:
      - name: top-level category name (e.g., "Auto" for "Auto:Fuel:Premium")
      - sub_category / sub_sub_category: the second and third name levels
      - description: human-readable description
      - income: True if the record carried a QIF 'I' line
      - expense: True if the record carried a QIF 'E' line
    """

    name: Optional[str]
    sub_category: Optional[str]
    sub_sub_category: Optional[str]
    description: Optional[str]
    income: bool
    expense: bool

    def is_empty(self) -> bool: ...
