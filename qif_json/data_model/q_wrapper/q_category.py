from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from ..interfaces import ICategory, IToDict, RecursiveDict

SUBCATEGORY_SEPARATOR = ":"


@dataclass
class QCategory:
    """
    Represents a category list entry in QIF format.

    ``Auto:Fuel:Premium`` is stored as name ``Auto``, sub_category ``Fuel`` and
    sub_sub_category ``Premium``. Anything past the second colon stays in
    sub_sub_category.
    """

    name: Optional[str] = None
    sub_category: Optional[str] = None
    sub_sub_category: Optional[str] = None
    description: Optional[str] = None
    income: bool = False
    expense: bool = False

    def set_full_name(self, value: str) -> None:
        parts = value.split(SUBCATEGORY_SEPARATOR, 2)
        self.name = parts[0]
        if len(parts) > 1:
            self.sub_category = parts[1]
        if len(parts) > 2:
            self.sub_sub_category = parts[2]

    def is_empty(self) -> bool:
        return (
            self.name is None
            and self.sub_category is None
            and self.sub_sub_category is None
            and self.description is None
            and not self.income
            and not self.expense
        )

    def to_dict(self) -> dict[str, RecursiveDict]:
        d: dict[str, RecursiveDict] = {}
        if self.name is not None:
            d["name"] = self.name
        if self.sub_category is not None:
            d["sub_category"] = self.sub_category
        if self.sub_sub_category is not None:
            d["sub_sub_category"] = self.sub_sub_category
        if self.description is not None:
            d["description"] = self.description
        # Flags only appear once their line has been seen
        if self.income:
            d["income"] = True
        if self.expense:
            d["expense"] = True
        return d


if TYPE_CHECKING:
    _is_ICategory: type[ICategory] = QCategory
    _is_IToDict: type[IToDict] = QCategory
