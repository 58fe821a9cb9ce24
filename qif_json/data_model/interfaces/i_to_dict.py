# qif_json/data_model/interfaces/i_to_dict.py
from __future__ import annotations

from decimal import Decimal
from typing import Union

from typing_extensions import Protocol, TypeAlias, runtime_checkable

RecursiveDict: TypeAlias = Union[
    str, bool, Decimal, list["RecursiveDict"], dict[str, "RecursiveDict"]
]


@runtime_checkable
class IToDict(Protocol):
    def to_dict(self) -> dict[str, RecursiveDict]: ...
