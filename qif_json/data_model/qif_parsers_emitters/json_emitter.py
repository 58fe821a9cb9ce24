from __future__ import annotations

from typing import IO, TYPE_CHECKING

import simplejson

from qif_json.data_model.interfaces import IDocumentEmitter, IQifDocument


class JsonDocumentEmitter:
    """Emit a document as indented JSON with ``accounts`` and ``categories`` keys.

    Decimal amounts are written as JSON numbers with their exact digits
    (``100.00`` stays ``100.00``).
    """

    file_format: str = "json"
    extensions: tuple[str, ...] = (".json",)

    def __init__(self, indent: int = 2):
        self.indent = indent

    def emit(self, document: IQifDocument) -> str:
        return simplejson.dumps(
            document.to_dict(),
            indent=self.indent,
            ensure_ascii=False,
            use_decimal=True,
        )

    def write(self, document: IQifDocument, fp: IO[str]) -> None:
        fp.write(self.emit(document))
        fp.write("\n")


if TYPE_CHECKING:
    _is_IDocumentEmitter: type[IDocumentEmitter] = JsonDocumentEmitter
