# qif_json/data_model/interfaces/i_document_emitter.py
"""
Runtime-checkable protocol for serializers of a parsed QIF document.

An emitter turns an :class:`IQifDocument` into text for one output format
(JSON, CSV, ...). ``extensions`` lists the output file suffixes the format is
chosen for; they are compared case-insensitively and include the dot.

Implementations must not mutate the document and must produce the same text
for the same document.
"""

from __future__ import annotations

from typing import IO

from typing_extensions import Protocol, runtime_checkable

from .i_qif_document import IQifDocument


@runtime_checkable
class IDocumentEmitter(Protocol):
    file_format: str
    extensions: tuple[str, ...]

    def emit(self, document: IQifDocument) -> str:
        """Return the serialized document."""
        ...

    def write(self, document: IQifDocument, fp: IO[str]) -> None:
        """Serialize the document into an open text stream."""
        ...
