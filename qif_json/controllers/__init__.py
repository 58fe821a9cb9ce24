from .qif_loader import (
    EMITTERS,
    convert_qif,
    emitter_for_path,
    load_qif_document,
    supported_extensions,
    write_document,
)

__all__ = [
    "EMITTERS",
    "convert_qif",
    "emitter_for_path",
    "load_qif_document",
    "supported_extensions",
    "write_document",
]
