# qif_json/controllers/qif_loader.py
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import IO, Optional

from qif_json.data_model.interfaces import IDocumentEmitter, IQifDocument
from qif_json.data_model.qif_parsers_emitters import (
    CsvTransactionEmitter,
    JsonDocumentEmitter,
    QifStateParser,
)
from qif_json.exceptions import UnsupportedOutputFormatError
from qif_json.utilities.core_util import open_for_read, open_for_write

log = logging.getLogger(__name__)

EMITTERS: tuple[IDocumentEmitter, ...] = (JsonDocumentEmitter(), CsvTransactionEmitter())


def supported_extensions() -> tuple[str, ...]:
    return tuple(ext for e in EMITTERS for ext in e.extensions)


def emitter_for_path(path: Path) -> IDocumentEmitter:
    """Pick the emitter whose extension matches ``path`` (case-insensitive)."""
    suffix = path.suffix.lower()
    for emitter in EMITTERS:
        if suffix in emitter.extensions:
            return emitter
    raise UnsupportedOutputFormatError(path, supported_extensions())


def load_qif_document(path: Path, encoding: str = "utf-8") -> IQifDocument:
    """
    Parse the QIF file at ``path``.

    The file is streamed line by line. ``OSError`` from opening or reading
    propagates; parse errors (``QifParseError``) abort without a document.
    """
    log.info("Loading QIF file %s (encoding=%s)", path, encoding)
    with open_for_read(path=path, binary=False, encoding=encoding, errors="replace") as f:
        return QifStateParser().parse_lines(f)


def write_document(
    document: IQifDocument,
    output: Optional[Path] = None,
    stream: Optional[IO[str]] = None,
    encoding: str = "utf-8",
) -> None:
    """
    Serialize ``document`` to ``output`` (format chosen by extension), or as
    JSON to ``stream`` (default stdout) when no output path is given.
    """
    if output is None:
        JsonDocumentEmitter().write(document, stream or sys.stdout)
        return

    emitter = emitter_for_path(output)
    output.parent.mkdir(parents=True, exist_ok=True)
    with open_for_write(output, encoding=encoding, newline="") as fp:
        emitter.write(document, fp)
    log.info("Wrote %s output to %s", emitter.file_format, output)


def convert_qif(
    input_path: Path,
    output: Optional[Path] = None,
    encoding: str = "utf-8",
    stream: Optional[IO[str]] = None,
) -> IQifDocument:
    """Load ``input_path`` and write it out. The output format is checked before parsing."""
    if output is not None:
        emitter_for_path(output)
    document = load_qif_document(input_path, encoding=encoding)
    write_document(document, output, stream=stream)
    return document
