# tests/controllers/test_qif_loader.py
from __future__ import annotations

import io
import json
from contextlib import contextmanager
from decimal import Decimal
from io import StringIO
from pathlib import Path

import pytest

import qif_json.controllers.qif_loader as ql
from qif_json.data_model.qif_parsers_emitters import CsvTransactionEmitter, JsonDocumentEmitter
from qif_json.exceptions import FieldParseError, UnsupportedOutputFormatError

SAMPLE = (
    "!Account\nNChecking\nTBank\n^\n"
    "!Type:Bank\nD1/1/2024\nT100.00\nPEmployer\nLSalary\n^\n"
    "!Type:Cat\nNSalary\nI\n^\n"
)


def _mk_open(qif_text: str):
    """Return a contextmanager function that mimics ql.open_for_read."""

    @contextmanager
    def _fake_open(path, binary: bool = False, encoding: str = "utf-8", errors: str = "replace"):
        yield StringIO(qif_text)

    return _fake_open


def test_load_streams_lines_from_open_for_read(monkeypatch):
    # Arrange
    monkeypatch.setattr(ql, "open_for_read", _mk_open(SAMPLE))

    # Act
    doc = ql.load_qif_document(path=Path("ignored.qif"))

    # Assert
    assert doc.accounts["Checking"].transactions[0].amount == Decimal("100.00")
    assert [c.name for c in doc.categories] == ["Salary"]


def test_load_reads_real_file_with_crlf(tmp_path):
    # Arrange
    p = tmp_path / "in.qif"
    p.write_bytes(SAMPLE.replace("\n", "\r\n").encode("utf-8"))

    # Act
    doc = ql.load_qif_document(p)

    # Assert
    assert doc.accounts["Checking"].type == "Bank"
    assert doc.accounts["Checking"].transactions[0].payee == "Employer"


def test_load_honours_encoding(tmp_path):
    # Arrange
    p = tmp_path / "in.qif"
    p.write_bytes("!Account\nNCafé\n^\n".encode("cp1252"))

    # Act
    doc = ql.load_qif_document(p, encoding="cp1252")

    # Assert
    assert list(doc.accounts) == ["Café"]


def test_load_missing_file_raises_oserror(tmp_path):
    with pytest.raises(OSError):
        ql.load_qif_document(tmp_path / "missing.qif")


def test_load_propagates_field_parse_error(monkeypatch):
    # Arrange
    monkeypatch.setattr(ql, "open_for_read", _mk_open("!Account\nNChecking\nBoops\n^\n"))

    # Act / Assert
    with pytest.raises(FieldParseError):
        ql.load_qif_document(Path("ignored.qif"))


@pytest.mark.parametrize(
    "name, emitter_type",
    [("out.json", JsonDocumentEmitter), ("OUT.JSON", JsonDocumentEmitter), ("t.csv", CsvTransactionEmitter)],
)
def test_emitter_for_path(name, emitter_type):
    assert isinstance(ql.emitter_for_path(Path(name)), emitter_type)


@pytest.mark.parametrize("name", ["out.txt", "out", "out.json.bak"])
def test_emitter_for_path_rejects_unknown_extensions(name):
    with pytest.raises(UnsupportedOutputFormatError) as exc_info:
        ql.emitter_for_path(Path(name))
    assert exc_info.value.supported == (".json", ".csv")


def test_write_document_without_output_uses_stream():
    # Arrange
    buf = io.StringIO()
    doc = ql.QifStateParser().parse(SAMPLE)

    # Act
    ql.write_document(doc, None, stream=buf)

    # Assert
    assert json.loads(buf.getvalue())["accounts"]["Checking"]["type"] == "Bank"


def test_convert_writes_json_file_and_creates_parent(tmp_path):
    # Arrange
    src = tmp_path / "in.qif"
    src.write_text(SAMPLE, encoding="utf-8")
    out = tmp_path / "nested" / "out.json"

    # Act
    ql.convert_qif(src, out)

    # Assert
    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["categories"] == [{"name": "Salary", "income": True}]
    assert data["accounts"]["Checking"]["transactions"][0]["amount"] == 100.0


def test_convert_writes_csv_file(tmp_path):
    # Arrange
    src = tmp_path / "in.qif"
    src.write_text(SAMPLE, encoding="utf-8")
    out = tmp_path / "out.csv"

    # Act
    ql.convert_qif(src, out)

    # Assert
    lines = out.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 2
    assert lines[1].startswith("Checking,1/1/2024,100.00,Employer")


def test_convert_rejects_bad_extension_before_reading(monkeypatch, tmp_path):
    # Arrange
    def _boom(*args, **kwargs):
        raise AssertionError("input must not be read")

    monkeypatch.setattr(ql, "load_qif_document", _boom)
    out = tmp_path / "out.xml"

    # Act / Assert
    with pytest.raises(UnsupportedOutputFormatError):
        ql.convert_qif(tmp_path / "in.qif", out)
    assert not out.exists()
