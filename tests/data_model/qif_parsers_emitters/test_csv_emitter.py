# tests/data_model/qif_parsers_emitters/test_csv_emitter.py
from __future__ import annotations

import io
from decimal import Decimal

import pandas as pd

from qif_json.data_model import QifDocument, QTransaction
from qif_json.data_model.qif_parsers_emitters import (
    TRANSACTION_COLUMNS,
    CsvTransactionEmitter,
    QifStateParser,
    transactions_frame,
)

QIF = (
    "!Account\nNChecking\nTBank\n^\n"
    "!Type:Bank\nD1/1/2024\nT100.00\nPEmployer\nLSalary\n^\n"
    "D1/2/2024\nT-20.00\nL[Savings]\n^\n"
    "!Account\nNSavings\n^\n"
    "!Type:Bank\nD1/2/2024\nT20.00\nL[Checking]\n^\n"
    "!Type:Cat\nNSalary\nI\n^\n"
)


def test_frame_has_one_row_per_transaction_with_account_column():
    # Arrange
    doc = QifStateParser().parse(QIF)

    # Act
    df = transactions_frame(doc)

    # Assert
    assert list(df.columns) == TRANSACTION_COLUMNS
    assert len(df) == 3
    assert df["account"].tolist() == ["Checking", "Checking", "Savings"]
    assert df["transaction_type"].tolist()[1:] == ["Transfer", "Transfer"]
    assert pd.isna(df.loc[0, "transaction_type"])


def test_emit_keeps_decimal_text_and_blank_missing_fields():
    # Arrange
    doc = QifDocument()
    doc.ensure_account("Checking").add_transaction(
        QTransaction(date="1/1/2024", amount=Decimal("100.00"))
    )

    # Act
    out = CsvTransactionEmitter().emit(doc)

    # Assert
    lines = out.splitlines()
    assert lines[0] == ",".join(TRANSACTION_COLUMNS)
    assert lines[1] == "Checking,1/1/2024,100.00" + "," * 8


def test_empty_document_emits_header_only():
    # Act
    out = CsvTransactionEmitter().emit(QifDocument())

    # Assert
    assert out == ",".join(TRANSACTION_COLUMNS) + "\n"


def test_write_to_stream_matches_emit():
    # Arrange
    doc = QifStateParser().parse(QIF)
    buf = io.StringIO()

    # Act
    CsvTransactionEmitter().write(doc, buf)

    # Assert
    assert buf.getvalue() == CsvTransactionEmitter().emit(doc)
