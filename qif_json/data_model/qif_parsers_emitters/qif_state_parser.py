"""
Line-driven QIF parser.

The parser is a small state machine. ``!`` headers switch the active section,
field lines accumulate into a pending entry (or, in the account section,
update the current account directly) and a ``^`` line commits the pending
entry to the document.

Field codes are dispatched through one lookup table per section. Codes that
are not in the table are ignored so files carrying QIF extensions still load.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any, Optional, Union

from qif_json.data_model.interfaces import IAccount, IQifDocument, QifSection
from qif_json.data_model.q_wrapper import QCategory, QifDocument, QTransaction
from qif_json.exceptions import FieldParseError
from qif_json.utilities.converters_scalar import to_decimal

log = logging.getLogger(__name__)

RECORD_DELIMITER = "^"
HEADER_PREFIX = "!"

Setter = Callable[[Any, str], None]
PendingEntry = Union[QTransaction, QCategory]


def _assign(attr: str) -> Setter:
    def setter(target: Any, value: str) -> None:
        setattr(target, attr, value)

    return setter


def _assign_decimal(attr: str) -> Setter:
    def setter(target: Any, value: str) -> None:
        setattr(target, attr, to_decimal(value))

    return setter


def _flag(attr: str) -> Setter:
    def setter(target: Any, value: str) -> None:
        setattr(target, attr, True)

    return setter


class QifStateParser:
    """Parse QIF lines into a :class:`QifDocument`.

    One instance holds the state of one parse at a time; ``parse_lines``
    resets it, so an instance can be reused sequentially.
    """

    _TRANSACTION_FIELDS: dict[str, Setter] = {
        "D": _assign("date"),
        "T": _assign_decimal("amount"),
        "P": _assign("payee"),
        "M": _assign("memo"),
        "C": _assign("cleared_status"),
        "L": QTransaction.set_category,
        "S": _assign("split_category"),
        "E": _assign("split_memo"),
        "$": _assign_decimal("split_amount"),
    }

    _CATEGORY_FIELDS: dict[str, Setter] = {
        "N": QCategory.set_full_name,
        "D": _assign("description"),
        "I": _flag("income"),
        "E": _flag("expense"),
    }

    # "N" is handled by _process_account_line: it selects the account
    _ACCOUNT_FIELDS: dict[str, Setter] = {
        "T": _assign("type"),
        "D": _assign("description"),
        "B": _assign_decimal("initial_balance"),
    }

    def __init__(self, make_document: Callable[[], IQifDocument] | None = None):
        self._make_document = make_document or QifDocument  # default factory
        self.reset()

    def reset(self) -> None:
        self.document: IQifDocument = self._make_document()
        self.section: QifSection = QifSection.NONE
        self.current_account: Optional[str] = None
        self._pending: Optional[PendingEntry] = None
        self._line_number = 0

    # --- public API ---

    def parse_lines(self, lines: Iterable[str]) -> IQifDocument:
        """Consume ``lines`` (any iterable, read lazily) and return the document."""
        self.reset()
        for line in lines:
            self.feed(line)
        return self.close()

    def parse(self, unparsed_string: str) -> IQifDocument:
        return self.parse_lines(unparsed_string.splitlines())

    def feed(self, raw_line: str) -> None:
        """Process one line of input."""
        self._line_number += 1
        line = raw_line.rstrip("\r\n")
        if not line:
            return
        if line.startswith(HEADER_PREFIX):
            self._enter_section(line)
        elif line == RECORD_DELIMITER:
            self._finalize_entry()
        else:
            self._process_line(line)

    def close(self) -> IQifDocument:
        """Finish the parse. An entry with no closing ``^`` is discarded."""
        self._discard_pending("end of input")
        log.info(
            "Parsed %d lines: %d accounts, %d transactions, %d categories",
            self._line_number,
            len(self.document.accounts),
            sum(1 for _ in self.document.iter_transactions()),
            len(self.document.categories),
        )
        return self.document

    # --- section detection ---

    def _enter_section(self, line: str) -> None:
        section = QifSection.from_header(line)
        if section is None:
            log.debug("Ignoring unrecognized header %r on line %d", line, self._line_number)
            return
        # a pending entry survives a header that repeats the active section kind
        if section is not self.section:
            self._discard_pending(f"header {line!r}")
        self.section = section
        if section is QifSection.ACCOUNT:
            self.current_account = None

    def _discard_pending(self, reason: str) -> None:
        if self._pending is not None and not self._pending.is_empty():
            log.warning(
                "Discarding unterminated %s entry before %s (line %d): %r",
                self.section.value.lower(),
                reason,
                self._line_number,
                self._pending,
            )
        self._pending = None

    # --- finalization ---

    def _finalize_entry(self) -> None:
        entry, self._pending = self._pending, None
        if entry is None or entry.is_empty():
            return

        if self.section is QifSection.TRANSACTION:
            account = self.document.get_account(self.current_account)
            if account is None:
                log.debug(
                    "Dropping transaction ending on line %d: no current account",
                    self._line_number,
                )
                return
            account.add_transaction(entry)
        elif self.section is QifSection.CATEGORY:
            self.document.add_category(entry)

    # --- field dispatch ---

    def _process_line(self, line: str) -> None:
        code = line[0]
        value = line[1:].strip()

        if self.section is QifSection.TRANSACTION:
            self._accumulate(self._TRANSACTION_FIELDS, QTransaction, code, value, line)
        elif self.section is QifSection.CATEGORY:
            self._accumulate(self._CATEGORY_FIELDS, QCategory, code, value, line)
        elif self.section is QifSection.ACCOUNT:
            self._process_account_line(code, value, line)

    def _accumulate(
        self,
        field_map: dict[str, Setter],
        factory: Callable[[], PendingEntry],
        code: str,
        value: str,
        line: str,
    ) -> None:
        setter = field_map.get(code)
        if setter is None:
            self._ignore_code(code)
            return
        if self._pending is None:
            self._pending = factory()
        self._apply(setter, self._pending, code, value, line)

    def _process_account_line(self, code: str, value: str, line: str) -> None:
        if code == "N":
            self.current_account = value
            self.document.ensure_account(value)
            return

        setter = self._ACCOUNT_FIELDS.get(code)
        if setter is None:
            self._ignore_code(code)
            return

        account: Optional[IAccount] = self.document.get_account(self.current_account)
        if account is None:
            log.warning(
                "Ignoring account field %r on line %d: no account name (N) declared yet",
                line,
                self._line_number,
            )
            return
        self._apply(setter, account, code, value, line)

    def _apply(self, setter: Setter, target: Any, code: str, value: str, line: str) -> None:
        try:
            setter(target, value)
        except ValueError as e:
            log.error("Malformed field on line %d: %r", self._line_number, line)
            raise FieldParseError(code, value, self._line_number, line, str(e)) from e

    def _ignore_code(self, code: str) -> None:
        log.debug(
            "Ignoring field code %r in %s section on line %d",
            code,
            self.section.value,
            self._line_number,
        )


def parse_qif_lines(lines: Iterable[str]) -> IQifDocument:
    """Parse an iterable of QIF lines with a fresh :class:`QifStateParser`."""
    return QifStateParser().parse_lines(lines)
