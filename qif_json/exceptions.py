# qif_json/exceptions.py
"""
Error taxonomy for QIF parsing and document output.

Parse failures are ``ValueError`` subclasses that carry enough context
(field code, raw value, line number) to locate the offending input.
"""

from __future__ import annotations


class QifParseError(ValueError):
    """Base class for unrecoverable QIF parse failures."""


class FieldParseError(QifParseError):
    """A field value could not be converted to its target type."""

    def __init__(
        self,
        code: str,
        value: str,
        line_number: int,
        line: str = "",
        reason: str = "",
    ) -> None:
        self.code = code
        self.value = value
        self.line_number = line_number
        self.line = line
        self.reason = reason
        msg = f"Cannot parse field {code!r} value {value!r} on line {line_number}"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)


class UnsupportedOutputFormatError(ValueError):
    """The output path does not end in an extension we can write."""

    def __init__(self, path: object, supported: tuple[str, ...]) -> None:
        self.path = path
        self.supported = supported
        super().__init__(
            f"Unsupported output format for {path}. Use {' or '.join(supported)}."
        )
