# qif_json/utilities/converters_scalar.py
from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation
from typing import Any, Final


def to_decimal(value: Any, decimal_char: str = ".") -> Decimal:
    """
    Convert various inputs to Decimal with strict, QIF-friendly parsing.

    Supported string formats:
      - "1234", "-1234", "1234-", "(1,234.56)", "-3,188.32"
      - Currency symbols/words ignored: "$1,234.56", "USD 1,234.56"
      - With ``decimal_char=","``: "1.234,56" (EU)
      - With ``decimal_char=""``: the decimal mark is auto-detected

    Raises:
        ValueError: if the value is not exactly one (decorated) number.
            Nothing is ever coerced to zero.

    Examples:
        to_decimal("-3,188.32")        -> Decimal('-3188.32')
        to_decimal("(1,234.56)")       -> Decimal('-1234.56')
        to_decimal("1.234,56", ",")    -> Decimal('1234.56')
    """
    # Fast-path for numeric types
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise ValueError("Unsupported type for Decimal conversion: bool")
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        # Avoid binary float artifacts
        return Decimal(str(value))

    if not isinstance(value, str):
        raise ValueError(
            f"Unsupported type for Decimal conversion: {type(value).__name__}"
        )

    cleaned = clean_number_like_string(value, decimal_char)

    try:
        result = Decimal(cleaned)
    except InvalidOperation as e:
        raise ValueError(
            f"Could not parse Decimal from {value!r} (normalized to {cleaned!r})"
        ) from e
    if not result.is_finite():
        raise ValueError(f"Non-finite Decimal from {value!r}")
    return result


def clean_number_like_string(value: str, decimal_char: str = "") -> str:
    """
    Normalize a money-like string to ``[-]digits[.digits]``.

    Accepted decorations: one sign (leading, or a trailing minus), parentheses
    for negatives, a currency symbol or upper-case ISO code before or after
    the number, and thousands separators in groups of three. Anything else,
    such as embedded spaces or letters and repeated signs, raises ValueError.

    ``decimal_char`` is "." or ","; "" auto-detects it:
      * If both ',' and '.' appear, the *last* one is the decimal mark.
      * If only one appears, it is the decimal mark when 1-2 digits follow it,
        otherwise a thousands separator.
    """
    if decimal_char not in ("", ".", ","):
        raise ValueError(f"Invalid decimal_char: {decimal_char!r}")

    s = value.replace("\xa0", " ").replace(_UNICODE_MINUS, "-").strip()
    if not s:
        raise ValueError("Empty string cannot be converted to Decimal")

    neg = False
    if s.startswith("(") and s.endswith(")"):
        neg = True
        s = s[1:-1].strip()

    m = _MONEY_RE.fullmatch(s)
    if m is None:
        raise ValueError(f"Not a number: {value!r}")
    signs = [g for g in (m.group("sign"), m.group("sign2"), m.group("trailing")) if g]
    if len(signs) > 1 or (neg and signs):
        raise ValueError(f"Conflicting signs in {value!r}")
    if signs and signs[0] == "-":
        neg = True

    body = m.group("body")
    dec_sep = _decimal_separator(body, decimal_char)
    parts = _BODY_RE[dec_sep].fullmatch(body)
    if parts is None or not (parts.group("int") or parts.group("frac")):
        raise ValueError(f"Malformed number {value!r}")

    thousands = "," if dec_sep == "." else "."
    cleaned = (parts.group("int") or "0").replace(thousands, "")
    if parts.group("frac"):
        cleaned = f"{cleaned}.{parts.group('frac')}"
    return f"-{cleaned}" if neg else cleaned


def _decimal_separator(body: str, decimal_char: str) -> str:
    if decimal_char:
        return decimal_char
    has_comma = "," in body
    has_dot = "." in body
    if has_comma and has_dot:
        return "," if body.rfind(",") > body.rfind(".") else "."
    if has_comma or has_dot:
        ch = "," if has_comma else "."
        after = len(body) - body.rfind(ch) - 1
        if after in (1, 2):
            return ch
        # a thousands separator: the decimal mark is the other character
        return "." if ch == "," else ","
    return "."


_CURRENCY = r"(?:[$€£¥]|[A-Z]{3})"
_MONEY_RE: Final[re.Pattern[str]] = re.compile(
    rf"(?P<sign>[+-])?\s*(?:{_CURRENCY}\s*)?(?P<sign2>[+-])?"
    rf"(?P<body>[\d.,]+)(?P<trailing>-)?(?:\s*{_CURRENCY})?"
)
_BODY_RE: Final[dict[str, re.Pattern[str]]] = {
    ".": re.compile(r"(?P<int>\d+(?:,\d{3})*)?(?:\.(?P<frac>\d+))?"),
    ",": re.compile(r"(?P<int>\d+(?:\.\d{3})*)?(?:,(?P<frac>\d+))?"),
}
_UNICODE_MINUS = "−"  # '−'
