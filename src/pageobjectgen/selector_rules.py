from __future__ import annotations

import re
from typing import Iterable

_DYNAMIC_ID_DIGITS = re.compile(r"\d{4,}")
_DYNAMIC_CLASS_DIGITS = re.compile(r"\d{3,}")

MIN_CLASS_TOKEN_LENGTH = 3
STATE_CLASS_MARKERS = ("active", "selected")

_CSS_STRING_ESCAPES = {
    "\\": "\\\\",
    "'": "\\'",
    '"': '\\"',
    "\n": "\\a ",
    "\r": "\\d ",
    "\f": "\\c ",
}


def is_dynamic_id_value(id_value: str) -> bool:
    value = id_value.strip()
    if not value:
        return True
    if _DYNAMIC_ID_DIGITS.search(value):
        return True
    return "guid" in value.lower()


def is_usable_class_token(token: str) -> bool:
    # Rejects tokens that tend to change between renders.
    if len(token) < MIN_CLASS_TOKEN_LENGTH:
        return False
    if _DYNAMIC_CLASS_DIGITS.search(token):
        return False
    return not any(marker in token for marker in STATE_CLASS_MARKERS)


def split_class_tokens(raw: str | None) -> list[str]:
    if not raw:
        return []
    return [token for token in raw.split() if token]


def usable_class_tokens(raw: str | None) -> list[str]:
    return [token for token in split_class_tokens(raw) if is_usable_class_token(token)]


def escape_css_value(value: str) -> str:
    return "".join(_CSS_STRING_ESCAPES.get(char, char) for char in value)


def escape_css_identifier(value: str) -> str:
    if value == "-":
        return "\\-"
    escaped: list[str] = []
    for index, char in enumerate(value):
        leading_digit = char in "0123456789" and (index == 0 or (index == 1 and value[0] == "-"))
        if leading_digit:
            escaped.append(f"\\{ord(char):x} ")
        elif char.isascii() and (char.isalnum() or char in ("-", "_")):
            escaped.append(char)
        elif not char.isascii() and char.isprintable():
            escaped.append(char)
        else:
            escaped.append(f"\\{ord(char):x} ")
    return "".join(escaped)


def css_attribute_term(attr: str, value: str) -> str:
    return f"[{attr}='{escape_css_value(value)}']"


def xpath_literal(value: str) -> str:
    if "'" not in value:
        return f"'{value}'"
    if '"' not in value:
        return f'"{value}"'
    pieces = value.split("'")
    quoted = [f"'{piece}'" for piece in pieces]
    return "concat(" + ", \"'\", ".join(quoted) + ")"


def xpath_predicate(attr: str, value: str) -> str:
    return f"@{attr}={xpath_literal(value)}"


def join_xpath_predicates(predicates: Iterable[str]) -> str:
    return " and ".join(predicates)
