"""Helpers for Go string literals."""

import json
import re

# Escape sequences allowed in Go interpreted string literals
ESCAPE_PATTERN = re.compile(
    r'\\(?:[abfnrtv\\"]|[0-7]{3}|x[0-9A-Fa-f]{2}|u[0-9A-Fa-f]{4}|U[0-9A-Fa-f]{8})'
)

SIMPLE_ESCAPES = {
    "a": b"\a",
    "b": b"\b",
    "f": b"\f",
    "n": b"\n",
    "r": b"\r",
    "t": b"\t",
    "v": b"\v",
    "\\": b"\\",
    '"': b'"',
}

MAX_OCTAL_ESCAPE = 0o377
MAX_CODE_POINT = 0x10FFFF
SURROGATES = range(0xD800, 0xE000)


def quote(value: str) -> str:
    """Return value as a Go interpreted string literal.

    JSON string escapes are all valid Go escapes, and non-ASCII text is
    kept verbatim since Go source is UTF-8.
    """
    return json.dumps(value, ensure_ascii=False)


def _escape_bytes(escape: str, literal: str) -> bytes:
    """Return the bytes one escape sequence stands for.

    Octal and \\x escapes denote single bytes, \\u and \\U escapes the UTF-8
    encoding of a code point.
    """
    kind = escape[1]
    if kind in SIMPLE_ESCAPES:
        return SIMPLE_ESCAPES[kind]
    if kind == "x":
        return bytes([int(escape[2:], 16)])
    if kind in "uU":
        code_point = int(escape[2:], 16)
        if code_point in SURROGATES or code_point > MAX_CODE_POINT:
            raise ValueError(f"invalid code point {escape} in string literal: {literal!r}")
        return chr(code_point).encode("utf-8")

    value = int(escape[1:], 8)
    if value > MAX_OCTAL_ESCAPE:
        raise ValueError(f"octal escape {escape} out of range in string literal: {literal!r}")
    return bytes([value])


def unquote(literal: str) -> str:
    """Return the value of a Go interpreted or raw string literal.

    Args:
        literal: Literal text including its quotes, e.g. '"fmt"' or '`fmt`'.

    Returns:
        The unquoted string.

    Raises:
        ValueError: If the literal is not a well-formed Go string literal, or
            its escapes do not decode to valid UTF-8.
    """
    if len(literal) < 2:
        raise ValueError(f"invalid string literal: {literal!r}")

    quote = literal[0]
    if quote != literal[-1]:
        raise ValueError(f"unterminated string literal: {literal!r}")

    body = literal[1:-1]
    if quote == "`":
        if "`" in body:
            raise ValueError(f"invalid raw string literal: {literal!r}")
        # carriage returns are discarded from raw strings
        return body.replace("\r", "")

    if quote != '"' or "\n" in body:
        raise ValueError(f"invalid string literal: {literal!r}")

    remainder = ESCAPE_PATTERN.sub("", body)
    if "\\" in remainder:
        raise ValueError(f"invalid escape in string literal: {literal!r}")
    if '"' in remainder:
        raise ValueError(f"invalid string literal: {literal!r}")
    if remainder == body:
        return body

    decoded = bytearray()
    position = 0
    for match in ESCAPE_PATTERN.finditer(body):
        decoded += body[position : match.start()].encode("utf-8")
        decoded += _escape_bytes(match.group(), literal)
        position = match.end()
    decoded += body[position:].encode("utf-8")

    try:
        return decoded.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ValueError(f"string literal is not valid UTF-8: {literal!r}") from e
