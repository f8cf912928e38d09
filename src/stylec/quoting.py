"""Quoted-string codec for border glyphs.

Strings are double-quoted with C-style backslash escapes. Printable
characters are kept as they are; everything else is escaped:

    "h", "|"          plain glyphs
    "\\""             the character '"' itself
    "\\\\"            the character '\\' itself
    "\\012"           an octal-encoded byte
    "\\xFF"           a hex-encoded byte
    "\\u2500"         a hex-encoded code point
    "\\U0001F600"     a hex-encoded code point

Byte escapes are collected as raw bytes, so ``"\\xe2\\x94\\x80"`` decodes to
the single glyph U+2500.
"""

from __future__ import annotations

__all__ = ["quote", "unquote"]

_SIMPLE_ESCAPES = {
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
    "\\": "\\",
    '"': '"',
}

_SIMPLE_QUOTES = {v: f"\\{k}" for k, v in _SIMPLE_ESCAPES.items()}

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_OCT_DIGITS = frozenset("01234567")


def quote(text: str) -> str:
    """Return *text* as a double-quoted literal with backslash escapes."""
    out = ['"']
    for ch in text:
        if ch in _SIMPLE_QUOTES:
            out.append(_SIMPLE_QUOTES[ch])
        elif ch.isprintable():
            out.append(ch)
        else:
            code = ord(ch)
            if code < 0x20 or code == 0x7F:
                out.append(f"\\x{code:02x}")
            elif code < 0x10000:
                out.append(f"\\u{code:04x}")
            else:
                out.append(f"\\U{code:08x}")
    out.append('"')
    return "".join(out)


def _read_hex(text: str, pos: int, count: int) -> int:
    digits = text[pos:pos + count]
    if len(digits) != count or not all(c in _HEX_DIGITS for c in digits):
        raise ValueError(f"invalid escape sequence: \\{text[pos - 1:pos + count]}")
    return int(digits, 16)


def unquote(text: str, pos: int = 0) -> tuple[int, str]:
    """Decode the double-quoted literal starting at *pos*.

    Returns ``(end, value)`` where *end* is the index just past the closing
    quote. Raises ValueError for a missing opening quote, an unterminated
    literal, a malformed escape, or bytes that do not form valid UTF-8.
    """
    if pos >= len(text) or text[pos] != '"':
        raise ValueError("expected '\"'")
    start = pos
    pos += 1
    buf = bytearray()
    while True:
        if pos >= len(text):
            raise ValueError(f"unterminated string: {text[start:]}")
        ch = text[pos]
        if ch == '"':
            pos += 1
            break
        if ch != "\\":
            buf += ch.encode("utf-8")
            pos += 1
            continue

        # Escape sequence.
        pos += 1
        if pos >= len(text):
            raise ValueError(f"unterminated string: {text[start:]}")
        esc = text[pos]
        if esc in _SIMPLE_ESCAPES:
            buf += _SIMPLE_ESCAPES[esc].encode("utf-8")
            pos += 1
        elif esc in _OCT_DIGITS:
            digits = text[pos:pos + 3]
            if len(digits) != 3 or not all(c in _OCT_DIGITS for c in digits):
                raise ValueError(f"invalid escape sequence: \\{digits}")
            value = int(digits, 8)
            if value > 0xFF:
                raise ValueError(f"invalid escape sequence: \\{digits}")
            buf.append(value)
            pos += 3
        elif esc == "x":
            buf.append(_read_hex(text, pos + 1, 2))
            pos += 3
        elif esc in ("u", "U"):
            width = 4 if esc == "u" else 8
            code = _read_hex(text, pos + 1, width)
            if code > 0x10FFFF or 0xD800 <= code <= 0xDFFF:
                raise ValueError(
                    f"invalid escape sequence: \\{text[pos:pos + 1 + width]}"
                )
            buf += chr(code).encode("utf-8")
            pos += 1 + width
        else:
            raise ValueError(f"invalid escape sequence: \\{esc}")

    try:
        value = buf.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ValueError(f"invalid UTF-8 in {text[start:pos]}") from exc
    return pos, value
