"""Character classes and string-literal unescaping."""

from __future__ import annotations

import unicodedata

_LATIN1_SPACES = frozenset("\t\n\v\f\r \x85\xa0")
_MAX_RUNE = 0x10FFFF

_SIMPLE_ESCAPES = {
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
    "\\": "\\",
    "'": "'",
    '"': '"',
    "`": "`",
    "?": "?",
}

_HEX_WIDTHS = {"x": 2, "X": 2, "u": 4, "U": 8}
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")

_GENERIC_ERROR = "unable to unescape string"
_OCTAL_ERROR = "unable to unescape octal sequence in string"


def is_space(r):
    """Tell whether the character is Unicode white space."""
    if ord(r) <= 0xFF:
        return r in _LATIN1_SPACES
    return r.isspace()


def is_alphabetic(r):
    """Tell whether the character may start an identifier."""
    return r in ("_", "$") or r.isalpha()


def is_alphanumeric(r):
    """Tell whether the character may appear inside an identifier."""
    return is_alphabetic(r) or unicodedata.category(r) == "Nd"


def _rune(code):
    if code > _MAX_RUNE:
        raise ValueError(_GENERIC_ERROR)
    if 0xD800 <= code <= 0xDFFF:
        return "\ufffd"
    return chr(code)


def _unescape_chars(body):
    pos = 0
    while pos < len(body):
        ch = body[pos]
        if ch != "\\":
            yield ch
            pos += 1
            continue
        if pos + 1 >= len(body):
            raise ValueError(
                "unable to unescape string, found '\\' as last character"
            )
        code = body[pos + 1]
        pos += 2
        if code in _SIMPLE_ESCAPES:
            yield _SIMPLE_ESCAPES[code]
        elif code in _HEX_WIDTHS:
            width = _HEX_WIDTHS[code]
            digits = body[pos:pos + width]
            if len(digits) < width or not set(digits) <= _HEX_DIGITS:
                raise ValueError(_GENERIC_ERROR)
            pos += width
            yield _rune(int(digits, 16))
        elif code in "0123":
            digits = body[pos:pos + 2]
            if len(digits) < 2 or any(d < "0" or d > "7" for d in digits):
                raise ValueError(_OCTAL_ERROR)
            pos += 2
            yield _rune(int(code + digits, 8))
        else:
            raise ValueError(_GENERIC_ERROR)


def unescape(value):
    """Remove the quotes from a string literal and resolve its escapes.

    Raises ValueError when the literal is malformed.
    """
    value = value.replace("\r\n", "\n").replace("\r", "\n")
    if len(value) < 2:
        raise ValueError(_GENERIC_ERROR)
    if value[0] != value[-1] or value[0] not in ('"', "'"):
        raise ValueError(_GENERIC_ERROR)
    return "".join(_unescape_chars(value[1:-1]))