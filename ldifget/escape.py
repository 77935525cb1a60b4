"""
Escaping of values for use in LDAP search filters (RFC 4515).

Bytes outside ASCII and the filter metacharacters are written as a
backslash followed by two lowercase hex digits.
"""

import re

SPECIAL = frozenset(b"\\*():\0")

_escapeSequence = re.compile(rb"\\(.?)(.?)", re.DOTALL)
_hexDigits = frozenset(b"0123456789abcdefABCDEF")


class InvalidEscapeError(ValueError):
    """Invalid escape sequence"""


def _needsEscape(c):
    return c > 0x7F or c in SPECIAL


def escapeFilterValue(data):
    """
    >>> escapeFilterValue(b'a*(b)')
    b'a\\\\2a\\\\28b\\\\29'
    """
    return b"".join(
        b"\\%02x" % c if _needsEscape(c) else bytes((c,)) for c in data
    )


def _unescape(match):
    for digit in match.group(1, 2):
        if not digit:
            raise InvalidEscapeError("incomplete escape sequence at end of input")
        if digit[0] not in _hexDigits:
            raise InvalidEscapeError("invalid hexadecimal digit 0x%02x" % digit[0])
    return bytes((int(match.group(1) + match.group(2), 16),))


def unescapeFilterValue(data):
    """
    Reverse escapeFilterValue(). Every backslash must be followed by two
    hex digits.
    """
    return _escapeSequence.sub(_unescape, data)
