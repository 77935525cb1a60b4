"""
    Encoding / decoding utilities
"""

import base64


def to_bytes(value):
    """
    Converts value to its bytes representation:

    * Encodes to utf-8 if the value is a unicode string
    * Otherwise wraps value into bytes()
    """
    if isinstance(value, int):
        return str(value).encode("utf-8")
    if isinstance(value, str):
        return value.encode("utf-8")
    return bytes(value)


def to_unicode(value):
    """
    Converts string to unicode:

    * Decodes value from utf-8 if it is a byte string, replacing
      invalid sequences with U+FFFD
    * Otherwise just returns the same value
    """
    if isinstance(value, bytes):
        return value.decode("utf-8", "replace")
    return value


def to_base64(value):
    """
    Standard, padded base64 of value as a single line of bytes.
    """
    return base64.b64encode(to_bytes(value))


def from_base64(value):
    """
    Decode standard base64 text, rejecting characters outside the
    alphabet. Raises binascii.Error on malformed input.
    """
    return base64.b64decode(to_bytes(value), validate=True)
