"""
URL-safe Base45 using standard percent-encoding

The Base45 alphabet contains characters such as space, '%', '+' and '/'
that are not safe inside a URL. The encoded string is therefore
%-escaped before it is placed in a URL, and unescaped before decoding.
"""

import re
from typing import Union
from urllib.parse import quote, unquote_plus

from .base45 import encode, decode
from .errors import Base45Error


# A '%' that does not start a two digit hex escape
_MALFORMED_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def percent_encode(text: str) -> str:
    """%-escape every character that is not an RFC 3986 unreserved character"""
    return quote(text, safe="")


def percent_decode(text: str) -> str:
    """
    Reverse percent_encode, treating '+' as a space like a query string does

    Raises:
        Base45Error: If a '%' is not followed by two hex digits
    """
    match = _MALFORMED_ESCAPE.search(text)
    if match is not None:
        raise Base45Error(Base45Error.ErrorType.INVALID_URL_SAFE_ESCAPING,
                          f"malformed escape at position {match.start()}")
    return unquote_plus(text)


def encode_url_safe(data: bytes) -> str:
    """Encode bytes into a %-escaped base45 string, empty for empty input"""
    return percent_encode(encode(data))


def decode_url_safe(data: Union[str, bytes]) -> bytes:
    """
    Decode a %-escaped base45 string into bytes

    Raises:
        Base45Error: EMPTY_INPUT for empty input, INVALID_URL_SAFE_ESCAPING
            for malformed escapes, otherwise whatever decode() raises
    """
    if isinstance(data, (bytes, bytearray, memoryview)):
        data = bytes(data).decode('latin-1')

    # Reject before unescaping so "" never decodes successfully
    if len(data) == 0:
        raise Base45Error(Base45Error.ErrorType.EMPTY_INPUT)

    return decode(percent_decode(data))
