"""
Python Base45 Library

Encoding and decoding of binary data with the Base45 scheme of RFC 9285
(originally draft-faltstrom-base45). Base45 packs two bytes into three
characters of the QR code Alphanumeric alphabet, which makes it a denser
choice than Base64 for binary payloads carried in QR codes.

Usage:

    >>> from pybase45 import encode, decode
    >>> encode(b"Hello!!")
    '%69 VD92EX0'
    >>> decode("%69 VD92EX0")
    b'Hello!!'

A URL-safe form %-escapes the encoded string:

    >>> from pybase45 import encode_url_safe, decode_url_safe
    >>> encode_url_safe(b"Hello!!")
    '%2569%20VD92EX0'
    >>> decode_url_safe("%2569%20VD92EX0")
    b'Hello!!'

Invalid input raises Base45Error, whose error_type says what went wrong.
"""

from .base45 import (
    ALPHABET,
    INV_ALPHABET,
    MAX_TRIPLE_VALUE,
    MAX_PAIR_VALUE,
    alphabet_index,
    encoded_length,
    decoded_length,
    encode,
    decode
)

from .urlsafe import (
    percent_encode,
    percent_decode,
    encode_url_safe,
    decode_url_safe
)

from .errors import Base45Error

__version__ = "0.1.0"

__all__ = [
    # Alphabet
    "ALPHABET",
    "INV_ALPHABET",
    "MAX_TRIPLE_VALUE",
    "MAX_PAIR_VALUE",
    "alphabet_index",

    # Codec
    "encoded_length",
    "decoded_length",
    "encode",
    "decode",

    # URL-safe form
    "percent_encode",
    "percent_decode",
    "encode_url_safe",
    "decode_url_safe",

    # Errors
    "Base45Error",
]
