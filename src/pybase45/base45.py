"""
Base45 encoding and decoding as described in RFC 9285

Base45 encodes two bytes in three characters taken from the 45 characters
usable in a QR code in Alphanumeric mode, compared to Base64 which encodes
three bytes in four characters.
"""

from typing import Dict, Optional, Union

from .errors import Base45Error


# The 45 characters of Table 1, position is the character's value
ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ $%*+-./:"

# Maps from character to its value
INV_ALPHABET: Dict[str, int] = {char: value for value, char in enumerate(ALPHABET)}

# Largest values a three character and a two character chunk may decode to
MAX_TRIPLE_VALUE = 0xFFFF
MAX_PAIR_VALUE = 0xFF


def alphabet_index(char: str) -> Optional[int]:
    """Return the value of an alphabet character, or None if it is not one"""
    return INV_ALPHABET.get(char)


def encoded_length(data_len: int) -> int:
    """Number of characters produced when encoding data_len bytes"""
    return data_len // 2 * 3 + (2 if data_len % 2 else 0)


def decoded_length(encoded_len: int) -> int:
    """
    Number of bytes produced when decoding encoded_len characters

    Raises:
        Base45Error: If no Base45 string can have that length
    """
    if encoded_len % 3 == 1:
        raise Base45Error(Base45Error.ErrorType.INVALID_LENGTH,
                          f"{encoded_len} characters can not be valid base45")
    return encoded_len // 3 * 2 + (1 if encoded_len % 3 == 2 else 0)


def encode(data: bytes) -> str:
    """
    Encode bytes into a base45 string

    Args:
        data: Bytes to encode, may be empty

    Returns:
        Base45 encoded string, empty for empty input
    """
    if isinstance(data, str):
        raise TypeError("encode() expects bytes, not str")
    data = bytes(data)

    result = []

    # Process data in 2-byte chunks, a trailing odd byte becomes 2 characters
    for i in range(0, len(data) - 1, 2):
        n = (data[i] << 8) | data[i + 1]
        result.append(ALPHABET[n % 45])
        result.append(ALPHABET[n // 45 % 45])
        result.append(ALPHABET[n // (45 * 45) % 45])

    if len(data) % 2:
        a = data[-1]
        result.append(ALPHABET[a % 45])
        result.append(ALPHABET[a // 45 % 45])

    return "".join(result)


def decode(data: Union[str, bytes]) -> bytes:
    """
    Decode a base45 string into bytes

    Args:
        data: Base45 string to decode. Bytes are read as ASCII text.

    Returns:
        Decoded bytes

    Raises:
        Base45Error: If the input is empty, contains characters outside the
            alphabet, has an impossible length, or holds a chunk too large to
            have been produced by the encoder
    """
    if isinstance(data, (bytes, bytearray, memoryview)):
        # latin-1 keeps every byte as one character so non-ASCII bytes fail
        # the alphabet check below
        data = bytes(data).decode('latin-1')

    if len(data) == 0:
        raise Base45Error(Base45Error.ErrorType.EMPTY_INPUT)

    # Look up every character before decoding anything
    values = []
    for pos, char in enumerate(data):
        value = INV_ALPHABET.get(char)
        if value is None:
            raise Base45Error(Base45Error.ErrorType.INVALID_ENCODING_CHARACTERS,
                              f"invalid base45 character {char!r} at position {pos}")
        values.append(value)

    # Raises on a length the encoder can never produce
    decoded_length(len(values))

    result = bytearray()

    # Process data in 3-character chunks
    for i in range(0, len(values), 3):
        chunk = values[i:i + 3]

        if len(chunk) == 3:
            c, d, e = chunk
            n = c + d * 45 + e * 45 * 45
            if n > MAX_TRIPLE_VALUE:
                raise Base45Error(Base45Error.ErrorType.INVALID_ENCODED_DATA_OVERFLOW,
                                  f"chunk at position {i} decodes to {n}")
            result.append(n >> 8)
            result.append(n & 0xFF)
        else:
            c, d = chunk
            n = c + d * 45
            if n > MAX_PAIR_VALUE:
                raise Base45Error(Base45Error.ErrorType.INVALID_ENCODED_DATA_OVERFLOW,
                                  f"chunk at position {i} decodes to {n}")
            result.append(n)

    return bytes(result)
