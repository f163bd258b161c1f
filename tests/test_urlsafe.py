"""
Test cases for the URL-safe wrapper
"""

import random
import pytest

from pybase45 import (
    ALPHABET, encode, encode_url_safe, decode_url_safe, percent_encode,
    percent_decode, Base45Error
)


def test_encode_url_safe_example():
    assert encode_url_safe(b"Hello!!") == "%2569%20VD92EX0"


def test_decode_url_safe_example():
    assert decode_url_safe("%2569%20VD92EX0") == b"Hello!!"
    assert decode_url_safe(b"%2569%20VD92EX0") == b"Hello!!"
    assert decode_url_safe(memoryview(b"%2569%20VD92EX0")) == b"Hello!!"
    assert decode_url_safe("%2569+VD92EX0") == b"Hello!!"


def test_encode_url_safe_empty():
    assert encode_url_safe(b"") == ""


def test_decode_url_safe_empty():
    with pytest.raises(Base45Error) as exc:
        decode_url_safe("")
    assert exc.value.error_type == Base45Error.ErrorType.EMPTY_INPUT


def test_unescaped_input_still_decodes():
    """Strings without reserved characters need no escaping"""
    assert decode_url_safe("BB8") == b"AB"
    assert decode_url_safe("QED8WEX0") == b"ietf!"


def test_percent_encode_alphabet():
    """Only letters, digits and the unreserved '-' and '.' survive unescaped"""
    escaped = percent_encode(ALPHABET)
    assert escaped.startswith("0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ")
    assert escaped.endswith("%20%24%25%2A%2B-.%2F%3A")
    assert percent_decode(escaped) == ALPHABET


def test_percent_decode_plus_is_space():
    assert percent_decode("%2569+VD9") == "%69 VD9"
    assert percent_decode("%69+VD9") == "i VD9"
    assert percent_decode("%2B") == "+"


@pytest.mark.parametrize("escaped", ["%", "%2", "%zz", "BB8%", "%2569%2", "%G0"])
def test_decode_url_safe_malformed_escape(escaped):
    with pytest.raises(Base45Error) as exc:
        decode_url_safe(escaped)
    assert exc.value.error_type == Base45Error.ErrorType.INVALID_URL_SAFE_ESCAPING


@pytest.mark.parametrize("escaped,error_type", [
    ("%61%61", Base45Error.ErrorType.INVALID_ENCODING_CHARACTERS),
    ("ABCD", Base45Error.ErrorType.INVALID_LENGTH),
    ("GGW", Base45Error.ErrorType.INVALID_ENCODED_DATA_OVERFLOW),
    ("%3A%3A", Base45Error.ErrorType.INVALID_ENCODED_DATA_OVERFLOW),
    ("%C3%A9BB", Base45Error.ErrorType.INVALID_ENCODING_CHARACTERS),
])
def test_decode_url_safe_propagates_decode_errors(escaped, error_type):
    with pytest.raises(Base45Error) as exc:
        decode_url_safe(escaped)
    assert exc.value.error_type == error_type


def test_url_safe_output_is_url_safe():
    rng = random.Random(3)
    data = bytes(rng.getrandbits(8) for _ in range(512))
    escaped = encode_url_safe(data)
    for char in escaped:
        assert char.isalnum() or char in "%-._~"


def test_url_safe_round_trip():
    rng = random.Random(9)
    assert decode_url_safe(encode_url_safe(b"\x00")) == b"\x00"
    for length in range(1, 100):
        data = bytes(rng.getrandbits(8) for _ in range(length))
        assert decode_url_safe(encode_url_safe(data)) == data
        assert percent_decode(encode_url_safe(data)) == encode(data)
