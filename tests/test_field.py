import logging

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ssss.errors import InvalidDegree, ValidationError
from ssss.field import IRREDUCIBLE_TAPS, FieldContext, field_size_valid, init_polynomial

AES = FieldContext.for_degree(8)
F64 = FieldContext.for_degree(64)


def test_table_covers_every_field_size():
    assert len(IRREDUCIBLE_TAPS) == 3 * 128
    for degree in range(8, 1025, 8):
        poly = init_polynomial(degree)
        assert poly.bit_length() == degree + 1
        assert poly & 1


def test_known_polynomials():
    # x^8 + x^4 + x^3 + x + 1 (AES) and x^128 + x^7 + x^2 + x + 1 (GCM)
    assert init_polynomial(8) == 0x11B
    assert init_polynomial(16) == 0x1002B
    assert init_polynomial(128) == (1 << 128) | 0x87


@pytest.mark.parametrize("degree", [0, 4, 7, 12, 1032, 2048])
def test_invalid_degree(degree):
    assert not field_size_valid(degree)
    with pytest.raises(InvalidDegree):
        init_polynomial(degree)


def test_aes_field_vectors():
    assert AES.multiply(0x57, 0x83) == 0xC1
    assert AES.multiply(0x57, 0x13) == 0xFE
    assert AES.invert(0x53) == 0xCA
    assert AES.add(0x57, 0x83) == 0xD4


def test_invert_zero():
    with pytest.raises(ZeroDivisionError):
        F64.invert(0)


@given(st.integers(min_value=1, max_value=2**64 - 1))
def test_inverse_property(x):
    assert F64.multiply(x, F64.invert(x)) == 1
    assert F64.multiply(x, 1) == x


@given(st.integers(min_value=0, max_value=2**64 - 1), st.integers(min_value=0, max_value=2**64 - 1))
def test_multiply_commutes_and_stays_in_field(x, y):
    product = F64.multiply(x, y)
    assert product == F64.multiply(y, x)
    assert product.bit_length() <= 64


def test_hex_conversions(caplog):
    assert F64.export_hex(0xAB) == "00000000000000ab"
    assert F64.export_hex(0) == "0" * 16
    assert F64.import_hex("00000000000000AB") == 0xAB
    with caplog.at_level(logging.WARNING, logger="ssss"):
        assert F64.import_hex("ab") == 0xAB
    assert "too short" in caplog.text
    with pytest.raises(ValidationError):
        F64.import_hex("0" * 17)
    with pytest.raises(ValidationError):
        F64.import_hex("0x0000000000000a")
    with pytest.raises(ValidationError):
        F64.import_hex("zz")


def test_text_conversions(caplog):
    assert F64.import_text(b"ab") == 0x6162
    assert F64.export_text(0x6162) == b"ab"
    assert F64.export_text(0) == b""
    with pytest.raises(ValidationError):
        F64.import_text(b"123456789")
    with caplog.at_level(logging.WARNING, logger="ssss"):
        F64.import_text(b"\x00\xff")
    assert "Non-ASCII" in caplog.text
