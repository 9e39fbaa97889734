"""
Test CNPJ validation & normalization
"""

import pytest

from stdnum.exceptions import (
    InvalidChecksum,
    InvalidFormat,
    InvalidLength,
    ValidationError,
)

from brcnpj.helper.exception import CnpjRangeException, InvArgException

import brcnpj.cnpj as mod


TEST_VALID = [
    "04.252.011/0001-10",
    "04252011000110",
    "11.222.333/0001-81",
    " 11 222 333 0001 81 ",
    "CNPJ: 11.222.333/0001-81",
]

TEST_INVALID = [
    None,
    "",
    "abc",
    # one check digit off
    "04.252.011/0001-11",
    "04.252.011/0001-00",
    # check digits swapped
    "11.222.333/0001-18",
    # too short / too long
    "04.252.011/0001-1",
    "04252011000110 0",
    "4252011000110",
]


def test10_valid():
    for cnpj in TEST_VALID:
        assert mod.is_valid(cnpj)


def test11_invalid():
    for cnpj in TEST_INVALID:
        assert not mod.is_valid(cnpj)


def test12_repeated_digits():
    for d in "0123456789":
        assert not mod.is_valid(d * 14)


def test13_wrong_length():
    digits = "0425201100011099"
    for n in range(len(digits) + 1):
        if n != 14:
            assert not mod.is_valid(digits[:n])


def test20_validate():
    assert mod.validate("04.252.011/0001-10") == "04252011000110"


def test21_validate_errors():
    TEST = [
        (None, InvalidFormat),
        ("11111111111111", InvalidFormat),
        ("0425201100011", InvalidLength),
        ("", InvalidLength),
        ("04.252.011/0001-11", InvalidChecksum),
    ]
    for cnpj, exc in TEST:
        with pytest.raises(exc):
            mod.validate(cnpj)
        with pytest.raises(ValidationError):
            mod.validate(cnpj)


def test30_normalize():
    TEST = [
        ("04.252.011/0001-10", "04252011000110"),
        ("04252011000110", "04252011000110"),
        ("1", "00000000000001"),
        ("0", "00000000000000"),
        ("4.252.011/0001-10", "04252011000110"),
        ("99.999.999/9999-99", "99999999999999"),
        # extra leading zeros collapse
        ("000000000000000001", "00000000000001"),
    ]
    for cnpj, exp in TEST:
        assert mod.normalize(cnpj) == exp


def test31_normalize_idempotent():
    for cnpj in ("04.252.011/0001-10", "1", "123.456", "99999999999999"):
        once = mod.normalize(cnpj)
        assert mod.normalize(once) == once


def test32_normalize_none():
    assert mod.normalize(None) is None


def test33_normalize_no_digits():
    for cnpj in ("", "./-", "abc"):
        with pytest.raises(InvArgException):
            mod.normalize(cnpj)


def test34_normalize_out_of_range():
    for cnpj in ("100000000000000", "99.999.999/9999-999", "18446744073709551616"):
        with pytest.raises(CnpjRangeException):
            mod.normalize(cnpj)


def test35_normalize_huge_input():
    """
    Inputs far beyond the integer string conversion limit still raise the
    range error
    """
    with pytest.raises(CnpjRangeException):
        mod.normalize("1" * 5000)
    # Leading zeros do not count towards the width
    assert mod.normalize("0" * 5000 + "42") == "00000000000042"


def test36_format_huge_input():
    with pytest.raises(CnpjRangeException):
        mod.format_cnpj("9" * 5000)


def test40_format():
    assert mod.format_cnpj("04252011000110") == "04.252.011/0001-10"
    assert mod.format_cnpj("11.222.333/0001-81") == "11.222.333/0001-81"
    assert mod.format_cnpj("1") == "00.000.000/0000-01"


def test41_format_none():
    with pytest.raises(InvArgException):
        mod.format_cnpj(None)
