import pytest

from libkit.radix import pad_empty, pad_left, to_base
from libkit.spec import ConversionSpec


@pytest.mark.parametrize("base", [2, 8, 10, 16, 36])
@pytest.mark.parametrize("value", [1, 7, 8, 255, 4096, 2**64 - 1])
def test_to_base_round_trip(value, base):
    assert int(to_base(value, base), base) == value


def test_to_base_zero_is_empty():
    assert to_base(0, 16) == ""


def test_to_base_hex_case():
    assert to_base(255, 16) == "ff"
    assert to_base(255, 16, upper=True) == "FF"


def test_to_base_upper_matches_lower_uppercased():
    value = 0xDEADBEEF
    assert to_base(value, 16, upper=True) == to_base(value, 16).upper()


def test_to_base_decimal_matches_str():
    assert to_base(123456789, 10) == str(123456789)


@pytest.mark.parametrize("base", [0, 1, 37])
def test_to_base_rejects_bad_base(base):
    with pytest.raises(ValueError):
        to_base(5, base)


def test_to_base_rejects_negative():
    with pytest.raises(ValueError):
        to_base(-1, 10)


def test_pad_left_fills_width_with_trailing_spaces():
    result = pad_left("ab", ConversionSpec(width=6))
    assert len(result) == 6
    assert result.startswith("ab")
    assert result.strip() == "ab"


def test_pad_left_zero_fills_to_precision():
    result = pad_left("12", ConversionSpec(precision=5, has_precision=True))
    assert len(result) == 5
    assert result.endswith("12")
    assert set(result[:-2]) == {"0"}


def test_pad_left_width_wider_than_precision():
    result = pad_left("7", ConversionSpec(width=8, precision=3, has_precision=True))
    assert len(result) == 8
    assert result.rstrip() == "007"


def test_pad_left_empty_digits_default_precision_gives_zero():
    assert pad_left("", ConversionSpec()) == "0"


def test_pad_left_never_truncates():
    digits = "123456"
    result = pad_left(digits, ConversionSpec(width=2, precision=1, has_precision=True))
    assert result == digits


def test_pad_empty_pointer_keeps_prefix():
    result = pad_empty("p", 5)
    assert len(result) == 5
    assert result.endswith("0x")
    assert result[:-2].strip() == ""


def test_pad_empty_pointer_narrow_width():
    assert pad_empty("p", 0) == "0x"


def test_pad_empty_alternate_octal_keeps_zero():
    result = pad_empty("O", 3)
    assert result.endswith("0")
    assert len(result) == 4


@pytest.mark.parametrize("conversion", ["o", "a", "A"])
def test_pad_empty_plain_is_only_spaces(conversion):
    result = pad_empty(conversion, 4)
    assert result == " " * 4


def test_pad_empty_no_width_plain_is_empty():
    assert pad_empty("a", 0) == ""