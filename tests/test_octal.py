import pytest

from libkit.octal import format_octal, octal_argument
from libkit.radix import to_base
from libkit.spec import ConversionSpec


PLAIN_CASES = [
    ({}, "%o", 8),
    ({}, "%o", 0),
    ({"width": 6}, "%6o", 511),
    ({"width": 6, "left": True}, "%-6o", 511),
    ({"width": 6, "zero": True}, "%06o", 8),
    ({"precision": 4, "has_precision": True}, "%.4o", 8),
    ({"precision": 4, "has_precision": True, "width": 7}, "%7.4o", 8),
    ({"precision": 4, "has_precision": True, "width": 7, "left": True}, "%-7.4o", 8),
]


@pytest.mark.parametrize("flags, pattern, value", PLAIN_CASES)
def test_format_octal_matches_printf(flags, pattern, value):
    assert format_octal(to_base(value, 8), ConversionSpec(**flags)) == pattern % value


@pytest.mark.parametrize("value", [1, 8, 511])
@pytest.mark.parametrize("width", [0, 3, 8])
def test_alternate_right_prefixes_single_zero(value, width):
    digits = to_base(value, 8)
    result = format_octal(digits, ConversionSpec(alternate=True, width=width))
    assert result.strip() == "0" + digits
    assert len(result) == max(width, len(digits) + 1)


@pytest.mark.parametrize("value", [1, 8, 511])
def test_alternate_left_prefixes_single_zero(value):
    digits = to_base(value, 8)
    result = format_octal(digits, ConversionSpec(alternate=True, left=True, width=9))
    assert result.startswith("0" + digits)
    assert len(result) == 9


@pytest.mark.parametrize("left", [False, True])
def test_alternate_adds_nothing_when_precision_pads(left):
    digits = to_base(8, 8)
    spec = ConversionSpec(alternate=True, precision=4, has_precision=True,
                          width=7, left=left)
    plain = ConversionSpec(precision=4, has_precision=True, width=7, left=left)
    assert format_octal(digits, spec) == format_octal(digits, plain)


def test_alternate_zero_fill_keeps_width():
    result = format_octal(to_base(8, 8), ConversionSpec(alternate=True, zero=True, width=5))
    assert len(result) == 5
    assert set(result) == {"0", "1"}
    assert result.endswith("010")


def test_alternate_zero_value_prints_single_zero():
    assert format_octal("", ConversionSpec(alternate=True)) == "%o" % 0


def test_zero_with_zero_precision_is_blank():
    assert format_octal("", ConversionSpec(has_precision=True, width=3)) == "   "


def test_alternate_zero_with_zero_precision_keeps_zero_past_width():
    spec = ConversionSpec(alternate=True, has_precision=True, width=3)
    assert format_octal("", spec) == "   0"


def test_format_octal_rejects_non_octal_digits():
    with pytest.raises(ValueError):
        format_octal("19", ConversionSpec())


@pytest.mark.parametrize("value", [0, 255, 256, 1000, 2**40])
def test_char_modifier_wraps_into_byte(value):
    result = octal_argument(ConversionSpec(hh=True), "o", value)
    assert 0 <= result < 256
    assert (result - value) % 256 == 0


@pytest.mark.parametrize("value", [0, 7, 4095])
def test_octal_argument_keeps_values_in_range(value):
    assert octal_argument(ConversionSpec(h=True), "o", value) == value


def test_capital_o_ignores_char_modifier():
    assert octal_argument(ConversionSpec(hh=True), "O", 1000) == 1000


def test_negative_argument_wraps_to_unsigned_int():
    result = octal_argument(ConversionSpec(), "o", -1)
    assert result == 2**32 - 1
    assert format_octal(to_base(result, 8), ConversionSpec()) == "%o" % result


def test_octal_argument_rejects_other_conversion():
    with pytest.raises(ValueError):
        octal_argument(ConversionSpec(), "x", 1)