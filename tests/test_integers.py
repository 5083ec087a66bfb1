import pytest

from libkit.integers import (
    format_signed,
    format_unsigned,
    signed_argument,
    unsigned_argument,
)
from libkit.spec import ConversionSpec


SIGNED_CASES = [
    ({}, "%d", 42),
    ({}, "%d", -42),
    ({"width": 5}, "%5d", 42),
    ({"width": 5, "left": True}, "%-5d", 42),
    ({"width": 5, "zero": True}, "%05d", -42),
    ({"plus": True}, "%+d", 42),
    ({"space": True}, "% d", 42),
    ({"width": 6, "precision": 4, "has_precision": True}, "%6.4d", -42),
    ({"left": True, "width": 8, "precision": 4, "has_precision": True, "plus": True},
     "%-+8.4d", 42),
    ({"width": 3}, "%3d", 123456),
    ({"zero": True, "width": 6, "space": True}, "% 06d", 42),
    ({"width": 4}, "%4d", 0),
]


@pytest.mark.parametrize("flags, pattern, value", SIGNED_CASES)
def test_format_signed_matches_printf(flags, pattern, value):
    assert format_signed(value, ConversionSpec(**flags)) == pattern % value


UNSIGNED_CASES = [
    ({}, "%u", 7),
    ({"width": 5}, "%5u", 7),
    ({"left": True, "width": 4}, "%-4u", 7),
    ({"zero": True, "width": 6}, "%06u", 123),
    ({"precision": 5, "has_precision": True, "width": 8}, "%8.5u", 42),
    ({"left": True, "precision": 3, "has_precision": True, "width": 6}, "%-6.3u", 5),
    ({}, "%u", 0),
]


@pytest.mark.parametrize("flags, pattern, value", UNSIGNED_CASES)
def test_format_unsigned_matches_printf(flags, pattern, value):
    assert format_unsigned(value, ConversionSpec(**flags)) == pattern % value


def test_most_negative_long_prints_in_full():
    value = -(2**63)
    assert format_signed(value, ConversionSpec(l=True)) == str(value)


def test_zero_with_zero_precision_and_no_width_is_empty():
    assert format_signed(0, ConversionSpec(has_precision=True)) == ""


def test_zero_with_zero_precision_keeps_plus_in_last_column():
    spec = ConversionSpec(has_precision=True, width=3, plus=True)
    assert format_signed(0, spec) == "  +"


@pytest.mark.parametrize("width", [0, 1, 6])
def test_unsigned_zero_with_zero_precision_is_blank(width):
    result = format_unsigned(0, ConversionSpec(has_precision=True, width=width))
    assert result == " " * width


@pytest.mark.parametrize("modifier", ["j", "z"])
def test_wide_left_layout_leaves_digits_out_of_width(modifier):
    spec = ConversionSpec(left=True, width=5, **{modifier: True})
    result = format_signed(42, spec)
    assert result.startswith("42")
    assert result.strip() == "42"
    assert len(result) == 5 + len("42")


def test_left_layout_without_wide_modifier_fills_width():
    result = format_signed(42, ConversionSpec(left=True, width=5, l=True))
    assert result == "%-5d" % 42


def test_format_unsigned_rejects_negative():
    with pytest.raises(ValueError):
        format_unsigned(-1, ConversionSpec())


def test_format_signed_rejects_non_int():
    with pytest.raises(TypeError):
        format_signed("12", ConversionSpec())


SIGNED_SIZES = [
    ({}, 32),
    ({"h": True}, 16),
    ({"hh": True}, 8),
    ({"l": True}, 64),
    ({"ll": True}, 64),
    ({"j": True}, 64),
    ({"z": True}, 64),
]


@pytest.mark.parametrize("flags, bits", SIGNED_SIZES)
@pytest.mark.parametrize("value", [0, 255, 300, -129, 2**31, 2**40 + 7, -(2**70)])
def test_signed_argument_wraps_into_type(flags, bits, value):
    result = signed_argument(ConversionSpec(**flags), "d", value)
    assert -(2 ** (bits - 1)) <= result < 2 ** (bits - 1)
    assert (result - value) % (2**bits) == 0


@pytest.mark.parametrize("flags, bits", SIGNED_SIZES)
@pytest.mark.parametrize("value", [0, 1, 2**32 + 3, 2**70 - 1])
def test_unsigned_argument_wraps_into_type(flags, bits, value):
    result = unsigned_argument(ConversionSpec(**flags), "u", value)
    assert 0 <= result < 2**bits
    assert (result - value) % (2**bits) == 0


@pytest.mark.parametrize("value", [-5, 100, 127])
def test_signed_argument_keeps_values_in_range(value):
    assert signed_argument(ConversionSpec(hh=True), "i", value) == value


def test_capital_d_ignores_char_modifier():
    assert signed_argument(ConversionSpec(hh=True), "D", 300) == 300


def test_capital_u_ignores_short_modifier():
    assert unsigned_argument(ConversionSpec(h=True), "U", 70000) == 70000


def test_signed_argument_rejects_other_conversion():
    with pytest.raises(ValueError):
        signed_argument(ConversionSpec(), "u", 1)


def test_unsigned_argument_rejects_other_conversion():
    with pytest.raises(ValueError):
        unsigned_argument(ConversionSpec(), "d", 1)