import io

import pytest

from libkit.output import putchar, putendl, putnbr, putstr


def test_putchar_writes_str_char():
    buf = io.StringIO()
    putchar("q", buf)
    assert buf.getvalue() == "q"


def test_putchar_accepts_code():
    buf = io.StringIO()
    putchar(ord("Z"), buf)
    assert buf.getvalue() == "Z"


def test_putchar_rejects_long_string():
    with pytest.raises(ValueError):
        putchar("ab", io.StringIO())


def test_putchar_rejects_other_types():
    with pytest.raises(TypeError):
        putchar(1.5, io.StringIO())


def test_putchar_defaults_to_stdout(capsys):
    putchar("x")
    assert capsys.readouterr().out == "x"


def test_putstr_writes_text():
    buf = io.StringIO()
    putstr("hello world", buf)
    assert buf.getvalue() == "hello world"


def test_putstr_none_writes_nothing():
    buf = io.StringIO()
    putstr(None, buf)
    assert buf.getvalue() == ""


def test_putendl_adds_newline():
    buf = io.StringIO()
    putendl("line", buf)
    assert buf.getvalue() == "line\n"


def test_putendl_none_writes_nothing():
    buf = io.StringIO()
    putendl(None, buf)
    assert buf.getvalue() == ""


@pytest.mark.parametrize("n", [0, 7, -7, 42, 2147483647, -2147483648])
def test_putnbr_writes_decimal(n):
    buf = io.StringIO()
    putnbr(n, buf)
    assert buf.getvalue() == str(n)
    assert int(buf.getvalue()) == n


def test_putnbr_defaults_to_stdout(capsys):
    putnbr(-2147483648)
    assert capsys.readouterr().out == "-2147483648"