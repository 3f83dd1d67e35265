import io

import pytest

from minitalk.output import put_char, put_endl, put_nbr, put_str


def test_put_char_string_and_code():
    out = io.StringIO()
    put_char("z", out)
    put_char(ord("a"), out)
    assert out.getvalue() == "za"


def test_put_char_rejects_long_string():
    with pytest.raises(ValueError):
        put_char("ab", io.StringIO())


def test_put_char_defaults_to_stdout(capsys):
    put_char("x")
    assert capsys.readouterr().out == "x"


def test_put_str_writes_text():
    out = io.StringIO()
    put_str("abcdef", out)
    assert out.getvalue() == "abcdef"


def test_put_str_stops_at_nul():
    out = io.StringIO()
    put_str("abc\0def", out)
    assert out.getvalue() == "abc"


def test_put_endl_appends_newline():
    out = io.StringIO()
    put_endl("abcdef", out)
    assert out.getvalue() == "abcdef\n"


def test_put_endl_empty():
    out = io.StringIO()
    put_endl("", out)
    assert out.getvalue() == "\n"


@pytest.mark.parametrize("n", [0, 7, 42, -1, 2147483647, -2147483648])
def test_put_nbr_round_trip(n):
    out = io.StringIO()
    put_nbr(n, out)
    assert int(out.getvalue()) == n


def test_put_nbr_int_min():
    out = io.StringIO()
    put_nbr(-2147483648, out)
    assert out.getvalue() == "-2147483648"


def test_put_nbr_rejects_float():
    with pytest.raises(TypeError):
        put_nbr(1.5, io.StringIO())