import string

import pytest

from minitalk.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("code", range(128))
def test_classifiers_match_str_methods_on_ascii(code):
    ch = chr(code)
    assert is_alpha(code) == ch.isalpha()
    assert is_digit(code) == ch.isdigit()
    assert is_alnum(code) == ch.isalnum()
    assert is_print(code) == (ch in string.printable and ch not in "\t\n\r\x0b\x0c")


@pytest.mark.parametrize("code", range(-5, 300))
def test_alnum_is_alpha_or_digit(code):
    assert is_alnum(code) == (is_alpha(code) or is_digit(code))


def test_ascii_bounds():
    assert is_ascii(0)
    assert is_ascii(127)
    assert not is_ascii(128)
    assert not is_ascii(-1)


def test_print_bounds():
    assert not is_print(31)
    assert is_print(" ")
    assert is_print("~")
    assert not is_print(127)


def test_non_ascii_letters_are_not_alpha():
    assert not is_alpha("é")
    assert not is_digit("٣")


@pytest.mark.parametrize("letter", string.ascii_lowercase)
def test_case_round_trip(letter):
    upper = to_upper(letter)
    assert upper == letter.upper()
    assert to_lower(upper) == letter


@pytest.mark.parametrize("ch", string.digits + string.punctuation + " ")
def test_case_conversion_leaves_others_unchanged(ch):
    assert to_lower(ch) == ch
    assert to_upper(ch) == ch


def test_case_conversion_keeps_integer_type():
    assert to_upper(ord("z")) == ord("Z")
    assert to_lower(ord("Z")) == ord("z")
    assert to_lower(300) == 300


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        is_digit(1.5)
    with pytest.raises(TypeError):
        to_upper(True)