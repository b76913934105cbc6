import io

import pytest

from blockcaster.textutil import (
    atoi,
    capitalize,
    factorial,
    int_sqrt,
    iter_lines,
    itoa,
    power,
    split_words,
    trim,
)


def test_atoi_skips_whitespace_and_reads_sign():
    assert atoi("  \t-42abc") == -42
    assert atoi("+17") == 17
    assert atoi("\n\v 9") == 9


def test_atoi_without_digits_is_zero():
    assert atoi("abc") == atoi("0")
    assert atoi("") == atoi("-")


@pytest.mark.parametrize("n", [-1000, -7, 0, 3, 99, 2147483647])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_negative_has_sign():
    assert itoa(-5).startswith("-")
    assert itoa(5) == "5"


def test_split_words_drops_empty():
    assert split_words("**a**bc*", "*") == ["a", "bc"]
    assert split_words("****", "*") == []


def test_split_words_rejects_long_separator():
    with pytest.raises(ValueError):
        split_words("a,b", ",,")


def test_trim():
    assert trim(" \n\tword here\t \n") == "word here"
    assert trim(" \n\t ") == ""


def test_capitalize():
    assert capitalize("hello WORLD 42ab") == "Hello World 42ab"


def test_capitalize_preserves_length_and_separators():
    text = "a-b c!d"
    out = capitalize(text)
    assert len(out) == len(text)
    assert out.lower() == text.lower()


def test_factorial_values():
    assert factorial(0) == factorial(1)
    assert factorial(5) == 120
    for n in range(2, 13):
        assert factorial(n) == n * factorial(n - 1)


@pytest.mark.parametrize("n", [-1, 13])
def test_factorial_out_of_range(n):
    with pytest.raises(ValueError):
        factorial(n)


@pytest.mark.parametrize("root", [0, 1, 7, 300, 49999])
def test_int_sqrt_perfect_squares(root):
    assert int_sqrt(root * root) == root


def test_int_sqrt_non_square_and_limits():
    assert int_sqrt(2) == int_sqrt(0)
    assert int_sqrt(-4) == int_sqrt(0)
    assert int_sqrt(50000**2) == int_sqrt(0)


def test_power():
    assert power(2, 10) == 1024
    assert power(7, 1) == 7
    for e in range(1, 6):
        assert power(3, e + 1) == power(3, e) * 3


@pytest.mark.parametrize("exponent", [0, -2])
def test_power_rejects_non_positive(exponent):
    with pytest.raises(ValueError):
        power(2, exponent)


def test_iter_lines():
    assert list(iter_lines(io.StringIO("a\n\nb"))) == ["a", "", "b"]
    assert list(iter_lines(io.StringIO("a\n"))) == ["a"]
    assert list(iter_lines(io.StringIO(""))) == []


def test_iter_lines_matches_splitlines():
    text = "1 1 1\n1 0 1\n1 1 1\n"
    assert list(iter_lines(io.StringIO(text))) == text.splitlines()