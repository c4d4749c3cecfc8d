import pytest

from ftkit.convert import atoi, itoa


@pytest.mark.parametrize("n", [0, 1, -1, 7, -42, 2147483647, -2147483648, 1000000])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_int_min():
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_zero():
    assert itoa(0) == "0"


def test_itoa_negative_has_single_leading_minus():
    text = itoa(-305)
    assert text.startswith("-")
    assert text[1:] == itoa(305)


def test_atoi_skips_all_c_whitespace():
    assert atoi("\t\n\v\f\r 123") == 123


@pytest.mark.parametrize("text, expected", [("+7", 7), ("-7", -7), ("7", 7)])
def test_atoi_single_sign(text, expected):
    assert atoi(text) == expected


def test_atoi_stops_at_non_digit():
    assert atoi("12ab34") == 12


def test_atoi_double_sign_gives_zero():
    assert atoi("--5") == 0


def test_atoi_no_digits_gives_zero():
    assert atoi("abc") == atoi("") == atoi("   -")


def test_atoi_whitespace_after_sign_not_skipped():
    assert atoi("- 5") == atoi("")


def test_atoi_rejects_non_string():
    with pytest.raises(TypeError):
        atoi(None)


def test_itoa_rejects_non_integer():
    with pytest.raises(TypeError):
        itoa("12")