import pytest

from ng39 import strtox


def test_strtoull_bases():
    assert strtox.strtoull("3939", 10) == 3939
    assert strtox.strtoull("3939", 0) == 3939
    assert strtox.strtoull("3939", 16) == 0x3939
    assert strtox.strtoull("0x3939", 0) == 0x3939
    assert strtox.strtoull("0101", 8) == 0o101
    assert strtox.strtoull("0101", 0) == 0o101


def test_strtoull_invalid_input():
    with pytest.raises(ValueError):
        strtox.strtoull("0101x", 10)
    with pytest.raises(ValueError):
        strtox.strtoull("-0101", 10)
    with pytest.raises(ValueError):
        strtox.strtoull("", 10)


def test_strtoull_plus_sign():
    assert strtox.strtoull("+0101", 10) == 101


def test_strtoull_limits():
    with pytest.raises(OverflowError):
        strtox.strtoull("18446744073709551616", 10)
    assert strtox.strtoull("18446744073709551615", 10) == 18446744073709551615


def test_strtoll_limits():
    with pytest.raises(OverflowError):
        strtox.strtoll("9223372036854775808", 10)
    assert strtox.strtoll("9223372036854775807", 10) == 9223372036854775807
    with pytest.raises(OverflowError):
        strtox.strtoll("-9223372036854775809", 10)
    assert strtox.strtoll("-9223372036854775808", 10) == -9223372036854775808


def test_strtoul_limits():
    with pytest.raises(OverflowError):
        strtox.strtoul("18446744073709551616", 10)
    assert strtox.strtoul("18446744073709551615", 10) == 18446744073709551615


def test_strtouint_limits():
    with pytest.raises(OverflowError):
        strtox.strtouint("4294967296", 10)
    assert strtox.strtouint("4294967295", 10) == 4294967295


def test_strtou64_limits():
    with pytest.raises(OverflowError):
        strtox.strtou64("18446744073709551616", 10)
    assert strtox.strtou64("18446744073709551615", 10) == 18446744073709551615


def test_strtou32_limits():
    with pytest.raises(OverflowError):
        strtox.strtou32("4294967296", 10)
    assert strtox.strtou32("4294967295", 10) == 4294967295


def test_strtou16_limits():
    with pytest.raises(OverflowError):
        strtox.strtou16("65536", 10)
    assert strtox.strtou16("65535", 10) == 65535


def test_strtou8_limits():
    with pytest.raises(OverflowError):
        strtox.strtou8("256", 10)
    assert strtox.strtou8("255", 10) == 255


def test_strtol_limits():
    with pytest.raises(OverflowError):
        strtox.strtol("9223372036854775808", 10)
    assert strtox.strtol("9223372036854775807", 10) == 9223372036854775807
    with pytest.raises(OverflowError):
        strtox.strtol("-9223372036854775809", 10)
    assert strtox.strtol("-9223372036854775808", 10) == -9223372036854775808


def test_strtoint_limits():
    with pytest.raises(OverflowError):
        strtox.strtoint("2147483648", 10)
    assert strtox.strtoint("2147483647", 10) == 2147483647
    with pytest.raises(OverflowError):
        strtox.strtoint("-2147483649", 10)
    assert strtox.strtoint("-2147483648", 10) == -2147483648


def test_strtos64_limits():
    with pytest.raises(OverflowError):
        strtox.strtos64("9223372036854775808", 10)
    assert strtox.strtos64("9223372036854775807", 10) == 9223372036854775807
    with pytest.raises(OverflowError):
        strtox.strtos64("-9223372036854775809", 10)
    assert strtox.strtos64("-9223372036854775808", 10) == -9223372036854775808


def test_strtos32_limits():
    with pytest.raises(OverflowError):
        strtox.strtos32("2147483648", 10)
    assert strtox.strtos32("2147483647", 10) == 2147483647
    with pytest.raises(OverflowError):
        strtox.strtos32("-2147483649", 10)
    assert strtox.strtos32("-2147483648", 10) == -2147483648


def test_strtos16_limits():
    with pytest.raises(OverflowError):
        strtox.strtos16("32768", 10)
    assert strtox.strtos16("32767", 10) == 32767
    with pytest.raises(OverflowError):
        strtox.strtos16("-32769", 10)
    assert strtox.strtos16("-32768", 10) == -32768


def test_strtos8_limits():
    with pytest.raises(OverflowError):
        strtox.strtos8("128", 10)
    assert strtox.strtos8("127", 10) == 127
    with pytest.raises(OverflowError):
        strtox.strtos8("-129", 10)
    assert strtox.strtos8("-128", 10) == -128


def test_overflow_reported_before_trailing_garbage():
    with pytest.raises(OverflowError):
        strtox.strtoull("99999999999999999999x", 10)


def test_hex_prefix_without_digits_is_invalid():
    with pytest.raises(ValueError):
        strtox.strtoull("0x", 0)
    with pytest.raises(ValueError):
        strtox.strtoull("0x", 16)