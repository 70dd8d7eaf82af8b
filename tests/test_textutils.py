import pytest

from pushswap.textutils import (
    atoi,
    itoa,
    split,
    strchr,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


def test_atoi_plain():
    assert atoi("14465") == 14465


def test_atoi_whitespace_sign_and_stop():
    assert atoi("  \t-42abc") == -42
    assert atoi("+7") == 7
    assert atoi("abc") == 0


def test_atoi_wraps_to_32_bits():
    assert atoi("2147483648") == -2147483648
    assert atoi("-2147483648") == -2147483648


@pytest.mark.parametrize("n", [0, 5, -15386, 2147483647, -2147483648])
def test_itoa_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_zero():
    assert itoa(0) == "0"


def test_split_drops_empty():
    text = "punaise,ils parlent fort,les,lifeguards,,,"
    assert split(text, ",") == ["punaise", "ils parlent fort", "les", "lifeguards"]


def test_split_only_separators():
    assert split("   ", " ") == []


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a b", "  ")


def test_strtrim():
    text = "iaiaiaooooiaiaHello wordliaiaia"
    assert strtrim(text, "ia") == "ooooiaiaHello wordl"
    assert strtrim("iaia", "ia") == ""
    assert strtrim("  x ", "") == "  x "


def test_substr():
    assert substr("Hello", 0, 7) == "Hello"
    assert substr("Hello", 9, 2) == ""
    with pytest.raises(ValueError):
        substr("Hello", -1, 2)


def test_strnstr():
    text = "Hello world"
    index = strnstr(text, "lo ", 9)
    assert text[index:] == "lo world"
    assert strnstr(text, "world", 9) is None
    assert strnstr(text, "", 0) == 0


def test_strncmp():
    assert strncmp("word", "Word", 2) > 0
    assert strncmp("Word", "word", 2) < 0
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("abc", "abc", 10) == 0
    assert strncmp("ab", "abc", 3) < 0


def test_strchr():
    text = "hello"
    assert text[strchr(text, "l"):] == "llo"
    assert strchr(text, "z") is None
    assert strchr(text, "\0") == len(text)


def test_strrchr():
    text = "helloliiiaaai"
    assert text[strrchr(text, "o"):] == "oliiiaaai"
    assert strrchr(text, "z") is None
    assert strrchr(text, "\0") == len(text)