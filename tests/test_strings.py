import pytest

from solong.strings import (
    atoi,
    itoa,
    split,
    strchr,
    strjoin,
    strlcat,
    strlcpy,
    strmapi,
    striteri,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


def test_atoi_skips_whitespace_and_sign():
    assert atoi(" \t\n-42abc") == -42
    assert atoi("+17") == 17


def test_atoi_without_digits_is_zero():
    assert atoi("abc") == 0
    assert atoi("--5") == 0


@pytest.mark.parametrize("n", [0, 1, -1, 2147483647, -2147483648, 123456])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_int_min():
    assert itoa(-2147483648) == "-2147483648"


def test_atoi_result_stays_in_int32():
    value = atoi("12345678901234567890")
    assert -(2**31) <= value < 2**31


def test_split_drops_empty_pieces():
    assert split("  hello  world ", " ") == ["hello", "world"]
    assert split("", ",") == []


def test_split_rejects_bad_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")


def test_strchr_and_strrchr():
    assert strchr("farah", "a") == 1
    assert strrchr("farah", "a") == 3
    assert strchr("farah", "z") is None
    assert strrchr("farah", "z") is None


def test_search_for_terminator_finds_end():
    assert strchr("farah", "\0") == len("farah")
    assert strrchr("farah", "\0") == len("farah")


def test_strncmp_first_difference():
    assert strncmp("farah", "Farah", 1) == ord("f") - ord("F")
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("", "", 2) == 0


def test_strncmp_shorter_string():
    assert strncmp("ab", "abc", 5) == -ord("c")
    assert strncmp("abc", "ab", 5) == ord("c")


def test_strnstr_source_example():
    assert strnstr("Hello, this is a sample string.", "is", 3) is None


def test_strnstr_found_within_length():
    haystack = "Hello, this is a sample string."
    index = strnstr(haystack, "is", len(haystack))
    assert index == haystack.find("is")
    assert strnstr(haystack, "", 0) == 0


def test_substr_bounds():
    assert substr("hello", 1, 3) == "ell"
    assert substr("hello", 10, 3) == ""
    assert substr("hello", 2, 100) == "llo"


def test_substr_rejects_negative():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_strtrim():
    assert strtrim("xxhixyx", "xy") == "hi"
    assert strtrim("xyx", "xy") == ""
    assert strtrim("abc", "") == "abc"


def test_strjoin():
    assert strjoin("so_", "long") == "so_long"


def test_strlcpy_truncates_and_reports_length():
    copied, total = strlcpy("farah", 3)
    assert copied == "fa"
    assert total == len("farah")
    assert strlcpy("farah", 0) == ("", len("farah"))


def test_strlcat_source_example():
    result, total = strlcat("jehad", "farah  ", 7)
    assert result == "jehad" + "f"
    assert total == len("jehad") + len("farah  ")


def test_strlcat_small_size():
    result, total = strlcat("jehad", "farah  ", 3)
    assert result == "jehad"
    assert total == 3 + len("farah  ")


def test_strmapi_uses_index():
    assert strmapi("abc", lambda i, c: c.upper() if i % 2 == 0 else c) == "AbC"


def test_striteri_in_place():
    chars = list("abcd")
    striteri(chars, lambda i, c: c.upper() if i >= 2 else None)
    assert "".join(chars) == "abCD"


def test_striteri_rejects_str():
    with pytest.raises(TypeError):
        striteri("abc", lambda i, c: c)