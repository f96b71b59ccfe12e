import pytest

from pipex.textops import (
    atoi,
    itoa,
    memchr,
    memcmp,
    split,
    strchr,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("   -42", -42),
        ("\t\n\v\f\r+17abc", 17),
        ("abc", 0),
        ("", 0),
        ("-0", 0),
        ("2147483647", 2147483647),
    ],
)
def test_atoi_parses_leading_integer(text, expected):
    assert atoi(text) == expected


def test_atoi_accepts_only_one_sign():
    assert atoi("+-5") == 0
    assert atoi("--5") == 0


def test_atoi_rejects_non_string():
    with pytest.raises(TypeError):
        atoi(5)


@pytest.mark.parametrize("n", [0, 7, -7, 2147483647, -2147483648, 10**12])
def test_itoa_round_trips_with_atoi(n):
    assert atoi(itoa(n)) == n


def test_itoa_int_min():
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_rejects_bool():
    with pytest.raises(TypeError):
        itoa(True)


def test_memchr_finds_first_occurrence():
    data = b"hello"
    index = memchr(data, ord("l"), len(data))
    assert index == data.index(b"l")


def test_memchr_respects_n():
    assert memchr(b"abcdef", ord("e"), 3) is None
    assert memchr(b"abcdef", ord("a"), 0) is None


def test_memchr_uses_low_byte():
    data = b"\x00\x01\xff"
    assert memchr(data, -1, len(data)) == 2
    assert memchr(data, 0x101, len(data)) == 1


def test_memchr_rejects_overlong_n():
    with pytest.raises(ValueError):
        memchr(b"ab", ord("a"), 5)


def test_memcmp_equal_and_ordered():
    assert memcmp(b"abc", b"abc", 3) == 0
    assert memcmp(b"abd", b"abc", 3) > 0
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abc", b"abd", 2) == 0


def test_memcmp_is_unsigned():
    assert memcmp(b"\xff", b"\x01", 1) > 0


def test_memcmp_is_antisymmetric():
    a, b = b"\x10\x20\x30", b"\x10\x21\x00"
    assert memcmp(a, b, 3) == -memcmp(b, a, 3)


def test_memcmp_rejects_negative_n():
    with pytest.raises(ValueError):
        memcmp(b"a", b"a", -1)


def test_split_drops_empty_pieces():
    assert split("  ls   -l  -a ", " ") == ["ls", "-l", "-a"]
    assert split("/usr/bin::/bin:", ":") == ["/usr/bin", "/bin"]


def test_split_empty_and_only_separators():
    assert split("", " ") == []
    assert split("::::", ":") == []


def test_split_join_invariant():
    text = "a,b,,c"
    assert ",".join(split(text, ",")) == text.replace(",,", ",")


def test_split_requires_single_char():
    with pytest.raises(ValueError):
        split("a b", "ab")


def test_strchr_and_strrchr():
    text = "banana"
    assert strchr(text, "a") == text.index("a")
    assert strrchr(text, "a") == text.rindex("a")
    assert strchr(text, "z") is None
    assert strrchr(text, "z") is None


def test_strchr_nul_finds_end():
    assert strchr("abc", "\0") == len("abc")
    assert strrchr("abc", "\0") == len("abc")


def test_strchr_requires_single_char():
    with pytest.raises(ValueError):
        strchr("abc", "")


def test_strmapi_passes_index_and_char():
    assert strmapi("abc", lambda i, c: c.upper() if i % 2 == 0 else c) == "AbC"
    seen = []
    strmapi("xyz", lambda i, c: seen.append((i, c)) or c)
    assert seen == [(0, "x"), (1, "y"), (2, "z")]


def test_strmapi_rejects_non_callable():
    with pytest.raises(TypeError):
        strmapi("abc", None)


def test_strncmp_sign_and_limit():
    assert strncmp("abc", "abc", 3) == 0
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_end_of_string_counts_as_zero():
    assert strncmp("ab", "abc", 5) == -ord("c")
    assert strncmp("abc", "ab", 5) == ord("c")


def test_strncmp_path_prefix():
    assert strncmp("PATH=/bin", "PATH", 4) == 0


def test_strnstr_finds_within_length():
    big = "Foo Bar Baz"
    assert strnstr(big, "Bar", len(big)) == big.index("Bar")
    assert strnstr(big, "Bar", 6) is None
    assert strnstr(big, "Bar", 7) == big.index("Bar")


def test_strnstr_empty_needle_and_missing():
    assert strnstr("abc", "", 0) == 0
    assert strnstr("abc", "d", 3) is None


def test_strtrim_both_ends():
    assert strtrim("xxhelloxx", "x") == "hello"
    assert strtrim("  a b  ", " ") == "a b"
    assert strtrim("aaaa", "a") == ""
    assert strtrim("", "a") == ""


def test_strtrim_empty_set_keeps_text():
    assert strtrim("  keep  ", "") == "  keep  "


def test_substr_clamps():
    text = "hello world"
    assert substr(text, 6, 5) == "world"
    assert substr(text, 6, 100) == "world"
    assert substr(text, 100, 5) == ""
    assert substr(text, 0, 0) == ""


def test_substr_length_invariant():
    text = "abcdefgh"
    for start in range(len(text) + 2):
        for length in range(len(text) + 2):
            piece = substr(text, start, length)
            assert len(piece) <= length
            assert text.find(piece, min(start, len(text))) == min(start, len(text))


def test_substr_rejects_negative():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)