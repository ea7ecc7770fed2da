import pytest

from libft.search import (
    strcmp,
    strchr,
    strlcat,
    strlcpy,
    strlen,
    strncmp,
    strnstr,
    strrchr,
)


@pytest.mark.parametrize("text", ["", "a", "hello world", "tab\there"])
def test_strlen_matches_length(text):
    assert strlen(text) == len(text)


def test_strlen_none_is_zero():
    assert strlen(None) == 0


@pytest.mark.parametrize("text,ch", [("hello", "l"), ("abcabc", "c"), ("xyz", "x")])
def test_strchr_finds_first(text, ch):
    index = strchr(text, ch)
    assert text[index] == ch
    assert ch not in text[:index]


def test_strchr_accepts_code():
    assert strchr("hello", ord("e")) == strchr("hello", "e")


def test_strchr_missing():
    assert strchr("hello", "z") is None


def test_strchr_nul_is_terminator():
    assert strchr("hello", "\0") == len("hello")
    assert strchr("hello", 0) == len("hello")


@pytest.mark.parametrize("text,ch", [("hello", "l"), ("abcabc", "a"), ("xyz", "z")])
def test_strrchr_finds_last(text, ch):
    index = strrchr(text, ch)
    assert text[index] == ch
    assert ch not in text[index + 1:]


def test_strrchr_missing_and_nul():
    assert strrchr("hello", "q") is None
    assert strrchr("", "q") is None
    assert strrchr("abc", "\0") == len("abc")


def test_strchr_rejects_long_string():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


def test_strchr_rejects_other_types():
    with pytest.raises(TypeError):
        strchr("abc", 1.5)


def test_strncmp_equal_prefix():
    assert strncmp("abcdef", "abcxyz", 3) == 0


def test_strncmp_difference_value():
    assert strncmp("abc", "abd", 3) == ord("c") - ord("d")
    assert strncmp("abd", "abc", 3) == ord("d") - ord("c")


def test_strncmp_zero_length():
    assert strncmp("a", "b", 0) == 0


def test_strncmp_shorter_string_counts_end_as_zero():
    assert strncmp("ab", "abc", 5) == -ord("c")
    assert strncmp("abc", "ab", 5) == ord("c")


def test_strncmp_identical():
    assert strncmp("same", "same", 100) == 0


def test_strncmp_negative_n():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


def test_strcmp_sign():
    assert strcmp("apple", "apricot") == -1
    assert strcmp("apricot", "apple") == 1
    assert strcmp("same", "same") == 0


def test_strcmp_prefix_compares_equal():
    assert strcmp("ab", "abc") == 0
    assert strcmp("abc", "ab") == 0


@pytest.mark.parametrize("src,size", [("hello", 10), ("hello", 3), ("hello", 1), ("", 4)])
def test_strlcpy_truncates_and_reports_length(src, size):
    copied, length = strlcpy(src, size)
    assert copied == src[: size - 1]
    assert length == len(src)
    assert len(copied) < size


def test_strlcpy_zero_size():
    copied, length = strlcpy("hello", 0)
    assert copied == ""
    assert length == len("hello")


def test_strlcpy_negative_size():
    with pytest.raises(ValueError):
        strlcpy("hello", -1)


def test_strlcat_fits():
    result, length = strlcat("foo", "bar", 20)
    assert result == "foo" + "bar"
    assert length == len("foo") + len("bar")


def test_strlcat_truncates():
    size = 5
    result, length = strlcat("foo", "bar", size)
    assert result.startswith("foo")
    assert len(result) == size - 1
    assert length == len("foo") + len("bar")


def test_strlcat_destination_already_full():
    result, length = strlcat("foobar", "xyz", 3)
    assert result == "foobar"
    assert length == 3 + len("xyz")


def test_strlcat_negative_size():
    with pytest.raises(ValueError):
        strlcat("a", "b", -2)


def test_strnstr_empty_needle():
    assert strnstr("anything", "", 0) == 0


def test_strnstr_found_within_length():
    haystack, needle = "lorem ipsum dolor", "ipsum"
    index = strnstr(haystack, needle, len(haystack))
    assert haystack[index:index + len(needle)] == needle


def test_strnstr_cut_off_by_length():
    haystack, needle = "lorem ipsum dolor", "ipsum"
    start = haystack.index(needle)
    assert strnstr(haystack, needle, start + len(needle) - 1) is None
    assert strnstr(haystack, needle, start + len(needle)) == start


def test_strnstr_missing():
    assert strnstr("abc", "zz", 3) is None


def test_strnstr_length_beyond_haystack():
    assert strnstr("abc", "c", 100) == strchr("abc", "c")