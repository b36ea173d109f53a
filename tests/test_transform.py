import pytest

from solong.textops import atoi
from solong.transform import itoa, split, striteri, strjoin, strmapi, strtrim, substr


def test_substr_start_past_end_gives_empty():
    assert substr("12345", 6, 5) == ""


def test_substr_start_at_end_gives_empty():
    assert substr("12345", 5, 3) == ""


@pytest.mark.parametrize("start", [0, 1, 3, 5])
@pytest.mark.parametrize("length", [0, 1, 2, 10])
def test_substr_is_bounded_piece_of_text(start, length):
    text = "12345"
    result = substr(text, start, length)
    assert len(result) == min(length, len(text) - start)
    assert text.startswith(result, start)


def test_substr_stops_at_nul():
    assert substr("ab\0cd", 0, 5) == substr("ab", 0, 5)
    assert "\0" not in substr("ab\0cd", 0, 5)


def test_substr_rejects_negative_start():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


def test_substr_rejects_none():
    with pytest.raises(TypeError):
        substr(None, 0, 1)


@pytest.mark.parametrize("a, b", [("abc", "def"), ("", "x"), ("x", ""), ("", "")])
def test_strjoin_concatenates(a, b):
    assert strjoin(a, b) == a + b


def test_strjoin_rejects_none():
    with pytest.raises(TypeError):
        strjoin("abc", None)


def test_strtrim_removes_both_ends():
    assert strtrim("+-+Hello+-+", "-+") == "Hello"


def test_strtrim_source_example():
    assert strtrim("abcdba", "acb") == "d"


def test_strtrim_all_trimmed_gives_empty():
    assert strtrim("     ", " ") == ""


def test_strtrim_none_charset_returns_text():
    assert strtrim("  keep  ", None) == "  keep  "


def test_strtrim_single_first_character_comes_out_empty():
    assert strtrim("a", "x") == ""
    assert strtrim("ab", "b") == ""


@pytest.mark.parametrize(
    "text, charset",
    [("   \t  \n\n \t\t  \n\n\nHello \t  Please\n Trim me !", " \n\t"), ("xxabcxx", "x")],
)
def test_strtrim_result_has_no_trimmed_ends(text, charset):
    result = strtrim(text, charset)
    assert result
    assert result[0] not in charset and result[-1] not in charset
    assert result in text


def test_split_words_round_trip():
    text = "42Tokyo is my favorite place"
    words = split(text, " ")
    assert " ".join(words) == text


def test_split_skips_runs_of_separators():
    text = "^^^1^^2a,^^^^3^^^^--h^^^^"
    words = split(text, "^")
    assert all(words)
    assert all("^" not in word for word in words)
    assert "".join(words) == text.replace("^", "")
    assert len(words) == len([w for w in text.split("^") if w])


def test_split_empty_and_separator_only():
    assert split("", " ") == []
    assert split("^^^^", "^") == []


def test_split_on_nul_keeps_whole_text():
    assert split("abc def", "\0") == ["abc def"]


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")


def test_itoa_zero():
    assert itoa(0) == "0"


def test_itoa_int_min():
    assert itoa(-(2**31)) == str(-(2**31))


@pytest.mark.parametrize("n", [1, -1, 123, -98765, 2**31 - 1, -(2**31)])
def test_itoa_round_trips_through_atoi(n):
    assert atoi(itoa(n)) == n


def test_itoa_out_of_range():
    with pytest.raises(OverflowError):
        itoa(2**31)


def test_strmapi_upper():
    text = "hello, world!"
    assert strmapi(text, lambda i, c: c.upper()) == text.upper()


def test_strmapi_passes_indices_in_order():
    seen = []

    def record(index, char):
        seen.append(index)
        return char

    text = "abcd"
    assert strmapi(text, record) == text
    assert seen == list(range(len(text)))


def test_strmapi_rejects_bad_mapping():
    with pytest.raises(ValueError):
        strmapi("ab", lambda i, c: c * 2)


def test_striteri_modifies_in_place():
    text = "hello, world!"
    chars = list(text)
    striteri(chars, lambda i, c: c.upper())
    assert "".join(chars) == text.upper()


def test_striteri_stops_at_nul():
    chars = list("ab\0cd")
    striteri(chars, lambda i, c: c.upper())
    assert chars[:2] == ["A", "B"]
    assert chars[2:] == ["\0", "c", "d"]


def test_striteri_none_keeps_item():
    data = bytearray(b"abc")
    striteri(data, lambda i, c: None if i == 1 else c - 32)
    assert data == bytearray(b"AbC")


def test_striteri_rejects_none():
    with pytest.raises(TypeError):
        striteri(None, lambda i, c: c)