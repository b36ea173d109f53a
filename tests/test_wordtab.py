import pytest

from solong.wordtab import str_str, str_str_quoted, str_to_wordtab


def test_str_str_finds_first_occurrence():
    text = 'static char *x[] = { "ab" };'
    assert str_str(text, '"', len(text)) == text.index('"')


def test_str_str_missing_is_minus_one():
    assert str_str("abcdef", "xy", 6) == -1


def test_str_str_find_longer_than_length():
    assert str_str("abcdef", "cd", 1) == -1


def test_str_str_match_at_end():
    text = "hello world"
    assert str_str(text, "world", len(text)) == text.index("world")


def test_str_str_stops_at_nul():
    assert str_str("abc\0def", "def", 7) == -1


def test_str_str_empty_find_raises():
    with pytest.raises(ValueError):
        str_str("abc", "", 3)


def test_quoted_skips_match_inside_quotes():
    text = 'a "/*" /* x'
    assert str_str_quoted(text, "/*", len(text)) == text.rindex("/*")


def test_quoted_plain_match_before_quotes():
    text = '/* c */ "q"'
    assert str_str_quoted(text, "/*", len(text)) == 0


def test_quoted_only_inside_quotes_is_missing():
    text = '"// inside"'
    assert str_str_quoted(text, "//", len(text)) == -1


def test_quoted_agrees_with_plain_without_quotes():
    text = "one // two // three"
    assert str_str_quoted(text, "//", len(text)) == str_str(text, "//", len(text))


def test_quoted_find_longer_than_length():
    assert str_str_quoted("abc /* d", "/*", 1) == -1


def test_wordtab_splits_xpm_header():
    assert str_to_wordtab("16 16 2 1") == ["16", "16", "2", "1"]


def test_wordtab_collapses_blanks_and_tabs():
    assert str_to_wordtab("  a\t\tb  c \t") == ["a", "b", "c"]


def test_wordtab_keeps_other_whitespace_in_words():
    assert str_to_wordtab("a\nb c") == ["a\nb", "c"]


def test_wordtab_empty_and_blank():
    assert str_to_wordtab("") == []
    assert str_to_wordtab(" \t  ") == []


def test_wordtab_rejoin_round_trip():
    words = ["c", "#FF0000", "s", "red"]
    assert str_to_wordtab("\t".join(words)) == words