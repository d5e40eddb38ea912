import pytest

from cubmap.wordtab import str_str, str_str_cote, str_to_wordtab


def test_wordtab_splits_on_spaces():
    assert str_to_wordtab("8 8 2 1") == ["8", "8", "2", "1"]


def test_wordtab_ignores_runs_of_blanks_and_tabs():
    assert str_to_wordtab("  a\t b \t ") == ["a", "b"]


def test_wordtab_empty():
    assert str_to_wordtab(" \t ") == []


def test_wordtab_newline_is_not_a_separator():
    assert str_to_wordtab("a\nb c") == ["a\nb", "c"]


def test_wordtab_stops_at_nul():
    assert str_to_wordtab("x y\0z") == ["x", "y"]


@pytest.mark.parametrize("text,find", [("abcabc", "c"), ("xx/*yy", "/*"), ("aaa", "aa")])
def test_str_str_finds_first(text, find):
    pos = str_str(text, find, len(text))
    assert pos == text.find(find)
    assert text[pos:pos + len(find)] == find


def test_str_str_missing():
    assert str_str("abc", "z", 3) == -1


def test_str_str_length_gate():
    assert str_str("abc", "abc", 2) == -1
    assert str_str("abc", "abcd", 3) == -1


def test_str_str_empty_find():
    with pytest.raises(ValueError):
        str_str("abc", "", 3)


def test_str_str_cote_skips_quoted():
    text = '"/*" x /*'
    assert str_str_cote(text, "/*", len(text)) == text.rindex("/*")


def test_str_str_cote_only_quoted():
    text = 'a "//" b'
    assert str_str_cote(text, "//", len(text)) == -1


def test_str_str_cote_unquoted_matches_plain():
    text = "one // two"
    assert str_str_cote(text, "//", len(text)) == str_str(text, "//", len(text))