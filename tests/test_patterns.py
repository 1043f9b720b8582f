"""
Tests for the URL pattern compiler.
"""

import pytest

from gone_links.errors import MatchEngineFault
from gone_links.patterns import ANY, Matcher, compile_pattern, is_wildcard


@pytest.mark.parametrize(
    "candidate, expected",
    [
        ("http://site/a/", True),
        ("HTTP://SITE/A/", True),
        ("http://site/a", False),
        ("http://site/a/b", False),
        ("xhttp://site/a/", False),
        ("", False),
    ],
)
def test_literal_matches_whole_string_only(candidate, expected):
    """A pattern without wildcards matches exactly itself, ignoring case."""
    assert compile_pattern("http://site/a/").matches(candidate) is expected


@pytest.mark.parametrize(
    "candidate, expected",
    [
        ("http://site/old/", True),
        ("http://site/old/child/page", True),
        ("http://SITE/Old/?x=1", True),
        ("http://site/ol", False),
        ("http://site/new/old/", False),
    ],
)
def test_trailing_wildcard_matches_prefix(candidate, expected):
    assert compile_pattern("http://site/old/*").matches(candidate) is expected


@pytest.mark.parametrize(
    "candidate, expected",
    [
        ("x", True),
        ("abcXdef", True),
        ("prefix-x", True),
        ("x-suffix", True),
        ("abc", False),
        ("", False),
    ],
)
def test_surrounding_wildcards_match_substring(candidate, expected):
    assert compile_pattern("*x*").matches(candidate) is expected


def test_inner_wildcard():
    matcher = compile_pattern("http://site/*/z/")

    assert matcher.matches("http://site/b/z/")
    assert matcher.matches("http://site/a/b/c/z/")
    assert matcher.matches("http://site//z/")
    assert not matcher.matches("http://site/b/c/")
    assert not matcher.matches("http://site/z/")


def test_metacharacters_are_literal():
    """Regex metacharacters only match themselves."""
    matcher = compile_pattern("http://site/page.php?id=(1)|[2]+")

    assert matcher.matches("http://site/page.php?id=(1)|[2]+")
    assert not matcher.matches("http://site/pageXphp?id=(1)|[2]+")
    assert not matcher.matches("http://site/page.phpid=1")
    assert not matcher.matches("http://site/page.php?id=1")


def test_empty_pattern_matches_only_empty_string():
    matcher = compile_pattern("")

    assert matcher.tokens == ()
    assert matcher.matches("")
    assert not matcher.matches("a")


def test_lone_wildcard_matches_everything():
    matcher = compile_pattern("*")

    assert matcher.tokens == (ANY,)
    assert matcher.matches("")
    assert matcher.matches("http://anything/at/all?q=1")


def test_consecutive_wildcards_collapse():
    assert compile_pattern("a**b") == compile_pattern("a*b")
    assert compile_pattern("***").tokens == (ANY,)


def test_tokens_alternate_literals_and_wildcards():
    assert compile_pattern("http://site/*/z/*").tokens == ("http://site/", ANY, "/z/", ANY)


def test_prefix_and_suffix_do_not_overlap():
    matcher = compile_pattern("ab*ba")

    assert matcher.matches("abba")
    assert matcher.matches("ab-ba")
    assert not matcher.matches("aba")


def test_middle_literals_keep_their_order():
    matcher = compile_pattern("a*b*c")

    assert matcher.matches("axbyc")
    assert matcher.matches("abc")
    assert not matcher.matches("acb")


def test_unicode_case_folding():
    assert compile_pattern("http://site/ÄRGER/").matches("http://site/ärger/")


def test_many_wildcards_against_long_input():
    """Patterns that blow up backtracking engines are evaluated linearly."""
    matcher = compile_pattern("*a*a*a*a*a*a*a*a*a*a*b")

    assert not matcher.matches("a" * 20000)
    assert matcher.matches("a" * 20000 + "b")


def test_stored_form_round_trip():
    matcher = compile_pattern("http://site/*/z/")

    assert matcher.to_json() == '["http://site/", null, "/z/"]'
    assert Matcher.from_json(matcher.to_json()) == matcher


@pytest.mark.parametrize("data", ["not json", '{"a": 1}', "42", None])
def test_from_json_rejects_bad_data(data):
    with pytest.raises(MatchEngineFault):
        Matcher.from_json(data)


def test_malformed_tokens_raise_match_engine_fault():
    matcher = Matcher(("http://site/", 42))

    with pytest.raises(MatchEngineFault):
        matcher.matches("http://site/42")


def test_str_reproduces_collapsed_pattern():
    assert str(compile_pattern("http://site/**/z/")) == "http://site/*/z/"


def test_is_wildcard():
    assert is_wildcard("http://site/*/")
    assert not is_wildcard("http://site/a/")
    assert compile_pattern("http://site/*/").has_wildcard
