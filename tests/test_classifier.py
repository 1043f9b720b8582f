"""
Tests for request classification.
"""

import pytest

from gone_links.entities import Category, Outcome
from gone_links.patterns import Matcher, compile_pattern
from gone_links.services import normalize_request_url


@pytest.fixture
def classified(engine):
    engine.add_gone("http://site/a/")
    engine.add_gone("http://site/*/z/")
    return engine


@pytest.mark.parametrize(
    "url, witness",
    [
        ("http://site/a/", "http://site/a/"),
        ("http://SITE/A/", "http://site/a/"),
        ("http://site/b/z/", "http://site/*/z/"),
        ("http://site/a/b/z/", "http://site/*/z/"),
    ],
)
def test_matching_url_is_gone(classified, url, witness):
    result = classified.classify(url)

    assert result.outcome is Outcome.MATCHED
    assert result.is_gone
    assert result.witness == witness
    assert result.url == url


def test_unmatched_url_is_logged(classified, store):
    result = classified.classify("http://site/b/c/")

    assert result.outcome is Outcome.UNMATCHED
    assert result.witness is None
    assert [entry.key for entry in classified.list_miss()] == ["http://site/b/c/"]


def test_match_performs_no_writes(classified, store):
    writes = list(store.writes)

    classified.classify("http://site/a/")
    classified.classify("http://site/q/z/")

    assert store.writes == writes


def test_unmatched_logs_at_most_once(classified, store):
    before = len(store.inserts())

    classified.classify("http://site/b/c/")
    classified.classify("http://site/b/c/")

    assert len(store.inserts()) == before + 1


def test_logged_miss_does_not_match(classified):
    """Test that misses are never used as patterns."""
    classified.classify("http://site/b/c/")

    assert not classified.classify("http://site/b/c/").is_gone


def test_promoted_miss_matches(classified):
    classified.classify("http://site/b/c/")
    classified.promote("http://site/b/c/")

    result = classified.classify("http://site/b/c/")
    assert result.is_gone
    assert result.witness == "http://site/b/c/"


def test_faulty_matcher_is_skipped(engine, store):
    """Test that one broken pattern does not stop classification."""
    store.insert("http://site/broken/", Matcher(("http://site/", 42)), Category.GONE)
    store.insert("http://site/*", compile_pattern("http://site/*"), Category.GONE)

    result = engine.classify("http://site/broken/")
    assert result.is_gone
    assert result.witness == "http://site/*"


def test_only_faulty_matcher_means_unmatched(engine, store):
    store.insert("http://site/broken/", Matcher(("http://site/", 42)), Category.GONE)

    assert not engine.classify("http://site/broken/").is_gone


def test_classify_request_normalizes(classified):
    result = classified.classify_request("http", "site", "/b/%7A/")

    assert result.url == "http://site/b/z/"
    assert result.is_gone


@pytest.mark.parametrize(
    "scheme, host, request_uri, expected",
    [
        ("http", "site", "/a/", "http://site/a/"),
        ("https", "site:8443", "/a/?x=1", "https://site:8443/a/?x=1"),
        ("http", "site", "/caf%C3%A9/", "http://site/café/"),
        ("http", "site", "/a%20b/?q=c%26d", "http://site/a b/?q=c&d"),
        ("http", "site", "/a+b/", "http://site/a+b/"),
    ],
)
def test_normalize_request_url(scheme, host, request_uri, expected):
    assert normalize_request_url(scheme, host, request_uri) == expected
