"""
Tests for importing links saved by older releases.
"""

import pytest

from gone_links.entities import AddResult
from gone_links.migration import import_legacy, legacy_keys


def test_version_0_decodes_list():
    assert legacy_keys(["http://site/caf%C3%A9/", "http://site/a/"], 0) == [
        "http://site/café/",
        "http://site/a/",
    ]


def test_version_1_decodes_mapping_keys():
    data = {"http://site/a%20b/": "|^http://site/a b/$|i"}

    assert legacy_keys(data, 1) == ["http://site/a b/"]


def test_version_2_keeps_keys():
    data = {"http://site/100%25/": "|^http://site/100%/$|i"}

    assert legacy_keys(data, 2) == ["http://site/100%25/"]


@pytest.mark.parametrize(
    "data, version",
    [
        (["http://site/a/"], 3),
        ({"http://site/a/": "regex"}, 0),
        (["http://site/a/"], 1),
        (["http://site/a/"], 2),
    ],
)
def test_bad_input_is_rejected(data, version):
    with pytest.raises(ValueError):
        legacy_keys(data, version)


def test_import_legacy(engine):
    engine.add_gone("http://site/a/")

    results = import_legacy(engine, ["http://site/a/", "http://site/b/", "http://site/*/c/"], 0)

    assert results[AddResult.INSERTED] == 2
    assert results[AddResult.ALREADY_EXISTS] == 1
    assert engine.classify("http://site/x/c/").is_gone
