"""
Tests for the gone-links command line.
"""

import json

import pytest
from typer.testing import CliRunner

from gone_links import GoneEngine
from gone_links.cli import app

runner = CliRunner()


@pytest.fixture
def invoke(engine):
    def run(*args):
        return runner.invoke(app, list(args), obj=engine)

    return run


def test_add_and_list(invoke):
    result = invoke("add", "http://site/old/")
    assert result.exit_code == 0
    assert "URL added: http://site/old/" in result.output

    invoke("add", "http://site/*/z/")
    result = invoke("list")
    assert result.exit_code == 0
    assert "  http://site/old/\n" in result.output
    assert "  http://site/*/z/ (wildcard)" in result.output
    assert "Total: 2 entries" in result.output
    assert "No logged 404s found." in result.output


def test_list_empty(invoke):
    result = invoke("list")
    assert "No Gone entries found." in result.output


def test_add_duplicate(invoke):
    invoke("add", "http://site/old/")

    result = invoke("add", "http://site/old/")
    assert result.exit_code == 0
    assert "already exists" in result.output


def test_add_foreign_url_warns(invoke, engine):
    result = invoke("add", "http://elsewhere/old/")

    assert "may not be served by this site" in result.output
    assert [entry.key for entry in engine.list_gone()] == ["http://elsewhere/old/"]


def test_remove(invoke, engine):
    engine.add_gone("http://site/old/")

    assert "Removed 1 entries." in invoke("remove", "http://site/old/").output
    assert "no entry for" in invoke("remove", "http://site/old/").output


def test_check_and_promote(invoke, engine):
    result = invoke("check", "http://site/missing/")
    assert "404 Not Found" in result.output

    result = invoke("promote", "http://site/missing/")
    assert "Promoted: http://site/missing/" in result.output

    result = invoke("check", "http://site/missing/")
    assert "410 Gone (matched http://site/missing/)" in result.output


def test_promote_unknown(invoke):
    assert "is not a logged 404" in invoke("promote", "http://site/nope/").output


def test_set_limit_and_purge(invoke, engine):
    for i in range(3):
        engine.classify(f"http://site/{i}/")

    result = invoke("set-limit", "1")
    assert result.exit_code == 0
    assert "Limit set to 1 (2 trimmed)." in result.output

    result = invoke("purge-misses")
    assert "Purged 1 logged 404s." in result.output
    assert engine.list_miss() == []


def test_set_limit_rejects_negative(invoke):
    assert invoke("set-limit", "-1").exit_code != 0


def test_self_test_cleans_up(invoke, engine):
    engine.add_gone("http://site/keep/")

    result = invoke("test")
    assert result.exit_code == 0
    assert "http://site/*/test-410-wildcard/ (wildcard)" in result.output
    assert "Test completed!" in result.output
    assert [entry.key for entry in engine.list_gone()] == ["http://site/keep/"]


def test_seed_and_clear(invoke, engine):
    invoke("seed-test-data")
    assert len(engine.list_gone()) == 3

    invoke("clear-test-data")
    assert engine.list_gone() == []


def test_import_legacy(invoke, engine, tmp_path):
    path = tmp_path / "links.json"
    path.write_text(json.dumps({"http://site/a%20b/": "regex"}), encoding="utf-8")

    result = invoke("import-legacy", str(path), "--format-version", "1")
    assert result.exit_code == 0
    assert "Imported 1 links (0 already present)." in result.output
    assert [entry.key for entry in engine.list_gone()] == ["http://site/a b/"]


def test_import_legacy_bad_version(invoke, tmp_path):
    path = tmp_path / "links.json"
    path.write_text("[]", encoding="utf-8")

    assert invoke("import-legacy", str(path), "--format-version", "9").exit_code == 2


def test_store_errors_exit_nonzero(unavailable_store, site_settings):
    engine = GoneEngine.create(store=unavailable_store, settings=site_settings)

    result = runner.invoke(app, ["list"], obj=engine)
    assert result.exit_code == 1
