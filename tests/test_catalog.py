import orjson
import pytest
from pydantic import ValidationError

from evops_seed.catalog import load_catalog
from evops_seed.errors import CatalogError


def _write(tmp_path, data):
    path = tmp_path / "seed.json"
    path.write_bytes(orjson.dumps(data))
    return path


def test_bundled_catalog():
    catalog = load_catalog()
    assert len(catalog.users) == 8
    assert len(catalog.tags) == 41
    assert len(catalog.events) == 203
    assert catalog.users["o4u"] == "Opportunities For You"
    assert catalog.tags["study"] == ["university", "exams", "learning"]
    first = catalog.events[0]
    assert first.title == "IBC 2019 Volunteer Opportunities!"
    assert first.tags == ["volunteering", "job-fair"]
    assert first.with_attendance is True
    assert len(first.images) == 3


def test_custom_catalog(tmp_path):
    path = _write(tmp_path, {
        "users": {"ann": "Ann"},
        "tags": {"quiz": []},
        "events": [{"author": "ann", "title": "Quiz night", "tags": ["quiz"]}],
    })
    catalog = load_catalog(path)
    event = catalog.events[0]
    assert event.description == ""
    assert event.with_attendance is False
    assert event.images == []


def test_unknown_author(tmp_path):
    path = _write(tmp_path, {"users": {}, "tags": {}, "events": [{"author": "ghost", "title": "x"}]})
    with pytest.raises(CatalogError, match="unknown author 'ghost'"):
        load_catalog(path)


def test_unknown_tag(tmp_path):
    path = _write(tmp_path, {
        "users": {"ann": "Ann"},
        "tags": {"quiz": []},
        "events": [{"author": "ann", "title": "x", "tags": ["quiz", "karaoke"]}],
    })
    with pytest.raises(CatalogError, match="karaoke"):
        load_catalog(path)


def test_malformed_catalog(tmp_path):
    path = _write(tmp_path, {"users": ["ann"], "tags": {}})
    with pytest.raises(ValidationError):
        load_catalog(path)
