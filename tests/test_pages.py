import json

import pytest

from page_verification.pages import DEFAULT_PAGES, PageSpec, load_pages, validate_pages
from page_verification.results import RegistryError


def test_basename_strips_extension():
    assert PageSpec("Casos", "case-studies.html", "h1").basename == "case-studies"
    assert PageSpec("Post", "blog/post.html", "h1").basename == "post"


def test_url_joins_with_single_slash():
    spec = PageSpec("Home", "index.html", "h1")
    assert spec.url("http://127.0.0.1:8080") == "http://127.0.0.1:8080/index.html"
    assert spec.url("http://127.0.0.1:8080/") == "http://127.0.0.1:8080/index.html"
    assert PageSpec("Home", "/index.html", "h1").url("http://host/") == "http://host/index.html"


def test_default_pages_are_valid():
    pages = validate_pages(DEFAULT_PAGES)
    assert len(pages) == 7
    assert pages[0] == PageSpec("Home", "index.html", "h1")
    assert pages[2].selector == 'img[alt="Nabolic Fitness Gym Interior"]'


def test_validate_keeps_order():
    pages = [PageSpec("B", "b.html", "h1"), PageSpec("A", "a.html", "h1")]
    assert [p.path for p in validate_pages(pages)] == ["b.html", "a.html"]


def test_empty_registry_rejected():
    with pytest.raises(RegistryError):
        validate_pages([])


def test_duplicate_path_rejected():
    with pytest.raises(RegistryError, match="Duplicate page path"):
        validate_pages([PageSpec("A", "index.html", "h1"), PageSpec("B", "index.html", "main")])


def test_clashing_artifact_names_rejected():
    with pytest.raises(RegistryError, match="artifact name 'index'"):
        validate_pages([PageSpec("A", "index.html", "h1"), PageSpec("B", "blog/index.html", "h1")])


def test_blank_selector_rejected():
    with pytest.raises(RegistryError, match="Incomplete"):
        validate_pages([PageSpec("A", "a.html", "")])


def test_load_pages_from_json(tmp_path):
    path = tmp_path / "pages.json"
    path.write_text(json.dumps([
        {"name": "Home", "path": "index.html", "selector": "h1"},
        {"name": "Recursos", "path": "resources.html", "selector": "main h2"},
    ]), encoding="utf-8")

    pages = load_pages(path)

    assert pages == (
        PageSpec("Home", "index.html", "h1"),
        PageSpec("Recursos", "resources.html", "main h2"),
    )


def test_load_pages_missing_key(tmp_path):
    path = tmp_path / "pages.json"
    path.write_text(json.dumps([{"name": "Home", "path": "index.html"}]), encoding="utf-8")
    with pytest.raises(RegistryError, match="Invalid page entry"):
        load_pages(path)


def test_load_pages_not_a_list(tmp_path):
    path = tmp_path / "pages.json"
    path.write_text('{"name": "Home"}', encoding="utf-8")
    with pytest.raises(RegistryError, match="JSON array"):
        load_pages(path)
