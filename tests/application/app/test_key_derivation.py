import pytest
from application.app.story.key_derivation import DEFAULT_CHAPTER_KEY, derive_key, key_from_path, prefixed_key_deriver
from starlette.requests import Request

def make_request(path: str) -> Request:
    return Request({"type": "http", "method": "GET", "path": path, "query_string": b"", "headers": []})

@pytest.mark.parametrize("path, key", [
    ("", "intro"),
    ("/", "intro"),
    ("/foo", "foo"),
    ("/Foo", "Foo"),
    ("/foo/bar", "foo/bar"),
])
def test_key_from_path(path, key):
    assert key_from_path(path) == key

def test_default_key_is_intro():
    assert DEFAULT_CHAPTER_KEY == "intro"

def test_derive_key_uses_request_path():
    assert derive_key(make_request("/")) == "intro"
    assert derive_key(make_request("/denver")) == "denver"

def test_derive_key_ignores_query_string():
    request = Request({"type": "http", "method": "GET", "path": "/denver", "query_string": b"chapter=sea", "headers": []})

    assert derive_key(request) == "denver"

def test_derive_key_is_repeatable():
    assert derive_key(make_request("/market")) == derive_key(make_request("/market"))

@pytest.mark.parametrize("path, key", [
    ("/story/", "intro"),
    ("/story", "intro"),
    ("/story/denver", "denver"),
    ("/denver", "denver"),
    ("/", "intro"),
])
def test_prefixed_key_deriver(path, key):
    derive = prefixed_key_deriver("/story/")

    assert derive(make_request(path)) == key

def test_prefixed_key_deriver_normalizes_prefix():
    derive = prefixed_key_deriver("story")

    assert derive(make_request("/story/sea")) == "sea"

def test_empty_prefix_is_default_derivation():
    assert prefixed_key_deriver("/") is derive_key
