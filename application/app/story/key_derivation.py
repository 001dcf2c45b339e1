from typing import Callable

from fastapi import Request

DEFAULT_CHAPTER_KEY = "intro"

KeyDeriver = Callable[[Request], str]

def key_from_path(path: str) -> str:
    """Get the chapter key from a URL path, the root path maps to the intro chapter."""
    if path == "" or path == "/":
        return DEFAULT_CHAPTER_KEY
    return path[1:] if path.startswith("/") else path

def derive_key(request: Request) -> str:
    """Default key derivation: the request path without its leading slash."""
    return key_from_path(request.url.path)

def prefixed_key_deriver(prefix: str) -> KeyDeriver:
    """
    Build a key derivation for a story served below a path prefix, e.g. "/story/".
    Paths outside the prefix are handled like the default derivation.
    """
    if not prefix.strip("/"):
        return derive_key
    prefix = "/" + prefix.strip("/") + "/"

    def derive_prefixed_key(request: Request) -> str:
        path = request.url.path
        if path == prefix.rstrip("/"):
            return DEFAULT_CHAPTER_KEY
        if path.startswith(prefix):
            return path[len(prefix):] or DEFAULT_CHAPTER_KEY
        return key_from_path(path)

    return derive_prefixed_key
