"""
Catalog source (path or URL -> list of course dicts).

A source is either a local file path or an http(s) URL. Remote sources
are fetched with requests; local ones are read from disk. Either way the
body must be a UTF-8 JSON array of objects.

Every failure is raised as a CatalogLoadError subclass. Callers that must
not crash (CatalogAccessor.load) catch that single base class.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import requests


REQUEST_TIMEOUT = 30


class CatalogLoadError(Exception):
    """
    Base class for all catalog loading failures.
    """

    def __init__(self, source: str | Path, message: str) -> None:
        super().__init__(f"{source}: {message}")
        self.source = str(source)


class LoadTransportError(CatalogLoadError):
    """
    The resource could not be fetched (missing file, network error, HTTP error status).
    """


class LoadDecodeError(CatalogLoadError):
    """
    The resource was fetched but is not a JSON list of course objects.
    """


def is_url(source: str | Path) -> bool:
    return isinstance(source, str) and source.lower().startswith(("http://", "https://"))


def _fetch_bytes(source: str | Path) -> bytes:
    if is_url(source):
        try:
            resp = requests.get(str(source), timeout=REQUEST_TIMEOUT)
            resp.raise_for_status()
        except requests.RequestException as exc:
            raise LoadTransportError(source, f"Failed to load course data: {exc}") from exc
        return resp.content

    try:
        return Path(source).read_bytes()
    except OSError as exc:
        raise LoadTransportError(source, f"Failed to load course data: {exc}") from exc


def decode_catalog(raw: bytes, source: str | Path = "<memory>") -> list[dict[str, Any]]:
    """
    Decode raw bytes into the catalog list.

    Only the top level is checked (a list whose items are objects); the
    course fields themselves are passed through untouched.
    """
    try:
        data = json.loads(raw.decode("utf-8-sig"))
    except (UnicodeDecodeError, json.JSONDecodeError, RecursionError) as exc:
        raise LoadDecodeError(source, f"Invalid catalog JSON: {exc}") from exc

    if not isinstance(data, list):
        raise LoadDecodeError(source, f"Expected a JSON array of courses, got {type(data).__name__}")
    for i, item in enumerate(data):
        if not isinstance(item, dict):
            raise LoadDecodeError(source, f"Course #{i} is not an object")
    return data


def fetch_catalog(source: str | Path) -> list[dict[str, Any]]:
    """
    Fetch and decode a catalog. Raises CatalogLoadError on any failure.
    """
    return decode_catalog(_fetch_bytes(source), source)
