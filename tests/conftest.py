"""Shared fixtures: an in-memory stand-in for ``requests.Session``."""

from __future__ import annotations

import io
import json
from typing import Any, Optional

import pytest
import requests
from requests.structures import CaseInsensitiveDict
from rich.console import Console

from reaction_ranker.config import RankerConfig
from reaction_ranker.display import make_console

BASE_URL = "https://api.example.test"


def make_response(
    status: int = 200,
    payload: Any = None,
    *,
    body: Optional[bytes] = None,
    headers: Optional[dict[str, str]] = None,
) -> requests.Response:
    response = requests.Response()
    response.status_code = status
    response._content = body if body is not None else json.dumps(payload).encode("utf-8")
    response.encoding = "utf-8"
    response.headers = CaseInsensitiveDict(headers or {})
    return response


class FakeSession:
    """Serves canned responses keyed by path; records every call."""

    def __init__(self, routes: dict[str, Any]):
        self.routes = routes
        self.headers: dict[str, str] = {}
        self.calls: list[tuple[str, Optional[dict[str, Any]]]] = []
        self.closed = False

    def get(self, url: str, params=None, timeout=None) -> requests.Response:
        self.calls.append((url, params))
        path = url[len(BASE_URL):]
        route = self.routes.get(path)
        if route is None:
            return make_response(404, {"message": "Not Found"})
        if isinstance(route, Exception):
            raise route
        return route

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def config() -> RankerConfig:
    return RankerConfig(token="test-token", owner="octo", repo="widgets", base_url=BASE_URL)


@pytest.fixture
def out() -> Console:
    return make_console(io.StringIO())


def output_lines(console: Console) -> list[str]:
    return console.file.getvalue().splitlines()
