"""
tests/conftest.py

Purpose:
    Fake HTTP session and response objects so the fetchers run without network.
"""

import threading

import pytest
import requests


class FakeResponse:
    def __init__(self, status_code=200, payload=None, headers=None, reason="OK", json_error=False):
        self.status_code = status_code
        self._payload = payload
        self.headers = headers or {}
        self.reason = reason
        self._json_error = json_error

    @property
    def ok(self):
        return 200 <= self.status_code < 400

    def json(self):
        if self._json_error:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._payload

    def raise_for_status(self):
        if not self.ok:
            raise requests.HTTPError(f"{self.status_code} {self.reason}")


class FakeSession:
    """Routes GET requests by URL suffix; unrouted URLs return 404"""

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.calls = []
        self._lock = threading.Lock()

    def get(self, url, params=None, timeout=None):
        with self._lock:
            self.calls.append(url)
        for suffix, result in self.routes.items():
            if url.endswith(suffix):
                if isinstance(result, Exception):
                    raise result
                return result
        return FakeResponse(404, reason="Not Found")

    def count(self, suffix):
        return sum(1 for url in self.calls if url.endswith(suffix))


@pytest.fixture
def fake_session():
    return FakeSession()
