import pytest
import requests
from requests.structures import CaseInsensitiveDict
from urllib3 import HTTPHeaderDict


class FakeRaw:
    def __init__(self, headers):
        self.headers = headers


class FakeResponse:
    """
    Stands in for requests.Response with only what make_request reads.

    ``headers`` is a list of (name, value) pairs so repeated headers such
    as Set-Cookie arrive as separate lines, the way urllib3 keeps them.
    """

    def __init__(self, url, status_code=200, headers=(), history=()):
        raw_headers = HTTPHeaderDict()
        for name, value in headers:
            raw_headers.add(name, value)

        self.url = url
        self.status_code = status_code
        self.raw = FakeRaw(raw_headers)
        self.headers = CaseInsensitiveDict({name: ', '.join(raw_headers.getlist(name)) for name in raw_headers})
        self.history = list(history)
        self.closed = False

    def close(self):
        self.closed = True


class FakeHttp:
    def __init__(self):
        self.routes = {}
        self.calls = []


@pytest.fixture
def fake_http(monkeypatch):
    """
    Route requests.Session.get to canned responses.

    Register ``url -> FakeResponse`` or ``url -> exception`` in
    ``routes``; every call is recorded in ``calls``.
    """
    http = FakeHttp()

    def fake_get(self, url, **kwargs):
        http.calls.append((url, kwargs))
        outcome = http.routes[url]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    monkeypatch.setattr(requests.Session, 'get', fake_get)
    return http


@pytest.fixture
def response_factory():
    return FakeResponse
