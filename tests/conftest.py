from urllib.parse import unquote

import pytest
import requests

from servers import netsuite_client
from servers.netsuite_auth import Credentials
from servers.netsuite_client import NetSuiteClient

ACCOUNT_ID = "1234567"
BASE_URL = f"https://{ACCOUNT_ID}.suitetalk.api.netsuite.com"


def make_response(status_code, body="", headers=None):
    response = requests.Response()
    response.status_code = status_code
    response._content = body.encode("utf-8")
    response.encoding = "utf-8"
    response.headers.update(headers or {})
    return response


def parse_auth_header(value):
    assert value.startswith("OAuth ")
    params = {}
    for part in value[len("OAuth "):].split(", "):
        key, _, quoted = part.partition("=")
        params[key] = unquote(quoted.strip('"'))
    return params


class FakeNetSuite:
    """Stands in for requests.request and records every outbound call."""

    def __init__(self):
        self.calls = []
        self.responses = []
        self.barrier = None

    def respond(self, status_code, body="", headers=None):
        self.responses.append(make_response(status_code, body, headers))

    def __call__(self, method, url, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        if self.barrier is not None:
            # only released once the expected number of requests are in flight together
            self.barrier.wait()
        if self.responses:
            return self.responses.pop(0)
        return make_response(200, "{}")


@pytest.fixture
def credentials():
    return Credentials(
        account_id=ACCOUNT_ID,
        consumer_key="ck",
        consumer_secret="cs",
        token_key="tk",
        token_secret="ts",
    )


@pytest.fixture
def client(credentials):
    return NetSuiteClient(credentials)


@pytest.fixture
def fake_netsuite(monkeypatch):
    fake = FakeNetSuite()
    monkeypatch.setattr(netsuite_client.requests, "request", fake)
    return fake
