import json

import pytest

from cobo_custody import CoboClient, Config

# Any integer below the secp256k1 group order is a valid key
TEST_SECRET = "11" * 32
TEST_KEY = "test-api-key"
BASE_URL = "https://api.dev.cobo.com"

ENV_VARS = ("COBO_API_KEY", "COBO_API_SECRET", "COBO_BASE_URL", "COBO_TIMEOUT")


class FakeResponse:
    def __init__(self, status_code=200, payload=None, text=None, reason="OK"):
        self.status_code = status_code
        self.reason = reason
        self._payload = payload
        self.text = text if text is not None else json.dumps(payload)

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if self._payload is None:
            raise ValueError("No JSON object could be decoded")
        return self._payload


class FakeSession:
    """Records requests and replays queued responses (or raises queued exceptions)."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def request(self, method, url, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        # setenv first so the variable is removed again on teardown
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


@pytest.fixture
def config():
    return Config(api_key=TEST_KEY, api_secret=TEST_SECRET, base_url=BASE_URL, timeout=5.0)


@pytest.fixture
def make_client(config):
    def _make(*responses):
        return CoboClient(config, session=FakeSession(*responses))

    return _make
