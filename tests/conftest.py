# ===============================================
# tests/conftest.py
# Shared fixtures: clean environment + a stubbed
# Ollama /api/chat endpoint (no network).
# ===============================================

import json

import pytest
import requests

ENV_VARS = [
    "OLLAMA_HOST", "LLM", "KIND", "BATCH_SIZE", "PROFILE", "DECODING",
    "OUTPUT_DIR", "CLIENT", "REQUEST_TIMEOUT", "LOG_LEVEL",
]


class FakeResponse:
    def __init__(self, status_code=200, body=None, text=None):
        self.status_code = status_code
        self._body = body
        self.text = text if text is not None else json.dumps(body)

    def json(self):
        if self._body is None:
            return json.loads(self.text)
        return self._body

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Server Error", response=self)


def chat_reply(content):
    """Ollama /api/chat envelope carrying `content` as the assistant message."""
    if not isinstance(content, str):
        content = json.dumps(content)
    return FakeResponse(200, {"model": "qwen2.5:0.5b", "message": {"role": "assistant", "content": content}, "done": True})


class FakeSession:
    """Replays queued responses (or raises queued exceptions) in order."""

    def __init__(self, responses):
        self.responses = list(responses)
        self.calls = []
        self.closed = False

    def post(self, url, json=None, timeout=None, **kwargs):
        self.calls.append({"url": url, "json": json, "timeout": timeout})
        item = self.responses.pop(0)
        if isinstance(item, BaseException):
            raise item
        return item

    def close(self):
        self.closed = True


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def stub_server(monkeypatch):
    """Patch requests.Session.post; returns a function that queues replies."""
    session = FakeSession([])

    def fake_post(self, url, json=None, timeout=None, **kwargs):
        return session.post(url, json=json, timeout=timeout, **kwargs)

    monkeypatch.setattr(requests.Session, "post", fake_post)

    def queue(*items):
        session.responses.extend(items)
        return session

    return queue
