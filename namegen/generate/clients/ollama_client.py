# Client for the Ollama chat endpoint (POST /api/chat, non-streamed).

from __future__ import annotations
import logging
from typing import Optional

import requests

from ...errors import ConfigError, ProtocolError, TransportError
from ..types import ChatRequest

logger = logging.getLogger(__name__)


class OllamaClient:
    def __init__(self, host: str, session: Optional[requests.Session] = None, timeout: Optional[float] = None):
        self.host = host.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    @property
    def chat_url(self) -> str:
        # Accept both the base URL and the full chat URL
        if self.host.endswith("/api/chat"):
            return self.host
        return f"{self.host}/api/chat"

    def chat(self, request: ChatRequest) -> str:
        """Send one request and return the assistant message content."""
        url = self.chat_url
        logger.debug("POST %s model=%s", url, request.model)
        try:
            resp = self.session.post(url, json=request.to_payload(), timeout=self.timeout)
        except (requests.exceptions.MissingSchema, requests.exceptions.InvalidSchema) as e:
            raise ConfigError(f"{url} has no http:// or https:// scheme; set OLLAMA_HOST to a full URL such as http://localhost:11434") from e
        except requests.RequestException as e:
            raise TransportError(f"could not reach {url}: {e}") from e

        try:
            resp.raise_for_status()
        except requests.HTTPError as e:
            raise TransportError(f"{url} answered HTTP {resp.status_code}: {resp.text[:200]}") from e

        try:
            data = resp.json()
        except ValueError as e:
            raise ProtocolError(f"{url} returned a non-JSON body") from e

        if not isinstance(data, dict):
            raise ProtocolError("response envelope is not a JSON object")
        if data.get("error"):
            raise ProtocolError(f"server error: {data['error']}")
        message = data.get("message")
        content = message.get("content") if isinstance(message, dict) else None
        if not isinstance(content, str):
            raise ProtocolError("response envelope has no message.content")
        return content

    def close(self):
        self.session.close()

    def __enter__(self) -> "OllamaClient":
        return self

    def __exit__(self, *exc):
        self.close()
