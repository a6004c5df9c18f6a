# Dummy chat client for local dev and testing without a server.

import json
import re

from ..types import ChatRequest

_KIND_RE = re.compile(r"kind always equals (\w+)")


class EchoDevClient:
    def __init__(self):
        self.host = "echo-dev"
        self.calls = 0

    def chat(self, request: ChatRequest) -> str:
        self.calls += 1
        user_inputs = [m.content for m in request.messages if m.role == "user"]
        match = _KIND_RE.search(user_inputs[-1]) if user_inputs else None
        kind = match.group(1) if match else "unknown"
        return json.dumps({"name": f"Echo-{self.calls}", "kind": kind})

    def close(self):
        pass

    def __enter__(self) -> "EchoDevClient":
        return self

    def __exit__(self, *exc):
        self.close()
