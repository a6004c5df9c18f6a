# Typed dataclasses shared across the generate modules.

from __future__ import annotations
import json
from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Mapping, Optional


@dataclass
class Message:
    """Single chat turn: system, user, or assistant."""
    role: str
    content: str

    def to_dict(self) -> Dict[str, str]:
        return {"role": self.role, "content": self.content}


@dataclass
class DecodingOptions:
    """Sampling knobs sent as `options`. Values are forwarded verbatim;
    the server is the one that rejects out-of-range values."""
    temperature: Optional[float] = None
    repeat_last_n: Optional[int] = None
    repeat_penalty: Optional[float] = None
    top_k: Optional[int] = None
    top_p: Optional[float] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "DecodingOptions":
        known = {f.name for f in fields(cls)} - {"extra"}
        return cls(
            **{k: v for k, v in data.items() if k in known},
            extra={k: v for k, v in data.items() if k not in known},
        )

    def to_options(self) -> Dict[str, Any]:
        opts = {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if f.name != "extra" and getattr(self, f.name) is not None
        }
        opts.update(self.extra)
        return opts


@dataclass
class ChatRequest:
    """One non-streamed chat call. `format` holds the serialized JSON schema."""
    model: str
    messages: List[Message]
    options: DecodingOptions
    format: str
    stream: bool = False

    def to_payload(self) -> Dict[str, Any]:
        return {
            "model": self.model,
            "messages": [m.to_dict() for m in self.messages],
            "options": self.options.to_options(),
            "format": json.loads(self.format),
            "stream": self.stream,
        }
