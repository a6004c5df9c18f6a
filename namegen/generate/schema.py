# Structured output: the JSON schema bound to each request and the
# validator that turns model content back into a Character.
# ref: https://ollama.com/blog/structured-outputs

from __future__ import annotations
import json
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError

from ..errors import ParseError


class Character(BaseModel):
    """A validated (name, kind) pair. `kind` is kept as returned, even when
    it drifts from the requested kind."""
    model_config = ConfigDict(frozen=True, extra="ignore")

    name: StrictStr = Field(min_length=1)
    kind: StrictStr = Field(min_length=1)


def build_response_schema() -> Dict[str, Any]:
    return {
        "type": "object",
        "properties": {
            "name": {"type": "string"},
            "kind": {"type": "string"},
        },
        "required": ["name", "kind"],
    }


def serialize_schema(schema: Dict[str, Any]) -> str:
    return json.dumps(schema)


def parse_character(content: str) -> Character:
    """Parse model content as a Character.

    Rejects invalid JSON, non-object values and objects whose `name` or
    `kind` is missing, empty or not a string. Extra keys are ignored.
    """
    try:
        return Character.model_validate_json(content)
    except ValidationError as e:
        first = e.errors()[0]
        where = ".".join(str(p) for p in first["loc"]) or "content"
        raise ParseError(f"{where}: {first['msg']} (content={content[:120]!r})") from e
