# Generator package

# Exposes the request/response types, the structured-output helpers
# and the batch driver.

from .generator import NameGenerator
from .schema import Character, build_response_schema, parse_character, serialize_schema
from .types import ChatRequest, DecodingOptions, Message
from .clients import EchoDevClient, OllamaClient

__all__ = [
    "NameGenerator",
    "Character",
    "build_response_schema",
    "parse_character",
    "serialize_schema",
    "ChatRequest",
    "DecodingOptions",
    "Message",
    "EchoDevClient",
    "OllamaClient",
]
