# NameGenerator: binds the schema, prompt profile and decoding profile into
# one ChatRequest, then drives N sequential generations against any client
# exposing chat(request) -> str (Ollama or Echo).

from __future__ import annotations
import logging
import threading
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from ..errors import Cancelled, ConfigError
from .prompts import build_messages
from .schema import Character, build_response_schema, parse_character, serialize_schema
from .types import ChatRequest, DecodingOptions

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).with_name("config.yaml")
DEFAULT_BATCH_SIZE = 15

NOVELTY = {
    "temperature": 1.7,
    "repeat_last_n": 2,
    "repeat_penalty": 2.2,
    "top_k": 10,
    "top_p": 0.9,
}
DEFAULT_PROFILES: Dict[str, Dict[str, Any]] = {
    "novelty": NOVELTY,
    "deterministic": {**NOVELTY, "temperature": 0.0, "top_p": 0.5},
}


class NameGenerator:
    def __init__(
        self,
        model_client,
        model: str,
        kind: str = "Dwarf",
        profile: str = "minimal",
        decoding: str = "novelty",
        config_path: Optional[Path] = DEFAULT_CONFIG_PATH,
    ):
        self.model_client = model_client
        self.model = model
        self.kind = kind
        self.config_path = config_path
        self.cfg = self._load_config()

        self.schema = build_response_schema()
        self.schema_json = serialize_schema(self.schema)
        self.messages = build_messages(kind, profile)
        self.options = self._resolve_decoding(decoding)
        self.request = self.build_request()

    def _load_config(self) -> Dict[str, Any]:
        if not self.config_path or not Path(self.config_path).exists():
            return {}
        with open(self.config_path, "r", encoding="utf-8") as f:
            try:
                cfg = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigError(f"cannot parse {self.config_path}: {e}") from e
        if not isinstance(cfg, dict):
            raise ConfigError(f"{self.config_path} must hold a mapping")

        batch_size = cfg.get("batch_size", DEFAULT_BATCH_SIZE)
        if isinstance(batch_size, bool) or not isinstance(batch_size, int) or batch_size < 0:
            raise ConfigError(f"{self.config_path}: batch_size must be a non-negative integer, got {batch_size!r}")
        decoding = cfg.get("decoding") or {}
        if not isinstance(decoding, dict):
            raise ConfigError(f"{self.config_path}: decoding must map profile names to options")
        for name, options in decoding.items():
            if not isinstance(options, dict):
                raise ConfigError(f"{self.config_path}: decoding.{name} must be a mapping of options, got {options!r}")
        return cfg

    def _resolve_decoding(self, name: str) -> DecodingOptions:
        profiles = {**DEFAULT_PROFILES, **(self.cfg.get("decoding") or {})}
        if name not in profiles:
            raise ConfigError(f"unknown decoding profile {name!r} (known: {', '.join(sorted(profiles))})")
        return DecodingOptions.from_mapping(profiles[name])

    @property
    def default_batch_size(self) -> int:
        return int(self.cfg.get("batch_size", DEFAULT_BATCH_SIZE))

    def build_request(self) -> ChatRequest:
        return ChatRequest(
            model=self.model,
            messages=list(self.messages),
            options=self.options,
            format=self.schema_json,
            stream=False,
        )

    def generate_one(self) -> Character:
        content = self.model_client.chat(self.request)
        character = parse_character(content)
        if character.kind != self.kind:
            # drift is kept as returned
            logger.warning("asked for %s, model answered kind=%r", self.kind, character.kind)
        logger.info("%s %s", character.name, character.kind)
        return character

    def generate_batch(
        self,
        batch_size: Optional[int] = None,
        cancel: Optional[threading.Event] = None,
    ) -> List[Character]:
        """Run generate_one() batch_size times, in order.

        The first failure propagates and nothing is returned. When `cancel`
        is set the batch stops before the next request.
        """
        n = self.default_batch_size if batch_size is None else batch_size
        characters: List[Character] = []
        for i in range(n):
            if cancel is not None and cancel.is_set():
                raise Cancelled(f"batch cancelled after {i} of {n} generations")
            characters.append(self.generate_one())
        return characters
