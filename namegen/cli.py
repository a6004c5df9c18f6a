#!/usr/bin/env python3
# =============================================================
# namegen CLI
# -------------------------------------------------------------
# Reads OLLAMA_HOST + LLM from the environment (or .env), asks the
# model for batch_size NPC names of one kind, and writes them to
# ./characters.<kind>.md as a Markdown table.
#
# Exit codes: 0 on success, the error class exit code otherwise
# (see namegen/errors.py), 130 on Ctrl-C.
# =============================================================

from __future__ import annotations
import argparse
import logging
import sys
from typing import List, Optional

from .errors import ConfigError, NameGenError
from .generate import EchoDevClient, NameGenerator, OllamaClient
from .report import write_table
from .settings import Settings, load_settings

logger = logging.getLogger("namegen")


def setup_logging(level: str = "INFO") -> None:
    if not logger.handlers:
        h = logging.StreamHandler()
        h.setFormatter(logging.Formatter("%(asctime)s %(levelname)s: %(message)s"))
        logger.addHandler(h)
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ConfigError(f"unknown log level {level!r}")
    logger.setLevel(resolved)


def build_client(settings: Settings):
    if settings.CLIENT == "echo":
        return EchoDevClient()
    return OllamaClient(settings.endpoint, timeout=settings.REQUEST_TIMEOUT)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(prog="namegen", description="Generate NPC names with a local LLM.")
    ap.add_argument("--kind", choices=["Dwarf", "Human", "Elf"], help="kind of character (env KIND, default Dwarf)")
    ap.add_argument("--batch-size", type=int, help="number of generations (env BATCH_SIZE, default 15)")
    ap.add_argument("--profile", choices=["minimal", "guided"], help="prompt profile (env PROFILE)")
    ap.add_argument("--decoding", help="decoding profile: novelty, deterministic, ... (env DECODING)")
    ap.add_argument("--output-dir", help="where characters.<kind>.md is written (env OUTPUT_DIR)")
    ap.add_argument("--client", choices=["ollama", "echo"], help="chat backend (env CLIENT)")
    ap.add_argument("--log-level", help="logging level (env LOG_LEVEL)")
    return ap.parse_args(argv)


def run(settings: Settings) -> int:
    logger.info("🌍 %s 📕 %s", settings.endpoint, settings.model)
    with build_client(settings) as client:
        gen = NameGenerator(
            model_client=client,
            model=settings.model,
            kind=settings.KIND,
            profile=settings.PROFILE,
            decoding=settings.DECODING,
        )
        characters = gen.generate_batch(settings.BATCH_SIZE)
    path = write_table(characters, settings.KIND, settings.OUTPUT_DIR)
    logger.info("📝 %d characters written to %s", len(characters), path)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    try:
        setup_logging(args.log_level or "INFO")
        settings = load_settings(
            KIND=args.kind,
            BATCH_SIZE=args.batch_size,
            PROFILE=args.profile,
            DECODING=args.decoding,
            OUTPUT_DIR=args.output_dir,
            CLIENT=args.client,
            LOG_LEVEL=args.log_level,
        )
        setup_logging(settings.LOG_LEVEL)
        return run(settings)
    except NameGenError as e:
        logger.error("😡 %s", e)
        return e.exit_code
    except KeyboardInterrupt:
        logger.error("😡 interrupted, nothing written")
        return 130


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
