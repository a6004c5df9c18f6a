# Markdown table writer for a batch of characters.

from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Iterable, Union

from ..errors import OutputError
from ..generate.schema import Character

logger = logging.getLogger(__name__)

HEADER = "| Index | Name     | Kind       |\n"
SEPARATOR = "|------|----------|------------|\n"
FILE_MODE = 0o644


def _cell(value: str) -> str:
    # one record per line, pipes must not open new columns
    return " ".join(value.splitlines()).replace("|", "\\|")


def render_table(characters: Iterable[Character]) -> str:
    rows = [HEADER, SEPARATOR]
    for idx, character in enumerate(characters, start=1):
        rows.append(f"| {idx}   | {_cell(character.name)}      | {_cell(character.kind)}       |\n")
    return "".join(rows)


def output_path(kind: str, directory: Union[str, Path] = ".") -> Path:
    return Path(directory) / f"characters.{kind}.md"


def write_table(characters: Iterable[Character], kind: str, directory: Union[str, Path] = ".") -> Path:
    """Write the table to characters.<kind>.md in one write, mode 0644."""
    path = output_path(kind, directory)
    buf = render_table(characters)
    try:
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            f.write(buf)
        os.chmod(path, FILE_MODE)
    except OSError as e:
        raise OutputError(f"cannot write {path}: {e}") from e
    logger.debug("wrote %d bytes to %s", len(buf), path)
    return path
