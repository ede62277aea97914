"""Decoding of locale JSON documents."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict


class ParseError(RuntimeError):
    """Raised when a locale file is not a valid translation document."""

    def __init__(self, path: Path, detail: str) -> None:
        super().__init__(f"Failed to parse {path}: {detail}")
        self.path = path
        self.detail = detail


def load_document(path: Path) -> Dict[str, Any]:
    """Return the decoded JSON object stored at ``path``."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ParseError(path, str(exc)) from exc

    try:
        document = json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise ParseError(path, f"{exc.msg} (line {exc.lineno}, column {exc.colno})") from exc
    except ValueError as exc:
        raise ParseError(path, str(exc)) from exc

    if not isinstance(document, dict):
        raise ParseError(path, f"expected a JSON object at the root, got {type(document).__name__}")
    return document


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not a valid translation value")


__all__ = ["ParseError", "load_document"]
