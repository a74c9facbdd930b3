"""Resolved configuration for a single generation run."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

GO = "go"
TS = "ts"
SUPPORTED_LANGUAGES = (GO, TS)

DEFAULT_TYPE_NAME = "SSEEvent"
DEFAULT_PACKAGE = "events"


@dataclass(frozen=True)
class GenerationRequest:
    input: Path
    output: Path
    lang: str
    type_name: str = DEFAULT_TYPE_NAME
    package: str = DEFAULT_PACKAGE
