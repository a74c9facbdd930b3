"""Load an OpenAPI YAML document and extract its server-sent event types.

Only components.x-sse-events is read; the rest of the document is ignored.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .errors import FileAccessError, ParseError

EXTENSION_KEY = "x-sse-events"

YAML_VERSION = (1, 2)


@dataclass(frozen=True)
class SSEEvent:
    """One entry of the x-sse-events mapping."""

    key: str
    event: str
    description: str = ""
    deprecated: bool = False


def load_spec(path: Path) -> dict[str, Any]:
    """Read and parse the YAML document at path."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as err:
        raise FileAccessError(f"error reading file: {err}") from err
    except UnicodeDecodeError as err:
        raise ParseError(f"error parsing YAML: {err}") from err

    try:
        spec = _yaml().load(text)
    except YAMLError as err:
        raise ParseError(f"error parsing YAML: {err}") from err

    if spec is None:
        return {}
    if not isinstance(spec, dict):
        raise ParseError(
            f"error parsing YAML: expected a mapping at top level, got {type(spec).__name__}"
        )
    return spec


def _yaml() -> YAML:
    """YAML 1.2 safe loader that rejects repeated mapping keys."""
    yaml = YAML(typ="safe", pure=True)
    yaml.version = YAML_VERSION
    yaml.allow_duplicate_keys = False
    return yaml


def get_sse_events(spec: dict[str, Any]) -> dict[Any, Any]:
    """Extract components.x-sse-events, or an empty mapping if absent."""
    components = spec.get("components") or {}
    if not isinstance(components, dict):
        raise ParseError("'components' must be a mapping")
    events = components.get(EXTENSION_KEY) or {}
    if not isinstance(events, dict):
        raise ParseError(f"'components.{EXTENSION_KEY}' must be a mapping")
    return events


def _parse_event(key: str, value: Any) -> SSEEvent:
    if not isinstance(value, dict):
        raise ParseError(f"event {key!r}: expected a mapping, got {type(value).__name__}")

    event = value.get("event")
    if not isinstance(event, str):
        raise ParseError(f"event {key!r}: 'event' is required and must be a string")

    description = value.get("description")
    if description is None:
        description = ""
    elif not isinstance(description, str):
        raise ParseError(f"event {key!r}: 'description' must be a string")

    deprecated = value.get("deprecated")
    if deprecated is None:
        deprecated = False
    elif not isinstance(deprecated, bool):
        raise ParseError(f"event {key!r}: 'deprecated' must be a boolean")

    return SSEEvent(key=key, event=event, description=description, deprecated=deprecated)


def parse_events(raw: dict[Any, Any]) -> list[SSEEvent]:
    """Turn the raw x-sse-events mapping into SSEEvent records (unnormalized)."""
    return [_parse_event(str(key), value) for key, value in raw.items()]


def load_events(path: Path) -> list[SSEEvent]:
    """Load the document at path and return its raw SSE events."""
    return parse_events(get_sse_events(load_spec(path)))
