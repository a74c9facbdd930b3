"""Build the Jinja2 template context from the raw SSE events.

Normalizes each event's member name and wire value, rejects collisions,
and sorts the result so output never depends on document order.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any

from .config import GenerationRequest
from .errors import DuplicateEventError, InvalidEventError
from .loader import SSEEvent
from .naming import to_camel_case, to_pascal_case, unmappable_characters


def normalize_event(event: SSEEvent) -> SSEEvent:
    """Return a copy with PascalCase key and camelCase wire value."""
    return replace(
        event,
        key=to_pascal_case(event.key),
        event=to_camel_case(event.event),
    )


def _check_names(original: SSEEvent, event: SSEEvent) -> None:
    for field, text in (("key", original.key), ("event", original.event)):
        bad = unmappable_characters(text)
        if bad:
            raise InvalidEventError(
                f"event {original.key!r}: {field} has characters with no ASCII spelling:"
                f" {''.join(bad)!r}"
            )
    # TypeScript enum members must be identifiers.
    if not event.key[:1].isalpha():
        raise InvalidEventError(
            f"event {original.key!r}: member name {event.key!r} must start with a letter"
        )


def build_events(raw: list[SSEEvent]) -> list[SSEEvent]:
    """Normalize, validate names, check uniqueness, and sort events by member name."""
    events: list[SSEEvent] = []
    sources: dict[str, str] = {}

    for original in raw:
        event = normalize_event(original)
        _check_names(original, event)
        if event.key in sources:
            first, second = sorted((sources[event.key], original.key))
            raise DuplicateEventError(
                f"events {first!r} and {second!r} both normalize to {event.key!r}"
            )
        sources[event.key] = original.key
        events.append(event)

    events.sort(key=lambda e: e.key)
    return events


def build_context(request: GenerationRequest, events: list[SSEEvent]) -> dict[str, Any]:
    """Assemble the template context for the requested language."""
    return {
        "package": request.package,
        "type_name": request.type_name,
        "events": events,
        "event_count": len(events),
    }
