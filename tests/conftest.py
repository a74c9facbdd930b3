"""Shared fixtures for ssegen tests.

Go formatting tests need a real gofmt on PATH and are skipped without one.
"""

from __future__ import annotations

import shutil
import textwrap
from pathlib import Path
from typing import Callable

import pytest

from ssegen.config import GenerationRequest


requires_gofmt = pytest.mark.skipif(
    shutil.which("gofmt") is None, reason="gofmt not installed"
)


SAMPLE_SPEC = textwrap.dedent(
    """\
    openapi: 3.1.0
    info:
      title: Messages API
      version: 1.0.0
    paths: {}
    components:
      schemas: {}
      x-sse-events:
        message_start:
          event: message_start
          description: start
        message_end:
          event: message_end
          deprecated: true
        content_block_delta:
          event: content_block_delta
          description: |
            A chunk of streamed content.
            Sent repeatedly until the block stops.
        ping:
          event: ping
    """
)


@pytest.fixture
def write_spec(tmp_path: Path) -> Callable[[str], Path]:
    """Return a callable that writes YAML text to a file and returns its path."""
    def _write_spec(text: str, name: str = "openapi.yaml") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write_spec


@pytest.fixture
def sample_spec(write_spec) -> Path:
    return write_spec(SAMPLE_SPEC)


@pytest.fixture
def make_request(tmp_path: Path, sample_spec: Path) -> Callable[..., GenerationRequest]:
    """Build a GenerationRequest against the sample spec, with overrides."""
    def _make_request(**overrides: object) -> GenerationRequest:
        base: dict[str, object] = {
            "input": sample_spec,
            "output": tmp_path / "out" / "nested" / "events.ts",
            "lang": "ts",
        }
        base.update(overrides)
        return GenerationRequest(**base)
    return _make_request
