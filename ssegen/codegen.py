"""Render templates, format Go output, and write the generated file.

Takes the context from context_builder and produces Go or TypeScript source.
"""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Any

import jinja2

from .config import GO, TS, GenerationRequest
from .context_builder import build_context, build_events
from .errors import FileAccessError, FormatError, GeneratorError, RenderError
from .loader import load_events

TEMPLATE_DIR = Path(__file__).parent / "templates"

TEMPLATES: dict[str, str] = {
    GO: "go.j2",
    TS: "ts.j2",
}

GOFMT = "gofmt"


def go_comment(text: str, indent: str = "") -> str:
    """Render text as Go line comments, one per input line."""
    lines = text.strip().splitlines() or [""]
    return "\n".join(f"{indent}// {line}".rstrip() for line in lines)


def jsdoc(text: str, indent: str = "") -> str:
    """Render text as JSDoc body lines, keeping comment terminators inert."""
    lines = text.strip().replace("*/", "*\\/").splitlines() or [""]
    return "\n".join(f"{indent} * {line}".rstrip() for line in lines)


def _environment() -> jinja2.Environment:
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=jinja2.StrictUndefined,
    )
    env.filters["go_comment"] = go_comment
    env.filters["jsdoc"] = jsdoc
    return env


def render(context: dict[str, Any], lang: str) -> str:
    """Render the template for lang against context."""
    template_name = TEMPLATES.get(lang)
    if template_name is None:
        raise RenderError(f"unsupported language: {lang}")

    try:
        template = _environment().get_template(template_name)
        return template.render(**context)
    except jinja2.TemplateError as err:
        raise RenderError(f"error executing template {template_name}: {err}") from err


def format_go_source(source: str, gofmt: str = GOFMT) -> str:
    """Run Go source through gofmt and return the formatted text."""
    try:
        result = subprocess.run(
            [gofmt],
            input=source,
            capture_output=True,
            text=True,
            check=True,
        )
    except FileNotFoundError as err:
        raise FormatError(f"{gofmt} not found: install Go to generate Go output") from err
    except subprocess.CalledProcessError as err:
        raise FormatError(f"gofmt rejected generated source: {err.stderr.strip()}") from err
    return result.stdout


def generate_code(context: dict[str, Any], lang: str) -> bytes:
    """Render source for lang; Go output is gofmt-formatted, TS is left as rendered."""
    source = render(context, lang)
    if lang == GO:
        source = format_go_source(source)
    return source.encode("utf-8")


def write_output(path: Path, data: bytes) -> None:
    """Write data to path, creating parent directories as needed."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as err:
        raise FileAccessError(f"error creating directory: {err}") from err
    try:
        path.write_bytes(data)
    except OSError as err:
        raise FileAccessError(f"error writing file: {err}") from err


def generate(request: GenerationRequest) -> int:
    """Run the full pipeline for request. Returns the number of generated members."""
    try:
        events = build_events(load_events(request.input))
    except GeneratorError as err:
        raise type(err)(f"error getting events: {err}") from err

    context = build_context(request, events)

    try:
        generated = generate_code(context, request.lang)
    except GeneratorError as err:
        raise type(err)(f"error generating code: {err}") from err

    write_output(request.output, generated)
    return context["event_count"]
