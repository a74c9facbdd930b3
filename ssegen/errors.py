"""Error kinds raised by the generator pipeline.

Library code raises these with the underlying cause chained; only the CLI
turns them into exit codes.
"""

from __future__ import annotations


class GeneratorError(Exception):
    """Base class for every error the generator reports to the user."""


class UsageError(GeneratorError):
    """Missing or invalid command-line flag."""


class FileAccessError(GeneratorError):
    """Input unreadable, or output directory/file unwritable."""


class ParseError(GeneratorError):
    """Input is not valid YAML or has the wrong shape."""


class DuplicateEventError(ParseError):
    """Two event identifiers normalize to the same member name."""


class RenderError(GeneratorError):
    """Template missing, broken, or referencing undefined data."""


class FormatError(GeneratorError):
    """Generated Go source was rejected by gofmt."""


class InvalidEventError(ParseError):
    """An event identifier cannot be turned into a usable member name."""
