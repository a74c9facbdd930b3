"""Entry point: python -m ssegen

Reads an OpenAPI YAML file, generates a Go or TypeScript SSE event enum.
"""

from __future__ import annotations

from .cli import main

if __name__ == "__main__":
    main()
