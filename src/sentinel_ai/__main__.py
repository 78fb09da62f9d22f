"""Package entry point.

Preferred invocation is via the installed console script:

    sentinel-ai ...

For convenience we also support:

    python -m sentinel_ai ...
"""

from __future__ import annotations

from .cli import app


def main() -> None:
    """Entry point used by `python -m sentinel_ai`."""

    app()


if __name__ == "__main__":
    main()
