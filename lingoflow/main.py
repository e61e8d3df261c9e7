"""Console entrypoint for the LingoFlow desktop app."""
from __future__ import annotations

import sys

from .errors import ConfigError


def main() -> int:
    """Launch the desktop app and return the process exit status."""
    try:
        # The entrypoint loads config at import time; a missing key stops here.
        import app
    except ConfigError as exc:
        print(f"lingoflow: {exc}", file=sys.stderr)
        return 2
    app.launch()
    return 0


if __name__ == "__main__":
    sys.exit(main())
