"""Test environment defaults.

The desktop entrypoint reads its credential and log directory at import
time, so these are set before any test module imports ``app``.
"""

from __future__ import annotations

import os
import tempfile

os.environ.setdefault("GEMINI_API_KEY", "test-key")
os.environ.setdefault("LINGOFLOW_SKIP_APP_INIT", "1")
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="lingoflow-logs-"))
