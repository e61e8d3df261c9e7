"""Environment and path helpers for configuration loading."""
from __future__ import annotations

import os
from typing import Optional


def resolve_path(value: str, base_dir: str) -> str:
    """Return value unchanged when absolute, otherwise joined under base_dir."""
    expanded = os.path.expanduser(value)
    return expanded if os.path.isabs(expanded) else os.path.join(base_dir, expanded)


def clamp(value: int, min_value: Optional[int] = None, max_value: Optional[int] = None) -> int:
    if min_value is not None and value < min_value:
        return min_value
    if max_value is not None and value > max_value:
        return max_value
    return value


def parse_int_env(
    name: str,
    default: int,
    *,
    min_value: Optional[int] = None,
    max_value: Optional[int] = None,
) -> int:
    """Read an integer setting; blank or unparsable values use default, then bounds apply."""
    raw = os.getenv(name, "").strip()
    try:
        value = int(raw) if raw else default
    except ValueError:
        value = default
    return clamp(value, min_value, max_value)


def env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")
