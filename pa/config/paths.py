"""Well-known locations used by pa."""

from __future__ import annotations

import os
from pathlib import Path


def resolve_home_dir() -> str:
    """Return the current user's home directory.

    Prefers `PA_HOME` and falls back to `HOME` before asking the platform.
    Read on every call so changes to the environment are picked up.
    """
    configured = os.getenv("PA_HOME") or os.getenv("HOME")
    if configured:
        return configured
    return str(Path.home())


__all__ = ["resolve_home_dir"]
