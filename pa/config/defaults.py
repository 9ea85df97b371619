"""pa config defaults.

No side effects on import. Values can be overridden via PA_* env vars.
"""

from __future__ import annotations

import os
from dataclasses import dataclass


def _env(name: str, default: str) -> str:
    if not name.startswith("PA_"):
        raise ValueError(f"Only PA_* env vars are allowed, got: {name}")
    return os.getenv(name, default)


def _env_bool(name: str, default: bool) -> bool:
    raw = _env(name, str(default))
    return raw.lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class LinkDefaults:
    # Expand shell-style patterns in ln/symlink sources.
    glob_sources: bool = _env_bool("PA_LINK_GLOB", True)


LINK = LinkDefaults()

__all__ = ["LinkDefaults", "LINK"]
