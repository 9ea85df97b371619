"""pa configuration: PA_* environment defaults and well-known locations."""

from .defaults import LINK, LinkDefaults
from .paths import resolve_home_dir

__all__ = ["LINK", "LinkDefaults", "resolve_home_dir"]
