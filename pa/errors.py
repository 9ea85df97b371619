"""Exceptions raised by pa.

Link and symlink failures keep the ``errno``/``filename`` details of the
underlying ``OSError`` so callers can inspect them the usual way.
"""

from __future__ import annotations

from typing import Any


class UnsupportedType(TypeError):
    """Raised when a value is neither a path string nor carries a ``path``."""

    def __init__(self, value: Any) -> None:
        super().__init__(f"not support type -- {value!r}({type(value).__name__})")
        self.value = value


class LinkError(OSError):
    """Raised when creating a hard or symbolic link fails."""

    @classmethod
    def from_os_error(cls, exc: OSError) -> "LinkError":
        if exc.errno is None:
            return cls(*exc.args)
        return cls(exc.errno, exc.strerror, exc.filename, None, exc.filename2)


class NotASymlink(OSError):
    """Raised by ``readlink`` when the path exists but is not a symlink."""


__all__ = ["UnsupportedType", "LinkError", "NotASymlink"]
