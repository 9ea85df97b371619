"""PathView: a path string with its derived parts computed once.

Attributes are plain strings; the methods return new views::

    PathView("/home/a").dir        #=> "/home"
    PathView("/home/a").dirname()  #=> PathView("/home")
"""

from __future__ import annotations

from dataclasses import dataclass, field

from . import ops
from ._types import PathInput


@dataclass(frozen=True, slots=True)
class PathView:
    path: str
    absolute: str = field(init=False, compare=False, repr=False)
    dir: str = field(init=False, compare=False, repr=False)
    base: str = field(init=False, compare=False, repr=False)
    name: str = field(init=False, compare=False, repr=False)
    ext: str = field(init=False, compare=False, repr=False)
    fext: str = field(init=False, compare=False, repr=False)
    short: str = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        path = ops.get(self.path)
        name, fext = ops.basename(path, ext=True)
        # frozen: fields are set once here and never again
        object.__setattr__(self, "path", path)
        object.__setattr__(self, "absolute", ops.absolute(path))
        object.__setattr__(self, "dir", ops.dirname(path))
        object.__setattr__(self, "base", ops.basename(path))
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "fext", fext)
        object.__setattr__(self, "ext", fext[1:])
        object.__setattr__(self, "short", ops.shorten(path))

    # short aliases
    @property
    def a(self) -> str:
        return self.absolute

    @property
    def d(self) -> str:
        return self.dir

    @property
    def b(self) -> str:
        return self.base

    @property
    def n(self) -> str:
        return self.name

    @property
    def e(self) -> str:
        return self.ext

    @property
    def fe(self) -> str:
        return self.fext

    def absolute_path(self) -> "PathView":
        return PathView(self.absolute)

    def dirname(self) -> "PathView":
        return PathView(self.dir)

    def join(self, *paths: PathInput | None) -> "PathView":
        """``PathView(__file__).dirname().join(".opts")``"""
        return PathView(ops.join(self.path, *paths))

    def __add__(self, suffix: PathInput) -> "PathView":
        """Append ``suffix`` verbatim: ``PathView("a.txt") + "~"`` is ``a.txt~``."""
        return PathView(self.path + ops.get(suffix))

    def __fspath__(self) -> str:
        return self.path

    def __str__(self) -> str:
        return self.path


__all__ = ["PathView"]
