"""Stateless path operations for pa.

Every function accepts a path string, an object exposing a ``path`` accessor
(such as :class:`pa.view.PathView`), or an ``os.PathLike``; see :func:`get`.

Splitting follows the classic ``dirname``/``basename`` conventions rather than
``os.path.split``:

- a path with no directory part has ``"."`` as its parent
- the root is its own parent and its own basename
- trailing separators are ignored (``"/home/a/"`` splits like ``"/home/a"``)
"""

from __future__ import annotations

import errno
import glob as _glob
import logging
import os
import re
import shutil
from contextlib import AbstractContextManager
from typing import Any, Callable, List, Literal, Optional, Sequence, Tuple, TypeVar, Union
from typing import overload

from ._types import HasPath, PathInput
from .config.defaults import LINK
from .config.paths import resolve_home_dir
from .errors import LinkError, NotASymlink, UnsupportedType

logger = logging.getLogger(__name__)

T = TypeVar("T")

# stem + last extension; a leading dot belongs to the stem (".bashrc")
_EXT_RE = re.compile(r"(.+?)(\.[^.]+)?", re.DOTALL)

Sources = Union[PathInput, Sequence[PathInput]]


def get(obj: Any) -> str:
    """Return the path string carried by ``obj``.

    ``obj.path`` wins when present (called if it is a method), then plain
    strings, then ``os.PathLike`` objects. Anything else raises
    :class:`UnsupportedType`.
    """
    if not isinstance(obj, str) and isinstance(obj, HasPath):
        value = obj.path
        if callable(value):
            value = value()
        if isinstance(value, str):
            return value
        raise UnsupportedType(obj)
    if isinstance(obj, str):
        return obj
    if isinstance(obj, os.PathLike):
        value = os.fspath(obj)
        if isinstance(value, str):
            return value
    raise UnsupportedType(obj)


def _split(path: str) -> Tuple[str, str]:
    if not path:
        return ".", ""
    stripped = path.rstrip(os.sep)
    if not stripped:
        return os.sep, os.sep
    head, tail = os.path.split(stripped)
    if not head:
        head = "."
    else:
        head = head.rstrip(os.sep) or os.sep
    return head, tail


def _split_ext(name: str) -> Tuple[str, str]:
    m = _EXT_RE.fullmatch(name)
    if m is None:
        return name, ""
    return m.group(1), m.group(2) or ""


def absolute(path: PathInput) -> str:
    """Absolute form of ``path``; ``~`` is left alone (see :func:`expand`)."""
    return os.path.abspath(get(path))


def expand(path: PathInput) -> str:
    """Absolute form of ``path`` with ``~`` expanded."""
    return os.path.abspath(os.path.expanduser(get(path)))


def shorten(path: PathInput) -> str:
    """Replace a leading home directory with ``~``.

    ``/home/user/file`` becomes ``~/file``. Only whole segments match, so
    ``/home/username`` is not under ``/home/user``.
    """
    path = get(path)
    home = resolve_home_dir().rstrip(os.sep)
    if not home:
        return path
    if path == home or path.startswith(home + os.sep):
        return "~" + path[len(home):]
    return path


def pwd() -> str:
    return os.getcwd()


class _ChangeDirectory(AbstractContextManager):
    """Working-directory change that can be undone; returned by :func:`cd`."""

    def __init__(self, target: str) -> None:
        try:
            self.previous: Optional[str] = os.getcwd()
        except FileNotFoundError:
            # cwd was removed; the change can still be made, just not undone
            self.previous = None
        self.target = target
        os.chdir(target)
        logger.debug("cd %s (was %s)", target, self.previous)

    def restore(self) -> None:
        if self.previous is None:
            raise FileNotFoundError(
                errno.ENOENT, "previous working directory no longer exists", self.target
            )
        os.chdir(self.previous)
        logger.debug("cd %s (restored)", self.previous)

    def __exit__(self, exc_type, exc, tb) -> None:
        self.restore()


@overload
def cd(path: Optional[PathInput] = None, block: None = None) -> _ChangeDirectory: ...


@overload
def cd(path: Optional[PathInput], block: Callable[[], T]) -> T: ...


def cd(path: Optional[PathInput] = None, block: Optional[Callable[[], Any]] = None) -> Any:
    """Change the working directory to ``path`` (default: home).

    With ``block``, run it in the new directory and change back afterwards,
    even if it raises; its return value is returned. Without ``block`` the
    change persists, and the returned guard may be used in a ``with``
    statement to scope it instead::

        with cd("/tmp"):
            ...
    """
    target = get(path) if path is not None else resolve_home_dir()
    guard = _ChangeDirectory(target)
    if block is None:
        return guard
    with guard:
        return block()


@overload
def basename(path: PathInput, ext: Literal[False] = False) -> str: ...


@overload
def basename(path: PathInput, ext: Literal[True]) -> Tuple[str, str]: ...


def basename(path: PathInput, ext: bool = False) -> Union[str, Tuple[str, str]]:
    """Final segment of ``path``.

    With ``ext=True`` return ``(name, ".ext")`` split on the last dot, or
    ``(name, "")`` when there is no extension::

        basename("/music/a.ogg")            #=> "a.ogg"
        basename("/music/a.ogg", ext=True)  #=> ("a", ".ogg")
    """
    name = _split(get(path))[1]
    if ext:
        return _split_ext(name)
    return name


def extname(path: PathInput) -> Optional[str]:
    """Extension without the dot: ``"a.ogg"`` gives ``"ogg"``, ``"a"`` gives None."""
    _, ext = _split_ext(_split(get(path))[1])
    return ext[1:] or None


def dirname(path: PathInput) -> str:
    return _split(get(path))[0]


def is_absolute(path: PathInput) -> bool:
    path = get(path)
    return os.path.abspath(path) == path


def split(path: PathInput, ext: bool = False, all: bool = False) -> Tuple[str, ...]:
    """Split ``path`` into directory and basename.

    Examples::

        split("/home/a/file")            #=> ("/home/a", "file")
        split("/home/a/file.txt", ext=True)
                                         #=> ("/home/a", "file", ".txt")
        split("/home/a/file", all=True)  #=> ("/", "home", "a", "file")
        split("a/b", all=True)           #=> (".", "a", "b")

    With ``all=True`` parents are peeled off until a directory is its own
    parent, i.e. the root for absolute paths and ``"."`` for relative ones.
    """
    directory, fname = _split(get(path))
    parts: List[str] = list(_split_ext(fname)) if ext else [fname]

    if all:
        while True:
            head, fname = _split(directory)
            if head == directory:
                break
            parts.insert(0, fname)
            directory = head
    parts.insert(0, directory)
    return tuple(parts)


def join(*paths: Optional[PathInput]) -> str:
    """Join path segments, skipping None and empty strings.

    Returns ``""`` when nothing is left to join.
    """
    parts = [get(p) for p in paths if p is not None]
    parts = [p for p in parts if p]
    if not parts:
        return ""
    return os.path.join(*parts)


def parent(path: PathInput, n: int = 1) -> str:
    """Go ``n`` levels up from ``path``."""
    path = get(path)
    for _ in range(n):
        path = _split(path)[0]
    return path


def glob(*patterns: PathInput) -> List[str]:
    """Expand shell-style patterns against the current directory.

    Patterns without wildcards are returned as given, whether or not they
    exist, so later filesystem calls report missing paths themselves.
    """
    found: List[str] = []
    for pattern in patterns:
        pattern = get(pattern)
        if _glob.has_magic(pattern):
            found.extend(sorted(_glob.glob(pattern)))
        else:
            found.append(pattern)
    return found


def rm_r(path: PathInput) -> None:
    """Remove a file, a symlink (not its target) or a whole directory tree."""
    path = get(path)
    if os.path.isdir(path) and not os.path.islink(path):
        shutil.rmtree(path)
    else:
        os.remove(path)


def _as_list(sources: Sources) -> List[Any]:
    if isinstance(sources, (list, tuple)):
        return list(sources)
    return [sources]


def _link(
    create: Callable[[str, str], None],
    sources: Sources,
    dest: PathInput,
    force: bool,
    expand_glob: Optional[bool],
) -> List[str]:
    dest = get(dest)
    if expand_glob is None:
        expand_glob = LINK.glob_sources
    names = [get(s) for s in _as_list(sources)]
    if expand_glob:
        names = glob(*names)

    created: List[str] = []
    for src in names:
        target = os.path.join(dest, _split(src)[1]) if os.path.isdir(dest) else dest
        try:
            if force and os.path.lexists(target):
                logger.info("Removing existing %s before linking", target)
                rm_r(target)
            create(src, target)
        except OSError as exc:
            raise LinkError.from_os_error(exc) from exc
        logger.debug("%s %s -> %s", create.__name__, target, src)
        created.append(target)
    return created


def ln(
    sources: Sources,
    dest: PathInput,
    *,
    force: bool = False,
    expand_glob: Optional[bool] = None,
) -> List[str]:
    """Create hard links.

    ``ln(src, dest)`` links one file; ``ln([src, ...], directory)`` links
    several into a directory. When ``dest`` is an existing directory each
    link is created inside it under the source's basename. Sources may be
    glob patterns (see ``PA_LINK_GLOB``).

    Args:
        sources: path or list of paths/patterns to link
        dest: link path, or directory to link into
        force: remove an existing destination first
        expand_glob: override the configured glob expansion

    Returns:
        The link paths that were created.

    Raises:
        LinkError: if the underlying ``os.link`` fails
    """
    return _link(os.link, sources, dest, force, expand_glob)


def ln_force(sources: Sources, dest: PathInput, *, expand_glob: Optional[bool] = None) -> List[str]:
    """:func:`ln` that overwrites an existing destination."""
    return _link(os.link, sources, dest, True, expand_glob)


def symlink(
    sources: Sources,
    dest: PathInput,
    *,
    force: bool = False,
    expand_glob: Optional[bool] = None,
) -> List[str]:
    """Create symbolic links; same rules as :func:`ln`."""
    return _link(os.symlink, sources, dest, force, expand_glob)


def symlink_force(
    sources: Sources, dest: PathInput, *, expand_glob: Optional[bool] = None
) -> List[str]:
    """:func:`symlink` that overwrites an existing destination."""
    return _link(os.symlink, sources, dest, True, expand_glob)


def readlink(path: PathInput) -> str:
    """Target of the symbolic link at ``path``."""
    path = get(path)
    try:
        return os.readlink(path)
    except OSError as exc:
        if exc.errno == errno.EINVAL:
            raise NotASymlink(exc.errno, "Not a symbolic link", path) from exc
        raise


def is_dangling(path: PathInput) -> Optional[bool]:
    """Is ``path`` a symlink whose target is gone?

    Returns None when ``path`` is not a symlink at all.
    """
    path = get(path)
    if not os.path.islink(path):
        return None
    # exists() follows the link, resolving relative targets against its directory
    return not os.path.exists(path)


def realpath(path: PathInput) -> str:
    """Canonical path with every symlink resolved; every component must exist."""
    return os.path.realpath(get(path), strict=True)


ln_f = ln_force
symln = symlink
symln_f = symlink_force
dangling = is_dangling


__all__ = [
    "absolute",
    "basename",
    "cd",
    "dangling",
    "dirname",
    "expand",
    "extname",
    "get",
    "glob",
    "is_absolute",
    "is_dangling",
    "join",
    "ln",
    "ln_f",
    "ln_force",
    "parent",
    "pwd",
    "readlink",
    "realpath",
    "rm_r",
    "shorten",
    "split",
    "symln",
    "symln_f",
    "symlink",
    "symlink_force",
]
