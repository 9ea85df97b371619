"""pa: small conveniences over filesystem paths."""

import logging

from .errors import LinkError, NotASymlink, UnsupportedType
from .ops import (
    absolute,
    basename,
    cd,
    dangling,
    dirname,
    expand,
    extname,
    get,
    glob,
    is_absolute,
    is_dangling,
    join,
    ln,
    ln_f,
    ln_force,
    parent,
    pwd,
    readlink,
    realpath,
    rm_r,
    shorten,
    split,
    symln,
    symln_f,
    symlink,
    symlink_force,
)
from .view import PathView
from ._types import HasPath, PathInput

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "HasPath",
    "LinkError",
    "NotASymlink",
    "PathInput",
    "PathView",
    "UnsupportedType",
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
