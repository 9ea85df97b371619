from __future__ import annotations

import os
from typing import Protocol, Union, runtime_checkable


@runtime_checkable
class HasPath(Protocol):
    """
    Anything that carries a filesystem path in a ``path`` accessor.
    ``PathView`` is one; so are open file objects from some libraries.
    """

    @property
    def path(self) -> str: ...


# Values accepted wherever pa expects a path.
PathInput = Union[str, HasPath, os.PathLike[str]]
