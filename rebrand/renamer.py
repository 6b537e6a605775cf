# rebrand/renamer.py
"""
Renamer: rewrites the base name of a path and moves it within its parent.

A destination that already exists is never overwritten; the new name gets
a ``_1``, ``_2``, ... suffix until it is free.
"""

import os
from pathlib import Path
from typing import NamedTuple, Optional, Union

from rebrand.engine import SubstitutionEngine
from utils.logging import get_logger

logger = get_logger(__name__)

PathLike = Union[str, Path]

SKIP = "skip"
PLAN = "plan"
RENAME = "rename"


class RenameResult(NamedTuple):
    """Outcome of handling one path."""
    action: str
    source: Path
    destination: Optional[Path] = None


def check_base_name(name: str) -> str:
    """
    Reject names that would move an entry out of its parent directory.

    Raises:
        ValueError: name is empty, is ``.`` or ``..``, or contains a path
            separator or NUL
    """
    if name in ("", ".", ".."):
        raise ValueError(f"invalid base name: {name!r}")
    for sep in (os.sep, os.altsep, "\0"):
        if sep and sep in name:
            raise ValueError(f"base name must not contain {sep!r}: {name!r}")
    return name


def free_destination(parent: Path, new_name: str) -> Path:
    """
    Pick the first non-existing path among ``new_name``, ``new_name_1``, ...

    Args:
        parent: Directory the entry stays in
        new_name: Desired base name

    Returns:
        Path inside parent that does not exist yet
    """
    dest = parent / new_name
    n = 0
    while os.path.lexists(dest):
        n += 1
        dest = parent / f"{new_name}_{n}"
    return dest


class Renamer:
    """
    Applies the substitution engine to base names.

    In plan mode nothing on disk changes; in apply mode the entry is moved
    with os.rename and any OSError propagates to the caller.
    """

    def __init__(self, engine: SubstitutionEngine, apply: bool = False):
        self.engine = engine
        self.apply = apply

    def new_name(self, name: str) -> str:
        # Names never get the whitespace pass
        return self.engine.apply(name)

    def compute_destination(self, path: PathLike) -> Optional[Path]:
        """Return where path should move to, or None when its name is unchanged."""
        path = Path(path)
        new_name = self.new_name(path.name)
        if new_name == path.name:
            return None
        check_base_name(new_name)
        return free_destination(path.parent, new_name)

    def rename(self, path: PathLike) -> RenameResult:
        path = Path(path)
        dest = self.compute_destination(path)
        if dest is None:
            return RenameResult(SKIP, path)

        if not self.apply:
            return RenameResult(PLAN, path, dest)

        logger.debug(f"Renaming {path} -> {dest}")
        os.rename(path, dest)
        return RenameResult(RENAME, path, dest)
