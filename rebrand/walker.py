# rebrand/walker.py
"""
Tree enumeration for the rename and content passes.

Renaming needs a post-order walk: every entry inside a directory is
yielded before the directory itself, so each rename addresses a path whose
ancestors still carry their original names. The content pass only needs
the regular files of the tree as it stands after renaming.
"""

import os
from pathlib import Path
from typing import Iterator, List, Union

PathLike = Union[str, Path]


def iter_rename_order(root: PathLike) -> Iterator[Path]:
    """
    Yield files and directories under root, deepest first.

    The root itself is excluded. Siblings come in name order. Symlinks to
    directories are yielded as entries but never descended into.
    """
    yield from _post_order(Path(root))


def _post_order(directory: Path) -> Iterator[Path]:
    # Listing is taken up front; renames of yielded children don't disturb it
    with os.scandir(directory) as it:
        entries = sorted(it, key=lambda entry: entry.name)

    for entry in entries:
        path = Path(entry.path)
        if entry.is_dir(follow_symlinks=False):
            yield from _post_order(path)
        yield path


def collect_regular_files(root: PathLike) -> List[Path]:
    """
    Collect every regular file under root, sorted.

    Symlinks are skipped, as are directories reached through them.
    """
    files: List[Path] = []
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames.sort()
        for file_name in filenames:
            path = Path(dirpath) / file_name
            if path.is_file() and not path.is_symlink():
                files.append(path)
    return sorted(files)


def iter_regular_files(root: PathLike) -> Iterator[Path]:
    # Materialized first so backups written during the pass are not revisited
    return iter(collect_regular_files(root))
