# rebrand/rewriter.py
"""
Content rewriter: replaces brand tokens inside text files.

Contract for apply mode: the original bytes are copied to ``<file>.bak``
before the file is overwritten with the transformed content. Plan mode
performs no I/O beyond asking the classifier.
"""

import shutil
from pathlib import Path
from typing import NamedTuple, Optional, Union

from rebrand.engine import SubstitutionEngine
from utils.logging import get_logger

logger = get_logger(__name__)

PathLike = Union[str, Path]

BACKUP_SUFFIX = ".bak"
ENCODING = "utf-8"
# Undecodable bytes survive the round trip untouched
ERRORS = "surrogateescape"

SKIP_BINARY = "skip(bin)"
PLAN = "plan"
REWRITE = "rewrite"


class RewriteResult(NamedTuple):
    """Outcome of handling one file."""
    action: str
    path: Path
    backup: Optional[Path] = None


def backup_path(path: Path) -> Path:
    return path.with_name(path.name + BACKUP_SUFFIX)


class ContentRewriter:
    """
    Runs file contents through the substitution engine.

    Args:
        engine: Engine shared with the renamer for the whole run
        classifier: Object with ``is_text(path)``
        apply: Write changes instead of only reporting them
        normalize_whitespace: Fold whitespace runs after substitution
    """

    def __init__(
        self,
        engine: SubstitutionEngine,
        classifier,
        apply: bool = False,
        normalize_whitespace: bool = True,
    ):
        self.engine = engine
        self.classifier = classifier
        self.apply = apply
        self.normalize_whitespace = normalize_whitespace

    def transform(self, content: bytes) -> bytes:
        text = content.decode(ENCODING, ERRORS)
        text = self.engine.apply(text, normalize_whitespace=self.normalize_whitespace)
        return text.encode(ENCODING, ERRORS)

    def rewrite(self, path: PathLike) -> Optional[RewriteResult]:
        """
        Handle one file.

        Returns:
            RewriteResult, or None when path is not a regular file
        """
        path = Path(path)
        if not path.is_file():
            return None

        if not self.classifier.is_text(path):
            return RewriteResult(SKIP_BINARY, path)

        if not self.apply:
            return RewriteResult(PLAN, path)

        original = path.read_bytes()
        updated = self.transform(original)

        backup = backup_path(path)
        shutil.copy2(path, backup)
        path.write_bytes(updated)

        if updated == original:
            logger.debug(f"No tokens in {path}, rewritten unchanged")
        return RewriteResult(REWRITE, path, backup)
