# rebrand/classifier.py
"""
Text/binary classification for the content rewrite pass.

The rewriter treats a classifier as an opaque oracle: ``is_text(path)``
answers whether a file looks like text. Anything the classifier cannot
decide is reported as not text, so the file is skipped rather than
rewritten.
"""

import re
import shutil
import subprocess
from pathlib import Path
from typing import Optional, Union

from rebrand.exceptions import ClassifierUnavailableError
from utils.logging import get_logger

logger = get_logger(__name__)

FILE_COMMAND = "file"
TEXT_MIME_PATTERN = re.compile(r"text|json|xml|yaml|javascript|x-empty", re.IGNORECASE)
SNIFF_BYTES = 8192

CLASSIFIER_MODES = ("auto", "mime", "heuristic")

PathLike = Union[str, Path]


class MimeClassifier:
    """Ask ``file -b --mime`` and accept textual MIME types."""

    def __init__(self, command: str):
        self.command = command

    def is_text(self, path: PathLike) -> bool:
        try:
            result = subprocess.run(
                [self.command, "-b", "--mime", str(path)],
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as e:
            logger.debug(f"Could not run {self.command} on {path}: {e}")
            return False
        if result.returncode != 0:
            logger.debug(f"{self.command} failed on {path}: {result.stderr.strip()}")
            return False
        return bool(TEXT_MIME_PATTERN.search(result.stdout))

    def __repr__(self) -> str:
        return f"MimeClassifier(command={self.command!r})"


class HeuristicClassifier:
    """
    Byte sniffing fallback used when ``file`` is not available.

    Empty files and files with a NUL byte in the first block are not text.
    """

    def __init__(self, sniff_bytes: int = SNIFF_BYTES):
        self.sniff_bytes = sniff_bytes

    def is_text(self, path: PathLike) -> bool:
        try:
            with open(path, "rb") as f:
                chunk = f.read(self.sniff_bytes)
        except OSError as e:
            logger.debug(f"Could not read {path}: {e}")
            return False
        if not chunk:
            return False
        return b"\x00" not in chunk

    def __repr__(self) -> str:
        return "HeuristicClassifier()"


def find_file_command() -> Optional[str]:
    return shutil.which(FILE_COMMAND)


def get_classifier(mode: str = "auto"):
    """
    Build the classifier for a run.

    Args:
        mode: 'auto' uses ``file`` when present and sniffs bytes otherwise,
            'mime' requires ``file``, 'heuristic' never runs it

    Returns:
        An object with an ``is_text(path)`` method

    Raises:
        ClassifierUnavailableError: mode is 'mime' and ``file`` is missing
        ValueError: unknown mode
    """
    if mode not in CLASSIFIER_MODES:
        raise ValueError(f"unknown classifier mode: {mode!r}")

    if mode == "heuristic":
        return HeuristicClassifier()

    command = find_file_command()
    if command:
        return MimeClassifier(command)
    if mode == "mime":
        raise ClassifierUnavailableError(f"'{FILE_COMMAND}' is required on PATH for --classifier mime")

    logger.info(f"'{FILE_COMMAND}' not found on PATH, falling back to byte sniffing")
    return HeuristicClassifier()
