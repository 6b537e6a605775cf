# rebrand/runner.py
"""
Orchestrates one rebrand run.

Checks preconditions, prints the banner, renames entries deepest first,
optionally rewrites text file contents over the renamed tree, and prints
the completion marker. Everything runs sequentially on the calling thread.
"""

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, TextIO

from rebrand import renamer as renamer_actions
from rebrand import rewriter as rewriter_actions
from rebrand.classifier import get_classifier
from rebrand.engine import SubstitutionEngine
from rebrand.exceptions import InvalidRootError
from rebrand.renamer import Renamer, RenameResult
from rebrand.rewriter import ContentRewriter, RewriteResult
from rebrand.settings import RebrandSettings
from rebrand.walker import iter_regular_files, iter_rename_order
from utils.logging import get_logger

logger = get_logger(__name__)


@dataclass
class RunSummary:
    """Counters for the entries a run touched."""
    renamed: int = 0
    planned: int = 0
    skipped: int = 0
    rewritten: int = 0
    planned_rewrites: int = 0
    skipped_binary: int = 0


class RebrandingRun:
    """
    One pass over a directory tree.

    Args:
        settings: Validated run options
        out: Stream receiving the report lines (stdout by default)
    """

    def __init__(self, settings: RebrandSettings, out: Optional[TextIO] = None):
        self.settings = settings
        self.out = out if out is not None else sys.stdout
        self.root = Path(settings.root)
        self.summary = RunSummary()
        self.engine = SubstitutionEngine(settings.target)
        self.renamer = Renamer(self.engine, apply=settings.apply)
        self.rewriter: Optional[ContentRewriter] = None

    def _print(self, line: str) -> None:
        print(line, file=self.out)

    def check_preconditions(self) -> None:
        """
        Fail before any work is done.

        Raises:
            ClassifierUnavailableError: a required classification tool is missing
            InvalidRootError: root is not a directory
        """
        if self.settings.rewrite_contents:
            classifier = get_classifier(self.settings.classifier)
            self.rewriter = ContentRewriter(
                self.engine,
                classifier,
                apply=self.settings.apply,
                normalize_whitespace=self.settings.normalize_whitespace,
            )
        if not self.root.is_dir():
            raise InvalidRootError(f"--root '{self.settings.root}' is not a directory")

    def print_banner(self) -> None:
        self._print("== Samsoft rebrand ==")
        self._print(f"root:   {self.settings.root}")
        self._print(f"mode:   {self.settings.mode_label}")
        self._print(f"target: {self.settings.target}")
        if self.settings.rewrite_contents:
            self._print("contents: ENABLED (with .bak backups)")
        else:
            self._print("contents: disabled")

    def report_rename(self, result: RenameResult) -> None:
        if result.action == renamer_actions.SKIP:
            self.summary.skipped += 1
            if self.settings.verbose:
                self._print(f"skip    {result.source}")
        elif result.action == renamer_actions.PLAN:
            self.summary.planned += 1
            self._print(f"plan    {result.source} -> {result.destination}")
        else:
            self.summary.renamed += 1
            self._print(f"rename  {result.source} -> {result.destination}")

    def report_rewrite(self, result: RewriteResult) -> None:
        if result.action == rewriter_actions.SKIP_BINARY:
            self.summary.skipped_binary += 1
            if self.settings.verbose:
                self._print(f"skip(bin) {result.path}")
        elif result.action == rewriter_actions.PLAN:
            self.summary.planned_rewrites += 1
            self._print(f"plan    rewrite {result.path}")
        else:
            self.summary.rewritten += 1
            self._print(f"rewrite {result.path} (backup: {result.backup})")

    def rename_tree(self) -> None:
        for path in iter_rename_order(self.root):
            self.report_rename(self.renamer.rename(path))

    def rewrite_tree(self) -> None:
        for path in iter_regular_files(self.root):
            result = self.rewriter.rewrite(path)
            if result is not None:
                self.report_rewrite(result)

    def run(self) -> RunSummary:
        """
        Execute the run. Per-entry OSErrors propagate and stop it; work
        already done is left in place.
        """
        self.check_preconditions()
        self.print_banner()

        self.rename_tree()
        if self.rewriter is not None:
            self.rewrite_tree()

        self._print("== DONE ==")
        logger.info(
            f"Run finished: renamed={self.summary.renamed} planned={self.summary.planned} "
            f"skipped={self.summary.skipped} rewritten={self.summary.rewritten} "
            f"planned_rewrites={self.summary.planned_rewrites} "
            f"skipped_binary={self.summary.skipped_binary}"
        )
        return self.summary
