"""
Samsoft rebrand: replace Mac OS X / macOS brand tokens in a directory tree.
"""

from rebrand.engine import SubstitutionEngine
from rebrand.grammar import DEFAULT_GRAMMAR, DEFAULT_TARGET, TokenGrammar
from rebrand.runner import RebrandingRun, RunSummary
from rebrand.settings import RebrandSettings

__all__ = [
    "DEFAULT_GRAMMAR",
    "DEFAULT_TARGET",
    "RebrandSettings",
    "RebrandingRun",
    "RunSummary",
    "SubstitutionEngine",
    "TokenGrammar",
]
