# rebrand/engine.py
"""
Substitution engine.

Applies an explicit, ordered list of compiled rules to a string:

1. composite    - OS name, optional codename, optional version -> R
2. codename     - any remaining standalone codename -> R
3. collapse     - runs of R separated by spaces, underscores or hyphens -> R

Each rule runs once over the whole string (not to a fixed point), every
match is case-insensitive and word boundaries are Unicode-aware. File
contents additionally get a whitespace pass that folds runs of two or more
whitespace characters into a single space.
"""

import re
from typing import List, NamedTuple

from rebrand.grammar import DEFAULT_GRAMMAR, TokenGrammar

MATCH_FLAGS = re.IGNORECASE | re.UNICODE

WHITESPACE_RUN = re.compile(r"\s{2,}")


class Rule(NamedTuple):
    """A named pattern whose every match is replaced by the same literal text."""

    name: str
    pattern: re.Pattern

    def apply(self, text: str, replacement: str) -> str:
        # A callable keeps backslashes and group references in R literal
        return self.pattern.sub(lambda _match: replacement, text)


def build_rules(replacement: str, grammar: TokenGrammar = DEFAULT_GRAMMAR) -> List[Rule]:
    """
    Compile the ordered rule list for one replacement string.

    Args:
        replacement: Text every match is replaced with
        grammar: Token grammar to render

    Returns:
        Rules in the order they must be applied
    """
    os_names = grammar.os_name_pattern()
    codenames = grammar.codename_pattern()
    versions = grammar.version_pattern()
    escaped = re.escape(replacement)

    composite = (
        rf"\b(?:{os_names})\b"
        rf"(?:\s+(?:{codenames})\b)?"
        rf"(?:\s+(?:{versions})\b)?"
    )
    standalone = rf"\b(?:{codenames})\b"
    collapse = rf"{escaped}(?:[ _-]*{escaped})+"

    return [
        Rule("composite", re.compile(composite, MATCH_FLAGS)),
        Rule("codename", re.compile(standalone, MATCH_FLAGS)),
        Rule("collapse", re.compile(collapse, MATCH_FLAGS)),
    ]


class SubstitutionEngine:
    """
    Rewrites brand tokens in a string with a single replacement.

    The rule set is compiled once in the constructor and reused for every
    name and file processed in a run. Instances hold no other state.
    """

    def __init__(self, replacement: str, grammar: TokenGrammar = DEFAULT_GRAMMAR):
        if not replacement:
            raise ValueError("replacement string must not be empty")
        self.replacement = replacement
        self.grammar = grammar
        self.rules = build_rules(replacement, grammar)

    def apply(self, text: str, normalize_whitespace: bool = False) -> str:
        """
        Run every rule once, in order, over the whole text.

        Args:
            text: Input string (a base name or full file contents)
            normalize_whitespace: Fold whitespace runs into one space;
                used for file contents only

        Returns:
            The transformed string
        """
        for rule in self.rules:
            text = rule.apply(text, self.replacement)
        if normalize_whitespace:
            text = WHITESPACE_RUN.sub(" ", text)
        return text

    def __call__(self, text: str) -> str:
        return self.apply(text)

    def __repr__(self) -> str:
        return f"SubstitutionEngine(replacement={self.replacement!r})"
