# rebrand/grammar.py
"""
Token grammar for the rebrand substitution engine.

Static data only: the spelling variants of the product name, the enumerated
release codenames and the version numbers that may trail an OS-name match.
The engine renders these into regular-expression alternations once per run.
"""

import re
from dataclasses import dataclass
from typing import Tuple

DEFAULT_TARGET = "Samsoft OS X Beta 2.0 MARIO OS"

# Order matters: the first alternative that matches at a position wins.
OS_NAME_VARIANTS: Tuple[str, ...] = (
    r"Mac\s*OS\s*X",
    r"Mac\s*OSX",
    r"MacOS\s*X",
    r"OS\s*X",
    r"mac\s*OS",
)

CODENAMES: Tuple[Tuple[str, ...], ...] = (
    ("Cheetah",),
    ("Puma",),
    ("Jaguar",),
    ("Panther",),
    ("Tiger",),
    ("Leopard",),
    ("Snow", "Leopard"),
    ("Lion",),
    ("Mountain", "Lion"),
    ("Mavericks",),
    ("Yosemite",),
    ("El", "Capitan"),
    ("Sierra",),
    ("High", "Sierra"),
    ("Mojave",),
    ("Catalina",),
    ("Big", "Sur"),
    ("Monterey",),
    ("Ventura",),
    ("Sonoma",),
    ("Sequoia",),
)

# 10.0 through 10.15, then bare majors 11 through 15
VERSION_TOKENS: Tuple[str, ...] = tuple(
    [f"10.{minor}" for minor in range(16)] + [str(major) for major in range(11, 16)]
)

# Between the words of a two-word codename: space, hyphen or nothing
CODENAME_WORD_SEPARATOR = r"[ -]?"


@dataclass(frozen=True)
class TokenGrammar:
    """Immutable set of phrases the engine recognizes."""

    os_names: Tuple[str, ...] = OS_NAME_VARIANTS
    codenames: Tuple[Tuple[str, ...], ...] = CODENAMES
    versions: Tuple[str, ...] = VERSION_TOKENS

    def os_name_pattern(self) -> str:
        return "|".join(self.os_names)

    def codename_pattern(self) -> str:
        """
        Render the codename alternation.

        Multi-word names come first so "Snow Leopard" is never cut down to
        "Leopard". Each word is escaped; the separator is not.
        """
        ordered = sorted(self.codenames, key=len, reverse=True)
        return "|".join(
            CODENAME_WORD_SEPARATOR.join(re.escape(word) for word in words)
            for words in ordered
        )

    def version_pattern(self) -> str:
        # Longest first so 10.15 wins over 10.1
        ordered = sorted(self.versions, key=len, reverse=True)
        return "|".join(re.escape(version) for version in ordered)

    def codename_labels(self) -> Tuple[str, ...]:
        return tuple(" ".join(words) for words in self.codenames)


DEFAULT_GRAMMAR = TokenGrammar()
