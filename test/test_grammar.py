# test/test_grammar.py
"""
Tests for the token grammar rendering.
"""

import dataclasses
import re

import pytest

from rebrand.grammar import CODENAMES, DEFAULT_GRAMMAR, VERSION_TOKENS, TokenGrammar


class TestCodenamePattern:
    """Test the rendered codename alternation."""

    def test_multi_word_codenames_come_first(self):
        """Test that two-word codenames precede one-word ones."""
        alternatives = DEFAULT_GRAMMAR.codename_pattern().split("|")
        multi = [i for i, alt in enumerate(alternatives) if "[ -]?" in alt]
        single = [i for i, alt in enumerate(alternatives) if "[ -]?" not in alt]
        assert max(multi) < min(single)

    @pytest.mark.parametrize("spelling", ["Snow Leopard", "Snow-Leopard", "SnowLeopard"])
    def test_separator_variants_match(self, spelling):
        """Test space, hyphen and joined spellings."""
        pattern = re.compile(rf"(?:{DEFAULT_GRAMMAR.codename_pattern()})", re.IGNORECASE)
        assert pattern.fullmatch(spelling)

    def test_every_codename_is_rendered(self):
        """Test that every label matches the pattern."""
        pattern = re.compile(rf"(?:{DEFAULT_GRAMMAR.codename_pattern()})", re.IGNORECASE)
        for label in DEFAULT_GRAMMAR.codename_labels():
            assert pattern.fullmatch(label), label

    def test_labels(self):
        """Test the human-readable codename list."""
        labels = DEFAULT_GRAMMAR.codename_labels()
        assert len(labels) == len(CODENAMES) == 21
        assert "Big Sur" in labels
        assert labels[0] == "Cheetah"
        assert labels[-1] == "Sequoia"


class TestVersionPattern:
    """Test the rendered version alternation."""

    def test_version_range(self):
        """Test the version tokens."""
        assert VERSION_TOKENS[0] == "10.0"
        assert "10.15" in VERSION_TOKENS
        assert "10.16" not in VERSION_TOKENS
        assert VERSION_TOKENS[-5:] == ("11", "12", "13", "14", "15")

    def test_dot_is_literal(self):
        """Test that the version dot is escaped."""
        pattern = re.compile(rf"(?:{DEFAULT_GRAMMAR.version_pattern()})")
        assert pattern.fullmatch("10.6")
        assert not pattern.fullmatch("10x6")

    def test_longer_minor_versions_tried_first(self):
        """Test that 10.15 is not cut to 10.1."""
        pattern = re.compile(rf"(?:{DEFAULT_GRAMMAR.version_pattern()})")
        assert pattern.match("10.15").group(0) == "10.15"


class TestImmutability:
    """Test that grammars are value objects."""

    def test_grammar_is_frozen(self):
        """Test that the default grammar cannot be mutated."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_GRAMMAR.codenames = ()

    def test_custom_grammar(self):
        """Test a grammar with custom codenames."""
        grammar = TokenGrammar(codenames=(("Copland",),))
        assert grammar.codename_pattern() == "Copland"
        assert grammar.os_names == DEFAULT_GRAMMAR.os_names
