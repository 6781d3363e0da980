"""
Tests for Password Generation
=============================
Tests for PasswordGenerator, generate() and generate_full()
in pwdgen/generator.py and the sampling in pwdgen/mapping.py.
"""

import math
import re
import sys
from pathlib import Path

import pytest

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from pwdgen import (
    GenerationResult,
    InvalidLengthError,
    MinimumsExceedLengthError,
    PasswordGenerator,
    PasswordOptions,
    Strength,
    generate,
    generate_full,
)
from pwdgen.config import SIMILAR_CHARS, SPECIAL
from pwdgen.random_engine import RandomEngine
from pwdgen.wordlist import DEFAULT_WORDLIST

SPECIAL_SET = set(SPECIAL)


def count_in(password, chars):
    return sum(1 for c in password if c in chars)


def zeros(n):
    return b"\x00" * n


class TestRandomMode:
    """Tests for random-mode passwords."""

    def test_default_length(self):
        """Default password is 12 characters."""
        assert len(generate()) == 12

    @pytest.mark.parametrize("length", [8, 10, 33, 128])
    def test_requested_length(self, length):
        """Output length always equals the requested length."""
        assert len(generate(PasswordOptions(length=length))) == length

    def test_default_composition(self):
        """With special characters on, every category appears."""
        for _ in range(50):
            password = generate(PasswordOptions(length=8, is_special=True))
            assert re.search(r"[a-z]", password)
            assert re.search(r"[A-Z]", password)
            assert re.search(r"\d", password)
            assert SPECIAL_SET & set(password)

    def test_min_digit(self):
        """minDigit=10 on 12 characters yields at least ten digits."""
        result = generate_full(PasswordOptions(length=12, min_digit=10, is_special=False))
        assert count_in(result.password, "0123456789") >= 10

    def test_mixed_minimums(self):
        """Every requested minimum is met."""
        for _ in range(20):
            password = generate(PasswordOptions(
                length=16, min_lower=3, min_upper=4, min_digit=2, min_special=5,
            ))
            assert count_in(password, "abcdefghijklmnopqrstuvwxyz") >= 3
            assert count_in(password, "ABCDEFGHIJKLMNOPQRSTUVWXYZ") >= 4
            assert count_in(password, "0123456789") >= 2
            assert count_in(password, SPECIAL_SET) >= 5

    def test_exclude_similar_long(self):
        """No look-alikes even at length 100."""
        for _ in range(10):
            password = generate(PasswordOptions(length=100, exclude_similar=True))
            assert not SIMILAR_CHARS & set(password)

    def test_custom_charset(self):
        """Only characters from the custom set are used."""
        password = generate(PasswordOptions(length=20, custom_charset="abc"))
        assert re.fullmatch(r"[abc]+", password)

    def test_custom_charset_with_minimum(self):
        """Minimums draw from their category even with a custom set."""
        password = generate(PasswordOptions(length=10, custom_charset="ab", min_digit=2))
        assert count_in(password, "0123456789") >= 2
        assert count_in(password, "ab") == 8

    def test_guaranteed_positions_vary(self):
        """Guaranteed characters are shuffled, not left at the front."""
        positions = set()
        for _ in range(200):
            password = generate(PasswordOptions(length=8, custom_charset="ab", min_digit=1))
            positions.add(next(i for i, c in enumerate(password) if c.isdigit()))
        assert len(positions) > 1

    def test_scripted_engine_guarantees_then_fills(self):
        """With all-zero bytes: one of each category, the rest from the alphabet."""
        generator = PasswordGenerator(PasswordOptions(length=12), engine=RandomEngine(zeros))
        password = generator.generate()
        assert sorted(password) == sorted("aA0!" + "a" * 8)

    def test_minimums_exceed(self):
        """Impossible minimums fail before any generation."""
        with pytest.raises(MinimumsExceedLengthError, match="Minimum requirements exceed"):
            generate(PasswordOptions(
                length=8, min_lower=3, min_upper=3, min_digit=3, min_special=3,
            ))

    @pytest.mark.parametrize("length", [7, 129, float("nan")])
    def test_invalid_length(self, length):
        """Lengths outside the valid range fail."""
        with pytest.raises(InvalidLengthError):
            generate(PasswordOptions(length=length))


class TestPassphraseMode:
    """Tests for passphrase-mode secrets."""

    def test_word_count_and_separator(self):
        """Four words joined by spaces."""
        result = generate_full(PasswordOptions(mode="passphrase", length=4, separator=" "))
        assert len(result.password.split(" ")) == 4

    @pytest.mark.parametrize("length", [3, 20])
    def test_bounds(self, length):
        """3 and 20 words are both generated in full."""
        result = generate_full(PasswordOptions(mode="passphrase", length=length))
        assert len(result.password.split("-")) == length

    def test_words_from_default_list(self):
        """Every word comes from the default list."""
        words = generate(PasswordOptions(mode="passphrase")).split("-")
        assert len(words) == 5
        assert all(w in DEFAULT_WORDLIST for w in words)

    def test_custom_separator(self):
        """A custom separator is used between words."""
        result = generate_full(PasswordOptions(mode="passphrase", length=3, separator="_"))
        assert result.password.count("_") == 2

    def test_custom_wordlist(self):
        """Words come only from the caller's list."""
        custom = ["apple", "banana", "cherry"]
        result = generate_full(PasswordOptions(mode="passphrase", length=3, wordlist=custom))
        assert all(w in custom for w in result.password.split("-"))

    def test_scripted_engine(self):
        """All-zero bytes always select the first word."""
        generator = PasswordGenerator(
            PasswordOptions(mode="passphrase", length=3), engine=RandomEngine(zeros)
        )
        first = DEFAULT_WORDLIST[0]
        assert generator.generate() == f"{first}-{first}-{first}"


class TestEntropy:
    """Tests for entropy and strength on results."""

    def test_random_entropy(self):
        """12 characters over 62 symbols."""
        result = generate_full(PasswordOptions(length=12, is_special=False))
        assert result.entropy == pytest.approx(12 * math.log2(62), abs=0.01)
        assert result.strength is Strength.STRONG

    def test_passphrase_entropy(self):
        """5 words over 2052 entries."""
        result = generate_full(PasswordOptions(mode="passphrase", length=5))
        assert result.entropy == pytest.approx(5 * math.log2(2052), abs=0.01)
        assert result.strength is Strength.MEDIUM

    def test_entropy_uses_full_alphabet_despite_minimums(self):
        """Minimums do not change the reported figure."""
        plain = generate_full(PasswordOptions(length=20))
        constrained = generate_full(PasswordOptions(length=20, min_digit=10))
        assert plain.entropy == constrained.entropy

    def test_weak_custom_charset(self):
        """Eight characters over two symbols is weak."""
        result = generate_full(PasswordOptions(length=8, custom_charset="01"))
        assert result.entropy == 8.0
        assert result.strength is Strength.WEAK


class TestPresets:
    """Tests for presets through the public API."""

    def test_wifi(self):
        """16 alphanumeric characters without look-alikes."""
        password = generate(PasswordOptions(preset="wifi"))
        assert len(password) == 16
        assert re.fullmatch(r"[a-zA-Z0-9]+", password)
        assert not SIMILAR_CHARS & set(password)

    def test_ultra(self):
        """64 characters and more than 300 bits."""
        result = generate_full(PasswordOptions(preset="ultra"))
        assert len(result.password) == 64
        assert result.entropy > 300
        assert count_in(result.password, "0123456789") >= 10
        assert count_in(result.password, SPECIAL_SET) >= 10
        assert result.strength is Strength.VERY_STRONG

    def test_legacy(self):
        """8 characters including a special character."""
        password = generate(PasswordOptions(preset="legacy"))
        assert len(password) == 8
        assert SPECIAL_SET & set(password)

    def test_enterprise(self):
        """20 characters covering every category."""
        password = generate_full({"preset": "enterprise"}).password
        assert len(password) == 20
        assert count_in(password, "ABCDEFGHIJKLMNOPQRSTUVWXYZ") >= 2
        assert count_in(password, "0123456789") >= 2
        assert count_in(password, SPECIAL_SET) >= 2
        assert re.search(r"[a-z]", password)

    def test_class_exposes_presets(self):
        """The generator re-exports the preset table."""
        assert "ultra" in PasswordGenerator.PRESETS


class TestApiShapes:
    """Tests for the accepted argument shapes and result type."""

    def test_numeric_shorthand(self):
        """A bare number is the length."""
        assert len(generate(16)) == 16
        assert len(generate_full(20).password) == 20

    def test_mapping_options(self):
        """A mapping of option names works too."""
        assert len(generate({"length": 10})) == 10

    def test_instance_methods(self):
        """A generator can be reused."""
        generator = PasswordGenerator(PasswordOptions(length=10))
        assert len(generator.generate()) == 10
        result = generator.generate_full()
        assert isinstance(result, GenerationResult)
        assert len(result.password) == 10

    def test_result_to_dict(self):
        """Results serialize with the strength name."""
        data = generate_full(PasswordOptions(length=12, is_special=False)).to_dict()
        assert set(data) == {"password", "entropy", "strength"}
        assert data["strength"] == "Strong"

    def test_invalid_options_fail_in_constructor(self):
        """Validation happens before any generation."""
        with pytest.raises(InvalidLengthError):
            PasswordGenerator(PasswordOptions(length=3))


class TestRandomness:
    """Sanity checks on output variety."""

    def test_unique_passwords(self):
        """100 passwords of length 12 are all different."""
        assert len({generate(PasswordOptions(length=12)) for _ in range(100)}) == 100

    def test_unique_passphrases(self):
        """100 five-word passphrases are all different."""
        options = PasswordOptions(mode="passphrase", length=5)
        assert len({generate(options) for _ in range(100)}) == 100
