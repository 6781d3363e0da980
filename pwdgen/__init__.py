"""
Cryptographically secure password and passphrase generator.
"""

__version__ = "0.1.0"

from .config import (
    DEFAULT_OPTIONS,
    PRESETS,
    ConfigError,
    EmptyCharsetAfterExclusionError,
    EmptyCharsetError,
    InvalidLengthError,
    InvalidMinimumError,
    InvalidPassphraseLengthError,
    MinimumsExceedLengthError,
    Mode,
    PasswordOptions,
    UnknownModeError,
    UnknownPresetError,
)
from .entropy import Strength
from .generator import GenerationResult, PasswordGenerator, generate, generate_full
from .guard import check_pwned

__all__ = [
    "DEFAULT_OPTIONS",
    "PRESETS",
    "ConfigError",
    "EmptyCharsetAfterExclusionError",
    "EmptyCharsetError",
    "GenerationResult",
    "InvalidLengthError",
    "InvalidMinimumError",
    "InvalidPassphraseLengthError",
    "MinimumsExceedLengthError",
    "Mode",
    "PasswordGenerator",
    "PasswordOptions",
    "Strength",
    "UnknownModeError",
    "UnknownPresetError",
    "check_pwned",
    "generate",
    "generate_full",
]
