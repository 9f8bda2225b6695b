"""
PassGuard Generators
=====================

Random password generation and the injectable randomness sources it uses.
"""

from passguard.generators.password import PasswordGenerator
from passguard.generators.random_source import (
    RandomSource,
    SeededRandomSource,
    SystemRandomSource,
    default_source,
)

__all__ = [
    "PasswordGenerator",
    "RandomSource",
    "SeededRandomSource",
    "SystemRandomSource",
    "default_source",
]
