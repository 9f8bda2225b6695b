"""
PassGuard Analyzers
====================

Password analysis components: the repeated-pattern detector and the
strength classifier built on top of it.
"""

from passguard.analyzers.patterns import PatternDetector
from passguard.analyzers.strength import StrengthClassifier

__all__ = [
    "PatternDetector",
    "StrengthClassifier",
]
