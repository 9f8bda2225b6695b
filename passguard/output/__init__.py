"""
PassGuard Output Module
========================

Console display and report generation for PassGuard check results.
"""

from passguard.output.console import GuardConsoleOutput
from passguard.output.report import GuardReportGenerator

__all__ = [
    "GuardConsoleOutput",
    "GuardReportGenerator",
]
