"""
PassGuard Shared Module
=======================

Common configuration, logging, console and result models used by every
PassGuard component.
"""

from shared.config import GuardConfig, get_config

__all__ = ["GuardConfig", "get_config"]
