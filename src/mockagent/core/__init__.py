"""
Core module - configuration, logging, shared types.

Components:
- config: Settings management via pydantic-settings
- types: Shared data structures (IntentResult, IntentType)
- logging: Structured logging setup
"""

from mockagent.core.config import Settings
from mockagent.core.types import IntentResult, IntentType

__all__ = ["Settings", "IntentResult", "IntentType"]
