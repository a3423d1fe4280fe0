"""
Engine module - intent classification and execution.

Components:
- patterns: ordered PatternRule tables per intent group
- calculator: arithmetic operations and number rendering
- intent: IntentEngine, the entry point used by chat clients
"""

from mockagent.engine.intent import IntentEngine
from mockagent.engine.patterns import PatternRule

__all__ = ["IntentEngine", "PatternRule"]
