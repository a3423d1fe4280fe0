"""
Interfaces module - chat clients driving the intent engine.

Components:
- session: message log, self-test script, suggested prompts
- terminal: line-based terminal client

All interfaces implement the Interface protocol for unified handling.
"""
