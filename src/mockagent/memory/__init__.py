"""
Memory module - volatile key/value memory.

The store lives as long as the engine that owns it. Nothing is persisted.
"""

from mockagent.memory.store import KeyValueMemory, normalize_key

__all__ = ["KeyValueMemory", "normalize_key"]
