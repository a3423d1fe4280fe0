"""
Mockagent - demo chat client with a mock intent backend.

Package structure:
- core: config, logging, common types
- engine: intent pattern tables and the intent engine
- memory: volatile key/value memory owned by the engine
- interfaces: chat session and terminal client
"""

__version__ = "0.1.0"
