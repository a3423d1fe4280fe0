"""
Shared type definitions.

The engine's response contract and its intent taxonomy.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class IntentType(Enum):
    CALCULATION = "calculation"
    MEMORY_SAVE = "memory_save"
    MEMORY_RECALL = "memory_recall"
    GENERAL = "general"
    ERROR = "error"


@dataclass(frozen=True)
class IntentResult:
    """Structured response produced for every processed text."""

    success: bool
    type: IntentType
    message: str
    data: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to the wire shape consumed by chat clients."""
        return {
            "success": self.success,
            "type": self.type.value,
            "message": self.message,
            "data": dict(self.data) if self.data is not None else None,
        }
