"""
Interface protocol and common types.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from uuid import uuid4

from mockagent.core.types import IntentResult


class Sender(Enum):
    USER = "user"
    AGENT = "agent"
    SYSTEM = "system"


@dataclass
class ChatMessage:
    """Entry of the chat log."""

    sender: Sender
    text: str
    timestamp: datetime = field(default_factory=datetime.now)
    result: IntentResult | None = None
    is_error: bool = False
    id: str = field(default_factory=lambda: str(uuid4()))


class Interface(ABC):
    """Abstract chat client."""

    @abstractmethod
    async def receive(self) -> str | None:
        """Receive next line of user input, None when input is closed."""
        ...

    @abstractmethod
    async def send(self, message: ChatMessage) -> None:
        """Display a chat log entry."""
        ...

    @abstractmethod
    async def start(self) -> None:
        """Start interface loop."""
        ...

    @abstractmethod
    async def stop(self) -> None:
        """Stop interface loop."""
        ...
