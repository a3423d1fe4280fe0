"""Chat session - message log and scripted self-test around an engine."""

import asyncio
from collections.abc import Callable
from dataclasses import dataclass

from mockagent.core.config import Settings
from mockagent.core.logging import get_logger
from mockagent.engine.intent import IntentEngine
from mockagent.interfaces.base import ChatMessage, Sender

logger = get_logger("interfaces.session")

WELCOME_TEXT = (
    "👋 Hi! I'm your AI assistant. I can help you with math calculations "
    "and remember things for you. Try asking me something!"
)
CLEARED_TEXT = "👋 Chat cleared! How can I help you now?"
AGENT_ERROR_TEXT = "❌ Oops! Something went wrong. Please try again."
SELF_TEST_ERROR_TEXT = "❌ Self-Test Failed due to an error."


@dataclass(frozen=True)
class SuggestedPrompt:
    label: str
    text: str


SUGGESTED_PROMPTS: tuple[SuggestedPrompt, ...] = (
    SuggestedPrompt("Calculate 10 + 15", "What is 10 plus 15?"),
    SuggestedPrompt("Save Info", "Remember my name is Alex"),
    SuggestedPrompt("Recall Info", "What is my name?"),
    SuggestedPrompt("Help", "What can you do?"),
)

# (sender, text) steps replayed by run_self_test
SELF_TEST_SCRIPT: tuple[tuple[Sender, str], ...] = (
    (Sender.SYSTEM, "Starting Self-Diagnostic Test..."),
    (Sender.USER, "What is 10 plus 20?"),
    (Sender.USER, "Remember my status is testing"),
    (Sender.USER, "What is my status?"),
    (Sender.SYSTEM, "System Test Complete ✅"),
)

Listener = Callable[[ChatMessage], None]


class ChatSession:
    """Message log fed by user input and engine responses.

    Only one request is in flight at a time: input arriving while the
    engine is busy is ignored.
    """

    def __init__(
        self,
        engine: IntentEngine,
        system_delay_ms: int = 800,
        typing_delay_ms: int = 500,
        reading_delay_ms: int = 1000,
    ):
        self.engine = engine
        self.system_delay_ms = system_delay_ms
        self.typing_delay_ms = typing_delay_ms
        self.reading_delay_ms = reading_delay_ms
        self.messages: list[ChatMessage] = [ChatMessage(Sender.AGENT, WELCOME_TEXT)]
        self.is_loading = False
        self._listeners: list[Listener] = []

    @classmethod
    def from_settings(cls, settings: Settings, engine: IntentEngine | None = None) -> "ChatSession":
        """Build a session (and engine, if not given) paced by settings."""
        if engine is None:
            engine = IntentEngine(delay_ms=settings.response_delay_ms)
        return cls(
            engine,
            system_delay_ms=settings.selftest_system_delay_ms,
            typing_delay_ms=settings.selftest_typing_delay_ms,
            reading_delay_ms=settings.selftest_reading_delay_ms,
        )

    def subscribe(self, listener: Listener) -> None:
        """Call listener for every message appended from now on."""
        self._listeners.append(listener)

    def _notify(self, message: ChatMessage) -> None:
        for listener in self._listeners:
            listener(message)

    def _append(self, message: ChatMessage) -> ChatMessage:
        self.messages.append(message)
        self._notify(message)
        return message

    async def _ask_engine(self, text: str) -> ChatMessage:
        result = await self.engine.process(text)
        return self._append(ChatMessage(Sender.AGENT, result.message, result=result))

    async def send(self, text: str) -> ChatMessage | None:
        """Post user text and append the agent's answer.

        Returns the agent message, or None if the input was ignored.
        """
        text = text.strip()
        if not text or self.is_loading:
            return None

        self._append(ChatMessage(Sender.USER, text))
        self.is_loading = True
        try:
            return await self._ask_engine(text)
        except Exception as e:
            logger.error(f"Error getting agent response: {e}", exc_info=True)
            return self._append(ChatMessage(Sender.AGENT, AGENT_ERROR_TEXT, is_error=True))
        finally:
            self.is_loading = False

    async def run_self_test(self) -> bool:
        """Replay the self-diagnostic conversation.

        Returns True when the script ran to completion.
        """
        if self.is_loading:
            return False

        self.is_loading = True
        logger.info("Running self-diagnostic test")
        try:
            for sender, text in SELF_TEST_SCRIPT:
                self._append(ChatMessage(sender, text))
                if sender is Sender.SYSTEM:
                    await asyncio.sleep(self.system_delay_ms / 1000)
                    continue

                await asyncio.sleep(self.typing_delay_ms / 1000)
                await self._ask_engine(text)
                await asyncio.sleep(self.reading_delay_ms / 1000)
        except Exception as e:
            logger.error(f"Self-test failed: {e}", exc_info=True)
            self._append(ChatMessage(Sender.SYSTEM, SELF_TEST_ERROR_TEXT, is_error=True))
            return False
        finally:
            self.is_loading = False

        logger.info("Self-diagnostic test complete")
        return True

    def clear(self) -> None:
        """Reset the log to a single greeting. Engine memory is kept."""
        greeting = ChatMessage(Sender.AGENT, CLEARED_TEXT)
        self.messages = [greeting]
        self._notify(greeting)
        logger.debug("Chat log cleared")
