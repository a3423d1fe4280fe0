"""
Intent engine - mock conversational backend.

Classifies free-form text as a calculation, memory save, memory recall or
general request, executes it and returns an IntentResult. The engine never
raises: internal faults become an error result.

Concurrent process() calls share one memory store without isolation, so their
reads and writes may interleave in any order.
"""

import asyncio
import re
from collections.abc import Callable

from mockagent.core.logging import get_logger
from mockagent.core.types import IntentResult, IntentType
from mockagent.engine.calculator import OPERATIONS, format_number
from mockagent.engine.patterns import (
    CALCULATION_RULES,
    RECALL_RULES,
    SAVE_RULES,
    PatternRule,
)
from mockagent.memory.store import KeyValueMemory, normalize_key

logger = get_logger("engine.intent")

DEFAULT_DELAY_MS = 1000

HELP_MESSAGE = (
    "I'm a simple AI agent. I can help you with:\n"
    "• Math calculations (e.g., 'What is 10 plus 5?')\n"
    "• Remembering things (e.g., 'Remember my cat's name is Fluffy')\n"
    "• Recalling information (e.g., 'What is my cat's name?')"
)

ERROR_MESSAGE = "Sorry, I encountered an error processing your request. Please try again."

Handler = Callable[[PatternRule, re.Match[str]], IntentResult]


class IntentEngine:
    """Pattern-driven responder owning its own memory store."""

    def __init__(
        self,
        memory: KeyValueMemory | None = None,
        delay_ms: int = DEFAULT_DELAY_MS,
    ):
        self._memory = memory if memory is not None else KeyValueMemory()
        self.delay_ms = delay_ms
        self._groups: list[tuple[tuple[PatternRule, ...], Handler]] = [
            (CALCULATION_RULES, self._calculate),
            (SAVE_RULES, self._save),
            (RECALL_RULES, self._recall),
        ]

    async def process(self, text: str) -> IntentResult:
        """Answer text after the simulated network delay."""
        await asyncio.sleep(self.delay_ms / 1000)
        return self.respond(text)

    def respond(self, text: str) -> IntentResult:
        """Classify and execute text immediately."""
        try:
            result = self._classify(text)
        except Exception as e:
            logger.error(f"Failed to process input: {e}", exc_info=True)
            return IntentResult(
                success=False,
                type=IntentType.ERROR,
                message=ERROR_MESSAGE,
                data={"error": str(e)},
            )

        logger.debug(f"Classified as {result.type.value} (success={result.success})")
        return result

    def _classify(self, text: str) -> IntentResult:
        for rules, handler in self._groups:
            for rule in rules:
                match = rule.search(text)
                if match:
                    return handler(rule, match)

        return IntentResult(
            success=True,
            type=IntentType.GENERAL,
            message=HELP_MESSAGE,
            data=None,
        )

    def _calculate(self, rule: PatternRule, match: re.Match[str]) -> IntentResult:
        operation = OPERATIONS[rule.action]
        num1 = float(match.group(1))
        num2 = float(match.group(2))
        result = operation.apply(num1, num2)

        return IntentResult(
            success=True,
            type=IntentType.CALCULATION,
            message=(
                f"The result of {format_number(num1)} {operation.symbol} "
                f"{format_number(num2)} is {format_number(result)}."
            ),
            data={
                "num1": num1,
                "num2": num2,
                "operation": operation.name,
                "result": result,
            },
        )

    def _save(self, rule: PatternRule, match: re.Match[str]) -> IntentResult:
        value = match.group(2).strip()
        key = self._memory.set(match.group(1), value)

        return IntentResult(
            success=True,
            type=IntentType.MEMORY_SAVE,
            message=f"Got it! I'll remember that your {key} is {value}.",
            data={"key": key, "value": value},
        )

    def _recall(self, rule: PatternRule, match: re.Match[str]) -> IntentResult:
        key = normalize_key(match.group(1))
        value = self._memory.get(key)

        # Empty values count as never told
        if value:
            return IntentResult(
                success=True,
                type=IntentType.MEMORY_RECALL,
                message=f"Your {key} is {value}.",
                data={"key": key, "value": value},
            )

        return IntentResult(
            success=False,
            type=IntentType.MEMORY_RECALL,
            message=(
                f"I don't have any information about your {key}. "
                "You haven't told me about it yet."
            ),
            data={"key": key, "found": False},
        )
