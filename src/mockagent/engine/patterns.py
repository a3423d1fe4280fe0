"""
Intent pattern tables.

Each group is scanned in order and the first matching rule wins. Groups are
tried calculation, save, recall; anything else falls back to help text.
"""

import re
from dataclasses import dataclass

NUMBER = r"(\d+(?:\.\d+)?)"


@dataclass(frozen=True)
class PatternRule:
    """Compiled matcher paired with the action it triggers."""

    pattern: re.Pattern[str]
    action: str

    def search(self, text: str) -> re.Match[str] | None:
        return self.pattern.search(text)


def _rule(regex: str, action: str) -> PatternRule:
    return PatternRule(pattern=re.compile(regex, re.IGNORECASE), action=action)


# Phrase form before symbol form, per operator
CALCULATION_RULES: tuple[PatternRule, ...] = (
    _rule(rf"what\s+is\s+{NUMBER}\s+(?:plus|add)\s+{NUMBER}", "addition"),
    _rule(rf"{NUMBER}\s*\+\s*{NUMBER}", "addition"),
    _rule(rf"what\s+is\s+{NUMBER}\s+(?:minus|subtract)\s+{NUMBER}", "subtraction"),
    _rule(rf"{NUMBER}\s*-\s*{NUMBER}", "subtraction"),
    _rule(rf"what\s+is\s+{NUMBER}\s+(?:times|multiplied\s+by)\s+{NUMBER}", "multiplication"),
    _rule(rf"{NUMBER}\s*\*\s*{NUMBER}", "multiplication"),
    _rule(rf"what\s+is\s+{NUMBER}\s+divided\s+by\s+{NUMBER}", "division"),
    _rule(rf"{NUMBER}\s*/\s*{NUMBER}", "division"),
)

# "my X is Y" captures ordinary sentences too ("my cat is cute")
SAVE_RULES: tuple[PatternRule, ...] = (
    _rule(r"remember\s+(?:my\s+)?(.+?)\s+is\s+(.+)", "memory_save"),
    _rule(r"my\s+(.+?)\s+is\s+(.+)", "memory_save"),
    _rule(r"save\s+(.+?)\s+as\s+(.+)", "memory_save"),
)

RECALL_RULES: tuple[PatternRule, ...] = (
    _rule(r"what\s+is\s+my\s+(.+?)\??\Z", "memory_recall"),
    _rule(r"what'?s\s+my\s+(.+?)\??\Z", "memory_recall"),
    _rule(r"do\s+you\s+remember\s+my\s+(.+?)\??\Z", "memory_recall"),
    _rule(r"tell\s+me\s+my\s+(.+?)\??\Z", "memory_recall"),
)
