"""Tests for intent pattern tables."""

import pytest

from mockagent.engine.patterns import CALCULATION_RULES, RECALL_RULES, SAVE_RULES


def _first_match(rules, text):
    for rule in rules:
        match = rule.search(text)
        if match:
            return rule, match
    return None, None


def test_calculation_rule_order():
    """Operators are checked in order, phrase form before symbol form."""
    assert [rule.action for rule in CALCULATION_RULES] == [
        "addition",
        "addition",
        "subtraction",
        "subtraction",
        "multiplication",
        "multiplication",
        "division",
        "division",
    ]


@pytest.mark.parametrize(
    "text,action,operands",
    [
        ("What is 10 plus 5?", "addition", ("10", "5")),
        ("what is 3 add 4", "addition", ("3", "4")),
        ("12+30", "addition", ("12", "30")),
        ("WHAT IS 9 MINUS 2", "subtraction", ("9", "2")),
        ("what is 9 subtract 2", "subtraction", ("9", "2")),
        ("8 - 3", "subtraction", ("8", "3")),
        ("what is 6 times 7", "multiplication", ("6", "7")),
        ("what is 6 multiplied by 7", "multiplication", ("6", "7")),
        ("6*7", "multiplication", ("6", "7")),
        ("what is 1.5 divided by 0.5", "division", ("1.5", "0.5")),
        ("20 / 4", "division", ("20", "4")),
    ],
)
def test_calculation_forms(text, action, operands):
    rule, match = _first_match(CALCULATION_RULES, text)
    assert rule is not None
    assert rule.action == action
    assert match.groups() == operands


def test_save_key_is_non_greedy():
    """Key stops at the first separator, value runs to the end."""
    rule, match = _first_match(SAVE_RULES, "my favorite color is the one that is blue")
    assert match.group(1) == "favorite color"
    assert match.group(2) == "the one that is blue"


def test_save_remember_skips_my():
    rule, match = _first_match(SAVE_RULES, "Remember my Name is Alex")
    assert rule is SAVE_RULES[0]
    assert match.group(1) == "Name"


def test_save_as_form():
    rule, match = _first_match(SAVE_RULES, "save wifi password as hunter2")
    assert rule is SAVE_RULES[2]
    assert match.groups() == ("wifi password", "hunter2")


@pytest.mark.parametrize(
    "text,index",
    [
        ("what is my name?", 0),
        ("what's my name", 1),
        ("whats my name?", 1),
        ("do you remember my birthday?", 2),
        ("tell me my favorite color", 3),
    ],
)
def test_recall_forms(text, index):
    rule, match = _first_match(RECALL_RULES, text)
    assert rule is RECALL_RULES[index]
    assert "?" not in match.group(1)


def test_recall_needs_key_at_end():
    rule, match = _first_match(RECALL_RULES, "what is my name?")
    assert match.group(1) == "name"
