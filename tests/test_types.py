"""Tests for core types."""

from dataclasses import FrozenInstanceError

import pytest

from mockagent.core.types import IntentResult, IntentType


def test_intent_result_to_dict():
    """IntentResult converts to the client wire shape."""
    result = IntentResult(
        success=True,
        type=IntentType.MEMORY_SAVE,
        message="Got it!",
        data={"key": "name", "value": "Alex"},
    )
    assert result.to_dict() == {
        "success": True,
        "type": "memory_save",
        "message": "Got it!",
        "data": {"key": "name", "value": "Alex"},
    }


def test_intent_result_without_data():
    """Missing data serializes as null."""
    result = IntentResult(success=True, type=IntentType.GENERAL, message="Hi")
    assert result.to_dict()["data"] is None


def test_intent_result_is_immutable():
    result = IntentResult(success=True, type=IntentType.GENERAL, message="Hi")
    with pytest.raises(FrozenInstanceError):
        result.success = False


def test_to_dict_copies_data():
    """Mutating the wire dict leaves the result untouched."""
    result = IntentResult(
        success=False,
        type=IntentType.MEMORY_RECALL,
        message="?",
        data={"key": "age", "found": False},
    )
    wire = result.to_dict()
    wire["data"]["found"] = True
    assert result.data == {"key": "age", "found": False}
