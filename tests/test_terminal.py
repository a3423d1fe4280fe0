"""Tests for the terminal client."""

import io
from datetime import datetime

import pytest

from mockagent.engine.intent import IntentEngine
from mockagent.interfaces.base import ChatMessage, Sender
from mockagent.interfaces.session import CLEARED_TEXT, ChatSession
from mockagent.interfaces.terminal import TerminalInterface, format_message


def scripted_input(*lines):
    """Input function replaying lines, then signalling EOF."""
    remaining = iter(lines)

    def _input(prompt):
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    return _input


@pytest.fixture
def session():
    return ChatSession(IntentEngine(delay_ms=0), 0, 0, 0)


def make_interface(session, *lines):
    output = io.StringIO()
    interface = TerminalInterface(session, input_func=scripted_input(*lines), output=output)
    return interface, output


def test_format_message():
    message = ChatMessage(Sender.AGENT, "Hi", timestamp=datetime(2024, 1, 1, 9, 5))
    assert format_message(message) == "[09:05] Agent: Hi"


async def test_chat_round_trip(session):
    interface, output = make_interface(session, "What is 2 plus 3?", "/exit")
    await interface.start()

    text = output.getvalue()
    assert "Hi! I'm your AI assistant" in text
    assert "You: What is 2 plus 3?" in text
    assert "Agent is typing..." in text
    assert "Agent: The result of 2 + 3 is 5." in text


async def test_eof_ends_loop(session):
    interface, output = make_interface(session)
    await interface.start()
    assert not interface._running


async def test_exit_stops_before_remaining_input(session):
    interface, output = make_interface(session, "/exit", "hello there")
    await interface.start()
    assert len(session.messages) == 1


async def test_clear_confirmed(session):
    interface, output = make_interface(session, "hello there", "/clear", "y")
    await interface.start()
    assert [m.text for m in session.messages] == [CLEARED_TEXT]
    assert CLEARED_TEXT in output.getvalue()


async def test_clear_declined(session):
    interface, output = make_interface(session, "hello there", "/clear", "n")
    await interface.start()
    assert len(session.messages) == 3


async def test_suggestion_shortcut(session):
    interface, output = make_interface(session, "/1")
    await interface.start()
    assert "You: What is 10 plus 15?" in output.getvalue()
    assert "is 25." in output.getvalue()


async def test_unknown_suggestion(session):
    interface, output = make_interface(session, "/9")
    await interface.start()
    assert "No suggestion /9" in output.getvalue()
    assert len(session.messages) == 1


async def test_help_lists_suggestions(session):
    interface, output = make_interface(session, "/help")
    await interface.start()
    text = output.getvalue()
    assert "/test" in text
    assert "/4  Help: What can you do?" in text


async def test_self_test_command(session):
    interface, output = make_interface(session, "/test")
    await interface.start()
    text = output.getvalue()
    assert "System: Starting Self-Diagnostic Test..." in text
    assert "Agent: Your status is testing." in text
    assert "System: System Test Complete ✅" in text


async def test_non_ascii_digit_suggestion(session):
    """Digit-like characters that int() rejects are sent as plain text."""
    interface, output = make_interface(session, "/²", "hello there")
    await interface.start()
    assert "You: /²" in output.getvalue()
    assert session.messages[-2].text == "hello there"


async def test_no_typing_indicator_while_loading(session):
    session.is_loading = True
    interface, output = make_interface(session, "hello there")
    await interface.start()
    assert "Agent is typing..." not in output.getvalue()
    assert len(session.messages) == 1
