"""Terminal chat client - single-user line interface over a ChatSession."""

import sys
from collections.abc import Callable
from typing import TextIO

from mockagent.core.logging import get_logger
from mockagent.interfaces.base import ChatMessage, Interface, Sender
from mockagent.interfaces.session import SUGGESTED_PROMPTS, ChatSession

logger = get_logger("interfaces.terminal")

SENDER_LABELS = {
    Sender.USER: "You",
    Sender.AGENT: "Agent",
    Sender.SYSTEM: "System",
}

HELP_TEXT = "Commands: /test, /clear, /help, /exit"


def format_message(message: ChatMessage) -> str:
    """Render a log entry as "[HH:MM] Sender: text"."""
    label = SENDER_LABELS[message.sender]
    return f"[{message.timestamp:%H:%M}] {label}: {message.text}"


class TerminalInterface(Interface):
    """Reads lines from input, prints the chat log as it grows."""

    def __init__(
        self,
        session: ChatSession,
        input_func: Callable[[str], str] = input,
        output: TextIO | None = None,
    ):
        self.session = session
        self._input = input_func
        self._output = output or sys.stdout
        self._running = False
        session.subscribe(self._write_message)

    def _print(self, text: str = "") -> None:
        print(text, file=self._output)

    def _write_message(self, message: ChatMessage) -> None:
        self._print(format_message(message))

    async def receive(self) -> str | None:
        try:
            return self._input("> ")
        except EOFError:
            return None

    async def send(self, message: ChatMessage) -> None:
        self._write_message(message)

    async def start(self) -> None:
        """Print the current log and serve input until /exit or EOF."""
        self._running = True
        self._print("AI Agent Chat")
        self._print(HELP_TEXT)
        self._print("-" * 40)
        for message in self.session.messages:
            await self.send(message)

        while self._running:
            line = await self.receive()
            if line is None:
                break
            await self.handle_line(line)

        await self.stop()

    async def stop(self) -> None:
        self._running = False

    async def handle_line(self, line: str) -> None:
        """Dispatch a slash command or send the line to the agent."""
        line = line.strip()
        if not line:
            return

        command = line.lower()
        if command in ("/exit", "exit", "quit", "q"):
            await self.stop()
            return
        if command == "/help":
            self._print(HELP_TEXT)
            for number, prompt in enumerate(SUGGESTED_PROMPTS, start=1):
                self._print(f"  /{number}  {prompt.label}: {prompt.text}")
            return
        if command == "/clear":
            self._confirm_clear()
            return
        if command == "/test":
            await self.session.run_self_test()
            return
        if command.startswith("/") and command[1:].isdecimal():
            index = int(command[1:]) - 1
            if not 0 <= index < len(SUGGESTED_PROMPTS):
                self._print(f"No suggestion {command}. Type /help to list them.")
                return
            line = SUGGESTED_PROMPTS[index].text

        if self.session.is_loading:
            return
        self._print("Agent is typing...")
        await self.session.send(line)

    def _confirm_clear(self) -> None:
        try:
            answer = self._input("Are you sure you want to clear the chat history? [y/N] ")
        except EOFError:
            return
        if answer.strip().lower() in ("y", "yes"):
            self.session.clear()
