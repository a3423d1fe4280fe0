"""
CLI entry point.

Commands:
- chat: Interactive terminal chat with the mock agent
- selftest: Replay the self-diagnostic conversation
- ask <text>: Process one message, print the response as JSON

Flags:
- --debug: Enable debug logging to file
"""

import asyncio
import json
import logging
import sys

from mockagent.core.config import Settings, get_settings
from mockagent.core.logging import get_logger, setup_logging

USAGE = """Usage: mockagent [--debug] <command>
Commands: chat, selftest, ask <text>
Flags: --debug (enable debug logging to data/mockagent.log)"""


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = list(sys.argv[1:] if argv is None else argv)

    try:
        settings = get_settings()
    except Exception as e:
        get_logger("cli").error(f"Invalid settings: {e}", exc_info=True)
        print(f"Error: {e}")
        return 1

    # Parse --debug flag (enables verbose DEBUG traces)
    debug_mode = "--debug" in args
    if debug_mode:
        args.remove("--debug")

    # Log to file only; the terminal belongs to the chat
    log_level = logging.DEBUG if debug_mode else logging.INFO
    setup_logging(level=log_level, log_file=settings.log_path, console=False)
    logger = get_logger("cli")

    logger.info(f"Logging to {settings.log_path}" + (" (debug mode)" if debug_mode else ""))

    if not args:
        print(USAGE)
        return 1

    command = args[0]

    try:
        return _run_command(command, args[1:], settings)
    except Exception as e:
        logger.error(f"Error running {command}: {e}", exc_info=True)
        print(f"Error: {e}")
        return 1


def _run_command(command: str, args: list[str], settings: Settings) -> int:
    """Dispatch a command to its coroutine."""
    logger = get_logger("cli")

    if command == "chat":
        logger.info("Starting terminal chat")
        return asyncio.run(_chat(settings))

    if command == "selftest":
        logger.info("Starting self-test")
        return asyncio.run(_selftest(settings))

    if command == "ask":
        text = " ".join(args)
        if not text.strip():
            print("Usage: mockagent ask <text>")
            return 1
        return asyncio.run(_ask(settings, text))

    print(f"Unknown command: {command}")
    return 1


async def _chat(settings: Settings) -> int:
    """Interactive terminal chat."""
    from mockagent.interfaces.session import ChatSession
    from mockagent.interfaces.terminal import TerminalInterface

    session = ChatSession.from_settings(settings)
    interface = TerminalInterface(session)
    try:
        await interface.start()
    except KeyboardInterrupt:
        print("\n\nShutting down...")
    finally:
        await interface.stop()

    print("Goodbye!")
    return 0


async def _selftest(settings: Settings) -> int:
    """Run the scripted self-test and print the log as it grows."""
    from mockagent.interfaces.session import ChatSession
    from mockagent.interfaces.terminal import format_message

    session = ChatSession.from_settings(settings)
    for message in session.messages:
        print(format_message(message))
    session.subscribe(lambda message: print(format_message(message)))

    passed = await session.run_self_test()
    return 0 if passed else 1


async def _ask(settings: Settings, text: str) -> int:
    """Process a single message and print the response."""
    from mockagent.engine.intent import IntentEngine

    engine = IntentEngine(delay_ms=settings.response_delay_ms)
    result = await engine.process(text)
    print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
