# src/taskboard/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from ..cli.commands import CommandRegistry
from ..cli.commands import registry as command_registry
from ..core.state import AppState
from ..tasks.errors import TaskError

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def handle_line(
    state: AppState,
    line: str,
    *,
    registry: CommandRegistry = command_registry,
    emit: OutputFn | None = None,
) -> str:
    """
    Run one console line and return the text to show.

    Task errors become a one-line message; anything else is logged
    with a traceback and reported as an internal error.
    """
    if not line.startswith("/"):
        # Bare text is a search, like typing into a search box.
        line = f"/search {line}"

    try:
        with state.lock:
            reply = registry.handle(state, line, emit=emit)
    except TaskError as e:
        logger.debug("Command rejected: %s", e)
        return f"Error: {e}"
    except Exception:
        logger.exception("Command handler crashed.")
        return "Internal error while handling a command."

    return reply if reply is not None else ""


def run_console_loop(
    state: AppState,
    *,
    input_fn: InputFn = input,
    output_fn: OutputFn = print,
) -> None:
    logger.info("Console connector started.")
    app_name = str(getattr(state.settings, "app_name", "taskboard"))
    output_fn(f"[{_ts_local()}] [{app_name}] Use /help for commands, /exit to quit.\n")

    def emit(text: str) -> None:
        output_fn(f"[{_ts_local()}] {text}")

    while True:
        try:
            user_input = input_fn(f"{app_name}> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            output_fn("")
            break

        if not user_input:
            continue

        if user_input.lower() in ("/exit", "/quit"):
            logger.info("Console exit command received.")
            break

        reply = handle_line(state, user_input, emit=emit)
        if reply:
            output_fn(f"[{_ts_local()}] {reply}")

    logger.info("Console connector finished.")
