"""CLI entry point for termline-demo. Uses Click for argument parsing."""

from __future__ import annotations

import logging
import time

import click

from termline.editor import LineEditor
from termline.errors import TerminalUnavailableError
from termline.events import InputCompletedEvent, KeyPressedEvent
from termline.suggest import CandidateSuggestionProvider
from termline.terminal import ProcessTerminal

logger = logging.getLogger(__name__)

DEFAULT_WORDS = (
    "help",
    "history",
    "status",
    "start",
    "stop",
    "restart",
    "config show",
    "config set",
    "exit",
    "quit",
)

EXIT_COMMANDS = frozenset({"exit", "quit"})


def _echo_above(terminal: ProcessTerminal, text: str) -> None:
    """Print *text* on the bottom row and scroll it up above the live line."""
    with terminal.lock:
        terminal.erase_last_line()
        terminal.write(text + "\r\n")


@click.command()
@click.option("--max-history", default=100, show_default=True, type=click.IntRange(min=0),
              help="Number of submitted lines to remember")
@click.option("--word", "words", multiple=True,
              help="Completion candidate (repeatable; replaces the built-in list)")
@click.option("--log-level", default="warning", show_default=True,
              type=click.Choice(["debug", "info", "warning", "error"]))
@click.option("--tick", default=0.01, show_default=True, type=click.FloatRange(min=0),
              help="Seconds to sleep between editor updates")
def main(max_history, words, log_level, tick):
    """Interactive line editor demo: type, Tab to complete, Up/Down for history.

    Enter "exit" or "quit", or press F10, to leave.
    """
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    terminal = ProcessTerminal()
    provider = CandidateSuggestionProvider(words or DEFAULT_WORDS)
    editor = LineEditor(provider, max_history, terminal)
    running = True

    def on_completed(event: InputCompletedEvent) -> None:
        nonlocal running
        if event.text.strip() in EXIT_COMMANDS:
            running = False
            return
        _echo_above(terminal, f"> {event.text}")

    def on_function_key(event: KeyPressedEvent) -> None:
        nonlocal running
        if event.key == "f10":
            running = False
            return
        _echo_above(terminal, f"[{event.key}]")

    editor.on_input_completed.subscribe(on_completed)
    editor.on_function_key.subscribe(on_function_key)

    try:
        with terminal:
            logger.info("Editor started with history size %d", max_history)
            while running:
                editor.update()
                time.sleep(tick)
            _echo_above(terminal, "")
    except TerminalUnavailableError as exc:
        raise click.ClickException(str(exc)) from exc
    except KeyboardInterrupt:
        click.echo()


if __name__ == "__main__":
    main()
