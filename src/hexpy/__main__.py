"""
Entry point for HexPy.
"""

import argparse
import curses
import logging
import sys
from typing import Any, Dict, List, Optional

from .config import load_config
from .core.dispatcher import EditDispatcher
from .core.session import EditorSession
from .ui.input_handler import WHEEL_MASK, InputHandler
from .ui.window import WindowManager
from .utils.logging_config import setup_logging

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""

    parser = argparse.ArgumentParser(
        description="HexPy - Terminal Hex Editor"
    )
    parser.add_argument(
        "file",
        type=str,
        help="File to edit"
    )
    parser.add_argument(
        "-c", "--config",
        type=str,
        default=None,
        help="Path to a config.toml (default: ./config.toml)"
    )
    return parser.parse_args(argv)


def run(stdscr: 'curses.window', session: EditorSession, config: Dict[str, Any]) -> None:
    """Main loop: render, read one event, dispatch."""

    curses.curs_set(0)
    stdscr.keypad(True)
    stdscr.timeout(-1)
    curses.mousemask(WHEEL_MASK)

    keybindings = config["keybindings"]
    window_manager = WindowManager(stdscr, keybindings)
    input_handler = InputHandler(stdscr, keybindings)
    dispatcher = EditDispatcher(
        session,
        input_handler,
        page_rows=config["editor"]["page_rows"],
        on_mode_change=window_manager.refresh_session,
    )

    while True:
        window_manager.refresh_session(session)

        event = input_handler.read_event()
        if not dispatcher.dispatch(event):
            break


def main() -> None:
    """Entry point for the application."""

    args = parse_args()
    config = load_config(args.config)
    setup_logging(config)

    try:
        session = EditorSession.from_file(args.file)
    except OSError as e:
        logger.error("Error loading %s: %s", args.file, e)
        print(f"Error loading {args.file}: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        curses.wrapper(run, session, config)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    logger.info("Session ended, %d changes in the log", len(session.changes))


if __name__ == "__main__":
    main()
