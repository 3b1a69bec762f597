"""Console-driven UI loop for initiative."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, Sequence

from initiative.core.rng import RNG
from initiative.data.document_store import DocumentStore
from initiative.data.errors import DataError
from initiative.data.paths import get_default_data_path, get_log_path
from initiative.presentation.cli.config import configure_logging, debug_enabled, load_config
from initiative.presentation.cli.keys import help_line, translate
from initiative.presentation.cli.render import render_app
from initiative.services.controllers import AppController

logger = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="initiative", description="Keyboard-driven tabletop session tracker")
    parser.add_argument("-d", "--data", type=Path, default=None, help="Path to the YAML data file.")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging and annotations.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for initiative rolls.")
    return parser.parse_args(argv)


def resolve_data_path(cli_path: Path | None, config: Dict[str, str]) -> Path:
    """Pick the data file: command line, then config, then the per-user default."""
    if cli_path is not None:
        return cli_path
    if config.get("data_file"):
        return Path(config["data_file"]).expanduser()
    return get_default_data_path()


def main(argv: Sequence[str] | None = None) -> int:
    """Start the interactive CLI session. Returns the process exit status."""
    args = parse_args(argv)
    config = load_config()
    debug = args.debug or debug_enabled()
    configure_logging(get_log_path(), "DEBUG" if debug else config["log_level"])

    data_path = resolve_data_path(args.data, config)
    store = DocumentStore(data_path)
    try:
        document = store.load()
    except DataError as exc:
        logger.error("Unable to load %s: %s", data_path, exc)
        print(f"Error loading data: {exc}", file=sys.stderr)
        return 1

    controller = AppController(document, store, RNG(args.seed))
    run_loop(controller, debug=debug)
    print("Goodbye!")
    return 0


def run_loop(controller: AppController, *, debug: bool = False) -> None:
    """Render, read a line, dispatch; until the controller asks to stop."""
    while controller.running:
        view = controller.view()
        render_app(view, debug=debug)
        print(help_line(text_focus=view.text_focus, form_focus=view.form_focus, full=view.show_help))
        try:
            line = input("> ")
        except (EOFError, KeyboardInterrupt):
            controller.quit()
            break
        for command in translate(line, text_focus=view.text_focus, form_focus=view.form_focus):
            if not controller.handle(command):
                break
