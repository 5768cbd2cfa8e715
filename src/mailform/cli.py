"""Command line entry point for mailform."""

import argparse
import json
from typing import Any, Optional, Sequence

from rich.console import Console

from mailform.core.controller import FormController, FormStatus
from mailform.core.sender import LogSender
from mailform.tui.app import MailFormApp
from mailform.tui.theme import Theme
from mailform.utils.config_manager import ConfigManager
from mailform.utils.errors import MailFormError
from mailform.utils.logging import get_logger, init_logging

logger = get_logger(__name__)


def parse_assignment(text: str) -> tuple[str, Any]:
    """Parse ``key.path=value``; the value is read as JSON when it parses."""

    key, sep, raw = text.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got '{text}'")

    try:
        value = json.loads(raw)
    except json.JSONDecodeError:
        value = raw

    return key.strip(), value


def setup_argument_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""

    parser = argparse.ArgumentParser(
        prog="mailform",
        description="Compose a message in a terminal form (To, From, Subject, Body)",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to a JSON configuration file (default: ~/.mailform/config.json)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override the configured file log level",
    )

    config_group = parser.add_argument_group(
        "configuration", "Change saved settings and exit without opening the form"
    )
    config_group.add_argument(
        "--set",
        dest="assignments",
        metavar="KEY=VALUE",
        action="append",
        type=parse_assignment,
        default=[],
        help="Set a configuration value, e.g. ui.width=60 (repeatable)",
    )
    config_group.add_argument(
        "--reset-config",
        action="store_true",
        help="Reset the configuration file to defaults",
    )
    return parser


def update_config(manager: ConfigManager, args, console: Console) -> None:
    """Apply --reset-config and --set options to the saved configuration."""

    if args.reset_config:
        manager.reset_to_defaults()
        console.print("[yellow]Configuration reset to defaults.[/yellow]")

    for key, value in args.assignments:
        manager.set_config(key, value)
        console.print(f"[green]{key} = {value!r}[/green]")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main CLI entry point.

    Returns:
        Exit code: 0 when the form was sent or closed, 1 on startup errors
    """
    console = Console()
    args = setup_argument_parser().parse_args(argv)

    try:
        manager = ConfigManager(args.config)
        config = manager.config
        init_logging(
            args.log_level or config.logging.log_level,
            max_file_size=config.logging.max_file_size,
            backup_count=config.logging.backup_count,
        )

        if args.reset_config or args.assignments:
            update_config(manager, args, console)
            return 0

    except MailFormError as e:
        logger.error(f"Configuration error: {e.message}", extra={"context": e.to_dict()})
        console.print(f"[red]Configuration error: {e.message}[/red]")
        return 1

    controller = FormController.from_config(LogSender(), config.form)
    app = MailFormApp(controller, Theme.from_config(config.ui))

    try:
        status = app.run()
    except KeyboardInterrupt:
        status = FormStatus.QUIT

    if status is FormStatus.SENT:
        console.print("[green]Message sent.[/green]")

    logger.debug(f"Exiting with status {status}")
    return 0
