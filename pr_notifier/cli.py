from __future__ import annotations

import argparse
import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.text import Text

from .config import load_input
from .errors import NotifierError
from .pipeline import run

console = Console(stderr=True)
logger = logging.getLogger(__name__)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Post the open pull requests of a GitHub owner to a Slack channel."
    )
    parser.add_argument(
        "input",
        nargs="?",
        default=None,
        help=(
            "JSON input record with slack_web_hook_url, channel, access_token,"
            " git_repo_query, git_user and optional base_url. Use - for stdin."
        ),
    )
    parser.add_argument("--input-file", default=None, help="Read the JSON input record from a file.")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the message instead of posting it to Slack.",
    )
    parser.add_argument("--retries", type=int, default=0, help="Retries for failed GitHub requests.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    _setup_logging(args.verbose)

    try:
        config = load_input(args.input, path=args.input_file)
        text = run(config, dry_run=args.dry_run, retries=args.retries)
    except NotifierError as error:
        logger.error("%s", error)
        return 1

    if args.dry_run:
        Console().print(Panel(Text(text), title=f"#{config.channel}", expand=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
