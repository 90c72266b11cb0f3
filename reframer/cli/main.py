"""
Reframer CLI — Command-line interface for rewrites and reframes.
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from reframer import __version__
from reframer.catalog import SECTIONS, get_catalog
from reframer.core.context import RewriteRequest
from reframer.core.engine import RewriteError, get_engine
from reframer.formatting.compose import reframe
from reframer.formatting.emotions import EmotionSelection
from reframer.ir.enums import TransformStatus
from reframer.ir.serialization import to_json
from reframer.store.reframes import ReframeStore


def read_text(value: str) -> str:
    """Literal text, a file path, or - for stdin."""
    if value == "-":
        return sys.stdin.read().strip()
    # Only check as path if it's short enough to be a valid path
    if len(value) < 256 and Path(value).is_file():
        return Path(value).read_text(encoding="utf-8").strip()
    return value


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--log-level",
        type=str,
        choices=["silent", "info", "verbose", "debug"],
        default=None,
        help="Log verbosity level (default: info, or REFRAMER_LOG_LEVEL env var)",
    )
    common.add_argument(
        "--log-channel",
        type=str,
        default=None,
        help="Comma-separated log channels to show (pipeline,rewrite,format,store,system). Default: all",
    )

    parser = argparse.ArgumentParser(
        prog="reframer",
        description="Rewrite what you'd tell a friend as something you can tell yourself",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"reframer {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Rewrite command
    rewrite_parser = subparsers.add_parser(
        "rewrite", parents=[common], help="Rewrite a statement in the first person"
    )
    rewrite_parser.add_argument("input", type=str, help="Input text or path to file (use - for stdin)")
    rewrite_parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format: text (default) or json (full result with trace)",
    )
    rewrite_parser.add_argument("--ruleset", type=str, default=None, help="Ruleset to apply")

    # Reframe command
    reframe_parser = subparsers.add_parser(
        "reframe", parents=[common], help="Compose a reframe from emotions and a support statement"
    )
    reframe_parser.add_argument("input", type=str, help="Support statement or path to file (use - for stdin)")
    reframe_parser.add_argument(
        "-e",
        "--emotions",
        type=str,
        required=True,
        help='Comma-separated emotions, e.g. "Sad, Angry"',
    )
    reframe_parser.add_argument("--ruleset", type=str, default=None, help="Ruleset to apply")
    reframe_parser.add_argument("--save", action="store_true", help="Save the reframe")
    reframe_parser.add_argument("--data-dir", type=str, default=None, help="Saved reframes directory")

    # Saved reframes
    saved_parser = subparsers.add_parser("saved", parents=[common], help="Manage saved reframes")
    saved_parser.add_argument("action", choices=["list", "delete"])
    saved_parser.add_argument("id", nargs="?", default=None, help="Reframe ID (for delete)")
    saved_parser.add_argument("--data-dir", type=str, default=None, help="Saved reframes directory")

    # Catalog
    catalog_parser = subparsers.add_parser("catalog", parents=[common], help="Show suggested prompts")
    catalog_parser.add_argument("--section", choices=list(SECTIONS), default=None)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    configure_from_args(args)

    commands = {
        "rewrite": run_rewrite,
        "reframe": run_reframe,
        "saved": run_saved,
        "catalog": run_catalog,
    }
    return commands[args.command](args)


def configure_from_args(args: argparse.Namespace) -> None:
    """Configure logging from CLI flags (env vars fill the gaps)."""
    from reframer.core.logging import configure_logging

    channels = None
    if args.log_channel:
        channels = [ch.strip() for ch in args.log_channel.split(",")]

    configure_logging(level=args.log_level, channels=channels, force=True)


def run_rewrite(args: argparse.Namespace) -> int:
    """Run the rewrite command."""
    request = RewriteRequest(text=read_text(args.input), ruleset=args.ruleset)
    result = get_engine().transform(request)

    if args.format == "json":
        print(to_json(result))
    elif result.status == TransformStatus.SUCCESS:
        print(result.rendered_text)

    if result.status == TransformStatus.ERROR:
        for diag in result.diagnostics:
            print(f"[{diag.level.value}] {diag.code}: {diag.message}", file=sys.stderr)
        return 1
    return 0


def run_reframe(args: argparse.Namespace) -> int:
    """Run the reframe command."""
    emotions = EmotionSelection.from_input(args.emotions)
    try:
        text = reframe(emotions, read_text(args.input), ruleset=args.ruleset)
    except RewriteError as e:
        for diag in e.diagnostics:
            print(f"[{diag.level.value}] {diag.code}: {diag.message}", file=sys.stderr)
        return 1

    if not text:
        # Nothing to show is not a failure
        print("No reframe: provide at least one emotion and a support statement.", file=sys.stderr)
        return 0

    print(text)
    if args.save:
        record = ReframeStore(args.data_dir).create(text)
        print(f"Saved {record.id}", file=sys.stderr)
    return 0


def run_saved(args: argparse.Namespace) -> int:
    """List or delete saved reframes."""
    store = ReframeStore(args.data_dir)

    if args.action == "list":
        for record in store.list():
            print(f"{record.id}  {record.created_at:%Y-%m-%d %H:%M}  {record.text}")
        return 0

    if not args.id:
        print("delete needs a reframe ID", file=sys.stderr)
        return 2
    if not store.delete(args.id):
        print(f"No saved reframe with ID {args.id}", file=sys.stderr)
        return 1
    return 0


def run_catalog(args: argparse.Namespace) -> int:
    """Print catalog sections."""
    catalog = get_catalog()
    sections = [args.section] if args.section else list(SECTIONS)
    for name in sections:
        print(name.replace("_", " ").title())
        for item in catalog.section(name):
            print(f"  • {item}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
