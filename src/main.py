"""CLI entry point for the docs sync tool."""

import argparse
import json
import sys
from pathlib import Path

from src.layout.options import BASE_OPTIONS, render_nav
from src.modules.intern3.module import Intern3Module

MODULES = {
    "intern3": Intern3Module,
}
DEFAULT_MODULE = "intern3"


def sync_command(args):
    """Handle the sync subcommand."""
    module = MODULES[args.module](repo_url=args.repo, atomic=args.atomic)

    try:
        target = module.run(args.output or module.default_output)
    except Exception as e:
        print(f"Error during sparse clone: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Sparse clone completed successfully: {target}")


def layout_command(args):
    """Handle the layout subcommand."""
    if args.html:
        print(render_nav(BASE_OPTIONS))
    else:
        print(json.dumps(BASE_OPTIONS.to_dict(), indent=2))


def add_sync_arguments(parser):
    parser.add_argument(
        "module",
        nargs="?",
        default=DEFAULT_MODULE,
        choices=sorted(MODULES),
        help=f"Documentation source to sync (default: {DEFAULT_MODULE})"
    )
    parser.add_argument(
        "-o", "--output",
        type=Path,
        default=None,
        help="Output directory (default: the module's content path)"
    )
    parser.add_argument(
        "--repo",
        default=None,
        help="Override the remote repository URL"
    )
    parser.add_argument(
        "--no-atomic",
        action="store_false",
        dest="atomic",
        help="Delete the output directory before cloning instead of replacing it on success"
    )


def build_parser():
    parser = argparse.ArgumentParser(
        description="Sparse-clone documentation folders and inspect the site layout",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Sync subcommand
    sync_parser = subparsers.add_parser(
        "sync",
        help="Replace the local docs with the remote repository's docs folder"
    )
    add_sync_arguments(sync_parser)
    sync_parser.set_defaults(func=sync_command)

    # Layout subcommand
    layout_parser = subparsers.add_parser(
        "layout",
        help="Print the shared navigation configuration"
    )
    layout_parser.add_argument(
        "--html",
        action="store_true",
        help="Print the rendered nav bar instead of JSON"
    )
    layout_parser.set_defaults(func=layout_command)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    # No command runs the default sync
    if not args.command:
        args = parser.parse_args(["sync"])

    args.func(args)


if __name__ == "__main__":
    main()
