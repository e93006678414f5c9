"""viewkit CLI — viewkit serve / viewkit check.

Entry point for the ``viewkit`` command-line interface.
"""

from __future__ import annotations

import argparse
import sys


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the viewkit CLI."""
    parser = argparse.ArgumentParser(
        prog="viewkit",
        description="Serve template views as full pages or fragments.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_get_version()}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # viewkit serve
    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the site with discovered template views",
    )
    serve_parser.add_argument("root", nargs="?", default=".", help="Site root directory")
    serve_parser.add_argument("--path", default=None, help="Base path of the view endpoint")
    serve_parser.add_argument("--title", default=None, help="Document title")
    serve_parser.add_argument("--start-view", default=None, help="View shown on first load")
    serve_parser.add_argument("--host", default=None, help="Bind address")
    serve_parser.add_argument("--port", type=int, default=None, help="Bind port")
    serve_parser.add_argument("--debug", action="store_true", default=None, help="Debug mode")

    # viewkit check
    check_parser = subparsers.add_parser(
        "check",
        help="Compile every view and list their names",
    )
    check_parser.add_argument("root", nargs="?", default=".", help="Site root directory")

    return parser


def _get_version() -> str:
    """Get the package version."""
    from viewkit import __version__

    return __version__


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    from viewkit._errors import TemplateRegistrationError
    from viewkit.app import check, serve

    try:
        if args.command == "serve":
            serve(
                root=args.root,
                path=args.path,
                title=args.title,
                start_view=args.start_view,
                host=args.host,
                port=args.port,
                debug=args.debug,
            )
        elif args.command == "check":
            for name in check(root=args.root):
                print(name)
    except TemplateRegistrationError as exc:
        print(f"  Template error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
