from __future__ import annotations

import argparse
import logging

from .__version import __version__
from ._logging import setup_colored_logging

logger = logging.getLogger(__name__)

_DESCRIPTION = """\
luau-props-lsp: property completions for React-Luau element calls

Suggests property names inside the props table of
React.createElement("ClassName", { ... }) and e("ClassName", { ... }) calls
in Lua and Luau files.

Built-in properties are provided for TextLabel, Frame and ImageLabel.
Clients can add or replace classes through the reactLuauPropsHelper.props
setting."""


def main():
    """Main entry point for the language server."""
    parser = argparse.ArgumentParser(
        description=_DESCRIPTION,
        prog="luau-props-lsp",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set the logging level (default: %(default)s)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Server subcommand
    server_parser = subparsers.add_parser(
        "server",
        help="Start the LSP server",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    server_parser.add_argument("--tcp", action="store_true", help="Use TCP instead of stdio")
    server_parser.add_argument(
        "--port", type=int, default=8080, help="TCP port to listen on (default: %(default)s)"
    )
    server_parser.add_argument("--stdio", action="store_true", help="Use stdio (default)")

    # Complete subcommand
    complete_parser = subparsers.add_parser(
        "complete",
        help="Print property completions for a position in a file",
        formatter_class=argparse.RawTextHelpFormatter,
    )
    complete_parser.add_argument("file", type=str, help="Lua or Luau file to complete in")
    complete_parser.add_argument(
        "--line", type=int, required=True, help="1-based line of the cursor"
    )
    complete_parser.add_argument(
        "--column", type=int, required=True, help="1-based column of the cursor"
    )
    complete_parser.add_argument(
        "--props",
        type=str,
        help='JSON file mapping class names to property lists (e.g. {"Frame": ["Size"]})',
    )

    args = parser.parse_args()

    # Require explicit subcommand
    if args.command is None:
        parser.error(
            "A subcommand is required. Use 'luau-props-lsp server' to start the LSP server.\n"
            "See 'luau-props-lsp --help' for available commands."
        )

    setup_colored_logging(level=getattr(logging, args.log_level))

    if args.command == "complete":
        from ._complete import run_complete

        run_complete(args.file, args.line, args.column, args.props)

    elif args.command == "server":
        if args.tcp and args.stdio:
            parser.error("--tcp and --stdio are mutually exclusive")

        # Import server only when actually needed
        from .server import create_server

        server = create_server()

        if args.tcp:
            logger.info(f"Starting Luau Props LSP server ({__version__}) on TCP port {args.port}")
            server.start_tcp("localhost", args.port)
        else:
            logger.info(f"Starting Luau Props LSP server ({__version__}) on stdio")
            server.start_io()


if __name__ == "__main__":
    main()
