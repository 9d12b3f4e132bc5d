"""
Command-line interface for sreader.

Provides the main entry point with subcommands for parsing a file (or
stdin) and for an interactive session that parses each submitted block.
"""

import argparse
import dataclasses
import logging
import sys

from .backend import dump, dump_tokens, stringify
from .core import Reader, ReadResult
from .frontend import Lexer, UnterminatedString
from .utils.settings import Settings, DEFAULT_SETTINGS

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI.

    Returns:
        argparse.ArgumentParser: The configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog="sreader",
        description="sreader: S-expression reader",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m sreader parse program.sx
  python -m sreader parse program.sx --emit source
  echo '(a [b c)' | python -m sreader parse - --emit tokens
  python -m sreader repl
        """
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # Options shared by parse and repl
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--emit",
        choices=DEFAULT_SETTINGS.emit_options,
        default=DEFAULT_SETTINGS.default_emit,
        help="Output form: JSON tree dump, re-printed source, or token list (default: dump)"
    )
    common.add_argument(
        "--lenient-strings",
        action="store_true",
        help="Pass unterminated string literals to the decoder instead of rejecting them"
    )
    common.add_argument(
        "--indent",
        type=int,
        default=DEFAULT_SETTINGS.dump_indent,
        help="JSON indentation for dumps, 0 for a single line (default: 2)"
    )
    common.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output"
    )

    # Parse command
    parse_parser = subparsers.add_parser(
        "parse",
        parents=[common],
        help="Parse a source file and print the result"
    )
    parse_parser.add_argument(
        "input",
        type=str,
        help="Input file to parse, or - for stdin"
    )

    # Repl command
    subparsers.add_parser(
        "repl",
        parents=[common],
        help="Parse blocks from stdin, each ended by a blank line outside a string"
    )

    # Version command
    subparsers.add_parser(
        "version",
        help="Show version information"
    )

    return parser


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S"
    )


def settings_from_args(args: argparse.Namespace) -> Settings:
    """Build reader settings from parsed command-line arguments."""
    return dataclasses.replace(
        DEFAULT_SETTINGS,
        lenient_strings=args.lenient_strings,
        dump_indent=args.indent,
        default_emit=args.emit,
    )


def render_result(reader: Reader, result: ReadResult, emit: str) -> str:
    """Render a successful read in the requested output form."""
    if emit == "source":
        return stringify(result.exprs)
    elif emit == "tokens":
        return dump_tokens(reader.tokenize(result.source), indent=reader.settings.dump_indent)
    return dump(result.exprs, indent=reader.settings.dump_indent)


def write_line(text: str, stream=None) -> None:
    """Print text, escaping characters the stream cannot encode.

    Lone surrogates from \\uD800-style escapes are written as backslash
    escapes instead of raising UnicodeEncodeError.
    """
    stream = stream or sys.stdout
    encoding = getattr(stream, "encoding", None) or "utf-8"
    print(text.encode(encoding, "backslashreplace").decode(encoding), file=stream)


def report_error(result: ReadResult) -> None:
    write_line(f"[sreader] Error: {result.error_message}", sys.stderr)


def handle_parse(args: argparse.Namespace) -> int:
    """Handle the parse command.

    Args:
        args: Parsed command-line arguments

    Returns:
        int: Exit code (0 for success, non-zero for failure)
    """
    settings = settings_from_args(args)
    reader = Reader(settings)

    logger.debug(f"Input: {args.input}")
    logger.debug(f"Emit: {settings.default_emit}")
    logger.debug(f"Lenient strings: {settings.lenient_strings}")

    if args.input == "-":
        result = reader.read_source(sys.stdin.read(), filename="<stdin>")
    else:
        result = reader.read_file(args.input)

    if not result.success:
        report_error(result)
        return 1

    write_line(render_result(reader, result, settings.default_emit))
    return 0


def handle_repl(args: argparse.Namespace) -> int:
    """Handle the repl command.

    Each block of lines ended by a blank line (or end of input) is parsed
    on its own, and either its rendering or its error is printed. A blank
    line inside an open string literal belongs to the literal.

    Returns:
        int: Exit code (0 once input is exhausted)
    """
    settings = settings_from_args(args)
    reader = Reader(settings)

    submitted = 0
    block = []
    for line in sys.stdin:
        if line.strip() or (block and _inside_string("".join(block))):
            block.append(line)
        elif block:
            submitted += 1
            _submit(reader, "".join(block), submitted, settings.default_emit)
            block = []

    if block:
        submitted += 1
        _submit(reader, "".join(block), submitted, settings.default_emit)

    logger.debug(f"Processed {submitted} submission(s)")
    return 0


def _inside_string(code: str) -> bool:
    try:
        Lexer().tokenize(code)
    except UnterminatedString:
        return True
    return False


def _submit(reader: Reader, code: str, number: int, emit: str) -> None:
    result = reader.read_source(code, filename=f"<repl:{number}>")
    if result.success:
        write_line(render_result(reader, result, emit))
    else:
        report_error(result)


def handle_version(args: argparse.Namespace) -> int:
    """Handle the version command.

    Args:
        args: Parsed command-line arguments

    Returns:
        int: Exit code (always 0 for version)
    """
    from . import __version__, __author__
    print(f"sreader version {__version__}")
    print(f"Author: {__author__}")
    return 0


def main(argv: list = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Optional command-line arguments (defaults to sys.argv)

    Returns:
        int: Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging(getattr(args, "verbose", False))

    if args.command == "parse":
        return handle_parse(args)
    elif args.command == "repl":
        return handle_repl(args)
    elif args.command == "version":
        return handle_version(args)
    else:
        parser.print_help()
        return 2


if __name__ == "__main__":
    sys.exit(main())
