"""
Command line entry point: parse a token file and print its expression tree.

Examples:
    arithast tokens.txt                  # Print the tree
    arithast tokens.txt --strict         # Fail on tokens left after the expression
    arithast tokens.txt -v               # Trace every token read and parsed
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import LOG_FORMAT, MAX_TOKENS, LoaderConfig, ParserConfig, PrinterConfig
from .loader import TokenFileError, load_tokens
from .parser import Parser, ParseError, print_ast


def build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="arithast",
        description="Build and print the abstract syntax tree of a tokenized arithmetic expression",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Token file format, one token per line:
    2,integer
    +,operator
    3,integer
        """
    )

    parser.add_argument('token_file', nargs='?',
                        help='Path to the token file')

    # Strictness options
    parser.add_argument('--strict', action='store_true',
                        help='Reject tokens left over after the expression')
    parser.add_argument('--strict-tokens', action='store_true',
                        help='Abort on malformed token lines instead of skipping them')
    parser.add_argument('--max-tokens', type=int, default=MAX_TOKENS,
                        help=f'Maximum number of tokens to read, 0 for no limit (default: {MAX_TOKENS})')

    # Output options
    parser.add_argument('--indent', type=int, default=4,
                        help='Spaces per tree level (default: 4)')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Log every token read and parsed')

    return parser


def configure_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Run the command line tool and return the process exit code."""
    parser = build_argument_parser()
    args = parser.parse_args(argv)

    if args.token_file is None:
        parser.print_usage(sys.stderr)
        return 1

    configure_logging(args.verbose)

    if args.max_tokens < 0:
        print("Error: --max-tokens must not be negative", file=sys.stderr)
        return 1

    loader_config = LoaderConfig(
        strict=args.strict_tokens,
        max_tokens=args.max_tokens if args.max_tokens > 0 else None,
    )

    try:
        printer_config = PrinterConfig.with_width(args.indent)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        tokens = load_tokens(args.token_file, loader_config)
    except TokenFileError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    try:
        ast = Parser(tokens, ParserConfig(strict=args.strict)).parse()
    except ParseError as e:
        print(f"Syntax Error: {e.message}", file=sys.stderr)
        return 1

    print("Abstract Syntax Tree:")
    print_ast(ast, indent=printer_config.indent)
    return 0


if __name__ == '__main__':
    sys.exit(main())
