"""
BL CLI Entrypoint.

This module provides the command-line interface for parsing BL statements.

Features:
    - Read source from `.bl` files or inline strings.
    - Tokenize and parse a single statement or a whole block.
    - Render the tree as BL text or JSON to the console or a file.
    - Report the first syntax error and exit with status 1.
    - Prompt for a file name when run without arguments.

Example usage:
    blparse program.bl
    blparse -s "WHILE true DO move END WHILE"
    blparse program.bl -b -f json -o program.json

Functions:
    run_bl(source: str, is_string: bool = False, block: bool = False, target: str = "bl",
           out: str | None = None) -> Statement:
        Runs the pipeline (tokenize → parse → render → output).

    main() -> None:
        Parses CLI arguments and invokes `run_bl`.
"""

import argparse
import logging
import sys

from blparse.bl_ast import Statement
from blparse.bl_constants import END_OF_INPUT
from blparse.bl_errors import BLSyntaxError
from blparse.bl_parser import parse, parse_block
from blparse.bl_render import StatementRenderer
from blparse.bl_tokenizer import tokens

logger = logging.getLogger(__name__)


def run_bl(
    source: str,
    is_string: bool = False,
    block: bool = False,
    target: str = "bl",
    out: str | None = None,
) -> Statement:
    """
    Run the BL toolchain: tokenize, parse, render, and print or write the output.

    Args:
        source (str): BL source code or path to a `.bl` file.
        is_string (bool): If True, treats `source` as raw code instead of a file path.
        block (bool): If True, parses a block of statements instead of a single one.
        target (str): Output format, 'bl' or 'json'. Defaults to 'bl'.
        out (str | None): Optional path to write the rendered output. If None, prints to stdout.

    Returns:
        Statement: The parsed tree.

    Raises:
        ValueError: If `is_string` is False and the source does not end with '.bl'.
        BLSyntaxError: At the first syntax error in the source.
    """
    if not is_string and not source.endswith(".bl"):
        raise ValueError("Only .bl files are supported.")
    if not is_string:
        with open(source, encoding="utf-8") as f:
            source = f.read()

    stream = tokens(source)
    logger.info("*** Parsing input ***")
    tree = parse_block(stream) if block else parse(stream)

    leftover = [t for t in stream if t != END_OF_INPUT]
    if leftover:
        logger.warning(
            "%d token(s) left unparsed, starting at %r", len(leftover), leftover[0]
        )

    rendered = StatementRenderer(target).render(tree)
    if out:
        with open(out, "w", encoding="utf-8") as f:
            f.write(rendered)
        logger.info("(wrote to %s)", out)
    else:
        logger.info("*** Pretty print of parsed statement(s) ***")
        print(rendered, end="" if rendered.endswith("\n") else "\n")
    return tree


def main() -> None:
    """
    Entry point for the BL CLI.

    Supported flags:
        - `-s`, `--string`: Interpret source as a raw string instead of a file path.
        - `-b`, `--block`: Parse a block of statements instead of one statement.
        - `-f`, `--format`: Output format ('bl' or 'json'), default is 'bl'.
        - `-o`, `--out`: Write output to a file.
        - `-v`, `--verbose`: Log each parsed construct.

    Without arguments, asks for the name of a file to parse.
    """
    parser = argparse.ArgumentParser(prog="blparse")
    parser.add_argument("source", nargs="?", help="Filename or raw source (with -s)")
    parser.add_argument(
        "-s", "--string", action="store_true", help="Interpret source as literal string"
    )
    parser.add_argument(
        "-b",
        "--block",
        action="store_true",
        help="Parse a block of statements instead of a single statement",
    )
    parser.add_argument(
        "-f",
        "--format",
        dest="target",
        choices=("bl", "json"),
        default="bl",
        help="Output format (default: bl)",
    )
    parser.add_argument("-o", "--out", metavar="OUTFILE", help="Output to file")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log each parsed construct"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO, format="%(message)s"
    )

    source = args.source
    if source is None:
        try:
            source = input("Enter valid BL statement(s) file name: ").strip()
        except (EOFError, KeyboardInterrupt):
            logger.error("Error: no file name given")
            sys.exit(2)

    try:
        run_bl(
            source=source,
            is_string=args.string,
            block=args.block,
            target=args.target,
            out=args.out,
        )
    except BLSyntaxError as e:
        logger.error("Error: %s", e)
        sys.exit(1)
    except (OSError, ValueError) as e:
        logger.error("Error: %s", e)
        sys.exit(2)


if __name__ == "__main__":
    main()
