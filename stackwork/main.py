"""Entry point for stackwork.

Usage:
    python -m stackwork.main convert "A*(B+C)/D"     # print postfix form
    python -m stackwork.main check "({[]})" "([)]"   # report bracket balance
    python -m stackwork.main convert -f exprs.txt    # one expression per line
    python -m stackwork.main --bounded check "((A))"  # working stack limited to 9
"""
import sys
import logging
import argparse
from pathlib import Path

from stackwork.balance import BalanceChecker
from stackwork.config import Config
from stackwork.converter import ExpressionConverter
from stackwork.errors import ConversionError, StackError
from stackwork.stack import DEMO_CAPACITY

logger = logging.getLogger(__name__)


def setup_logging(debug: bool = False):
    level = logging.DEBUG if debug else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def read_expressions(path: Path) -> list[str]:
    """Read one expression per line, dropping surrounding whitespace and blank lines."""
    with open(path, "r", encoding="utf-8") as f:
        return [line.strip() for line in f if line.strip()]


def run_convert(expressions, capacity) -> int:
    converter = ExpressionConverter(capacity)
    status = 0
    for expr in expressions:
        try:
            print(converter.convert(expr))
        except (ConversionError, StackError) as e:
            print(f"error: {e}", file=sys.stderr)
            status = 1
    return status


def run_check(expressions, capacity) -> int:
    checker = BalanceChecker(capacity)
    status = 0
    for expr in expressions:
        try:
            balanced = checker.is_balanced(expr)
        except StackError as e:
            print(f"error: {e}", file=sys.stderr)
            status = 1
            continue
        print(f"{expr}: {'balanced' if balanced else 'unbalanced'}")
        if not balanced:
            status = 1
    return status


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stackwork",
        description="Infix to postfix conversion and bracket balance checking")
    parser.add_argument("--debug", action="store_true",
                        help="Enable debug logging")
    bound = parser.add_mutually_exclusive_group()
    bound.add_argument("--capacity", type=int, default=None,
                       help="Maximum depth of the working stack (default: from config)")
    bound.add_argument("--bounded", action="store_true",
                       help=f"Use the fixed demo depth of {DEMO_CAPACITY}")
    parser.add_argument("--config", type=Path, default=None,
                        help="Path to config.json")
    sub = parser.add_subparsers(dest="command", required=True)
    for name, help_text in (("convert", "Print the postfix form of each expression"),
                            ("check", "Report whether each expression is balanced")):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("expressions", nargs="*", metavar="EXPR")
        cmd.add_argument("-f", "--file", type=Path,
                         help="Read expressions from a file, one per line")
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    config = Config(args.config)
    setup_logging(args.debug or config.debug_logging)

    if args.capacity is not None and args.capacity < 0:
        parser.error("--capacity must be >= 0")
    if args.bounded:
        capacity = DEMO_CAPACITY
    elif args.capacity is not None:
        capacity = args.capacity
    else:
        capacity = config.stack_capacity

    expressions = list(args.expressions)
    if args.file is not None:
        try:
            expressions.extend(read_expressions(args.file))
        except (OSError, UnicodeDecodeError) as e:
            print(f"error: cannot read {args.file}: {e}", file=sys.stderr)
            return 1
    if not expressions:
        parser.error("no expressions given")

    logger.debug("Running %s on %d expression(s), capacity=%s",
                 args.command, len(expressions), capacity)
    if args.command == "convert":
        return run_convert(expressions, capacity)
    return run_check(expressions, capacity)


if __name__ == "__main__":
    sys.exit(main())
