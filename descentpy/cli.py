"""Trace arithmetic expressions from the command line."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import replace
import logging
from pathlib import Path

from tqdm import tqdm

from descentpy.parser import ParseMode, ParserOptions, parse_result
from descentpy.pipeline import TraceParseResult


def _describe(result: TraceParseResult) -> str:
    if result.is_full_match:
        return "full match"
    if result.matched:
        parsed = result.parsed
        return f"partial match ({parsed.end}/{parsed.text_len})"
    return "no match"


def _collect_expressions(args: argparse.Namespace) -> list[str]:
    expressions = list(args.expressions)
    if args.file is not None:
        text = args.file.read_text(encoding="utf-8")
        expressions.extend(line.strip() for line in text.splitlines() if line.strip())
    return expressions


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="descentpy",
        description="Parse arithmetic expressions and print the backtracking trace",
    )
    parser.add_argument("expressions", nargs="*", help="Expressions such as 1+2*3")
    parser.add_argument(
        "--file",
        type=Path,
        default=None,
        help="Read additional expressions from a file, one per line",
    )
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in ParseMode],
        default=ParseMode.TRACE.value,
        help="Engine profile (default: trace)",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        default=None,
        help="Maximum rule nesting depth, 0 disables the limit "
        "(default: derived from the interpreter recursion limit)",
    )
    parser.add_argument("--no-trace", action="store_true", help="Only print the summary lines")
    parser.add_argument("--sort-memo", action="store_true", help="Sort the memo table dump by key")
    parser.add_argument(
        "--progress",
        action="store_true",
        help="Show a tqdm progress bar while parsing",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    arg_parser = build_arg_parser()
    args = arg_parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)
    if args.max_depth is not None and args.max_depth < 0:
        arg_parser.error("--max-depth cannot be negative")
    if args.file is not None and not args.file.is_file():
        arg_parser.error(f"Invalid --file: {args.file}")

    expressions = _collect_expressions(args)
    if not expressions:
        arg_parser.error("no expressions given")

    options = ParserOptions.for_mode(ParseMode(args.mode))
    if args.max_depth is not None:
        options = replace(options, max_depth=args.max_depth or None)

    iterator = tqdm(expressions, desc="parsing", unit="expr") if args.progress else expressions
    outputs: list[str] = []
    all_full = True
    for expression in iterator:
        try:
            result = parse_result(expression, options=options)
        except RecursionError as exc:
            # ParseDepthError, or the interpreter limit when the guard is off
            outputs.append(f"{expression}: {exc}\n")
            all_full = False
            continue

        if not args.no_trace:
            outputs.append(result.trace_text(sort_memo=args.sort_memo))
        outputs.append(f"{expression}: {_describe(result)}\n")
        all_full = all_full and result.is_full_match

    print("".join(outputs), end="")
    return 0 if all_full else 1


if __name__ == "__main__":
    raise SystemExit(main())
