from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from asmintr.config import AsmSettings, load_settings
from asmintr.dump import format_instructions, format_state
from asmintr.errors import ParseError, VMError
from asmintr.parser import parse_program
from asmintr.schemas import build_report, snapshot_program
from asmintr.vm import run_program

EXIT_OK = 0
EXIT_NO_OUTPUT = 1
EXIT_PARSE_ERROR = 2
EXIT_FAULT = 3
# argparse also exits with 2 on usage errors.
EXIT_USAGE = 2


def _existing_path(value: str) -> Path:
    p = Path(value)
    if not p.is_file():
        raise argparse.ArgumentTypeError(f"file not found: {value}")
    return p


def _positive_int(value: str) -> int:
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value}") from None
    if n < 1:
        raise argparse.ArgumentTypeError("must be >= 1")
    return n


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _build_parser(settings: AsmSettings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="asmintr", description="Run assembly code")
    parser.add_argument("--log-level", default=settings.log_level)
    sub = parser.add_subparsers(dest="cmd", required=True)

    run_p = sub.add_parser("run", help="parse and execute an .asm file")
    run_p.add_argument("file", type=_existing_path)
    run_p.add_argument(
        "-d", "--debug", action="store_true", help="print registers, stack, flags and output"
    )
    run_p.add_argument("-i", "--inst", action="store_true", help="print parsed instructions")
    run_p.add_argument("--json", action="store_true", help="print a JSON run report")
    run_p.add_argument(
        "--strict", action=argparse.BooleanOptionalAction, default=settings.strict
    )
    run_p.add_argument("--max-steps", type=_positive_int, default=settings.max_steps)

    parse_p = sub.add_parser("parse", help="print the parsed instructions of an .asm file")
    parse_p.add_argument("file", type=_existing_path)
    parse_p.add_argument("--json", action="store_true")
    parse_p.add_argument(
        "--strict", action=argparse.BooleanOptionalAction, default=settings.strict
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    try:
        settings = load_settings()
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_USAGE
    args = _build_parser(settings).parse_args(argv)
    _configure_logging(args.log_level)

    try:
        src = args.file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: cannot read {args.file}: {exc}", file=sys.stderr)
        return EXIT_USAGE

    try:
        program = parse_program(src, strict=args.strict)
    except ParseError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_PARSE_ERROR

    if args.cmd == "parse":
        if args.json:
            print(snapshot_program(program).model_dump_json(indent=2))
        else:
            print(format_instructions(program))
        return EXIT_OK

    if args.cmd == "run":
        if args.inst and not args.json:
            print(format_instructions(program))
        try:
            result = run_program(program, max_steps=args.max_steps)
        except VMError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return EXIT_FAULT

        if args.json:
            report = build_report(result, program=program if args.inst else None)
            print(report.model_dump_json(indent=2))
        elif args.debug:
            print(format_state(result.state))
            print(f"\nActual output: {result.output}")
        else:
            print(result.output)
        return EXIT_OK if result.ended else EXIT_NO_OUTPUT

    raise AssertionError(f"unhandled cmd: {args.cmd}")
