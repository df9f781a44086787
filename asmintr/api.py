from __future__ import annotations

from asmintr.parser import Program, parse_program
from asmintr.vm import RunResult, run_program


def compile_source(*, src: str, strict: bool = False) -> Program:
    return parse_program(src, strict=strict)


def run_source(*, src: str, strict: bool = False, max_steps: int | None = None) -> RunResult:
    program = compile_source(src=src, strict=strict)
    return run_program(program, max_steps=max_steps)


def interpret(src: str) -> str | None:
    """Run `src` and return the last `msg` output, or None if `end` was never reached."""
    return run_source(src=src).output
