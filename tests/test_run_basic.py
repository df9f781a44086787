from __future__ import annotations

import pytest

from asmintr.api import interpret, run_source
from tests.helpers import (
    DIV_BY_CALL,
    FACTORIAL,
    GCD,
    JL_NOT_TAKEN,
    JNE_TO_EXIT,
    NESTED_CALLS_NO_END,
)


@pytest.mark.parametrize(
    ("src", "expected"),
    [
        (DIV_BY_CALL, "(5+1)/2 = 3"),
        (FACTORIAL, "5! = 120"),
        (NESTED_CALLS_NO_END, None),
        (JNE_TO_EXIT, None),
        (JL_NOT_TAKEN, "Random result: 1"),
        (GCD, "gcd(81, 153) = 9"),
    ],
)
def test_interpret_programs(src: str, expected: str | None) -> None:
    assert interpret(src) == expected


def test_no_end_keeps_last_message_in_state() -> None:
    result = run_source(src=NESTED_CALLS_NO_END)
    assert result.output is None
    assert result.ended is False
    assert result.state.output == "This program should return null"
    # `call print` never returns: print falls off the end.
    assert result.state.stack == [3]


def test_jne_path_never_assigns_result_register() -> None:
    result = run_source(src=JNE_TO_EXIT)
    assert "o" not in result.state.registers
    assert result.state.output == "Do nothing"


def test_end_returns_last_message_only() -> None:
    src = "msg 'first'\nmsg 'second'\nend\n"
    assert interpret(src) == "second"


def test_end_without_message_is_empty_string() -> None:
    assert interpret("mov a, 1\nend\n") == ""


def test_empty_program_has_no_output() -> None:
    assert interpret("") is None
    assert interpret("; only a comment\n\n") is None


def test_program_is_shared_across_runs() -> None:
    from asmintr.api import compile_source
    from asmintr.vm import run_program

    program = compile_source(src=FACTORIAL)
    first = run_program(program)
    second = run_program(program)
    assert first.output == second.output == "5! = 120"
    assert first.state is not second.state
