from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from asmintr.errors import StepLimitExceeded, VMError
from asmintr.instructions import (
    Binary,
    Call,
    Compare,
    End,
    Instruction,
    Jump,
    Label,
    Message,
    Nop,
    Opcode,
    Return,
    Unary,
)
from asmintr.machine import ExecutionState, div_trunc
from asmintr.parser import Program

logger = logging.getLogger(__name__)

QUOTE = "'"


@dataclass(frozen=True, slots=True)
class RunResult:
    output: str | None
    ended: bool
    steps: int
    state: ExecutionState


def jump_taken(opcode: Opcode, *, zero_flag: bool, carry_flag: bool) -> bool:
    if opcode == Opcode.JMP:
        return True
    if opcode == Opcode.JNE:
        return not zero_flag
    if opcode == Opcode.JE:
        return zero_flag
    if opcode == Opcode.JGE:
        return zero_flag or not carry_flag
    if opcode == Opcode.JG:
        return not zero_flag and not carry_flag
    if opcode == Opcode.JLE:
        return carry_flag or zero_flag
    if opcode == Opcode.JL:
        return carry_flag
    raise ValueError(f"not a jump: {opcode.value}")


def format_message(tokens: Sequence[str], state: ExecutionState) -> str:
    """Rebuild the `msg` text from its comma-split tokens.

    A bare quote stands for a literal that was split on its comma: it renders
    as `,` when it opens and as a space when it closes. Tokens still carrying
    a quote are literal text; anything else renders as a decimal value.
    """
    parts: list[str] = []
    opened = False
    for token in tokens:
        if token == QUOTE:
            parts.append(" " if opened else ",")
            opened = not opened
        elif QUOTE in token:
            parts.append(token.strip(QUOTE))
        else:
            parts.append(str(state.resolve(token)))
    return "".join(parts)


def _apply_binary(opcode: Opcode, current: int, value: int) -> int:
    if opcode == Opcode.MOV:
        return value
    if opcode == Opcode.ADD:
        return current + value
    if opcode == Opcode.SUB:
        return current - value
    if opcode == Opcode.MUL:
        return current * value
    if opcode == Opcode.DIV:
        return div_trunc(current, value)
    raise ValueError(f"not a binary op: {opcode.value}")


class Interpreter:
    def __init__(self, program: Program, *, max_steps: int | None = None) -> None:
        if max_steps is not None and max_steps < 1:
            raise ValueError("max_steps must be >= 1")
        self.program = program
        self.max_steps = max_steps
        self.state = ExecutionState()
        self.steps = 0
        self.ended = False

    @property
    def finished(self) -> bool:
        return self.ended or self.state.ip >= len(self.program.instructions)

    def step(self) -> bool:
        """Execute one instruction. Returns False once the run has terminated."""
        if self.finished:
            return False
        if self.max_steps is not None and self.steps >= self.max_steps:
            raise StepLimitExceeded(
                self.max_steps, ip=self.state.ip, line=self.program.line_of(self.state.ip)
            )

        ip = self.state.ip
        instr = self.program.instructions[ip]
        try:
            self._execute(instr, ip)
        except VMError as exc:
            if exc.ip is None:
                exc.ip = ip
            if exc.line is None:
                exc.line = self.program.line_of(ip)
            raise
        self.steps += 1
        return not self.finished

    def _execute(self, instr: Instruction, ip: int) -> None:
        state = self.state

        if isinstance(instr, Binary):
            value = state.resolve(instr.src)
            state.write(instr.dst, _apply_binary(instr.opcode, state.read(instr.dst), value))
            state.ip = ip + 1
            return

        if isinstance(instr, Unary):
            delta = 1 if instr.opcode == Opcode.INC else -1
            state.write(instr.dst, state.read(instr.dst) + delta)
            state.ip = ip + 1
            return

        if isinstance(instr, Compare):
            state.compare(state.resolve(instr.left), state.resolve(instr.right))
            state.ip = ip + 1
            return

        if isinstance(instr, Call):
            target = self.program.label_target(instr.label, ip=ip)
            state.push_return(ip + 1)
            state.ip = target
            return

        if isinstance(instr, Return):
            state.ip = state.pop_return()
            return

        if isinstance(instr, Jump):
            if jump_taken(instr.opcode, zero_flag=state.zero_flag, carry_flag=state.carry_flag):
                state.ip = self.program.label_target(instr.label, ip=ip)
            else:
                state.ip = ip + 1
            return

        if isinstance(instr, Message):
            state.output = format_message(instr.tokens, state)
            state.ip = ip + 1
            return

        if isinstance(instr, End):
            self.ended = True
            return

        if isinstance(instr, (Label, Nop)):
            state.ip = ip + 1
            return

        raise TypeError(f"unknown instruction: {type(instr).__name__}")

    def run(self) -> RunResult:
        logger.debug("run start: %d instruction(s)", len(self.program.instructions))
        while self.step():
            pass
        output = self.state.output if self.ended else None
        logger.debug(
            "run stop after %d step(s): %s", self.steps, "end" if self.ended else "fell off the end"
        )
        return RunResult(output=output, ended=self.ended, steps=self.steps, state=self.state)


def run_program(program: Program, *, max_steps: int | None = None) -> RunResult:
    return Interpreter(program, max_steps=max_steps).run()
