from __future__ import annotations

from pydantic import BaseModel, Field

from asmintr.instructions import Opcode
from asmintr.machine import ExecutionState
from asmintr.parser import Program
from asmintr.vm import RunResult


class InstructionView(BaseModel):
    index: int = Field(ge=0)
    line: int = Field(ge=1)
    opcode: Opcode
    operands: list[str] = Field(default_factory=list)


class ProgramSnapshot(BaseModel):
    instructions: list[InstructionView] = Field(default_factory=list)
    labels: dict[str, int] = Field(default_factory=dict)
    source: str = ""


class MachineSnapshot(BaseModel):
    registers: dict[str, int] = Field(default_factory=dict)
    stack: list[int] = Field(default_factory=list)
    zero_flag: bool = False
    carry_flag: bool = False
    output: str = ""
    ip: int = Field(default=0, ge=0)


class RunReport(BaseModel):
    output: str | None = None
    ended: bool
    steps: int = Field(ge=0)
    state: MachineSnapshot
    program: ProgramSnapshot | None = None


def snapshot_program(program: Program) -> ProgramSnapshot:
    return ProgramSnapshot(
        instructions=[
            InstructionView(
                index=i,
                line=i + 1,
                opcode=instr.opcode,
                operands=list(instr.operands),
            )
            for i, instr in enumerate(program.instructions)
        ],
        labels=dict(program.labels),
        source=program.source,
    )


def snapshot_state(state: ExecutionState) -> MachineSnapshot:
    return MachineSnapshot(
        registers=dict(state.registers),
        stack=list(state.stack),
        zero_flag=state.zero_flag,
        carry_flag=state.carry_flag,
        output=state.output,
        ip=state.ip,
    )


def build_report(result: RunResult, *, program: Program | None = None) -> RunReport:
    return RunReport(
        output=result.output,
        ended=result.ended,
        steps=result.steps,
        state=snapshot_state(result.state),
        program=snapshot_program(program) if program is not None else None,
    )
