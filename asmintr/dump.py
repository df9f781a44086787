from __future__ import annotations

from asmintr.instructions import Instruction, Label, Message
from asmintr.machine import ExecutionState
from asmintr.parser import Program

DELIMITER = "-" * 20


def format_instruction(instr: Instruction) -> str:
    if isinstance(instr, Label):
        return f"{instr.name}:"
    if isinstance(instr, Message):
        return "msg " + ", ".join(instr.tokens)
    operands = ", ".join(instr.operands)
    return f"{instr.opcode.value} {operands}" if operands else instr.opcode.value


def format_instructions(program: Program) -> str:
    width = len(str(max(len(program.instructions) - 1, 0)))
    lines = ["Instructions:"]
    for i, instr in enumerate(program.instructions):
        lines.append(f"{i:>{width}}  {format_instruction(instr)}")
    if program.labels:
        lines.append("")
        lines.append("Labels:")
        for name, target in program.labels.items():
            lines.append(f"{name}: {target}")
    return "\n".join(lines)


def format_state(state: ExecutionState) -> str:
    lines = ["Registers:", DELIMITER]
    for name, value in state.registers.items():
        lines.append(f"{name:<5}: {value:<10}".rstrip())
    lines.append(DELIMITER)

    lines.append("")
    if state.stack:
        lines.extend(["Stack:", DELIMITER])
        for depth, address in enumerate(state.stack):
            lines.append(f"{depth:<10}: {address}")
        lines.append(DELIMITER)
    else:
        lines.append("Stack: Empty")

    lines.extend(
        [
            "",
            "Flags:",
            DELIMITER,
            f"ZF: {int(state.zero_flag)}",
            f"CF: {int(state.carry_flag)}",
            DELIMITER,
            "",
            f"Output: {state.output}",
            "",
            f"RIP: {state.ip}",
        ]
    )
    return "\n".join(lines)
