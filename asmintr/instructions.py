from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


class Opcode(str, Enum):
    MOV = "mov"
    INC = "inc"
    DEC = "dec"
    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    DIV = "div"
    CALL = "call"
    CMP = "cmp"

    JMP = "jmp"
    JNE = "jne"
    JE = "je"
    JGE = "jge"
    JG = "jg"
    JLE = "jle"
    JL = "jl"

    MSG = "msg"
    RET = "ret"
    END = "end"

    # Not source mnemonics: a `name:` line and an empty/unknown line.
    LABEL = "label"
    NOP = "nop"


BINARY_OPCODES = frozenset({Opcode.MOV, Opcode.ADD, Opcode.SUB, Opcode.MUL, Opcode.DIV})
UNARY_OPCODES = frozenset({Opcode.INC, Opcode.DEC})
JUMP_OPCODES = frozenset(
    {Opcode.JMP, Opcode.JNE, Opcode.JE, Opcode.JGE, Opcode.JG, Opcode.JLE, Opcode.JL}
)
MNEMONICS = frozenset(op.value for op in Opcode if op not in {Opcode.LABEL, Opcode.NOP})


class Instruction:
    opcode: Opcode

    @property
    def operands(self) -> tuple[str, ...]:
        return ()


@dataclass(frozen=True, slots=True)
class Binary(Instruction):
    """`mov`/`add`/`sub`/`mul`/`div`: dst = dst <op> src."""

    opcode: Opcode
    dst: str
    src: str

    @property
    def operands(self) -> tuple[str, ...]:
        return (self.dst, self.src)


@dataclass(frozen=True, slots=True)
class Unary(Instruction):
    opcode: Opcode
    dst: str

    @property
    def operands(self) -> tuple[str, ...]:
        return (self.dst,)


@dataclass(frozen=True, slots=True)
class Label(Instruction):
    opcode: ClassVar[Opcode] = Opcode.LABEL
    name: str

    @property
    def operands(self) -> tuple[str, ...]:
        return (self.name,)


@dataclass(frozen=True, slots=True)
class Call(Instruction):
    opcode: ClassVar[Opcode] = Opcode.CALL
    label: str

    @property
    def operands(self) -> tuple[str, ...]:
        return (self.label,)


@dataclass(frozen=True, slots=True)
class Compare(Instruction):
    opcode: ClassVar[Opcode] = Opcode.CMP
    left: str
    right: str

    @property
    def operands(self) -> tuple[str, ...]:
        return (self.left, self.right)


@dataclass(frozen=True, slots=True)
class Jump(Instruction):
    opcode: Opcode
    label: str

    @property
    def operands(self) -> tuple[str, ...]:
        return (self.label,)


@dataclass(frozen=True, slots=True)
class Message(Instruction):
    """`msg` with its raw comma-separated tokens.

    A bare `'` token is kept as its own token so the interpreter can put back
    the separator a quoted literal like `', '` was split on.
    """

    opcode: ClassVar[Opcode] = Opcode.MSG
    tokens: tuple[str, ...]

    @property
    def operands(self) -> tuple[str, ...]:
        return self.tokens


@dataclass(frozen=True, slots=True)
class Return(Instruction):
    opcode: ClassVar[Opcode] = Opcode.RET


@dataclass(frozen=True, slots=True)
class End(Instruction):
    opcode: ClassVar[Opcode] = Opcode.END


@dataclass(frozen=True, slots=True)
class Nop(Instruction):
    opcode: ClassVar[Opcode] = Opcode.NOP


ARITY: dict[Opcode, int] = {
    **{op: 2 for op in BINARY_OPCODES},
    **{op: 1 for op in UNARY_OPCODES},
    **{op: 1 for op in JUMP_OPCODES},
    Opcode.CALL: 1,
    Opcode.CMP: 2,
    Opcode.MSG: 1,
    Opcode.RET: 0,
    Opcode.END: 0,
}


def build_instruction(opcode: Opcode, operands: list[str]) -> Instruction:
    """Bind already arity-checked operand tokens to the variant for `opcode`."""
    if opcode in BINARY_OPCODES:
        return Binary(opcode=opcode, dst=operands[0], src=operands[1])
    if opcode in UNARY_OPCODES:
        return Unary(opcode=opcode, dst=operands[0])
    if opcode in JUMP_OPCODES:
        return Jump(opcode=opcode, label=operands[0])
    if opcode == Opcode.CALL:
        return Call(label=operands[0])
    if opcode == Opcode.CMP:
        return Compare(left=operands[0], right=operands[1])
    if opcode == Opcode.MSG:
        return Message(tokens=tuple(operands))
    if opcode == Opcode.RET:
        return Return()
    if opcode == Opcode.END:
        return End()
    raise ValueError(f"not a source mnemonic: {opcode.value}")
