from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from asmintr.errors import ParseError, UnresolvedLabelError
from asmintr.instructions import (
    ARITY,
    MNEMONICS,
    Instruction,
    Label,
    Nop,
    Opcode,
    build_instruction,
)
from asmintr.lexer import SourceLine, tokenize

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Program:
    """Parsed instructions plus the label table.

    Read-only once built; any number of runs may share one Program.
    """

    instructions: tuple[Instruction, ...]
    labels: Mapping[str, int] = field(default_factory=dict)
    source: str = ""

    def __len__(self) -> int:
        return len(self.instructions)

    def line_of(self, ip: int) -> int | None:
        # One instruction per source line.
        if 0 <= ip < len(self.instructions):
            return ip + 1
        return None

    def label_target(self, name: str, *, ip: int | None = None) -> int:
        try:
            return self.labels[name]
        except KeyError:
            line = self.line_of(ip) if ip is not None else None
            raise UnresolvedLabelError(name, ip=ip, line=line) from None


def resolve_labels(instructions: tuple[Instruction, ...]) -> dict[str, int]:
    labels: dict[str, int] = {}
    for index, instr in enumerate(instructions):
        if isinstance(instr, Label):
            # Jump past the marker itself; a repeated name keeps the last definition.
            labels[instr.name] = index + 1
    return labels


def parse_line(line: SourceLine, *, strict: bool = False) -> Instruction:
    if line.mnemonic is None:
        return Nop()

    if line.mnemonic not in MNEMONICS:
        if line.is_label:
            return Label(name=line.mnemonic.strip(":"))
        if strict:
            raise ParseError(
                f"unknown mnemonic: {line.mnemonic!r}", line=line.lineno, mnemonic=line.mnemonic
            )
        logger.warning("line %d: unknown mnemonic %r treated as nop", line.lineno, line.mnemonic)
        return Nop()

    opcode = Opcode(line.mnemonic)
    required = ARITY[opcode]
    if len(line.operands) < required:
        raise ParseError(
            f"{opcode.value} expects {required} operand(s), got {len(line.operands)}",
            line=line.lineno,
            mnemonic=line.mnemonic,
        )
    return build_instruction(opcode, list(line.operands))


def parse_program(src: str, *, strict: bool = False) -> Program:
    instructions = tuple(parse_line(line, strict=strict) for line in tokenize(src))
    labels = resolve_labels(instructions)
    logger.debug("parsed %d instruction(s), %d label(s)", len(instructions), len(labels))
    return Program(instructions=instructions, labels=MappingProxyType(labels), source=src)
