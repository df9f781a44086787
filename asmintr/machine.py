from __future__ import annotations

import re
from dataclasses import dataclass, field

from asmintr.errors import ArithmeticFault, StackUnderflowError

I64_MIN = -(2**63)
I64_MAX = 2**63 - 1

_INT_LITERAL = re.compile(r"[+-]?[0-9]+")


def parse_literal(token: str) -> int | None:
    """Return the value of a signed 64-bit decimal literal, or None if `token` is not one."""
    if not _INT_LITERAL.fullmatch(token):
        return None
    value = int(token)
    if not I64_MIN <= value <= I64_MAX:
        return None
    return value


def checked(value: int) -> int:
    if not I64_MIN <= value <= I64_MAX:
        raise ArithmeticFault(f"integer overflow: {value}")
    return value


def div_trunc(a: int, b: int) -> int:
    if b == 0:
        raise ArithmeticFault("division by zero")
    q = abs(a) // abs(b)
    return checked(q if (a < 0) == (b < 0) else -q)


@dataclass(slots=True)
class ExecutionState:
    registers: dict[str, int] = field(default_factory=dict)
    stack: list[int] = field(default_factory=list)
    ip: int = 0
    zero_flag: bool = False
    carry_flag: bool = False
    output: str = ""

    def read(self, name: str) -> int:
        return self.registers.get(name, 0)

    def write(self, name: str, value: int) -> None:
        self.registers[name] = checked(value)

    def resolve(self, token: str) -> int:
        """Constant-or-register: a literal as-is, otherwise the register (0 if never set)."""
        value = parse_literal(token)
        if value is not None:
            return value
        return self.read(token)

    def compare(self, left: int, right: int) -> None:
        self.zero_flag = left == right
        self.carry_flag = left < right

    def push_return(self, address: int) -> None:
        self.stack.append(address)

    def pop_return(self) -> int:
        if not self.stack:
            raise StackUnderflowError("ret with empty call stack")
        return self.stack.pop()
