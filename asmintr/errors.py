from __future__ import annotations


class AsmError(Exception):
    pass


class ParseError(AsmError):
    def __init__(
        self, message: str, *, line: int | None = None, mnemonic: str | None = None
    ) -> None:
        self.line = line
        self.mnemonic = mnemonic
        prefix = f"line {line}: " if line is not None else ""
        super().__init__(prefix + str(message))


class VMError(AsmError):
    """Faulted termination of a run.

    Distinct from a program that simply runs off the end of its instructions,
    which is a normal (no-output) result. `ip` and `line` may be filled in by
    the interpreter after the fault is raised.
    """

    def __init__(self, message: str, *, ip: int | None = None, line: int | None = None) -> None:
        self.message = str(message)
        self.ip = ip
        self.line = line
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.line is not None:
            return f"line {self.line}: {self.message}"
        return self.message


class UnresolvedLabelError(VMError):
    def __init__(self, label: str, *, ip: int | None = None, line: int | None = None) -> None:
        self.label = label
        super().__init__(f"undefined label: {label!r}", ip=ip, line=line)


class StackUnderflowError(VMError):
    pass


class ArithmeticFault(VMError):
    pass


class StepLimitExceeded(VMError):
    def __init__(self, limit: int, *, ip: int | None = None, line: int | None = None) -> None:
        self.limit = limit
        super().__init__(f"step limit of {limit} exceeded", ip=ip, line=line)
