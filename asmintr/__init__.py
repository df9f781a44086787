from __future__ import annotations

import logging

from asmintr.api import compile_source, interpret, run_source
from asmintr.errors import (
    ArithmeticFault,
    AsmError,
    ParseError,
    StackUnderflowError,
    StepLimitExceeded,
    UnresolvedLabelError,
    VMError,
)
from asmintr.instructions import Instruction, Opcode
from asmintr.machine import ExecutionState
from asmintr.parser import Program, parse_program
from asmintr.vm import Interpreter, RunResult, run_program

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # Entry points
    "interpret",
    "compile_source",
    "run_source",
    "parse_program",
    "run_program",
    # Core types
    "Program",
    "Instruction",
    "Opcode",
    "Interpreter",
    "ExecutionState",
    "RunResult",
    # Errors
    "AsmError",
    "ParseError",
    "VMError",
    "UnresolvedLabelError",
    "StackUnderflowError",
    "ArithmeticFault",
    "StepLimitExceeded",
]

__version__ = "0.1.0"
