'''
dataclases de instrucciones VM (MemoryAccess, ArithLogic, Branch, FunctionDef, FunctionCall, Return)
'''

from __future__ import annotations
from dataclasses import dataclass
from typing import Union, Literal

# ---- Segmentos de memoria ----

Segment = Literal[
    "local", "argument", "this", "that",
    "constant", "temp", "pointer", "static", "general",
]

MemOp = Literal["push", "pop"]
BranchKind = Literal["label", "goto", "if-goto"]
AluOp = Literal["add", "sub", "neg", "eq", "gt", "lt", "and", "or", "not"]

# ---- Instrucciones (una por línea de código VM) ----

@dataclass(frozen=True)
class MemoryAccess:
    """push/pop sobre un segmento (p.ej., 'push local 2')."""
    op: MemOp
    segment: Segment
    index: int
    line: int = 0

    def __str__(self) -> str:
        return f"{self.op} {self.segment} {self.index}"

@dataclass(frozen=True)
class ArithLogic:
    """Operación aritmética/lógica sobre la pila (p.ej., 'add', 'not')."""
    op: AluOp
    line: int = 0

    def __str__(self) -> str:
        return self.op

@dataclass(frozen=True)
class Branch:
    """Declaración de etiqueta o salto (label/goto/if-goto)."""
    kind: BranchKind
    name: str
    line: int = 0

    def __str__(self) -> str:
        return f"{self.kind} {self.name}"

@dataclass(frozen=True)
class FunctionDef:
    """Definición de función con n_locals variables locales."""
    name: str
    n_locals: int
    line: int = 0

    def __str__(self) -> str:
        return f"function {self.name} {self.n_locals}"

@dataclass(frozen=True)
class FunctionCall:
    """Llamada a función tras apilar n_args argumentos."""
    name: str
    n_args: int
    line: int = 0

    def __str__(self) -> str:
        return f"call {self.name} {self.n_args}"

@dataclass(frozen=True)
class Return:
    """Retorno de la función actual."""
    line: int = 0

    def __str__(self) -> str:
        return "return"

Instruction = Union[MemoryAccess, ArithLogic, Branch, FunctionDef, FunctionCall, Return]
