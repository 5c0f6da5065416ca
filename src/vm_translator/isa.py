'''
tabla formal del juego de instrucciones VM (comandos, aridad, plantillas de la ALU)
'''

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Optional

from .memory_map import LCL, ARG, THIS, THAT

@dataclass(frozen=True)
class CSpec:
    """Especificación de un comando VM.

    - kind: 'memory','arith','branch','function','call','return'
    - arity: número de argumentos tras la palabra clave
    - forms: forma de los argumentos (solo documentación, no rango)
    """
    kind: str
    arity: int
    forms: Optional[str] = None

@dataclass(frozen=True)
class AluSpec:
    """Plantilla de una operación de la ALU.

    - operands: 1 (unaria) o 2 (binaria)
    - comp: expresión Hack con D = operando a (cima) y M = operando b
    - jump: condición sobre comp para las comparaciones (None si no compara)
    """
    operands: int
    comp: str
    jump: Optional[str] = None

# Comandos VM
SPEC: Dict[str, CSpec] = {}

def _add(name: str, spec: CSpec):
    SPEC[name] = spec

_add("push",     CSpec("memory", 2, "segment index"))
_add("pop",      CSpec("memory", 2, "segment index"))
_add("label",    CSpec("branch", 1, "name"))
_add("goto",     CSpec("branch", 1, "name"))
_add("if-goto",  CSpec("branch", 1, "name"))
_add("function", CSpec("function", 2, "name n_locals"))
_add("call",     CSpec("call", 2, "name n_args"))
_add("return",   CSpec("return", 0))

# Operaciones de la ALU: b es el operando apilado primero, a el de la cima
ALU: Dict[str, AluSpec] = {
    "add": AluSpec(2, "D+M"),          # b + a
    "sub": AluSpec(2, "M-D"),          # b - a
    "and": AluSpec(2, "M&D"),
    "or":  AluSpec(2, "M|D"),
    "neg": AluSpec(1, "-D"),
    "not": AluSpec(1, "!D"),
    "eq":  AluSpec(2, "M-D", "JEQ"),   # b - a == 0
    "gt":  AluSpec(2, "M-D", "JGT"),   # b - a > 0
    "lt":  AluSpec(2, "D-M", "JGT"),   # a - b > 0
}

for _op in ALU:
    _add(_op, CSpec("arith", 0))

# Segmentos con celda base (puntero) y segmentos directos
POINTER_SEGMENTS: Dict[str, str] = {
    "local": LCL,
    "argument": ARG,
    "this": THIS,
    "that": THAT,
}
DIRECT_SEGMENTS = frozenset({"constant", "temp", "pointer", "static"})
INTERNAL_SEGMENTS = frozenset({"general"})
SEGMENTS = frozenset(POINTER_SEGMENTS) | DIRECT_SEGMENTS | INTERNAL_SEGMENTS

# pointer 0/1 seleccionan directamente las celdas base de this/that
POINTER_CELLS = (THIS, THAT)
