'''
traductor de segmentos de memoria: push/pop para cada modo de direccionamiento
'''

from __future__ import annotations
from typing import List, Union

from .context import TranslationContext
from .isa import POINTER_SEGMENTS, POINTER_CELLS, SEGMENTS
from .memory_map import SP, R_ADDRESS, TEMP_SIZE, temp_address
from .utils import MAX_A_VALUE, fits_a_value
from .diagnostics import TranslationError

Cell = Union[int, str]

# *SP = D; SP++
_PUSH_D = ["@SP", "A=M", "M=D", "@SP", "M=M+1"]

# SP--; D = *SP
_POP_D = ["@SP", "M=M-1", "A=M", "D=M"]

def push_cell(cell: Cell) -> List[str]:
    """push de RAM[cell] (dirección cruda o símbolo); segmento 'general'."""
    return [f"@{cell}", "D=M", *_PUSH_D]

def pop_cell(cell: Cell) -> List[str]:
    """pop hacia RAM[cell] (dirección cruda o símbolo); segmento 'general'."""
    return [*_POP_D, f"@{cell}", "M=D"]

def push_value(value: Union[int, str]) -> List[str]:
    """push de un valor inmediato o de la dirección de una etiqueta."""
    return [f"@{value}", "D=A", *_PUSH_D]

def _effective_address(base: str, index: int) -> List[str]:
    # R15 = base + index
    return [f"@{base}", "D=M", f"@{index}", "D=D+A", f"@{R_ADDRESS}", "M=D"]

def _check(op: str, segment: str, index: int, line: int) -> None:
    if op not in ("push", "pop"):
        raise TranslationError.at(f"Operación de memoria desconocida: '{op}'", line=line)
    if segment not in SEGMENTS:
        raise TranslationError.at(f"Segmento de memoria inexistente: '{segment}'", line=line)
    if index < 0:
        raise TranslationError.at(f"Índice negativo: {index}", line=line)
    if segment == "constant" and op == "pop":
        raise TranslationError.at("No se puede hacer pop sobre 'constant'", line=line)
    if segment == "constant" and not fits_a_value(index):
        raise TranslationError.at(f"Constante fuera de rango (0..{MAX_A_VALUE}): {index}", line=line)
    if segment != "static" and not fits_a_value(index):
        # base+i y general cargan el índice con @i
        raise TranslationError.at(f"Índice fuera de rango (0..{MAX_A_VALUE}): {index}", line=line)
    if segment == "pointer" and index not in (0, 1):
        raise TranslationError.at(f"Índice de pointer fuera de rango: {index}", line=line)
    if segment == "temp" and index >= TEMP_SIZE:
        raise TranslationError.at(f"Índice de temp fuera de rango: {index}", line=line)

def emit(op: str, segment: str, index: int, ctx: TranslationContext, *, line: int = 0) -> List[str]:
    """Genera el bloque Hack de 'push/pop segment index'.

    push deja SP incrementado en 1; pop lo decrementa en 1 antes de leer la cima.
    """
    _check(op, segment, index, line)

    if segment in POINTER_SEGMENTS:
        base = POINTER_SEGMENTS[segment]
        if op == "push":
            # addr = base + i; *SP = *addr; SP++
            return [*_effective_address(base, index), "A=M", "D=M", *_PUSH_D]
        # addr = base + i; SP--; *addr = *SP
        return [*_effective_address(base, index), *_POP_D, f"@{R_ADDRESS}", "A=M", "M=D"]

    if segment == "constant":
        return push_value(index)

    if segment == "temp":
        cell: Cell = temp_address(index)
    elif segment == "pointer":
        cell = POINTER_CELLS[index]
    elif segment == "static":
        cell = ctx.static_symbol(index)
    else:  # general
        cell = index

    return push_cell(cell) if op == "push" else pop_cell(cell)
