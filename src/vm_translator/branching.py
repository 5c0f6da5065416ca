from __future__ import annotations
from typing import List

from .context import TranslationContext
from .memory import pop_cell
from .memory_map import R_OPERAND_A
from .diagnostics import TranslationError

def emit(kind: str, name: str, ctx: TranslationContext, *, line: int = 0) -> List[str]:
    """label/goto/if-goto sobre la etiqueta calificada con el ámbito actual.

    if-goto salta si la cima es distinta de cero (cualquier valor, no solo -1).
    """
    target = ctx.qualify(name)
    if kind == "label":
        return [f"({target})"]
    if kind == "goto":
        return [f"@{target}", "0;JMP"]
    if kind == "if-goto":
        return [*pop_cell(R_OPERAND_A), f"@{R_OPERAND_A}", "D=M", f"@{target}", "D;JNE"]
    raise TranslationError.at(f"Comando de salto desconocido: '{kind}'", line=line)
