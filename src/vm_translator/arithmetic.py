'''
traductor aritmético/lógico: operaciones unarias, binarias y comparaciones booleanas
'''

from __future__ import annotations
from typing import List

from .context import TranslationContext
from .isa import ALU
from .memory import push_cell, pop_cell
from .memory_map import R_OPERAND_A, R_OPERAND_B
from .diagnostics import TranslationError

def emit(op: str, ctx: TranslationContext, *, line: int = 0) -> List[str]:
    """Genera el bloque Hack de una operación de la ALU.

    a (cima) va a R13 y, si es binaria, b va a R14; el resultado queda en R14
    y se apila. Verdadero es -1 (todos los bits a 1) y falso es 0.
    """
    if op not in ALU:
        raise TranslationError.at(f"Operación aritmética/lógica desconocida: '{op}'", line=line)
    alu = ALU[op]

    code: List[str] = pop_cell(R_OPERAND_A)
    if alu.operands == 2:
        code += pop_cell(R_OPERAND_B)
    code += [f"@{R_OPERAND_A}", "D=M", f"@{R_OPERAND_B}", f"D={alu.comp}"]

    if alu.jump is None:
        code.append("M=D")
    else:
        true_label, end_label = ctx.comparison_labels(op)
        code += [
            f"@{true_label}",
            f"D;{alu.jump}",
            f"@{R_OPERAND_B}",
            "M=0",
            f"@{end_label}",
            "0;JMP",
            f"({true_label})",
            f"@{R_OPERAND_B}",
            "M=-1",
            f"({end_label})",
        ]

    code += push_cell(R_OPERAND_B)
    return code
