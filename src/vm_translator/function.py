'''
protocolo de funciones: prólogo, secuencia de llamada y secuencia de retorno

Marco de una llamada (direcciones crecientes hacia arriba):

    ARG  -> arg 0 .. arg n-1
            dirección de retorno      (LCL - 5)
            LCL del llamador          (LCL - 4)
            ARG del llamador          (LCL - 3)
            THIS del llamador         (LCL - 2)
            THAT del llamador         (LCL - 1)
    LCL  -> local 0 .. local k-1
    SP   -> pila de trabajo del llamado
'''

from __future__ import annotations
from typing import List

from . import arithmetic, memory
from .context import TranslationContext
from .memory import push_cell, pop_cell, push_value
from .memory_map import SP, LCL, ARG, THIS, THAT, FRAME_END, RETURN_ADDRESS, NEW_SP
from .utils import fits_a_value
from .diagnostics import TranslationError

# dirección de retorno + LCL, ARG, THIS, THAT guardados
FRAME_SIZE = 5

SAVED_CELLS = (LCL, ARG, THIS, THAT)

# RAM[SP-1] = RAM[RAM[SP-1]]: desreferencia la cima en su sitio
_DEREF_TOP = ["@SP", "A=M-1", "A=M", "D=M", "@SP", "A=M-1", "M=D"]

def emit_function(name: str, n_locals: int, ctx: TranslationContext) -> List[str]:
    """Etiqueta de entrada y n_locals locales inicializadas a 0."""
    ctx.begin_function(name)
    code: List[str] = [f"({name})"]
    for _ in range(n_locals):
        code += memory.emit("push", "constant", 0, ctx)
    return code

def emit_call(name: str, n_args: int, ctx: TranslationContext, *, line: int = 0) -> List[str]:
    """Guarda el marco del llamador, reubica ARG/LCL y salta a 'name'.

    Supone que el llamador ya apiló exactamente n_args argumentos.
    """
    if not fits_a_value(n_args + FRAME_SIZE):
        raise TranslationError.at(f"Demasiados argumentos: {n_args}", line=line)
    return_label = ctx.return_label(name)

    code: List[str] = push_value(return_label)
    for cell in SAVED_CELLS:
        code += push_cell(cell)

    # ARG = SP - (n_args + 5)
    code += push_cell(SP)
    code += push_value(n_args + FRAME_SIZE)
    code += arithmetic.emit("sub", ctx)
    code += pop_cell(ARG)

    # LCL = SP
    code += push_cell(SP)
    code += pop_cell(LCL)

    code += [f"@{name}", "0;JMP", f"({return_label})"]
    return code

def emit_return(ctx: TranslationContext) -> List[str]:
    """Restaura el marco del llamador y deja el valor de retorno en su cima."""
    # $retaddr = *(LCL - 5); se guarda antes de que 'pop argument 0' lo pise (n_args = 0)
    code: List[str] = push_cell(LCL)
    code += push_value(FRAME_SIZE)
    code += arithmetic.emit("sub", ctx)
    code += pop_cell(RETURN_ADDRESS)
    code += [f"@{RETURN_ADDRESS}", "A=M", "D=M", f"@{RETURN_ADDRESS}", "M=D"]

    # $frame = LCL
    code += push_cell(LCL)
    code += pop_cell(FRAME_END)

    # *ARG = valor de retorno
    code += memory.emit("pop", "argument", 0, ctx)

    # $newsp = ARG + 1, antes de restaurar ARG
    code += push_cell(ARG)
    code += push_value(1)
    code += arithmetic.emit("add", ctx)
    code += pop_cell(NEW_SP)

    # THAT, THIS, ARG, LCL = *($frame - 1), ..., *($frame - 4)
    for offset, cell in enumerate(reversed(SAVED_CELLS), start=1):
        code += push_cell(FRAME_END)
        code += push_value(offset)
        code += arithmetic.emit("sub", ctx)
        code += _DEREF_TOP
        code += pop_cell(cell)

    # SP = $newsp descarta el marco completo del llamado
    code += push_cell(NEW_SP)
    code += pop_cell(SP)

    code += [f"@{RETURN_ADDRESS}", "A=M", "0;JMP"]
    return code
