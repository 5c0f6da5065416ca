from __future__ import annotations
from typing import List

from .config import TranslatorConfig
from .context import TranslationContext
from .function import emit_call
from .lexer import function_name_error
from .memory_map import SP, LCL, ARG, THIS, THAT
from .utils import fits_a_value
from .diagnostics import TranslationError

def emit(ctx: TranslationContext, config: TranslatorConfig) -> List[str]:
    """Código de arranque: fija SP y las celdas base y llama a config.entry sin argumentos."""
    problem = function_name_error(config.entry)
    if problem:
        raise TranslationError.at(f"{problem} (entrada): '{config.entry}'")

    code: List[str] = []
    for cell, value in (
        (SP, config.stack_base),
        (LCL, config.local_base),
        (ARG, config.argument_base),
        (THIS, config.this_base),
        (THAT, config.that_base),
    ):
        if not fits_a_value(value):
            raise TranslationError.at(f"Valor inicial de {cell} fuera de rango: {value}")
        code += [f"@{value}", "D=A", f"@{cell}", "M=D"]

    code += emit_call(config.entry, 0, ctx)
    return code
