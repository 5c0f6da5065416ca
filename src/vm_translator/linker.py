# src/vm_translator/linker.py
from __future__ import annotations
import re
from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

from .lexer import strip_comment
from .memory_map import PREDEFINED
from .diagnostics import Diagnostic, error

# ---------- Resultados de la pasada 1 ----------

@dataclass(frozen=True)
class LinkResult:
    symtab: Dict[str, int]
    instructions: List[Tuple[str, int]]   # (texto sin comentarios, línea fuente)
    diagnostics: List[Diagnostic]

SYMBOL_RE = re.compile(r"^[A-Za-z_.$:][A-Za-z0-9_.$:]*$")
LABEL_DECL_RE = re.compile(r"^\((?P<name>[^)]*)\)$")

# ---------- Pasada 1 (etiquetas -> dirección de ROM) ----------

def first_pass(lines: Iterable[str], *, filename: str | None = None) -> LinkResult:
    """Recorre el ensamblador Hack y asigna a cada '(ETIQUETA)' la dirección
    de la siguiente instrucción. Las etiquetas no ocupan ROM."""
    symtab: Dict[str, int] = dict(PREDEFINED)
    instructions: List[Tuple[str, int]] = []
    diags: List[Diagnostic] = []

    for lineno, raw in enumerate(lines, start=1):
        core = strip_comment(raw)
        if not core:
            continue

        m = LABEL_DECL_RE.match(core)
        if m:
            name = m.group("name").strip()
            if not SYMBOL_RE.match(name):
                diags.append(error(f"Nombre de etiqueta inválido: '{name}'", line=lineno, file=filename))
            elif name in symtab:
                diags.append(error(f"Etiqueta redefinida: {name}", line=lineno, file=filename))
            else:
                symtab[name] = len(instructions)
            continue

        # 'D = M' equivale a 'D=M'
        instructions.append(("".join(core.split()), lineno))

    return LinkResult(symtab=symtab, instructions=instructions, diagnostics=diags)
