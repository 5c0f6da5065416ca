# src/vm_translator/encoding.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from .linker import SYMBOL_RE
from .memory_map import VARIABLE_BASE
from .utils import u16, fits_a_value
from .diagnostics import Diagnostic, error

# ---------------- Resultados de codificación ----------------

@dataclass(frozen=True)
class Encoded:
    word: int     # u16
    pc: int       # dirección de ROM de esta instrucción
    line: int
    text: str

@dataclass(frozen=True)
class EncodeResult:
    words: List[Encoded]
    variables: Dict[str, int]
    diagnostics: List[Diagnostic]

# ---------------- Tablas de la instrucción C ----------------

# bits zx nx zy ny f no, con A como operando y (a=0)
COMP: Dict[str, int] = {
    "0":   0b101010, "1":   0b111111, "-1":  0b111010,
    "D":   0b001100, "A":   0b110000,
    "!D":  0b001101, "!A":  0b110001,
    "-D":  0b001111, "-A":  0b110011,
    "D+1": 0b011111, "A+1": 0b110111,
    "D-1": 0b001110, "A-1": 0b110010,
    "D+A": 0b000010, "D-A": 0b010011, "A-D": 0b000111,
    "D&A": 0b000000, "D|A": 0b010101,
}

# Formas conmutativas equivalentes
COMP_ALIASES: Dict[str, str] = {
    "A+D": "D+A", "A&D": "D&A", "A|D": "D|A", "1+D": "D+1", "1+A": "A+1",
}

JUMP: Dict[str, int] = {
    "": 0b000, "JGT": 0b001, "JEQ": 0b010, "JGE": 0b011,
    "JLT": 0b100, "JNE": 0b101, "JLE": 0b110, "JMP": 0b111,
}

DEST_BITS: Dict[str, int] = {"A": 0b100, "D": 0b010, "M": 0b001}

# ---------------- Helpers de empaquetado de bits ----------------

def _pack_C(a: int, comp: int, dest: int, jump: int) -> int:
    return u16(0b111 << 13 |
               (a & 0x1) << 12 |
               (comp & 0x3F) << 6 |
               (dest & 0x7) << 3 |
               (jump & 0x7))

def split_c(text: str) -> Tuple[str, str, str]:
    """'dest=comp;jump' -> (dest, comp, jump), con dest y jump opcionales."""
    dest, comp = ("", text)
    if "=" in comp:
        dest, comp = comp.split("=", 1)
    jump = ""
    if ";" in comp:
        comp, jump = comp.split(";", 1)
    return dest, comp, jump

def comp_bits(comp: str) -> Optional[Tuple[int, int]]:
    """Devuelve (a, cccccc) o None si la expresión no existe."""
    a = 1 if "M" in comp else 0
    if a and "A" in comp:
        return None
    key = comp.replace("M", "A")
    key = COMP_ALIASES.get(key, key)
    if key not in COMP:
        return None
    return a, COMP[key]

def dest_bits(dest: str) -> Optional[int]:
    bits = 0
    for ch in dest:
        if ch not in DEST_BITS or bits & DEST_BITS[ch]:
            return None
        bits |= DEST_BITS[ch]
    return bits

# ---------------- Codificador principal (pasada 2) ----------------

def encode(
    instructions: List[Tuple[str, int]],
    symtab: Dict[str, int],
    *,
    filename: str | None = None,
) -> EncodeResult:
    diags: List[Diagnostic] = []
    words: List[Encoded] = []
    variables: Dict[str, int] = {}
    next_var = VARIABLE_BASE

    for pc, (text, line) in enumerate(instructions):
        # Instrucción A: @valor o @símbolo
        if text.startswith("@"):
            target = text[1:]
            if target.isdigit():
                value = int(target)
                if not fits_a_value(value):
                    diags.append(error(f"Valor de instrucción A fuera de rango: {value}", line=line, file=filename))
                    continue
            elif SYMBOL_RE.match(target):
                if target in symtab:
                    value = symtab[target]
                else:
                    # símbolo no declarado como etiqueta: variable nueva
                    if target not in variables:
                        variables[target] = next_var
                        next_var += 1
                    value = variables[target]
            else:
                diags.append(error(f"Operando de instrucción A inválido: '{target}'", line=line, file=filename))
                continue
            words.append(Encoded(word=u16(value), pc=pc, line=line, text=text))
            continue

        # Instrucción C: dest=comp;jump
        dest, comp, jump = split_c(text)
        cb = comp_bits(comp)
        db = dest_bits(dest)
        if cb is None:
            diags.append(error(f"Expresión comp desconocida: '{comp}'", line=line, file=filename))
            continue
        if db is None:
            diags.append(error(f"Destino inválido: '{dest}'", line=line, file=filename))
            continue
        if jump not in JUMP:
            diags.append(error(f"Condición de salto desconocida: '{jump}'", line=line, file=filename))
            continue
        a, c = cb
        words.append(Encoded(word=_pack_C(a, c, db, JUMP[jump]), pc=pc, line=line, text=text))

    return EncodeResult(words=words, variables=variables, diagnostics=diags)
