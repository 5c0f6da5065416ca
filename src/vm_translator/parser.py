# src/vm_translator/parser.py
from __future__ import annotations
from typing import List, Tuple, Optional

from .lexer import strip_comment, split_words, is_identifier, is_number, function_name_error
from .ast import (
    Instruction, MemoryAccess, ArithLogic, Branch, FunctionDef, FunctionCall, Return,
)
from .isa import SPEC, SEGMENTS, INTERNAL_SEGMENTS, POINTER_SEGMENTS
from .memory_map import TEMP_SIZE
from .utils import MAX_A_VALUE, fits_a_value
from .diagnostics import Diagnostic, TranslationError

def _parse_count(token: str, what: str, *, line: int, file: Optional[str]) -> int:
    if not is_number(token):
        raise TranslationError.at(
            f"{what} '{token}' no es un entero sin signo", line=line, file=file)
    return int(token, 10)

def _parse_name(token: str, what: str, *, line: int, file: Optional[str]) -> str:
    if not is_identifier(token):
        raise TranslationError.at(
            f"Nombre de {what} inválido: '{token}'", line=line, file=file,
            hint="letras, dígitos, '_', '.', ':' y sin dígito inicial")
    return token

def _parse_function_name(token: str, *, line: int, file: Optional[str]) -> str:
    problem = function_name_error(token)
    if problem:
        raise TranslationError.at(
            f"{problem}: '{token}'", line=line, file=file,
            hint="ni símbolos predefinidos (SP, LCL, R13, SCREEN...) ni <unidad>.<índice>")
    return token

def _parse_memory(op: str, args: List[str], *, line: int, file: Optional[str]) -> MemoryAccess:
    segment = args[0]
    if segment not in SEGMENTS:
        raise TranslationError.at(
            f"Segmento de memoria inexistente: '{args[0]}'", line=line, file=file)
    if segment in INTERNAL_SEGMENTS:
        raise TranslationError.at(
            f"Segmento '{segment}' reservado para uso interno del traductor",
            line=line, file=file)
    index = _parse_count(args[1], "Índice", line=line, file=file)

    if segment == "constant":
        if op == "pop":
            raise TranslationError.at(
                "No se puede hacer pop sobre 'constant'", line=line, file=file,
                hint="una constante no es una posición de memoria")
        if not fits_a_value(index):
            raise TranslationError.at(
                f"Constante fuera de rango (0..{MAX_A_VALUE}): {index}", line=line, file=file)
    elif segment in POINTER_SEGMENTS and not fits_a_value(index):
        raise TranslationError.at(
            f"Índice fuera de rango (0..{MAX_A_VALUE}): {index}", line=line, file=file,
            hint="el desplazamiento se carga con una instrucción A de 15 bits")
    elif segment == "pointer" and index not in (0, 1):
        raise TranslationError.at(
            f"Índice de pointer fuera de rango: {index}", line=line, file=file,
            hint="pointer solo admite 0 (this) y 1 (that)")
    elif segment == "temp" and index >= TEMP_SIZE:
        raise TranslationError.at(
            f"Índice de temp fuera de rango (0..{TEMP_SIZE - 1}): {index}", line=line, file=file)
    return MemoryAccess(op=op, segment=segment, index=index, line=line)

def parse_line(raw: str, *, line: int = 0, file: Optional[str] = None) -> Optional[Instruction]:
    """Convierte una línea en una Instruction; None si es vacía o comentario.

    Lanza TranslationError ante cualquier error de sintaxis.
    """
    core = strip_comment(raw)
    if not core:
        return None
    keyword, args = split_words(core)

    if keyword not in SPEC:
        raise TranslationError.at(f"Comando desconocido: '{keyword}'", line=line, file=file)
    cspec = SPEC[keyword]
    if len(args) != cspec.arity:
        form = f" {cspec.forms}" if cspec.forms else ""
        raise TranslationError.at(
            f"'{keyword}' espera {cspec.arity} argumento(s), recibió {len(args)}",
            line=line, file=file, hint=f"uso: {keyword}{form}")

    if cspec.kind == "memory":
        return _parse_memory(keyword, args, line=line, file=file)
    if cspec.kind == "arith":
        return ArithLogic(op=keyword, line=line)
    if cspec.kind == "branch":
        name = _parse_name(args[0], "etiqueta", line=line, file=file)
        return Branch(kind=keyword, name=name, line=line)
    if cspec.kind == "function":
        name = _parse_function_name(args[0], line=line, file=file)
        n_locals = _parse_count(args[1], "Número de locales", line=line, file=file)
        return FunctionDef(name=name, n_locals=n_locals, line=line)
    if cspec.kind == "call":
        name = _parse_function_name(args[0], line=line, file=file)
        n_args = _parse_count(args[1], "Número de argumentos", line=line, file=file)
        return FunctionCall(name=name, n_args=n_args, line=line)
    return Return(line=line)

def parse(text: str, *, filename: Optional[str] = None) -> Tuple[List[Instruction], List[Diagnostic]]:
    """
    Devuelve (nodes, diagnostics) donde nodes es la lista de instrucciones VM.

    Reglas:
      - Comentarios: '//' hasta fin de línea; líneas vacías se ignoran.
      - La primera palabra selecciona el comando; el resto son argumentos.
      - El primer error detiene el análisis: diagnostics tiene a lo sumo un error
        y nodes no debe usarse si hay diagnósticos.
    """
    nodes: List[Instruction] = []
    diags: List[Diagnostic] = []

    for lineno, raw in enumerate(text.splitlines(), start=1):
        try:
            ins = parse_line(raw, line=lineno, file=filename)
        except TranslationError as ex:
            diags.append(ex.diagnostic)
            break
        if ins is not None:
            nodes.append(ins)

    return nodes, diags
