from __future__ import annotations
import re
from typing import Optional

from .memory_map import PREDEFINED

COMMENT_SPLIT_RE = re.compile(r"//")

def strip_comment(line: str) -> str:
    """Remove comments starting with '//'"""
    m = COMMENT_SPLIT_RE.split(line, maxsplit=1)
    if not m:
        return line.strip()
    return m[0].strip()

IDENT_RE = re.compile(r"^[A-Za-z_.:][A-Za-z0-9_.:]*$")
UNIT_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")
NUMBER_RE = re.compile(r"^\d+$")

# Shape of a static cell symbol: <unit>.<index>
STATIC_SYMBOL_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*\.\d+$")

def is_identifier(token: str) -> bool:
    """Function and label names: letters, digits, '_', '.', ':' (no leading digit, no '$')."""
    return bool(IDENT_RE.match(token))

def is_unit_name(token: str) -> bool:
    return bool(UNIT_RE.match(token))

def is_number(token: str) -> bool:
    return bool(NUMBER_RE.match(token))

def function_name_error(token: str) -> Optional[str]:
    """Why token cannot name a function (its entry label), or None if it can.

    Entry labels share the assembler namespace with predefined symbols and
    with static cells, so neither shape is allowed.
    """
    if not is_identifier(token):
        return "Nombre de función inválido"
    if token in PREDEFINED:
        return "Nombre de función reservado por el ensamblador Hack"
    if STATIC_SYMBOL_RE.match(token):
        return "Nombre de función con forma de variable static"
    return None

def split_words(line: str):
    """Return (keyword, args) from a comment-free line. Case is preserved."""
    parts = line.split()
    if not parts:
        return "", []
    return parts[0], parts[1:]
