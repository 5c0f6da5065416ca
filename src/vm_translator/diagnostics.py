'''
diagnósticos del traductor (unidad fuente y línea VM) y error fatal de traducción
'''

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Literal

Severity = Literal["error", "advertencia"]

@dataclass(frozen=True)
class Diagnostic:
    """Problema localizado en una unidad fuente.

    'file' es el nombre de la unidad (o la ruta, para avisos de la CLI) y
    'line' la línea VM, desde 1. 'hint' sugiere cómo corregirlo.
    """
    severity: Severity
    message: str
    file: Optional[str] = None
    line: Optional[int] = None
    hint: Optional[str] = None

    @property
    def location(self) -> str:
        parts = [str(p) for p in (self.file, self.line) if p is not None]
        return ":".join(parts)

    def __str__(self) -> str:
        text = f"{self.severity.upper()}: {self.message}"
        if self.hint:
            text += f"  (pista: {self.hint})"
        return f"{self.location}: {text}" if self.location else text

def error(message: str, *, line: int | None = None, file: str | None = None,
          hint: str | None = None) -> Diagnostic:
    return Diagnostic("error", message, file=file, line=line, hint=hint)

def warning(message: str, *, line: int | None = None, file: str | None = None,
            hint: str | None = None) -> Diagnostic:
    return Diagnostic("advertencia", message, file=file, line=line, hint=hint)


class TranslationError(Exception):
    """Error fatal: aborta la traducción completa, sin salida parcial."""

    def __init__(self, diagnostic: Diagnostic):
        self.diagnostic = diagnostic
        super().__init__(str(diagnostic))

    @classmethod
    def at(cls, message: str, *, line: int | None = None, file: str | None = None,
           hint: str | None = None) -> "TranslationError":
        return cls(error(message, line=line, file=file, hint=hint))
