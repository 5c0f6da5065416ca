'''
contexto de traducción: contador de etiquetas, unidad actual y ámbito de etiquetas
'''

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional

from .lexer import is_unit_name, function_name_error
from .diagnostics import TranslationError

@dataclass
class LabelAllocator:
    """Contador monótono compartido por toda la traducción de un programa.

    Cada comparación y cada llamada consumen exactamente un valor.
    """
    counter: int = 0

    def next(self) -> int:
        n = self.counter
        self.counter += 1
        return n

@dataclass
class TranslationContext:
    """Estado mutable que se pasa explícitamente a cada emisor.

    Uno por ejecución; no es seguro compartirlo entre traducciones concurrentes.
    """
    unit: str = "Main"
    debug: bool = False
    labels: LabelAllocator = field(default_factory=LabelAllocator)
    function: Optional[str] = None
    functions: List[str] = field(default_factory=list)

    def begin_unit(self, unit: str) -> None:
        """Cambia de unidad fuente: nuevo espacio de static y de etiquetas."""
        if not is_unit_name(unit):
            raise TranslationError.at(
                f"Nombre de unidad inválido: '{unit}'", file=unit,
                hint="se usa para nombrar variables static (<unidad>.<i>)")
        self.unit = unit
        self.function = None

    def begin_function(self, name: str) -> None:
        problem = function_name_error(name)
        if problem:
            raise TranslationError.at(f"{problem}: '{name}'", file=self.unit)
        self.function = name
        self.functions.append(name)

    @property
    def scope(self) -> str:
        """Función actual, o '$<unidad>' antes de la primera función.

        El '$' inicial separa el ámbito de unidad del de una función que
        se llame igual que la unidad.
        """
        return self.function if self.function is not None else f"${self.unit}"

    def qualify(self, label: str) -> str:
        """Nombre ensamblador de una etiqueta declarada por el usuario."""
        return f"{self.scope}${label}"

    def static_symbol(self, index: int) -> str:
        return f"{self.unit}.{index}"

    def comparison_labels(self, op: str) -> tuple[str, str]:
        n = self.labels.next()
        return f"${op}.true.{n}", f"${op}.end.{n}"

    def return_label(self, callee: str) -> str:
        return f"$ret.{callee}.{self.labels.next()}"
