"""Translator configuration."""

from __future__ import annotations
from dataclasses import dataclass

@dataclass
class TranslatorConfig:
    """Opciones de una traducción completa.

    Los valores *_base son los contenidos iniciales de SP y de las celdas
    base que fija el código de arranque.
    """
    bootstrap: bool = True
    entry: str = "Sys.init"
    debug: bool = False
    batch_size: int = 100
    stack_base: int = 256
    local_base: int = 256
    argument_base: int = 256
    this_base: int = 2048
    that_base: int = 2048
