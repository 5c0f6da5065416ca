from __future__ import annotations
import logging
from typing import Iterable, List, Tuple

from .linker import first_pass, LinkResult
from .encoding import encode, EncodeResult, Encoded
from .diagnostics import Diagnostic

LOG = logging.getLogger("vm_translator.assembler")

def assemble_lines(lines: Iterable[str], *, filename: str | None = None
                   ) -> Tuple[List[Encoded], List[Diagnostic], LinkResult, EncodeResult]:
    """Hace PASADA 1 (etiquetas) y PASADA 2 (codificación y variables).
    Devuelve (palabras, diagnostics_totales, link_result, enc_result)."""
    link = first_pass(lines, filename=filename)
    enc = encode(link.instructions, link.symtab, filename=filename)
    diags = list(link.diagnostics) + list(enc.diagnostics)
    LOG.debug("%d palabras, %d etiquetas, %d variables, %d diagnósticos",
              len(enc.words), len(link.symtab), len(enc.variables), len(diags))
    return enc.words, diags, link, enc

def assemble_text(text: str, *, filename: str | None = None
                  ) -> Tuple[List[Encoded], List[Diagnostic], LinkResult, EncodeResult]:
    return assemble_lines(text.splitlines(), filename=filename)
