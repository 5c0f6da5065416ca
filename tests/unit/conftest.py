from dataclasses import dataclass, field
from typing import Dict, List

import pytest

from src.vm_translator.assembler import assemble_lines
from src.vm_translator.context import TranslationContext
from src.vm_translator.cpu import HackCPU
from src.vm_translator.translator import translate_unit, translate_program

# Celdas base para fragmentos traducidos sin arranque
BASE_RAM = {"SP": 256, "LCL": 300, "ARG": 400, "THIS": 3000, "THAT": 3010}

@dataclass
class Machine:
    cpu: HackCPU
    variables: Dict[str, int] = field(default_factory=dict)
    lines: List[str] = field(default_factory=list)

    def peek(self, addr):
        if isinstance(addr, str) and addr in self.variables:
            addr = self.variables[addr]
        return self.cpu.peek(addr)

    @property
    def sp(self) -> int:
        return self.cpu.peek("SP")

    @property
    def top(self) -> int:
        return self.cpu.stack_top

def execute(lines, *, ram=None, max_steps=2_000_000) -> Machine:
    words, diags, _, enc = assemble_lines(lines)
    assert not diags, [str(d) for d in diags]
    cpu = HackCPU(words, ram=ram)
    cpu.run(max_steps)
    assert cpu.halted, "el programa no terminó"
    return Machine(cpu=cpu, variables=enc.variables, lines=list(lines))

@pytest.fixture
def run_vm():
    """Traduce un fragmento VM (sin arranque) y lo ejecuta con BASE_RAM."""
    def _run(src: str, *, unit: str = "Test", ram=None) -> Machine:
        lines = translate_unit(src, unit, TranslationContext())
        mem = dict(BASE_RAM)
        mem.update(ram or {})
        return execute(lines, ram=mem)
    return _run

@pytest.fixture
def run_program():
    """Traduce un programa multi-unidad (con arranque por defecto) y lo ejecuta."""
    def _run(units, config=None, *, ram=None) -> Machine:
        result = translate_program(units, config)
        return execute(result.lines, ram=ram)
    return _run
