'''
emulador de la CPU Hack para ejecutar y verificar el código generado
'''

from __future__ import annotations
from typing import Dict, List, Optional, Sequence, Union

from .encoding import Encoded
from .memory_map import PREDEFINED
from .utils import u16, sign_extend

RAM_SIZE = 0x8000

def alu(x: int, y: int, c: int) -> int:
    """ALU Hack: c son los bits zx nx zy ny f no (de mayor a menor)."""
    zx, nx, zy, ny, f, no = ((c >> s) & 1 for s in (5, 4, 3, 2, 1, 0))
    if zx: x = 0
    if nx: x = ~x
    if zy: y = 0
    if ny: y = ~y
    out = (x + y) if f else (x & y)
    if no: out = ~out
    return u16(out)

def _jumps(out: int, j: int) -> bool:
    value = sign_extend(out, 16)
    return bool((j & 0b100 and value < 0) or
                (j & 0b010 and value == 0) or
                (j & 0b001 and value > 0))

class HackCPU:
    """CPU Hack con ROM de palabras de 16 bits y RAM de 32K palabras."""

    def __init__(self, rom: Sequence[Union[int, Encoded]], ram: Optional[Dict[Union[int, str], int]] = None):
        self.rom: List[int] = [w.word if isinstance(w, Encoded) else u16(w) for w in rom]
        self.ram: List[int] = [0] * RAM_SIZE
        self.a = 0
        self.d = 0
        self.pc = 0
        self.halted = False
        for addr, value in (ram or {}).items():
            self.poke(addr, value)

    def _addr(self, addr: Union[int, str]) -> int:
        return PREDEFINED[addr] if isinstance(addr, str) else addr

    def poke(self, addr: Union[int, str], value: int) -> None:
        self.ram[self._addr(addr)] = u16(value)

    def peek(self, addr: Union[int, str], *, signed: bool = True) -> int:
        v = self.ram[self._addr(addr)]
        return sign_extend(v) if signed else v

    @property
    def stack_top(self) -> int:
        """Valor (con signo) de RAM[SP-1]."""
        return self.peek(self.peek("SP") - 1)

    def step(self) -> None:
        if self.halted or not 0 <= self.pc < len(self.rom):
            self.halted = True
            return
        word = self.rom[self.pc]

        # Instrucción A
        if not word & 0x8000:
            self.a = word
            self.pc += 1
            return

        # Instrucción C: 111a cccc ccdd djjj
        a_bit = (word >> 12) & 1
        comp = (word >> 6) & 0x3F
        dest = (word >> 3) & 0x7
        jump = word & 0x7

        address = self.a
        y = self.ram[address & (RAM_SIZE - 1)] if a_bit else self.a
        out = alu(self.d, y, comp)

        if dest & 0b001:
            self.ram[address & (RAM_SIZE - 1)] = out
        if dest & 0b010:
            self.d = out
        if dest & 0b100:
            self.a = out

        if _jumps(out, jump):
            # '(X) @X 0;JMP' es el bucle de parada convencional
            if jump == 0b111 and address == self.pc - 1:
                self.halted = True
            self.pc = address
        else:
            self.pc += 1

    def run(self, max_steps: int = 1_000_000) -> int:
        """Ejecuta hasta salir de la ROM, llegar al bucle de parada o agotar max_steps.
        Devuelve los pasos ejecutados."""
        steps = 0
        while not self.halted and steps < max_steps:
            self.step()
            steps += 1
        return steps
