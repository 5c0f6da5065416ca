'''
mapa de memoria de la máquina Hack: celdas base, ventana temp y celdas reservadas
'''

from __future__ import annotations
from typing import Dict

# Celda del puntero de pila y celdas base de los segmentos puntero
SP = "SP"
LCL = "LCL"
ARG = "ARG"
THIS = "THIS"
THAT = "THAT"

# Ventana temp: RAM[5..12]
TEMP_BASE = 5
TEMP_SIZE = 8

# Registros de uso interno del traductor (nunca visibles desde código VM)
R_OPERAND_A = "R13"   # operando de la cima (y condición de if-goto)
R_OPERAND_B = "R14"   # segundo operando y resultado de la ALU
R_ADDRESS = "R15"     # dirección efectiva base+índice de segmentos puntero

# Celdas de marco para 'return': variables que asigna el ensamblador (RAM 16+),
# disjuntas de temp y de R13..R15
FRAME_END = "$frame"
RETURN_ADDRESS = "$retaddr"
NEW_SP = "$newsp"
FRAME_CELLS = (FRAME_END, RETURN_ADDRESS, NEW_SP)

# Primera dirección que el ensamblador usa para variables (static y celdas de marco)
VARIABLE_BASE = 16

# Símbolos predefinidos del ensamblador Hack
PREDEFINED: Dict[str, int] = {
    SP: 0, LCL: 1, ARG: 2, THIS: 3, THAT: 4,
    **{f"R{n}": n for n in range(16)},
    "SCREEN": 0x4000, "KBD": 0x6000,
}

# Tabla completa de direcciones reservadas (documentación y chequeos)
#   0        SP
#   1..4     LCL, ARG, THIS, THAT
#   5..12    temp 0..7
#   13       R13  operando A de la ALU / condición de if-goto
#   14       R14  operando B / resultado de la ALU
#   15       R15  dirección efectiva de segmentos puntero
#   16+      variables: <unidad>.<i> de static, $frame, $retaddr, $newsp
RESERVED: Dict[str, int] = {
    SP: 0, LCL: 1, ARG: 2, THIS: 3, THAT: 4,
    **{f"temp{i}": TEMP_BASE + i for i in range(TEMP_SIZE)},
    R_OPERAND_A: 13, R_OPERAND_B: 14, R_ADDRESS: 15,
}

def address_of(name: str) -> int:
    """Devuelve la dirección de un símbolo predefinido o lanza KeyError."""
    if name in PREDEFINED:
        return PREDEFINED[name]
    raise KeyError(f"Símbolo no predefinido: {name}")

def temp_address(index: int) -> int:
    """Dirección de temp i, con 0 <= i < TEMP_SIZE."""
    if not 0 <= index < TEMP_SIZE:
        raise ValueError(f"Índice de temp fuera de rango: {index}")
    return TEMP_BASE + index

