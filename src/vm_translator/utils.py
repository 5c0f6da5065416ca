'''
palabras de 16 bits de la máquina Hack: máscara, signo y formatos de salida
'''

from __future__ import annotations

WORD_BITS = 16
U16_MASK = (1 << WORD_BITS) - 1

# Una instrucción A carga 15 bits: el bit 15 a 1 la convertiría en instrucción C
MAX_A_VALUE = 0x7FFF

def u16(x: int) -> int:
    """Recorta a una palabra Hack (aritmética módulo 2^16)."""
    return x & U16_MASK

def sign_extend(x: int, bits: int = WORD_BITS) -> int:
    """Interpreta los 'bits' bits bajos de x en complemento a dos."""
    if bits <= 0:
        raise ValueError("bits debe ser positivo")
    x &= (1 << bits) - 1
    return x - (1 << bits) if x >> (bits - 1) else x

def fits_a_value(x: int) -> bool:
    """True si x se puede cargar literalmente con '@x'."""
    return 0 <= x <= MAX_A_VALUE

def to_bin16(x: int) -> str:
    """Palabra en binario, 16 dígitos (formato de los .hack)."""
    return f"{u16(x):016b}"

def to_hex16(x: int, *, prefix: bool = True) -> str:
    s = f"{u16(x):04x}"
    return f"0x{s}" if prefix else s
