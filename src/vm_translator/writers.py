from __future__ import annotations
from typing import Iterable, List
from .utils import to_bin16, to_hex16
from .encoding import Encoded

def to_hex_lines(words: Iterable[Encoded]) -> List[str]:
    return [to_hex16(w.word) for w in words]

def to_bin_lines(words: Iterable[Encoded]) -> List[str]:
    return [to_bin16(w.word) for w in words]

def write_lines(lines: Iterable[str], path: str, *, batch_size: int = 100) -> None:
    """Escribe las líneas en lotes de a lo sumo batch_size (una escritura por lote)."""
    if batch_size <= 0:
        raise ValueError("batch_size debe ser positivo")
    buf: List[str] = []
    with open(path, "w", encoding="utf-8") as f:
        for line in lines:
            buf.append(line)
            if len(buf) >= batch_size:
                f.write("\n".join(buf) + "\n")
                buf.clear()
        if buf:
            f.write("\n".join(buf) + "\n")

def write_hack(words: Iterable[Encoded], path: str) -> None:
    write_lines(to_bin_lines(words), path)
