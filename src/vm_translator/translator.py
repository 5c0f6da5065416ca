from __future__ import annotations
import argparse, logging, os, sys
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Iterable, List, Tuple

from . import arithmetic, bootstrap, branching, memory
from .ast import (
    Instruction, MemoryAccess, ArithLogic, Branch, FunctionDef, FunctionCall, Return,
)
from .assembler import assemble_lines
from .config import TranslatorConfig
from .context import TranslationContext
from .function import emit_function, emit_call, emit_return
from .parser import parse
from .writers import write_lines, write_hack
from .diagnostics import TranslationError, warning

LOG = logging.getLogger("vm_translator")

@dataclass(frozen=True)
class TranslationResult:
    lines: List[str]
    functions: List[str]
    units: List[str]

def translate_instruction(ins: Instruction, ctx: TranslationContext) -> List[str]:
    """Único punto de despacho: cada instrucción va a exactamente un traductor."""
    if isinstance(ins, MemoryAccess):
        code = memory.emit(ins.op, ins.segment, ins.index, ctx, line=ins.line)
    elif isinstance(ins, ArithLogic):
        code = arithmetic.emit(ins.op, ctx, line=ins.line)
    elif isinstance(ins, Branch):
        code = branching.emit(ins.kind, ins.name, ctx, line=ins.line)
    elif isinstance(ins, FunctionDef):
        code = emit_function(ins.name, ins.n_locals, ctx)
    elif isinstance(ins, FunctionCall):
        code = emit_call(ins.name, ins.n_args, ctx, line=ins.line)
    elif isinstance(ins, Return):
        code = emit_return(ctx)
    else:
        raise TranslationError.at(f"Instrucción no soportada: {ins!r}")

    if ctx.debug:
        return [f"// {ins}", *code]
    return code

def translate_unit(text: str, unit: str, ctx: TranslationContext) -> List[str]:
    """Traduce una unidad fuente completa; el primer error aborta con TranslationError."""
    nodes, diags = parse(text, filename=unit)
    if diags:
        raise TranslationError(diags[0])
    ctx.begin_unit(unit)
    lines: List[str] = []
    for ins in nodes:
        try:
            lines += translate_instruction(ins, ctx)
        except TranslationError as ex:
            d = ex.diagnostic
            raise TranslationError(replace(d, file=d.file or unit, line=d.line or ins.line)) from ex
    LOG.debug("unidad %s: %d instrucciones VM -> %d líneas", unit, len(nodes), len(lines))
    return lines

def translate_program(units: Iterable[Tuple[str, str]], config: TranslatorConfig | None = None) -> TranslationResult:
    """Traduce (nombre_unidad, texto) en orden lexicográfico de nombre.

    Un único contexto (y contador de etiquetas) para todo el programa; el
    arranque, si está activo, se emite una vez antes de la primera unidad.
    """
    config = config or TranslatorConfig()
    ordered = sorted(units, key=lambda u: u[0])
    names = [name for name, _ in ordered]
    for prev, cur in zip(names, names[1:]):
        if prev == cur:
            raise TranslationError.at(f"Unidad fuente duplicada: '{cur}'", file=cur,
                                      hint="las variables static se nombran por unidad")

    ctx = TranslationContext(debug=config.debug)
    lines: List[str] = []
    if config.bootstrap:
        if ctx.debug:
            lines.append(f"// bootstrap: call {config.entry} 0")
        lines += bootstrap.emit(ctx, config)

    for name, text in ordered:
        lines += translate_unit(text, name, ctx)
    return TranslationResult(lines=lines, functions=list(ctx.functions), units=names)

def collect_sources(path: Path) -> List[Path]:
    """Un archivo .vm, o todos los .vm de un directorio (ordenados)."""
    if path.is_dir():
        return sorted(p for p in path.iterdir() if p.is_file() and p.suffix == ".vm")
    return [path]

def default_output(path: Path, *, debug: bool = False) -> Path:
    ext = ".debug.asm" if debug else ".asm"
    if path.is_dir():
        return path / (path.resolve().name + ext)
    return path.with_suffix(ext)

def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Traductor de VM de pila a ensamblador Hack")
    ap.add_argument("source", type=Path, help="archivo .vm o directorio con archivos .vm")
    ap.add_argument("-o", "--output", type=Path, help="archivo .asm de salida")
    ap.add_argument("--debug", action="store_true", help="anota cada instrucción VM como comentario")
    ap.add_argument("--no-bootstrap", action="store_true", help="omite el código de arranque")
    ap.add_argument("--entry", default="Sys.init", help="función de entrada del arranque")
    ap.add_argument("--hack", action="store_true", help="ensambla también a .hack (binario en texto)")
    ap.add_argument("--log-level", default=os.environ.get("VMT_LOG", "WARNING"), help="nivel de logging")
    args = ap.parse_args(argv)
    _configure_logging(args.log_level)

    if not args.source.exists():
        print(f"ERROR: no existe {args.source}", file=sys.stderr)
        return 2
    sources = collect_sources(args.source)
    if not sources:
        print(f"ERROR: no hay archivos .vm en {args.source}", file=sys.stderr)
        return 2

    units: List[Tuple[str, str]] = []
    for path in sources:
        try:
            units.append((path.stem, path.read_text(encoding="utf-8")))
        except OSError as ex:
            print(f"ERROR: no pude leer {path}: {ex}", file=sys.stderr)
            return 2

    config = TranslatorConfig(
        bootstrap=not args.no_bootstrap,
        entry=args.entry,
        debug=args.debug,
    )
    try:
        result = translate_program(units, config)
    except TranslationError as ex:
        print(ex.diagnostic, file=sys.stderr)
        return 1

    # comprobar la entrada es responsabilidad del llamador, no del núcleo
    if config.bootstrap and config.entry not in result.functions:
        print(warning(f"la función de entrada {config.entry} no está definida",
                      file=str(args.source)), file=sys.stderr)

    words = None
    if args.hack:
        words, diags, _, _ = assemble_lines(result.lines, filename=str(args.source))
        if diags:
            for d in diags:
                print(d, file=sys.stderr)
            return 1

    out = args.output or default_output(args.source, debug=args.debug)
    try:
        write_lines(result.lines, str(out), batch_size=config.batch_size)
        if words is not None:
            write_hack(words, str(out.with_suffix(".hack")))
    except OSError as ex:
        print(f"ERROR al escribir salidas: {ex}", file=sys.stderr)
        return 3

    LOG.info("%d unidades -> %s", len(result.units), out)
    print(f"OK: {len(result.units)} unidad(es), {len(result.lines)} líneas → {out}")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
