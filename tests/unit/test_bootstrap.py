import pytest
from src.vm_translator import bootstrap
from src.vm_translator.config import TranslatorConfig
from src.vm_translator.context import TranslationContext
from src.vm_translator.translator import translate_program
from src.vm_translator.diagnostics import TranslationError

def test_default_bases_then_call():
    ctx = TranslationContext()
    code = bootstrap.emit(ctx, TranslatorConfig())
    assert code[:4] == ["@256", "D=A", "@SP", "M=D"]
    assert code[4:8] == ["@256", "D=A", "@LCL", "M=D"]
    assert code[12:20] == ["@2048", "D=A", "@THIS", "M=D", "@2048", "D=A", "@THAT", "M=D"]
    assert code[-3:] == ["@Sys.init", "0;JMP", "($ret.Sys.init.0)"]
    assert ctx.labels.counter == 1

def test_custom_entry():
    code = bootstrap.emit(TranslationContext(), TranslatorConfig(entry="Main.main"))
    assert "@Main.main" in code

@pytest.mark.parametrize("config", [
    TranslatorConfig(entry="9bad"),
    TranslatorConfig(entry="a$b"),
    TranslatorConfig(entry="LCL"),
    TranslatorConfig(entry="Sys.0"),
    TranslatorConfig(stack_base=40000),
    TranslatorConfig(that_base=-1),
])
def test_invalid_config(config):
    with pytest.raises(TranslationError):
        bootstrap.emit(TranslationContext(), config)

def test_emitted_once_per_program():
    units = [("A", "function A.f 0\nreturn"), ("B", "function B.g 0\nreturn")]
    result = translate_program(units)
    assert result.lines.count("@Sys.init") == 1
    assert result.lines[:4] == ["@256", "D=A", "@SP", "M=D"]

def test_disabled():
    result = translate_program([("A", "push constant 1")], TranslatorConfig(bootstrap=False))
    assert result.lines == ["@1", "D=A", "@SP", "A=M", "M=D", "@SP", "M=M+1"]

def test_stack_after_bootstrap(run_program):
    m = run_program([("Sys", "function Sys.init 0\nlabel H\ngoto H")])
    # marco del arranque en 256..260
    assert m.sp == 261
    assert m.peek("LCL") == 261
    assert m.peek("ARG") == 256
    assert [m.peek(a) for a in range(257, 261)] == [256, 256, 2048, 2048]
