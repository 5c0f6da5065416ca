import pytest
from src.vm_translator import branching
from src.vm_translator.context import TranslationContext
from src.vm_translator.translator import translate_unit
from src.vm_translator.assembler import assemble_lines
from src.vm_translator.diagnostics import TranslationError

def test_label_scope_unit_then_function():
    ctx = TranslationContext()
    ctx.begin_unit("Main")
    assert branching.emit("label", "TOP", ctx) == ["($Main$TOP)"]
    ctx.begin_function("Main.loop")
    assert branching.emit("label", "TOP", ctx) == ["(Main.loop$TOP)"]
    assert branching.emit("goto", "TOP", ctx) == ["@Main.loop$TOP", "0;JMP"]

def test_if_goto_pops_and_jumps_on_nonzero():
    code = branching.emit("if-goto", "END", TranslationContext(unit="U"))
    assert code[:2] == ["@SP", "M=M-1"]
    assert code[-2:] == ["@$U$END", "D;JNE"]

def test_same_label_text_in_two_functions():
    src = "function A.f 0\nlabel L\nfunction A.g 0\nlabel L\n"
    lines = translate_unit(src, "A", TranslationContext())
    assert "(A.f$L)" in lines and "(A.g$L)" in lines

@pytest.mark.parametrize("cond, expected_sp", [(1, 257), (-1, 257), (7, 257), (0, 258)])
def test_if_goto_any_nonzero(run_vm, cond, expected_sp):
    push = f"push constant {abs(cond)}" + ("\nneg" if cond < 0 else "")
    m = run_vm(f"{push}\nif-goto SKIP\npush constant 99\nlabel SKIP\npush constant 7")
    assert m.sp == expected_sp
    assert m.top == 7

def test_loop_sums_one_to_five(run_vm):
    src = """
    push constant 0
    pop temp 0
    push constant 5
    pop temp 1
    label LOOP
    push temp 0
    push temp 1
    add
    pop temp 0
    push temp 1
    push constant 1
    sub
    pop temp 1
    push temp 1
    if-goto LOOP
    push temp 0
    """
    m = run_vm(src)
    assert m.top == 15
    assert m.sp == 257

def test_goto_skips_code(run_vm):
    m = run_vm("goto OVER\npush constant 1\nlabel OVER\npush constant 2")
    assert m.sp == 257 and m.top == 2

def test_unknown_kind():
    with pytest.raises(TranslationError):
        branching.emit("jump", "X", TranslationContext())

def test_unit_scope_apart_from_function_named_like_unit():
    src = "label L\nfunction Main 0\nlabel L\ngoto L\n"
    lines = translate_unit(src, "Main", TranslationContext())
    assert "($Main$L)" in lines and "(Main$L)" in lines
    _, diags, link, _ = assemble_lines(lines)
    assert not diags
    assert {"$Main$L", "Main", "Main$L"} <= set(link.symtab)
