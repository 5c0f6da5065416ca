import pytest
from src.vm_translator.assembler import assemble_text
from src.vm_translator.cpu import HackCPU, alu

@pytest.mark.parametrize("x, y, c, expected", [
    (5, 3, 0b101010, 0),        # 0
    (5, 3, 0b111111, 1),        # 1
    (5, 3, 0b111010, 0xFFFF),   # -1
    (5, 3, 0b000010, 8),        # D+A
    (5, 3, 0b010011, 2),        # D-A
    (5, 3, 0b000111, 0xFFFE),   # A-D
    (12, 10, 0b000000, 8),      # D&A
    (12, 10, 0b010101, 14),     # D|A
    (5, 3, 0b001111, 0xFFFB),   # -D
    (0, 3, 0b001101, 0xFFFF),   # !D
])
def test_alu(x, y, c, expected):
    assert alu(x, y, c) == expected

def _cpu(text, ram=None):
    words, diags, _, _ = assemble_text(text)
    assert not diags
    return HackCPU(words, ram=ram)

def test_runs_off_end_of_rom():
    cpu = _cpu("@2\nD=A\n@3\nD=D+A\n@0\nM=D")
    cpu.run()
    assert cpu.halted
    assert cpu.peek(0) == 5

def test_halt_loop():
    cpu = _cpu("@7\nD=A\n@R13\nM=D\n(END)\n@END\n0;JMP")
    steps = cpu.run()
    assert cpu.halted
    assert cpu.pc == 4
    assert steps == 6
    assert cpu.peek("R13") == 7

def test_max_steps_stops_busy_loop():
    cpu = _cpu("(L)\n@L\nD;JEQ")
    assert cpu.run(max_steps=50) == 50
    assert not cpu.halted

def test_conditional_jump_on_sign():
    cpu = _cpu("@R0\nD=M\n@NEG\nD;JLT\n@R1\nM=1\n@END\n0;JMP\n(NEG)\n@R1\nM=-1\n(END)\n@END\n0;JMP",
               ram={"R0": -4})
    cpu.run()
    assert cpu.peek("R1") == -1

def test_ram_preload_and_views():
    cpu = HackCPU([], ram={"SP": 258, 256: -1, 257: 9})
    assert cpu.peek("SP") == 258
    assert cpu.peek(256) == -1
    assert cpu.peek(256, signed=False) == 0xFFFF
    assert cpu.stack_top == 9
