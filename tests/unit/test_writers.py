import pytest
from src.vm_translator.writers import write_lines, write_hack, to_bin_lines
from src.vm_translator.encoding import Encoded

@pytest.mark.parametrize("n, batch", [(0, 100), (1, 100), (250, 100), (200, 100), (7, 3)])
def test_write_lines_batches(tmp_path, n, batch):
    out = tmp_path / "out.asm"
    lines = [f"@{i}" for i in range(n)]
    write_lines(lines, str(out), batch_size=batch)
    assert out.read_text(encoding="utf-8").splitlines() == lines

def test_write_lines_accepts_generators(tmp_path):
    out = tmp_path / "gen.asm"
    write_lines((f"// {i}" for i in range(5)), str(out), batch_size=2)
    assert out.read_text(encoding="utf-8") == "// 0\n// 1\n// 2\n// 3\n// 4\n"

def test_batch_size_must_be_positive(tmp_path):
    with pytest.raises(ValueError):
        write_lines(["@0"], str(tmp_path / "x.asm"), batch_size=0)

def test_write_hack(tmp_path):
    words = [Encoded(word=0xEC10, pc=0, line=1, text="D=A"), Encoded(word=5, pc=1, line=2, text="@5")]
    assert to_bin_lines(words) == ["1110110000010000", "0000000000000101"]
    out = tmp_path / "prog.hack"
    write_hack(words, str(out))
    assert out.read_text(encoding="utf-8").splitlines() == to_bin_lines(words)
