from tapebf.interpreter import Interpreter
from tapebf.loader import load_program


def test_program_2_eight_times_eight(capsysbinary):
    source = load_program('examples/program_2.bf')
    interp = Interpreter()
    interp.run(source)
    out = capsysbinary.readouterr().out
    # exactly one byte, 64 == '@'
    assert out == bytes([64])
    assert out == b'@'
