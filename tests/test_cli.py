import io

from cryptolab.aes import AES, format_block
from cryptolab.cli import main, strip_spaces
from cryptolab.protocols import diffie_hellman


def _run(monkeypatch, capsys, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    code = main([])
    return code, capsys.readouterr().out


def test_strip_spaces():
    assert strip_spaces("HOLA MUNDO ") == "HOLAMUNDO"


def test_exit(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "0\n")
    assert code == 0
    assert "Vernam" in out


def test_wrong_option_then_eof(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "99\n")
    assert code == 0
    assert "Operación incorrecta." in out


def test_diffie(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, "9\n0\n")
    assert f"Entonces K vale {diffie_hellman(13, 4, 5, 2).key_a}" in out


def test_aes_default(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, "7\n1\n0\n0\n")
    key = bytes(range(16))
    text = bytes.fromhex("00112233445566778899aabbccddeeff")
    expected = format_block(AES(key).encrypt_block(text))
    assert f"Texto cifrado: {expected}" in out


def test_vigenere_menu(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, "2\n0\nB\n1\nAB C\n0\n0\n")
    assert "Mensaje cifrado: BCD" in out