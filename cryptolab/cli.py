"""Interactive menu over the ciphers, generators and protocols."""

from __future__ import annotations

import argparse
import random
import sys
from collections import deque

from . import a5 as a5_module
from . import e0 as e0_module
from .aes import AES, format_block
from .cbc import cbc_encrypt, cipher_stealing_encrypt
from .elgamal import EllipticCurve, elgamal_encrypt
from .gf256 import Algorithm, multiply
from .protocols import diffie_hellman, fiat_shamir
from .rc4 import RC4, parse_numbers
from .rc4 import random_key as rc4_random_key
from .rsa import RSA, RSAError
from .vernam import Vernam
from .vernam import random_key as vernam_random_key
from .vigenere import Vigenere
from .vigenere import random_key as vigenere_random_key

_LINE = "------------------------------------"
_DEFAULT_KEY = bytes(range(16))
_DEFAULT_TEXT = bytes.fromhex("00112233445566778899aabbccddeeff")


def strip_spaces(text: str) -> str:
    """Remove every space character."""
    return text.replace(" ", "")


class _Console:
    def __init__(self, stream) -> None:
        self._stream = stream
        self._pending: deque[str] = deque()

    def _next_line(self) -> str:
        line = self._stream.readline()
        if not line:
            raise EOFError
        return line.rstrip("\n")

    def token(self) -> str:
        while not self._pending:
            self._pending.extend(self._next_line().split())
        return self._pending.popleft()

    def integer(self, base: int = 10) -> int | None:
        try:
            return int(self.token(), base)
        except ValueError:
            return None

    def line(self) -> str:
        self._pending.clear()
        return self._next_line()


def _menu(con: _Console, options: list[str]) -> int | None:
    print(f"\n{_LINE}\n¿Qué desea hacer?")
    for index, text in enumerate(options):
        print(f"[{index}] {text}")
    print(_LINE)
    return con.integer()


def _vernam(con: _Console) -> None:
    print("¿Desea introducir la clave manual o de forma aleatoria?\n[0] Manual\n[1] Aleatoria")
    if con.integer() == 0:
        print("Introduzca la clave:")
        key = con.token()
        print("Introduzca la entrada:")
        text = con.token()
    else:
        print("Introduzca la entrada:")
        text = con.token()
        key = vernam_random_key(len(text.encode("utf-8")))
    cipher = Vernam(key)
    while True:
        op = _menu(con, ["Salir.", "Cifrar mensaje.", "Descifrar mensaje."])
        if op == 0:
            return
        try:
            if op == 1:
                print(f"Mensaje cifrado: {cipher.encrypt(text)}")
            elif op == 2:
                print("Introduzca la entrada cifrada:")
                text = con.token()
                print(f"Mensaje descifrado: {cipher.decrypt(text)}")
            else:
                print("\nOperación incorrecta.")
        except ValueError as exc:
            print(exc)


def _vigenere(con: _Console) -> None:
    print("¿Desea introducir la clave manual o de forma aleatoria?\n[0] Manual\n[1] Aleatoria")
    if con.integer() == 0:
        print("Introduzca la clave:")
        key = con.token()
    else:
        key = vigenere_random_key(random.Random())
        print(f"Clave: {key}")
    cipher = Vigenere(key)
    while True:
        op = _menu(con, ["Salir.", "Cifrar mensaje.", "Descifrar mensaje."])
        if op == 0:
            return
        if op == 1:
            print("Introduzca la entrada:")
            print(f"Mensaje cifrado: {cipher.encrypt(strip_spaces(con.line()))}")
        elif op == 2:
            print("Introduzca la entrada cifrada:")
            print(f"Mensaje descifrado: {cipher.decrypt(con.token())}")
        else:
            print("\nOperación incorrecta.")


def _rc4(con: _Console) -> None:
    print("¿Desea introducir la clave manual o de forma aleatoria?\n[0] Manual\n[1] Aleatoria")
    if con.integer() == 0:
        print("Introduzca la clave:")
        key = parse_numbers(con.token())
    else:
        key = rc4_random_key()
        print("Clave aleatoria: \n" + ",".join(map(str, key)))
    cipher = RC4(key)
    while True:
        op = _menu(con, ["Salir.", "Cifrar mensaje.", "Descifrar mensaje."])
        if op == 0:
            return
        if op in (1, 2):
            print("Introduzca la entrada:")
            values = cipher.encrypt(parse_numbers(con.token()))
            print("Mensaje cifrado: " if op == 1 else "Mensaje descifrado: ")
            for value in values:
                print(f"{value} ({value:08b})")
        else:
            print("\nOperación incorrecta.")


def _generator(con: _Console, generator, count: int) -> None:
    while True:
        op = _menu(con, ["Salir.", "Generar secuencia.", "Mostrar información de los registros."])
        if op == 0:
            return
        if op == 1:
            generator.generate(count)
            print(f"\nZ: {generator.output}")
        elif op == 2:
            for index, register in enumerate(generator.registers, 1):
                print(f"Registro {index}: {register}")
        else:
            print("\nOperación incorrecta.")


def _gf256(con: _Console) -> None:
    print("Primer byte (hexadecimal):")
    first = con.integer(16) or 0
    print("Segundo byte (hexadecimal):")
    second = con.integer(16) or 0
    while True:
        op = _menu(con, ["Salir.", "Multiplicación SNOW 3G.", "Multiplicación AES."])
        if op == 0:
            return
        if op in (1, 2):
            print(f"Resultado: {multiply(first, second, Algorithm(op)):08b}")
        else:
            print("\nOperación incorrecta.")


def _read_block(con: _Console) -> bytes:
    values = []
    while len(values) < 16:
        value = con.integer(16)
        values.append((value or 0) & 0xFF)
    return bytes(values)


def _aes(con: _Console) -> None:
    while True:
        op = _menu(con, ["Salir.", "Valores por defecto.", "Introducir valores."])
        if op == 0:
            return
        if op == 1:
            key, text = _DEFAULT_KEY, _DEFAULT_TEXT
        elif op == 2:
            print("Introduzca la clave:")
            key = _read_block(con)
            print("Introduzca el texto:")
            text = _read_block(con)
        else:
            print("\nOperación incorrecta.")
            continue
        print(f"Clave: {format_block(key)}\nBloque de texto: {format_block(text)}")
        traces = AES(key).trace_block(text)
        for trace in traces:
            print(trace)
        print(f"\nTexto cifrado: {format_block(traces[-1].state)}")


def _cbc(con: _Console) -> None:
    iv = bytes(16)
    while True:
        op = _menu(con, ["Salir.", "Valores por defecto CBC.", "Valores por defecto Cipher Stealing."])
        if op == 0:
            return
        if op == 1:
            for block in cbc_encrypt(_DEFAULT_KEY, iv, [_DEFAULT_TEXT, bytes(16)]):
                print(f"Texto cifrado: {format_block(block)}")
        elif op == 2:
            tail, head = cipher_stealing_encrypt(_DEFAULT_KEY, iv, _DEFAULT_TEXT, bytes(15))
            print(f"Bloque 1 cifrado: {format_block(tail)}")
            print(f"Bloque 2 cifrado: {format_block(head)}")
        else:
            print("\nOperación incorrecta.")


def _diffie() -> None:
    for args in ((13, 4, 5, 2), (43, 23, 25, 33), (113, 43, 54, 71)):
        ex = diffie_hellman(*args)
        print(f"Número primo: {ex.p}\nAlfa: {ex.alpha}")
        print(f"[A] - Me da {ex.y_a}\n[B] - A mi {ex.y_b}")
        print(f"Entonces K vale {ex.key_a}\nEntonces K vale {ex.key_b}")


def _fiat() -> None:
    for args in ((7, 5, 3, 16, 2, 0, 2), (683, 811, 43215, 16785, 2, 1, 1)):
        run = fiat_shamir(*args)
        print(f"N: {run.n}\nNúmero secreto S: {run.s}\n[A] - V vale {run.v}")
        for r in run.rounds:
            print(f"Iteración {r.index}: X={r.x} A={r.a} e={r.e} Y={r.y}")
            print(f"Y^2 (mod N) = {r.lhs}, debería coincidir con {r.rhs}")
            print("[B]: ¡Correcto!" if r.accepted else "[B]: ¡ERROR!")


def _rsa(con: _Console) -> None:
    keys = {1: RSA(421, 7, 1619), 2: RSA(2347, 347, 5)}
    while True:
        op = _menu(con, ["Salir.", "Introducir mensaje A.", "Introducir mensaje B."])
        if op == 0:
            return
        if op not in keys:
            print("\nOperación incorrecta.")
            continue
        print("Introduzca el mensaje a cifrar:")
        message = strip_spaces(con.line())
        rsa = keys[op]
        try:
            rsa.check()
            result = rsa.encrypt(message)
        except RSAError as exc:
            print(exc)
            return
        except ValueError as exc:
            print(exc)
            continue
        print(f"Tamaño del bloque: {result.block_size}")
        print(f"D:{rsa.d}\nFi:{rsa.phi}\nE:{rsa.e}\nN:{rsa.n}")
        print("Mensaje codificado: " + " ".join(map(str, result.encoded)))
        print("Mensaje cifrado: " + " ".join(map(str, result.encrypted)))


def _elgamal(con: _Console) -> None:
    print("Introducir número primo p, a, b, punto base x y, aA, dB y mensaje:")
    values = [con.integer() for _ in range(8)]
    if any(v is None for v in values):
        print("\nOperación incorrecta.")
        return
    prime, a, b, x, y, private_a, private_b, message = values
    try:
        curve = EllipticCurve(a, b, prime)
        result = elgamal_encrypt(curve, message, (x, y), private_a, private_b)
    except ValueError as exc:
        print(exc)
        return
    print(f"aAP: {result.a_point}\ndBP: {result.b_point}\naA x dBP: {result.shared}")
    print(f"Pc: {result.encoded}\nPuntos: {curve.points}")
    print(f"Mensaje cifrado: {result.first}, {result.second}")


def main(argv: list[str] | None = None) -> int:
    """Run the interactive menu on standard input."""
    argparse.ArgumentParser(description="Cryptography exercises.").parse_args(argv)
    con = _Console(sys.stdin)
    actions = {
        1: lambda: _vernam(con),
        2: lambda: _vigenere(con),
        3: lambda: _rc4(con),
        4: lambda: _generator(con, a5_module.default_generator(), 6),
        5: lambda: _generator(con, e0_module.default_generator(), 4),
        6: lambda: _gf256(con),
        7: lambda: _aes(con),
        8: lambda: _cbc(con),
        9: _diffie,
        10: _fiat,
        11: lambda: _rsa(con),
        12: lambda: _elgamal(con),
    }
    try:
        while True:
            print(_LINE)
            print("¿Qué cifrado desea hacer?")
            print("[0] Salir.\n[1] Vernam.\n[2] Vigenere.\n[3] RC4.\n[4] A5/1.\n[5] E0.")
            print("[6] Multiplicación SNOW 3G y AES.\n[7] Rijndael (AES).")
            print("[8] Modos de cifrado en bloque.\n[9] Diffie-Hellman.\n[10] Fiat-Shamir.")
            print("[11] RSA.\n[12] ElGamal Elíptico.\nCifrado: ")
            op = con.integer()
            if op == 0:
                return 0
            action = actions.get(op)
            if action is None:
                print("\nOperación incorrecta.")
            else:
                action()
    except EOFError:
        return 0


if __name__ == "__main__":
    sys.exit(main())