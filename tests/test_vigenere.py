import random

import pytest

from cryptolab.vigenere import ALPHABET, Vigenere, random_key


def test_known_example():
    assert Vigenere("LEMON").encrypt("ATTACKATDAWN") == "LXFOPVEFRNHR"


def test_known_example_decrypts():
    assert Vigenere("LEMON").decrypt("LXFOPVEFRNHR") == "ATTACKATDAWN"


def test_round_trip():
    cipher = Vigenere("MISION")
    text = "ESTOESUNAPRUEBADECIFRADO"
    assert cipher.decrypt(cipher.encrypt(text)) == text


def test_lowercase_input_matches_uppercase():
    cipher = Vigenere("CLAVE")
    assert cipher.encrypt("mensaje") == cipher.encrypt("MENSAJE")


def test_lowercase_key_is_uppercased():
    assert Vigenere("clave").key == "CLAVE"
    assert Vigenere("clave").encrypt("HOLA") == Vigenere("CLAVE").encrypt("HOLA")


def test_key_a_is_identity():
    assert Vigenere("A").encrypt("ABCXYZ") == "ABCXYZ"


def test_output_length_matches_input():
    assert len(Vigenere("KEY").encrypt("ANYTEXTHERE")) == len("ANYTEXTHERE")


def test_output_letters_only():
    result = Vigenere("KEY").encrypt("SOME1TEXT")
    assert all(ch in ALPHABET for ch in result)


def test_empty_key_raises():
    with pytest.raises(ValueError):
        Vigenere("")


def test_random_key_shape():
    key = random_key(random.Random(11))
    assert 1 <= len(key) <= 26
    assert all(ch in ALPHABET for ch in key)


def test_random_key_round_trip():
    cipher = Vigenere(random_key(random.Random(5)))
    assert cipher.decrypt(cipher.encrypt("SECRETO")) == "SECRETO"