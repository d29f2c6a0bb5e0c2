# cryptolab

This package collects classic and textbook cryptographic algorithms. You can call them
from Python or use them through an interactive menu. It is meant for study and
experimentation. These implementations are **not** suitable for protecting real data.

## What is inside

| Module                | Contents                                                                  |
|-----------------------|---------------------------------------------------------------------------|
| `cryptolab.vernam`    | `Vernam` XOR cipher with a key given as a string of bits, `random_key`    |
| `cryptolab.vigenere`  | `Vigenere` cipher over the A–Z alphabet, `random_key`                     |
| `cryptolab.rc4`       | `RC4` stream cipher with `keystream`, `parse_numbers`, `random_key`       |
| `cryptolab.a5`        | `A5` majority-clocked three-register generator, `default_generator`       |
| `cryptolab.e0`        | `E0` four-register combiner generator, `default_generator`               |
| `cryptolab.gf256`     | `multiply` in GF(2^8) with the SNOW 3G or AES reduction, `Algorithm`      |
| `cryptolab.aes`       | `AES` (AES-128) with `encrypt_block` and `trace_block`, `RoundTrace`, `expand_key`, `format_block` |
| `cryptolab.cbc`       | `cbc_encrypt`, `cipher_stealing_encrypt`, `xor_blocks`                    |
| `cryptolab.protocols` | `mod_pow`, `diffie_hellman`, `fiat_shamir` and their result dataclasses   |
| `cryptolab.rsa`       | `RSA` with `check` and `encrypt`, `lehman_peralta`, `mod_inverse`, `RSAError` |
| `cryptolab.elgamal`   | `EllipticCurve`, `elgamal_encrypt`, `ElGamalCiphertext`                   |

The package has no runtime dependencies.

## Installation

```
pip install .
```

To run the tests, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Interactive menu

Installing the package adds a `cryptolab` command:

```
cryptolab
```

The command reads choices from standard input. The prompts are in Spanish. The main
menu offers these choices:

- 1: Vernam
- 2: Vigenère
- 3: RC4
- 4: A5/1
- 5: E0
- 6: SNOW 3G / AES byte multiplication
- 7: AES with a per-round trace
- 8: CBC and ciphertext stealing on fixed sample blocks
- 9: Diffie-Hellman on fixed parameters
- 10: Fiat-Shamir on fixed parameters
- 11: RSA on two fixed keys
- 12: elliptic-curve ElGamal

Choose `0` to leave a menu. The program also stops when its input ends.

## Using the library

```python
from cryptolab.vigenere import Vigenere

cipher = Vigenere("secret")        # lowercase letters are treated as uppercase
ciphertext = cipher.encrypt("HELLO")   # "ZINCS"
cipher.decrypt(ciphertext)             # "HELLO"
```

```python
from cryptolab.vernam import Vernam, random_key

bits = random_key(3)               # 24 characters of '0' and '1'
vernam = Vernam(bits)
ciphertext = vernam.encrypt("SOL")
```

```python
from cryptolab.rc4 import RC4

rc4 = RC4([1, 34, 16, 84])
ciphertext = rc4.encrypt([1, 2, 3])
rc4.decrypt(ciphertext)            # [1, 2, 3]
```

Each call to `encrypt` or `decrypt` starts from a freshly scheduled state.

```python
from cryptolab.aes import AES, format_block

aes = AES(range(16))
block = bytes.fromhex("00112233445566778899aabbccddeeff")
print(format_block(aes.encrypt_block(block)))
for trace in aes.trace_block(block):
    print(trace)
```

```python
from cryptolab.protocols import diffie_hellman, fiat_shamir

exchange = diffie_hellman(13, 4, 5, 2)
exchange.key_a == exchange.key_b   # True
run = fiat_shamir(7, 5, 3, 16, 2, 0, 2)
run.accepted
```

```python
from cryptolab.a5 import default_generator

generator = default_generator()
bits = generator.generate(6)       # a string of six '0'/'1' characters
```

```python
from cryptolab.rsa import RSA

rsa = RSA(2347, 347, 5)
rsa.check()                        # public exponent; raises RSAError on bad parameters
result = rsa.encrypt("HOLA")       # uppercase A-Z, length a multiple of the block size
```

Each function and class has a short docstring that describes its arguments and what it
returns.

## What the package does not do

- AES, CBC, RSA and elliptic-curve ElGamal only encrypt. There is no decryption for them.
- AES works on single 16-byte blocks with 128-bit keys only. It does no padding.
- The menu reads only from standard input. It stores no keys or results.