import os

import pytest

from ariacrypt.cipher import Aria

PLAIN = bytes.fromhex("00112233445566778899aabbccddeeff")


@pytest.mark.parametrize(
    "key",
    [b"", b"short", bytes(10), bytes(17), bytes(31), bytes(33)],
)
def test_invalid_key_sizes_raise(key):
    with pytest.raises(ValueError):
        Aria(key)


@pytest.mark.parametrize("size", [16, 24, 32])
def test_encrypt_decrypt_roundtrip(size):
    cipher = Aria(os.urandom(size))
    plaintext = b"ABCDEFGHIJKLMNOP"
    ciphertext = cipher.encrypt(plaintext)
    assert len(ciphertext) == 16
    assert ciphertext != plaintext
    assert cipher.decrypt(ciphertext) == plaintext


@pytest.mark.parametrize("block", [b"Hello, World!012", b"TestingBlock0002"])
def test_multiple_blocks_roundtrip(block):
    cipher = Aria(b"0123456789abcdef")
    assert cipher.decrypt(cipher.encrypt(block)) == block


@pytest.mark.parametrize("method", ["encrypt", "decrypt"])
def test_short_input_raises(method):
    cipher = Aria(bytes(16))
    with pytest.raises(ValueError):
        getattr(cipher, method)(bytes(8))


def test_deterministic_encryption():
    cipher = Aria(bytes(range(16)))
    results = [cipher.encrypt(PLAIN).hex() for _ in range(3)]
    assert results == ["d718fbd6ab644c739da95f3be6451778"] * 3


@pytest.mark.parametrize(
    "size, expected",
    [
        (16, "d718fbd6ab644c739da95f3be6451778"),
        (24, "26449c1805dbe7aa25a468ce263a9e79"),
        (32, "f92bd7c79fb72e2f2b8f80c1972d24fc"),
    ],
)
def test_known_answer_vectors(size, expected):
    cipher = Aria(bytes(range(size)))
    assert cipher.encrypt(PLAIN).hex() == expected
    assert cipher.decrypt(bytes.fromhex(expected)) == PLAIN


@pytest.mark.parametrize("size, rounds", [(16, 12), (24, 14), (32, 16)])
def test_rounds_by_key_size(size, rounds):
    assert Aria(bytes(size)).rounds() == rounds


def test_extra_input_bytes_are_ignored():
    cipher = Aria(bytes(range(16)))
    assert cipher.encrypt(PLAIN + b"extra") == cipher.encrypt(PLAIN)


def test_different_keys_give_different_ciphertexts():
    first = Aria(bytes(16)).encrypt(PLAIN)
    second = Aria(bytes(range(16))).encrypt(PLAIN)
    assert first != second
    assert second.hex() == "d718fbd6ab644c739da95f3be6451778"


def test_accepts_bytearray_inputs():
    cipher = Aria(bytearray(range(16)))
    assert cipher.encrypt(bytearray(PLAIN)).hex() == "d718fbd6ab644c739da95f3be6451778"