"""The ARIA block cipher with 128-, 192- and 256-bit keys."""

from __future__ import annotations

from functools import reduce
from operator import xor as _xor_int

BLOCK_SIZE = 16
KEY_SIZES = (16, 24, 32)

_SB1 = bytes.fromhex(
    "637c777bf26b6fc53001672bfed7ab76"
    "ca82c97dfa5947f0add4a2af9ca472c0"
    "b7fd9326363ff7cc34a5e5f171d83115"
    "04c723c31896059a071280e2eb27b275"
    "09832c1a1b6e5aa0523bd6b329e32f84"
    "53d100ed20fcb15b6acbbe394a4c58cf"
    "d0efaafb434d338545f9027f503c9fa8"
    "51a3408f929d38f5bcb6da2110fff3d2"
    "cd0c13ec5f974417c4a77e3d645d1973"
    "60814fdc222a908846eeb814de5e0bdb"
    "e0323a0a4906245cc2d3ac629195e479"
    "e7c8376d8dd54ea96c56f4ea657aae08"
    "ba78252e1ca6b4c6e8dd741f4bbd8b8a"
    "703eb5664803f60e613557b986c11d9e"
    "e1f8981169d98e949b1e87e9ce5528df"
    "8ca1890dbfe6426841992d0fb054bb16"
)

_SB2 = bytes.fromhex(
    "e24e54fc94c24acc620d6a463c4d8bd1"
    "5efa64cbb497be2bbc772e03d31959c1"
    "1d06416b55f09969ea9c18ae63dfe7bb"
    "007366fb964c85e43a0945aa0fee10eb"
    "2d7ff429accfad918d78c895f92fcecd"
    "087a88385c832a2847dbb8c793a41253"
    "ff870e3136215848018e377432cae9b1"
    "b7ab0cd7c4564226079860d9b6b91140"
    "ec208cbda0c984044923f14f501f13dc"
    "d8c09e57e3c37b653b028f3ee82592e5"
    "15ddfd17a9bfd49a7ec53967fe769d43"
    "a7e1d0f568f21b347005a38ad57986a8"
    "30c6514b1ea627f635d26e2416825fda"
    "e675a2ef2cb21c9f5d6f800a72449b6c"
    "900b5b337d5a52f361a1f7b0d63f7c6d"
    "ed14e0a53d22b3f889de711aafbab581"
)

_SB3 = bytes.fromhex(
    "52096ad53036a538bf40a39e81f3d7fb"
    "7ce339829b2fff87348e4344c4dee9cb"
    "547b9432a6c2233dee4c950b42fac34e"
    "082ea16628d924b2765ba2496d8bd125"
    "72f8f66486689816d4a45ccc5d65b692"
    "6c704850fdedb9da5e154657a78d9d84"
    "90d8ab008cbcd30af7e45805b8b34506"
    "d02c1e8fca3f0f02c1afbd0301138a6b"
    "3a9111414f67dcea97f2cfcef0b4e673"
    "96ac7422e7ad3585e2f937e81c75df6e"
    "47f11a711d29c5896fb7620eaa18be1b"
    "fc563e4bc6d279209adbc0fe78cd5af4"
    "1fdda8338807c731b11210592780ec5f"
    "60517fa919b54a0d2de57a9f93c99cef"
    "a0e03b4dae2af5b0c8ebbb3c83539961"
    "172b047eba77d626e169146355210c7d"
)

_SB4 = bytes.fromhex(
    "3068991b87b921785039dbe17209623c"
    "3e7e5e8ef1a0cca32a1dfbb6d620c48d"
    "8165f589cb9d77c657435617d4401a4d"
    "c0636ce3b7c8646a53aa38980cf49bed"
    "7f2276afdd3a0b58678806c3350d018b"
    "8cc2e65f02247593661ee5e254d810ce"
    "7ae8082c129732abb4270a23dfefcad9"
    "b8fadc316bd1ad1949bd5196eee4a841"
    "daffcd558636be6152f8bb0e8248699a"
    "e0479e5c044b34157926a7de29ae92d7"
    "84e9d2ba5df3c5b0bfa43b7144462bfc"
    "eb6fd5f614fe7c705a7dfd2f188316a5"
    "911f059574a9c15b4a856d13074f4e45"
    "b20fc91ca6bcec73907bcf598fa1f92d"
    "f2b10094379fd02e9c6e283f80f03dd3"
    "258ab5e742b3c7eaf74c113303a2ac60"
)

_C1 = bytes.fromhex("517cc1b727220a94fe13abe8fa9a6ee0")
_C2 = bytes.fromhex("6db14acc9e21c820ff28b1d5ef5de2b0")
_C3 = bytes.fromhex("db92371d2126e9700324977504e8c90e")

_CONSTANTS = {
    16: (_C1, _C2, _C3),
    24: (_C2, _C3, _C1),
    32: (_C3, _C1, _C2),
}

_SL1 = (_SB1, _SB2, _SB3, _SB4) * 4
_SL2 = (_SB3, _SB4, _SB1, _SB2) * 4

_DIFFUSION = (
    (3, 4, 6, 8, 9, 13, 14),
    (2, 5, 7, 8, 9, 12, 15),
    (1, 4, 6, 10, 11, 12, 15),
    (0, 5, 7, 10, 11, 13, 14),
    (0, 2, 5, 8, 11, 14, 15),
    (1, 3, 4, 9, 10, 14, 15),
    (0, 2, 7, 9, 10, 12, 13),
    (1, 3, 6, 8, 11, 12, 13),
    (0, 1, 4, 7, 10, 13, 15),
    (0, 1, 5, 6, 11, 12, 14),
    (2, 3, 5, 6, 8, 13, 15),
    (2, 3, 4, 7, 9, 12, 14),
    (1, 2, 6, 7, 9, 11, 12),
    (0, 3, 6, 7, 8, 10, 13),
    (0, 3, 4, 5, 9, 11, 14),
    (1, 2, 4, 5, 8, 10, 15),
)

# (left word, rotated word, right-rotation amount) for each round key in order.
_ROUND_KEY_RECIPE = (
    (0, 1, 19), (1, 2, 19), (2, 3, 19), (3, 0, 19),
    (0, 1, 31), (1, 2, 31), (2, 3, 31), (3, 0, 31),
    (0, 1, 128 - 61), (1, 2, 128 - 61), (2, 3, 128 - 61), (3, 0, 128 - 61),
    (0, 1, 128 - 31), (1, 2, 128 - 31), (2, 3, 128 - 31), (3, 0, 128 - 31),
    (0, 1, 128 - 19),
)

_MASK128 = (1 << 128) - 1


def _xor(a: bytes, b: bytes) -> bytes:
    return bytes(x ^ y for x, y in zip(a, b))


def _substitute(x: bytes, boxes: tuple[bytes, ...]) -> bytes:
    return bytes(box[v] for box, v in zip(boxes, x))


def _diffuse(x: bytes) -> bytes:
    return bytes(reduce(_xor_int, (x[i] for i in taps)) for taps in _DIFFUSION)


def _fo(d: bytes, rk: bytes) -> bytes:
    return _diffuse(_substitute(_xor(d, rk), _SL1))


def _fe(d: bytes, rk: bytes) -> bytes:
    return _diffuse(_substitute(_xor(d, rk), _SL2))


def _rotate_right(x: bytes, n: int) -> bytes:
    n %= 128
    v = int.from_bytes(x, "big")
    v = ((v >> n) | (v << (128 - n))) & _MASK128
    return v.to_bytes(BLOCK_SIZE, "big")


class Aria:
    """An ARIA cipher instance bound to one key."""

    def __init__(self, key) -> None:
        key = bytes(key)
        if len(key) not in KEY_SIZES:
            raise ValueError("ARIA: invalid key size")
        self._size = len(key)
        self._enc_keys = self._expand_key(key)
        n = self.rounds()
        self._dec_keys = (
            [self._enc_keys[n]]
            + [_diffuse(self._enc_keys[n - i]) for i in range(1, n)]
            + [self._enc_keys[0]]
        )

    def rounds(self) -> int:
        """Number of rounds for this key size (12, 14 or 16)."""
        return self._size // 4 + 8

    def _expand_key(self, key: bytes) -> list[bytes]:
        kl = key[:BLOCK_SIZE]
        kr = key[BLOCK_SIZE:].ljust(BLOCK_SIZE, b"\x00")
        ck1, ck2, ck3 = _CONSTANTS[self._size]

        w0 = kl
        w1 = _xor(_fo(w0, ck1), kr)
        w2 = _xor(_fe(w1, ck2), w0)
        w3 = _xor(_fo(w2, ck3), w1)
        words = (w0, w1, w2, w3)

        count = self.rounds() + 1
        return [
            _xor(words[a], _rotate_right(words[b], shift))
            for a, b, shift in _ROUND_KEY_RECIPE[:count]
        ]

    def _crypt(self, block, keys: list[bytes]) -> bytes:
        data = bytes(block)
        if len(data) < BLOCK_SIZE:
            raise ValueError("aria: input not full block")
        p = data[:BLOCK_SIZE]
        n = self.rounds()
        for i, rk in enumerate(keys[: n - 1], start=1):
            p = _fo(p, rk) if i % 2 else _fe(p, rk)
        return _xor(_substitute(_xor(p, keys[n - 1]), _SL2), keys[n])

    def encrypt(self, block) -> bytes:
        """Encrypt the first 16 bytes of ``block`` and return the ciphertext."""
        return self._crypt(block, self._enc_keys)

    def decrypt(self, block) -> bytes:
        """Decrypt the first 16 bytes of ``block`` and return the plaintext."""
        return self._crypt(block, self._dec_keys)