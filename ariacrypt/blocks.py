"""Reading, reshaping and transforming the 16-byte block files the utility works on."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable, Iterator
from pathlib import Path

from .cipher import BLOCK_SIZE, Aria

_HEX_BLOCK = re.compile(rb"[0-9a-fA-F]{%d}" % (2 * BLOCK_SIZE))


class BlockFileError(ValueError):
    """A block or key file does not have the expected layout."""


def _walk_txt(directory: str | os.PathLike) -> Iterator[str]:
    with os.scandir(directory) as it:
        entries = sorted(it, key=lambda entry: entry.name)
    for entry in entries:
        if entry.is_dir(follow_symlinks=False):
            yield from _walk_txt(entry.path)
        elif entry.name.endswith(".txt"):
            yield entry.name


def list_txt_files(directory=".") -> list[str]:
    """Names of all .txt files under ``directory``, walked depth first in lexical order."""
    return list(_walk_txt(directory))


def read_blocks(path) -> list[bytes]:
    """Read whitespace-separated raw tokens that must each be exactly 16 bytes long."""
    data = Path(path).read_bytes()
    blocks = []
    for number, token in enumerate(data.split(), start=1):
        if len(token) != BLOCK_SIZE:
            raise BlockFileError(
                f"token {number} in {path} has length {len(token)}, want {BLOCK_SIZE}"
            )
        blocks.append(token)
    if not blocks:
        raise BlockFileError(f"no 16-byte blocks in {path}")
    return blocks


def read_hex_blocks(path) -> list[bytes]:
    """Read whitespace-separated tokens of 32 hex digits, each one a 16-byte block."""
    data = Path(path).read_bytes()
    blocks = []
    for number, token in enumerate(data.split(), start=1):
        match = _HEX_BLOCK.match(token)
        if match is None:
            raise BlockFileError(
                f"token {number} in {path} is not a 16-byte hex string"
            )
        blocks.append(bytes.fromhex(match.group().decode("ascii")))
    if not blocks:
        raise BlockFileError(f"no hex blocks in {path}")
    return blocks


def format_chunks(text, width):
    """Strip all whitespace from ``text`` and rejoin it as space-separated chunks of ``width``.

    Works on both ``str`` and ``bytes`` and returns the same type.
    """
    if width <= 0:
        raise ValueError("width must be positive")
    sep = b" " if isinstance(text, (bytes, bytearray)) else " "
    cleaned = sep[:0].join(text.split())
    return sep.join(cleaned[i : i + width] for i in range(0, len(cleaned), width))


def reformat_file(in_path, out_path) -> None:
    """Rewrite the contents of ``in_path`` as 16-character chunks into ``out_path``."""
    data = Path(in_path).read_bytes()
    Path(out_path).write_bytes(format_chunks(data, BLOCK_SIZE))


def build_engines(keys: Iterable[bytes], count: int) -> list[Aria]:
    """One cipher per block: a single key shared by all, or one key per block."""
    keys = list(keys)
    if len(keys) == 1:
        engine = Aria(keys[0])
        return [engine] * count
    if len(keys) == count:
        return [Aria(key) for key in keys]
    raise BlockFileError(f"Keys file must have either 1 key or {count} keys")


def encrypt_blocks(blocks: Iterable[bytes], keys: Iterable[bytes]) -> list[bytes]:
    """Encrypt every block with its key and return the ciphertext blocks."""
    blocks = list(blocks)
    engines = build_engines(keys, len(blocks))
    return [engine.encrypt(block) for engine, block in zip(engines, blocks)]


def decrypt_blocks(blocks: Iterable[bytes], keys: Iterable[bytes]) -> list[bytes]:
    """Decrypt every block with its key and return the plaintext blocks."""
    blocks = list(blocks)
    engines = build_engines(keys, len(blocks))
    return [engine.decrypt(block) for engine, block in zip(engines, blocks)]