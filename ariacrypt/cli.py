"""Interactive menu for encrypting and decrypting .txt block files with ARIA."""

from __future__ import annotations

import argparse
import os
import re
import sys
from pathlib import Path

from .blocks import (
    BlockFileError,
    decrypt_blocks,
    encrypt_blocks,
    format_chunks,
    list_txt_files,
    read_blocks,
    read_hex_blocks,
)
from .cipher import BLOCK_SIZE

_INTEGER = re.compile(r"[+-]?\d+")

_DESCRIPTION = (
    "ARIA — is a block cipher developed in South Korea.",
    "Supports 128, 192 and 256 bit keys. Used to protect data.",
    "The program allows you to encrypt and decrypt .txt files using the ARIA algorithm.",
    "",
    "Operating Principle:",
    "  In the same directory as the executable, you must have three .txt files:",
    "    • plaintext.txt   – contains the data to encrypt (16‑byte blocks separated by spaces)",
    "    • keys.txt        – either a single key for all blocks,",
    "                        or one key per block (matching the number of plaintext blocks)",
    "    • ciphertext.txt  – will receive the encrypted output",
    "",
    "File Requirements:",
    "  • Plaintext is split into 16‑byte blocks, each block separated by a single space.",
    "  • Keys file may contain:",
    "      – One key, applied to all blocks,",
    "      – Or N keys for N blocks, so each block is encrypted independently.",
    "",
    "Press 5 to get menu",
)

_MENU = (
    "1 - Description of the program",
    "2 - Show directory files",
    "3 - Encrypt .txt file",
    "4 - Decrypt .txt file",
    "5 - Help",
    "0 - Exit",
)


def print_menu(out=None) -> None:
    """Print the list of menu options."""
    for line in _MENU:
        print(line, file=out)


def describe_program(out=None) -> None:
    """Print what the utility does and which files it expects."""
    for line in _DESCRIPTION:
        print(line, file=out)


def show_directory_files(directory=".", out=None) -> None:
    """Print the .txt files found directly in ``directory``."""
    try:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda entry: entry.name)
    except OSError as exc:
        print("Ups, you should read desription :)", exc, file=out)
        return

    print(" .txt files in main directory:", file=out)
    names = [
        entry.name
        for entry in entries
        if not entry.is_dir(follow_symlinks=False) and entry.name.endswith(".txt")
    ]
    for name in names:
        print(" -", name, file=out)
    if not names:
        print("No .txt files.", file=out)


def _next_token(stdin) -> str:
    while True:
        line = stdin.readline()
        if not line:
            raise EOFError("EOF")
        fields = line.split()
        if fields:
            return fields[0]


def pick_file(prompt, options, stdin=None, out=None) -> int:
    """Show numbered ``options`` and return the zero-based index the user enters."""
    if stdin is None:
        stdin = sys.stdin
    print(prompt, file=out)
    for number, name in enumerate(options, start=1):
        print(f"  {number:2d}) {name}", file=out)
    print("Enter number: ", end="", file=out, flush=True)
    match = _INTEGER.match(_next_token(stdin))
    if match is None:
        raise ValueError("expected integer")
    index = int(match.group())
    if not 1 <= index <= len(options):
        raise ValueError("selection out of range")
    return index - 1


def _choose_files(directory, roles, stdin, out):
    """Ask for one file per role; return their names, or None after reporting a problem."""
    try:
        names = list_txt_files(directory)
    except OSError as exc:
        print("Scan error:", exc, file=out)
        return None
    if len(names) < 3:
        print(
            f"Need at least three .txt files ({', '.join(roles)}, output).",
            file=out,
        )
        return None
    prompts = [f"Select {role} file #:" for role in roles] + ["Select output file #:"]
    try:
        return [names[pick_file(prompt, names, stdin, out)] for prompt in prompts]
    except (ValueError, EOFError) as exc:
        print(exc, file=out)
        return None


def _run_cipher(function, blocks, keys, out):
    try:
        return function(blocks, keys)
    except BlockFileError as exc:
        print(exc, file=out)
    except ValueError as exc:
        print("Invalid key:", exc, file=out)
    return None


def encrypt_file(directory=".", stdin=None, out=None):
    """Encrypt a chosen plaintext file into a chosen output file as hex blocks.

    Returns the output path on success, otherwise None.
    """
    chosen = _choose_files(directory, ("plaintext", "keys"), stdin, out)
    if chosen is None:
        return None
    plain_name, keys_name, out_name = chosen
    base = Path(directory)

    try:
        plain_blocks = read_blocks(base / plain_name)
    except (OSError, BlockFileError) as exc:
        print("Plaintext error:", exc, file=out)
        return None
    try:
        key_blocks = read_blocks(base / keys_name)
    except (OSError, BlockFileError) as exc:
        print("Keys file error:", exc, file=out)
        return None

    ciphertexts = _run_cipher(encrypt_blocks, plain_blocks, key_blocks, out)
    if ciphertexts is None:
        return None

    hex_text = " ".join(block.hex() for block in ciphertexts)
    target = base / out_name
    try:
        target.write_text(format_chunks(hex_text, 2 * BLOCK_SIZE))
    except OSError as exc:
        print("Failed to open output:", exc, file=out)
        return None
    print("Encryption complete →", out_name, file=out)
    return target


def decrypt_file(directory=".", stdin=None, out=None):
    """Decrypt a chosen hex ciphertext file into a chosen output file as 16-byte blocks.

    Returns the output path on success, otherwise None.
    """
    chosen = _choose_files(directory, ("ciphertext", "keys"), stdin, out)
    if chosen is None:
        return None
    cipher_name, keys_name, out_name = chosen
    base = Path(directory)

    try:
        cipher_blocks = read_hex_blocks(base / cipher_name)
    except (OSError, BlockFileError) as exc:
        print("Ciphertext error:", exc, file=out)
        return None
    try:
        key_blocks = read_blocks(base / keys_name)
    except (OSError, BlockFileError) as exc:
        print("Keys file error:", exc, file=out)
        return None

    plaintexts = _run_cipher(decrypt_blocks, cipher_blocks, key_blocks, out)
    if plaintexts is None:
        return None

    target = base / out_name
    try:
        target.write_bytes(format_chunks(b" ".join(plaintexts), BLOCK_SIZE))
    except OSError as exc:
        print("Failed to reformat plaintext:", exc, file=out)
        return None
    print("Decryption complete →", out_name, file=out)
    return target


def run(stdin=None, out=None, directory=".") -> None:
    """Serve the interactive menu until the user exits or input ends."""
    if stdin is None:
        stdin = sys.stdin
    print("Hi! Welcome into ARIA cypher utility.", file=out)
    print("Choose option:", file=out)
    print_menu(out)

    actions = {
        "1": lambda: describe_program(out),
        "2": lambda: show_directory_files(directory, out),
        "3": lambda: encrypt_file(directory, stdin, out),
        "4": lambda: decrypt_file(directory, stdin, out),
        "5": lambda: print_menu(out),
    }

    while True:
        line = stdin.readline()
        if not line:
            return
        choice = line.strip()
        if choice == "0":
            print("Bye bye.", file=out)
            return
        action = actions.get(choice)
        if action is None:
            print("Choose something else or exit.", file=out)
        else:
            action()
        print(file=out)


def main(argv=None) -> int:
    """Start the interactive utility."""
    parser = argparse.ArgumentParser(
        prog="ariacrypt",
        description="Encrypt and decrypt .txt block files with the ARIA cipher.",
    )
    parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="directory holding the .txt files (default: current directory)",
    )
    args = parser.parse_args(argv)
    run(sys.stdin, sys.stdout, args.directory)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())