# ariacrypt

ariacrypt implements the ARIA block cipher with 128-, 192- and 256-bit keys. It also includes an interactive console tool that encrypts and decrypts `.txt` files block by block.

The package needs nothing beyond the Python standard library. It requires Python 3.10 or later.

## Installation

```
pip install .
```

To install it together with the test dependencies:

```
pip install ".[test]"
```

## Command-line tool

```
ariacrypt [directory]
```

`directory` is the folder that holds the `.txt` files. If you leave it out, the current directory is used.

The tool prints a menu and then reads one choice per line:

```
1 - Description of the program
2 - Show directory files
3 - Encrypt .txt file
4 - Decrypt .txt file
5 - Help
0 - Exit
```

Any other input prints a hint to choose again. Entering `0` exits the tool, and so does the end of input.

### Listing files

Option 2 lists the `.txt` files that sit directly in the directory.

### Choosing files for encryption and decryption

Encryption and decryption both need at least three `.txt` files. You pick three files by their numbers in a list:

1. The input file.
2. The keys file.
3. The output file.

The list is built by scanning the directory and its subdirectories in name order. Each file appears by its bare name, and the chosen files are then read from, and written to, the directory itself. If you enter a number outside the list, or something that is not a number, the operation is cancelled.

### File formats

- **Plaintext file (option 3).** Whitespace-separated tokens, each exactly 16 bytes long.
- **Ciphertext file (option 4).** Whitespace-separated tokens, each made of 32 hex digits.
- **Keys file.** Whitespace-separated tokens, each exactly 16 bytes long. It holds either a single key, which is used for every block, or one key per block. Because each token is 16 bytes, the tool works with 128-bit keys only. Longer keys are available through the library.
- **Output file.** This file is overwritten.
  - After encryption it holds each ciphertext block as 32 lowercase hex digits, with blocks separated by single spaces.
  - After decryption it holds the recovered bytes with all whitespace removed, regrouped into 16-character chunks separated by single spaces.

When a file is malformed, or the number of keys fits neither rule, the tool prints a message and returns to the menu. No output is written in that case.

## Library use

```python
from ariacrypt.cipher import Aria

cipher = Aria(bytes(range(16)))           # key of 16, 24 or 32 bytes
ciphertext = cipher.encrypt(b"ABCDEFGHIJKLMNOP")
assert cipher.decrypt(ciphertext) == b"ABCDEFGHIJKLMNOP"
```

### Key sizes, rounds and errors

- `Aria.rounds()` returns the number of rounds: 12, 14 or 16, depending on the key length.
- A key of any other length raises `ValueError`.
- `encrypt` and `decrypt` work on the first 16 bytes of the block they are given.
- A block shorter than 16 bytes raises `ValueError`.

### File and block helpers

`ariacrypt.blocks` holds the helpers the tool is built on.

Reading files:

- `list_txt_files(directory)` returns the names found by the recursive scan described above.
- `read_blocks(path)` reads the 16-byte token files.
- `read_hex_blocks(path)` reads the hex ciphertext files.

Encrypting and decrypting:

- `build_engines(keys, count)` returns one `Aria` instance per block, built from either one shared key or one key per block.
- `encrypt_blocks(blocks, keys)` and `decrypt_blocks(blocks, keys)` return the transformed blocks.

Reformatting text:

- `format_chunks(text, width)` removes all whitespace and rejoins the text, `str` or `bytes`, as chunks of `width` separated by spaces.
- `reformat_file(in_path, out_path)` applies `format_chunks` with a width of 16 to a whole file.

Malformed files and mismatched key counts raise `BlockFileError`, which is a subclass of `ValueError`.

## What it does not do

The package applies ARIA to each 16-byte block on its own, with no chaining mode, padding or authentication. Input that is not already split into 16-byte tokens has to be prepared beforehand.