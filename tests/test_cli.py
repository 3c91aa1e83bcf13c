import io

import pytest

from ariacrypt.blocks import read_hex_blocks
from ariacrypt.cipher import Aria
from ariacrypt.cli import (
    decrypt_file,
    describe_program,
    encrypt_file,
    main,
    pick_file,
    print_menu,
    run,
    show_directory_files,
)

KEY_BLOCK = b"0123456789abcdef"
PLAIN_TEXT = "ABCDEFGHIJKLMNOP 0123456789ABCDEF"
PLAIN = [b"ABCDEFGHIJKLMNOP", b"0123456789ABCDEF"]


@pytest.fixture
def workdir(tmp_path):
    # Sorted listing: keys.txt, out.txt, plain.txt, result.txt
    (tmp_path / "plain.txt").write_text(PLAIN_TEXT)
    (tmp_path / "keys.txt").write_bytes(KEY_BLOCK)
    (tmp_path / "out.txt").write_text("")
    (tmp_path / "result.txt").write_text("")
    return tmp_path


def test_print_menu_lists_options():
    out = io.StringIO()
    print_menu(out)
    lines = out.getvalue().splitlines()
    assert len(lines) == 6
    assert lines[-1] == "0 - Exit"


def test_describe_program_mentions_files():
    out = io.StringIO()
    describe_program(out)
    text = out.getvalue()
    assert "ARIA — is a block cipher developed in South Korea." in text
    assert "plaintext.txt" in text


def test_show_directory_files(tmp_path):
    (tmp_path / "a.txt").write_text("")
    (tmp_path / "b.md").write_text("")
    (tmp_path / "dir.txt").mkdir()
    out = io.StringIO()
    show_directory_files(tmp_path, out)
    lines = out.getvalue().splitlines()
    assert " - a.txt" in lines
    assert " - dir.txt" not in lines
    assert all("b.md" not in line for line in lines)


def test_show_directory_files_empty(tmp_path):
    out = io.StringIO()
    show_directory_files(tmp_path, out)
    assert "No .txt files." in out.getvalue()


def test_show_directory_files_missing(tmp_path):
    out = io.StringIO()
    show_directory_files(tmp_path / "absent", out)
    assert out.getvalue().startswith("Ups, you should read desription :)")


def test_pick_file_returns_zero_based_index():
    out = io.StringIO()
    index = pick_file("Select:", ["a.txt", "b.txt", "c.txt"], io.StringIO("\n2\n"), out)
    assert index == 1
    assert "   2) b.txt" in out.getvalue()


def test_pick_file_out_of_range():
    with pytest.raises(ValueError, match="selection out of range"):
        pick_file("Select:", ["a.txt"], io.StringIO("5\n"), io.StringIO())


def test_pick_file_not_a_number():
    with pytest.raises(ValueError):
        pick_file("Select:", ["a.txt"], io.StringIO("abc\n"), io.StringIO())


def test_pick_file_end_of_input():
    with pytest.raises(EOFError):
        pick_file("Select:", ["a.txt"], io.StringIO(""), io.StringIO())


def test_encrypt_then_decrypt_round_trip(workdir):
    out = io.StringIO()
    target = encrypt_file(workdir, io.StringIO("3\n1\n2\n"), out)
    assert target == workdir / "out.txt"
    expected = [Aria(KEY_BLOCK).encrypt(block) for block in PLAIN]
    assert target.read_text() == " ".join(block.hex() for block in expected)
    assert read_hex_blocks(target) == expected
    assert "Encryption complete → out.txt" in out.getvalue()

    out = io.StringIO()
    result = decrypt_file(workdir, io.StringIO("2\n1\n4\n"), out)
    assert result == workdir / "result.txt"
    assert result.read_text() == PLAIN_TEXT
    assert "Decryption complete → result.txt" in out.getvalue()


def test_round_trip_with_per_block_keys(workdir):
    (workdir / "keys.txt").write_bytes(KEY_BLOCK + b" fedcba9876543210")
    encrypt_file(workdir, io.StringIO("3\n1\n2\n"), io.StringIO())
    decrypt_file(workdir, io.StringIO("2\n1\n4\n"), io.StringIO())
    assert (workdir / "result.txt").read_text() == PLAIN_TEXT


def test_encrypt_key_count_mismatch(workdir):
    (workdir / "plain.txt").write_text(PLAIN_TEXT + " QRSTUVWXYZabcdef")
    (workdir / "keys.txt").write_bytes(KEY_BLOCK + b" " + KEY_BLOCK)
    out = io.StringIO()
    assert encrypt_file(workdir, io.StringIO("3\n1\n2\n"), out) is None
    assert "Keys file must have either 1 key or 3 keys" in out.getvalue()
    assert (workdir / "out.txt").read_text() == ""


def test_encrypt_needs_three_files(tmp_path):
    (tmp_path / "plain.txt").write_text(PLAIN_TEXT)
    out = io.StringIO()
    assert encrypt_file(tmp_path, io.StringIO(""), out) is None
    assert "Need at least three .txt files" in out.getvalue()


def test_encrypt_bad_selection(workdir):
    out = io.StringIO()
    assert encrypt_file(workdir, io.StringIO("9\n"), out) is None
    assert "selection out of range" in out.getvalue()


def test_encrypt_bad_plaintext(workdir):
    (workdir / "plain.txt").write_text("short")
    out = io.StringIO()
    assert encrypt_file(workdir, io.StringIO("3\n1\n2\n"), out) is None
    assert "Plaintext error:" in out.getvalue()


def test_decrypt_bad_ciphertext(workdir):
    (workdir / "out.txt").write_text("nothex")
    out = io.StringIO()
    assert decrypt_file(workdir, io.StringIO("2\n1\n4\n"), out) is None
    assert "Ciphertext error:" in out.getvalue()
    assert (workdir / "result.txt").read_text() == ""


def test_run_description_and_exit(tmp_path):
    out = io.StringIO()
    run(io.StringIO("1\n0\n"), out, tmp_path)
    text = out.getvalue()
    assert text.startswith("Hi! Welcome into ARIA cypher utility.")
    assert "ARIA — is a block cipher" in text
    assert text.rstrip().endswith("Bye bye.")


def test_run_unknown_choice(tmp_path):
    out = io.StringIO()
    run(io.StringIO("x\n0\n"), out, tmp_path)
    assert "Choose something else or exit." in out.getvalue()


def test_run_stops_at_end_of_input(tmp_path):
    out = io.StringIO()
    run(io.StringIO("5\n"), out, tmp_path)
    assert out.getvalue().count("0 - Exit") == 2
    assert "Bye bye." not in out.getvalue()


def test_run_encrypts_through_menu(workdir):
    out = io.StringIO()
    run(io.StringIO("3\n3\n1\n2\n0\n"), out, workdir)
    expected = [Aria(KEY_BLOCK).encrypt(block) for block in PLAIN]
    assert read_hex_blocks(workdir / "out.txt") == expected
    assert "Bye bye." in out.getvalue()


def test_main_runs_menu(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n0\n"))
    (tmp_path / "notes.txt").write_text("")
    assert main([str(tmp_path)]) == 0
    captured = capsys.readouterr().out
    assert " - notes.txt" in captured
    assert "Bye bye." in captured