import io
import time

import pytest

from ossim import apps
from ossim.cipher import encrypt
from ossim.clockface import calendar_text
from ossim.factorial import factorial_message
from ossim.fibonacci import fibonacci_message


def feed(monkeypatch, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))


def test_app_names_sorted_and_complete():
    names = apps.app_names()
    assert list(names) == sorted(names)
    for name in ("calculator", "tic_tac", "num_guess", "age_calculator", "beep"):
        assert name in names


def test_run_unknown_app_raises():
    with pytest.raises(ValueError):
        apps.run_app("no_such_program")


def test_main_rejects_unknown_name():
    with pytest.raises(SystemExit):
        apps.main(["no_such_program"])


def test_calculator_adds(monkeypatch, capsys):
    feed(monkeypatch, "12+3=\n")
    assert apps.run_app("calculator") == 0
    out = capsys.readouterr().out
    assert "Calculator running" in out
    assert "15.00" in out
    assert out.rstrip().endswith("Calculator exiting")


def test_calculator_via_main(monkeypatch, capsys):
    feed(monkeypatch, "")
    assert apps.main(["calculator"]) == 0
    assert "Calculator exiting" in capsys.readouterr().out


def test_age_invalid_date(monkeypatch, capsys):
    feed(monkeypatch, "1\n13\n2000\n")
    apps.run_app("age_calculator")
    assert "Invalid date entered!" in capsys.readouterr().out


def test_encrypt_prints_cipher_text(monkeypatch, capsys):
    feed(monkeypatch, "abc\n")
    apps.run_app("encrypt")
    assert encrypt("abc") in capsys.readouterr().out.splitlines()


def test_decrypt_round_trip(monkeypatch, capsys):
    feed(monkeypatch, encrypt("hello") + "\n")
    apps.run_app("decrypt")
    assert "hello" in capsys.readouterr().out.splitlines()


def test_factorial_and_fibonacci(monkeypatch, capsys):
    feed(monkeypatch, "5\n")
    apps.run_app("factorial")
    assert factorial_message("5") in capsys.readouterr().out
    feed(monkeypatch, "100\n")
    apps.run_app("fibonacci")
    assert fibonacci_message("100") in capsys.readouterr().out


def test_tic_tac_x_wins(monkeypatch, capsys):
    feed(monkeypatch, "1\n4\n2\n5\n3\n")
    apps.run_app("tic_tac")
    assert "X wins!" in capsys.readouterr().out


def test_tic_tac_tie(monkeypatch, capsys):
    feed(monkeypatch, "1\n2\n3\n5\n4\n6\n8\n7\n9\n")
    apps.run_app("tic_tac")
    out = capsys.readouterr().out
    assert "It's a tie!" in out
    assert "wins!" not in out


def test_tic_tac_taken_square(monkeypatch, capsys):
    feed(monkeypatch, "1\n1\n")
    apps.run_app("tic_tac")
    assert "That square cannot be played." in capsys.readouterr().out


def test_guessing_correct_first(monkeypatch, capsys):
    feed(monkeypatch, "c\nh\n")
    apps.run_app("num_guess")
    out = capsys.readouterr().out
    assert "Is your number between 15 and 30?" in out
    assert "I guessed it! Your number is 15." in out
    assert "Press n for a new game." in out


def test_beep_sleeps_and_rings(monkeypatch, capsys):
    delays = []
    monkeypatch.setattr(time, "sleep", delays.append)
    assert apps.run_app("beep") == 0
    out = capsys.readouterr().out
    assert "Playing beep for 5 seconds..." in out
    assert "\a" in out
    assert delays == [apps.BEEP_DELAY, apps.BEEP_DURATION]


def test_clock_stops_on_interrupt(monkeypatch, capsys):
    def stop(_):
        raise KeyboardInterrupt

    monkeypatch.setattr(time, "sleep", stop)
    assert apps.run_app("clock") == 0
    assert "Time: " in capsys.readouterr().out


def test_calendar(capsys):
    apps.run_app("calendar")
    assert calendar_text() in capsys.readouterr().out


def test_copy_file(monkeypatch, capsys, tmp_path):
    src = tmp_path / "a.bin"
    dst = tmp_path / "b.bin"
    src.write_bytes(b"\x00\x01data")
    feed(monkeypatch, f"{src}\n{dst}\n")
    apps.run_app("copy_file")
    assert dst.read_bytes() == src.read_bytes()
    assert "File copied successfully!" in capsys.readouterr().out


def test_copy_missing_source(monkeypatch, capsys, tmp_path):
    feed(monkeypatch, f"{tmp_path / 'missing'}\n{tmp_path / 'out'}\n")
    apps.run_app("copy_file")
    assert "Error: Cannot open source file" in capsys.readouterr().out


def test_delete_file(monkeypatch, capsys, tmp_path):
    target = tmp_path / "gone.txt"
    target.write_text("x")
    feed(monkeypatch, f"{target}\n")
    apps.run_app("delete_file")
    assert not target.exists()
    assert f"Deleted file: {target}" in capsys.readouterr().out


def test_move_file(monkeypatch, capsys, tmp_path):
    src = tmp_path / "from.txt"
    dst = tmp_path / "to.txt"
    src.write_text("content")
    feed(monkeypatch, f"{src}\n{dst}\n")
    apps.run_app("move_file")
    assert not src.exists()
    assert dst.read_text() == "content"
    assert f"Moved '{src}' to '{dst}'" in capsys.readouterr().out


def test_file_creator(monkeypatch, capsys, tmp_path):
    target = tmp_path / "new.txt"
    feed(monkeypatch, f"{target}\n")
    apps.run_app("file_creator")
    assert target.exists()
    assert f"File created successfully: {target}" in capsys.readouterr().out


def test_notepad_saves(monkeypatch, capsys, tmp_path):
    monkeypatch.chdir(tmp_path)
    feed(monkeypatch, "remember the milk\n")
    apps.run_app("notepad")
    assert (tmp_path / "notes.txt").read_text() == "remember the milk"
    assert "Text saved to file." in capsys.readouterr().out