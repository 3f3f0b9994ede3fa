"""Console desktop: boots the simulated machine and launches programs on it."""

from __future__ import annotations

import errno
import getpass
import logging
import os
import subprocess
import sys
from dataclasses import dataclass
from typing import Callable, Sequence

from ossim.apps import app_names
from ossim.clockface import calendar_text, clock_text
from ossim.monitor import resource_lines
from ossim.scheduler import OperatingSystem, PermissionDenied
from ossim.textnum import atoi

USAGE = "Usage: ossim <RAM_MB> <HDD_MB> <CPU_CORES>"


def parse_args(argv: Sequence[str]) -> tuple[int, int, int]:
    """Return RAM, disk and core counts from exactly three arguments."""
    if len(argv) != 3:
        raise ValueError(USAGE)
    ram, hdd, cores = (atoi(arg) for arg in argv)
    return ram, hdd, cores


def app_command(name: str) -> list[str]:
    """Return the command line that runs the program behind an executable path."""
    program = os.path.basename(os.fspath(name))
    if program not in app_names():
        raise ValueError(f"unknown program: {name!r}")
    return [sys.executable, "-m", "ossim.apps", program]


class _Launcher:
    """Starts programs and keeps their handles so only the watcher reaps them."""

    def __init__(self) -> None:
        self._children: dict[int, subprocess.Popen[bytes]] = {}

    def __call__(self, exec_path: str) -> int:
        try:
            command = app_command(exec_path)
        except ValueError as exc:
            raise FileNotFoundError(errno.ENOENT, str(exc), exec_path) from exc
        child = subprocess.Popen(command)
        self._children[child.pid] = child
        return child.pid


@dataclass(frozen=True)
class _Program:
    task_name: str
    exec_path: str
    ram: int
    hdd: int
    cpu: float = 1.0


@dataclass(frozen=True)
class _Entry:
    label: str
    action: Callable[[OperatingSystem], None]


def _read(prompt: str = "") -> str | None:
    try:
        return input(prompt)
    except EOFError:
        print()
        return None


def _ask_password() -> str | None:
    prompt = "Enter kernel password: "
    if sys.stdin.isatty():
        try:
            return getpass.getpass(prompt)
        except EOFError:
            return None
    return _read(prompt)


def _open(program: _Program) -> Callable[[OperatingSystem], None]:
    def run(system: OperatingSystem) -> None:
        try:
            task = system.create_process(
                program.task_name,
                program.exec_path,
                program.ram,
                program.hdd,
                program.cpu,
            )
        except OSError as exc:
            print(f"Failed to launch task: {exc}")
            return
        if task.is_running:
            print(f"Started {task.name} (PID {task.id})")
        elif task.is_queued:
            print(f"Insufficient resources for {task.name}. Added to ready queue.")
        else:
            print(f"Ready queue is full; {task.name} was not started.")

    return run


def _show_monitor(system: OperatingSystem) -> None:
    for line in resource_lines(system):
        print(line)


def _terminate_all(system: OperatingSystem) -> None:
    try:
        killed = system.terminate_all_tasks()
    except PermissionDenied as exc:
        print(exc)
        return
    print(f"Terminated {len(killed)} task(s).")


_CALCULATOR = _Program("Calculator", "./calculator", 1000, 500)
_DECRYPTION = _Program("Decryption", "./decrypt", 500, 2000)

_USER_MENU: tuple[_Entry, ...] = (
    _Entry("Open Calculator", _open(_CALCULATOR)),
    _Entry("Open Notepad", _open(_Program("Notepad", "./notepad", 1000, 500))),
    _Entry("Resource Monitor", _show_monitor),
    _Entry("Create New File", _open(_Program("File Creator", "./file_creator", 500, 1000))),
    _Entry("Delete File", _open(_Program("File Deletion", "./delete_file", 500, 2000))),
    _Entry("Move File", _open(_Program("File Mover", "./move_file", 500, 2000))),
    _Entry(
        "Number Guessing Game",
        _open(_Program("Number Guessing Game", "./num_guess", 500, 1000)),
    ),
    _Entry("Age Calculator", _open(_Program("Age Calculator", "./age_calculator", 500, 1000))),
    _Entry("Copy File", _open(_Program("Copy Files", "./copy_file", 500, 1000))),
    _Entry("Tic Tac Toe Game", _open(_Program("Tic Tac", "./tic_tac", 500, 2000))),
    _Entry("Password Encryption", _open(_Program("Encryption", "./encrypt", 500, 2000))),
    _Entry("Password Decryption", _open(_DECRYPTION)),
    _Entry(
        "Factorial Calculator",
        _open(_Program("Factorial Calculator", "./factorial", 500, 1000)),
    ),
    _Entry("Fibonacci Game", _open(_Program("Fibonacci Game", "./fibonacci", 500, 1000))),
)

_KERNEL_MENU: tuple[_Entry, ...] = (
    _Entry("Resource Monitor", _show_monitor),
    _Entry("Open Calculator", _open(_CALCULATOR)),
    _Entry("Password Decryption", _open(_DECRYPTION)),
    _Entry("Terminate All Tasks", _terminate_all),
)


def _run_menu(system: OperatingSystem, prefix: str, entries: Sequence[_Entry]) -> None:
    print(
        f"{prefix}RAM: {system.total_ram} MB | HDD: {system.total_hdd} MB"
        f" | Cores: {system.cpu_cores}"
    )
    print(calendar_text(), end="")
    while True:
        print(clock_text())
        for number, entry in enumerate(entries, 1):
            print(f"  {number}) {entry.label}")
        print("  q) Quit")
        choice = _read("> ")
        if choice is None:
            return
        choice = choice.strip().lower()
        if choice == "q":
            return
        if choice.isdigit() and 1 <= int(choice) <= len(entries):
            entries[int(choice) - 1].action(system)
        else:
            print(f"Please choose 1-{len(entries)} or q.")


def _select_mode(system: OperatingSystem) -> None:
    while True:
        print("Select system mode:")
        print("  1) User Mode")
        print("  2) Kernel Mode")
        print("  q) Quit")
        choice = _read("> ")
        if choice is None:
            return
        choice = choice.strip().lower()
        if choice == "q":
            return
        if choice == "1":
            _run_menu(system, "", _USER_MENU)
            return
        if choice == "2":
            entered = _ask_password()
            if entered is None:
                return
            try:
                system.enter_kernel_mode(entered)
            except PermissionDenied as exc:
                print(exc)
                continue
            _run_menu(system, "KERNEL MODE | ", _KERNEL_MENU)
            return
        print("Please choose 1, 2 or q.")


def main(argv: Sequence[str] | None = None) -> int:
    """Boot the simulator with the given resources and run its desktop."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        ram, hdd, cores = parse_args(args)
    except ValueError as exc:
        print(exc)
        return 1
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    print(f"Booting OS with RAM: {ram} MB, HDD: {hdd} MB, Cores: {cores}")
    with OperatingSystem(ram, hdd, cores, launcher=_Launcher()) as system:
        system.start_watcher()
        _select_mode(system)
    return 0


if __name__ == "__main__":
    sys.exit(main())