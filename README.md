# ossim

`ossim` simulates a small operating system for teaching. You boot it with a
fixed amount of RAM, disk space and CPU cores. From a console desktop you
then start applications. Each one runs as a real child process and is
charged against those resources.

An application that does not fit in what is left is not started. It goes
to a multilevel ready queue instead. There are three queues, served in
this order:

- system
- interactive (Calculator and Notepad)
- batch (everything else)

When a child process exits, a background watcher reaps it and reclaims its
resources. The queues are then checked again, and queued tasks that now fit
are launched.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Booting the simulator

```
ossim <RAM_MB> <HDD_MB> <CPU_CORES>
```

Exactly three arguments are required. Otherwise a usage line is printed and
the exit status is 1. For example, this boots a machine with 4000 MB of
RAM, 10000 MB of disk and 2 cores:

```
ossim 4000 10000 2
```

First you choose between user mode and kernel mode.

**User mode** shows a numbered menu with these entries:

- Calculator
- Notepad
- Resource Monitor, which prints free RAM, disk and cores
- file creation, deletion, moving and copying
- Number Guessing Game
- Age Calculator
- Tic Tac Toe
- password encryption and decryption
- Factorial Calculator
- Fibonacci Game

**Kernel mode** asks for the kernel password, which is `password`. Its menu
has these entries:

- Resource Monitor
- Calculator
- Password Decryption
- Terminate All Tasks

Each launch reserves fixed amounts of resources:

- Calculator and Notepad: 1000 MB RAM and 500 MB disk.
- All other programs: 500 MB RAM, with 1000 or 2000 MB of disk.
- Every program: one core.

A launched program runs as `python -m ossim.apps <name>` and shares the
desktop's terminal.

## Running a single application

```
ossim-app <name>
```

`<name>` is one of:

- `age_calculator`
- `beep`
- `calculator`
- `calendar`
- `clock`
- `copy_file`
- `decrypt`
- `delete_file`
- `encrypt`
- `factorial`
- `fibonacci`
- `file_creator`
- `move_file`
- `notepad`
- `num_guess`
- `tic_tac`

Each application reads lines from standard input until the input ends.
Some take particular input:

- **calculator**: reads keys: digits, `+`, `-`, `=` and `C`.
- **num_guess**: takes `h` (higher), `l` (lower), `c` (correct), `n` (new game) or `q` (quit).
- **tic_tac**: takes squares `1` to `9`, or `r` to reset.
- **clock**: prints the time every second until interrupted.
- **notepad**: saves each line to `notes.txt` in the current directory.

## Using the library

### `ossim.scheduler`

`OperatingSystem(total_ram, total_hdd, cpu_cores, kernel_password=..., launcher=None, killer=None)`
tracks resource use, the task table (at most 10 tasks) and the ready queues.

- `create_process(name, exec_path, ram_required, hdd_required, cpu_usage)`
  launches a task and returns it as a `Task`. If resources are short or the
  table is full, it queues the task instead. If that queue is full too, the
  returned task is neither running nor queued.
- `add_to_ready_queue(task, exec_path)` queues a task by its kind. It
  returns `False` when that queue already holds 10 tasks.
- `check_ready_queue()` launches queued tasks that now fit and returns them.
- `terminate_task(pid)` reclaims a finished process's resources. It returns
  `False` for an unknown pid.
- `enter_kernel_mode(password)` switches to kernel mode. A wrong password
  raises `PermissionDenied`.
- `terminate_all_tasks()` sends SIGTERM to every running task, clears the
  table and returns the pids. Outside kernel mode it raises
  `PermissionDenied`.
- `reap_children()` collects exited child processes.
- `start_watcher(interval=0.1)` reaps exited children in a background
  thread. The thread stops when the `with` block around the
  `OperatingSystem` ends.

The module also provides:

- `classify(name)`, which returns a task's `QueueType` and priority.
- The enums `QueueType` and `SystemMode`.

### `ossim.monitor`

`resource_lines(system)` returns the free RAM, disk and CPU lines shown by
the resource monitor.

### Application logic

- `ossim.textnum`: `atoi` and `atof`, lenient prefix parsing.
- `ossim.age`: `is_valid_birth_date`, `calculate_age` and `age_message`.
- `ossim.cipher`: `encrypt` and `decrypt`. Encryption reverses the text and
  shifts each character by four code points.
- `ossim.factorial`: `factorial_message`, for 0 to 20.
- `ossim.fibonacci`: `fibonacci_series` and `fibonacci_message`, for limits
  from 0 to 1000.
- `ossim.calculator`: `Calculator`, with add and subtract.
- `ossim.clockface`: `clock_text` and `calendar_text`. The calendar is the
  fixed month May 2025.
- `ossim.guessing`: `GuessingGame`, which guesses a number from 1 to 30.
- `ossim.tictactoe`: `TicTacToe` and `check_winner`.
- `ossim.fileops`: the file operations, which raise `FileOperationError` on
  failure:
  - `copy_file`
  - `delete_file`
  - `move_file`
  - `create_file`
  - `save_note`

## What it does not do

- There is no graphical interface. The desktop, its menus and every
  application are text-based and work in a terminal.
- There is no task manager view that lists running processes.
- CPU time is not shared out or scheduled. Each task simply holds one core
  until it exits.